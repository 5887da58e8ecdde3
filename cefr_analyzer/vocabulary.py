"""
CEFR vocabulary index.

Maps lowercased words to the dictionary entries (level + part of speech)
loaded from a static word list. The list is read once per process and is
treated as read-only afterwards.
"""

import json
import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .levels import LEVEL_RANK, PARTS_OF_SPEECH

logger = logging.getLogger(__name__)

# Default paths
BUNDLED_VOCABULARY_PATH = Path(__file__).parent / "data" / "vocabulary.json"
VOCABULARY_ENV_VAR = "CEFR_ANALYZER_VOCABULARY"

# Singleton instance
_vocabulary_instance: Optional["VocabularyIndex"] = None
_vocabulary_lock = threading.Lock()


@dataclass(frozen=True)
class VocabularyEntry:
    word: str
    cefr: str   # "a1" .. "c2"
    pos: str    # one of PARTS_OF_SPEECH


def default_vocabulary_path() -> Path:
    """Vocabulary file to load when none is given explicitly."""
    override = os.environ.get(VOCABULARY_ENV_VAR)
    if override:
        return Path(override)
    return BUNDLED_VOCABULARY_PATH


def parse_entry(row, index: int) -> VocabularyEntry:
    """
    Validate one raw dictionary row.

    Args:
        row: Mapping with 'word', 'cefr' and 'pos' keys
        index: Position of the row in the source (for error messages)

    Returns:
        VocabularyEntry with the level lowercased

    Raises:
        ValueError: If the row is malformed
    """
    if not isinstance(row, dict):
        raise ValueError(f"Vocabulary row {index} is not an object: {row!r}")

    missing = [key for key in ('word', 'cefr', 'pos') if key not in row]
    if missing:
        raise ValueError(f"Vocabulary row {index} is missing {', '.join(missing)}: {row!r}")

    word = row['word']
    if not isinstance(word, str) or not word.strip():
        raise ValueError(f"Vocabulary row {index} has an empty word: {row!r}")

    level = str(row['cefr']).strip().lower()
    if level not in LEVEL_RANK:
        raise ValueError(f"Vocabulary row {index} has unknown level {row['cefr']!r}")

    pos = str(row['pos']).strip().lower()
    if pos not in PARTS_OF_SPEECH:
        raise ValueError(f"Vocabulary row {index} has unknown part of speech {row['pos']!r}")

    return VocabularyEntry(word=word.strip(), cefr=level, pos=pos)


def load_vocabulary_rows(path: Path) -> list:
    """
    Read raw dictionary rows from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a JSON list
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(
            f"Vocabulary file not found at {path}. "
            f"Set {VOCABULARY_ENV_VAR} or pass --vocabulary to point at a word list."
        )

    with open(path, 'r', encoding='utf-8') as f:
        try:
            rows = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Vocabulary file {path} is not valid JSON: {e}") from e

    if not isinstance(rows, list):
        raise ValueError(f"Vocabulary file {path} must contain a JSON list of entries")
    return rows


class VocabularyIndex:
    """
    Word -> entries index over a CEFR word list.

    Usage:
        from cefr_analyzer.vocabulary import get_vocabulary

        vocabulary = get_vocabulary()
        vocabulary.get_cefr_level("book")          # lowest level of any sense
        vocabulary.get_cefr_level("book", "verb")  # level of the verb sense
    """

    def __init__(self, entries: Optional[Iterable] = None, path: Optional[Path] = None):
        """
        Args:
            entries: Raw rows ({'word', 'cefr', 'pos'}) to index. Takes
                     precedence over path.
            path: JSON word list to read on initialization. Defaults to the
                  bundled list (or the CEFR_ANALYZER_VOCABULARY override).
        """
        # Materialized so a failed initialize() can be retried on the same rows
        self._entries = list(entries) if entries is not None else None
        self._path = path
        self._index: Dict[str, List[VocabularyEntry]] = {}
        self._initialized = False
        self._init_lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def source(self) -> str:
        if self._entries is not None:
            return "<in-memory>"
        return str(self._path or default_vocabulary_path())

    def initialize(self):
        """
        Build the index from the source rows. Calling it again is a no-op.

        Raises:
            FileNotFoundError, ValueError: If the source data is malformed
        """
        if self._initialized:
            return

        with self._init_lock:
            if self._initialized:
                return

            if self._entries is not None:
                rows = list(self._entries)
            else:
                rows = load_vocabulary_rows(self._path or default_vocabulary_path())

            index: Dict[str, List[VocabularyEntry]] = {}
            for i, row in enumerate(rows):
                entry = parse_entry(row, i)
                index.setdefault(entry.word.lower(), []).append(entry)

            self._index = index
            self._initialized = True
            logger.info(f"Loaded vocabulary from {self.source}: {len(rows)} entries, {len(index)} words")

    def get_cefr_level(self, word: str, pos: Optional[str] = None) -> Optional[str]:
        """
        Look up the CEFR level of a word.

        Args:
            word: Word to look up (case-insensitive)
            pos: Part of speech to match exactly. When omitted, the easiest
                 level among all senses of the word is returned.

        Returns:
            Level such as 'a1', or None if not found
        """
        entries = self.get_word_info(word)
        if not entries:
            return None

        if pos:
            for entry in entries:
                if entry.pos == pos:
                    return entry.cefr
            return None

        return min((entry.cefr for entry in entries), key=LEVEL_RANK.__getitem__)

    def get_word_info(self, word: str) -> List[VocabularyEntry]:
        """All entries for a word, in source order. Empty list if unknown."""
        self.initialize()
        return list(self._index.get(word.lower(), []))

    def has_word(self, word: str) -> bool:
        self.initialize()
        return word.lower() in self._index

    def word_count(self) -> int:
        """Number of distinct words in the index."""
        self.initialize()
        return len(self._index)

    def entry_count(self) -> int:
        self.initialize()
        return sum(len(entries) for entries in self._index.values())

    def __len__(self) -> int:
        return self.word_count()

    def __contains__(self, word: str) -> bool:
        return self.has_word(word)


def get_vocabulary() -> VocabularyIndex:
    """
    Get singleton instance of the vocabulary index.

    The index is constructed and initialized once per process and reused
    by every analyzer that does not bring its own.

    Returns:
        Initialized VocabularyIndex
    """
    global _vocabulary_instance

    if _vocabulary_instance is None:
        with _vocabulary_lock:
            if _vocabulary_instance is None:
                index = VocabularyIndex()
                index.initialize()
                _vocabulary_instance = index

    return _vocabulary_instance


def set_vocabulary(index: VocabularyIndex) -> VocabularyIndex:
    """Replace the shared index (e.g. with a user-supplied word list)."""
    global _vocabulary_instance

    index.initialize()
    with _vocabulary_lock:
        _vocabulary_instance = index
    return index


def reset_vocabulary():
    """Reset singleton (mainly for testing)."""
    global _vocabulary_instance
    with _vocabulary_lock:
        _vocabulary_instance = None
