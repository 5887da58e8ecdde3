"""
Token classification: assigns a CEFR level to each distinct word of a token
stream.

For every token:
1. Drop non-words, stop words and blanks
2. Normalize case and build the dedup key (word, or word + part of speech)
3. Look the word up in the vocabulary
4. If that fails, retry with the token's lemma ("reading" -> "read")
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Set

from .tokenizer import Token
from .vocabulary import VocabularyIndex

logger = logging.getLogger(__name__)

# Penn Treebank tag -> vocabulary part of speech
POS_MAPPING = {
    'NN': 'noun',
    'NNS': 'noun',
    'NNP': 'noun',
    'NNPS': 'noun',
    'VB': 'verb',
    'VBD': 'verb',
    'VBG': 'verb',
    'VBN': 'verb',
    'VBP': 'verb',
    'VBZ': 'verb',
    'JJ': 'adjective',
    'JJR': 'adjective',
    'JJS': 'adjective',
    'RB': 'adverb',
    'RBR': 'adverb',
    'RBS': 'adverb',
    'DT': 'determiner',
    'PRP': 'pronoun',
    'PRP$': 'pronoun',
    'WP': 'pronoun',
    'WP$': 'pronoun',
    'IN': 'preposition',
    'CC': 'conjunction',
    'UH': 'interjection',
}


def map_part_of_speech(tag: str) -> Optional[str]:
    """Vocabulary part of speech for a tagger tag, or None if uncategorized."""
    return POS_MAPPING.get(tag)


@dataclass(frozen=True)
class ClassifiedWord:
    original: str
    normalized: str
    key: str
    lemma: Optional[str]
    cefr_level: Optional[str]
    part_of_speech: str            # tagger tag as delivered
    mapped_pos: Optional[str] = None
    via_lemma: bool = False

    @property
    def recognized(self) -> bool:
        return self.cefr_level is not None


class TokenClassifier:
    """
    Classifies a token stream against a vocabulary index.

    Holds no per-call state: every classify() call starts with a fresh
    dedup set.
    """

    def __init__(self, vocabulary: VocabularyIndex):
        self.vocabulary = vocabulary

    def classify(
        self,
        tokens: Iterable[Token],
        case_sensitive: bool = False,
        analyze_by_part_of_speech: bool = False,
    ) -> Iterator[ClassifiedWord]:
        """
        Yield one ClassifiedWord per distinct dedup key, in order of first
        appearance.

        Args:
            tokens: Token stream from a tokenizer
            case_sensitive: Keep surface case when building dedup keys
            analyze_by_part_of_speech: Key words by part of speech and match
                                       the vocabulary entry for that part
                                       of speech only
        """
        seen: Set[str] = set()

        for token in tokens:
            word = token.text
            if not token.is_word or token.is_stop or not word or not word.strip():
                continue

            normalized = word if case_sensitive else word.lower()
            mapped_pos = map_part_of_speech(token.tag)

            if analyze_by_part_of_speech:
                key = f"{normalized}-{mapped_pos or token.tag}"
            else:
                key = normalized

            if key in seen:
                logger.debug(f"Skipping repeated word '{key}'")
                continue
            seen.add(key)

            lookup_pos = mapped_pos if analyze_by_part_of_speech else None
            # An untranslatable tag cannot match a part-of-speech entry
            unmatchable = analyze_by_part_of_speech and mapped_pos is None
            level = None if unmatchable else self.vocabulary.get_cefr_level(normalized, lookup_pos)

            via_lemma = False
            if level is None and not unmatchable and token.lemma is not None:
                lemma = token.lemma if case_sensitive else token.lemma.lower()
                if lemma and lemma != normalized:
                    level = self.vocabulary.get_cefr_level(lemma, lookup_pos)
                    via_lemma = level is not None
                    if via_lemma:
                        logger.debug(f"Resolved '{normalized}' via lemma '{lemma}' -> {level}")

            yield ClassifiedWord(
                original=word,
                normalized=normalized,
                key=key,
                lemma=token.lemma,
                cefr_level=level,
                part_of_speech=token.tag,
                mapped_pos=mapped_pos,
                via_lemma=via_lemma,
            )
