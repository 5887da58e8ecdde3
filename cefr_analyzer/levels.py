"""
CEFR levels and the part-of-speech categories used by the vocabulary.
"""
from typing import Tuple

# Ordered easiest to hardest
CEFR_LEVELS: Tuple[str, ...] = ('a1', 'a2', 'b1', 'b2', 'c1', 'c2')

PARTS_OF_SPEECH: Tuple[str, ...] = (
    'noun',
    'verb',
    'adjective',
    'adverb',
    'determiner',
    'pronoun',
    'preposition',
    'conjunction',
    'interjection',
)

LEVEL_RANK = {level: rank for rank, level in enumerate(CEFR_LEVELS)}


def normalize_level(level: str) -> str:
    """
    Normalize a level label such as 'B2' to its canonical form 'b2'.

    Raises:
        ValueError: If the label is not a CEFR level.
    """
    if not isinstance(level, str) or level.strip().lower() not in LEVEL_RANK:
        raise ValueError(f"Unknown CEFR level: {level!r}. Expected one of {', '.join(CEFR_LEVELS)}.")
    return level.strip().lower()


def empty_level_map(value=0):
    """Build a mapping with one entry per level, in level order."""
    return {level: value for level in CEFR_LEVELS}
