"""
Text complexity score derived from the CEFR level distribution.

The base score is the percentage-weighted average of per-level difficulty
weights. Weights grow faster than the level index, so a few C-level words
move the score more than many A-level words. Texts under 100 words are
penalized linearly and longer texts get a logarithmic bonus capped at 1.0.
Texts under 30 words keep their base score and carry a reliability note.
"""
import math
from dataclasses import dataclass
from typing import Optional

from .aggregator import AnalysisResult
from .levels import CEFR_LEVELS

LEVEL_WEIGHTS = {
    'a1': 1.0,
    'a2': 2.0,
    'b1': 3.5,
    'b2': 5.0,
    'c1': 7.0,
    'c2': 9.5,
}

# Upper bounds (exclusive) of each band; anything above the last is c2
LEVEL_THRESHOLDS = (
    (1.5, 'a1'),
    (2.5, 'a2'),
    (3.5, 'b1'),
    (4.5, 'b2'),
    (5.5, 'c1'),
)

MIN_RELIABLE_WORDS = 30
SHORT_TEXT_WORDS = 100
SHORT_TEXT_MAX_PENALTY = 0.5
LONG_TEXT_MAX_BONUS = 1.0

TOO_SHORT_NOTE = "Too short to evaluate CEFR level reliably."


@dataclass(frozen=True)
class ComplexityScoreResult:
    score: float
    level: str
    note: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"score": self.score, "level": self.level}
        if self.note:
            data["note"] = self.note
        return data


def get_complexity_level(score: float) -> str:
    """Map a complexity score onto a CEFR band (half-open intervals)."""
    for upper, level in LEVEL_THRESHOLDS:
        if score < upper:
            return level
    return 'c2'


def base_score(result: AnalysisResult) -> float:
    return sum(result.level_percentages.get(level, 0) * LEVEL_WEIGHTS[level] for level in CEFR_LEVELS) / 100


def short_text_penalty(total_words: int) -> float:
    if total_words >= SHORT_TEXT_WORDS:
        return 0.0
    return (SHORT_TEXT_WORDS - total_words) / SHORT_TEXT_WORDS * SHORT_TEXT_MAX_PENALTY


def long_text_bonus(total_words: int) -> float:
    # ln(1) == 0, so texts up to 100 words get nothing
    return min(LONG_TEXT_MAX_BONUS, math.log(max(1, total_words - SHORT_TEXT_WORDS)) / 10)


def calculate_complexity_score(result: AnalysisResult) -> ComplexityScoreResult:
    """
    Score the vocabulary difficulty of an analyzed text.

    Args:
        result: Output of CEFRTextAnalyzer.analyze()

    Returns:
        ComplexityScoreResult with the score rounded to two decimals, its
        CEFR band, and a note when the text is too short to be reliable
    """
    score = base_score(result)

    if result.total_words < MIN_RELIABLE_WORDS:
        return ComplexityScoreResult(score=score, level=get_complexity_level(score), note=TOO_SHORT_NOTE)

    adjusted = score + long_text_bonus(result.total_words) - short_text_penalty(result.total_words)
    adjusted = round(max(0.0, adjusted), 2)
    return ComplexityScoreResult(score=adjusted, level=get_complexity_level(adjusted))
