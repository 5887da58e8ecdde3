"""
Plain-text presentation of analysis results.
"""
import math

from .aggregator import AnalysisResult
from .levels import CEFR_LEVELS
from .scoring import ComplexityScoreResult

BAR_CHAR = '█'


def _share(part: int, total: int) -> float:
    return (part / total) * 100 if total > 0 else 0.0


def format_analysis_result(result: AnalysisResult) -> str:
    """Markdown summary with the per-level table."""
    total = result.total_words
    recognized = result.recognized_words

    lines = [
        "## CEFR Vocabulary Analysis",
        "",
        f"Total words: {total}",
        f"Recognized words: {recognized} ({_share(recognized, total):.2f}%)",
        f"Unknown words: {result.unknown_words} ({_share(result.unknown_words, total):.2f}%)",
        "",
        "### Words per CEFR level",
        "",
        "| Level | Words | Percentage |",
        "|-------|-------|------------|",
    ]
    for level in CEFR_LEVELS:
        lines.append(
            f"| {level.upper()} | {result.level_counts[level]} | {result.level_percentages[level]:.2f}% |"
        )
    return "\n".join(lines) + "\n"


def generate_simple_visualization(result: AnalysisResult) -> str:
    """ASCII bar chart, one block per full 2 percentage points."""
    lines = ["### CEFR level distribution", ""]
    for level in CEFR_LEVELS:
        percentage = result.level_percentages[level]
        bar = BAR_CHAR * int(math.floor(percentage / 2))
        lines.append(f"{level.upper()}: {bar} {percentage:.2f}%")
    return "\n".join(lines) + "\n"


def format_complexity_score(score: ComplexityScoreResult) -> str:
    text = f"Complexity score: {score.score:.2f} ({score.level.upper()})"
    if score.note:
        text += f"\nNote: {score.note}"
    return text
