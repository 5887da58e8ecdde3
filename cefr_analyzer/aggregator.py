"""
Folds classified words into per-level counts, word lists and percentages.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .classifier import ClassifiedWord
from .levels import CEFR_LEVELS, empty_level_map


@dataclass(frozen=True)
class WordWithPos:
    word: str
    pos: str
    lemma: Optional[str] = None

    def to_dict(self) -> dict:
        return {"word": self.word, "pos": self.pos, "lemma": self.lemma}


@dataclass(frozen=True)
class AnalysisResult:
    total_words: int
    level_counts: Dict[str, int]
    level_percentages: Dict[str, float]
    unknown_words: int
    unknown_words_list: List[str] = field(default_factory=list)
    words_at_level: Dict[str, List[WordWithPos]] = field(
        default_factory=lambda: {level: [] for level in CEFR_LEVELS}
    )

    @property
    def recognized_words(self) -> int:
        return self.total_words - self.unknown_words

    def to_dict(self) -> dict:
        return {
            "totalWords": self.total_words,
            "levelCounts": dict(self.level_counts),
            "levelPercentages": dict(self.level_percentages),
            "unknownWords": self.unknown_words,
            "unknownWordsList": list(self.unknown_words_list),
            "wordsAtLevel": {
                level: [w.to_dict() for w in words]
                for level, words in self.words_at_level.items()
            },
        }


class LevelAggregator:
    """
    Accumulates classified words for a single analysis.

    Args:
        include_unknown_words: Materialize the list of unrecognized words.
                               Unrecognized words are counted either way.
    """

    def __init__(self, include_unknown_words: bool = True):
        self.include_unknown_words = include_unknown_words
        self.total_words = 0
        self.unknown_words = 0
        self.level_counts = empty_level_map(0)
        self.words_at_level = {level: [] for level in CEFR_LEVELS}
        # dict as an insertion-ordered set
        self._unknown: Dict[str, None] = {}

    def add(self, word: ClassifiedWord):
        self.total_words += 1

        if word.cefr_level is not None:
            self.level_counts[word.cefr_level] += 1
            self.words_at_level[word.cefr_level].append(
                WordWithPos(word=word.normalized, pos=word.part_of_speech, lemma=word.lemma)
            )
            return

        self.unknown_words += 1
        if self.include_unknown_words:
            self._unknown.setdefault(word.normalized, None)

    def add_all(self, words: Iterable[ClassifiedWord]) -> "LevelAggregator":
        for word in words:
            self.add(word)
        return self

    def percentages(self) -> Dict[str, float]:
        """Share of each level in the total, 0 for every level when there are no words."""
        total = self.total_words
        return {
            level: (count / total) * 100 if total > 0 else 0.0
            for level, count in self.level_counts.items()
        }

    def result(self) -> AnalysisResult:
        return AnalysisResult(
            total_words=self.total_words,
            level_counts=dict(self.level_counts),
            level_percentages=self.percentages(),
            unknown_words=self.unknown_words,
            unknown_words_list=list(self._unknown),
            words_at_level={level: list(words) for level, words in self.words_at_level.items()},
        )
