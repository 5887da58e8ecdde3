"""
CEFR text analyzer.

Counts the distinct words of an English text per CEFR level (A1-C2):

    text -> tokenizer -> TokenClassifier -> LevelAggregator -> AnalysisResult
"""

import logging
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Mapping, Optional, Union

from .aggregator import AnalysisResult, LevelAggregator, WordWithPos
from .classifier import TokenClassifier
from .levels import normalize_level
from .logging_config import log_with_context
from .tokenizer import SpacyTokenizer, Token
from .vocabulary import VocabularyIndex, get_vocabulary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalyzerOptions:
    case_sensitive: bool = False
    include_unknown_words: bool = True
    analyze_by_part_of_speech: bool = False

    @classmethod
    def coerce(cls, options=None, **overrides) -> "AnalyzerOptions":
        """
        Build options from None, an AnalyzerOptions, or a mapping.

        Mapping keys may be snake_case or the camelCase names
        (caseSensitive, includeUnknownWords, analyzeByPartOfSpeech).
        """
        if options is None:
            base = cls()
        elif isinstance(options, cls):
            base = options
        elif isinstance(options, Mapping):
            base = cls(**_option_fields(options))
        else:
            raise TypeError(f"Unsupported options type: {type(options).__name__}")

        if overrides:
            base = replace(base, **_option_fields(overrides))
        return base


_OPTION_ALIASES = {
    'caseSensitive': 'case_sensitive',
    'includeUnknownWords': 'include_unknown_words',
    'analyzeByPartOfSpeech': 'analyze_by_part_of_speech',
}


def _option_fields(values: Mapping) -> Dict[str, bool]:
    fields = {}
    for key, value in values.items():
        if not isinstance(value, bool):
            raise TypeError(f"Option {key!r} must be a bool, got {type(value).__name__}")
        fields[_OPTION_ALIASES.get(key, key)] = value
    return fields


OptionsLike = Union[AnalyzerOptions, Mapping, None]


class CEFRTextAnalyzer:
    """
    Analyzes English text against a CEFR vocabulary.

    Every call builds its own classifier state and result, so one analyzer
    can be shared freely.
    """

    def __init__(self, vocabulary: Optional[VocabularyIndex] = None, tokenizer=None):
        """
        Args:
            vocabulary: Vocabulary index (default: the shared singleton)
            tokenizer: Object with tokenize(text) -> tokens
                       (default: SpacyTokenizer)
        """
        self.vocabulary = vocabulary if vocabulary is not None else get_vocabulary()
        self.vocabulary.initialize()
        self.tokenizer = tokenizer if tokenizer is not None else SpacyTokenizer()
        self.classifier = TokenClassifier(self.vocabulary)

    def analyze(self, text: str, options: OptionsLike = None, **kwargs) -> AnalysisResult:
        """
        Analyze the CEFR level distribution of a text.

        Args:
            text: Text to analyze
            options: AnalyzerOptions or mapping; keyword arguments override it

        Returns:
            AnalysisResult with per-level counts, percentages and word lists

        Raises:
            TypeError: If text is not a string
        """
        if not isinstance(text, str):
            raise TypeError("Input must be a string.")

        options = AnalyzerOptions.coerce(options, **kwargs)
        if not text.strip():
            return self.analyze_tokens([], options)
        return self.analyze_tokens(self.tokenizer.tokenize(text), options)

    def analyze_tokens(self, tokens: Iterable[Token], options: OptionsLike = None, **kwargs) -> AnalysisResult:
        """Analyze an already tokenized text."""
        options = AnalyzerOptions.coerce(options, **kwargs)

        classified = self.classifier.classify(
            tokens,
            case_sensitive=options.case_sensitive,
            analyze_by_part_of_speech=options.analyze_by_part_of_speech,
        )
        result = LevelAggregator(options.include_unknown_words).add_all(classified).result()

        log_with_context(
            f"Analyzed {result.total_words} distinct words ({result.unknown_words} unknown)",
            context={"options": options, "level_counts": result.level_counts},
            logger=logger,
        )
        return result

    def get_words_at_level(self, text: str, level: str, options: OptionsLike = None, **kwargs) -> List[WordWithPos]:
        """
        Words of the text at one CEFR level, in order of first appearance.

        Raises:
            ValueError: If level is not a CEFR level
        """
        level = normalize_level(level)
        options = AnalyzerOptions.coerce(options, **kwargs)
        # The unknown word list is not needed here
        result = self.analyze(text, replace(options, include_unknown_words=False))
        return list(result.words_at_level[level])

    def get_level_distribution(self, text: str, options: OptionsLike = None, **kwargs) -> Dict[str, float]:
        """Percentage of the text's distinct words at each level."""
        return dict(self.analyze(text, options, **kwargs).level_percentages)


_default_analyzer: Optional[CEFRTextAnalyzer] = None


def get_analyzer() -> CEFRTextAnalyzer:
    """Shared analyzer using the bundled vocabulary and the spaCy tokenizer."""
    global _default_analyzer

    # Rebuilt when the shared vocabulary was replaced or reset
    vocabulary = get_vocabulary()
    if _default_analyzer is None or _default_analyzer.vocabulary is not vocabulary:
        _default_analyzer = CEFRTextAnalyzer(vocabulary=vocabulary)
    return _default_analyzer


def analyze(text: str, options: OptionsLike = None, **kwargs) -> AnalysisResult:
    return get_analyzer().analyze(text, options, **kwargs)


def get_words_at_level(text: str, level: str, options: OptionsLike = None, **kwargs) -> List[WordWithPos]:
    return get_analyzer().get_words_at_level(text, level, options, **kwargs)


def get_level_distribution(text: str, options: OptionsLike = None, **kwargs) -> Dict[str, float]:
    return get_analyzer().get_level_distribution(text, options, **kwargs)
