# This file makes the 'cefr_analyzer' directory a Python package.

from cefr_analyzer.aggregator import AnalysisResult, WordWithPos
from cefr_analyzer.analyzer import (
    AnalyzerOptions,
    CEFRTextAnalyzer,
    analyze,
    get_analyzer,
    get_level_distribution,
    get_words_at_level,
)
from cefr_analyzer.formatting import (
    format_analysis_result,
    format_complexity_score,
    generate_simple_visualization,
)
from cefr_analyzer.levels import CEFR_LEVELS, PARTS_OF_SPEECH
from cefr_analyzer.scoring import (
    ComplexityScoreResult,
    calculate_complexity_score,
    get_complexity_level,
)
from cefr_analyzer.tokenizer import RegexTokenizer, SpacyTokenizer, Token
from cefr_analyzer.vocabulary import (
    VocabularyEntry,
    VocabularyIndex,
    get_vocabulary,
    reset_vocabulary,
)

__all__ = [
    'AnalysisResult',
    'WordWithPos',
    'AnalyzerOptions',
    'CEFRTextAnalyzer',
    'analyze',
    'get_analyzer',
    'get_level_distribution',
    'get_words_at_level',
    'format_analysis_result',
    'format_complexity_score',
    'generate_simple_visualization',
    'CEFR_LEVELS',
    'PARTS_OF_SPEECH',
    'ComplexityScoreResult',
    'calculate_complexity_score',
    'get_complexity_level',
    'RegexTokenizer',
    'SpacyTokenizer',
    'Token',
    'VocabularyEntry',
    'VocabularyIndex',
    'get_vocabulary',
    'reset_vocabulary',
]
