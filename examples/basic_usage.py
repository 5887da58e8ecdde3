#!/usr/bin/env python3
"""
Basic CEFR Analyzer Examples

This script analyzes a short English passage and prints the level report,
the distribution chart, the complexity score and example words per level.
"""
import sys
from pathlib import Path

# Add parent directory to path to import cefr_analyzer
sys.path.insert(0, str(Path(__file__).parent.parent))

from cefr_analyzer import (
    CEFR_LEVELS,
    CEFRTextAnalyzer,
    RegexTokenizer,
    calculate_complexity_score,
    format_analysis_result,
    format_complexity_score,
    generate_simple_visualization,
)

SAMPLE_TEXT = """
The ability to analyze English text and determine the CEFR levels of vocabulary
is a sophisticated tool for language learners. This computer program can help
students understand the complexity of the texts they are reading and identify
words they need to learn to progress to higher levels. The paradigm of language
learning has evolved significantly with technology.
"""


def analyze_text_example(analyzer, text):
    """Print the full report for one text."""
    print("Input text:")
    print("-" * 60)
    print(text.strip())
    print("-" * 60 + "\n")

    result = analyzer.analyze(text)

    print(format_analysis_result(result))
    print(generate_simple_visualization(result))
    print(format_complexity_score(calculate_complexity_score(result)))

    print("\nExample words per level:")
    for level in CEFR_LEVELS:
        words = [w.word for w in result.words_at_level[level]]
        more = "..." if len(words) > 5 else ""
        print(f"  {level.upper()}: {', '.join(words[:5])}{more}")


def main():
    # Pass --regex to run without a spaCy model installed
    if "--regex" in sys.argv:
        analyzer = CEFRTextAnalyzer(tokenizer=RegexTokenizer())
    else:
        analyzer = CEFRTextAnalyzer()

    analyze_text_example(analyzer, SAMPLE_TEXT)


if __name__ == '__main__':
    main()
