"""
Command-Line Interface for the CEFR analyzer.

Commands:
- analyze: Level report, distribution chart and complexity score
- words: Words of a text at one CEFR level
- distribution: Level percentages
- info: Vocabulary and tokenizer information
"""
import sys
import argparse
import json
import logging
from pathlib import Path

from cefr_analyzer.levels import CEFR_LEVELS


def read_text(args) -> str:
    """Text from the positional argument, --file, or stdin."""
    if args.text is not None:
        return args.text
    if args.file:
        with open(args.file, 'r', encoding='utf-8') as f:
            return f.read()
    if sys.stdin.isatty():
        print("Enter English text (Ctrl-D to finish):", file=sys.stderr)
    return sys.stdin.read()


def build_analyzer(args):
    """Analyzer configured from the common command-line options."""
    from cefr_analyzer.analyzer import CEFRTextAnalyzer
    from cefr_analyzer.tokenizer import make_tokenizer
    from cefr_analyzer.vocabulary import VocabularyIndex, get_vocabulary, set_vocabulary

    if args.vocabulary:
        vocabulary = set_vocabulary(VocabularyIndex(path=Path(args.vocabulary)))
    else:
        vocabulary = get_vocabulary()

    tokenizer = make_tokenizer(args.tokenizer, model_name=args.model)
    return CEFRTextAnalyzer(vocabulary=vocabulary, tokenizer=tokenizer)


def build_options(args):
    from cefr_analyzer.analyzer import AnalyzerOptions

    return AnalyzerOptions(
        case_sensitive=args.case_sensitive,
        include_unknown_words=not args.no_unknown,
        analyze_by_part_of_speech=args.by_pos,
    )


def fail(message: str):
    print(f"ERROR: {message}", file=sys.stderr)
    sys.exit(1)


def cmd_analyze(args):
    """Analyze text and print the report."""
    from cefr_analyzer.formatting import (
        format_analysis_result,
        format_complexity_score,
        generate_simple_visualization,
    )
    from cefr_analyzer.scoring import calculate_complexity_score

    try:
        analyzer = build_analyzer(args)
        result = analyzer.analyze(read_text(args), build_options(args))
    except (OSError, ValueError) as e:
        fail(str(e))

    score = calculate_complexity_score(result)

    if args.format == 'json':
        print(json.dumps(
            {"analysis": result.to_dict(), "complexity": score.to_dict()},
            indent=2,
            ensure_ascii=False,
        ))
        return

    print(format_analysis_result(result))
    print(generate_simple_visualization(result))
    print(format_complexity_score(score))

    if result.unknown_words_list and args.verbose:
        print(f"\nUnknown words: {', '.join(result.unknown_words_list)}")


def cmd_words(args):
    """List the words of a text at one level."""
    try:
        analyzer = build_analyzer(args)
        words = analyzer.get_words_at_level(read_text(args), args.level, build_options(args))
    except (OSError, ValueError) as e:
        fail(str(e))

    if args.limit:
        words = words[:args.limit]

    if args.format == 'json':
        print(json.dumps([w.to_dict() for w in words], indent=2, ensure_ascii=False))
        return

    for w in words:
        print(f"{w.word}\t{w.pos}" if w.pos else w.word)


def cmd_distribution(args):
    """Print the level percentages of a text."""
    try:
        analyzer = build_analyzer(args)
        distribution = analyzer.get_level_distribution(read_text(args), build_options(args))
    except (OSError, ValueError) as e:
        fail(str(e))

    if args.format == 'json':
        print(json.dumps(distribution, indent=2))
        return

    for level in CEFR_LEVELS:
        print(f"{level.upper()}: {distribution[level]:.2f}%")


def cmd_info(args):
    """Display vocabulary and tokenizer information."""
    from cefr_analyzer.tokenizer import make_tokenizer
    from cefr_analyzer.vocabulary import VocabularyIndex, get_vocabulary

    try:
        vocabulary = VocabularyIndex(path=Path(args.vocabulary)) if args.vocabulary else get_vocabulary()
        vocabulary.initialize()
        tokenizer = make_tokenizer(args.tokenizer, model_name=args.model)
    except (OSError, ValueError) as e:
        fail(str(e))

    print("=== CEFR Analyzer Information ===\n")
    print(f"Python: {sys.version.split()[0]}")
    print(f"Vocabulary: {vocabulary.source}")
    print(f"  Words: {vocabulary.word_count()}")
    print(f"  Entries: {vocabulary.entry_count()}")
    print(f"Tokenizer: {tokenizer.describe()}")
    print(f"Levels: {', '.join(level.upper() for level in CEFR_LEVELS)}")


def add_common_arguments(parser, with_text=True):
    if with_text:
        parser.add_argument('text', nargs='?', help='English text (default: read --file or stdin)')
        parser.add_argument('-f', '--file', help='Read input from file')
        parser.add_argument('--format', choices=['text', 'json'], default='text',
                            help='Output format (default: text)')
        parser.add_argument('--case-sensitive', action='store_true',
                            help='Treat "Book" and "book" as different words')
        parser.add_argument('--by-pos', action='store_true',
                            help='Count words separately per part of speech')
        parser.add_argument('--no-unknown', action='store_true',
                            help='Do not list unrecognized words')
    parser.add_argument('--vocabulary', help='Vocabulary JSON file (default: bundled list)')
    parser.add_argument('--tokenizer', choices=['spacy', 'regex'], default='spacy',
                        help='Tokenizer (default: spacy)')
    parser.add_argument('--model', help='spaCy model name (default: en_core_web_sm)')


def main(argv=None):
    """Main CLI entry point."""
    from cefr_analyzer.logging_config import setup_logging

    parser = argparse.ArgumentParser(
        prog='cefr-analyzer',
        description='Classify the words of an English text into CEFR levels (A1-C2)',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full report for a text
  cefr-analyzer analyze "The paradigm of language learning has evolved."
  cefr-analyzer analyze --file essay.txt --format json

  # Words at one level
  cefr-analyzer words b2 --file essay.txt --limit 10

  # Level percentages, counting parts of speech separately
  cefr-analyzer distribution --by-pos --file essay.txt

  # Vocabulary information
  cefr-analyzer info
        """
    )
    parser.add_argument('--debug', action='store_true', help='Verbose logging')
    parser.add_argument('--log-file', help='Also write logs to this file')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # --- analyze command ---
    parser_analyze = subparsers.add_parser('analyze', help='Analyze CEFR levels of a text')
    add_common_arguments(parser_analyze)
    parser_analyze.add_argument('-v', '--verbose', action='store_true', help='List unknown words')
    parser_analyze.set_defaults(func=cmd_analyze)

    # --- words command ---
    parser_words = subparsers.add_parser('words', help='List words at a CEFR level')
    parser_words.add_argument('level', type=str.lower, choices=list(CEFR_LEVELS), help='CEFR level')
    add_common_arguments(parser_words)
    parser_words.add_argument('--limit', type=int, default=0, help='Show at most N words')
    parser_words.set_defaults(func=cmd_words)

    # --- distribution command ---
    parser_distribution = subparsers.add_parser('distribution', help='Show level percentages')
    add_common_arguments(parser_distribution)
    parser_distribution.set_defaults(func=cmd_distribution)

    # --- info command ---
    parser_info = subparsers.add_parser('info', help='Display vocabulary information')
    add_common_arguments(parser_info, with_text=False)
    parser_info.set_defaults(func=cmd_info)

    args = parser.parse_args(argv)

    # If no command specified, show help
    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging(log_file=args.log_file, level=logging.WARNING, debug=args.debug)
    args.func(args)


if __name__ == '__main__':
    main()
