"""Command-line interface for yelplex."""

import argparse
import logging
import sys

from .core.config import settings
from .core.constants import ColumnConstants as C, FileConstants, ReportConstants
from .core.exceptions import YelplexError
from .core.lexicon import load_lexicon, load_stop_words
from .core.pipeline import run_pipeline
from .core.tokenize import tokenize
from .services.review_loader import load_reviews
from .utils.data_prep import export_tables, export_to_json, load_export, prepare_export, write_tables

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def _format_rate(rate):
    return "n/a" if rate is None else f"{rate:.1%}"


def _format_corr(value):
    return "n/a" if value is None else f"{value:+.3f}"


def cmd_analyze(args):
    """Analyze command."""
    reviews_path = args.reviews_path or settings.reviews_path
    if not reviews_path:
        raise YelplexError("No review file given (pass a path or set YELPLEX_REVIEWS_PATH)")

    lexicon = load_lexicon(args.lexicon or settings.lexicon_path, settings.lexicon_language)
    stop_words = load_stop_words(args.stopwords or settings.stopwords_path, settings.stopwords_language)

    limit = args.limit if args.limit is not None else settings.max_lines
    print(f"Analyzing '{reviews_path}'" + (f" (first {limit} lines)" if limit else "") + "...")
    reviews = load_reviews(reviews_path, limit)
    print(f"Loaded {len(reviews)} reviews")

    if not reviews:
        print("No reviews found!")
        return

    result = run_pipeline(
        reviews, lexicon, stop_words,
        min_reviews=args.min_reviews, min_businesses=args.min_businesses,
    )

    coverage = result.coverage
    print(f"\nLexicon coverage: {coverage.matched_tokens}/{coverage.tokens} tokens "
          f"({_format_rate(coverage.token_rate)}), {coverage.matched_reviews}/{coverage.reviews} "
          f"reviews ({_format_rate(coverage.review_rate)})")
    print(f"Sentiment vs stars correlation: {_format_corr(result.sentiment_star_correlation)}")
    print(f"AFINN score vs average stars correlation: {_format_corr(result.score_star_correlation)}")

    if not result.sentiment_by_stars.empty:
        print("\nSentiment by star rating:")
        for row in result.sentiment_by_stars.itertuples(index=False):
            print(f"  {row.stars} stars: mean {row.mean_sentiment:+.2f}, "
                  f"median {row.median_sentiment:+.2f} ({row.reviews} reviews)")

    words = result.word_summary.sort_values([C.AVERAGE_STARS, C.WORD], ascending=[False, True])
    n = args.top
    print(f"\nWords summarised: {len(words)} "
          f"(min reviews {args.min_reviews}, min businesses {args.min_businesses})")
    if not words.empty:
        print("Most positive words by average stars:")
        for row in words.head(n).itertuples(index=False):
            print(f"  {row.word}: {row.average_stars:.2f} stars ({row.reviews} reviews, {row.businesses} businesses)")
        print("Most negative words by average stars:")
        for row in words.tail(n).iloc[::-1].itertuples(index=False):
            print(f"  {row.word}: {row.average_stars:.2f} stars ({row.reviews} reviews, {row.businesses} businesses)")

    if args.out:
        export_to_json(prepare_export(result, source=str(reviews_path)), args.out)
        print(f"\nResults exported to {args.out}")
    if args.csv_dir:
        written = export_tables(result, args.csv_dir)
        print(f"Tables written: {', '.join(str(p) for p in written.values())}")


def cmd_tokens(args):
    """Tokens command: show how a single text is tokenized and scored."""
    lexicon = load_lexicon(args.lexicon or settings.lexicon_path, settings.lexicon_language)
    stop_words = load_stop_words(args.stopwords or settings.stopwords_path, settings.stopwords_language)

    tokens = list(tokenize(args.text, stop_words))
    scored = [(t, lexicon[t]) for t in tokens if t in lexicon]
    print(f"Tokens ({len(tokens)}): {' '.join(tokens)}")
    if scored:
        print(f"Scored ({len(scored)}): " + ", ".join(f"{t}={s:+d}" for t, s in scored))
        print(f"Sentiment: {sum(s for _, s in scored) / len(scored):+.3f}")
    else:
        print("Scored (0): no lexicon words; review would be excluded")


def cmd_export(args):
    """Export command: write the tables of a JSON result as CSV files."""
    tables = load_export(args.input_file)
    written = write_tables(tables, args.csv_dir)
    for name, path in written.items():
        print(f"{name}: {len(tables[name])} rows -> {path}")


def build_parser():
    parser = argparse.ArgumentParser(description="yelplex - lexicon sentiment vs Yelp star ratings")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Run the sentiment pipeline over a review file')
    analyze_parser.add_argument('reviews_path', nargs='?', help='Newline-delimited JSON review file')
    analyze_parser.add_argument('--limit', type=int, help='Maximum number of lines to read')
    analyze_parser.add_argument('--min-reviews', type=int, default=settings.min_reviews,
                                help='Minimum reviews containing a word')
    analyze_parser.add_argument('--min-businesses', type=int, default=settings.min_businesses,
                                help='Minimum distinct businesses for a word')
    analyze_parser.add_argument('--lexicon', help='Tab-separated word/score lexicon file')
    analyze_parser.add_argument('--stopwords', help='One-word-per-line stop-word file')
    analyze_parser.add_argument('--top', type=int, default=ReportConstants.TOP_WORDS,
                                help='Words to show per direction')
    analyze_parser.add_argument('--out', help='Output JSON file')
    analyze_parser.add_argument('--csv-dir', help='Directory for CSV tables')

    # Tokens command
    tokens_parser = subparsers.add_parser('tokens', help='Tokenize and score a single text')
    tokens_parser.add_argument('text', help='Review text')
    tokens_parser.add_argument('--lexicon', help='Tab-separated word/score lexicon file')
    tokens_parser.add_argument('--stopwords', help='One-word-per-line stop-word file')

    # Export command
    export_parser = subparsers.add_parser('export', help='Write the tables of an analyze --out file as CSV')
    export_parser.add_argument('--in', dest='input_file', required=True, help='JSON file written by analyze --out')
    export_parser.add_argument('--csv-dir', required=True, help='Directory for CSV tables')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    try:
        if args.command == 'analyze':
            cmd_analyze(args)
        elif args.command == 'tokens':
            cmd_tokens(args)
        elif args.command == 'export':
            cmd_export(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except YelplexError as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
