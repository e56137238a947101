"""Constants and configuration values for yelplex."""

# Column Constants
class ColumnConstants:
    """Column names of the relations passed between pipeline stages."""

    # Review relation
    REVIEW_ID = "review_id"
    BUSINESS_ID = "business_id"
    STARS = "stars"
    TEXT = "text"

    # Token occurrence relation
    WORD = "word"

    # Lexicon join
    SCORE = "score"
    AFINN_SCORE = "afinn_score"

    # Aggregates
    SENTIMENT = "sentiment"
    BUSINESSES = "businesses"
    REVIEWS = "reviews"
    USES = "uses"
    AVERAGE_STARS = "average_stars"

    REVIEW_COLUMNS = [REVIEW_ID, BUSINESS_ID, STARS, TEXT]
    TOKEN_COLUMNS = [REVIEW_ID, BUSINESS_ID, STARS, WORD]
    JOINED_COLUMNS = [REVIEW_ID, BUSINESS_ID, STARS, WORD, SCORE]
    REVIEW_SENTIMENT_COLUMNS = [REVIEW_ID, STARS, SENTIMENT]
    WORD_SUMMARY_COLUMNS = [WORD, BUSINESSES, REVIEWS, USES, AVERAGE_STARS]
    WORD_LEXICON_COLUMNS = [WORD, AFINN_SCORE, AVERAGE_STARS, REVIEWS, BUSINESSES]
    STARS_SUMMARY_COLUMNS = [STARS, REVIEWS, "mean_sentiment", "median_sentiment", "std_sentiment"]


# Text Processing Constants
class TokenConstants:
    """Constants for tokenization."""

    SPLIT_PATTERN = r"\w+(?:'\w+)*"  # apostrophes only inside a word: don't, chef's
    VALID_TOKEN_PATTERN = r"^[a-z']+$"  # rejects digits, underscores, non-ascii


# Lexicon Constants
class LexiconConstants:
    """Constants for the sentiment lexicon and stop-word resources."""

    MIN_SCORE = -5
    MAX_SCORE = 5
    DEFAULT_LEXICON_LANGUAGE = "en"  # afinn language code
    DEFAULT_STOPWORDS_LANGUAGE = "english"  # nltk corpus file id


# Review Constants
class ReviewConstants:
    """Constants for review records."""

    MIN_STARS = 1
    MAX_STARS = 5
    REQUIRED_FIELDS = ("review_id", "business_id", "stars", "text")


# Report Constants
class ReportConstants:
    """Constants for CLI reporting."""

    TOP_WORDS = 10  # words shown per direction in the summary
    EXPORT_VERSION = "0.1.0"


# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
