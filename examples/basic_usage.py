"""Basic usage examples for yelplex."""

import sys

from yelplex import load_lexicon, load_reviews, load_stop_words, run_pipeline
from yelplex.core.scoring import star_distribution


def example_single_review():
    """Example: score one review by hand."""
    from yelplex.core.models import Review

    lexicon = {"great": 3, "bad": -3}
    stop_words = {"the", "was"}
    review = Review("r1", "b1", 5, "the food was great")

    result = run_pipeline([review], lexicon, stop_words)
    print(result.review_sentiment)


def example_yelp_dataset(path, limit=200000):
    """Example: the Yelp academic dataset with AFINN and NLTK stop words."""
    lexicon = load_lexicon()
    stop_words = load_stop_words()
    reviews = load_reviews(path, limit=limit)
    print(star_distribution(reviews))

    result = run_pipeline(reviews, lexicon, stop_words, min_reviews=200, min_businesses=10)
    print(result.sentiment_by_stars)
    print(f"Sentiment vs stars correlation: {result.sentiment_star_correlation}")

    word_lexicon = result.word_lexicon.sort_values("average_stars")
    print("Lowest-rated lexicon words:")
    print(word_lexicon.head(10))
    print("Highest-rated lexicon words:")
    print(word_lexicon.tail(10))


if __name__ == "__main__":
    example_single_review()
    if len(sys.argv) > 1:
        example_yelp_dataset(sys.argv[1])
