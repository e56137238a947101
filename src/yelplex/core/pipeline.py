"""End-to-end sentiment pipeline: tokenize, join, aggregate."""

import logging
from typing import AbstractSet, Iterable, Mapping, Optional, Union

import pandas as pd

from .models import PipelineResult, Review
from .tokenize import unnest_tokens
from .scoring import (
    filter_common_words,
    join_lexicon,
    lexicon_coverage,
    review_sentiment,
    score_star_correlation,
    sentiment_by_stars,
    sentiment_star_correlation,
    word_lexicon_summary,
    word_summary,
)

logger = logging.getLogger(__name__)


def run_pipeline(
    reviews: Union[Iterable[Review], pd.DataFrame],
    lexicon: Mapping[str, int],
    stop_words: AbstractSet[str],
    min_reviews: Optional[int] = None,
    min_businesses: Optional[int] = None,
) -> PipelineResult:
    """Run every stage after loading and return all derived relations.

    The result depends only on the arguments; the word thresholds are applied
    to the word summary before it is joined with the lexicon.
    """
    if not isinstance(reviews, pd.DataFrame):
        reviews = list(reviews)
    total_reviews = len(reviews)

    tokens = unnest_tokens(reviews, stop_words)
    joined = join_lexicon(tokens, lexicon)
    coverage = lexicon_coverage(tokens, lexicon, total_reviews=total_reviews)

    per_review = review_sentiment(joined)
    words = filter_common_words(word_summary(tokens), min_reviews, min_businesses)
    word_lexicon = word_lexicon_summary(words, lexicon)

    result = PipelineResult(
        tokens=tokens,
        joined=joined,
        review_sentiment=per_review,
        word_summary=words,
        word_lexicon=word_lexicon,
        sentiment_by_stars=sentiment_by_stars(per_review),
        coverage=coverage,
        sentiment_star_correlation=sentiment_star_correlation(per_review),
        score_star_correlation=score_star_correlation(word_lexicon),
        thresholds={"min_reviews": min_reviews, "min_businesses": min_businesses},
    )
    logger.info(
        f"Pipeline complete: {len(per_review)}/{total_reviews} reviews scored, "
        f"{len(words)} words summarised, {len(word_lexicon)} in lexicon"
    )
    return result
