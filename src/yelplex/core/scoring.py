"""Lexicon join and sentiment aggregation."""

import logging
from typing import Iterable, Mapping, Optional, Union

import pandas as pd

from .constants import ColumnConstants as C, ReviewConstants
from .models import Coverage, Review

logger = logging.getLogger(__name__)


def _empty(columns, dtypes) -> pd.DataFrame:
    return pd.DataFrame({col: pd.Series(dtype=dtype) for col, dtype in zip(columns, dtypes)})


def join_lexicon(tokens: pd.DataFrame, lexicon: Mapping[str, int]) -> pd.DataFrame:
    """Keep the token occurrences whose word is in the lexicon and attach its score.

    Words missing from the lexicon are dropped without error.
    """
    lex = dict(lexicon)
    joined = tokens[tokens[C.WORD].isin(list(lex))].copy()
    joined[C.SCORE] = joined[C.WORD].map(lex).astype("int64")
    joined = joined.reset_index(drop=True)
    logger.debug(f"Lexicon join kept {len(joined)} of {len(tokens)} tokens")
    return joined[C.JOINED_COLUMNS]


def lexicon_coverage(tokens: pd.DataFrame, lexicon: Mapping[str, int],
                     total_reviews: Optional[int] = None) -> Coverage:
    """Report how many tokens and reviews the lexicon can score.

    ``total_reviews`` counts reviews that produced no tokens at all; without it
    only reviews present in ``tokens`` are counted.
    """
    matched = tokens[C.WORD].isin(list(lexicon))
    reviews = tokens[C.REVIEW_ID].nunique() if total_reviews is None else total_reviews
    return Coverage(
        tokens=int(len(tokens)),
        matched_tokens=int(matched.sum()),
        reviews=int(reviews),
        matched_reviews=int(tokens.loc[matched, C.REVIEW_ID].nunique()),
    )


def review_sentiment(joined: pd.DataFrame) -> pd.DataFrame:
    """Mean lexicon score per review.

    Only reviews with at least one scored token appear; an unscored review has
    no sentiment rather than a sentiment of zero.
    """
    if joined.empty:
        return _empty(C.REVIEW_SENTIMENT_COLUMNS, ["object", "int64", "float64"])

    per_review = (
        joined.groupby([C.REVIEW_ID, C.STARS], sort=False)[C.SCORE]
        .mean()
        .reset_index()
        .rename(columns={C.SCORE: C.SENTIMENT})
    )
    per_review[C.SENTIMENT] = per_review[C.SENTIMENT].astype("float64")
    return per_review[C.REVIEW_SENTIMENT_COLUMNS]


def word_summary(tokens: pd.DataFrame) -> pd.DataFrame:
    """Per-word usage statistics over the unfiltered token relation.

    ``reviews`` counts distinct reviews, ``uses`` counts every occurrence, and
    ``average_stars`` averages the star rating of each distinct review once.
    """
    if tokens.empty:
        return _empty(C.WORD_SUMMARY_COLUMNS, ["object", "int64", "int64", "int64", "float64"])

    counts = tokens.groupby(C.WORD).agg(
        businesses=(C.BUSINESS_ID, "nunique"),
        reviews=(C.REVIEW_ID, "nunique"),
        uses=(C.REVIEW_ID, "size"),
    )
    average_stars = (
        tokens.drop_duplicates([C.WORD, C.REVIEW_ID])
        .groupby(C.WORD)[C.STARS]
        .mean()
        .rename(C.AVERAGE_STARS)
    )
    summary = counts.join(average_stars).reset_index()
    for col in (C.BUSINESSES, C.REVIEWS, C.USES):
        summary[col] = summary[col].astype("int64")
    summary[C.AVERAGE_STARS] = summary[C.AVERAGE_STARS].astype("float64")
    return summary[C.WORD_SUMMARY_COLUMNS]


def filter_common_words(summary: pd.DataFrame, min_reviews: Optional[int] = None,
                        min_businesses: Optional[int] = None) -> pd.DataFrame:
    """Drop rare words. A threshold of ``None`` leaves that dimension unfiltered."""
    mask = pd.Series(True, index=summary.index)
    if min_reviews is not None:
        mask &= summary[C.REVIEWS] >= min_reviews
    if min_businesses is not None:
        mask &= summary[C.BUSINESSES] >= min_businesses
    return summary[mask].reset_index(drop=True)


def word_lexicon_summary(summary: pd.DataFrame, lexicon: Mapping[str, int]) -> pd.DataFrame:
    """Attach each summarised word's lexicon score, dropping unscored words."""
    lex = pd.DataFrame(list(dict(lexicon).items()), columns=[C.WORD, C.AFINN_SCORE])
    merged = summary.merge(lex, on=C.WORD, how="inner")
    if merged.empty:
        return _empty(C.WORD_LEXICON_COLUMNS, ["object", "int64", "float64", "int64", "int64"])
    merged[C.AFINN_SCORE] = merged[C.AFINN_SCORE].astype("int64")
    return merged[C.WORD_LEXICON_COLUMNS].reset_index(drop=True)


def sentiment_by_stars(per_review: pd.DataFrame) -> pd.DataFrame:
    """Distribution of per-review sentiment within each star rating."""
    if per_review.empty:
        return _empty(C.STARS_SUMMARY_COLUMNS, ["int64", "int64", "float64", "float64", "float64"])

    by_stars = per_review.groupby(C.STARS)[C.SENTIMENT].agg(["size", "mean", "median", "std"])
    by_stars.columns = C.STARS_SUMMARY_COLUMNS[1:]
    by_stars = by_stars.reset_index()
    by_stars[C.REVIEWS] = by_stars[C.REVIEWS].astype("int64")
    return by_stars[C.STARS_SUMMARY_COLUMNS]


def star_distribution(reviews: Union[Iterable[Review], pd.DataFrame]) -> pd.DataFrame:
    """Number of reviews at each star rating, including ratings with none."""
    if isinstance(reviews, pd.DataFrame):
        stars = reviews[C.STARS]
    else:
        stars = pd.Series([r.stars for r in reviews], dtype="int64")
    ratings = range(ReviewConstants.MIN_STARS, ReviewConstants.MAX_STARS + 1)
    counts = stars.value_counts().reindex(ratings, fill_value=0)
    return pd.DataFrame({C.STARS: list(ratings), C.REVIEWS: counts.astype("int64").tolist()})


def _pearson(x: pd.Series, y: pd.Series) -> Optional[float]:
    if len(x) < 2 or x.nunique() < 2 or y.nunique() < 2:
        return None
    return float(x.astype("float64").corr(y.astype("float64")))


def sentiment_star_correlation(per_review: pd.DataFrame) -> Optional[float]:
    """Pearson correlation of review sentiment with stars; ``None`` if undefined."""
    return _pearson(per_review[C.SENTIMENT], per_review[C.STARS])


def score_star_correlation(word_lexicon: pd.DataFrame) -> Optional[float]:
    """Pearson correlation of a word's lexicon score with its average stars."""
    return _pearson(word_lexicon[C.AFINN_SCORE], word_lexicon[C.AVERAGE_STARS])
