"""Yelp review loading from newline-delimited JSON."""

import json
import logging
from contextlib import contextmanager
from itertools import islice
from pathlib import Path
from typing import Any, BinaryIO, Dict, Iterable, Iterator, List, Optional, TextIO, Union

import pandas as pd

from ..core.constants import ColumnConstants, ReviewConstants
from ..core.exceptions import ResourceError, ReviewLoadError
from ..core.models import Review

logger = logging.getLogger(__name__)

Source = Union[str, Path, TextIO, BinaryIO]


@contextmanager
def _open_source(source: Source):
    if isinstance(source, (str, Path)):
        try:
            # lines are decoded one at a time in iter_reviews
            f = open(source, "rb")
        except OSError as e:
            raise ResourceError(f"review file {source}", str(e)) from e
        with f:
            yield f
    else:
        yield source


def parse_review(record: Dict[str, Any], line_number: int) -> Review:
    """Build a Review from a decoded JSON object, ignoring unknown fields."""
    if not isinstance(record, dict):
        raise ReviewLoadError(line_number, f"expected a JSON object, got {type(record).__name__}")

    missing = [name for name in ReviewConstants.REQUIRED_FIELDS if name not in record]
    if missing:
        raise ReviewLoadError(line_number, f"missing field(s) {', '.join(missing)}")

    for name in ("review_id", "business_id", "text"):
        if not isinstance(record[name], str):
            raise ReviewLoadError(line_number, f"field {name} must be a string")

    stars = record["stars"]
    # Yelp exports stars as 5.0; accept whole floats, reject 4.5 and booleans
    if (isinstance(stars, bool) or not isinstance(stars, (int, float))
            or (isinstance(stars, float) and not stars.is_integer())):
        raise ReviewLoadError(line_number, f"stars must be an integer, got {stars!r}")
    stars = int(stars)
    if not ReviewConstants.MIN_STARS <= stars <= ReviewConstants.MAX_STARS:
        raise ReviewLoadError(line_number, f"stars {stars} outside "
                                           f"[{ReviewConstants.MIN_STARS}, {ReviewConstants.MAX_STARS}]")

    return Review(
        review_id=record["review_id"],
        business_id=record["business_id"],
        stars=stars,
        text=record["text"],
    )


def iter_reviews(source: Source, limit: Optional[int] = None) -> Iterator[Review]:
    """Lazily yield reviews from ``source``, reading at most ``limit`` lines.

    A malformed line, a line that is not UTF-8, or a repeated review_id raises
    :class:`ReviewLoadError` and ends the load.
    """
    if limit is not None and limit < 0:
        raise ValueError("limit must be non-negative")

    seen = {}
    with _open_source(source) as f:
        for line_number, line in enumerate(islice(f, limit), start=1):
            if isinstance(line, bytes):
                try:
                    line = line.decode("utf-8")
                except UnicodeDecodeError as e:
                    raise ReviewLoadError(line_number, f"not valid UTF-8 ({e.reason})") from e
            if not line.strip():
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                raise ReviewLoadError(line_number, f"invalid JSON ({e.msg})") from e
            review = parse_review(record, line_number)
            if review.review_id in seen:
                raise ReviewLoadError(line_number, f"duplicate review_id {review.review_id!r} "
                                                   f"(first seen on line {seen[review.review_id]})")
            seen[review.review_id] = line_number
            yield review


def load_reviews(source: Source, limit: Optional[int] = None) -> List[Review]:
    """Load reviews into memory; the whole load fails on the first bad line."""
    reviews = list(iter_reviews(source, limit))
    logger.info(f"Loaded {len(reviews)} reviews" + (f" (limit {limit} lines)" if limit else ""))
    return reviews


def reviews_to_frame(reviews: Iterable[Review]) -> pd.DataFrame:
    """Tabular view of reviews with columns review_id, business_id, stars, text."""
    frame = pd.DataFrame(
        [(r.review_id, r.business_id, r.stars, r.text) for r in reviews],
        columns=ColumnConstants.REVIEW_COLUMNS,
    )
    frame[ColumnConstants.STARS] = frame[ColumnConstants.STARS].astype("int64")
    return frame
