"""Review text tokenization."""

import logging
import re
from typing import AbstractSet, Iterable, Iterator, Union

import pandas as pd
from nltk.tokenize import RegexpTokenizer

from .constants import ColumnConstants, TokenConstants
from .models import Review

logger = logging.getLogger(__name__)

_tokenizer = RegexpTokenizer(TokenConstants.SPLIT_PATTERN)
_valid_token = re.compile(TokenConstants.VALID_TOKEN_PATTERN)


def tokenize(text: str, stop_words: AbstractSet[str]) -> Iterator[str]:
    """Yield lowercase word tokens of ``text`` in reading order.

    Stop words and tokens that are not made only of ``a-z`` and apostrophes
    (numbers, underscores, accented words) are skipped. No stemming is done.
    """
    for token in _tokenizer.tokenize(text.lower()):
        if token in stop_words:
            continue
        if not _valid_token.match(token):
            continue
        yield token


def unnest_tokens(reviews: Union[Iterable[Review], pd.DataFrame],
                  stop_words: AbstractSet[str]) -> pd.DataFrame:
    """Build the token-occurrence relation: one row per kept token per review."""
    if isinstance(reviews, pd.DataFrame):
        records = reviews[ColumnConstants.REVIEW_COLUMNS].itertuples(index=False, name=None)
    else:
        records = ((r.review_id, r.business_id, r.stars, r.text) for r in reviews)

    rows = []
    n_reviews = 0
    for review_id, business_id, stars, text in records:
        n_reviews += 1
        rows.extend((review_id, business_id, stars, word) for word in tokenize(text, stop_words))

    tokens = pd.DataFrame(rows, columns=ColumnConstants.TOKEN_COLUMNS)
    tokens[ColumnConstants.STARS] = tokens[ColumnConstants.STARS].astype("int64")
    logger.info(f"Tokenized {n_reviews} reviews into {len(tokens)} tokens")
    return tokens
