"""Sentiment lexicon and stop-word resources.

Both resources are loaded once, validated, and handed to the pipeline as
read-only values. Any problem reading them is fatal and raised as
:class:`ResourceError` naming the resource.
"""

import csv
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Dict, FrozenSet

import pandas as pd
from afinn import Afinn
from nltk.corpus import stopwords

from .constants import LexiconConstants
from .exceptions import ResourceError

logger = logging.getLogger(__name__)


def _is_integral(score) -> bool:
    if isinstance(score, bool):
        return False
    try:
        return int(score) == score
    except (TypeError, ValueError, OverflowError):
        return False


def _validate_scores(scores: Dict[str, int], resource: str) -> Dict[str, int]:
    lexicon = {}
    for word, score in scores.items():
        if not isinstance(word, str) or not word:
            raise ResourceError(resource, f"invalid word {word!r}")
        if not _is_integral(score):
            raise ResourceError(resource, f"non-integer score {score!r} for {word!r}")
        if not LexiconConstants.MIN_SCORE <= score <= LexiconConstants.MAX_SCORE:
            raise ResourceError(resource, f"score {score} for {word!r} outside "
                                          f"[{LexiconConstants.MIN_SCORE}, {LexiconConstants.MAX_SCORE}]")
        lexicon[word.lower()] = int(score)
    return lexicon


def read_lexicon_file(path: str) -> Dict[str, int]:
    """Read a tab-separated ``word<TAB>score`` file (the AFINN distribution format)."""
    resource = f"lexicon file {path}"
    if not Path(path).is_file():
        raise ResourceError(resource, "file not found")
    try:
        frame = pd.read_csv(
            path, sep="\t", header=None, names=["word", "score"],
            quoting=csv.QUOTE_NONE, encoding="utf-8", keep_default_na=False,
        )
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise ResourceError(resource, str(e)) from e

    scores = pd.to_numeric(frame["score"], errors="coerce")
    bad = frame[scores.isna()]
    if not bad.empty:
        raise ResourceError(resource, f"unparseable score on line {bad.index[0] + 1}")
    if frame["word"].duplicated().any():
        dup = frame.loc[frame["word"].duplicated(), "word"].iloc[0]
        raise ResourceError(resource, f"duplicate word {dup!r}")
    return dict(zip(frame["word"], scores.tolist()))


def load_lexicon(path: Optional[str] = None,
                 language: str = LexiconConstants.DEFAULT_LEXICON_LANGUAGE) -> Mapping[str, int]:
    """Load the word -> score lexicon.

    Defaults to the AFINN word list bundled with the ``afinn`` package; ``path``
    replaces it with a custom tab-separated file.
    """
    if path:
        resource = f"lexicon file {path}"
        raw = read_lexicon_file(path)
    else:
        resource = f"AFINN lexicon ({language})"
        try:
            # afinn has no public accessor for its word list
            raw = dict(Afinn(language=language)._dict)
        except (KeyError, ValueError, OSError) as e:
            raise ResourceError(resource, str(e)) from e

    lexicon = _validate_scores(raw, resource)
    if not lexicon:
        raise ResourceError(resource, "lexicon is empty")
    logger.info(f"Loaded {len(lexicon)} lexicon entries from {resource}")
    return MappingProxyType(lexicon)


def load_stop_words(path: Optional[str] = None,
                    language: str = LexiconConstants.DEFAULT_STOPWORDS_LANGUAGE) -> FrozenSet[str]:
    """Load the stop-word set.

    Defaults to the NLTK stop-word corpus (``nltk.download('stopwords')``);
    ``path`` replaces it with a one-word-per-line file.
    """
    if path:
        resource = f"stop-word file {path}"
        try:
            with open(path, "r", encoding="utf-8") as f:
                words = [line.strip() for line in f]
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceError(resource, str(e)) from e
    else:
        resource = f"NLTK stop words ({language})"
        try:
            words = stopwords.words(language)
        except (LookupError, OSError) as e:
            raise ResourceError(resource, f"{e}; run nltk.download('stopwords')") from e

    stop_words = frozenset(w.lower() for w in words if w)
    logger.info(f"Loaded {len(stop_words)} stop words from {resource}")
    return stop_words
