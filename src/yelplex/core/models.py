"""Data models for yelplex."""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List

import pandas as pd


@dataclass(frozen=True)
class Review:
    """Represents a single Yelp review."""
    review_id: str
    business_id: str
    stars: int
    text: str


@dataclass(frozen=True)
class Coverage:
    """How much of the tokenized text the lexicon was able to score."""
    tokens: int
    matched_tokens: int
    reviews: int
    matched_reviews: int

    @property
    def token_rate(self) -> Optional[float]:
        return self.matched_tokens / self.tokens if self.tokens else None

    @property
    def review_rate(self) -> Optional[float]:
        return self.matched_reviews / self.reviews if self.reviews else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tokens": self.tokens,
            "matched_tokens": self.matched_tokens,
            "token_rate": self.token_rate,
            "reviews": self.reviews,
            "matched_reviews": self.matched_reviews,
            "review_rate": self.review_rate,
        }


def _records(frame: pd.DataFrame) -> List[Dict[str, Any]]:
    # NaN (e.g. std of a single review) becomes None so the JSON stays strict
    return frame.astype(object).where(frame.notna(), None).to_dict(orient="records")


@dataclass
class PipelineResult:
    """All relations produced by a single pipeline run."""
    tokens: pd.DataFrame
    joined: pd.DataFrame
    review_sentiment: pd.DataFrame
    word_summary: pd.DataFrame
    word_lexicon: pd.DataFrame
    sentiment_by_stars: pd.DataFrame
    coverage: Coverage
    sentiment_star_correlation: Optional[float] = None
    score_star_correlation: Optional[float] = None
    thresholds: Dict[str, Optional[int]] = field(default_factory=dict)

    def tables(self) -> Dict[str, pd.DataFrame]:
        """Aggregate relations keyed by export name."""
        return {
            "review_sentiment": self.review_sentiment,
            "word_summary": self.word_summary,
            "word_lexicon": self.word_lexicon,
            "sentiment_by_stars": self.sentiment_by_stars,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serializable view of the aggregates; identical input gives identical output."""
        return {
            "coverage": self.coverage.to_dict(),
            "sentiment_star_correlation": self.sentiment_star_correlation,
            "score_star_correlation": self.score_star_correlation,
            "thresholds": dict(self.thresholds),
            **{name: _records(frame) for name, frame in self.tables().items()},
        }
