"""yelplex - does lexicon sentiment predict Yelp star ratings?"""

__version__ = "0.1.0"

from .core.models import Review, Coverage, PipelineResult
from .core.lexicon import load_lexicon, load_stop_words
from .core.pipeline import run_pipeline
from .services.review_loader import load_reviews

__all__ = [
    "Review",
    "Coverage",
    "PipelineResult",
    "load_lexicon",
    "load_stop_words",
    "run_pipeline",
    "load_reviews",
]
