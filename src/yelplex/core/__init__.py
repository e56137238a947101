"""Core modules for yelplex."""

from .models import *
from .exceptions import YelplexError, ReviewLoadError, ResourceError
from .tokenize import tokenize, unnest_tokens
from .scoring import *
from .pipeline import run_pipeline

__all__ = [
    "Review",
    "Coverage",
    "PipelineResult",
    "YelplexError",
    "ReviewLoadError",
    "ResourceError",
    "tokenize",
    "unnest_tokens",
    "run_pipeline",
]
