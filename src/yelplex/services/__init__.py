"""Services for yelplex."""

from .review_loader import iter_reviews, load_reviews, reviews_to_frame

__all__ = [
    "iter_reviews",
    "load_reviews",
    "reviews_to_frame",
]
