"""Plain data records decoded from the reviews payload."""

from .review import Review, ReviewsPage

__all__ = ["Review", "ReviewsPage"]
