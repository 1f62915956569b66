"""In-memory caches shared across the reviews list."""

from .image_cache import ImageCache

__all__ = ["ImageCache"]
