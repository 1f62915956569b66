"""Payload decoding and local transports."""

from .decoder import decode_reviews_page, encode_reviews_page
from .local_provider import LocalReviewsProvider

__all__ = ["decode_reviews_page", "encode_reviews_page", "LocalReviewsProvider"]
