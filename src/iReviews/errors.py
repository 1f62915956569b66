"""Exception hierarchy shared by the reviews engine."""

from __future__ import annotations


class ReviewsError(Exception):
    """Base class for all errors raised by :mod:`iReviews`."""


class TransportError(ReviewsError):
    """Fetching a page of reviews failed at the network or IO level."""


class DecodeError(ReviewsError):
    """A fetched payload could not be decoded into a page of reviews."""


__all__ = ["ReviewsError", "TransportError", "DecodeError"]
