"""Immutable review records as produced by the payload decoder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Review:
    """A single review exactly as the server delivered it."""

    first_name: str
    last_name: str
    text: str
    created: str
    rating: int
    avatar_url: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class ReviewsPage:
    """One decoded page: the reviews it holds plus the server-side total."""

    items: Tuple[Review, ...]
    count: int


__all__ = ["Review", "ReviewsPage"]
