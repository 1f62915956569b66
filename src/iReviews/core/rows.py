"""Row variants displayed by the reviews list.

The list holds exactly two kinds of rows. A :class:`ReviewRow` renders one
review; a :class:`CountRow` is the synthetic trailer showing how many reviews
are loaded. Both are immutable; relaxing a row's line clamp produces a new
row value that replaces the old one at its index.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import partial
from typing import Callable, Optional, Protocol, Union
from uuid import UUID, uuid4

from PySide6.QtGui import QImage

from ..config import DEFAULT_MAX_LINES, UNLIMITED_LINES
from ..models.review import Review
from .styled_text import StyledText, TextStyle, TextStyler


class RatingRendererProtocol(Protocol):
    def rating_image(self, rating: int) -> QImage:
        ...


@dataclass(frozen=True)
class ReviewRow:
    """Display data for a single review."""

    user_name: StyledText
    text: StyledText
    created: StyledText
    rating: int
    rating_image: Callable[[], Optional[QImage]] = field(compare=False, repr=False)
    avatar_url: Optional[str] = None
    max_lines: int = DEFAULT_MAX_LINES
    id: UUID = field(default_factory=uuid4)

    @property
    def is_expanded(self) -> bool:
        return self.max_lines == UNLIMITED_LINES

    def expanded(self) -> "ReviewRow":
        """Return this row with the line clamp removed."""
        if self.is_expanded:
            return self
        return replace(self, max_lines=UNLIMITED_LINES)


@dataclass(frozen=True)
class CountRow:
    """Trailing row announcing the number of loaded reviews."""

    count: int
    text: StyledText
    id: UUID = field(default_factory=uuid4)


RowItem = Union[ReviewRow, CountRow]


def count_text(count: int) -> str:
    return f"{count} review" if count == 1 else f"{count} reviews"


def make_review_row(
    review: Review,
    styler: TextStyler,
    rating_renderer: RatingRendererProtocol,
    *,
    max_lines: int = DEFAULT_MAX_LINES,
) -> ReviewRow:
    """Build the styled row for *review*; the rating image is rendered lazily."""

    return ReviewRow(
        user_name=styler.style(review.full_name, TextStyle.USERNAME),
        text=styler.style(review.text, TextStyle.TEXT),
        created=styler.style(review.created, TextStyle.CREATED),
        rating=review.rating,
        rating_image=partial(rating_renderer.rating_image, review.rating),
        avatar_url=review.avatar_url,
        max_lines=max_lines,
    )


def make_count_row(count: int, styler: TextStyler) -> CountRow:
    return CountRow(count=count, text=styler.style(count_text(count), TextStyle.REVIEW_COUNT))


def row_kind(row: RowItem) -> str:
    if isinstance(row, ReviewRow):
        return "review"
    if isinstance(row, CountRow):
        return "count"
    raise TypeError(f"Unsupported row type: {type(row).__name__}")


__all__ = [
    "ReviewRow",
    "CountRow",
    "RowItem",
    "count_text",
    "make_review_row",
    "make_count_row",
    "row_kind",
]
