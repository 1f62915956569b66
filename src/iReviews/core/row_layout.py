"""Deterministic frame and height computation for list rows."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from PySide6.QtCore import QPointF, QRectF, QSizeF

from ..config import COUNT_ROW_HEIGHT, UNLIMITED_LINES
from .layout_metrics import (
    AVATAR_SIZE,
    AVATAR_TO_USERNAME_SPACING,
    CONTENT_INSETS,
    RATING_IMAGE_SIZE,
    RATING_TO_TEXT_SPACING,
    SHOW_MORE_FALLBACK_SIZE,
    SHOW_MORE_TO_CREATED_SPACING,
    TEXT_TO_CREATED_SPACING,
    USERNAME_TO_RATING_SPACING,
)
from .rows import CountRow, ReviewRow, RowItem


@dataclass(frozen=True)
class LayoutResult:
    """Frames of every sub-element of a row plus the row's total height.

    Elements that are not shown (the body of an empty review, the "show more"
    affordance of a text that fits) carry a null :class:`QRectF`.
    """

    height: float
    avatar: QRectF
    user_name: QRectF
    rating: QRectF
    text: QRectF
    show_more: QRectF
    created: QRectF
    show_more_visible: bool = False


def sanitize_width(max_width: Any) -> float:
    """Return *max_width* as a finite, non-negative float; anything else is 0."""
    try:
        width = float(max_width)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(width) or width <= 0.0:
        return 0.0
    return width


class RowLayoutEngine:
    """Compute row geometry without keeping any state between calls.

    Review rows are laid out in two columns: the avatar is pinned top-left and
    the text column flows top to bottom (name, rating, clamped body, optional
    "show more" affordance, date). Count rows have a fixed height and span
    the whole width.
    """

    def __init__(
        self,
        show_more_size: QSizeF = SHOW_MORE_FALLBACK_SIZE,
        count_row_height: float = COUNT_ROW_HEIGHT,
    ) -> None:
        self._show_more_size = QSizeF(show_more_size)
        self._count_row_height = float(count_row_height)

    @property
    def show_more_size(self) -> QSizeF:
        return QSizeF(self._show_more_size)

    def measure(self, row: RowItem, max_width: float) -> LayoutResult:
        """Return the :class:`LayoutResult` for *row* at *max_width*."""
        if isinstance(row, ReviewRow):
            return self._layout_review(row, max_width)
        if isinstance(row, CountRow):
            return self._layout_count(max_width)
        raise TypeError(f"Unsupported row type: {type(row).__name__}")

    def height(self, row: RowItem, max_width: float) -> float:
        return self.measure(row, max_width).height

    # ------------------------------------------------------------------
    def _layout_count(self, max_width: float) -> LayoutResult:
        width = sanitize_width(max_width)
        empty = QRectF()
        return LayoutResult(
            height=self._count_row_height,
            avatar=empty,
            user_name=empty,
            rating=empty,
            text=QRectF(0.0, 0.0, width, self._count_row_height),
            show_more=empty,
            created=empty,
        )

    def _layout_review(self, row: ReviewRow, max_width: float) -> LayoutResult:
        insets = CONTENT_INSETS
        width = max(0.0, sanitize_width(max_width) - insets.left() - insets.right())
        y = insets.top()

        avatar = QRectF(QPointF(insets.left(), y), AVATAR_SIZE)

        text_x = avatar.right() + AVATAR_TO_USERNAME_SPACING
        text_width = max(0.0, width - AVATAR_SIZE.width() - AVATAR_TO_USERNAME_SPACING)

        user_name = QRectF(QPointF(text_x, y), row.user_name.bounding_size(text_width))
        y = user_name.bottom() + USERNAME_TO_RATING_SPACING

        rating = QRectF(QPointF(text_x, y), RATING_IMAGE_SIZE)
        y = rating.bottom()

        text = QRectF()
        show_more = QRectF()
        show_more_visible = False

        # An empty body drops the text frame, the affordance and their spacing.
        if not row.text.is_empty():
            y += RATING_TO_TEXT_SPACING
            if row.max_lines == UNLIMITED_LINES:
                body_size = row.text.bounding_size(text_width)
            else:
                clamped_height = row.text.line_height() * row.max_lines
                natural_height = row.text.bounding_size(text_width).height()
                show_more_visible = natural_height > clamped_height
                body_size = row.text.bounding_size(text_width, clamped_height)
            text = QRectF(QPointF(text_x, y), body_size)
            y = text.bottom() + TEXT_TO_CREATED_SPACING

            if show_more_visible:
                show_more = QRectF(QPointF(text_x, y), self._show_more_size)
                y = show_more.bottom() + SHOW_MORE_TO_CREATED_SPACING

        created = QRectF(QPointF(text_x, y), row.created.bounding_size(text_width))

        height = max(avatar.bottom(), created.bottom()) + insets.bottom()
        return LayoutResult(
            height=height,
            avatar=avatar,
            user_name=user_name,
            rating=rating,
            text=text,
            show_more=show_more,
            created=created,
            show_more_visible=show_more_visible,
        )


__all__ = ["LayoutResult", "RowLayoutEngine", "sanitize_width"]
