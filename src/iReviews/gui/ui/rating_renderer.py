"""Render the five-star rating glyph shown under a reviewer's name."""

from __future__ import annotations

import math
from typing import Dict

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QColor, QImage, QPainter, QPolygonF

from ...core.layout_metrics import RATING_IMAGE_SIZE

MAX_RATING = 5

FILLED_STAR_COLOR = QColor("#FFCC00")
"""Colour of stars up to the review's rating."""

EMPTY_STAR_COLOR = QColor("#D1D1D6")
"""Colour of the remaining stars."""


def _star_polygon(center: QPointF, outer_radius: float) -> QPolygonF:
    inner_radius = outer_radius * 0.45
    points = []
    for index in range(10):
        radius = outer_radius if index % 2 == 0 else inner_radius
        # Start at the top and walk clockwise.
        angle = -math.pi / 2 + index * math.pi / 5
        points.append(
            QPointF(center.x() + radius * math.cos(angle), center.y() + radius * math.sin(angle))
        )
    return QPolygonF(points)


class RatingRenderer:
    """Draw and memoise one rating image per rating value."""

    def __init__(self, star_spacing: float = 2.0) -> None:
        self._star_spacing = star_spacing
        self._cache: Dict[int, QImage] = {}

    def rating_image(self, rating: int) -> QImage:
        """Return the glyph for *rating*, clamped into ``0..MAX_RATING``."""

        clamped = max(0, min(MAX_RATING, int(rating)))
        image = self._cache.get(clamped)
        if image is None:
            image = self._render(clamped)
            self._cache[clamped] = image
        return image

    def _render(self, rating: int) -> QImage:
        width = int(RATING_IMAGE_SIZE.width())
        height = int(RATING_IMAGE_SIZE.height())
        image = QImage(width, height, QImage.Format.Format_ARGB32_Premultiplied)
        image.fill(Qt.GlobalColor.transparent)

        step = width / MAX_RATING
        outer_radius = min(height, step - self._star_spacing) / 2.0

        painter = QPainter(image)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            painter.setPen(Qt.PenStyle.NoPen)
            for index in range(MAX_RATING):
                painter.setBrush(FILLED_STAR_COLOR if index < rating else EMPTY_STAR_COLOR)
                center = QPointF(step * index + step / 2.0, height / 2.0)
                painter.drawPolygon(_star_polygon(center, outer_radius))
        finally:
            painter.end()
        return image


__all__ = ["MAX_RATING", "RatingRenderer"]
