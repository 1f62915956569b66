"""Measurable styled text used by the row layout.

The layout engine never touches fonts directly; it only needs the four
queries described by :class:`StyledText`. :class:`QtTextStyler` provides the
production implementation on top of :class:`QFontMetricsF`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Protocol

from PySide6.QtCore import QRectF, QSizeF, Qt
from PySide6.QtGui import QColor, QFont, QFontMetricsF

UNBOUNDED_EXTENT = 1.0e7
"""Stand-in for an unconstrained width or height when measuring."""


class TextStyle(Enum):
    """Style tokens applied to the strings shown in a review row."""

    USERNAME = "username"
    TEXT = "text"
    CREATED = "created"
    SHOW_MORE = "show_more"
    REVIEW_COUNT = "review_count"


class StyledText(Protocol):
    def is_empty(self) -> bool:
        ...

    def line_height(self) -> float:
        ...

    def bounding_size(self, width: float, height: Optional[float] = None) -> QSizeF:
        ...


class TextStyler(Protocol):
    def style(self, text: str, token: TextStyle) -> StyledText:
        ...


@dataclass(frozen=True)
class _StyleSpec:
    point_size: float
    color: str
    weight: QFont.Weight = QFont.Weight.Normal


STYLE_SPECS: Dict[TextStyle, _StyleSpec] = {
    TextStyle.USERNAME: _StyleSpec(17.0, "#000000", QFont.Weight.Medium),
    TextStyle.TEXT: _StyleSpec(15.0, "#000000"),
    TextStyle.CREATED: _StyleSpec(13.0, "#8E8E93"),
    TextStyle.SHOW_MORE: _StyleSpec(15.0, "#007AFF", QFont.Weight.Medium),
    TextStyle.REVIEW_COUNT: _StyleSpec(15.0, "#8E8E93"),
}


class QtStyledText:
    """A string bound to a font and colour, measured with word wrapping."""

    __slots__ = ("_text", "_font", "_color", "_metrics")

    def __init__(self, text: str, font: QFont, color: QColor) -> None:
        self._text = text
        self._font = QFont(font)
        self._color = QColor(color)
        self._metrics = QFontMetricsF(self._font)

    @property
    def text(self) -> str:
        return self._text

    @property
    def font(self) -> QFont:
        return QFont(self._font)

    @property
    def color(self) -> QColor:
        return QColor(self._color)

    def is_empty(self) -> bool:
        return not self._text

    def line_height(self) -> float:
        return self._metrics.lineSpacing()

    def bounding_size(self, width: float, height: Optional[float] = None) -> QSizeF:
        """Return the wrapped size of the text inside ``width`` x ``height``."""

        if not self._text:
            return QSizeF(0.0, 0.0)
        max_width = max(0.0, float(width))
        max_height = UNBOUNDED_EXTENT if height is None else max(0.0, float(height))
        rect = self._metrics.boundingRect(
            QRectF(0.0, 0.0, max_width, max_height),
            int(Qt.TextFlag.TextWordWrap),
            self._text,
        )
        return QSizeF(min(rect.width(), max_width), min(rect.height(), max_height))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QtStyledText):
            return NotImplemented
        return (
            self._text == other._text
            and self._font == other._font
            and self._color == other._color
        )

    def __hash__(self) -> int:
        return hash((self._text, self._font.toString(), self._color.name()))

    def __repr__(self) -> str:
        return f"QtStyledText({self._text!r})"


class QtTextStyler:
    """Turn raw strings into :class:`QtStyledText` using :data:`STYLE_SPECS`."""

    def __init__(self, base_font: Optional[QFont] = None) -> None:
        self._base_font = QFont(base_font) if base_font is not None else QFont()
        self._fonts: Dict[TextStyle, QFont] = {}

    def _font_for(self, token: TextStyle) -> QFont:
        font = self._fonts.get(token)
        if font is None:
            spec = STYLE_SPECS[token]
            font = QFont(self._base_font)
            font.setPointSizeF(spec.point_size)
            font.setWeight(spec.weight)
            self._fonts[token] = font
        return font

    def style(self, text: str, token: TextStyle) -> QtStyledText:
        return QtStyledText(text, self._font_for(token), QColor(STYLE_SPECS[token].color))


__all__ = [
    "UNBOUNDED_EXTENT",
    "TextStyle",
    "StyledText",
    "TextStyler",
    "STYLE_SPECS",
    "QtStyledText",
    "QtTextStyler",
]
