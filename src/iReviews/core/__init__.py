"""Pure list-state logic: rows, layout and pagination."""

from .layout_metrics import CONTENT_INSETS
from .pagination import PaginationController, PaginationState
from .row_layout import LayoutResult, RowLayoutEngine
from .rows import CountRow, ReviewRow, RowItem, count_text, make_count_row, make_review_row
from .styled_text import QtStyledText, QtTextStyler, StyledText, TextStyle, TextStyler

__all__ = [
    "CONTENT_INSETS",
    "PaginationController",
    "PaginationState",
    "LayoutResult",
    "RowLayoutEngine",
    "CountRow",
    "ReviewRow",
    "RowItem",
    "count_text",
    "make_count_row",
    "make_review_row",
    "QtStyledText",
    "QtTextStyler",
    "StyledText",
    "TextStyle",
    "TextStyler",
]
