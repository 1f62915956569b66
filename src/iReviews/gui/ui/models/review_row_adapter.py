"""Translate row variants into the role values a view paints from."""

from __future__ import annotations

from typing import Any, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QImage

from ....cache.image_cache import ImageCache
from ....core.row_layout import LayoutResult
from ....core.rows import CountRow, ReviewRow, RowItem, count_text, row_kind
from .roles import Roles


class ReviewRowAdapter:
    """Answer ``data()`` queries for a single row.

    Avatars are served from the shared :class:`ImageCache`; a miss returns the
    placeholder immediately and lets the cache download the image in the
    background.
    """

    def __init__(self, image_cache: ImageCache, placeholder_avatar: Optional[QImage] = None) -> None:
        self._image_cache = image_cache
        self._placeholder_avatar = placeholder_avatar

    @property
    def placeholder_avatar(self) -> Optional[QImage]:
        return self._placeholder_avatar

    def avatar_for(self, row: ReviewRow) -> Optional[QImage]:
        return self._image_cache.get_or_fetch(row.avatar_url, placeholder=self._placeholder_avatar)

    def data(self, row: RowItem, role: int, layout: Optional[LayoutResult] = None) -> Any:
        if role == Roles.ROW:
            return row
        if role == Roles.KIND:
            return row_kind(row)
        if role == Roles.ROW_ID:
            return str(row.id)
        if role == Roles.LAYOUT:
            return layout

        if isinstance(row, CountRow):
            if role == Qt.DisplayRole:
                return count_text(row.count)
            if role == Roles.TEXT:
                return row.text
            if role == Roles.COUNT:
                return row.count
            if role == Qt.TextAlignmentRole:
                return Qt.AlignCenter
            return None

        if role == Roles.USER_NAME:
            return row.user_name
        if role == Roles.TEXT:
            return row.text
        if role == Roles.CREATED:
            return row.created
        if role == Roles.RATING_IMAGE:
            return row.rating_image()
        if role in (Roles.AVATAR, Qt.DecorationRole):
            return self.avatar_for(row)
        if role == Roles.AVATAR_URL:
            return row.avatar_url
        if role == Roles.MAX_LINES:
            return row.max_lines
        if role == Roles.SHOW_MORE_VISIBLE:
            return bool(layout.show_more_visible) if layout is not None else False
        return None


__all__ = ["ReviewRowAdapter"]
