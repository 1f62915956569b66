"""Geometry constants used when laying out review rows."""

from PySide6.QtCore import QMarginsF, QSizeF

# Content box ----------------------------------------------------------------

CONTENT_INSETS = QMarginsF(12.0, 9.0, 12.0, 9.0)
"""Padding between the row edges and its content (left, top, right, bottom)."""

# Fixed-size elements --------------------------------------------------------

AVATAR_SIZE = QSizeF(36.0, 36.0)
"""Square avatar pinned to the top-left corner of the content box."""

AVATAR_CORNER_RADIUS = 18.0
"""Rounds the avatar into a circle."""

RATING_IMAGE_SIZE = QSizeF(80.0, 16.0)
"""Extent of the five-star rating glyph."""

SHOW_MORE_FALLBACK_SIZE = QSizeF(140.0, 20.0)
"""Size of the "show more" affordance when no measured size is supplied."""

# Spacing --------------------------------------------------------------------

AVATAR_TO_USERNAME_SPACING = 10.0
"""Horizontal gap between the avatar and the text column."""

USERNAME_TO_RATING_SPACING = 6.0
"""Vertical gap between the user name and the rating glyph."""

RATING_TO_TEXT_SPACING = 6.0
"""Vertical gap between the rating glyph and the review text."""

TEXT_TO_CREATED_SPACING = 6.0
"""Vertical gap below the review text (above the affordance or the date)."""

SHOW_MORE_TO_CREATED_SPACING = 6.0
"""Vertical gap between the "show more" affordance and the date."""

__all__ = [
    "CONTENT_INSETS",
    "AVATAR_SIZE",
    "AVATAR_CORNER_RADIUS",
    "RATING_IMAGE_SIZE",
    "SHOW_MORE_FALLBACK_SIZE",
    "AVATAR_TO_USERNAME_SPACING",
    "USERNAME_TO_RATING_SPACING",
    "RATING_TO_TEXT_SPACING",
    "TEXT_TO_CREATED_SPACING",
    "SHOW_MORE_TO_CREATED_SPACING",
]
