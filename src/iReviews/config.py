"""Tunables for pagination, text clamping and image fetching."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PAGE_LIMIT = 20
"""Number of reviews requested per page."""

SCREENS_TO_LOAD_NEXT_PAGE = 2.5
"""Load the next page once the end of the list is this many screens away."""

LOAD_DEBOUNCE_INTERVAL = 0.3
"""Minimum number of seconds between two accepted scroll triggers."""

DEFAULT_MAX_LINES = 3
"""Line clamp applied to review text until the user expands it."""

UNLIMITED_LINES = 0
"""Sentinel ``max_lines`` value meaning the text is never clamped."""

COUNT_ROW_HEIGHT = 44.0
"""Fixed height of the trailing "N reviews" row."""

IMAGE_FETCH_TIMEOUT = 15.0
"""Seconds before an avatar download is abandoned."""


@dataclass(frozen=True)
class FeedSettings:
    """Bundle of the pagination and clamping tunables used by the list model."""

    page_limit: int = DEFAULT_PAGE_LIMIT
    screens_to_load_next_page: float = SCREENS_TO_LOAD_NEXT_PAGE
    debounce_interval: float = LOAD_DEBOUNCE_INTERVAL
    default_max_lines: int = DEFAULT_MAX_LINES

    def __post_init__(self) -> None:
        if self.page_limit <= 0:
            raise ValueError(f"page_limit must be positive, got {self.page_limit}")
        if self.screens_to_load_next_page <= 0:
            raise ValueError(
                f"screens_to_load_next_page must be positive, got {self.screens_to_load_next_page}"
            )
        if self.debounce_interval < 0:
            raise ValueError(f"debounce_interval must not be negative, got {self.debounce_interval}")
        if self.default_max_lines < 0:
            raise ValueError(f"default_max_lines must not be negative, got {self.default_max_lines}")


__all__ = [
    "DEFAULT_PAGE_LIMIT",
    "SCREENS_TO_LOAD_NEXT_PAGE",
    "LOAD_DEBOUNCE_INTERVAL",
    "DEFAULT_MAX_LINES",
    "UNLIMITED_LINES",
    "COUNT_ROW_HEIGHT",
    "IMAGE_FETCH_TIMEOUT",
    "FeedSettings",
]
