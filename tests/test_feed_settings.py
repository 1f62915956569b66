from __future__ import annotations

import pytest

from iReviews.config import (
    DEFAULT_MAX_LINES,
    DEFAULT_PAGE_LIMIT,
    LOAD_DEBOUNCE_INTERVAL,
    SCREENS_TO_LOAD_NEXT_PAGE,
    FeedSettings,
)


def test_defaults() -> None:
    settings = FeedSettings()

    assert settings.page_limit == DEFAULT_PAGE_LIMIT == 20
    assert settings.screens_to_load_next_page == SCREENS_TO_LOAD_NEXT_PAGE == 2.5
    assert settings.debounce_interval == LOAD_DEBOUNCE_INTERVAL == 0.3
    assert settings.default_max_lines == DEFAULT_MAX_LINES == 3


@pytest.mark.parametrize(
    "overrides",
    [
        {"page_limit": 0},
        {"screens_to_load_next_page": 0.0},
        {"debounce_interval": -0.1},
        {"default_max_lines": -1},
    ],
)
def test_invalid_settings_are_rejected(overrides) -> None:
    with pytest.raises(ValueError):
        FeedSettings(**overrides)
