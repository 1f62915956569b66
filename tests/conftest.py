import math
import os
import sys
from pathlib import Path
from typing import List, Optional

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from PySide6.QtCore import QSizeF  # noqa: E402
from PySide6.QtGui import QImage  # noqa: E402


class FixedAdvanceText:
    """Deterministic stand-in for styled text: every glyph is 8 x 20 points."""

    ADVANCE = 8.0
    LINE_HEIGHT = 20.0

    def __init__(self, text: str) -> None:
        self.text = text

    def is_empty(self) -> bool:
        return not self.text

    def line_height(self) -> float:
        return self.LINE_HEIGHT

    def bounding_size(self, width: float, height: Optional[float] = None) -> QSizeF:
        if not self.text:
            return QSizeF(0.0, 0.0)
        per_line = max(1, int(width // self.ADVANCE))
        lines = math.ceil(len(self.text) / per_line)
        text_width = min(len(self.text), per_line) * self.ADVANCE
        text_height = lines * self.LINE_HEIGHT
        if height is not None:
            text_height = min(text_height, max(0.0, height))
        return QSizeF(text_width, text_height)

    def __repr__(self) -> str:
        return f"FixedAdvanceText({self.text!r})"


class FixedAdvanceStyler:
    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def style(self, text, token):
        self.calls.append((text, token))
        return FixedAdvanceText(text)


class StubRatingRenderer:
    def __init__(self) -> None:
        self.requested: List[int] = []

    def rating_image(self, rating: int) -> QImage:
        self.requested.append(rating)
        return QImage(80, 16, QImage.Format.Format_ARGB32)


class SyncPool:
    """Thread-pool double that runs every runnable inline."""

    def __init__(self) -> None:
        self.started = []

    def start(self, runnable) -> None:
        self.started.append(runnable)
        runnable.run()


class DeferredPool:
    """Thread-pool double that queues runnables until the test runs them."""

    def __init__(self) -> None:
        self.pending = []
        self.started = []

    def start(self, runnable) -> None:
        self.started.append(runnable)
        self.pending.append(runnable)

    def run_next(self) -> None:
        self.pending.pop(0).run()

    def run_all(self) -> None:
        while self.pending:
            self.run_next()


@pytest.fixture
def styler():
    return FixedAdvanceStyler()


@pytest.fixture
def make_text():
    return FixedAdvanceText


@pytest.fixture
def rating_renderer():
    return StubRatingRenderer()


@pytest.fixture
def sync_pool():
    return SyncPool()


@pytest.fixture
def deferred_pool():
    return DeferredPool()


def make_raw_reviews(count: int, *, text: str = "Nice place", start: int = 0) -> List[dict]:
    return [
        {
            "first_name": f"User{index}",
            "last_name": "Tester",
            "text": text,
            "created": "1 March",
            "rating": (index % 5) + 1,
            "avatar_url": f"https://example.com/avatars/{index}.jpg",
        }
        for index in range(start, start + count)
    ]


@pytest.fixture
def raw_reviews():
    return make_raw_reviews
