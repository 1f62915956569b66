"""List model that pages reviews in and exposes them to a Qt view."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, Union
from uuid import UUID

from PySide6.QtCore import (
    QAbstractListModel,
    QModelIndex,
    QObject,
    QSize,
    QThreadPool,
    Qt,
    Signal,
    Slot,
)
from PySide6.QtGui import QImage

from ....cache.image_cache import ImageCache
from ....config import FeedSettings
from ....core.pagination import PaginationController, PaginationState
from ....core.row_layout import LayoutResult, RowLayoutEngine, sanitize_width
from ....core.rows import CountRow, ReviewRow, RowItem, make_count_row, make_review_row
from ....core.styled_text import UNBOUNDED_EXTENT, QtTextStyler, TextStyle, TextStyler
from ....errors import ReviewsError
from ....io.decoder import decode_reviews_page
from ....models.review import ReviewsPage
from ..rating_renderer import RatingRenderer
from ..tasks.page_fetch_worker import DecodePage, FetchPage, PageFetchSignals, PageFetchWorker
from .review_row_adapter import ReviewRowAdapter
from .roles import LAYOUT_ROLES, Roles, role_names

logger = logging.getLogger(__name__)

SHOW_MORE_TEXT = "Show full review..."


class LoadState(Enum):
    IDLE = "idle"
    LOADING = "loading"


@dataclass(frozen=True)
class ReviewsListState:
    """Immutable snapshot handed to observers after every change."""

    items: Tuple[RowItem, ...]
    offset: int
    limit: int
    more_available: bool
    in_flight: bool

    @property
    def review_count(self) -> int:
        return sum(1 for item in self.items if isinstance(item, ReviewRow))


class ReviewsListModel(QAbstractListModel):
    """Own the row sequence and pagination state of the reviews list.

    Pages are fetched through the injected ``fetch_page(offset, limit)``
    callable on a :class:`QThreadPool`; the decoded result is merged back on
    the thread that owns the model. Only one page is ever in flight. Failed
    pages leave the offset untouched so the next accepted scroll trigger asks
    for the same page again.
    """

    stateChanged = Signal(object)
    """Emitted with a :class:`ReviewsListState` after items change."""

    def __init__(
        self,
        fetch_page: FetchPage,
        *,
        decoder: DecodePage = decode_reviews_page,
        styler: Optional[TextStyler] = None,
        rating_renderer: Optional[RatingRenderer] = None,
        image_cache: Optional[ImageCache] = None,
        layout_engine: Optional[RowLayoutEngine] = None,
        settings: Optional[FeedSettings] = None,
        pool: Optional[QThreadPool] = None,
        placeholder_avatar: Optional[QImage] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or FeedSettings()
        self._fetch_page = fetch_page
        self._decoder = decoder
        self._styler: TextStyler = styler or QtTextStyler()
        self._rating_renderer = rating_renderer or RatingRenderer()
        self._image_cache = image_cache or ImageCache.shared()
        self._pool = pool

        if layout_engine is None:
            show_more = self._styler.style(SHOW_MORE_TEXT, TextStyle.SHOW_MORE)
            layout_engine = RowLayoutEngine(show_more.bounding_size(UNBOUNDED_EXTENT))
        self._layout_engine = layout_engine
        self._layout_cache: Dict[UUID, Tuple[Tuple[Any, float], LayoutResult]] = {}
        self._layout_width = 0.0

        self._items: List[RowItem] = []
        self._hidden_count_row: Optional[CountRow] = None
        self._pagination = PaginationState(limit=self._settings.page_limit)
        self._controller = PaginationController(
            self._pagination,
            screens_to_load_next_page=self._settings.screens_to_load_next_page,
            debounce_interval=self._settings.debounce_interval,
        )
        self.on_state_change: Optional[Callable[[ReviewsListState], None]] = None

        self._row_adapter = ReviewRowAdapter(self._image_cache, placeholder_avatar)

        self._page_signals = PageFetchSignals(self)
        self._page_signals.pageReady.connect(self._on_page_ready)
        self._page_signals.failed.connect(self._on_page_failed)
        self._image_cache.imageReady.connect(self._on_image_ready)

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------
    @property
    def pagination(self) -> PaginationController:
        return self._controller

    @property
    def load_state(self) -> LoadState:
        return LoadState.LOADING if self._pagination.in_flight else LoadState.IDLE

    @property
    def layout_engine(self) -> RowLayoutEngine:
        return self._layout_engine

    def state(self) -> ReviewsListState:
        pagination = self._pagination
        return ReviewsListState(
            items=tuple(self._items),
            offset=pagination.offset,
            limit=pagination.limit,
            more_available=pagination.more_available,
            in_flight=pagination.in_flight,
        )

    def row_count(self) -> int:
        return len(self._items)

    def row_at(self, index: int) -> RowItem:
        if not (0 <= index < len(self._items)):
            raise IndexError(f"Row index {index} out of range")
        return self._items[index]

    def layout_at(self, index: int, available: Union[float, QSize]) -> LayoutResult:
        """Return the row geometry at *index*, reusing the per-row cache."""

        row = self.row_at(index)
        width = _width_of(available)
        key = (row.max_lines if isinstance(row, ReviewRow) else None, width)
        cached = self._layout_cache.get(row.id)
        if cached is not None and cached[0] == key:
            return cached[1]
        result = self._layout_engine.measure(row, width)
        self._layout_cache[row.id] = (key, result)
        return result

    def height_at(self, index: int, available: Union[float, QSize]) -> float:
        return self.layout_at(index, available).height

    def set_layout_width(self, width: float) -> None:
        """Record the width the attached view lays rows out at."""

        width = sanitize_width(width)
        if width == self._layout_width:
            return
        self._layout_width = width
        if self._items:
            top = self.index(0, 0)
            bottom = self.index(len(self._items) - 1, 0)
            self.dataChanged.emit(top, bottom, [Qt.SizeHintRole, *LAYOUT_ROLES])

    # ------------------------------------------------------------------
    # Paging
    # ------------------------------------------------------------------
    def request_next_page(self) -> bool:
        """Dispatch the next page fetch; return ``False`` when gated."""

        pagination = self._pagination
        if not pagination.can_request:
            logger.debug(
                "ReviewsListModel: page request ignored (in_flight=%s, more_available=%s)",
                pagination.in_flight,
                pagination.more_available,
            )
            return False

        pagination.in_flight = True
        self._hide_count_row()

        logger.debug(
            "ReviewsListModel: requesting page offset=%d limit=%d",
            pagination.offset,
            pagination.limit,
        )
        worker = PageFetchWorker(
            self._fetch_page,
            self._decoder,
            self._page_signals,
            offset=pagination.offset,
            limit=pagination.limit,
        )
        self._thread_pool().start(worker)
        return True

    def handle_scroll(
        self,
        content_height: float,
        viewport_height: float,
        target_offset_y: float,
        now: Optional[float] = None,
    ) -> bool:
        """Request the next page if the scroll target is close to the end."""

        distance = PaginationController.distance_to_end(content_height, viewport_height, target_offset_y)
        if self._controller.should_trigger_load(distance, viewport_height, now):
            return self.request_next_page()
        return False

    @Slot(int, int, object)
    def _on_page_ready(self, offset: int, limit: int, page: ReviewsPage) -> None:
        pagination = self._pagination
        if not pagination.in_flight:
            logger.warning("ReviewsListModel: dropping unrequested page for offset %d", offset)
            return
        if offset != pagination.offset:
            # A mismatched page fails the pending request.
            self._on_page_failed(
                offset,
                limit,
                ReviewsError(f"page for offset {offset} does not match expected offset {pagination.offset}"),
            )
            return

        new_rows = [
            make_review_row(
                review,
                self._styler,
                self._rating_renderer,
                max_lines=self._settings.default_max_lines,
            )
            for review in page.items
        ]
        more_available = pagination.offset + pagination.limit < page.count
        shown_count = pagination.offset + pagination.limit if more_available else page.count

        if new_rows:
            start = len(self._items)
            self.beginInsertRows(QModelIndex(), start, start + len(new_rows) - 1)
            self._items.extend(new_rows)
            self.endInsertRows()

        pagination.offset += pagination.limit
        pagination.more_available = more_available
        pagination.in_flight = False
        self._hidden_count_row = None
        self._place_count_row(make_count_row(shown_count, self._styler))

        logger.info(
            "ReviewsListModel: merged %d reviews (offset=%d, total=%d, more=%s)",
            len(new_rows),
            pagination.offset,
            page.count,
            more_available,
        )
        self._notify()

    @Slot(int, int, object)
    def _on_page_failed(self, offset: int, limit: int, error: ReviewsError) -> None:
        pagination = self._pagination
        pagination.in_flight = False
        logger.warning(
            "ReviewsListModel: page at offset %d failed (%s): %s",
            offset,
            type(error).__name__,
            error,
        )
        hidden = self._hidden_count_row
        self._hidden_count_row = None
        if hidden is not None:
            self._place_count_row(hidden)

    # ------------------------------------------------------------------
    # Row expansion
    # ------------------------------------------------------------------
    def expand_row(self, row_id: Union[UUID, str]) -> bool:
        """Lift the line clamp of the review identified by *row_id*.

        Unknown identifiers and rows that are already expanded are ignored.
        """

        if isinstance(row_id, str):
            try:
                row_id = UUID(row_id)
            except ValueError:
                return False

        for position, row in enumerate(self._items):
            if isinstance(row, ReviewRow) and row.id == row_id:
                break
        else:
            return False

        if row.is_expanded:
            return False

        self._items[position] = row.expanded()
        self._layout_cache.pop(row.id, None)
        model_index = self.index(position, 0)
        self.dataChanged.emit(
            model_index,
            model_index,
            [Qt.SizeHintRole, Roles.MAX_LINES, *LAYOUT_ROLES],
        )
        self._notify()
        return True

    # ------------------------------------------------------------------
    # Qt model implementation
    # ------------------------------------------------------------------
    def rowCount(self, parent: QModelIndex | None = None) -> int:  # type: ignore[override]
        if parent is not None and parent.isValid():
            return 0
        return len(self._items)

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole):  # type: ignore[override]
        if not index.isValid() or not (0 <= index.row() < len(self._items)):
            return None
        row_index = index.row()
        if role == Qt.SizeHintRole:
            height = self.height_at(row_index, self._layout_width)
            return QSize(int(self._layout_width), int(math.ceil(height)))
        layout = self.layout_at(row_index, self._layout_width) if role in LAYOUT_ROLES else None
        return self._row_adapter.data(self._items[row_index], role, layout)

    def roleNames(self) -> Dict[int, bytes]:  # type: ignore[override]
        return role_names(super().roleNames())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _hide_count_row(self) -> None:
        if not self._items or not isinstance(self._items[-1], CountRow):
            return
        last = len(self._items) - 1
        self.beginRemoveRows(QModelIndex(), last, last)
        count_row = self._items.pop()
        self.endRemoveRows()
        self._layout_cache.pop(count_row.id, None)
        self._hidden_count_row = count_row

    def _place_count_row(self, count_row: CountRow) -> None:
        if self._items and isinstance(self._items[-1], CountRow):
            last = len(self._items) - 1
            self._layout_cache.pop(self._items[last].id, None)
            self._items[last] = count_row
            model_index = self.index(last, 0)
            self.dataChanged.emit(model_index, model_index)
            return
        position = len(self._items)
        self.beginInsertRows(QModelIndex(), position, position)
        self._items.append(count_row)
        self.endInsertRows()

    def _notify(self) -> None:
        snapshot = self.state()
        self.stateChanged.emit(snapshot)
        if self.on_state_change is not None:
            self.on_state_change(snapshot)

    @Slot(str, QImage)
    def _on_image_ready(self, url: str, image: QImage) -> None:
        for position, row in enumerate(self._items):
            if isinstance(row, ReviewRow) and row.avatar_url == url:
                model_index = self.index(position, 0)
                self.dataChanged.emit(model_index, model_index, [Roles.AVATAR, Qt.DecorationRole])

    def _thread_pool(self) -> QThreadPool:
        return self._pool if self._pool is not None else QThreadPool.globalInstance()


def _width_of(available: Union[float, QSize, None]) -> float:
    width = getattr(available, "width", None)
    if callable(width):
        return sanitize_width(width())
    return sanitize_width(available)


__all__ = ["LoadState", "ReviewsListModel", "ReviewsListState", "SHOW_MORE_TEXT"]
