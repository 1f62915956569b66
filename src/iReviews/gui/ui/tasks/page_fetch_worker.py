"""Background worker that fetches and decodes one page of reviews."""

from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import QObject, QRunnable, Signal

from ....errors import DecodeError, ReviewsError, TransportError
from ....models.review import ReviewsPage

LOGGER = logging.getLogger(__name__)

FetchPage = Callable[[int, int], bytes]
DecodePage = Callable[[bytes], ReviewsPage]


class PageFetchSignals(QObject):
    """Signals emitted by :class:`PageFetchWorker`."""

    pageReady = Signal(int, int, object)  # offset, limit, ReviewsPage
    failed = Signal(int, int, object)  # offset, limit, ReviewsError


class PageFetchWorker(QRunnable):
    """Run ``fetch_page(offset, limit)`` and the decoder off the GUI thread.

    Transport failures are wrapped in :class:`TransportError`; anything the
    decoder raises surfaces as :class:`DecodeError`. Exactly one of
    ``pageReady`` or ``failed`` is emitted per run.
    """

    def __init__(
        self,
        fetch_page: FetchPage,
        decoder: DecodePage,
        signals: PageFetchSignals,
        *,
        offset: int,
        limit: int,
    ) -> None:
        super().__init__()
        self.setAutoDelete(True)
        self._fetch_page = fetch_page
        self._decoder = decoder
        self._signals = signals
        self._offset = offset
        self._limit = limit

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def limit(self) -> int:
        return self._limit

    def _fetch(self) -> bytes:
        try:
            return self._fetch_page(self._offset, self._limit)
        except TransportError:
            raise
        except Exception as exc:
            raise TransportError(
                f"Fetching reviews at offset {self._offset} failed: {exc}"
            ) from exc

    def _decode(self, data: bytes) -> ReviewsPage:
        try:
            return self._decoder(data)
        except DecodeError:
            raise
        except Exception as exc:
            raise DecodeError(f"Decoding reviews at offset {self._offset} failed: {exc}") from exc

    def run(self) -> None:  # type: ignore[override]
        try:
            page = self._decode(self._fetch())
        except ReviewsError as exc:
            LOGGER.debug("Page fetch at offset %d failed: %s", self._offset, exc)
            self._signals.failed.emit(self._offset, self._limit, exc)
            return
        self._signals.pageReady.emit(self._offset, self._limit, page)


__all__ = ["PageFetchSignals", "PageFetchWorker"]
