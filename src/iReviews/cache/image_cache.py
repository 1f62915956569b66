"""Thread-safe, URL-keyed cache of downloaded images.

Lookups are synchronous. A miss schedules a single background download per
URL; callers that ask for the same URL while it is in flight are attached to
the pending download instead of starting another one. Results are stored and
delivered on the thread that owns the cache, which is the GUI thread in the
application.
"""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Callable, ClassVar, Dict, List, Optional, Tuple

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot
from PySide6.QtGui import QImage

from ..gui.ui.tasks.image_fetch_worker import (
    ImageFetchSignals,
    ImageFetchWorker,
    ImageLoader,
    download_image_bytes,
)
from ..utils.logging import get_logger

logger = get_logger("cache")

ImageCallback = Callable[[str, Optional[QImage]], None]


class ImageCache(QObject):
    """Process-wide store mapping URLs to decoded :class:`QImage` objects."""

    imageReady = Signal(str, QImage)
    imageFailed = Signal(str, str)

    _shared: ClassVar[Optional["ImageCache"]] = None
    _shared_lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def shared(cls) -> "ImageCache":
        """Return the process-wide cache, creating it on first use."""
        with cls._shared_lock:
            if cls._shared is None:
                cls._shared = cls()
            return cls._shared

    def __init__(
        self,
        loader: Optional[ImageLoader] = None,
        pool: Optional[QThreadPool] = None,
        *,
        max_entries: Optional[int] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        if max_entries is not None and max_entries <= 0:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self._loader: ImageLoader = loader or download_image_bytes
        self._pool = pool
        self._max_entries = max_entries
        self._lock = threading.Lock()
        self._images: "OrderedDict[str, QImage]" = OrderedDict()
        self._in_flight: Dict[str, List[Tuple[Optional[ImageCallback], Optional[QImage]]]] = {}

        self._signals = ImageFetchSignals(self)
        self._signals.finished.connect(self._on_fetch_finished)
        self._signals.failed.connect(self._on_fetch_failed)

    # ------------------------------------------------------------------
    # Synchronous accessors
    # ------------------------------------------------------------------
    def image_for(self, url: Optional[str]) -> Optional[QImage]:
        if not url:
            return None
        with self._lock:
            image = self._images.get(url)
            if image is not None:
                self._images.move_to_end(url)
            return image

    def contains(self, url: str) -> bool:
        with self._lock:
            return url in self._images

    def is_fetching(self, url: str) -> bool:
        with self._lock:
            return url in self._in_flight

    def insert(self, url: str, image: QImage) -> None:
        with self._lock:
            self._store_locked(url, image)

    def evict(self, url: str) -> bool:
        """Drop *url* from the cache; return ``True`` when an entry existed."""
        with self._lock:
            return self._images.pop(url, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._images.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._images)

    # ------------------------------------------------------------------
    # Get-or-fetch
    # ------------------------------------------------------------------
    def get_or_fetch(
        self,
        url: Optional[str],
        callback: Optional[ImageCallback] = None,
        placeholder: Optional[QImage] = None,
    ) -> Optional[QImage]:
        """Return the cached image for *url* or *placeholder* while it downloads.

        On a hit the cached image is returned and *callback* is not invoked.
        On a miss *callback* receives ``(url, image)`` once the download
        resolves, or ``(url, placeholder)`` if it fails; the placeholder is
        ``None`` when none was supplied. A missing URL simply yields
        *placeholder*.
        """

        if not url:
            return placeholder

        with self._lock:
            cached = self._images.get(url)
            if cached is not None:
                self._images.move_to_end(url)
                return cached
            waiters = self._in_flight.get(url)
            start_fetch = waiters is None
            if start_fetch:
                waiters = []
                self._in_flight[url] = waiters
            waiters.append((callback, placeholder))

        if start_fetch:
            logger.debug("Image cache miss, fetching %s", url)
            worker = ImageFetchWorker(url, self._loader, self._signals)
            self._thread_pool().start(worker)
        return placeholder

    # ------------------------------------------------------------------
    # Worker callbacks (owner thread)
    # ------------------------------------------------------------------
    @Slot(str, QImage)
    def _on_fetch_finished(self, url: str, image: QImage) -> None:
        with self._lock:
            self._store_locked(url, image)
            waiters = self._in_flight.pop(url, [])
        for callback, _placeholder in waiters:
            if callback is not None:
                callback(url, image)
        self.imageReady.emit(url, image)

    @Slot(str, str)
    def _on_fetch_failed(self, url: str, message: str) -> None:
        with self._lock:
            waiters = self._in_flight.pop(url, [])
        logger.warning("Image fetch failed for %s: %s", url, message)
        for callback, placeholder in waiters:
            if callback is not None:
                callback(url, placeholder)
        self.imageFailed.emit(url, message)

    # ------------------------------------------------------------------
    def _store_locked(self, url: str, image: QImage) -> None:
        self._images[url] = image
        self._images.move_to_end(url)
        if self._max_entries is not None:
            while len(self._images) > self._max_entries:
                self._images.popitem(last=False)

    def _thread_pool(self) -> QThreadPool:
        return self._pool if self._pool is not None else QThreadPool.globalInstance()


__all__ = ["ImageCache"]
