"""Worker that downloads and decodes a remote image on a background thread."""

from __future__ import annotations

import logging
from typing import Callable

import httpx
from PySide6.QtCore import QObject, QRunnable, Signal
from PySide6.QtGui import QImage

from ....config import IMAGE_FETCH_TIMEOUT

LOGGER = logging.getLogger(__name__)

ImageLoader = Callable[[str], bytes]


def download_image_bytes(url: str) -> bytes:
    """Fetch *url* with :mod:`httpx` and return the response body."""

    response = httpx.get(url, timeout=IMAGE_FETCH_TIMEOUT, follow_redirects=True)
    response.raise_for_status()
    return response.content


class ImageFetchSignals(QObject):
    """Signals emitted by :class:`ImageFetchWorker`."""

    finished = Signal(str, QImage)
    """Emitted with the URL and the decoded image."""

    failed = Signal(str, str)
    """Emitted with the URL and an error description."""


class ImageFetchWorker(QRunnable):
    """Download the bytes behind a URL and decode them into a :class:`QImage`."""

    def __init__(self, url: str, loader: ImageLoader, signals: ImageFetchSignals) -> None:
        super().__init__()
        self.setAutoDelete(True)
        self._url = url
        self._loader = loader
        self._signals = signals

    @property
    def url(self) -> str:
        return self._url

    def run(self) -> None:  # type: ignore[override]
        try:
            data = self._loader(self._url)
        except Exception as exc:
            LOGGER.warning("Downloading %s failed: %s", self._url, exc)
            self._signals.failed.emit(self._url, str(exc))
            return

        image = QImage.fromData(data)
        if image.isNull():
            self._signals.failed.emit(self._url, "Downloaded data is not a decodable image")
            return
        self._signals.finished.emit(self._url, image)


__all__ = ["download_image_bytes", "ImageFetchSignals", "ImageFetchWorker"]
