"""Background worker helpers for the reviews list."""

from .image_fetch_worker import ImageFetchSignals, ImageFetchWorker, download_image_bytes
from .page_fetch_worker import PageFetchSignals, PageFetchWorker

__all__ = [
    "ImageFetchSignals",
    "ImageFetchWorker",
    "download_image_bytes",
    "PageFetchSignals",
    "PageFetchWorker",
]
