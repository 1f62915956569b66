"""Serve pages of reviews from a JSON fixture instead of the network."""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..errors import TransportError
from ..utils.logging import get_logger
from .decoder import encode_reviews_page

logger = get_logger("io")


class LocalReviewsProvider:
    """Slice a local ``{"items": [...], "count": N}`` document into pages.

    The provider mimics the remote endpoint: ``fetch_page`` returns the raw
    UTF-8 bytes of one page and leaves decoding to the caller. An optional
    *latency* (in seconds) is slept before each response so background
    loading can be observed.
    """

    def __init__(
        self,
        path: Optional[Path] = None,
        *,
        items: Optional[List[Dict[str, Any]]] = None,
        count: Optional[int] = None,
        latency: float = 0.0,
    ) -> None:
        if path is None and items is None:
            raise ValueError("Either a fixture path or an items list is required")
        self._path = path
        self._items = list(items) if items is not None else None
        self._count = count
        self._latency = max(0.0, latency)

    def _load(self) -> List[Dict[str, Any]]:
        if self._items is not None:
            return self._items
        if self._path is None:
            raise TransportError("No reviews fixture configured")
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                document = json.load(handle)
        except OSError as exc:
            raise TransportError(f"Unable to read reviews fixture {self._path}") from exc
        except json.JSONDecodeError as exc:
            raise TransportError(f"Reviews fixture {self._path} is not valid JSON") from exc

        items = document.get("items", []) if isinstance(document, dict) else []
        self._items = list(items)
        if self._count is None and isinstance(document, dict):
            declared = document.get("count")
            if isinstance(declared, int):
                self._count = declared
        logger.debug("Loaded %d reviews from %s", len(self._items), self._path)
        return self._items

    def fetch_page(self, offset: int, limit: int) -> bytes:
        """Return the encoded page starting at *offset* holding up to *limit* reviews."""

        if offset < 0:
            raise ValueError(f"offset must not be negative, got {offset}")
        if limit <= 0:
            raise ValueError(f"limit must be positive, got {limit}")

        items = self._load()
        if self._latency:
            time.sleep(self._latency)
        total = self._count if self._count is not None else len(items)
        return encode_reviews_page(items[offset : offset + limit], total)

    __call__ = fetch_page


__all__ = ["LocalReviewsProvider"]
