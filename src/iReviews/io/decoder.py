"""Decode the JSON reviews payload into :class:`ReviewsPage` records."""

from __future__ import annotations

import json
from typing import Any, Iterable, Mapping

from ..errors import DecodeError
from ..models.review import Review, ReviewsPage

_STRING_FIELDS = ("first_name", "last_name", "text", "created")


def _review_from_mapping(index: int, raw: Any) -> Review:
    if not isinstance(raw, Mapping):
        raise DecodeError(f"Review #{index} is not an object")

    values = {}
    for key in _STRING_FIELDS:
        value = raw.get(key)
        if not isinstance(value, str):
            raise DecodeError(f"Review #{index} has a missing or non-string '{key}'")
        values[key] = value

    rating = raw.get("rating")
    # ``bool`` is an ``int`` subclass but never a valid rating.
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise DecodeError(f"Review #{index} has a missing or non-integer 'rating'")

    avatar_url = raw.get("avatar_url")
    if avatar_url is not None and not isinstance(avatar_url, str):
        raise DecodeError(f"Review #{index} has a non-string 'avatar_url'")

    return Review(rating=rating, avatar_url=avatar_url or None, **values)


def decode_reviews_page(data: bytes | str) -> ReviewsPage:
    """Decode *data* into a :class:`ReviewsPage` or raise :class:`DecodeError`."""

    try:
        payload = json.loads(data)
    except (TypeError, ValueError) as exc:
        # ``UnicodeDecodeError`` and ``json.JSONDecodeError`` are both ``ValueError``.
        raise DecodeError("Invalid JSON in reviews payload") from exc

    if not isinstance(payload, Mapping):
        raise DecodeError("Reviews payload must be a JSON object")

    count = payload.get("count")
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise DecodeError("Reviews payload has a missing or invalid 'count'")

    items = payload.get("items")
    if not isinstance(items, list):
        raise DecodeError("Reviews payload has a missing or invalid 'items' list")

    reviews = tuple(_review_from_mapping(index, raw) for index, raw in enumerate(items))
    return ReviewsPage(items=reviews, count=count)


def encode_reviews_page(items: Iterable[Mapping[str, Any]], count: int) -> bytes:
    """Serialise raw review mappings into the wire format read by the decoder."""

    payload = {"items": list(items), "count": int(count)}
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


__all__ = ["decode_reviews_page", "encode_reviews_page"]
