from __future__ import annotations

import json

import pytest

from iReviews.errors import TransportError
from iReviews.io.decoder import decode_reviews_page
from iReviews.io.local_provider import LocalReviewsProvider


def test_serves_slices_with_total(raw_reviews) -> None:
    provider = LocalReviewsProvider(items=raw_reviews(45))

    first = decode_reviews_page(provider.fetch_page(0, 20))
    last = decode_reviews_page(provider.fetch_page(40, 20))

    assert first.count == 45
    assert [review.first_name for review in first.items][:2] == ["User0", "User1"]
    assert len(first.items) == 20
    assert len(last.items) == 5
    assert last.items[-1].first_name == "User44"


def test_declared_count_overrides_item_total(raw_reviews) -> None:
    provider = LocalReviewsProvider(items=raw_reviews(5), count=50)

    assert decode_reviews_page(provider(0, 20)).count == 50


def test_reads_fixture_file(tmp_path, raw_reviews) -> None:
    fixture = tmp_path / "reviews.json"
    fixture.write_text(json.dumps({"items": raw_reviews(3), "count": 3}), encoding="utf-8")
    provider = LocalReviewsProvider(fixture)

    page = decode_reviews_page(provider.fetch_page(1, 20))

    assert [review.first_name for review in page.items] == ["User1", "User2"]
    assert page.count == 3


def test_missing_fixture_is_a_transport_error(tmp_path) -> None:
    provider = LocalReviewsProvider(tmp_path / "missing.json")

    with pytest.raises(TransportError):
        provider.fetch_page(0, 20)


def test_rejects_invalid_bounds(raw_reviews) -> None:
    provider = LocalReviewsProvider(items=raw_reviews(1))

    with pytest.raises(ValueError):
        provider.fetch_page(-1, 20)
    with pytest.raises(ValueError):
        provider.fetch_page(0, 0)


def test_requires_a_source() -> None:
    with pytest.raises(ValueError):
        LocalReviewsProvider()


def test_source_without_path_or_items_is_a_transport_error(raw_reviews) -> None:
    provider = LocalReviewsProvider(items=raw_reviews(1))
    provider._items = None

    with pytest.raises(TransportError):
        provider.fetch_page(0, 20)
