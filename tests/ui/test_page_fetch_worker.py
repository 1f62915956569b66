from __future__ import annotations

from typing import List

import pytest

from iReviews.errors import DecodeError, TransportError
from iReviews.gui.ui.tasks.page_fetch_worker import PageFetchSignals, PageFetchWorker
from iReviews.io.decoder import decode_reviews_page, encode_reviews_page


@pytest.fixture
def captured():
    signals = PageFetchSignals()
    ready: List[tuple] = []
    failed: List[tuple] = []
    signals.pageReady.connect(lambda offset, limit, page: ready.append((offset, limit, page)))
    signals.failed.connect(lambda offset, limit, error: failed.append((offset, limit, error)))
    return signals, ready, failed


def test_emits_decoded_page(captured, raw_reviews) -> None:
    signals, ready, failed = captured
    calls = []

    def fetch(offset, limit):
        calls.append((offset, limit))
        return encode_reviews_page(raw_reviews(3), 45)

    PageFetchWorker(fetch, decode_reviews_page, signals, offset=20, limit=20).run()

    assert calls == [(20, 20)]
    assert failed == []
    offset, limit, page = ready[0]
    assert (offset, limit, page.count, len(page.items)) == (20, 20, 45, 3)


def test_transport_failure_is_wrapped(captured) -> None:
    signals, ready, failed = captured

    def fetch(offset, limit):
        raise OSError("connection reset")

    PageFetchWorker(fetch, decode_reviews_page, signals, offset=0, limit=20).run()

    assert ready == []
    _, _, error = failed[0]
    assert isinstance(error, TransportError)
    assert isinstance(error.__cause__, OSError)


def test_transport_error_passes_through(captured) -> None:
    signals, _, failed = captured
    original = TransportError("timeout")

    def fetch(offset, limit):
        raise original

    PageFetchWorker(fetch, decode_reviews_page, signals, offset=0, limit=20).run()

    assert failed[0][2] is original


def test_decode_failure(captured) -> None:
    signals, ready, failed = captured

    PageFetchWorker(lambda o, l: b"{", decode_reviews_page, signals, offset=40, limit=20).run()

    assert ready == []
    assert failed[0][0] == 40
    assert isinstance(failed[0][2], DecodeError)


def test_unexpected_decoder_exception_becomes_decode_error(captured) -> None:
    signals, _, failed = captured

    def decoder(data):
        raise KeyError("items")

    PageFetchWorker(lambda o, l: b"{}", decoder, signals, offset=0, limit=20).run()

    assert isinstance(failed[0][2], DecodeError)
    assert isinstance(failed[0][2].__cause__, KeyError)
