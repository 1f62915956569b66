import logging

from iReviews.utils.logging import PACKAGE_LOGGER_NAME, get_logger


def test_package_logger_has_single_handler() -> None:
    first = get_logger()
    second = get_logger()

    assert first is second
    assert first.name == PACKAGE_LOGGER_NAME
    assert len(first.handlers) == 1
    assert isinstance(first.handlers[0], logging.StreamHandler)


def test_child_logger_propagates_to_package_logger() -> None:
    child = get_logger("cache")

    assert child.name == f"{PACKAGE_LOGGER_NAME}.cache"
    assert child.parent is get_logger()
