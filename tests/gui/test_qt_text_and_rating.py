import pytest
from PySide6.QtGui import QImage

from iReviews.core.styled_text import QtTextStyler, TextStyle
from iReviews.gui.ui.rating_renderer import MAX_RATING, RatingRenderer

pytestmark = pytest.mark.usefixtures("qapp")

LONG_TEXT = "The coffee was excellent and the staff remembered my order. " * 6


def test_styled_text_reports_emptiness() -> None:
    styler = QtTextStyler()

    assert styler.style("", TextStyle.TEXT).is_empty()
    assert not styler.style("hello", TextStyle.TEXT).is_empty()
    assert styler.style("", TextStyle.TEXT).bounding_size(200.0).isEmpty()


def test_line_height_is_positive() -> None:
    text = QtTextStyler().style("hello", TextStyle.TEXT)

    assert text.line_height() > 0


def test_narrower_width_wraps_taller() -> None:
    text = QtTextStyler().style(LONG_TEXT, TextStyle.TEXT)

    wide = text.bounding_size(600.0)
    narrow = text.bounding_size(150.0)

    assert narrow.height() > wide.height()
    assert narrow.width() <= 150.0


def test_height_limit_clamps_measurement() -> None:
    text = QtTextStyler().style(LONG_TEXT, TextStyle.TEXT)
    limit = text.line_height() * 2

    clamped = text.bounding_size(150.0, limit)

    assert clamped.height() <= limit


def test_styles_use_distinct_fonts() -> None:
    styler = QtTextStyler()

    username = styler.style("Ann", TextStyle.USERNAME)
    created = styler.style("Ann", TextStyle.CREATED)

    assert username != created
    assert username == styler.style("Ann", TextStyle.USERNAME)


def test_rating_image_size() -> None:
    image = RatingRenderer().rating_image(3)

    assert isinstance(image, QImage)
    assert (image.width(), image.height()) == (80, 16)
    assert not image.isNull()


def test_rating_images_are_cached_per_value() -> None:
    renderer = RatingRenderer()

    assert renderer.rating_image(4) is renderer.rating_image(4)
    assert renderer.rating_image(4) is not renderer.rating_image(2)


def test_rating_is_clamped() -> None:
    renderer = RatingRenderer()

    assert renderer.rating_image(12) is renderer.rating_image(MAX_RATING)
    assert renderer.rating_image(-3) is renderer.rating_image(0)
