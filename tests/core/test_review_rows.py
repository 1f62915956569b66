from __future__ import annotations

from iReviews.config import DEFAULT_MAX_LINES, UNLIMITED_LINES
from iReviews.core.rows import (
    CountRow,
    ReviewRow,
    count_text,
    make_count_row,
    make_review_row,
    row_kind,
)
from iReviews.core.styled_text import TextStyle
from iReviews.models.review import Review


def _review(**overrides) -> Review:
    values = dict(
        first_name="Ann",
        last_name="Lee",
        text="Great coffee",
        created="2 March",
        rating=4,
        avatar_url="https://example.com/a.jpg",
    )
    values.update(overrides)
    return Review(**values)


def test_count_text_pluralises() -> None:
    assert count_text(0) == "0 reviews"
    assert count_text(1) == "1 review"
    assert count_text(45) == "45 reviews"


def test_make_review_row_styles_fields(styler, rating_renderer) -> None:
    row = make_review_row(_review(), styler, rating_renderer)

    assert row.user_name.text == "Ann Lee"
    assert row.text.text == "Great coffee"
    assert row.created.text == "2 March"
    assert row.avatar_url == "https://example.com/a.jpg"
    assert row.max_lines == DEFAULT_MAX_LINES
    assert ("Ann Lee", TextStyle.USERNAME) in styler.calls
    assert ("2 March", TextStyle.CREATED) in styler.calls


def test_rating_image_is_rendered_lazily(styler, rating_renderer) -> None:
    row = make_review_row(_review(rating=2), styler, rating_renderer)
    assert rating_renderer.requested == []

    image = row.rating_image()

    assert rating_renderer.requested == [2]
    assert not image.isNull()


def test_expanded_returns_new_row_with_same_identity(styler, rating_renderer) -> None:
    row = make_review_row(_review(), styler, rating_renderer)
    expanded = row.expanded()

    assert expanded is not row
    assert expanded.id == row.id
    assert expanded.max_lines == UNLIMITED_LINES
    assert row.max_lines == DEFAULT_MAX_LINES
    assert expanded.expanded() is expanded


def test_make_count_row_uses_count_style(styler) -> None:
    first = make_count_row(40, styler)
    second = make_count_row(40, styler)

    assert first.count == 40
    assert first.text.text == "40 reviews"
    assert styler.calls[-1] == ("40 reviews", TextStyle.REVIEW_COUNT)
    assert first.id != second.id


def test_row_kind() -> None:
    assert row_kind(CountRow(count=1, text=None)) == "count"  # type: ignore[arg-type]
    assert row_kind(
        ReviewRow(user_name=None, text=None, created=None, rating=1, rating_image=lambda: None)  # type: ignore[arg-type]
    ) == "review"


def test_review_full_name_strips_missing_parts() -> None:
    assert _review(last_name="").full_name == "Ann"
