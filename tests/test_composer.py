from __future__ import annotations

from datetime import datetime, timezone

import pytest
from PIL import Image, ImageFont

from cruise_countdown.data.snapshot import PLACEHOLDER_SNAPSHOT, CountdownSnapshot, empty_snapshot
from cruise_countdown.rendering.composer import (
    COLOR_BACKGROUND,
    COLORS,
    canvas_size,
    compose_frame,
    fit_lines,
)
from cruise_countdown.rendering.emulator import save_frame
from cruise_countdown.rendering.renderer import render
from cruise_countdown.rendering.view_data import ACCENT, SizeCategory

NOW = datetime(2025, 8, 23, 12, 0, tzinfo=timezone.utc)


def _accent_pixels(image: Image.Image) -> int:
    accent = COLORS[ACCENT]
    return sum(1 for pixel in image.getdata() if pixel == accent)


@pytest.mark.parametrize(
    ("size", "expected"),
    [(SizeCategory.COMPACT, (340, 340)), (SizeCategory.STANDARD, (728, 340))],
)
def test_compose_frame_size_and_mode(size: SizeCategory, expected: tuple[int, int]) -> None:
    image = compose_frame(render(PLACEHOLDER_SNAPSHOT, size))

    assert isinstance(image, Image.Image)
    assert image.size == expected
    assert image.mode == "RGB"


def test_no_data_canvas_follows_requested_size() -> None:
    view = render(empty_snapshot(NOW), SizeCategory.STANDARD)

    assert canvas_size(view, SizeCategory.STANDARD, scale=1) == (364, 170)
    assert canvas_size(view, "unknown", scale=1) == (170, 170)
    assert compose_frame(view, size=SizeCategory.STANDARD, scale=1).size == (364, 170)


def test_no_data_frame_has_no_accent() -> None:
    image = compose_frame(render(empty_snapshot(NOW), SizeCategory.COMPACT))

    assert _accent_pixels(image) == 0
    assert image.getpixel((0, 0)) == COLOR_BACKGROUND


@pytest.mark.parametrize("size", [SizeCategory.COMPACT, SizeCategory.STANDARD])
def test_countdown_frame_draws_accent_icon(size: SizeCategory) -> None:
    image = compose_frame(render(PLACEHOLDER_SNAPSHOT, size))

    assert _accent_pixels(image) > 0


def test_compose_frame_rejects_bad_scale() -> None:
    with pytest.raises(ValueError):
        compose_frame(render(PLACEHOLDER_SNAPSHOT, SizeCategory.COMPACT), scale=0)


def test_empty_text_fields_smoke() -> None:
    snapshot = CountdownSnapshot(
        as_of_time=NOW,
        event_name="",
        vehicle_name="",
        destination_text="",
        departure_time=NOW,
        days_remaining=0,
        has_data=True,
    )

    image = compose_frame(render(snapshot, SizeCategory.STANDARD), scale=1)

    assert image.size == (364, 170)


def test_fit_lines_truncates_with_ellipsis() -> None:
    font = ImageFont.load_default(size=12)
    text = "Miami to Caribbean Islands and back again by way of the Panama Canal"

    lines = fit_lines(text, font, 80, 2)

    assert len(lines) == 2
    assert lines[-1].endswith("…")
    assert all(font.getlength(line) <= 80 for line in lines)


def test_fit_lines_short_text_untouched() -> None:
    font = ImageFont.load_default(size=12)

    assert fit_lines("Norwegian Aqua", font, 500, 1) == ["Norwegian Aqua"]
    assert fit_lines("", font, 500, 1) == []


def test_save_frame_writes_png(tmp_path) -> None:
    image = compose_frame(render(PLACEHOLDER_SNAPSHOT, SizeCategory.COMPACT), scale=1)

    path = save_frame(image, str(tmp_path / "out" / "frame.png"))

    assert path.exists()
    with Image.open(path) as saved:
        assert saved.size == (170, 170)
