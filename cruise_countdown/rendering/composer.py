"""Frame composer that rasterizes countdown views."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from PIL import Image, ImageDraw, ImageFont

from cruise_countdown.rendering.view_data import (
    ACCENT,
    PRIMARY,
    SECONDARY,
    CompactView,
    IconSpec,
    NoDataView,
    SizeCategory,
    StandardView,
    TextSpec,
    WidgetView,
)

# Canvas sizes in points; multiplied by the scale factor.
COMPACT_SIZE = (170, 170)
STANDARD_SIZE = (364, 170)

STACK_SPACING = 8
TIGHT_SPACING = 4
COLUMN_SPACING = 16
LEFT_COLUMN_WIDTH = 110
ELLIPSIS = "…"

COLOR_BACKGROUND = (242, 242, 247)
COLORS = {
    PRIMARY: (0, 0, 0),
    SECONDARY: (110, 110, 115),
    ACCENT: (0, 122, 255),
}
BOLD_WEIGHTS = {"semibold", "bold"}


@lru_cache(maxsize=32)
def _font(size_px: int) -> ImageFont.FreeTypeFont:
    return ImageFont.load_default(size=size_px)


def _color(name: str) -> tuple[int, int, int]:
    return COLORS.get(name, COLORS[PRIMARY])


def _line_height(font: ImageFont.FreeTypeFont) -> int:
    bbox = font.getbbox("Ay")
    return bbox[3] - bbox[1] + 2


def fit_lines(text: str, font: ImageFont.FreeTypeFont, width: float, max_lines: int) -> list[str]:
    """Word-wrap text into at most max_lines, ellipsizing the last line on overflow."""
    words = text.split()
    if not words or max_lines < 1:
        return []

    lines: list[str] = []
    current = ""
    index = 0
    while index < len(words):
        candidate = f"{current} {words[index]}" if current else words[index]
        if font.getlength(candidate) <= width or not current:
            current = candidate
            index += 1
            continue
        lines.append(current)
        current = ""
        if len(lines) == max_lines:
            break
    if current and len(lines) < max_lines:
        lines.append(current)

    overflow = index < len(words)
    last = lines[-1]
    if overflow or font.getlength(last) > width:
        while last and font.getlength(last + ELLIPSIS) > width:
            last = last[:-1]
        lines[-1] = last.rstrip() + ELLIPSIS
    return lines


def _draw_text(
    draw: ImageDraw.ImageDraw,
    spec: TextSpec,
    left: int,
    top: int,
    width: int,
    scale: int,
) -> int:
    """Draw a text block and return the y coordinate just below it."""
    font = _font(spec.size * scale)
    stroke = 1 if spec.weight in BOLD_WEIGHTS and scale > 1 else 0
    fill = _color(spec.color)
    line_height = _line_height(font)
    y = top
    for line in fit_lines(spec.text, font, width, spec.max_lines):
        x = left
        if spec.align == "center":
            x = left + int((width - font.getlength(line)) // 2)
        elif spec.align == "trailing":
            x = left + int(width - font.getlength(line))
        draw.text((x, y), line, font=font, fill=fill, stroke_width=stroke, stroke_fill=fill)
        y += line_height
    return y


def _text_block_height(spec: TextSpec, width: int, scale: int) -> int:
    font = _font(spec.size * scale)
    return len(fit_lines(spec.text, font, width, spec.max_lines)) * _line_height(font)


def _draw_icon(draw: ImageDraw.ImageDraw, spec: IconSpec, left: int, top: int, scale: int) -> int:
    """Draw an icon from primitives and return the y coordinate just below it."""
    s = spec.size * scale
    color = _color(spec.color)

    def at(fx: float, fy: float) -> tuple[int, int]:
        return (left + int(fx * s), top + int(fy * s))

    if spec.name == "calendar":
        draw.rectangle([at(0.05, 0.15), at(0.95, 0.95)], outline=color, width=max(1, scale))
        draw.rectangle([at(0.05, 0.15), at(0.95, 0.35)], fill=color)
        return top + s

    filled = spec.name.endswith(".fill")
    fill = color if filled else None
    outline = max(1, scale)
    draw.polygon([at(0.55, 0.0), at(0.55, 0.65), at(0.1, 0.65)], fill=fill, outline=color, width=outline)
    draw.polygon([at(0.62, 0.15), at(0.62, 0.65), at(0.9, 0.65)], fill=fill, outline=color, width=outline)
    draw.polygon(
        [at(0.0, 0.72), at(1.0, 0.72), at(0.8, 1.0), at(0.2, 1.0)],
        fill=fill,
        outline=color,
        width=outline,
    )
    return top + s


def _compose_no_data(draw: ImageDraw.ImageDraw, view: NoDataView, width: int, height: int, scale: int) -> None:
    pad = view.padding * scale
    inner = width - 2 * pad
    icon_size = view.icon.size * scale
    block = (
        icon_size
        + STACK_SPACING * scale
        + _text_block_height(view.message, inner, scale)
        + STACK_SPACING * scale
        + _text_block_height(view.hint, inner, scale)
    )
    y = max(pad, (height - block) // 2)
    y = _draw_icon(draw, view.icon, (width - icon_size) // 2, y, scale) + STACK_SPACING * scale
    y = _draw_text(draw, view.message, pad, y, inner, scale) + STACK_SPACING * scale
    _draw_text(draw, view.hint, pad, y, inner, scale)


def _compose_compact(draw: ImageDraw.ImageDraw, view: CompactView, width: int, height: int, scale: int) -> None:
    pad = view.padding * scale
    inner = width - 2 * pad
    spacing = STACK_SPACING * scale

    icon_bottom = _draw_icon(draw, view.icon, pad, pad, scale)
    days_bottom = _draw_text(draw, view.days, pad, pad, inner, scale)
    y = max(icon_bottom, days_bottom) + spacing
    _draw_text(draw, view.caption, pad, y, inner, scale)

    details = [spec for spec in (view.event_name, view.vehicle_name, view.destination) if spec.text]
    block = sum(_text_block_height(spec, inner, scale) for spec in details)
    block += spacing * (len(details) - 1)
    y = height - pad - block
    for spec in details:
        y = _draw_text(draw, spec, pad, y, inner, scale) + spacing


def _compose_standard(draw: ImageDraw.ImageDraw, view: StandardView, width: int, height: int, scale: int) -> None:
    pad = view.padding * scale
    left_width = LEFT_COLUMN_WIDTH * scale
    spacing = STACK_SPACING * scale

    y = _draw_icon(draw, view.icon, pad, pad, scale) + spacing
    y = _draw_text(draw, view.days, pad, y, left_width, scale) + TIGHT_SPACING * scale
    _draw_text(draw, view.caption, pad, y, left_width, scale)

    right = pad + left_width + COLUMN_SPACING * scale
    right_width = width - pad - right
    y = pad
    for spec in (view.event_name, view.vehicle_name, view.destination):
        if spec.text:
            y = _draw_text(draw, spec, right, y, right_width, scale) + spacing

    footer_font = _font(view.footer_date.size * scale)
    footer_top = height - pad - max(view.footer_icon.size * scale, _line_height(footer_font))
    _draw_icon(draw, view.footer_icon, right, footer_top, scale)
    date_left = right + (view.footer_icon.size + TIGHT_SPACING) * scale
    _draw_text(draw, view.footer_date, date_left, footer_top, width - pad - date_left, scale)


def canvas_size(view: WidgetView, size: Any = None, scale: int = 2) -> tuple[int, int]:
    """Pixel size of the canvas for a view; no-data views follow the requested size."""
    if isinstance(view, StandardView):
        category = SizeCategory.STANDARD
    elif isinstance(view, CompactView):
        category = SizeCategory.COMPACT
    else:
        category = SizeCategory.coerce(size)
    points = STANDARD_SIZE if category is SizeCategory.STANDARD else COMPACT_SIZE
    return (points[0] * scale, points[1] * scale)


def compose_frame(view: WidgetView, size: Any = None, scale: int = 2) -> Image.Image:
    """Compose an RGB frame for a countdown view."""
    if scale < 1:
        raise ValueError(f"Scale must be a positive integer, got {scale}.")

    width, height = canvas_size(view, size, scale)
    image = Image.new("RGB", (width, height), COLOR_BACKGROUND)
    draw = ImageDraw.Draw(image)

    if isinstance(view, StandardView):
        _compose_standard(draw, view, width, height, scale)
    elif isinstance(view, CompactView):
        _compose_compact(draw, view, width, height, scale)
    else:
        _compose_no_data(draw, view, width, height, scale)
    return image


__all__ = ["COLORS", "COLOR_BACKGROUND", "canvas_size", "compose_frame", "fit_lines"]
