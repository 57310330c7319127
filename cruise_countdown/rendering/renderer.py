"""Select and fill the countdown view for a snapshot and size category."""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Any

from cruise_countdown.data.snapshot import CountdownSnapshot
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

ICON_SHIP = "sailboat.fill"
ICON_SHIP_OUTLINE = "sailboat"
ICON_CALENDAR = "calendar"

CAPTION_DAYS = "days to go"
MESSAGE_NO_DATA = "No Cruise Selected"
HINT_NO_DATA = "Tap to select a cruise"

PADDING_COMPACT = 12
PADDING_STANDARD = 16
PADDING_NO_DATA = 12


def format_departure_date(value: datetime, tz: tzinfo = timezone.utc) -> str:
    """Long date without a time component, e.g. 'September 7, 2025'."""
    local = value.astimezone(tz)
    return f"{local:%B} {local.day}, {local.year}"


def _no_data_view() -> NoDataView:
    return NoDataView(
        icon=IconSpec(ICON_SHIP_OUTLINE, 24, SECONDARY),
        message=TextSpec(MESSAGE_NO_DATA, 14, "medium", SECONDARY, max_lines=2, align="center"),
        hint=TextSpec(HINT_NO_DATA, 11, "regular", SECONDARY, max_lines=2, align="center"),
        padding=PADDING_NO_DATA,
    )


def _compact_view(snapshot: CountdownSnapshot) -> CompactView:
    return CompactView(
        icon=IconSpec(ICON_SHIP, 16, ACCENT),
        days=TextSpec(str(snapshot.days_remaining), 24, "bold", ACCENT, align="trailing"),
        caption=TextSpec(CAPTION_DAYS, 12, "medium", SECONDARY, align="center"),
        event_name=TextSpec(snapshot.event_name, 14, "semibold", PRIMARY, max_lines=2, align="center"),
        vehicle_name=TextSpec(snapshot.vehicle_name, 12, "medium", SECONDARY, align="center"),
        destination=TextSpec(snapshot.destination_text, 11, "regular", SECONDARY, align="center"),
        padding=PADDING_COMPACT,
    )


def _standard_view(snapshot: CountdownSnapshot, tz: tzinfo) -> StandardView:
    return StandardView(
        icon=IconSpec(ICON_SHIP, 20, ACCENT),
        days=TextSpec(str(snapshot.days_remaining), 36, "bold", ACCENT),
        caption=TextSpec(CAPTION_DAYS, 14, "medium", SECONDARY),
        event_name=TextSpec(snapshot.event_name, 16, "semibold", PRIMARY, max_lines=2),
        vehicle_name=TextSpec(snapshot.vehicle_name, 14, "medium", SECONDARY),
        destination=TextSpec(snapshot.destination_text, 13, "regular", SECONDARY, max_lines=2),
        footer_icon=IconSpec(ICON_CALENDAR, 12, ACCENT),
        footer_date=TextSpec(format_departure_date(snapshot.departure_time, tz), 12, "medium", SECONDARY),
        padding=PADDING_STANDARD,
    )


def render(snapshot: CountdownSnapshot, size: Any, tz: tzinfo = timezone.utc) -> WidgetView:
    """Build the view for a snapshot; sizes other than STANDARD get the compact layout."""
    if not snapshot.has_data:
        return _no_data_view()

    category = SizeCategory.coerce(size)
    if category is SizeCategory.STANDARD:
        return _standard_view(snapshot, tz)
    return _compact_view(snapshot)


__all__ = ["CAPTION_DAYS", "HINT_NO_DATA", "MESSAGE_NO_DATA", "format_departure_date", "render"]
