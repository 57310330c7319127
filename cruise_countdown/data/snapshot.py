"""Countdown snapshot value object."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class CountdownSnapshot:
    """Countdown state as read at one point in time.

    When ``has_data`` is False the remaining business fields are blank and
    must not be shown.
    """

    as_of_time: datetime
    event_name: str
    vehicle_name: str
    destination_text: str
    departure_time: datetime
    days_remaining: int
    has_data: bool


def empty_snapshot(now: datetime) -> CountdownSnapshot:
    """Snapshot for a store where no cruise has been selected yet."""
    return CountdownSnapshot(
        as_of_time=now,
        event_name="",
        vehicle_name="",
        destination_text="",
        departure_time=now,
        days_remaining=0,
        has_data=False,
    )


PLACEHOLDER_SNAPSHOT = CountdownSnapshot(
    as_of_time=datetime(2025, 8, 23, tzinfo=timezone.utc),
    event_name="Caribbean Cruise",
    vehicle_name="Norwegian Aqua",
    destination_text="Miami to Caribbean",
    departure_time=datetime(2025, 9, 7, tzinfo=timezone.utc),
    days_remaining=15,
    has_data=True,
)


__all__ = ["CountdownSnapshot", "PLACEHOLDER_SNAPSHOT", "empty_snapshot"]
