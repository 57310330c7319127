"""Snapshot reader for the host app's shared countdown state."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
import math
import re
from typing import Any, Callable, Mapping

from cruise_countdown.data.shared_store import (
    KEY_CRUISE_NAME,
    KEY_DAYS_REMAINING,
    KEY_DEPARTURE_DATE,
    KEY_DESTINATION,
    KEY_HAS_DATA,
    KEY_SHIP_NAME,
    SharedStore,
)
from cruise_countdown.data.snapshot import CountdownSnapshot, empty_snapshot

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# Combined date-time with a mandatory offset, no fractional seconds.
_ISO_DATETIME = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(Z|[+-]\d{2}:?\d{2})")
_ISO_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
_TRUE_STRINGS = {"true", "yes", "1"}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _bool_value(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return False


def _int_value(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, str):
        try:
            return int(value.strip())
        except (ValueError, OverflowError):
            return 0
    return 0


def _str_value(value: Any) -> str:
    return value if isinstance(value, str) else ""


def parse_departure(value: str) -> datetime | None:
    """Parse an ISO-8601 date-time with offset; returns None when it does not match."""
    if not _ISO_DATETIME.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, _ISO_FORMAT)
    except ValueError:
        return None


class SnapshotReader:
    """Turns the shared store's fields into a CountdownSnapshot. Never raises."""

    def __init__(self, store: SharedStore, clock: Clock = utc_now) -> None:
        self._store = store
        self._clock = clock

    def read_snapshot(self) -> CountdownSnapshot:
        values = self._store.load()
        now = self._clock()
        if not _bool_value(values.get(KEY_HAS_DATA)):
            return empty_snapshot(now)
        return self._populated(values, now)

    def _populated(self, values: Mapping[str, Any], now: datetime) -> CountdownSnapshot:
        departure_raw = _str_value(values.get(KEY_DEPARTURE_DATE))
        departure_time = parse_departure(departure_raw)
        if departure_time is None:
            if departure_raw:
                logger.warning("Unparseable departure_date %r, using current time", departure_raw)
            departure_time = now

        return CountdownSnapshot(
            as_of_time=self._clock(),
            event_name=_str_value(values.get(KEY_CRUISE_NAME)),
            vehicle_name=_str_value(values.get(KEY_SHIP_NAME)),
            destination_text=_str_value(values.get(KEY_DESTINATION)),
            departure_time=departure_time,
            days_remaining=max(_int_value(values.get(KEY_DAYS_REMAINING)), 0),
            has_data=True,
        )


__all__ = ["Clock", "SnapshotReader", "parse_departure", "utc_now"]
