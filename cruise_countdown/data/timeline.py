"""Timeline entry points handed to whatever hosts the display."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from cruise_countdown.data.reader import SnapshotReader
from cruise_countdown.data.snapshot import PLACEHOLDER_SNAPSHOT, CountdownSnapshot

DEFAULT_MIN_REFRESH = timedelta(minutes=15)


@dataclass(frozen=True)
class Timeline:
    """Entries to show, plus when the host should ask for a new timeline."""

    entries: tuple[CountdownSnapshot, ...]  # always exactly one
    reload_after: datetime

    @property
    def current(self) -> CountdownSnapshot:
        return self.entries[-1]


def build_timeline(snapshot: CountdownSnapshot) -> Timeline:
    """Single-entry timeline that reloads once the entry's date has passed."""
    return Timeline(entries=(snapshot,), reload_after=snapshot.as_of_time)


def next_reload_at(
    timeline: Timeline,
    now: datetime,
    min_interval: timedelta = DEFAULT_MIN_REFRESH,
) -> datetime:
    """When to re-read the store, never sooner than the host's refresh budget allows."""
    return max(timeline.reload_after, now + min_interval)


class CountdownProvider:
    """Placeholder, one-shot snapshot and timeline requests."""

    def __init__(self, reader: SnapshotReader) -> None:
        self._reader = reader

    def placeholder(self) -> CountdownSnapshot:
        return PLACEHOLDER_SNAPSHOT

    def get_snapshot(self) -> CountdownSnapshot:
        return self._reader.read_snapshot()

    def get_timeline(self) -> Timeline:
        return build_timeline(self.get_snapshot())


__all__ = [
    "DEFAULT_MIN_REFRESH",
    "Timeline",
    "CountdownProvider",
    "build_timeline",
    "next_reload_at",
]
