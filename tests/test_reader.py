from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from cruise_countdown.data.reader import SnapshotReader, parse_departure
from cruise_countdown.data.shared_store import JsonFileStore, MemoryStore
from cruise_countdown.data.snapshot import PLACEHOLDER_SNAPSHOT

NOW = datetime(2025, 8, 23, 12, 0, tzinfo=timezone.utc)

EXAMPLE_STORE = {
    "has_data": True,
    "cruise_name": "7-Day Caribbean Cruise",
    "ship_name": "Norwegian Aqua",
    "destination": "Miami to Caribbean",
    "departure_date": "2025-09-07T00:00:00Z",
    "days_remaining": 15,
}


def _reader(values: dict) -> SnapshotReader:
    return SnapshotReader(MemoryStore(values), clock=lambda: NOW)


@pytest.mark.parametrize(
    "values",
    [
        {},
        {"has_data": False},
        {"has_data": "no"},
        {"has_data": 0},
        {"has_data": False, "cruise_name": "Hidden", "days_remaining": 9},
    ],
)
def test_read_snapshot_without_data_flag(values: dict) -> None:
    snapshot = _reader(values).read_snapshot()

    assert snapshot.has_data is False
    assert snapshot.event_name == ""
    assert snapshot.vehicle_name == ""
    assert snapshot.destination_text == ""
    assert snapshot.days_remaining == 0
    assert snapshot.departure_time == NOW
    assert snapshot.as_of_time == NOW


def test_read_snapshot_example_round_trip() -> None:
    snapshot = _reader(EXAMPLE_STORE).read_snapshot()

    assert snapshot.has_data is True
    assert snapshot.event_name == "7-Day Caribbean Cruise"
    assert snapshot.vehicle_name == "Norwegian Aqua"
    assert snapshot.destination_text == "Miami to Caribbean"
    assert snapshot.departure_time == datetime(2025, 9, 7, tzinfo=timezone.utc)
    assert snapshot.days_remaining == 15
    assert snapshot.as_of_time == NOW


def test_read_snapshot_fields_default_independently() -> None:
    snapshot = _reader({"has_data": True, "ship_name": "Norwegian Aqua"}).read_snapshot()

    assert snapshot.has_data is True
    assert snapshot.event_name == ""
    assert snapshot.vehicle_name == "Norwegian Aqua"
    assert snapshot.destination_text == ""
    assert snapshot.days_remaining == 0
    assert snapshot.departure_time == NOW


@pytest.mark.parametrize(
    "raw",
    ["", "tomorrow", "2025-09-07", "2025-09-07T00:00:00", "2025-13-07T00:00:00Z", "2025-09-07 00:00:00Z"],
)
def test_unparseable_departure_uses_now(raw: str) -> None:
    snapshot = _reader({**EXAMPLE_STORE, "departure_date": raw}).read_snapshot()

    assert snapshot.departure_time == NOW
    assert snapshot.has_data is True


def test_unparseable_departure_with_real_clock_is_close_to_now() -> None:
    reader = SnapshotReader(MemoryStore({**EXAMPLE_STORE, "departure_date": "soon"}))

    snapshot = reader.read_snapshot()

    assert abs(snapshot.departure_time - datetime.now(timezone.utc)) < timedelta(seconds=5)


def test_departure_with_offset_keeps_instant() -> None:
    parsed = parse_departure("2025-09-07T02:00:00+02:00")

    assert parsed == datetime(2025, 9, 7, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(15, 15), ("15", 15), (15.9, 15), (True, 1), (-3, 0), ("many", 0), (None, 0)],
)
def test_days_remaining_coercion(raw, expected: int) -> None:
    snapshot = _reader({**EXAMPLE_STORE, "days_remaining": raw}).read_snapshot()

    assert snapshot.days_remaining == expected


@pytest.mark.parametrize("raw", ["NaN", "Infinity", "-Infinity", "1e400"])
def test_non_finite_days_remaining_from_file_defaults_to_zero(tmp_path, raw: str) -> None:
    path = tmp_path / "group.json"
    path.write_text(f'{{"has_data": true, "cruise_name": "Alaska", "days_remaining": {raw}}}')

    snapshot = SnapshotReader(JsonFileStore(path), clock=lambda: NOW).read_snapshot()

    assert snapshot.has_data is True
    assert snapshot.event_name == "Alaska"
    assert snapshot.days_remaining == 0


@pytest.mark.parametrize("raw", [float("nan"), float("inf"), "1e400"])
def test_days_remaining_unconvertible_values(raw) -> None:
    assert _reader({**EXAMPLE_STORE, "days_remaining": raw}).read_snapshot().days_remaining == 0


@pytest.mark.parametrize("flag", [True, 1, "true", "YES", "1"])
def test_truthy_data_flags(flag) -> None:
    assert _reader({**EXAMPLE_STORE, "has_data": flag}).read_snapshot().has_data is True


def test_wrong_typed_strings_are_treated_as_absent() -> None:
    snapshot = _reader({**EXAMPLE_STORE, "cruise_name": 42, "ship_name": ["Aqua"]}).read_snapshot()

    assert snapshot.event_name == ""
    assert snapshot.vehicle_name == ""


def test_reader_does_not_write_to_store() -> None:
    values = dict(EXAMPLE_STORE)
    store = MemoryStore(values)

    SnapshotReader(store, clock=lambda: NOW).read_snapshot()

    assert store.load() == EXAMPLE_STORE


def test_placeholder_snapshot_is_populated() -> None:
    assert PLACEHOLDER_SNAPSHOT.has_data is True
    assert PLACEHOLDER_SNAPSHOT.event_name
    assert PLACEHOLDER_SNAPSHOT.vehicle_name
    assert PLACEHOLDER_SNAPSHOT.destination_text
    assert PLACEHOLDER_SNAPSHOT.days_remaining == 15
