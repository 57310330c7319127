"""Threaded poller that re-reads the shared store when the timeline expires."""

from __future__ import annotations

from datetime import datetime, timedelta
import logging
import threading
from typing import Callable

from cruise_countdown.data.reader import Clock, utc_now
from cruise_countdown.data.timeline import CountdownProvider, Timeline, next_reload_at

logger = logging.getLogger(__name__)

UpdateCallback = Callable[[Timeline], None]


class SnapshotPoller:
    """Background poller standing in for the host's timeline scheduling."""

    def __init__(
        self,
        provider: CountdownProvider,
        on_update: UpdateCallback | None = None,
        min_refresh_seconds: float = 900,
        clock: Clock = utc_now,
    ) -> None:
        self._provider = provider
        self._on_update = on_update
        self._min_interval = timedelta(seconds=min_refresh_seconds)
        self._clock = clock
        self._latest: Timeline | None = None
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._reload_event = threading.Event()
        self._thread: threading.Thread | None = None

    def get_latest(self) -> Timeline | None:
        """Return the most recent timeline, if any."""
        with self._lock:
            return self._latest

    def start(self) -> None:
        """Start the background polling thread."""
        if self._thread and self._thread.is_alive():
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run_loop, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Signal the polling thread to stop."""
        self._stop_event.set()
        self._reload_event.set()

    def reload(self) -> None:
        """Ask for a fresh timeline now instead of waiting for the current one to expire."""
        self._reload_event.set()

    def _run_loop(self) -> None:
        while not self._stop_event.is_set():
            timeline = self._refresh_once() or self.get_latest()
            if timeline is None:
                wait_seconds = self._min_interval.total_seconds()
            else:
                wait_seconds = self._seconds_until_reload(timeline)
            logger.debug("Next timeline reload in %.0fs", wait_seconds)
            self._reload_event.wait(timeout=wait_seconds)
            self._reload_event.clear()

    def _refresh_once(self) -> Timeline | None:
        """Build and publish a new timeline; on failure keep the previous one and return None."""
        try:
            timeline = self._provider.get_timeline()
        except Exception:
            logger.exception("Timeline refresh failed, keeping the previous timeline")
            return None
        with self._lock:
            self._latest = timeline
        if self._on_update is not None:
            try:
                self._on_update(timeline)
            except Exception:
                logger.exception("Timeline update callback failed")
        return timeline

    def _seconds_until_reload(self, timeline: Timeline) -> float:
        now: datetime = self._clock()
        reload_at = next_reload_at(timeline, now, self._min_interval)
        return max((reload_at - now).total_seconds(), 0.0)


__all__ = ["SnapshotPoller", "UpdateCallback"]
