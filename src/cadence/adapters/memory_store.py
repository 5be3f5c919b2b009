"""In-memory event storage adapter."""

import threading
from contextlib import AbstractContextManager
from datetime import date

from cadence.core.events import Event, TimeRange
from cadence.core.windows import WeekWindow


def sort_events(events: list[Event]) -> list[Event]:
    """Sort events by anchor date, start time, then id."""
    return sorted(events, key=lambda e: e.sort_key())


class MemoryEventStore:
    """
    List-backed event storage.

    Implements EventRepository protocol. Ids are assigned sequentially.
    """

    def __init__(self, events: list[Event] | None = None):
        self._lock = threading.RLock()
        self._events: list[Event] = []
        for event in events or []:
            self.add(event)

    def _load(self) -> list[Event]:
        return self._events

    def _save(self, events: list[Event]) -> None:
        self._events = events

    def locked(self) -> AbstractContextManager:
        return self._lock

    def all(self) -> list[Event]:
        with self._lock:
            return sort_events(self._load())

    def fetch_overlapping(self, time_range: TimeRange) -> list[Event]:
        return [e for e in self.all() if time_range.overlaps(e)]

    def fetch_until(self, target: date) -> list[Event]:
        return [e for e in self.all() if e.date <= target]

    def fetch_window(self, window: WeekWindow) -> list[Event]:
        return [e for e in self.all() if window.includes(e)]

    def add(self, event: Event) -> Event:
        with self._lock:
            events = self._load()
            next_id = max((e.id or 0 for e in events), default=0) + 1
            stored = event.with_id(next_id)
            self._save([*events, stored])
            return stored
