"""Event repository interface."""

from contextlib import AbstractContextManager
from datetime import date
from typing import Protocol

from cadence.core.events import Event, TimeRange
from cadence.core.windows import WeekWindow


class EventRepository(Protocol):
    """Interface for storing and querying anchored events in any backend."""

    def fetch_overlapping(self, time_range: TimeRange) -> list[Event]:
        """Fetch events whose daily time window intersects the range, on any date."""
        ...

    def fetch_until(self, target: date) -> list[Event]:
        """Fetch events anchored on or before a date."""
        ...

    def fetch_window(self, window: WeekWindow) -> list[Event]:
        """Fetch events that may occur inside a window."""
        ...

    def add(self, event: Event) -> Event:
        """Store an event. Returns it with its id assigned."""
        ...

    def locked(self) -> AbstractContextManager:
        """Serialize a fetch -> validate -> add sequence against other writers."""
        ...
