"""Pure event domain model - no I/O dependencies."""

from dataclasses import dataclass, replace
from datetime import date, time
from enum import Enum


class Recurrence(Enum):
    """How often an event repeats after its anchor date."""

    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @property
    def is_recurring(self) -> bool:
        return self is not Recurrence.NONE

    @classmethod
    def parse(cls, value: "str | Recurrence | None") -> "Recurrence":
        """Normalize stored or user-supplied values; missing means NONE."""
        if isinstance(value, Recurrence):
            return value
        if not value:
            return cls.NONE
        return cls(value.strip().lower())


def parse_time(value: str) -> time:
    """Parse an HH:MM string into a minute-resolution time."""
    hour, _, minute = value.strip().partition(":")
    return time(int(hour), int(minute or 0))


def format_time(t: time) -> str:
    return t.strftime("%H:%M")


@dataclass(frozen=True)
class Event:
    """Anchor occurrence of a possibly recurring event."""

    date: date
    start: time
    end: time
    recurrence: Recurrence = Recurrence.NONE
    notes: str = ""
    id: int | None = None

    def overlaps_time(self, start: time, end: time) -> bool:
        """Check if this event's daily window intersects [start, end)."""
        return self.start < end and start < self.end

    def with_id(self, event_id: int) -> "Event":
        return replace(self, id=event_id)

    def sort_key(self) -> tuple:
        return (self.date, self.start, self.id if self.id is not None else -1)

    def format(self) -> str:
        repeat = f" ({self.recurrence.value})" if self.recurrence.is_recurring else ""
        notes = f" {self.notes}" if self.notes else ""
        return f"{format_time(self.start)}-{format_time(self.end)}{repeat}{notes}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "start": format_time(self.start),
            "end": format_time(self.end),
            "recurrence": self.recurrence.value if self.recurrence.is_recurring else None,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Event":
        """Create Event from its stored representation."""
        return cls(
            date=date.fromisoformat(data["date"]),
            start=parse_time(data["start"]),
            end=parse_time(data["end"]),
            recurrence=Recurrence.parse(data.get("recurrence")),
            notes=data.get("notes") or "",
            id=data.get("id"),
        )


@dataclass(frozen=True)
class EventRequest:
    """
    Unvalidated request to schedule an event.

    Keeps the raw date parts so days that do not exist (Feb 30) can be
    represented and rejected by the validator.
    """

    year: int
    month: int
    day: int
    start: time
    end: time
    recurrence: Recurrence = Recurrence.NONE
    notes: str = ""


@dataclass(frozen=True)
class TimeRange:
    """Time-of-day filter handed to storage to prefilter candidates."""

    start: time
    end: time

    def overlaps(self, event: Event) -> bool:
        return event.overlaps_time(self.start, self.end)
