"""Date windows used to query events for a period."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator

from .calendar_math import is_leap_year, month_days
from .events import Event, Recurrence

DAYS_IN_WEEK = 7


@dataclass(frozen=True)
class WeekWindow:
    """
    Inclusive date window [start, end] with the rule for which anchored
    events may occur inside it.

    Storage adapters either evaluate ``includes`` directly or translate the
    same conditions into their own query language.
    """

    start: date
    end: date

    def days(self) -> Iterator[date]:
        d = self.start
        while d <= self.end:
            yield d
            d += timedelta(days=1)

    def months(self) -> Iterator[tuple[int, int]]:
        """(year, month) pairs the window touches, in order."""
        year, month = self.start.year, self.start.month
        while (year, month) <= (self.end.year, self.end.month):
            yield year, month
            year, month = (year + 1, 1) if month == 12 else (year, month + 1)

    def _lands_inside(self, year: int, month: int, day: int) -> bool:
        # Days a month lacks fall on its last day
        occurrence = date(year, month, min(day, month_days(is_leap_year(year), month)))
        return self.start <= occurrence <= self.end

    def includes(self, event: Event) -> bool:
        """Check if an event may have an occurrence inside the window."""
        anchor = event.date
        if anchor > self.end:
            return False

        match event.recurrence:
            case Recurrence.NONE:
                return anchor >= self.start
            case Recurrence.DAILY | Recurrence.WEEKLY:
                return True
            case Recurrence.MONTHLY:
                return any(self._lands_inside(y, m, anchor.day) for y, m in self.months())
            case Recurrence.YEARLY:
                return any(
                    self._lands_inside(y, m, anchor.day)
                    for y, m in self.months()
                    if m == anchor.month
                )
        return False


def week_window(start: date, days: int = DAYS_IN_WEEK) -> WeekWindow:
    """Window from start through start + days (calendar addition)."""
    return WeekWindow(start=start, end=start + timedelta(days=days))
