"""
Recurrence overlap predicates - pure functions, no I/O.

Each predicate answers: does an event recurring at ``interval`` and
anchored at ``anchor`` occur on ``other``? Callers decide direction by
choosing which date is the anchor.
"""

from datetime import date

from .calendar_math import last_day_of_month
from .events import Recurrence


def recurs_daily(interval: Recurrence) -> bool:
    """A daily recurrence lands on every later date."""
    return interval is Recurrence.DAILY


def overlaps_weekly(interval: Recurrence, anchor: date, other: date) -> bool:
    return interval is Recurrence.WEEKLY and anchor.weekday() == other.weekday()


def overlaps_monthly(interval: Recurrence, anchor: date, other: date) -> bool:
    if interval is not Recurrence.MONTHLY:
        return False
    # Events on days a month lacks (e.g. the 31st) fall on its last day
    last_day = last_day_of_month(other)
    if other.day == last_day and anchor.day >= last_day:
        return True
    return other.day == anchor.day


def overlaps_yearly(interval: Recurrence, anchor: date, other: date) -> bool:
    if interval is not Recurrence.YEARLY:
        return False
    if anchor.month != other.month:
        return False
    return overlaps_monthly(Recurrence.MONTHLY, anchor, other)


def overlaps_any(interval: Recurrence, anchor: date, other: date) -> bool:
    """Weekly, monthly or yearly overlap; daily is checked by callers."""
    return (
        overlaps_weekly(interval, anchor, other)
        or overlaps_monthly(interval, anchor, other)
        or overlaps_yearly(interval, anchor, other)
    )
