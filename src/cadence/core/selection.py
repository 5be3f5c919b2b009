"""Candidate selection - which events occupy a given calendar date."""

from datetime import date

from .events import Event, Recurrence
from .recurrence import overlaps_any, recurs_daily


def occurs_on(
    event: Event,
    target_date: date,
    target_interval: Recurrence | None = Recurrence.NONE,
) -> bool:
    """
    Check if an event shares a calendar day with the target event.

    Pure function - no I/O.

    Args:
        event: Candidate event, anchored at its first occurrence
        target_date: Date of the event being checked
        target_interval: Recurrence of the event being checked, if any

    Returns:
        True when the candidate lands on target_date, either through its own
        recurrence (candidate anchored earlier) or because the target event's
        recurrence reaches the candidate (candidate anchored later).
    """
    target_interval = Recurrence.parse(target_interval)
    anchor = event.date

    if anchor == target_date:
        return True

    if anchor < target_date:
        # Past event projected forward by its own recurrence
        if not event.recurrence.is_recurring:
            return False
        if recurs_daily(event.recurrence):
            return True
        return overlaps_any(event.recurrence, anchor, target_date)

    # Future event: only reachable when the target event itself recurs
    if not target_interval.is_recurring:
        return False
    if recurs_daily(event.recurrence) or recurs_daily(target_interval):
        return True
    return overlaps_any(target_interval, target_date, anchor)


def select_occurring(
    candidates: list[Event],
    target_date: date,
    target_interval: Recurrence | None = Recurrence.NONE,
) -> list[Event]:
    """
    Filter candidates to those occurring on target_date.

    Keeps input order and does not deduplicate.
    """
    return [e for e in candidates if occurs_on(e, target_date, target_interval)]
