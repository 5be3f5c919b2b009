"""Schedule validation - reject events that are malformed or would overlap."""

from datetime import time

from .calendar_math import calendar_date, validate_date_for_month
from .errors import InvalidTimeRangeError, OverlapError
from .events import Event, EventRequest
from .selection import select_occurring


def validate_time_order(start: time, end: time) -> None:
    """Ensure event ending time comes after starting time."""
    if (start.hour, start.minute) >= (end.hour, end.minute):
        raise InvalidTimeRangeError("Event ending time must be after starting time")


def validate_request(request: EventRequest) -> Event:
    """Check date and time order, returning the unsaved Event."""
    validate_date_for_month(request.year, request.month, request.day)
    validate_time_order(request.start, request.end)
    return Event(
        date=calendar_date(request.year, request.month, request.day),
        start=request.start,
        end=request.end,
        recurrence=request.recurrence,
        notes=request.notes,
    )


def validate_new_event(
    request: EventRequest,
    overlapping_time_candidates: list[Event],
) -> Event:
    """
    Validate a new event against existing ones.

    Pure function - no I/O.

    The candidates are events whose daily time window intersects the
    request's window, on any date. This function narrows them to the ones
    that actually fall on the request's date, accounting for recurrence in
    both directions.

    Raises:
        InvalidDateError: Day of month does not exist
        InvalidTimeRangeError: End is not after start
        OverlapError: At least one candidate occurs on the same date
    """
    event = validate_request(request)
    conflicts = select_occurring(overlapping_time_candidates, event.date, event.recurrence)
    if conflicts:
        raise OverlapError("Overlapping events are not allowed", conflicts)
    return event
