"""Functional core - pure scheduling logic with no I/O."""

from .calendar_math import calendar_date, is_leap_year, month_days, validate_date_for_month
from .errors import (
    InvalidDateError,
    InvalidTimeRangeError,
    OverlapError,
    StorageError,
    ValidationError,
)
from .events import Event, EventRequest, Recurrence, TimeRange
from .recurrence import (
    overlaps_any,
    overlaps_monthly,
    overlaps_weekly,
    overlaps_yearly,
    recurs_daily,
)
from .selection import occurs_on, select_occurring
from .validation import validate_new_event, validate_time_order
from .windows import WeekWindow, week_window

__all__ = [
    # Calendar math
    "calendar_date",
    "is_leap_year",
    "month_days",
    "validate_date_for_month",
    # Errors
    "InvalidDateError",
    "InvalidTimeRangeError",
    "OverlapError",
    "StorageError",
    "ValidationError",
    # Events
    "Event",
    "EventRequest",
    "Recurrence",
    "TimeRange",
    # Recurrence
    "overlaps_any",
    "overlaps_monthly",
    "overlaps_weekly",
    "overlaps_yearly",
    "recurs_daily",
    # Selection and validation
    "occurs_on",
    "select_occurring",
    "validate_new_event",
    "validate_time_order",
    # Windows
    "WeekWindow",
    "week_window",
]
