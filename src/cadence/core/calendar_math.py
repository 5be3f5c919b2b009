"""Pure calendar arithmetic - no I/O dependencies."""

from datetime import MAXYEAR, MINYEAR, date

from .errors import InvalidDateError

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Gregorian leap year test."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def month_days(is_leap: bool, month: int) -> int:
    """Number of days in a month (1-12)."""
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Invalid month {month}")
    if month == 2 and is_leap:
        return 29
    return _MONTH_DAYS[month - 1]


def last_day_of_month(d: date) -> int:
    return month_days(is_leap_year(d.year), d.month)


def validate_date_for_month(year: int, month: int, day: int) -> None:
    """Ensure day is a valid day for the corresponding month."""
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidDateError(f"Invalid year {year}")
    max_day = month_days(is_leap_year(year), month)
    if day < 1 or day > max_day:
        raise InvalidDateError(f"Invalid date for month {month}")


def calendar_date(year: int, month: int, day: int) -> date:
    """Validate raw date parts and build a date."""
    validate_date_for_month(year, month, day)
    return date(year, month, day)
