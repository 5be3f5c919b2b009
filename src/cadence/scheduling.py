"""Shared scheduling layer between the CLI and storage.

Each function fetches candidate events from a repository, runs the pure
core over them, and (for writes) stores the result.
"""

import logging
from datetime import date
from pathlib import Path

from .adapters.file_store import FileEventStore
from .config import Config
from .core.calendar_math import calendar_date
from .core.errors import OverlapError
from .core.events import Event, EventRequest, TimeRange
from .core.selection import select_occurring
from .core.validation import validate_new_event, validate_request
from .core.windows import DAYS_IN_WEEK, week_window
from .ports.event_repo import EventRepository

logger = logging.getLogger(__name__)


def get_store(config: Config) -> FileEventStore:
    """Resolve the event store from config."""
    return FileEventStore(Path(config.events_file).expanduser())


def _validate_against(repo: EventRepository, request: EventRequest) -> Event:
    # Date and time order are checked before storage is touched
    event = validate_request(request)
    candidates = repo.fetch_overlapping(TimeRange(event.start, event.end))
    logger.debug(f"{len(candidates)} events share time with {event.format()}")
    try:
        return validate_new_event(request, candidates)
    except OverlapError as e:
        logger.info(f"Rejected event on {event.date}: {len(e.conflicts)} conflicts")
        raise


def check_event(repo: EventRepository, request: EventRequest) -> Event:
    """Validate a request without storing it."""
    with repo.locked():
        return _validate_against(repo, request)


def create_event(repo: EventRepository, request: EventRequest) -> Event:
    """Validate and store a new event, returning it with its id."""
    with repo.locked():
        event = _validate_against(repo, request)
        stored = repo.add(event)
    logger.info(f"Scheduled event {stored.id} on {stored.date}: {stored.format()}")
    return stored


def events_on(repo: EventRepository, target: date) -> list[Event]:
    """Events occurring on a date, including recurring ones anchored earlier."""
    return select_occurring(repo.fetch_until(target), target)


def events_on_parts(repo: EventRepository, year: int, month: int, day: int) -> list[Event]:
    """Like events_on, but validates raw date parts first."""
    return events_on(repo, calendar_date(year, month, day))


def events_in_week(repo: EventRepository, start: date, days: int = DAYS_IN_WEEK) -> list[Event]:
    """Events that may occur between start and start + days."""
    return repo.fetch_window(week_window(start, days))
