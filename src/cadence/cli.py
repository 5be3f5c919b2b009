"""Cadence CLI - recurring event scheduler."""

import json
import logging
import sys
from datetime import date
from typing import NoReturn

import click

from .config import load_config
from .core.calendar_math import calendar_date
from .core.errors import OverlapError, StorageError, ValidationError
from .core.events import Event, EventRequest, Recurrence, parse_time
from .core.selection import select_occurring
from .core.windows import week_window
from .scheduling import check_event, create_event, events_in_week, events_on_parts, get_store

REPEAT_CHOICES = [r.value for r in Recurrence]


def _parse_parts(value: str) -> tuple[int, int, int]:
    """Split YYYY-MM-DD into raw parts without checking the day exists."""
    try:
        year, month, day = (int(part) for part in value.split("-"))
    except ValueError:
        raise click.BadParameter(f"Expected YYYY-MM-DD, got {value!r}")
    return year, month, day


def _fail(e: Exception) -> NoReturn:
    click.echo(f"Error: {e}", err=True)
    if isinstance(e, OverlapError):
        for conflict in e.conflicts:
            click.echo(f"  conflicts with {conflict.date} {conflict.format()}", err=True)
    sys.exit(1)


def _show_events(events: list[Event], as_json: bool, empty_msg: str = "No events.") -> None:
    """Shared event display logic."""
    if as_json:
        click.echo(json.dumps([e.to_dict() for e in events], indent=2))
        return

    if not events:
        click.echo(empty_msg)
        return

    for event in events:
        click.echo(f"  {event.format()}")


@click.group()
@click.version_option(package_name="cadence")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--store", "store_path", default=None, help="Path to the events JSON file")
@click.pass_context
def main(ctx, debug: bool, store_path: str | None):
    """Cadence - recurring event scheduler."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    config = load_config()
    if store_path:
        config.events_file = store_path
    ctx.obj = config


def _event_options(func):
    func = click.option("--notes", default="", help="Free-form notes")(func)
    func = click.option(
        "--repeat",
        type=click.Choice(REPEAT_CHOICES, case_sensitive=False),
        default=None,
        help="Recurrence interval",
    )(func)
    func = click.argument("end")(func)
    func = click.argument("start")(func)
    func = click.argument("day")(func)
    return func


def _build_request(config, day: str, start: str, end: str, repeat: str | None, notes: str) -> EventRequest:
    year, month, dom = _parse_parts(day)
    try:
        start_time, end_time = parse_time(start), parse_time(end)
    except ValueError:
        raise click.BadParameter(f"Expected HH:MM times, got {start!r} and {end!r}")
    return EventRequest(
        year=year,
        month=month,
        day=dom,
        start=start_time,
        end=end_time,
        recurrence=Recurrence.parse(repeat or config.default_repeat),
        notes=notes,
    )


@main.command()
@_event_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def add(config, day: str, start: str, end: str, repeat: str | None, notes: str, as_json: bool):
    """Schedule an event on DAY (YYYY-MM-DD) from START to END (HH:MM)."""
    request = _build_request(config, day, start, end, repeat, notes)
    try:
        event = create_event(get_store(config), request)
    except (ValidationError, StorageError) as e:
        _fail(e)

    if as_json:
        click.echo(json.dumps(event.to_dict(), indent=2))
    else:
        click.echo(f"Scheduled #{event.id} on {event.date.strftime('%A, %B %d')}: {event.format()}")


@main.command()
@_event_options
@click.pass_obj
def check(config, day: str, start: str, end: str, repeat: str | None, notes: str):
    """Check whether an event could be scheduled, without saving it."""
    request = _build_request(config, day, start, end, repeat, notes)
    try:
        event = check_event(get_store(config), request)
    except (ValidationError, StorageError) as e:
        _fail(e)
    click.echo(f"OK: {event.date} {event.format()} is free")


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Date to view (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def day(config, target_date: str | None, as_json: bool):
    """Show events occurring on a date."""
    if target_date:
        year, month, dom = _parse_parts(target_date)
    else:
        today = date.today()
        year, month, dom = today.year, today.month, today.day
    try:
        events = events_on_parts(get_store(config), year, month, dom)
    except (ValidationError, StorageError) as e:
        _fail(e)
    _show_events(events, as_json, "No events.")


@main.command()
@click.option("--start", "-s", "start_date", default=None,
              help="First day of the week (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def week(config, start_date: str | None, as_json: bool):
    """Show events for the coming week, day by day."""
    try:
        start = calendar_date(*_parse_parts(start_date)) if start_date else date.today()
        events = events_in_week(get_store(config), start, config.week_days)
    except (ValidationError, StorageError) as e:
        _fail(e)

    window = week_window(start, config.week_days)
    by_day = [(d, select_occurring(events, d)) for d in window.days()]

    if as_json:
        click.echo(
            json.dumps(
                [{"date": d.isoformat(), "events": [e.to_dict() for e in evs]} for d, evs in by_day],
                indent=2,
            )
        )
        return

    if not any(day_events for _, day_events in by_day):
        click.echo("No events this week.")
        return

    for d, day_events in by_day:
        if not day_events:
            continue
        click.echo(f"### {d.strftime('%A, %B %d')}")
        for event in day_events:
            click.echo(f"  {event.format()}")


if __name__ == "__main__":
    main()
