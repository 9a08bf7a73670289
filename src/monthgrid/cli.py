"""monthgrid CLI - browse a month of events from the terminal."""

import json
import logging
import sys
from datetime import date

import click

from .adapters import EventSourceError, HttpEventSource, JsonFileEventSource
from .config import load_config
from .core.dates import InvalidDateKeyError, month_start, parse_date_key
from .core.events import GroupedDay, InvalidTimeFormatError, find_conflicts, group_events_by_date
from .core.grid import build_month_grid
from .core.render import render_day, render_month
from .ports import EventSource


def _make_source(config, events_path: str | None, url: str | None) -> EventSource:
    """Pick an event source: flags first, then config, URL before file."""
    if url:
        return HttpEventSource(url)
    if events_path:
        return JsonFileEventSource(events_path)
    if config.events_url:
        return HttpEventSource(config.events_url)
    if config.events_file:
        return JsonFileEventSource(config.events_file)
    raise click.UsageError("No events source. Pass --events/--url or set EVENTS_FILE in monthgrid.conf.")


def _load_grouped(source: EventSource) -> dict[str, GroupedDay]:
    try:
        return group_events_by_date(source.load_events())
    except (EventSourceError, InvalidTimeFormatError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _parse_month(value: str | None) -> date:
    if not value:
        today = date.today()
        return month_start(today.year, today.month)
    try:
        year, _, month = value.partition("-")
        return month_start(int(year), int(month))
    except ValueError:
        raise click.BadParameter(f"{value!r} is not a YYYY-MM month", param_hint="--month")


def _setup_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


def _grouped_to_json(grouped: GroupedDay) -> dict:
    return {
        "events": [e.to_dict() for e in grouped.events],
        "totalLanes": grouped.total_lanes,
    }


def _source_options(f):
    f = click.option("--debug", is_flag=True, help="Enable debug logging")(f)
    f = click.option("--json", "as_json", is_flag=True, help="Output as JSON")(f)
    f = click.option("--url", default=None, help="URL serving the events JSON")(f)
    f = click.option("--events", "events_path", default=None, help="Path to an events JSON file")(f)
    return f


@click.group()
@click.version_option()
def main():
    """monthgrid - monthly calendar viewer."""
    pass


@main.command()
@click.option("--month", "month_str", default=None, help="Month to show (YYYY-MM), defaults to this month")
@_source_options
def month(month_str: str | None, events_path: str | None, url: str | None, as_json: bool, debug: bool):
    """Show a month grid with its events."""
    _setup_logging(debug)
    config = load_config()
    displayed = _parse_month(month_str)
    grouped = _load_grouped(_make_source(config, events_path, url))
    cells = build_month_grid(displayed, date.today(), grouped)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "key": c.key,
                        "isValidDay": c.is_valid,
                        "dayNumber": c.day_number,
                        "dateString": c.date_key,
                        "isCurrentDay": c.is_today,
                        "events": _grouped_to_json(c.day_events) if c.day_events else None,
                    }
                    for c in cells
                ],
                indent=2,
            )
        )
        return

    click.echo(render_month(displayed, cells, config.max_visible_events))


@main.command()
@click.argument("day_key")
@_source_options
def day(day_key: str, events_path: str | None, url: str | None, as_json: bool, debug: bool):
    """Show every event on DAY_KEY (YYYY-MM-DD) with its lane."""
    _setup_logging(debug)
    try:
        parse_date_key(day_key)
    except InvalidDateKeyError as e:
        raise click.BadParameter(str(e), param_hint="DAY_KEY")

    config = load_config()
    grouped = _load_grouped(_make_source(config, events_path, url)).get(day_key, GroupedDay())

    if as_json:
        data = _grouped_to_json(grouped)
        data["conflicts"] = [[a.id, b.id] for a, b in find_conflicts(grouped)]
        click.echo(json.dumps(data, indent=2))
        return

    click.echo(render_day(day_key, grouped))
