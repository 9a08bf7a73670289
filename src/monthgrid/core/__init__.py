"""Functional core - pure calendar logic with no I/O."""

from .dates import (
    UnsupportedFormatError,
    InvalidDateKeyError,
    days_in_month,
    first_weekday_of_month,
    add_months,
    add_years,
    is_same_day,
    format_date,
    parse_date_key,
)
from .events import (
    Event,
    GroupedDay,
    InvalidTimeFormatError,
    assign_lanes,
    group_events_by_date,
    time_to_minutes,
)
from .collection import add_event, toggle_complete, delete_event, find_day
from .grid import CalendarCell, build_month_grid, weeks
from .render import render_month, render_day

__all__ = [
    # Dates
    "UnsupportedFormatError",
    "InvalidDateKeyError",
    "days_in_month",
    "first_weekday_of_month",
    "add_months",
    "add_years",
    "is_same_day",
    "format_date",
    "parse_date_key",
    # Events
    "Event",
    "GroupedDay",
    "InvalidTimeFormatError",
    "assign_lanes",
    "group_events_by_date",
    "time_to_minutes",
    # Collection
    "add_event",
    "toggle_complete",
    "delete_event",
    "find_day",
    # Grid
    "CalendarCell",
    "build_month_grid",
    "weeks",
    # Rendering
    "render_month",
    "render_day",
]
