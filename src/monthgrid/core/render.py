"""Pure text rendering of month grids and day details - no I/O."""

from datetime import date

from .dates import LONG_DATE, MONTH_YEAR, WEEKDAY, WEEKDAY_LABELS, format_date, parse_date_key
from .events import Event, GroupedDay, find_conflicts
from .grid import CalendarCell, weeks

EMPTY_DAY_MESSAGE = "No events scheduled for this day"


def format_cell(cell: CalendarCell) -> str:
    """
    Five-character grid cell.

    `*` marks today, `•` marks a day with events.
    """
    if not cell.is_valid:
        return " " * 5
    today_mark = "*" if cell.is_today else " "
    event_mark = "•" if cell.event_count else " "
    return f" {cell.day_number:>2}{today_mark}{event_mark}"


def format_event_line(event: Event, total_lanes: int = 1) -> str:
    """Format a single event for the day and agenda listings."""
    check = "[x]" if event.completed else "[ ]"
    line = f"{check} {event.format_time()}  {event.title}"
    if total_lanes > 1:
        line += f"  (lane {event.lane + 1}/{total_lanes})"
    return line


def render_month(displayed: date, cells: list[CalendarCell], max_visible: int = 2) -> str:
    """Month header, weekday row, grid rows and a per-day agenda."""
    lines = [format_date(displayed, MONTH_YEAR), ""]
    lines.append("".join(f"{label:>4} " for label in WEEKDAY_LABELS))
    for row in weeks(cells):
        lines.append("".join(format_cell(cell) for cell in row).rstrip())

    for cell in cells:
        if not cell.day_events or not cell.day_events.events:
            continue
        day = parse_date_key(cell.date_key)
        grouped = cell.day_events
        lines.append("")
        lines.append(f"### {format_date(day, WEEKDAY)}, {format_date(day, LONG_DATE)}")
        for event in grouped.visible(max_visible):
            lines.append(f"  {format_event_line(event, grouped.total_lanes)}")
        hidden = grouped.hidden_count(max_visible)
        if hidden:
            lines.append(f"  +{hidden} more")

    return "\n".join(lines)


def render_day(date_key: str, grouped: GroupedDay | None) -> str:
    """Full listing for one day, including which events overlap."""
    day = parse_date_key(date_key)
    grouped = grouped or GroupedDay()
    lines = [format_date(day, LONG_DATE), format_date(day, WEEKDAY), ""]

    if not grouped.events:
        lines.append(EMPTY_DAY_MESSAGE)
        return "\n".join(lines)

    for event in grouped.events:
        lines.append(format_event_line(event, grouped.total_lanes))

    conflicts = find_conflicts(grouped)
    if conflicts:
        lines.append("")
        lines.append("Overlaps:")
        for first, second in conflicts:
            lines.append(f"  {first.title} / {second.title}")

    return "\n".join(lines)
