"""In-memory event edits - each operation returns a new list."""

from dataclasses import replace

from .events import PRESET_COLORS, Event, GroupedDay, assign_lanes


def next_event_id(events: list[Event]) -> int:
    """One past the largest integer id in use (1 for an empty collection)."""
    ids = [e.id for e in events if isinstance(e.id, int) and not isinstance(e.id, bool)]
    return max(ids, default=0) + 1


def add_event(
    events: list[Event],
    title: str,
    date: str,
    start_time: str,
    end_time: str,
    color: str = PRESET_COLORS[0],
    event_id: int | str | None = None,
) -> list[Event]:
    """Append a new, not yet completed event."""
    title = title.strip()
    if not title:
        raise ValueError("Event title must not be blank")

    new_event = Event(
        id=event_id if event_id is not None else next_event_id(events),
        title=title,
        date=date,
        start_time=start_time,
        end_time=end_time,
        color=color,
        completed=False,
    )
    return [*events, new_event]


def toggle_complete(events: list[Event], event_id: int | str) -> list[Event]:
    """Flip the completed flag of the event(s) with event_id."""
    return [replace(e, completed=not e.completed) if e.id == event_id else e for e in events]


def delete_event(events: list[Event], event_id: int | str) -> list[Event]:
    """Drop the event(s) with event_id."""
    return [e for e in events if e.id != event_id]


def find_day(events: list[Event], date_key: str) -> GroupedDay:
    """Re-laid-out group for a single date, empty when it has no events."""
    return assign_lanes([e for e in events if e.date == date_key])
