"""Pure event layout logic - grouping by date and lane assignment."""

import re
from dataclasses import dataclass, field, replace

PRESET_COLORS = [
    "#f6be23",
    "#4a90e2",
    "#9b59b6",
    "#e24a90",
    "#50c878",
    "#f6501e",
    "#3498db",
    "#e67e22",
    "#16a085",
    "#c0392b",
    "#8e44ad",
    "#27ae60",
]

_TIME_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{2})")


class InvalidTimeFormatError(ValueError):
    """Raised when a start/end time is not a valid 24-hour HH:MM value."""

    pass


@dataclass(frozen=True)
class Event:
    """
    A single-day calendar event.

    `lane` is derived by assign_lanes and never part of the event's identity:
    it is excluded from equality and hashing.
    """

    id: int | str
    title: str
    date: str
    start_time: str
    end_time: str
    color: str = PRESET_COLORS[0]
    completed: bool = False
    lane: int | None = field(default=None, compare=False)

    def format_time(self) -> str:
        return f"{self.start_time} - {self.end_time}"

    def start_minutes(self) -> int:
        return time_to_minutes(self.start_time)

    def end_minutes(self) -> int:
        return time_to_minutes(self.end_time)

    @classmethod
    def from_dict(cls, data: dict) -> "Event":
        """Create an Event from the camelCase record shape of the data file."""
        return cls(
            id=data["id"],
            title=data["title"],
            date=data["date"],
            start_time=data["startTime"],
            end_time=data["endTime"],
            color=data.get("color") or PRESET_COLORS[0],
            completed=data.get("completed", False) is True,
        )

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "title": self.title,
            "date": self.date,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "color": self.color,
            "completed": self.completed,
        }
        if self.lane is not None:
            data["lane"] = self.lane
        return data


@dataclass
class GroupedDay:
    """One date's events in start-time order, with the number of lanes used."""

    events: list[Event] = field(default_factory=list)
    total_lanes: int = 0

    @property
    def has_overlaps(self) -> bool:
        return self.total_lanes > 1

    def visible(self, limit: int = 2) -> list[Event]:
        """Events shown in a month cell."""
        return self.events[: max(limit, 0)]

    def hidden_count(self, limit: int = 2) -> int:
        """Events left for the "+N more" counter."""
        return len(self.events) - len(self.visible(limit))


def time_to_minutes(value: str) -> int:
    """Convert a 24-hour HH:MM string to minutes since midnight."""
    match = _TIME_PATTERN.fullmatch(value) if isinstance(value, str) else None
    if not match:
        raise InvalidTimeFormatError(f"Invalid time: {value!r} (expected HH:MM)")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise InvalidTimeFormatError(f"Invalid time: {value!r} (out of range)")
    return hours * 60 + minutes


def assign_lanes(events: list[Event]) -> GroupedDay:
    """
    Lay out one date's events in non-overlapping lanes.

    Greedy interval partitioning: events are visited in start-time order
    (stable, so ties keep input order) and each goes into the first lane whose
    last event has ended by the time it starts. Touching intervals share a
    lane. A new lane is opened only when every existing lane overlaps.

    Returns new Event values carrying their lane; inputs are not modified.
    Any malformed time raises InvalidTimeFormatError for the whole group.
    """
    if not events:
        return GroupedDay(events=[], total_lanes=0)

    # Convert every time up front so a bad record fails before any placement
    timed = [(time_to_minutes(e.start_time), time_to_minutes(e.end_time), e) for e in events]
    timed.sort(key=lambda item: item[0])

    lane_ends: list[int] = []
    placed: list[Event] = []

    for start, end, event in timed:
        for index, lane_end in enumerate(lane_ends):
            if lane_end <= start:
                lane_ends[index] = end
                lane = index
                break
        else:
            lane = len(lane_ends)
            lane_ends.append(end)
        placed.append(replace(event, lane=lane))

    return GroupedDay(events=placed, total_lanes=len(lane_ends))


def group_events_by_date(events: list[Event]) -> dict[str, GroupedDay]:
    """
    Partition events by their date key and lay out each day.

    Keys appear in order of first occurrence. Events with duplicate ids are
    kept as separate entries.
    """
    by_date: dict[str, list[Event]] = {}
    for event in events:
        by_date.setdefault(event.date, []).append(event)

    return {key: assign_lanes(day_events) for key, day_events in by_date.items()}


def find_conflicts(grouped: GroupedDay) -> list[tuple[Event, Event]]:
    """
    Pairs of overlapping events within one laid-out day.

    Touching events do not conflict.
    """
    conflicts = []
    for i, e1 in enumerate(grouped.events):
        e1_end = e1.end_minutes()
        for e2 in grouped.events[i + 1 :]:
            # sorted by start - nothing later can overlap e1 either
            if e2.start_minutes() >= e1_end:
                break
            conflicts.append((e1, e2))
    return conflicts
