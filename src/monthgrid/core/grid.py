"""Month grid construction - which cell shows which day."""

from dataclasses import dataclass
from datetime import date

from .dates import date_key, days_in_month, first_weekday_of_month, is_same_day
from .events import GroupedDay


@dataclass
class CalendarCell:
    """One position in the month grid; placeholders have is_valid False."""

    key: int
    is_valid: bool
    day_number: int | None = None
    date_key: str | None = None
    is_today: bool = False
    day_events: GroupedDay | None = None

    @property
    def event_count(self) -> int:
        return len(self.day_events.events) if self.day_events else 0


def build_month_grid(
    displayed: date,
    today: date,
    events_by_date: dict[str, GroupedDay],
) -> list[CalendarCell]:
    """
    Cells for the month containing `displayed`, padded to whole weeks.

    Pure function - `today` is passed in rather than read from the clock.
    """
    first_day = first_weekday_of_month(displayed)
    month_days = days_in_month(displayed)
    total_cells = -(-(first_day + month_days) // 7) * 7

    cells = []
    for i in range(total_cells):
        day_number = i - first_day + 1
        if not 0 < day_number <= month_days:
            cells.append(CalendarCell(key=i, is_valid=False))
            continue

        cell_date = date(displayed.year, displayed.month, day_number)
        key = date_key(cell_date)
        cells.append(
            CalendarCell(
                key=i,
                is_valid=True,
                day_number=day_number,
                date_key=key,
                is_today=is_same_day(cell_date, today),
                day_events=events_by_date.get(key),
            )
        )

    return cells


def weeks(cells: list[CalendarCell]) -> list[list[CalendarCell]]:
    """Split grid cells into rows of seven."""
    return [cells[i : i + 7] for i in range(0, len(cells), 7)]
