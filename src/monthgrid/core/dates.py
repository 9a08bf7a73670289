"""Pure calendar geometry helpers - no I/O, no clock reads."""

import re
from datetime import date

ISO_DATE = "yyyy-MM-dd"
MONTH_YEAR = "MMMM yyyy"
LONG_DATE = "MMMM d, yyyy"
WEEKDAY = "EEEE"

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

# Sunday-first, matching first_weekday_of_month
WEEKDAY_NAMES = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]
WEEKDAY_LABELS = [name[:3] for name in WEEKDAY_NAMES]

_DATE_KEY_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


class UnsupportedFormatError(ValueError):
    """Raised when format_date is given a pattern it does not know."""

    pass


class InvalidDateKeyError(ValueError):
    """Raised when a date key is not a real YYYY-MM-DD date."""

    pass


def _is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _month_length(year: int, month: int) -> int:
    if month == 2:
        return 29 if _is_leap(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def days_in_month(d: date) -> int:
    """Number of days in the month containing d."""
    return _month_length(d.year, d.month)


def first_weekday_of_month(d: date) -> int:
    """Weekday of the 1st of d's month, 0 = Sunday through 6 = Saturday."""
    # date.weekday() is Monday-first
    return (date(d.year, d.month, 1).weekday() + 1) % 7


def sunday_weekday(d: date) -> int:
    """Weekday of d itself, 0 = Sunday."""
    return (d.weekday() + 1) % 7


def month_start(year: int, month: int) -> date:
    """First day of the given month (1-12)."""
    return date(year, month, 1)


def add_months(d: date, amount: int) -> date:
    """
    Shift d by a whole number of months.

    The day of month is kept when the target month has it, otherwise it is
    clamped to the target month's last day (Jan 31 + 1 month = Feb 28/29).
    Works for datetimes too; the time of day is kept.
    """
    index = d.month - 1 + amount
    year = d.year + index // 12
    month = index % 12 + 1
    day = min(d.day, _month_length(year, month))
    return d.replace(year=year, month=month, day=day)


def add_years(d: date, amount: int) -> date:
    """Shift d by whole years; Feb 29 clamps to Feb 28 in common years."""
    return add_months(d, amount * 12)


def is_same_day(a: date, b: date) -> bool:
    """True when a and b share year, month and day; time and tzinfo are ignored."""
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def date_key(d: date) -> str:
    """Canonical YYYY-MM-DD grouping key for d."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_date_key(key: str) -> date:
    """Parse a YYYY-MM-DD key back into a date."""
    match = _DATE_KEY_PATTERN.fullmatch(key) if isinstance(key, str) else None
    if not match:
        raise InvalidDateKeyError(f"Invalid date key: {key!r}")
    try:
        return date(*(int(part) for part in match.groups()))
    except ValueError as e:
        raise InvalidDateKeyError(f"Invalid date key: {key!r} ({e})") from e


_FORMATTERS = {
    ISO_DATE: date_key,
    MONTH_YEAR: lambda d: f"{MONTH_NAMES[d.month - 1]} {d.year}",
    LONG_DATE: lambda d: f"{MONTH_NAMES[d.month - 1]} {d.day}, {d.year}",
    WEEKDAY: lambda d: WEEKDAY_NAMES[sunday_weekday(d)],
}


def format_date(d: date, pattern: str) -> str:
    """
    Format d with one of the four supported patterns.

    ISO_DATE    -> "2024-03-05"
    MONTH_YEAR  -> "March 2024"
    LONG_DATE   -> "March 5, 2024"
    WEEKDAY     -> "Tuesday"

    Any other pattern raises UnsupportedFormatError.
    """
    formatter = _FORMATTERS.get(pattern)
    if formatter is None:
        raise UnsupportedFormatError(f"Unsupported date format: {pattern!r}")
    return formatter(d)
