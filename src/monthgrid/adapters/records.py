"""Shared decoding of raw event records."""

import logging

from monthgrid.core.events import Event

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("id", "title", "date", "startTime", "endTime")


class EventSourceError(Exception):
    """Raised when an event source cannot be read."""

    pass


def events_from_records(records, origin: str) -> list[Event]:
    """
    Build Events from a decoded JSON payload.

    The payload must be a list. Records that are not objects or lack a
    required key, or whose completed flag is not a boolean, are skipped with
    a warning; times are left for the layout engine to validate.
    """
    if not isinstance(records, list):
        raise EventSourceError(f"{origin}: expected a JSON list of events")

    events = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            logger.warning(f"{origin}: skipping record {index}, not an object")
            continue
        missing = [key for key in REQUIRED_KEYS if key not in record]
        if missing:
            logger.warning(f"{origin}: skipping record {index}, missing {', '.join(missing)}")
            continue
        completed = record.get("completed")
        if completed is not None and not isinstance(completed, bool):
            logger.warning(f"{origin}: skipping record {index}, completed is not true/false")
            continue
        events.append(Event.from_dict(record))

    logger.debug(f"{origin}: loaded {len(events)} events")
    return events
