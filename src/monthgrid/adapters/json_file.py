"""JSON file event source - the bundled static dataset."""

import json
from pathlib import Path

from monthgrid.core.events import Event

from .records import EventSourceError, events_from_records


class JsonFileEventSource:
    """
    Reads events from a JSON file.

    Implements EventSource protocol.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load_events(self) -> list[Event]:
        if not self.path.exists():
            raise EventSourceError(f"Events file not found: {self.path}")
        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise EventSourceError(f"Events file is not valid UTF-8: {self.path} ({e})") from e
        except OSError as e:
            raise EventSourceError(f"Could not read {self.path}: {e}") from e
        try:
            records = json.loads(text)
        except json.JSONDecodeError as e:
            raise EventSourceError(f"Invalid JSON in {self.path}: {e}") from e
        return events_from_records(records, str(self.path))
