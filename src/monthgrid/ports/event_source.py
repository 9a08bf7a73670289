"""Event source interface."""

from typing import Protocol

from monthgrid.core.events import Event


class EventSource(Protocol):
    """Interface for loading the event collection from any backend."""

    def load_events(self) -> list[Event]:
        """Load all events, in source order."""
        ...
