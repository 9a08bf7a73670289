"""HTTP event source - the same JSON dataset served over the network."""

import logging

import requests

from monthgrid.core.events import Event

from .records import EventSourceError, events_from_records

logger = logging.getLogger(__name__)


class HttpEventSource:
    """
    Fetches events from a URL returning the JSON event list.

    Implements EventSource protocol. No business logic - just I/O.
    """

    def __init__(self, url: str, timeout: int = 10, session: requests.Session | None = None):
        self.url = url
        self.timeout = timeout
        self._session = session or requests.Session()

    def load_events(self) -> list[Event]:
        logger.info(f"Fetching events from {self.url}")
        try:
            resp = self._session.get(
                self.url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            records = resp.json()
        except requests.RequestException as e:
            logger.error(f"Failed to fetch events from {self.url}: {e}")
            raise EventSourceError(f"Could not fetch {self.url}: {e}") from e
        except ValueError as e:
            raise EventSourceError(f"Invalid JSON from {self.url}: {e}") from e
        return events_from_records(records, self.url)
