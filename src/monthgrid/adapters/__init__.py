"""Adapters - I/O implementations of ports."""

from .records import EventSourceError
from .json_file import JsonFileEventSource
from .http_json import HttpEventSource

__all__ = [
    "EventSourceError",
    "JsonFileEventSource",
    "HttpEventSource",
]
