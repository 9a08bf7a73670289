"""Configuration management for monthgrid."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

MONTHGRID_HOME = Path(os.environ.get("MONTHGRID_HOME", Path.home() / "monthgrid"))
CONFIG_FILE = MONTHGRID_HOME / "config" / "monthgrid.conf"


@dataclass
class Config:
    """monthgrid configuration."""

    events_file: str = ""
    events_url: str = ""
    # Events shown per month cell before "+N more"
    max_visible_events: int = 2


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from monthgrid.conf."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "events_file":
                config.events_file = value
            case "events_url":
                config.events_url = value
            case "max_visible_events":
                try:
                    limit = int(value)
                except ValueError:
                    limit = -1
                if limit >= 0:
                    config.max_visible_events = limit
                else:
                    logger.warning(f"Invalid MAX_VISIBLE_EVENTS {value!r}, using {config.max_visible_events}")
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
