"""Configuration management for Cadence."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .core.events import Recurrence
from .core.windows import DAYS_IN_WEEK

logger = logging.getLogger(__name__)

CADENCE_HOME = Path(os.environ.get("CADENCE_HOME", Path.home() / "cadence"))
CONFIG_FILE = CADENCE_HOME / "config" / "cadence.conf"
DATA_DIR = CADENCE_HOME / "data"


@dataclass
class Config:
    """Cadence configuration."""

    events_file: str = field(default_factory=lambda: str(DATA_DIR / "events.json"))
    week_days: int = DAYS_IN_WEEK
    default_repeat: str = "none"


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from cadence.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
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
            case "week_days":
                try:
                    week_days = int(value)
                except ValueError:
                    week_days = 0
                if week_days > 0:
                    config.week_days = week_days
                else:
                    logger.warning(f"Ignoring invalid WEEK_DAYS value: {value!r}")
            case "default_repeat":
                try:
                    config.default_repeat = Recurrence.parse(value).value
                except ValueError:
                    logger.warning(f"Ignoring invalid DEFAULT_REPEAT value: {value!r}")
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
