"""Configuration management for Recur."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.recurrence import Frequency

logger = logging.getLogger(__name__)

RECUR_HOME = Path(os.environ.get("RECUR_HOME", Path.home() / ".recur"))
CONFIG_FILE = RECUR_HOME / "recur.conf"


@dataclass
class Config:
    """CLI defaults."""

    default_type: str = Frequency.DAILY.value
    default_interval: int = 1
    preview_count: int = 5
    months: int = 1


def _parse_positive_int(key: str, value: str, default: int) -> int:
    try:
        n = int(value)
    except ValueError:
        logger.warning(f"Invalid {key.upper()} value {value!r}, using {default}")
        return default
    if n < 1:
        logger.warning(f"{key.upper()} must be at least 1, using {default}")
        return default
    return n


def load_config(path: Path | None = None) -> Config:
    """Load configuration from recur.conf file."""
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
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value[:1] in ('"', "'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "default_type":
                if value.lower() in {f.value for f in Frequency}:
                    config.default_type = value.lower()
                else:
                    logger.warning(f"Unknown DEFAULT_TYPE {value!r}, using {config.default_type}")
            case "default_interval":
                config.default_interval = _parse_positive_int(key, value, config.default_interval)
            case "preview_count":
                config.preview_count = _parse_positive_int(key, value, config.preview_count)
            case "months":
                config.months = _parse_positive_int(key, value, config.months)
            case _:
                logger.debug(f"Ignoring unknown config key {key!r}")

    return config
