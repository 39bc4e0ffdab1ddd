"""Configuration management for Extrol."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from extrol.core.projection import DEFAULT_SORT, SORT_KEYS

logger = logging.getLogger(__name__)

EXTROL_HOME = Path(os.environ.get("EXTROL_HOME", Path.home() / "extrol"))
CONFIG_FILE = EXTROL_HOME / "config" / "extrol.conf"
DATA_DIR = EXTROL_HOME / "data"

DEFAULT_API_BASE = "https://extrol-api-production.up.railway.app"


@dataclass
class Config:
    """Extrol configuration."""

    api_base: str = DEFAULT_API_BASE
    request_timeout: float = 15.0
    currency_symbol: str = "₹"
    default_sort: str = DEFAULT_SORT
    cache_dir: str = ""

    @property
    def cache_path(self) -> Path:
        if self.cache_dir:
            return Path(self.cache_dir).expanduser()
        return DATA_DIR


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from extrol.conf file."""
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
            case "api_base":
                config.api_base = value.rstrip("/")
            case "request_timeout":
                try:
                    config.request_timeout = float(value)
                except ValueError:
                    logger.warning(f"Invalid REQUEST_TIMEOUT: {value!r}, using {config.request_timeout}")
            case "currency_symbol":
                config.currency_symbol = value
            case "default_sort":
                if value in SORT_KEYS:
                    config.default_sort = value
                else:
                    logger.warning(f"Unknown DEFAULT_SORT: {value!r}, using {config.default_sort}")
            case "cache_dir":
                config.cache_dir = value

    return config
