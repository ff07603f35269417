# Project: weather-dashboard
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
config.py — Load and validate the TOML configuration file.

We use tomllib (Python 3.11+ stdlib) so no extra install is needed.
The config path defaults to "config.toml" in the current working directory,
but can be overridden for testing. The dashboard runs fine without one:
DEFAULT_CONFIG is used when the file is absent.
"""

import copy
import tomllib
from pathlib import Path

from weather_dashboard.archive import ARCHIVE_API_URL, DEFAULT_TIMEOUT_SECONDS
from weather_dashboard.pagination import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS
from weather_dashboard.utils import DEFAULT_LOG_PATH


DEFAULT_CONFIG_PATH = Path("config.toml")

DEFAULT_CONFIG: dict = {
    "provider": {
        "archive_url": ARCHIVE_API_URL,
        "timeout_seconds": DEFAULT_TIMEOUT_SECONDS,
    },
    "table": {
        "page_size": DEFAULT_PAGE_SIZE,
    },
    "location": {},
    "log": {
        "path": str(DEFAULT_LOG_PATH),
    },
}


def default_config() -> dict:
    """Return a fresh copy of DEFAULT_CONFIG that callers may mutate."""
    return copy.deepcopy(DEFAULT_CONFIG)


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> dict:
    """Load and validate a TOML configuration file.

    Args:
        path: Path to the TOML config file.

    Returns:
        Nested dict of configuration values.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If required keys or sections are missing or invalid.
    """
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            "Copy config.toml.example to config.toml to change the defaults."
        )

    with open(path, "rb") as f:
        config = tomllib.load(f)

    _validate(config)
    config.setdefault("location", {})
    return config


def _validate(config: dict) -> None:
    """Validate that all required config sections and keys are present.

    Expected config schema::

        [provider]
        archive_url     = <str>    # Open-Meteo archive endpoint
        timeout_seconds = <float>  # > 0

        [table]
        page_size = <int>          # one of 10, 20, 50

        [location]                 # optional form defaults
        latitude  = <float>
        longitude = <float>

        [log]
        path = <str>               # relative or absolute path to the log file

    Args:
        config: Parsed TOML config dict.

    Raises:
        ValueError: If any required section or key is absent, or a value
            is out of range.
    """
    required_sections = ["provider", "table", "log"]
    for section in required_sections:
        if section not in config:
            raise ValueError(f"Missing required config section: [{section}]")

    provider = config["provider"]
    for key in ("archive_url", "timeout_seconds"):
        if key not in provider:
            raise ValueError(f"Missing required config key: [provider].{key}")
    if provider["timeout_seconds"] <= 0:
        raise ValueError("[provider].timeout_seconds must be greater than 0")

    if "page_size" not in config["table"]:
        raise ValueError("Missing required config key: [table].page_size")
    if config["table"]["page_size"] not in PAGE_SIZE_OPTIONS:
        raise ValueError(
            f"[table].page_size must be one of {PAGE_SIZE_OPTIONS}, "
            f"got {config['table']['page_size']}"
        )

    if "path" not in config["log"]:
        raise ValueError("Missing required config key: [log].path")
