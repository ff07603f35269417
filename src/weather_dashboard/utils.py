# Project: weather-dashboard
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
utils.py — Shared utilities: date labels and failure logging.
"""

from collections.abc import Callable
from datetime import date, datetime
from pathlib import Path
from typing import Any


DEFAULT_LOG_PATH = Path("logs/weather_dashboard.log")
LOG_PREFIX = "[dashboard]"
DATE_LABEL_FORMAT = "%d %b %Y"


def fmt_day(day: date | str) -> str:
    """Format a calendar day as the label used by the chart and the table.

    Args:
        day: A datetime.date or a date string in 'YYYY-MM-DD' format.

    Returns:
        Formatted string like '01 Jan 2023'.
    """
    if isinstance(day, str):
        day = date.fromisoformat(day)
    return day.strftime(DATE_LABEL_FORMAT)


def call_logged(
    fn: Callable[[], Any],
    label: str = "API call",
    log_path: Path = DEFAULT_LOG_PATH,
) -> Any:
    """Call fn once; on failure print a warning, log it, and re-raise.

    Only one attempt is made; the original exception reaches the caller.

    Args:
        fn: Zero-argument callable to invoke (wrap args in a closure).
        label: Human-readable name for the call, used in messages.
        log_path: Path to the log file for recording the failure.

    Returns:
        The return value of fn on success.
    """
    try:
        return fn()
    except Exception as e:
        print(f"{LOG_PREFIX} {label} failed: {e}")
        log_error(f"{label} failed: {e}", log_path=log_path)
        raise


def log_error(message: str, log_path: Path = DEFAULT_LOG_PATH) -> None:
    """Append a timestamped ERROR line to the log file.

    Args:
        message: Error description to log.
        log_path: Destination log file path.
    """
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(log_path, "a") as f:
            f.write(f"{timestamp} [ERROR] {message}\n")
    except OSError:
        pass  # Never crash on logging failure
