# Project: weather-dashboard
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
archive.py — Fetch historical daily temperatures from Open-Meteo Archive API.

Free, no API key required.
API docs: https://open-meteo.com/en/docs/historical-weather-api

Any callable that takes a Query and returns a DailySeries (raising
ProviderError on failure) can stand in for fetch_daily_series; the
dashboard controller only relies on that contract.
"""

import math
from collections.abc import Callable
from datetime import date
from pathlib import Path

import requests

from weather_dashboard.models import MEASUREMENTS, DailySeries, Query
from weather_dashboard.utils import DEFAULT_LOG_PATH, call_logged, log_error
from weather_dashboard.validation import DashboardError

ARCHIVE_API_URL = "https://archive-api.open-meteo.com/v1/archive"
DEFAULT_TIMEOUT_SECONDS = 30

DAILY_VARIABLES = list(MEASUREMENTS)

WeatherProvider = Callable[[Query], DailySeries]


class ProviderError(DashboardError):
    """The archive API failed or returned something we can't use.

    status_code is set when the API answered with a non-success HTTP status.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def build_params(query: Query) -> dict:
    """Build the archive API query string parameters for a Query."""
    return {
        "latitude": str(query.latitude),
        "longitude": str(query.longitude),
        "start_date": query.start_date.isoformat(),
        "end_date": query.end_date.isoformat(),
        "daily": ",".join(DAILY_VARIABLES),
        "timezone": "auto",
    }


def fetch_daily_series(
    query: Query,
    url: str = ARCHIVE_API_URL,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    log_path: Path = DEFAULT_LOG_PATH,
) -> DailySeries:
    """Fetch daily temperature aggregates for a validated query.

    Args:
        query: Validated location and date range.
        url: Archive endpoint, overridable from config.
        timeout: Request timeout in seconds.
        log_path: Where failures are recorded.

    Returns:
        DailySeries covering query.start_date..query.end_date.

    Raises:
        ProviderError: On a non-success status, a transport error, or a
            malformed response body.
    """
    params = build_params(query)

    def _call() -> dict:
        r = requests.get(url, params=params, timeout=timeout)
        r.raise_for_status()
        return r.json()

    try:
        data = call_logged(_call, label="Open-Meteo archive API", log_path=log_path)
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        raise ProviderError(f"API Error: {status}", status_code=status) from e
    except requests.RequestException as e:
        raise ProviderError(str(e)) from e

    try:
        return parse_daily_series(data)
    except ProviderError as e:
        log_error(str(e), log_path=log_path)
        raise


def parse_daily_series(data: dict) -> DailySeries:
    """Parse an archive API response into a DailySeries.

    Nothing is repaired: a missing field, a length mismatch, a bad date or
    a non-numeric reading all raise.

    Raises:
        ProviderError: If the response does not have the expected shape.
    """
    if not isinstance(data, dict) or not isinstance(data.get("daily"), dict):
        raise ProviderError("Unexpected API response structure: missing 'daily'")
    daily = data["daily"]

    columns: dict[str, tuple] = {}
    for name in ["time"] + DAILY_VARIABLES:
        values = daily.get(name)
        if not isinstance(values, list):
            raise ProviderError(
                f"Unexpected API response structure: missing or invalid 'daily.{name}'"
            )
        columns[name] = tuple(values)

    lengths = {name: len(values) for name, values in columns.items()}
    if len(set(lengths.values())) > 1:
        raise ProviderError(
            f"Unexpected API response structure: mismatched series lengths {lengths}"
        )

    try:
        times = tuple(date.fromisoformat(t) for t in columns.pop("time"))
    except (TypeError, ValueError) as e:
        raise ProviderError(f"Unexpected API response structure: bad date ({e})") from e

    readings = {name: tuple(_reading(name, v) for v in values) for name, values in columns.items()}

    raw_units = data.get("daily_units")
    units = {}
    if isinstance(raw_units, dict):
        units = {name: str(raw_units[name]) for name in DAILY_VARIABLES if name in raw_units}

    return DailySeries(time=times, units=units, **readings)


def _reading(name: str, value) -> float | None:
    """Convert one raw reading to float, keeping None as None."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ProviderError(
            f"Unexpected API response structure: non-numeric value {value!r} in 'daily.{name}'"
        )
    try:
        reading = float(value)
    except OverflowError:
        reading = math.inf
    if not math.isfinite(reading):
        raise ProviderError(
            f"Unexpected API response structure: out-of-range value in 'daily.{name}'"
        )
    return reading
