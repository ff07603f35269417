# Project: weather-dashboard
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
validation.py — Check form input before anything is sent to the API.

The is_valid_* predicates are pure and never raise. validate_query runs
them in form order and raises the first failure as a typed error whose
message is ready to show to the user.
"""

import math
from datetime import date, datetime

from weather_dashboard.models import Query


class DashboardError(Exception):
    """Base class for errors the dashboard shows to the user."""


class ValidationError(DashboardError):
    """Form input was rejected before any network call was made."""

    message = "Invalid input"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidLatitude(ValidationError):
    message = "Please enter a valid latitude (-90 to 90)"


class InvalidLongitude(ValidationError):
    message = "Please enter a valid longitude (-180 to 180)"


class InvalidDateRange(ValidationError):
    message = "Please enter a valid date range (end date cannot be in the future)"


def _parse_number(text) -> float | None:
    """Parse text as a finite real number; return None if it isn't one."""
    if text is None or isinstance(text, bool):
        return None
    if isinstance(text, str) and "_" in text:
        return None  # float() accepts "4_5"
    try:
        value = float(text.strip() if isinstance(text, str) else text)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(value):
        return None
    return value


def _parse_date(value) -> date | None:
    """Parse an ISO 'YYYY-MM-DD' string (or pass a date through)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def is_valid_latitude(text) -> bool:
    """True if text parses as a real number in [-90, 90]."""
    value = _parse_number(text)
    return value is not None and -90 <= value <= 90


def is_valid_longitude(text) -> bool:
    """True if text parses as a real number in [-180, 180]."""
    value = _parse_number(text)
    return value is not None and -180 <= value <= 180


def is_valid_date_range(start, end, today: date | None = None) -> bool:
    """True if both dates parse and start <= end <= today.

    Args:
        start: Start date as 'YYYY-MM-DD' or datetime.date.
        end: End date as 'YYYY-MM-DD' or datetime.date.
        today: Reference day. Defaults to the local date at call time.
    """
    start_day = _parse_date(start)
    end_day = _parse_date(end)
    if start_day is None or end_day is None:
        return False
    if today is None:
        today = date.today()
    elif isinstance(today, datetime):
        today = today.date()
    return start_day <= end_day <= today


def validate_query(latitude, longitude, start_date, end_date, today: date | None = None) -> Query:
    """Validate raw form values and build a Query.

    Checks run in the order latitude, longitude, date range; the first
    failure is raised.

    Returns:
        Query with parsed float coordinates and datetime.date bounds.

    Raises:
        InvalidLatitude, InvalidLongitude, InvalidDateRange
    """
    if not is_valid_latitude(latitude):
        raise InvalidLatitude()
    if not is_valid_longitude(longitude):
        raise InvalidLongitude()
    if not is_valid_date_range(start_date, end_date, today=today):
        raise InvalidDateRange()

    return Query(
        latitude=_parse_number(latitude),
        longitude=_parse_number(longitude),
        start_date=_parse_date(start_date),
        end_date=_parse_date(end_date),
    )
