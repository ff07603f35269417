# Project: weather-dashboard
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
dashboard.py — Dashboard state and the controller that drives it.

The whole dashboard is one immutable DashboardState value. Each user
action is a plain function taking a state and returning the next one:

    IDLE ──submit──▶ VALIDATING ──ok──▶ FETCHING ──▶ READY
                          │                  │
                          └──────────────────┴──▶ FAILED

READY and FAILED both go back to VALIDATING on the next submit.

Every fetch gets a request id. A response whose id is not the latest one
is dropped, so a slow earlier request can never overwrite a newer result.

DashboardController holds the current state, calls the validator and the
weather provider, and is what the Streamlit page talks to.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from datetime import date
from pathlib import Path

from weather_dashboard.archive import ProviderError, WeatherProvider, fetch_daily_series
from weather_dashboard.models import ChartPoint, DailySeries, PageView, Query, TableRow
from weather_dashboard.pagination import DEFAULT_PAGE_SIZE, check_page_size, clamp_page, paginate, total_pages
from weather_dashboard.transform import to_chart_points, to_table_rows
from weather_dashboard.utils import DEFAULT_LOG_PATH, log_error
from weather_dashboard.validation import ValidationError, validate_query

FETCH_ERROR_PREFIX = "Failed to fetch weather data"


class Status(enum.Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    FETCHING = "fetching"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class DashboardState:
    status: Status = Status.IDLE
    query: Query | None = None
    series: DailySeries | None = None
    chart_points: tuple[ChartPoint, ...] = ()
    table_rows: tuple[TableRow, ...] = ()
    page_size: int = DEFAULT_PAGE_SIZE
    current_page: int = 1
    error: str | None = None
    request_id: int = 0

    @property
    def is_busy(self) -> bool:
        return self.status is Status.FETCHING

    @property
    def has_data(self) -> bool:
        return self.series is not None

    @property
    def page_view(self) -> PageView:
        return paginate(self.table_rows, self.current_page, self.page_size)


# ─────────────────────────────────────────────────────────────
# Transitions
# ─────────────────────────────────────────────────────────────

def begin_validation(state: DashboardState, request_id: int) -> DashboardState:
    """Submit pressed: clear the old error and claim a new request id.

    Claiming the id here means a response still in flight from an earlier
    submission is dropped even if this submission fails validation.
    """
    return replace(state, status=Status.VALIDATING, request_id=request_id, error=None)


def validation_failed(state: DashboardState, error: ValidationError) -> DashboardState:
    """Input rejected. Previously fetched data stays as it was."""
    return replace(state, status=Status.FAILED, error=str(error))


def begin_fetch(state: DashboardState, query: Query) -> DashboardState:
    return replace(state, status=Status.FETCHING, query=query, error=None)


def fetch_succeeded(state: DashboardState, request_id: int, series: DailySeries) -> DashboardState:
    """Store a fresh series and its derived views, back on page 1."""
    if request_id != state.request_id:
        return state
    return replace(
        state,
        status=Status.READY,
        series=series,
        chart_points=tuple(to_chart_points(series)),
        table_rows=tuple(to_table_rows(series)),
        current_page=1,
        error=None,
    )


def fetch_failed(state: DashboardState, request_id: int, error: ProviderError) -> DashboardState:
    if request_id != state.request_id:
        return state
    return replace(state, status=Status.FAILED, error=f"{FETCH_ERROR_PREFIX}: {error}")


def change_page_size(state: DashboardState, page_size: int) -> DashboardState:
    """Switch rows-per-page; always lands back on page 1."""
    return replace(state, page_size=check_page_size(page_size), current_page=1)


def go_to_page(state: DashboardState, page_number: int) -> DashboardState:
    pages = total_pages(len(state.table_rows), state.page_size)
    return replace(state, current_page=clamp_page(page_number, pages))


# ─────────────────────────────────────────────────────────────
# Controller
# ─────────────────────────────────────────────────────────────

class DashboardController:
    """Owns the current DashboardState and runs the submit cycle.

    Args:
        provider: Callable Query -> DailySeries raising ProviderError.
            Defaults to the Open-Meteo archive client.
        today: Zero-argument callable returning the reference date used
            by date validation. Defaults to date.today.
        page_size: Initial rows per page.
        log_path: Where unexpected provider errors are recorded.
    """

    def __init__(
        self,
        provider: WeatherProvider | None = None,
        today=None,
        page_size: int = DEFAULT_PAGE_SIZE,
        log_path: Path = DEFAULT_LOG_PATH,
    ):
        self._provider = provider or fetch_daily_series
        self._today = today or date.today
        self._log_path = log_path
        self._last_request_id = 0
        self.state = DashboardState(page_size=check_page_size(page_size))

    def submit(self, latitude, longitude, start_date, end_date) -> DashboardState:
        """Validate the form values, fetch, and transform.

        Never raises for bad input or provider failures; those end in a
        FAILED state carrying a message. Unexpected exceptions from a
        provider are reported the same way as a ProviderError.
        """
        request_id = self.start_request(latitude, longitude, start_date, end_date)
        if request_id is None:
            return self.state

        try:
            series = self._provider(self.state.query)
        except ProviderError as e:
            return self.fail_request(request_id, e)
        except Exception as e:
            log_error(f"Provider raised {type(e).__name__}: {e}", log_path=self._log_path)
            return self.fail_request(request_id, ProviderError(str(e) or type(e).__name__))
        return self.complete_request(request_id, series)

    def start_request(self, latitude, longitude, start_date, end_date) -> int | None:
        """Validate and move to FETCHING.

        Returns:
            The new request id, or None if validation failed (the state
            is then FAILED and the provider must not be called).
        """
        self._last_request_id += 1
        self.state = begin_validation(self.state, self._last_request_id)
        try:
            query = validate_query(latitude, longitude, start_date, end_date, today=self._today())
        except ValidationError as e:
            self.state = validation_failed(self.state, e)
            return None

        self.state = begin_fetch(self.state, query)
        return self._last_request_id

    def complete_request(self, request_id: int, series: DailySeries) -> DashboardState:
        self.state = fetch_succeeded(self.state, request_id, series)
        return self.state

    def fail_request(self, request_id: int, error: ProviderError) -> DashboardState:
        self.state = fetch_failed(self.state, request_id, error)
        return self.state

    # ── Table navigation ─────────────────────────────────────

    def set_page_size(self, page_size: int) -> DashboardState:
        self.state = change_page_size(self.state, page_size)
        return self.state

    def go_to_page(self, page_number: int) -> DashboardState:
        self.state = go_to_page(self.state, page_number)
        return self.state

    def next_page(self) -> DashboardState:
        return self.go_to_page(self.state.current_page + 1)

    def previous_page(self) -> DashboardState:
        return self.go_to_page(self.state.current_page - 1)
