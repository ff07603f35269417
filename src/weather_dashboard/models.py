# Project: weather-dashboard
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
models.py — Value types passed between the dashboard layers.

Everything here is immutable. A DailySeries is what the archive API gives
us; ChartPoint, TableRow and PageView are derived from it on demand.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


# Daily measurements requested from the archive API, in display order
MEASUREMENTS = (
    "temperature_2m_max",
    "temperature_2m_min",
    "temperature_2m_mean",
    "apparent_temperature_max",
    "apparent_temperature_min",
    "apparent_temperature_mean",
)

# ChartPoint / TableRow attribute for each measurement
FIELD_NAMES = {
    "temperature_2m_max":        "max_temp",
    "temperature_2m_min":        "min_temp",
    "temperature_2m_mean":       "mean_temp",
    "apparent_temperature_max":  "max_apparent",
    "apparent_temperature_min":  "min_apparent",
    "apparent_temperature_mean": "mean_apparent",
}


@dataclass(frozen=True)
class Query:
    """A validated request for one location and date range."""

    latitude: float
    longitude: float
    start_date: date
    end_date: date


@dataclass(frozen=True)
class DailySeries:
    """Parallel per-day sequences, index-aligned with ``time``.

    Any reading may be None when the archive has no value for that day.
    """

    time: tuple[date, ...]
    temperature_2m_max: tuple[float | None, ...]
    temperature_2m_min: tuple[float | None, ...]
    temperature_2m_mean: tuple[float | None, ...]
    apparent_temperature_max: tuple[float | None, ...]
    apparent_temperature_min: tuple[float | None, ...]
    apparent_temperature_mean: tuple[float | None, ...]
    units: dict[str, str] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        n = len(self.time)
        for name in MEASUREMENTS:
            if len(getattr(self, name)) != n:
                raise ValueError(
                    f"Series '{name}' has {len(getattr(self, name))} values, "
                    f"expected {n} to match 'time'"
                )

    def __len__(self) -> int:
        return len(self.time)

    def column(self, name: str) -> tuple[float | None, ...]:
        """Return the readings for one measurement name."""
        if name not in MEASUREMENTS:
            raise KeyError(name)
        return getattr(self, name)

    def unit(self, name: str) -> str:
        """Unit label for a measurement, or '' if the API did not send one."""
        return self.units.get(name, "")


@dataclass(frozen=True)
class ChartPoint:
    date: str
    max_temp: float | None
    min_temp: float | None
    mean_temp: float | None
    max_apparent: float | None
    min_apparent: float | None
    mean_apparent: float | None


@dataclass(frozen=True)
class TableRow:
    date: str
    max_temp: str
    min_temp: str
    mean_temp: str
    max_apparent: str
    min_apparent: str
    mean_apparent: str


@dataclass(frozen=True)
class PageView:
    """One page of table rows plus what the navigation controls need."""

    rows: tuple[TableRow, ...]
    page_number: int
    page_size: int
    total_pages: int
    total_rows: int
    window: tuple[int, ...]

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def first_row_number(self) -> int:
        """1-based index of the first row on this page (0 if empty)."""
        if not self.rows:
            return 0
        return (self.page_number - 1) * self.page_size + 1

    @property
    def last_row_number(self) -> int:
        """1-based index of the last row on this page (0 if empty)."""
        if not self.rows:
            return 0
        return self.first_row_number + len(self.rows) - 1
