# Project: weather-dashboard
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""Tests for transform.py — chart points, table rows, reading formatting."""

import pytest
from datetime import date, timedelta

from weather_dashboard.models import ChartPoint, DailySeries, TableRow
from weather_dashboard.transform import (
    NOT_AVAILABLE,
    format_reading,
    to_chart_points,
    to_table_rows,
)


def _make_series(n: int = 5, **overrides) -> DailySeries:
    """Build a DailySeries of n days starting 2023-01-01; overrides replace whole columns."""
    base = date(2023, 1, 1)
    columns = {
        "temperature_2m_max": tuple(5.0 + i for i in range(n)),
        "temperature_2m_min": tuple(-2.0 + i for i in range(n)),
        "temperature_2m_mean": tuple(1.5 + i for i in range(n)),
        "apparent_temperature_max": tuple(2.0 + i for i in range(n)),
        "apparent_temperature_min": tuple(-6.0 + i for i in range(n)),
        "apparent_temperature_mean": tuple(-2.5 + i for i in range(n)),
    }
    columns.update({k: tuple(v) for k, v in overrides.items()})
    return DailySeries(
        time=tuple(base + timedelta(days=i) for i in range(n)),
        units={"temperature_2m_max": "°C"},
        **columns,
    )


# ---------------------------------------------------------------------------
# format_reading
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("value,expected", [
    (12.0, "12.0"),
    (12.34, "12.3"),
    (12.36, "12.4"),
    (2.25, "2.3"),
    (-2.25, "-2.3"),
    (0.05, "0.1"),
    (-0.05, "-0.1"),
    (7, "7.0"),
    (-15.0, "-15.0"),
])
def test_format_reading_one_decimal_half_away_from_zero(value, expected):
    assert format_reading(value) == expected


def test_format_reading_none_is_not_available():
    assert format_reading(None) == NOT_AVAILABLE == "N/A"


def test_format_reading_has_no_negative_zero():
    assert format_reading(-0.04) == "0.0"
    assert format_reading(-0.0) == "0.0"


def test_format_reading_zero_is_a_value_not_missing():
    assert format_reading(0.0) == "0.0"


# ---------------------------------------------------------------------------
# to_chart_points
# ---------------------------------------------------------------------------

class TestToChartPoints:

    def test_one_point_per_day(self):
        assert len(to_chart_points(_make_series(n=7))) == 7

    def test_empty_series_gives_empty_list(self):
        assert to_chart_points(_make_series(n=0)) == []

    def test_order_is_preserved(self):
        points = to_chart_points(_make_series(n=3))
        assert [p.date for p in points] == ["01 Jan 2023", "02 Jan 2023", "03 Jan 2023"]
        assert [p.max_temp for p in points] == [5.0, 6.0, 7.0]

    def test_fields_map_to_measurements(self):
        point = to_chart_points(_make_series(n=1))[0]
        assert point == ChartPoint(
            date="01 Jan 2023",
            max_temp=5.0,
            min_temp=-2.0,
            mean_temp=1.5,
            max_apparent=2.0,
            min_apparent=-6.0,
            mean_apparent=-2.5,
        )

    def test_missing_reading_is_none_not_zero(self):
        series = _make_series(n=3, temperature_2m_max=(4.0, None, 6.0))
        points = to_chart_points(series)
        assert points[1].max_temp is None
        assert points[0].max_temp == 4.0
        assert points[2].max_temp == 6.0

    def test_values_are_not_rounded(self):
        series = _make_series(n=1, temperature_2m_mean=(1.2345,))
        assert to_chart_points(series)[0].mean_temp == 1.2345


# ---------------------------------------------------------------------------
# to_table_rows
# ---------------------------------------------------------------------------

class TestToTableRows:

    def test_one_row_per_day(self):
        assert len(to_table_rows(_make_series(n=5))) == 5

    def test_empty_series_gives_empty_list(self):
        assert to_table_rows(_make_series(n=0)) == []

    def test_order_is_preserved(self):
        rows = to_table_rows(_make_series(n=3))
        assert [r.date for r in rows] == ["01 Jan 2023", "02 Jan 2023", "03 Jan 2023"]

    def test_fields_are_formatted_strings(self):
        row = to_table_rows(_make_series(n=1))[0]
        assert row == TableRow(
            date="01 Jan 2023",
            max_temp="5.0",
            min_temp="-2.0",
            mean_temp="1.5",
            max_apparent="2.0",
            min_apparent="-6.0",
            mean_apparent="-2.5",
        )

    def test_missing_reading_renders_not_available(self):
        series = _make_series(n=2, temperature_2m_max=(None, 3.0))
        rows = to_table_rows(series)
        assert rows[0].max_temp == "N/A"
        assert rows[1].max_temp == "3.0"

    def test_missing_reading_only_affects_its_own_cell(self):
        series = _make_series(n=1, apparent_temperature_min=(None,))
        row = to_table_rows(series)[0]
        assert row.min_apparent == "N/A"
        assert row.max_temp == "5.0"

    def test_same_length_as_chart_points(self):
        series = _make_series(n=25)
        assert len(to_table_rows(series)) == len(to_chart_points(series)) == 25

    def test_pure_function(self):
        series = _make_series(n=4)
        assert to_table_rows(series) == to_table_rows(series)


# ---------------------------------------------------------------------------
# DailySeries invariants
# ---------------------------------------------------------------------------

def test_series_rejects_mismatched_lengths():
    with pytest.raises(ValueError, match="temperature_2m_min"):
        _make_series(n=3, temperature_2m_min=(1.0,))


def test_series_column_lookup():
    series = _make_series(n=2)
    assert series.column("temperature_2m_max") == (5.0, 6.0)
    with pytest.raises(KeyError):
        series.column("precipitation_sum")
