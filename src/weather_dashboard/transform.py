# Project: weather-dashboard
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
transform.py — Turn a DailySeries into chart points and table rows.

Missing readings stay missing: the chart gets None (drawn as a gap) and
the table gets "N/A". Nothing is ever defaulted to zero.
"""

from decimal import ROUND_HALF_UP, Decimal

from weather_dashboard.models import FIELD_NAMES, MEASUREMENTS, ChartPoint, DailySeries, TableRow
from weather_dashboard.utils import fmt_day

NOT_AVAILABLE = "N/A"
ONE_DECIMAL = Decimal("0.1")


def format_reading(value: float | None) -> str:
    """Format a reading to one decimal place, rounding halves away from zero.

    Examples:
        2.25 -> '2.3', -2.25 -> '-2.3', None -> 'N/A'
    """
    if value is None:
        return NOT_AVAILABLE
    # str() first so 2.25 rounds as written rather than as its binary float
    rounded = Decimal(str(value)).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)  # no "-0.0"
    return f"{rounded:.1f}"


def _day_fields(series: DailySeries, i: int) -> dict[str, float | None]:
    return {FIELD_NAMES[name]: series.column(name)[i] for name in MEASUREMENTS}


def to_chart_points(series: DailySeries) -> list[ChartPoint]:
    """One ChartPoint per day, in date order, with None for missing readings."""
    return [
        ChartPoint(date=fmt_day(day), **_day_fields(series, i))
        for i, day in enumerate(series.time)
    ]


def to_table_rows(series: DailySeries) -> list[TableRow]:
    """One TableRow per day, in date order, with display-ready strings."""
    rows = []
    for i, day in enumerate(series.time):
        fields = _day_fields(series, i)
        rows.append(TableRow(
            date=fmt_day(day),
            **{key: format_reading(value) for key, value in fields.items()},
        ))
    return rows
