# Project: weather-dashboard
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
chart.py — Plotly figure and HTML table rendering for the dashboard.

Both functions work on the derived views (ChartPoint / PageView) and
return objects ready to hand to Streamlit.
"""

import html

import plotly.graph_objects as go

from weather_dashboard.models import FIELD_NAMES, MEASUREMENTS, ChartPoint, PageView

# Display label and line style per ChartPoint field
SERIES_LABELS: dict[str, str] = {
    "max_temp":      "Max Temp",
    "min_temp":      "Min Temp",
    "mean_temp":     "Mean Temp",
    "max_apparent":  "Max Apparent",
    "min_apparent":  "Min Apparent",
    "mean_apparent": "Mean Apparent",
}

SERIES_STYLES: dict[str, dict] = {
    "max_temp":      dict(color="#ff453a", width=2),
    "min_temp":      dict(color="#0a84ff", width=2),
    "mean_temp":     dict(color="#30d158", width=2),
    "max_apparent":  dict(color="#ff9f0a", width=1.5, dash="dot"),
    "min_apparent":  dict(color="#64d2ff", width=1.5, dash="dot"),
    "mean_apparent": dict(color="#bf5af2", width=1.5, dash="dot"),
}

PLOTLY_LAYOUT = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font=dict(family="-apple-system, BlinkMacSystemFont, 'SF Pro Display', sans-serif",
              color="#8e8e93", size=12),
    margin=dict(l=8, r=8, t=32, b=8),
    legend=dict(bgcolor="rgba(0,0,0,0)", font=dict(color="#8e8e93"), orientation="h"),
    xaxis=dict(showgrid=False, zeroline=False, tickfont=dict(color="#636366")),
    yaxis=dict(gridcolor="#2c2c2e", zeroline=False, tickfont=dict(color="#636366")),
)


def _field_units(units: dict[str, str]) -> dict[str, str]:
    """Map ChartPoint/TableRow field names to the unit label of their measurement."""
    return {FIELD_NAMES[name]: units.get(name, "") for name in MEASUREMENTS}


def build_temperature_figure(points: list[ChartPoint], units: dict[str, str] | None = None) -> go.Figure:
    """Build a six-line temperature chart.

    Missing readings are None and are drawn as gaps (connectgaps=False),
    never as zero.

    Args:
        points: ChartPoints in date order.
        units: Unit label per archive measurement name, e.g.
            {'temperature_2m_max': '°C', ...}.

    Returns:
        plotly Figure with one Scatter trace per field.
    """
    field_units = _field_units(units or {})
    labels = [p.date for p in points]

    fig = go.Figure()
    for field, name in SERIES_LABELS.items():
        fig.add_trace(go.Scatter(
            x=labels,
            y=[getattr(p, field) for p in points],
            name=name,
            mode="lines",
            line=SERIES_STYLES[field],
            connectgaps=False,
        ))

    unit = field_units["max_temp"]
    fig.update_layout(
        **PLOTLY_LAYOUT,
        title=dict(text=f"Temperature ({unit})" if unit else "Temperature",
                   font=dict(color="#8e8e93", size=13)),
        height=360,
        hovermode="x unified",
    )
    if unit:
        fig.update_yaxes(ticksuffix=unit)
    return fig


def render_table_html(page_view: PageView, units: dict[str, str] | None = None) -> str:
    """Render one page of rows as an HTML table.

    Args:
        page_view: The page to render.
        units: Unit label per archive measurement name.

    Returns:
        HTML string using the wa-table CSS class.
    """
    field_units = _field_units(units or {})

    header_cells = ["<th>Date</th>"]
    for field, name in SERIES_LABELS.items():
        unit = field_units[field]
        label = f"{name} ({unit})" if unit else name
        header_cells.append(f"<th>{html.escape(label)}</th>")

    lines = [
        '<table class="wa-table">',
        "  <thead><tr>" + "".join(header_cells) + "</tr></thead>",
        "  <tbody>",
    ]
    for row in page_view.rows:
        cells = [f"<td>{html.escape(row.date)}</td>"]
        cells += [f"<td>{html.escape(getattr(row, field))}</td>" for field in SERIES_LABELS]
        lines.append("    <tr>" + "".join(cells) + "</tr>")
    lines.append("  </tbody>")
    lines.append("</table>")
    return "\n".join(lines)
