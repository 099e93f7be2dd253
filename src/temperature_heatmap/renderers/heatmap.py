"""Heatmap SVG renderer.

Turns a ``HeatmapGeometry`` into an inline SVG fragment: year and month
labels, one group per cell (fill, border, two sparklines, hover title) and
the vertical colour legend. Hover text uses native SVG ``<title>`` elements,
so the page needs no script.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from temperature_heatmap.renderers import render_template
from temperature_heatmap.renderers.formatting import format_tick, hover_text, month_name
from temperature_heatmap.schemas import ChartConfig

if TYPE_CHECKING:
    from temperature_heatmap.core import CellView, HeatmapGeometry

LEGEND_GRADIENT_ID = "legend-gradient"
CELL_CORNER_RADIUS = 2
SPARK_STROKE_WIDTH = 1.2
SPARK_STROKE_OPACITY = 0.9


def _cell_context(cell: CellView) -> dict[str, Any]:
    return {
        "x": cell.x,
        "y": cell.y,
        "width": cell.width,
        "height": cell.height,
        "fill": cell.fill,
        "border": cell.border,
        "max_d": cell.geometry.max_d,
        "min_d": cell.geometry.min_d,
        "title": hover_text(cell.hover),
        "month_label": cell.hover.month_label,
    }


def build_heatmap_html(heatmap: HeatmapGeometry, config: ChartConfig | None = None) -> str:
    """Build the heatmap as an inline SVG fragment.

    Args:
        heatmap: Output of ``core.build_heatmap``.
        config: The configuration the geometry was built with.

    Returns:
        Rendered HTML string containing one ``<svg>`` element.
    """
    config = config or ChartConfig()
    layout = heatmap.layout
    legend = heatmap.legend

    year_labels = [
        {"x": x, "y": y, "text": str(year)} for year, x, y in layout.year_label_positions()
    ]
    month_labels = [
        {"x": x, "y": y, "text": month_name(month, config.month_names)}
        for month, x, y in layout.month_label_positions()
    ]

    return render_template(
        "heatmap.html.j2",
        svg_width=config.svg.width,
        svg_height=config.svg.height,
        margin_left=config.svg.margin.left,
        margin_top=config.svg.margin.top,
        gradient_id=LEGEND_GRADIENT_ID,
        year_labels=year_labels,
        month_labels=month_labels,
        cells=[_cell_context(cell) for cell in heatmap.cells],
        corner_radius=CELL_CORNER_RADIUS,
        max_line=config.colors.max_line,
        min_line=config.colors.min_line,
        spark_stroke_width=SPARK_STROKE_WIDTH,
        spark_stroke_opacity=SPARK_STROKE_OPACITY,
        legend={
            "x": legend.x,
            "y": legend.y,
            "width": legend.bar_width,
            "height": legend.bar_height,
            "border": config.colors.border,
            "axis_x": legend.x + legend.bar_width,
            "stops": [{"offset": s.offset_pct, "color": s.color} for s in legend.stops],
            "ticks": [{"y": t.y, "label": format_tick(t.value)} for t in legend.ticks],
        },
    )


def build_page_html(
    heatmap: HeatmapGeometry,
    updated: str,
    title: str = "Monthly Temperature Heatmap",
    source: str = "",
    config: ChartConfig | None = None,
) -> str:
    """Wrap the heatmap fragment in a complete HTML page."""
    notice = ""
    if heatmap.degraded_count:
        notice = f"{heatmap.degraded_count} daily rows had non-numeric temperatures."
    return render_template(
        "base.html.j2",
        title=title,
        updated=updated,
        source=source,
        notice=notice,
        heatmap=build_heatmap_html(heatmap, config),
    )
