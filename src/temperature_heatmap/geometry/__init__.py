"""Pure geometry: monthly records and temperatures -> pixel positions and colours.

No I/O and no HTML. Every entry point takes an optional ``ChartConfig``.

Public API:
  - scales: LinearScale, BandScale, tick_increment, ticks
  - layout: Layout, create_layout
  - color: ColorScale, color_scale, color_for, interpolate_turbo, PALETTES
  - cell: CellGeometry, build_cell_geometry, cell_y_scale, spark_x, svg_path
  - legend: LegendGeometry, LegendStop, LegendTick, build_legend,
            build_legend_stops, legend_axis_scale
"""

from temperature_heatmap.geometry.cell import (
    CellGeometry,
    build_cell_geometry,
    cell_y_scale,
    spark_x,
    svg_path,
)
from temperature_heatmap.geometry.color import (
    PALETTES,
    ColorScale,
    color_for,
    color_scale,
    interpolate_turbo,
)
from temperature_heatmap.geometry.layout import Layout, create_layout
from temperature_heatmap.geometry.legend import (
    LegendGeometry,
    LegendStop,
    LegendTick,
    build_legend,
    build_legend_stops,
    legend_axis_scale,
)
from temperature_heatmap.geometry.scales import BandScale, LinearScale, tick_increment, ticks

__all__ = [
    "PALETTES",
    "BandScale",
    "CellGeometry",
    "ColorScale",
    "Layout",
    "LegendGeometry",
    "LegendStop",
    "LegendTick",
    "LinearScale",
    "build_cell_geometry",
    "build_legend",
    "build_legend_stops",
    "cell_y_scale",
    "color_for",
    "color_scale",
    "create_layout",
    "interpolate_turbo",
    "legend_axis_scale",
    "spark_x",
    "svg_path",
    "tick_increment",
    "ticks",
]
