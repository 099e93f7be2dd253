"""
Heatmap pipeline.

Runs the whole data-to-geometry pipeline in one synchronous pass:

    daily records -> monthly records -> layout -> per-cell geometry -> legend

The result is everything a renderer needs and nothing more. Each call
works on its own snapshot of the input and shares no state with earlier
calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from temperature_heatmap.analysis.monthly import count_degraded, to_monthly_records
from temperature_heatmap.geometry.cell import CellGeometry, build_cell_geometry
from temperature_heatmap.geometry.color import color_scale
from temperature_heatmap.geometry.layout import Layout, create_layout
from temperature_heatmap.geometry.legend import LegendGeometry, build_legend
from temperature_heatmap.schemas import ChartConfig

if TYPE_CHECKING:
    from collections.abc import Sequence

    from temperature_heatmap.analysis.monthly import MonthlyRecord
    from temperature_heatmap.datasources.temperature.models import DailyRecord


@dataclass(frozen=True)
class HoverInfo:
    """Tooltip payload for one cell."""

    month_label: str  # YYYY-MM
    max_value: float
    min_value: float


@dataclass(frozen=True)
class CellView:
    """Everything needed to draw one (year, month) cell."""

    record: MonthlyRecord
    x: float
    y: float
    width: float
    height: float
    fill: str
    border: str
    geometry: CellGeometry
    hover: HoverInfo


@dataclass(frozen=True)
class HeatmapGeometry:
    """Complete renderer input for one dataset."""

    layout: Layout
    cells: tuple[CellView, ...]
    legend: LegendGeometry
    degraded_count: int = 0


def hover_info(record: MonthlyRecord) -> HoverInfo:
    """Build the tooltip payload for a month."""
    return HoverInfo(
        month_label=record.month_date.strftime("%Y-%m"),
        max_value=record.max_value,
        min_value=record.min_value,
    )


def build_heatmap_from_monthly(
    monthly_records: Sequence[MonthlyRecord],
    config: ChartConfig | None = None,
    degraded_count: int = 0,
) -> HeatmapGeometry:
    """Lay out already-aggregated months and compute every cell's geometry.

    Raises:
        ValueError: If ``monthly_records`` is empty.
    """
    config = config or ChartConfig()
    layout = create_layout(monthly_records, config)
    colors = color_scale(config)

    cells = []
    for record in monthly_records:
        x, y = layout.cell_origin(record.year, record.month)
        cells.append(
            CellView(
                record=record,
                x=x,
                y=y,
                width=layout.cell_width,
                height=layout.cell_height,
                fill=colors(record.max_value),
                border=config.colors.border,
                geometry=build_cell_geometry(record, layout.cell_width, config),
                hover=hover_info(record),
            )
        )

    return HeatmapGeometry(
        layout=layout,
        cells=tuple(cells),
        legend=build_legend(layout, config),
        degraded_count=degraded_count,
    )


def build_heatmap(
    daily_records: Sequence[DailyRecord],
    config: ChartConfig | None = None,
) -> HeatmapGeometry:
    """
    Run the full pipeline on parsed daily records.

    Args:
        daily_records: Rows from the data source; undated rows are dropped.
        config: Chart configuration (defaults to ``ChartConfig()``).

    Returns:
        HeatmapGeometry with layout, one CellView per month, and the legend.

    Raises:
        ValueError: If no record has a valid date.
    """
    monthly = to_monthly_records(daily_records)
    return build_heatmap_from_monthly(
        monthly,
        config=config,
        degraded_count=count_degraded(daily_records),
    )
