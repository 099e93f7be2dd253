"""Grid layout: one column per year, one row per month.

Cell width is derived from the data: the available plotting width divided
(integer floor) by the number of distinct years. Leftover pixels stay unused
at the right edge. Rows always cover all twelve months, so a month missing
from the data leaves an empty slot instead of collapsing the grid.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from temperature_heatmap.geometry.scales import BandScale
from temperature_heatmap.schemas import ChartConfig

if TYPE_CHECKING:
    from collections.abc import Sequence

    from temperature_heatmap.analysis.monthly import MonthlyRecord

MONTHS_PER_YEAR = 12

# Label anchors relative to the grid origin
YEAR_LABEL_OFFSET_Y = -12
MONTH_LABEL_OFFSET_X = -10
MONTH_LABEL_BASELINE = 4


@dataclass(frozen=True)
class Layout:
    """Grid dimensions and positional scales for the whole chart."""

    years: tuple[int, ...]
    cell_width: int
    cell_height: float
    chart_width: float
    chart_height: float
    x_scale: BandScale
    y_scale: BandScale

    def cell_origin(self, year: int, month: int) -> tuple[float, float]:
        """Top-left corner of the (year, month) cell relative to the grid."""
        return self.x_scale(year), self.y_scale(month)

    def year_label_positions(self) -> list[tuple[int, float, float]]:
        """(year, x, y) anchors centred above each column."""
        return [
            (year, self.x_scale(year) + self.cell_width / 2, YEAR_LABEL_OFFSET_Y)
            for year in self.years
        ]

    def month_label_positions(self) -> list[tuple[int, float, float]]:
        """(month, x, y) anchors right-aligned to the left of each row."""
        return [
            (
                month,
                MONTH_LABEL_OFFSET_X,
                self.y_scale(month) + self.cell_height / 2 + MONTH_LABEL_BASELINE,
            )
            for month in range(MONTHS_PER_YEAR)
        ]


def create_layout(
    monthly_records: Sequence[MonthlyRecord],
    config: ChartConfig | None = None,
) -> Layout:
    """Derive the grid from the distinct years present in the records.

    Args:
        monthly_records: Aggregated months; at least one is required.
        config: Chart configuration (defaults to ``ChartConfig()``).

    Returns:
        Layout with floor-divided cell width and band scales for both axes.

    Raises:
        ValueError: If ``monthly_records`` is empty, or the years leave
            less than one pixel per column.
    """
    config = config or ChartConfig()
    years = tuple(sorted({r.year for r in monthly_records}))
    if not years:
        msg = "Cannot lay out a heatmap without any monthly records"
        raise ValueError(msg)

    cell_width = math.floor(config.available_width / len(years))
    if cell_width < 1:
        msg = f"{len(years)} years do not fit in {config.available_width}px of chart width"
        raise ValueError(msg)
    cell_height = config.cell.height
    chart_width = len(years) * cell_width
    chart_height = MONTHS_PER_YEAR * cell_height

    return Layout(
        years=years,
        cell_width=cell_width,
        cell_height=cell_height,
        chart_width=chart_width,
        chart_height=chart_height,
        x_scale=BandScale(domain=years, range=(0, chart_width)),
        y_scale=BandScale(domain=tuple(range(MONTHS_PER_YEAR)), range=(0, chart_height)),
    )
