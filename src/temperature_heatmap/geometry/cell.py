"""Per-cell sparkline geometry.

Each cell draws two traces, daily max and daily min. Both are placed with
one vertical scale fitted to the month's combined max/min extent, so the
two lines are directly comparable inside the cell. Never fit a scale per
trace.

Coordinates are local to the cell: (0, 0) is its top-left corner and y
grows downward, so the hottest value sits closest to the top padding.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from temperature_heatmap.analysis.monthly import nan_max, nan_min
from temperature_heatmap.geometry.scales import LinearScale
from temperature_heatmap.schemas import ChartConfig

if TYPE_CHECKING:
    from collections.abc import Sequence

    from temperature_heatmap.analysis.monthly import MonthlyRecord

Point = tuple[float, float]


@dataclass(frozen=True)
class CellGeometry:
    """Shared vertical scale and the two sparkline paths built from it."""

    y_scale: LinearScale
    max_path: tuple[Point, ...]
    min_path: tuple[Point, ...]

    @property
    def max_d(self) -> str:
        """SVG path data for the daily max trace."""
        return svg_path(self.max_path)

    @property
    def min_d(self) -> str:
        """SVG path data for the daily min trace."""
        return svg_path(self.min_path)


def cell_y_scale(record: MonthlyRecord, config: ChartConfig | None = None) -> LinearScale:
    """Vertical scale spanning every daily max and min of the month, niced.

    The range is inverted: the domain maximum maps to the top padding.
    """
    config = config or ChartConfig()
    all_values = [v for day in record.values for v in (day.max, day.min)]
    domain = (nan_min(all_values), nan_max(all_values))
    pad_y = config.cell.spark_pad_y
    return LinearScale(
        domain=domain,
        range=(config.cell.height - pad_y, pad_y),
    ).nice()


def spark_x(index: int, count: int, cell_width: float, pad_x: float) -> float:
    """Horizontal position of point ``index`` out of ``count``.

    Points spread evenly over [pad_x, cell_width - pad_x]. With one point
    the divisor is floored at 1, which puts it at ``pad_x`` (not centred).
    """
    steps = max(count - 1, 1)
    return pad_x + (index / steps) * (cell_width - 2 * pad_x)


def _trace(
    values: Sequence[float], cell_width: float, pad_x: float, y_scale: LinearScale
) -> tuple[Point, ...]:
    n = len(values)
    return tuple((spark_x(i, n, cell_width, pad_x), y_scale(v)) for i, v in enumerate(values))


def build_cell_geometry(
    record: MonthlyRecord,
    cell_width: float,
    config: ChartConfig | None = None,
) -> CellGeometry:
    """Compute both sparkline coordinate sequences for one month.

    Args:
        record: The month to draw.
        cell_width: Cell width from the layout.
        config: Chart configuration (defaults to ``ChartConfig()``).

    Returns:
        CellGeometry whose ``max_path`` and ``min_path`` share ``y_scale``.
    """
    config = config or ChartConfig()
    y_scale = cell_y_scale(record, config)
    pad_x = config.cell.spark_pad_x
    return CellGeometry(
        y_scale=y_scale,
        max_path=_trace([d.max for d in record.values], cell_width, pad_x, y_scale),
        min_path=_trace([d.min for d in record.values], cell_width, pad_x, y_scale),
    )


def _fmt(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == int(value):
        return str(int(value))
    return repr(value)


def svg_path(points: Sequence[Point]) -> str:
    """Polyline path data, e.g. ``M4,12L10,8``.

    A single point becomes a closed zero-length path (``M4,12Z``); no
    points gives an empty string.
    """
    if not points:
        return ""
    parts = [f"M{_fmt(points[0][0])},{_fmt(points[0][1])}"]
    parts.extend(f"L{_fmt(x)},{_fmt(y)}" for x, y in points[1:])
    if len(points) == 1:
        parts.append("Z")
    return "".join(parts)
