"""Legend geometry: gradient stops and the vertical temperature axis.

The legend uses the same fixed domain as the colour scale. Gradient stops
are sampled evenly from it so the rendered bar matches cell colours at
every stop. The top of the bar is the domain minimum (0 °C by default).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from temperature_heatmap.geometry.color import color_scale
from temperature_heatmap.geometry.scales import LinearScale
from temperature_heatmap.schemas import ChartConfig

if TYPE_CHECKING:
    from temperature_heatmap.geometry.layout import Layout


@dataclass(frozen=True)
class LegendStop:
    """One gradient stop: fractional offset along the bar and its colour."""

    offset: float
    color: str

    @property
    def offset_pct(self) -> str:
        """Offset as an SVG percentage string, e.g. ``"25%"``."""
        return f"{self.offset * 100:g}%"


@dataclass(frozen=True)
class LegendTick:
    """Axis tick: temperature value and its absolute y position."""

    value: float
    y: float


@dataclass(frozen=True)
class LegendGeometry:
    """Position of the colour bar plus its stops, axis and ticks."""

    x: float
    y: float
    bar_width: float
    bar_height: float
    stops: tuple[LegendStop, ...]
    axis: LinearScale
    ticks: tuple[LegendTick, ...]


def build_legend_stops(steps: int = 21, config: ChartConfig | None = None) -> list[LegendStop]:
    """Evenly spaced gradient stops across the fixed temperature domain.

    Args:
        steps: Number of stops including both ends (21 = every 5%).
        config: Chart configuration (defaults to ``ChartConfig()``).

    Raises:
        ValueError: If ``steps`` is less than 2.
    """
    if steps < 2:
        msg = f"A gradient needs at least 2 stops, got {steps}"
        raise ValueError(msg)
    config = config or ChartConfig()
    scale = color_scale(config)
    lo, hi = config.temp_domain
    stops = []
    for i in range(steps):
        t = i / (steps - 1)
        stops.append(LegendStop(offset=t, color=scale(lo + t * (hi - lo))))
    return stops


def legend_axis_scale(config: ChartConfig | None = None, top: float | None = None) -> LinearScale:
    """Linear ``temperature -> y`` mapping along the bar (not clamped)."""
    config = config or ChartConfig()
    if top is None:
        top = config.svg.margin.top
    return LinearScale(domain=config.temp_domain, range=(top, top + config.legend.bar_height))


def build_legend(layout: Layout, config: ChartConfig | None = None) -> LegendGeometry:
    """Place the legend to the right of the grid and compute its ticks."""
    config = config or ChartConfig()
    x = config.svg.margin.left + layout.chart_width + config.legend.gap
    y = config.svg.margin.top
    axis = legend_axis_scale(config, top=y)
    return LegendGeometry(
        x=x,
        y=y,
        bar_width=config.legend.bar_width,
        bar_height=config.legend.bar_height,
        stops=tuple(build_legend_stops(config.legend.stop_count, config)),
        axis=axis,
        ticks=tuple(LegendTick(value=v, y=axis(v)) for v in axis.ticks(config.legend.tick_count)),
    )
