"""Temperature colour scale.

The domain is fixed by ``ChartConfig.temp_domain`` (0-40 °C by default) and
never fitted to the data, so the same temperature always gets the same
colour in every cell, in the legend, and across datasets. Out-of-domain
temperatures saturate to the boundary colours.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from temperature_heatmap.schemas import ChartConfig

Interpolator = Callable[[float], str]


def _channel(value: float) -> int:
    return max(0, min(255, math.floor(value + 0.5)))


def interpolate_turbo(t: float) -> str:
    """Turbo colormap (dark blue -> cyan -> green -> yellow -> red -> dark red).

    Polynomial approximation of Google's Turbo palette. ``t`` is clamped
    to [0, 1].
    """
    t = max(0.0, min(1.0, t))
    r = 34.61 + t * (1172.33 - t * (10793.56 - t * (33300.12 - t * (38394.49 - t * 14825.05))))
    g = 23.31 + t * (557.33 + t * (1225.33 - t * (3574.96 - t * (1073.77 + t * 707.56))))
    b = 27.2 + t * (3211.1 - t * (15327.97 - t * (27814 - t * (22569.18 - t * 6838.66))))
    return f"#{_channel(r):02x}{_channel(g):02x}{_channel(b):02x}"


PALETTES: dict[str, Interpolator] = {
    "turbo": interpolate_turbo,
}


@dataclass(frozen=True)
class ColorScale:
    """Maps a temperature to a colour through a normalised palette position."""

    domain: tuple[float, float]
    interpolator: Interpolator
    clamp: bool = True
    unknown: str = "#000000"

    def position(self, value: float) -> float:
        """Normalised palette position ``(value - lo) / (hi - lo)``."""
        lo, hi = self.domain
        t = (value - lo) / (hi - lo)
        if self.clamp:
            t = min(1.0, max(0.0, t))
        return t

    def __call__(self, value: float) -> str:
        if math.isnan(value):
            return self.unknown
        return self.interpolator(self.position(value))


def color_scale(config: ChartConfig | None = None) -> ColorScale:
    """Build the chart's clamped colour scale from its configuration."""
    config = config or ChartConfig()
    return ColorScale(
        domain=config.temp_domain,
        interpolator=PALETTES[config.colors.palette],
        clamp=True,
        unknown=config.colors.unknown,
    )


def color_for(temperature: float, config: ChartConfig | None = None) -> str:
    """Colour for a temperature in °C."""
    return color_scale(config)(temperature)
