"""Label and tooltip text formatting."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from temperature_heatmap.schemas import DEFAULT_MONTH_NAMES

if TYPE_CHECKING:
    from collections.abc import Sequence

    from temperature_heatmap.core import HoverInfo


def format_temp(value: float) -> str:
    """Whole degrees, e.g. ``21``; NaN prints as ``NaN`` and -0 as ``0``."""
    if math.isnan(value):
        return "NaN"
    return f"{value:z.0f}"


def format_tick(value: float) -> str:
    """Legend axis tick label."""
    return f"{format_temp(value)} Celsius"


def hover_text(hover: HoverInfo) -> str:
    """Tooltip text, e.g. ``Date: 2020-01, max: 20 min: -5``."""
    return (
        f"Date: {hover.month_label}, "
        f"max: {format_temp(hover.max_value)} "
        f"min: {format_temp(hover.min_value)}"
    )


def month_name(month: int, names: Sequence[str] = DEFAULT_MONTH_NAMES) -> str:
    """Row label for a 0-based month index."""
    return names[month]
