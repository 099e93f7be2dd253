"""
Chart configuration models.

Pydantic models describing the chart's fixed geometry, palette and
temperature domain. A single ``ChartConfig`` is passed into every pipeline
entry point; the defaults reproduce the reference chart.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# =============================================================================
# SVG canvas
# =============================================================================


class Margin(BaseModel):
    """Space between the SVG edge and the cell grid."""

    model_config = {"frozen": True}

    top: float = Field(default=55, ge=0)
    right: float = Field(default=130, ge=0)
    bottom: float = Field(default=30, ge=0)
    left: float = Field(default=110, ge=0)


class SvgConfig(BaseModel):
    """Overall SVG canvas size."""

    model_config = {"frozen": True}

    width: float = Field(default=1150, gt=0)
    height: float = Field(default=720, gt=0)
    margin: Margin = Field(default_factory=Margin)


# =============================================================================
# Cells, legend, colours
# =============================================================================


class CellConfig(BaseModel):
    """Fixed row height and sparkline padding inside each cell.

    Cell width is not configured: it is derived from the number of years.
    """

    model_config = {"frozen": True}

    height: float = Field(default=52, gt=0)
    spark_pad_x: float = Field(default=4, ge=0)
    spark_pad_y: float = Field(default=5, ge=0)


class LegendConfig(BaseModel):
    """Vertical colour bar drawn to the right of the grid."""

    model_config = {"frozen": True}

    bar_width: float = Field(default=18, gt=0)
    bar_height: float = Field(default=260, gt=0)
    tick_count: int = Field(default=5, ge=1)
    gap: float = Field(default=30, ge=0, description="Distance between grid and bar")
    stop_count: int = Field(default=21, ge=2, description="Gradient stops (21 = every 5%)")


class ColorConfig(BaseModel):
    """Stroke colours and the fill palette name."""

    model_config = {"frozen": True}

    max_line: str = "#22a84a"  # green: daily max sparkline
    min_line: str = "#d8d8d8"  # light gray: daily min sparkline
    border: str = "#7b8ea6"
    palette: str = "turbo"
    unknown: str = "#000000"  # fill for NaN temperatures


class ChartConfig(BaseModel):
    """Complete chart configuration.

    ``temp_domain`` is fixed in degrees Celsius and deliberately independent of
    the data, so colours stay comparable across datasets.
    """

    model_config = {"frozen": True}

    svg: SvgConfig = Field(default_factory=SvgConfig)
    cell: CellConfig = Field(default_factory=CellConfig)
    legend: LegendConfig = Field(default_factory=LegendConfig)
    colors: ColorConfig = Field(default_factory=ColorConfig)
    temp_domain: tuple[float, float] = (0.0, 40.0)
    month_names: tuple[str, ...] = Field(
        default=DEFAULT_MONTH_NAMES, min_length=12, max_length=12
    )

    @field_validator("temp_domain")
    @classmethod
    def _check_domain(cls, value: tuple[float, float]) -> tuple[float, float]:
        lo, hi = value
        if not lo < hi:
            msg = f"temp_domain must be increasing, got {value}"
            raise ValueError(msg)
        return value

    @field_validator("colors")
    @classmethod
    def _check_palette(cls, value: ColorConfig) -> ColorConfig:
        # Local import: geometry.color imports this module at load time.
        from temperature_heatmap.geometry.color import PALETTES

        if value.palette not in PALETTES:
            msg = f"Unknown palette {value.palette!r}; choose from {sorted(PALETTES)}"
            raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def _check_width(self) -> ChartConfig:
        if self.available_width <= 0:
            msg = (
                f"svg width {self.svg.width} leaves no room for cells between "
                f"margins {self.svg.margin.left} and {self.svg.margin.right}"
            )
            raise ValueError(msg)
        return self

    @property
    def available_width(self) -> float:
        """Horizontal space for the cell grid (canvas minus side margins)."""
        return self.svg.width - self.svg.margin.left - self.svg.margin.right
