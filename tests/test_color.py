"""Tests for the fixed-domain temperature colour scale."""

from __future__ import annotations

import math

import pytest

from temperature_heatmap.geometry.color import (
    ColorScale,
    color_for,
    color_scale,
    interpolate_turbo,
)
from temperature_heatmap.schemas import ChartConfig, ColorConfig


class TestInterpolateTurbo:
    """Tests for the palette itself."""

    def test_endpoints(self) -> None:
        assert interpolate_turbo(0.0) == "#23171b"
        assert interpolate_turbo(1.0) == "#900c00"

    def test_clamps_position(self) -> None:
        assert interpolate_turbo(-1.0) == interpolate_turbo(0.0)
        assert interpolate_turbo(2.0) == interpolate_turbo(1.0)

    def test_hex_format(self) -> None:
        for i in range(11):
            color = interpolate_turbo(i / 10)
            assert len(color) == 7
            assert color.startswith("#")
            int(color[1:], 16)


class TestColorFor:
    """Tests for temperature -> colour."""

    def test_clamped_below(self) -> None:
        assert color_for(-10) == color_for(0)

    def test_clamped_above(self) -> None:
        assert color_for(50) == color_for(40)

    def test_domain_boundaries(self) -> None:
        assert color_for(0) == "#23171b"
        assert color_for(40) == "#900c00"

    def test_interior_differs_from_boundaries(self) -> None:
        assert color_for(20) not in {color_for(0), color_for(40)}

    def test_independent_of_data(self) -> None:
        """The same temperature always gets the same colour."""
        assert color_for(17.5) == color_for(17.5) == color_scale()(17.5)

    def test_nan_is_unknown_colour(self) -> None:
        assert color_for(math.nan) == "#000000"

    def test_custom_unknown_colour(self) -> None:
        config = ChartConfig(colors=ColorConfig(unknown="#cccccc"))
        assert color_for(math.nan, config) == "#cccccc"

    def test_custom_domain(self) -> None:
        config = ChartConfig(temp_domain=(-20.0, 20.0))
        assert color_for(0, config) == interpolate_turbo(0.5)


class TestColorScale:
    """Tests for the scale object."""

    def test_position(self) -> None:
        scale = ColorScale(domain=(0, 40), interpolator=interpolate_turbo)
        assert scale.position(10) == pytest.approx(0.25)
        assert scale.position(-10) == 0.0
        assert scale.position(80) == 1.0

    def test_unclamped_position(self) -> None:
        scale = ColorScale(domain=(0, 40), interpolator=interpolate_turbo, clamp=False)
        assert scale.position(80) == pytest.approx(2.0)

    def test_built_from_config(self) -> None:
        scale = color_scale(ChartConfig())
        assert scale.domain == (0.0, 40.0)
        assert scale.clamp is True
