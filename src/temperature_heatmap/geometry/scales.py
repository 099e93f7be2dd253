"""Positional scales: linear (with nice/ticks) and band.

Both are immutable; methods such as ``nice`` return a new scale.

Tick and nice arithmetic follow the usual 1-2-5 rule: the increment is a
power of ten times 1, 2, 5 or 10, chosen so that roughly ``count`` ticks fit
the domain. Increments below 1 are represented as negative reciprocals
(``-10`` means 0.1) so tick values are computed by division and stay exact.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Hashable

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)

# nice() gives up if the increment hasn't settled after this many rounds
_NICE_MAX_ITER = 10


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _is_span(start: float, stop: float) -> bool:
    """True when [start, stop] is a finite, non-empty interval."""
    return math.isfinite(start) and math.isfinite(stop) and stop > start


def _tick_params(start: float, stop: float, count: float) -> tuple[int, int, float]:
    """Return (first index, last index, increment) for ticks in [start, stop].

    Callers guarantee ``start < stop`` (both finite) and ``count > 0``.
    """
    step = (stop - start) / count
    power = math.floor(math.log10(step))
    error = step / 10**power
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1

    if power < 0:
        inc = 10**-power / factor
        i1 = _round_half_up(start * inc)
        i2 = _round_half_up(stop * inc)
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = float(10**power * factor)
        i1 = _round_half_up(start / inc)
        i2 = _round_half_up(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1

    if i2 < i1 and 0.5 <= count < 2:
        return _tick_params(start, stop, count * 2)
    return i1, i2, inc


def tick_increment(start: float, stop: float, count: float) -> float:
    """Tick increment for [start, stop]; negative values are inverse steps.

    Returns NaN when the interval is empty or not finite, or ``count`` <= 0.
    """
    if count <= 0 or not _is_span(start, stop):
        return math.nan
    return _tick_params(start, stop, count)[2]


def ticks(start: float, stop: float, count: float) -> list[float]:
    """Evenly spaced round values within [start, stop] (either order)."""
    if not count > 0:
        return []
    if start == stop:
        return [float(start)]
    reverse = stop < start
    if reverse:
        start, stop = stop, start
    if not _is_span(start, stop):
        return []

    i1, i2, inc = _tick_params(start, stop, count)
    if i2 < i1:
        return []
    if inc < 0:
        values = [(i1 + i) / -inc for i in range(i2 - i1 + 1)]
    else:
        values = [(i1 + i) * inc for i in range(i2 - i1 + 1)]
    return values[::-1] if reverse else values


@dataclass(frozen=True)
class LinearScale:
    """Continuous ``domain -> range`` mapping.

    A zero-width domain maps every input to the middle of the range.
    NaN in the domain or the input yields NaN.
    """

    domain: tuple[float, float]
    range: tuple[float, float]
    clamp: bool = False

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        span = d1 - d0
        if math.isnan(span) or math.isnan(value):
            return math.nan
        t = (value - d0) / span if span else 0.5
        if self.clamp:
            t = min(1.0, max(0.0, t))
        return r0 * (1 - t) + r1 * t

    def nice(self, count: int = 10) -> LinearScale:
        """Return a copy whose domain is extended outward to round values.

        The domain is left untouched when it is flat or not finite, or when
        the increment does not settle.
        """
        d0, d1 = self.domain
        reverse = d1 < d0
        start, stop = (d1, d0) if reverse else (d0, d1)
        prestep: float | None = None

        for _ in range(_NICE_MAX_ITER):
            step = tick_increment(start, stop, count)
            if step == prestep:
                niced = (stop, start) if reverse else (start, stop)
                return replace(self, domain=niced)
            if step > 0:
                start = math.floor(start / step) * step
                stop = math.ceil(stop / step) * step
            elif step < 0:
                start = math.ceil(start * step) / step
                stop = math.floor(stop * step) / step
            else:
                # NaN: flat or non-finite interval
                break
            prestep = step
        return self

    def ticks(self, count: int = 10) -> list[float]:
        """Round tick values inside the domain."""
        return ticks(self.domain[0], self.domain[-1], count)


@dataclass(frozen=True)
class BandScale:
    """Discrete keys mapped to equal, gap-free slots along ``range``."""

    domain: tuple[Hashable, ...]
    range: tuple[float, float]

    @property
    def step(self) -> float:
        """Distance between the starts of adjacent bands."""
        r0, r1 = self.range
        return (r1 - r0) / max(1, len(self.domain))

    @property
    def bandwidth(self) -> float:
        """Width of each band (equal to ``step``; there is no padding)."""
        return self.step

    def __call__(self, key: Hashable) -> float:
        try:
            index = self.domain.index(key)
        except ValueError:
            msg = f"{key!r} is not in the band domain"
            raise KeyError(msg) from None
        return self.range[0] + index * self.step
