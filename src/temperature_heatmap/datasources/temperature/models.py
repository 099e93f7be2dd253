"""Daily temperature data model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date


@dataclass(frozen=True)
class DailyRecord:
    """One parsed row of the daily table.

    ``date`` is None when the row's date could not be parsed. ``max`` and
    ``min`` are NaN when their text could not be coerced to a number.
    """

    date: date | None
    max: float
    min: float
