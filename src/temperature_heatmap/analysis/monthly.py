"""Monthly aggregation of daily temperature records.

Groups daily rows by calendar (year, month) and precomputes the monthly
extrema the heatmap needs: cell fill uses ``max_value``, the tooltip shows
both. Months are 0-based (January = 0) to match the grid's row index.

NaN temperatures are not filtered. A single NaN in a month's ``max``
(or ``min``) column makes that month's ``max_value`` (or ``min_value``) NaN;
``count_degraded`` reports how many rows were affected.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from temperature_heatmap.datasources.temperature.models import DailyRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthlyRecord:
    """All daily rows of one calendar month plus their extrema."""

    year: int
    month: int  # 0-11
    month_date: date
    values: tuple[DailyRecord, ...]
    max_value: float
    min_value: float

    @property
    def day_count(self) -> int:
        """Number of daily rows in the month."""
        return len(self.values)


def nan_max(values: Iterable[float]) -> float:
    """Maximum that returns NaN if any value is NaN."""
    items = list(values)
    if any(math.isnan(v) for v in items):
        return math.nan
    return max(items)


def nan_min(values: Iterable[float]) -> float:
    """Minimum that returns NaN if any value is NaN."""
    items = list(values)
    if any(math.isnan(v) for v in items):
        return math.nan
    return min(items)


def has_valid_date(record: DailyRecord) -> bool:
    """True when the record carries a real calendar date."""
    return isinstance(record.date, date)


def count_degraded(daily_records: Iterable[DailyRecord]) -> int:
    """Count dated records whose max or min temperature is NaN."""
    return sum(
        1
        for r in daily_records
        if has_valid_date(r) and (math.isnan(r.max) or math.isnan(r.min))
    )


def to_monthly_records(daily_records: Sequence[DailyRecord]) -> list[MonthlyRecord]:
    """Group daily rows into one ``MonthlyRecord`` per (year, month).

    Rows without a valid date are dropped first. Each month's rows are
    sorted by date before the extrema are taken.

    Args:
        daily_records: Parsed daily rows, in any order.

    Returns:
        Monthly records sorted ascending by ``month_date``. Empty input
        gives an empty list.
    """
    groups: dict[tuple[int, int], list[tuple[date, DailyRecord]]] = {}
    for record in daily_records:
        day = record.date
        if not isinstance(day, date):
            continue
        if isinstance(day, datetime):
            day = day.date()
        groups.setdefault((day.year, day.month - 1), []).append((day, record))

    monthly: list[MonthlyRecord] = []
    for (year, month), dated in groups.items():
        dated.sort(key=lambda pair: pair[0])
        rows = [record for _, record in dated]
        monthly.append(
            MonthlyRecord(
                year=year,
                month=month,
                month_date=date(year, month + 1, 1),
                values=tuple(rows),
                max_value=nan_max(r.max for r in rows),
                min_value=nan_min(r.min for r in rows),
            )
        )
    monthly.sort(key=lambda m: m.month_date)

    degraded = count_degraded(daily_records)
    if degraded:
        logger.warning("%d daily records have non-numeric temperatures", degraded)
    logger.debug("Aggregated %d months from %d daily rows", len(monthly), len(daily_records))
    return monthly
