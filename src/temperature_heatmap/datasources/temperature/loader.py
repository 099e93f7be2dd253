"""Parse the daily temperature table into ``DailyRecord`` rows.

Coercion rules:

    date   ``YYYY-MM-DD``; anything else (including impossible calendar
           dates such as 2021-02-30) becomes None
    max    blank text -> 0.0, missing column or unparseable text -> NaN
    min    same as max

Rows are never dropped here. Filtering invalid dates is the aggregator's job.
"""

from __future__ import annotations

import csv
import io
import logging
import math
from datetime import date, datetime
from pathlib import Path
from typing import TYPE_CHECKING

from temperature_heatmap.datasources.temperature.client import (
    DATE_COLUMN,
    DATE_FORMAT,
    MAX_COLUMN,
    MIN_COLUMN,
    fetch_table_text,
    is_remote,
)
from temperature_heatmap.datasources.temperature.models import DailyRecord

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)

# The only infinity spellings a browser number coercion accepts
INFINITY_SPELLINGS = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def parse_date(text: str | None) -> date | None:
    """Parse a ``YYYY-MM-DD`` string, returning None when it is not a valid date."""
    if not text:
        return None
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except ValueError:
        return None


def coerce_number(text: str | None) -> float:
    """Coerce a table cell to float the lenient way a browser loader would.

    Blank cells read as 0.0 and unparseable ones as NaN; nothing raises.
    """
    if text is None:
        return math.nan
    stripped = text.strip()
    if not stripped:
        return 0.0
    if stripped in INFINITY_SPELLINGS:
        return INFINITY_SPELLINGS[stripped]
    if "_" in stripped or "inf" in stripped.lower():
        # float() also accepts digit separators and "inf" in any case
        return math.nan
    try:
        return float(stripped)
    except ValueError:
        return math.nan


def parse_daily_rows(rows: Iterable[Mapping[str, str | None]]) -> list[DailyRecord]:
    """Convert header-keyed rows into ``DailyRecord`` objects, one per row."""
    records = [
        DailyRecord(
            date=parse_date(row.get(DATE_COLUMN)),
            max=coerce_number(row.get(MAX_COLUMN)),
            min=coerce_number(row.get(MIN_COLUMN)),
        )
        for row in rows
    ]
    undated = sum(1 for r in records if r.date is None)
    logger.debug("Parsed %d daily rows", len(records))
    if undated:
        logger.info("%d of %d rows have an unparseable date", undated, len(records))
    return records


def read_daily_csv(text: str, delimiter: str = ",") -> list[DailyRecord]:
    """Parse delimited text with a header row into ``DailyRecord`` objects."""
    reader = csv.DictReader(io.StringIO(text), delimiter=delimiter)
    return parse_daily_rows(reader)


def load_daily_records(source: str | Path, delimiter: str = ",") -> list[DailyRecord]:
    """
    Load the daily temperature table from a local file or an http(s) URL.

    Args:
        source: File path, or URL fetched through the shared HTTP session.
        delimiter: Field separator of the table.

    Returns:
        One ``DailyRecord`` per data row, in file order.
    """
    if isinstance(source, str) and is_remote(source):
        logger.debug("Fetching daily table from %s", source)
        text = fetch_table_text(source)
    else:
        text = Path(source).read_text(encoding="utf-8")
    return read_daily_csv(text, delimiter=delimiter)
