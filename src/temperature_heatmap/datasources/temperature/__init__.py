"""Daily max/min temperature table.

A delimited table with a header row and at least three columns: ``date``
(``YYYY-MM-DD``), ``max_temperature`` and ``min_temperature``.

Public API:
  - models: DailyRecord
  - client: column constants, fetch_table_text
  - loader: parse_date, coerce_number, parse_daily_rows, read_daily_csv,
            load_daily_records
"""

from temperature_heatmap.datasources.temperature.client import (
    DATE_COLUMN,
    DEFAULT_SOURCE,
    MAX_COLUMN,
    MIN_COLUMN,
    fetch_table_text,
)
from temperature_heatmap.datasources.temperature.loader import (
    coerce_number,
    load_daily_records,
    parse_daily_rows,
    parse_date,
    read_daily_csv,
)
from temperature_heatmap.datasources.temperature.models import DailyRecord

__all__ = [
    "DATE_COLUMN",
    "DEFAULT_SOURCE",
    "MAX_COLUMN",
    "MIN_COLUMN",
    "DailyRecord",
    "coerce_number",
    "fetch_table_text",
    "load_daily_records",
    "parse_daily_rows",
    "parse_date",
    "read_daily_csv",
]
