"""Daily temperature table: column names, formats and remote fetch."""

from __future__ import annotations

from temperature_heatmap.services.http import session

DATE_COLUMN = "date"
MAX_COLUMN = "max_temperature"
MIN_COLUMN = "min_temperature"

DATE_FORMAT = "%Y-%m-%d"
DEFAULT_SOURCE = "temperature_daily.csv"


def is_remote(source: str) -> bool:
    """True when ``source`` is an http(s) URL rather than a local path."""
    return source.startswith(("http://", "https://"))


def fetch_table_text(url: str) -> str:
    """
    Download a delimited daily temperature table.

    Args:
        url: http(s) URL of the table.

    Returns:
        Response body decoded as text.
    """
    resp = session.get(url)
    resp.raise_for_status()
    return resp.text
