"""
Prefect flow for building the heatmap page.

Loads the daily temperature table, aggregates it by month, lays out the
heatmap and writes a single static HTML page.

Run locally:
    python -m temperature_heatmap.flows.build
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from prefect import flow, task

from temperature_heatmap.analysis.monthly import (
    MonthlyRecord,
    count_degraded,
    to_monthly_records,
)
from temperature_heatmap.config import get_settings
from temperature_heatmap.core import build_heatmap_from_monthly
from temperature_heatmap.datasources.temperature import DailyRecord, load_daily_records
from temperature_heatmap.renderers.heatmap import build_page_html
from temperature_heatmap.schemas import ChartConfig

# Default output location; overridable per run
SITE_DIR = Path(get_settings().site_dir)


# =============================================================================
# Tasks
# =============================================================================


@task(name="load-daily-records")
def load_daily(source: str) -> list[DailyRecord]:
    """Load the daily table from a local path or URL.

    Remote fetches retry inside ``services.http``; the task itself does not.
    """
    return load_daily_records(source)


@task(name="aggregate-monthly")
def aggregate_monthly(daily: list[DailyRecord]) -> list[MonthlyRecord]:
    """Group daily rows into monthly records."""
    return to_monthly_records(daily)


@task(name="build-html")
def build_html(
    monthly: list[MonthlyRecord],
    source: str,
    degraded_count: int = 0,
    config: ChartConfig | None = None,
) -> str:
    """Compute heatmap geometry and render the full page."""
    heatmap = build_heatmap_from_monthly(monthly, config=config, degraded_count=degraded_count)
    updated = datetime.now(UTC).strftime("%Y-%m-%d %H:%M UTC")
    return build_page_html(heatmap, updated=updated, source=source, config=config)


@task(name="write-site")
def write_site(html: str, site_dir: Path | None = None) -> Path:
    """Write HTML to the site directory."""
    target = site_dir or SITE_DIR
    target.mkdir(parents=True, exist_ok=True)
    output_path = target / "index.html"
    with output_path.open("w", encoding="utf-8") as f:
        f.write(html)
    return output_path


# =============================================================================
# Flow
# =============================================================================


@flow(name="build-site", log_prints=True)
def build_all(
    source: str | None = None,
    site_dir: Path | None = None,
    config: ChartConfig | None = None,
) -> dict[str, Any]:
    """
    Build the static heatmap page.

    Args:
        source: Daily table path or URL (default: ``Settings.data_source``).
        site_dir: Output directory (default: ``SITE_DIR``).
        config: Chart configuration (default: ``ChartConfig()``).
    """
    source = source or get_settings().data_source

    print(f"Loading daily records from {source}...")
    daily = load_daily(source)

    print("Aggregating by month...")
    monthly = aggregate_monthly(daily)
    if not monthly:
        print("No dated records found. Nothing to build.")
        return {"error": "no data"}

    degraded = count_degraded(daily)
    if degraded:
        print(f"Warning: {degraded} daily rows have non-numeric temperatures.")

    print("Building HTML...")
    html = build_html(monthly, source, degraded_count=degraded, config=config)

    print("Writing site...")
    output_path = write_site(html, site_dir)

    print(f"Site built: {output_path}")
    return {"months": len(monthly), "degraded": degraded, "output": str(output_path)}


if __name__ == "__main__":
    result = build_all()
    print(f"Flow complete: {result}")
