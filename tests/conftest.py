"""Shared fixtures: small hand-checked daily datasets."""

from __future__ import annotations

from datetime import date

import pytest

from temperature_heatmap.datasources.temperature import DailyRecord


def day(iso: str, tmax: float, tmin: float) -> DailyRecord:
    """Build a DailyRecord from an ISO date string."""
    return DailyRecord(date=date.fromisoformat(iso), max=tmax, min=tmin)


@pytest.fixture
def example_daily() -> list[DailyRecord]:
    """Two January days and one February day in 2020."""
    return [
        day("2020-01-05", 10.0, 2.0),
        day("2020-01-15", 20.0, -5.0),
        day("2020-02-10", 5.0, -1.0),
    ]


@pytest.fixture
def example_csv() -> str:
    """The same three rows as ``example_daily`` plus an undated row."""
    return (
        "date,max_temperature,min_temperature\n"
        "2020-01-05,10,2\n"
        "2020-01-15,20,-5\n"
        "not-a-date,99,99\n"
        "2020-02-10,5,-1\n"
    )
