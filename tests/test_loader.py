"""Tests for the daily temperature table loader."""

from __future__ import annotations

import math
from datetime import date
from typing import TYPE_CHECKING
from unittest.mock import MagicMock, patch

import pytest

from temperature_heatmap.datasources.temperature import (
    DailyRecord,
    coerce_number,
    load_daily_records,
    parse_daily_rows,
    parse_date,
    read_daily_csv,
)
from temperature_heatmap.datasources.temperature.client import is_remote

if TYPE_CHECKING:
    from pathlib import Path


class TestParseDate:
    """Tests for YYYY-MM-DD parsing."""

    def test_valid_date(self) -> None:
        assert parse_date("2020-01-05") == date(2020, 1, 5)

    def test_surrounding_whitespace(self) -> None:
        assert parse_date(" 2020-01-05 ") == date(2020, 1, 5)

    @pytest.mark.parametrize(
        "text",
        ["", None, "garbage", "2020-13-01", "2021-02-30", "05/01/2020", "2020-01-05T00:00"],
    )
    def test_invalid_returns_none(self, text: str | None) -> None:
        """Unparseable or impossible dates become None instead of raising."""
        assert parse_date(text) is None


class TestCoerceNumber:
    """Tests for lenient numeric coercion."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("12.5", 12.5), ("-3", -3.0), (" 7 ", 7.0), ("1e1", 10.0)],
    )
    def test_numbers(self, text: str, expected: float) -> None:
        assert coerce_number(text) == expected

    @pytest.mark.parametrize("text", ["", "   "])
    def test_blank_is_zero(self, text: str) -> None:
        assert coerce_number(text) == 0.0

    @pytest.mark.parametrize(
        "text",
        [None, "abc", "12abc", "1_000", "inf", "-inf", "+inf", "infinity", "INF", "-Infinity_"],
    )
    def test_unparseable_is_nan(self, text: str | None) -> None:
        assert math.isnan(coerce_number(text))

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("Infinity", math.inf), ("+Infinity", math.inf), (" -Infinity ", -math.inf)],
    )
    def test_exact_infinity_spelling(self, text: str, expected: float) -> None:
        """Only the capitalised long form reads as infinite."""
        assert coerce_number(text) == expected

    def test_lowercase_inf_row_is_degraded(self) -> None:
        records = read_daily_csv("date,max_temperature,min_temperature\n2020-01-01,inf,1\n")
        assert math.isnan(records[0].max)


class TestParseDailyRows:
    """Tests for row-to-record conversion."""

    def test_keeps_every_row(self) -> None:
        """Rows with bad dates are kept (marked) for the aggregator to drop."""
        rows = [
            {"date": "2020-01-05", "max_temperature": "10", "min_temperature": "2"},
            {"date": "bad", "max_temperature": "1", "min_temperature": "0"},
        ]
        records = parse_daily_rows(rows)
        assert records == [
            DailyRecord(date=date(2020, 1, 5), max=10.0, min=2.0),
            DailyRecord(date=None, max=1.0, min=0.0),
        ]

    def test_missing_columns_are_nan(self) -> None:
        records = parse_daily_rows([{"date": "2020-01-05"}])
        assert math.isnan(records[0].max)
        assert math.isnan(records[0].min)

    def test_logs_undated_rows(self, caplog: pytest.LogCaptureFixture) -> None:
        rows = [{"date": "x", "max_temperature": "1", "min_temperature": "0"}]
        with caplog.at_level("INFO", logger="temperature_heatmap.datasources.temperature.loader"):
            parse_daily_rows(rows)
        assert "unparseable date" in caplog.text


class TestReadDailyCsv:
    """Tests for delimited text parsing."""

    def test_example_table(self, example_csv: str) -> None:
        records = read_daily_csv(example_csv)
        assert len(records) == 4
        assert records[0] == DailyRecord(date=date(2020, 1, 5), max=10.0, min=2.0)
        assert records[2].date is None

    def test_custom_delimiter(self) -> None:
        text = "date;max_temperature;min_temperature\n2020-01-05;10;2\n"
        records = read_daily_csv(text, delimiter=";")
        assert records == [DailyRecord(date=date(2020, 1, 5), max=10.0, min=2.0)]

    def test_extra_columns_ignored(self) -> None:
        text = "date,station,max_temperature,min_temperature\n2020-01-05,A,10,2\n"
        assert read_daily_csv(text)[0].max == 10.0

    def test_header_only(self) -> None:
        assert read_daily_csv("date,max_temperature,min_temperature\n") == []


class TestLoadDailyRecords:
    """Tests for loading from files and URLs."""

    def test_is_remote(self) -> None:
        assert is_remote("https://example.org/t.csv")
        assert is_remote("http://example.org/t.csv")
        assert not is_remote("data/t.csv")

    def test_load_from_file(self, tmp_path: Path, example_csv: str) -> None:
        path = tmp_path / "temperature_daily.csv"
        path.write_text(example_csv)

        records = load_daily_records(path)
        assert len(records) == 4

    def test_load_from_str_path(self, tmp_path: Path, example_csv: str) -> None:
        path = tmp_path / "temperature_daily.csv"
        path.write_text(example_csv)

        assert len(load_daily_records(str(path))) == 4

    def test_load_from_url(self, example_csv: str) -> None:
        """URLs are fetched through the shared HTTP session."""
        mock_resp = MagicMock()
        mock_resp.text = example_csv

        with patch(
            "temperature_heatmap.datasources.temperature.client.session"
        ) as mock_session:
            mock_session.get.return_value = mock_resp
            records = load_daily_records("https://example.org/temperature_daily.csv")

        mock_session.get.assert_called_once_with("https://example.org/temperature_daily.csv")
        mock_resp.raise_for_status.assert_called_once()
        assert len(records) == 4
