"""Tests for ValueService: dates, sizes and rounding."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from valuefmt.config.settings import ValuefmtSettings
from valuefmt.domain.sizes import ByteUnit, CountStyle
from valuefmt.services.result import INVALID_VALUE, PARSE_FAILED
from valuefmt.services.values import ValueService


@pytest.fixture
def service(settings: ValuefmtSettings) -> ValueService:
    return ValueService(settings)


class TestDateFormat:
    def test_iso_value(self, service: ValueService) -> None:
        result = service.date_format("2018-06-26T15:30:00", "yyMMdd HH:mm")
        assert result.ok
        assert result.op == "date_format"
        assert result.data == {
            "value": "2018-06-26T15:30:00",
            "pattern": "yyMMdd HH:mm",
            "text": "180626 15:30",
        }

    def test_date_only_value(self, service: ValueService) -> None:
        assert service.date_format("2018-06-26", "yyyy.MM.dd").data["text"] == "2018.06.26"

    def test_default_pattern(self, service: ValueService) -> None:
        result = service.date_format("2018-06-26T15:30:00")
        assert result.data["pattern"] == "yyyy-MM-dd HH:mm:ss"
        assert result.data["text"] == "2018-06-26 15:30:00"

    def test_now(self, service: ValueService) -> None:
        result = service.date_format("now", "yyyy")
        assert result.ok
        assert result.data["text"] == str(datetime.fromisoformat(result.data["value"]).year)

    def test_invalid_value(self, service: ValueService) -> None:
        result = service.date_format("yesterday", "yyyy")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == INVALID_VALUE
        assert result.error.detail == {"value": "yesterday"}

    def test_configured_pattern(self, tmp_path: Path) -> None:
        (tmp_path / "valuefmt.toml").write_text('[date]\ndefault_pattern = "yyMMdd"\n')
        service = ValueService(ValuefmtSettings.from_cli(base_dir=tmp_path))
        assert service.date_format("2018-06-26").data["text"] == "180626"


class TestDateParse:
    def test_success(self, service: ValueService) -> None:
        result = service.date_parse("20180710", "yyyyMMdd")
        assert result.ok
        assert result.data == {
            "text": "20180710",
            "pattern": "yyyyMMdd",
            "value": "2018-07-10T00:00:00",
            "parsed": True,
        }
        assert result.warnings == []

    def test_failure(self, service: ValueService) -> None:
        result = service.date_parse("garbage", "yyyyMMdd")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == PARSE_FAILED
        assert result.error.detail == {"text": "garbage", "pattern": "yyyyMMdd"}

    def test_fallback_now(self, service: ValueService) -> None:
        before = datetime.now().replace(microsecond=0)
        result = service.date_parse("garbage", "yyyyMMdd", fallback_now=True)
        assert result.ok
        assert result.data["parsed"] is False
        assert datetime.fromisoformat(result.data["value"]) >= before
        assert len(result.warnings) == 1
        assert "current time" in result.warnings[0]

    def test_default_pattern(self, service: ValueService) -> None:
        result = service.date_parse("2018-07-10 15:04:05")
        assert result.data["value"] == "2018-07-10T15:04:05"


class TestSize:
    def test_single_unit(self, service: ValueService) -> None:
        result = service.size(1024, ByteUnit.KB)
        assert result.data == {"bytes": 1024, "units": ["KB"], "count_style": "file", "text": "1 KB"}

    def test_all_units(self, service: ValueService) -> None:
        result = service.size(1_500_000)
        assert result.data["text"] == "1.5 MB"
        assert result.data["units"][0] == "BYTES"
        assert result.data["units"][-1] == "YB"

    def test_explicit_style(self, service: ValueService) -> None:
        result = service.size(1_073_741_824, count_style=CountStyle.MEMORY)
        assert result.data["text"] == "1 GB"
        assert result.data["count_style"] == "memory"

    def test_configured_style(self, tmp_path: Path) -> None:
        (tmp_path / "valuefmt.toml").write_text('[size]\ncount_style = "binary"\n')
        service = ValueService(ValuefmtSettings.from_cli(base_dir=tmp_path))
        assert service.size(1_073_741_824).data["text"] == "1 GB"

    def test_combined_units(self, service: ValueService) -> None:
        result = service.size(5_000_000, ByteUnit.KB | ByteUnit.GB)
        assert result.data["units"] == ["KB", "GB"]
        assert result.data["text"] == "5,000 KB"


class TestRound:
    def test_round(self, service: ValueService) -> None:
        result = service.round(0.2289, 2)
        assert result.op == "round"
        assert result.data["result"] == pytest.approx(0.23)
        assert result.data["places"] == 2

    def test_ties_away_from_zero(self, service: ValueService) -> None:
        assert service.round(-2.5, 0).data["result"] == -3.0
