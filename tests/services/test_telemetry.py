"""Tests for the @traced timing decorator."""

from __future__ import annotations

from valuefmt.services.result import ServiceResult
from valuefmt.services.telemetry import disable_telemetry, enable_telemetry, traced


class _Probe:
    @traced
    def run(self, value: int) -> ServiceResult:
        return ServiceResult(ok=True, op="probe", data={"value": value})

    @traced
    def run_with_meta(self) -> ServiceResult:
        return ServiceResult(ok=True, op="probe", meta={"source": "test"})

    @traced
    def plain(self) -> int:
        return 7


class TestTraced:
    def test_disabled_leaves_meta_alone(self) -> None:
        disable_telemetry()
        assert _Probe().run(1).meta is None

    def test_enabled_adds_duration(self) -> None:
        enable_telemetry()
        result = _Probe().run(1)
        assert result.meta is not None
        assert result.meta["duration_ms"] >= 0
        assert result.data == {"value": 1}

    def test_existing_meta_is_kept(self) -> None:
        enable_telemetry()
        meta = _Probe().run_with_meta().meta
        assert meta is not None
        assert meta["source"] == "test"
        assert "duration_ms" in meta

    def test_non_result_return_passes_through(self) -> None:
        enable_telemetry()
        assert _Probe().plain() == 7

    def test_preserves_name(self) -> None:
        assert _Probe.run.__name__ == "run"
