"""Shared pytest fixtures and test helpers for valuefmt tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from valuefmt.config.settings import ValuefmtSettings
from valuefmt.domain.metrics import FontSpec, TextMeasurement
from valuefmt.services.telemetry import disable_telemetry


class FixedWidthMetrics:
    """Deterministic metrics: every code point is ``size / 2`` wide, lines ``1.25 * size`` tall."""

    def measure(self, text: str, font: FontSpec) -> TextMeasurement:
        lines = text.split("\n")
        width = max(len(line) for line in lines) * font.size * 0.5
        return TextMeasurement(width=width, height=len(lines) * font.size * 1.25)


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep a developer's VALUEFMT_* environment out of the tests."""
    for name in list(os.environ):
        if name.startswith("VALUEFMT_"):
            monkeypatch.delenv(name)
    yield
    disable_telemetry()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    fmt = logging.getLogger("valuefmt")
    fmt_level = fmt.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    fmt.setLevel(fmt_level)
    structlog.reset_defaults()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> ValuefmtSettings:
    """Default settings rooted at an empty temp directory."""
    return ValuefmtSettings.from_cli(base_dir=tmp_path)


@pytest.fixture
def metrics() -> FixedWidthMetrics:
    return FixedWidthMetrics()


@pytest.fixture
def _isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to an empty temp dir so the CLI discovers no valuefmt.toml.

    Use via ``@pytest.mark.usefixtures("_isolated_dir")`` on command test classes.
    """
    monkeypatch.chdir(tmp_path)
