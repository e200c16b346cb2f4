"""TextService — string transformations, measurement and digit styling."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from valuefmt.domain.metrics import FontSpec, text_size_from_font
from valuefmt.domain.strings import (
    different_number_font,
    initial_korea,
    is_check_valid_email,
    make_phone_number,
    reduce_from_count,
    reversed_text,
    select_text_from_range,
)
from valuefmt.infrastructure.fonts import PillowFontMetrics
from valuefmt.services.base import BaseService
from valuefmt.services.result import FONT_ERROR, INVALID_VALUE, ServiceResult
from valuefmt.services.telemetry import traced

if TYPE_CHECKING:
    from valuefmt.config.settings import ValuefmtSettings
    from valuefmt.domain.metrics import FontMetrics


class TextService(BaseService):
    """Applies the string helpers and reports their results.

    *metrics* defaults to Pillow; tests inject a fixed-width provider.
    """

    def __init__(self, settings: ValuefmtSettings, *, metrics: FontMetrics | None = None) -> None:
        super().__init__(settings)
        self._metrics: FontMetrics = metrics or PillowFontMetrics()

    def _font(self, *, size: float | None = None, path: str | None = None, name: str = "") -> FontSpec:
        font_path = path or self._settings.font_path
        return FontSpec(
            size=size if size is not None else self._settings.fonts.size,
            path=str(font_path) if font_path else None,
            name=name,
        )

    @traced
    def reverse(self, text: str) -> ServiceResult:
        return ServiceResult(ok=True, op="reverse", data={"text": text, "result": reversed_text(text)})

    @traced
    def initials(self, text: str) -> ServiceResult:
        return ServiceResult(ok=True, op="initials", data={"text": text, "result": initial_korea(text)})

    @traced
    def phone(self, digits: str) -> ServiceResult:
        """Dash an 11-digit phone number; other input comes back unchanged with a warning."""
        result = make_phone_number(digits)
        warnings: list[str] = []
        if result == digits:
            self._warn(warnings, f"{digits!r} is not an 11-digit number; left unchanged")
        return ServiceResult(
            ok=True,
            op="phone",
            data={"text": digits, "result": result, "changed": result != digits},
            warnings=warnings,
        )

    @traced
    def email(self, text: str) -> ServiceResult:
        return ServiceResult(ok=True, op="email", data={"text": text, "valid": is_check_valid_email(text)})

    @traced
    def select(self, text: str, start: int, length: int) -> ServiceResult:
        """Select grapheme clusters ``start`` through ``start + length`` inclusive."""
        return ServiceResult(
            ok=True,
            op="select",
            data={
                "text": text,
                "start": start,
                "length": length,
                "result": select_text_from_range(text, start, length),
            },
        )

    @traced
    def truncate(self, text: str, limit: int, suffix: str | None = None) -> ServiceResult:
        suffix = self._settings.text.truncate_suffix if suffix is None else suffix
        result = reduce_from_count(text, limit, suffix)
        return ServiceResult(
            ok=True,
            op="truncate",
            data={
                "text": text,
                "limit": limit,
                "suffix": suffix,
                "result": result,
                "truncated": result != text,
            },
        )

    @traced
    def measure(self, text: str, *, size: float | None = None, font_path: str | None = None) -> ServiceResult:
        """Measure *text* in the configured (or given) font."""
        op = "measure"
        try:
            font = self._font(size=size, path=font_path)
        except ValueError as exc:
            return ServiceResult.failure(op, INVALID_VALUE, str(exc), size=size)

        try:
            measurement = text_size_from_font(text, font, self._metrics)
        except OSError as exc:
            return ServiceResult.failure(
                op, FONT_ERROR, f"Cannot load font {font.path or '(default)'}: {exc}", path=font.path
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "text": text,
                "font": font.path or "default",
                "size": font.size,
                "width": measurement.width,
                "height": measurement.height,
            },
        )

    @traced
    def digits(self, text: str) -> ServiceResult:
        """Split *text* into digit and non-digit style runs."""
        fonts = self._settings.fonts
        styled = different_number_font(
            text,
            self._font(name=fonts.digit_style),
            self._font(name=fonts.other_style),
        )
        runs: list[dict[str, Any]] = [
            {
                "start": run.start,
                "length": run.length,
                "text": text[run.start : run.end],
                "style": run.font.name,
            }
            for run in styled.runs
        ]
        return ServiceResult(ok=True, op="digits", data={"text": text, "runs": runs})
