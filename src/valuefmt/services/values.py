"""ValueService — dates, byte sizes and rounding."""

from __future__ import annotations

from datetime import datetime

from valuefmt.domain.dates import date_to_string, string_to_date
from valuefmt.domain.numbers import round_to_places
from valuefmt.domain.sizes import ByteUnit, CountStyle, data_size_other_format
from valuefmt.services.base import BaseService
from valuefmt.services.result import INVALID_VALUE, PARSE_FAILED, ServiceResult
from valuefmt.services.telemetry import traced


def _unit_names(units: ByteUnit) -> list[str]:
    return [unit.name for unit in ByteUnit if unit in units]


class ValueService(BaseService):
    """Formats and parses dates, byte counts and decimal numbers."""

    @traced
    def date_format(self, value: str, pattern: str | None = None) -> ServiceResult:
        """Render an ISO-8601 timestamp (or ``"now"``) with *pattern*."""
        op = "date_format"
        pattern = pattern or self._settings.date.default_pattern
        if value.strip().lower() == "now":
            moment = datetime.now()
        else:
            try:
                moment = datetime.fromisoformat(value)
            except ValueError:
                return ServiceResult.failure(
                    op, INVALID_VALUE, f"Not an ISO-8601 date or time: {value!r}", value=value
                )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "value": moment.isoformat(),
                "pattern": pattern,
                "text": date_to_string(moment, pattern),
            },
        )

    @traced
    def date_parse(
        self,
        text: str,
        pattern: str | None = None,
        *,
        fallback_now: bool = False,
    ) -> ServiceResult:
        """Parse *text* with *pattern*.

        A mismatch is an error unless *fallback_now* is set, in which case
        the current time is returned with a warning.
        """
        op = "date_parse"
        pattern = pattern or self._settings.date.default_pattern
        parsed = string_to_date(text, pattern)
        warnings: list[str] = []

        if not parsed.ok:
            if not fallback_now:
                return ServiceResult.failure(
                    op,
                    PARSE_FAILED,
                    parsed.error or "Could not parse date",
                    text=text,
                    pattern=pattern,
                )
            self._warn(warnings, f"Could not parse {text!r}; using the current time")

        moment = parsed.value_or(datetime.now())
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "text": text,
                "pattern": pattern,
                "value": moment.isoformat(),
                "parsed": parsed.ok,
            },
            warnings=warnings,
        )

    @traced
    def size(
        self,
        count: int,
        units: ByteUnit = ByteUnit.ALL,
        count_style: CountStyle | None = None,
    ) -> ServiceResult:
        """Format a byte count with the allowed *units*."""
        style = count_style or self._settings.size.count_style
        text = data_size_other_format(
            count,
            units,
            count_style=style,
            allows_nonnumeric=self._settings.size.allows_nonnumeric,
        )
        return ServiceResult(
            ok=True,
            op="size",
            data={
                "bytes": count,
                "units": _unit_names(units),
                "count_style": str(style),
                "text": text,
            },
        )

    @traced
    def round(self, value: float, places: int) -> ServiceResult:
        """Round *value* to *places* decimal digits, ties away from zero."""
        return ServiceResult(
            ok=True,
            op="round",
            data={"value": value, "places": places, "result": round_to_places(value, places)},
        )
