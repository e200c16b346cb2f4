"""LocalizationService — string-table lookups."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from valuefmt.domain.localization import StringTable, localized, localized_with_comment
from valuefmt.infrastructure.strings import StringTableError, load_string_table
from valuefmt.services.base import BaseService
from valuefmt.services.result import TABLE_ERROR, ServiceResult
from valuefmt.services.telemetry import traced

if TYPE_CHECKING:
    from valuefmt.config.settings import ValuefmtSettings


class LocalizationService(BaseService):
    """Looks keys up in the configured (or an explicit) string table.

    Tables are loaded once per path and reused for the service's lifetime.
    """

    def __init__(self, settings: ValuefmtSettings) -> None:
        super().__init__(settings)
        self._tables: dict[Path, StringTable] = {}

    def _table(self, path: Path) -> StringTable:
        if path not in self._tables:
            self._tables[path] = load_string_table(path)
        return self._tables[path]

    @traced
    def lookup(
        self,
        key: str,
        *,
        comment: str | None = None,
        table_path: Path | None = None,
    ) -> ServiceResult:
        """Return the localized string for *key*.

        A missing key (or no table at all) is a warning; the key itself is
        returned as the value.
        """
        op = "lookup"
        warnings: list[str] = []
        path = table_path or self._settings.l10n_table_path

        if path is None:
            table = StringTable.empty()
            self._warn(warnings, "No string table configured")
        else:
            try:
                table = self._table(path)
            except StringTableError as exc:
                return ServiceResult.failure(op, TABLE_ERROR, str(exc), path=str(path))

        if comment is None:
            value = localized(key, table)
        else:
            value = localized_with_comment(key, comment, table)

        found = key in table
        if not found and path is not None:
            self._warn(warnings, f"Key {key!r} not found in {path.name}")

        data: dict[str, Any] = {"key": key, "value": value, "found": found, "locale": table.locale}
        if comment is not None:
            data["comment"] = comment
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
