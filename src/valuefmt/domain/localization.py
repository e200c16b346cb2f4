"""Localized string lookup against an explicit, read-only string table.

The table is passed to every lookup instead of being read from process
state, so callers can swap locales (and tests can pin one) freely.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType


class StringTable(Mapping[str, str]):
    """Immutable key -> display string mapping for one locale."""

    __slots__ = ("_entries", "locale")

    def __init__(self, entries: Mapping[str, str] | None = None, *, locale: str = "") -> None:
        self._entries: Mapping[str, str] = MappingProxyType(dict(entries or {}))
        self.locale = locale

    @classmethod
    def empty(cls) -> StringTable:
        return cls()

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"StringTable(locale={self.locale!r}, entries={len(self._entries)})"


def localized(key: str, table: Mapping[str, str]) -> str:
    """Return the display string for *key*, or *key* itself when missing.

    Examples:
        >>> localized("mainPageTitle", StringTable({"mainPageTitle": "Home"}))
        'Home'
        >>> localized("missing", StringTable.empty())
        'missing'
    """
    return table.get(key, key)


def localized_with_comment(key: str, comment: str, table: Mapping[str, str]) -> str:
    """Same as :func:`localized`; *comment* is for translators only."""
    return localized(key, table)
