"""Tests for explicit string-table lookups."""

from __future__ import annotations

import pytest

from valuefmt.domain.localization import StringTable, localized, localized_with_comment


@pytest.fixture
def table() -> StringTable:
    return StringTable({"mainPageTitle": "메인", "ok": "확인"}, locale="ko")


class TestLocalized:
    def test_found(self, table: StringTable) -> None:
        assert localized("mainPageTitle", table) == "메인"

    def test_missing_returns_key(self, table: StringTable) -> None:
        assert localized("missing.key", table) == "missing.key"

    def test_empty_table(self) -> None:
        assert localized("anything", StringTable.empty()) == "anything"

    def test_plain_mapping_works(self) -> None:
        assert localized("a", {"a": "b"}) == "b"

    def test_tables_are_independent(self, table: StringTable) -> None:
        english = StringTable({"ok": "OK"}, locale="en")
        assert localized("ok", table) == "확인"
        assert localized("ok", english) == "OK"


class TestLocalizedWithComment:
    def test_comment_has_no_effect(self, table: StringTable) -> None:
        assert localized_with_comment("mainPageTitle", "Title in main page", table) == "메인"
        assert localized_with_comment("nope", "whatever", table) == "nope"


class TestStringTable:
    def test_mapping_protocol(self, table: StringTable) -> None:
        assert len(table) == 2
        assert set(table) == {"mainPageTitle", "ok"}
        assert table["ok"] == "확인"
        assert "ok" in table

    def test_read_only(self, table: StringTable) -> None:
        with pytest.raises(TypeError):
            table["ok"] = "changed"  # type: ignore[index]

    def test_source_dict_is_copied(self) -> None:
        source = {"a": "1"}
        table = StringTable(source)
        source["a"] = "2"
        assert table["a"] == "1"

    def test_locale_and_repr(self, table: StringTable) -> None:
        assert table.locale == "ko"
        assert repr(table) == "StringTable(locale='ko', entries=2)"
