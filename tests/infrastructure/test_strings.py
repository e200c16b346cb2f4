"""Tests for string-table file loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from valuefmt.infrastructure.strings import (
    StringTableError,
    load_string_table,
    parse_strings_file,
    parse_toml_table,
)

STRINGS_CONTENT = r"""
/* Main page */
"mainPageTitle" = "메인 화면";
// Buttons
"ok" = "확인";
"quote" = "He said \"hi\"";
"multi" = "line1\nline2";
"accent" = "caf\U00E9";
"url" = "https://example.com/path"; // trailing comment
"""


class TestParseStringsFile:
    def test_entries_and_comments(self) -> None:
        entries = parse_strings_file(STRINGS_CONTENT)
        assert entries["mainPageTitle"] == "메인 화면"
        assert entries["ok"] == "확인"
        assert len(entries) == 6

    def test_escapes(self) -> None:
        entries = parse_strings_file(STRINGS_CONTENT)
        assert entries["quote"] == 'He said "hi"'
        assert entries["multi"] == "line1\nline2"
        assert entries["accent"] == "café"

    def test_slashes_inside_strings_are_not_comments(self) -> None:
        assert parse_strings_file(STRINGS_CONTENT)["url"] == "https://example.com/path"

    def test_empty(self) -> None:
        assert parse_strings_file("") == {}
        assert parse_strings_file("/* nothing */\n") == {}

    def test_missing_semicolon(self) -> None:
        with pytest.raises(StringTableError):
            parse_strings_file('"a" = "b"')

    def test_garbage_between_entries(self) -> None:
        with pytest.raises(StringTableError):
            parse_strings_file('"a" = "b";\nnonsense\n"c" = "d";')


class TestParseTomlTable:
    def test_flat(self) -> None:
        assert parse_toml_table('ok = "OK"\n') == {"ok": "OK"}

    def test_nested_tables_are_flattened(self) -> None:
        content = 'title = "Home"\n[settings]\ntitle = "Settings"\n[settings.privacy]\nlabel = "Privacy"\n'
        assert parse_toml_table(content) == {
            "title": "Home",
            "settings.title": "Settings",
            "settings.privacy.label": "Privacy",
        }

    def test_non_string_value(self) -> None:
        with pytest.raises(StringTableError, match="count"):
            parse_toml_table("count = 3\n")

    def test_invalid_toml(self) -> None:
        with pytest.raises(StringTableError, match="Invalid TOML"):
            parse_toml_table("not = [valid\n")


class TestLoadStringTable:
    def test_strings_file(self, tmp_path: Path) -> None:
        path = tmp_path / "ko.strings"
        path.write_text(STRINGS_CONTENT, encoding="utf-8")
        table = load_string_table(path)
        assert table.locale == "ko"
        assert table["ok"] == "확인"

    def test_toml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "en.toml"
        path.write_text('ok = "OK"\n', encoding="utf-8")
        table = load_string_table(path)
        assert table.locale == "en"
        assert dict(table) == {"ok": "OK"}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(StringTableError, match="Cannot read"):
            load_string_table(tmp_path / "nope.toml")

    def test_unsupported_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "en.json"
        path.write_text("{}", encoding="utf-8")
        with pytest.raises(StringTableError, match="Unsupported"):
            load_string_table(path)

    def test_is_a_value_error(self) -> None:
        assert issubclass(StringTableError, ValueError)

    def test_utf16_strings_file(self, tmp_path: Path) -> None:
        path = tmp_path / "ko.strings"
        path.write_bytes('"mainPageTitle" = "홈";\n'.encode("utf-16"))
        assert load_string_table(path)["mainPageTitle"] == "홈"

    def test_utf8_bom_is_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "en.toml"
        path.write_bytes('ok = "OK"\n'.encode("utf-8-sig"))
        assert dict(load_string_table(path)) == {"ok": "OK"}

    def test_undecodable_bytes(self, tmp_path: Path) -> None:
        path = tmp_path / "ko.strings"
        path.write_bytes(b'"ok" = "\xff\xfe\xfa";')
        with pytest.raises(StringTableError, match="not valid utf-8"):
            load_string_table(path)
