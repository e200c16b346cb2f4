"""String-table file loading.

Two formats are understood:

- ``.toml``: ``key = "value"`` pairs. Nested tables are flattened with
  dots, so ``[settings]\\ntitle = "..."`` becomes ``settings.title``.
- ``.strings``: Apple-style ``"key" = "value";`` entries with ``/* */``
  and ``//`` comments.

The locale is taken from the file stem (``ko.strings`` -> ``ko``).
"""

from __future__ import annotations

import codecs
import logging
import re
import tomllib
from pathlib import Path
from typing import Any

from valuefmt.domain.localization import StringTable

logger = logging.getLogger(__name__)

_QUOTED = r'"((?:[^"\\]|\\.)*)"'
_ENTRY_PATTERN = re.compile(rf"{_QUOTED}\s*=\s*{_QUOTED}\s*;", re.DOTALL)
# Comments outside quoted strings; group 1 keeps the strings themselves.
_COMMENT_PATTERN = re.compile(r'("(?:[^"\\]|\\.)*")|/\*.*?\*/|//[^\n]*', re.DOTALL)
_ESCAPE_PATTERN = re.compile(r"\\(U[0-9A-Fa-f]{4}|u[0-9A-Fa-f]{4}|.)", re.DOTALL)
_SIMPLE_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "'": "'", "\\": "\\", "0": "\0"}


class StringTableError(ValueError):
    """A string-table file could not be read or parsed."""


def _unescape(raw: str) -> str:
    def replace(match: re.Match[str]) -> str:
        token = match.group(1)
        if len(token) == 5:
            return chr(int(token[1:], 16))
        return _SIMPLE_ESCAPES.get(token, token)

    return _ESCAPE_PATTERN.sub(replace, raw)


def parse_strings_file(content: str) -> dict[str, str]:
    """Parse Apple ``.strings`` content into a dict.

    Raises:
        StringTableError: if anything other than entries, comments and
            whitespace is present.
    """
    stripped = _COMMENT_PATTERN.sub(lambda m: m.group(1) or "", content)

    entries: dict[str, str] = {}
    position = 0
    for match in _ENTRY_PATTERN.finditer(stripped):
        gap = stripped[position : match.start()]
        if gap.strip():
            raise StringTableError(f"Unexpected text in strings file: {gap.strip()[:40]!r}")
        entries[_unescape(match.group(1))] = _unescape(match.group(2))
        position = match.end()

    tail = stripped[position:]
    if tail.strip():
        raise StringTableError(f"Unexpected text in strings file: {tail.strip()[:40]!r}")
    return entries


def _flatten(data: dict[str, Any], prefix: str = "") -> dict[str, str]:
    flat: dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, prefix=f"{full_key}."))
        elif isinstance(value, str):
            flat[full_key] = value
        else:
            raise StringTableError(f"Value for {full_key!r} must be a string, got {type(value).__name__}")
    return flat


def parse_toml_table(content: str) -> dict[str, str]:
    """Parse TOML string-table content into a flat dict."""
    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as exc:
        raise StringTableError(f"Invalid TOML: {exc}") from exc
    return _flatten(data)


def decode_table_bytes(raw: bytes, path: Path) -> str:
    """Decode a table file: UTF-16 when it starts with a UTF-16 BOM, else UTF-8.

    Apple ships ``.strings`` files as UTF-16; a UTF-8 BOM is tolerated.
    """
    encoding = "utf-16" if raw.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)) else "utf-8-sig"
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise StringTableError(f"String table {path} is not valid {encoding}: {exc.reason}") from exc


def load_string_table(path: Path) -> StringTable:
    """Read a ``.toml`` or ``.strings`` file into a :class:`StringTable`.

    Raises:
        StringTableError: if the file is missing, is not UTF-8 or BOM-marked
            UTF-16, has an unknown suffix,
            or cannot be parsed.
    """
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise StringTableError(f"Cannot read string table {path}: {exc}") from exc
    content = decode_table_bytes(raw, path)

    suffix = path.suffix.lower()
    if suffix == ".toml":
        entries = parse_toml_table(content)
    elif suffix == ".strings":
        entries = parse_strings_file(content)
    else:
        raise StringTableError(f"Unsupported string table format: {path.name}")

    logger.debug("Loaded %d strings from %s", len(entries), path)
    return StringTable(entries, locale=path.stem)
