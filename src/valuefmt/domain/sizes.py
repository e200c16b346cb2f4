"""Byte-count formatting in human-readable units.

Output is pinned to en-US number formatting (``,`` grouping, ``.`` decimal
point) so the same count always renders the same text.
"""

from __future__ import annotations

from collections.abc import Sized
from decimal import ROUND_HALF_UP, Decimal
from enum import Flag, StrEnum, auto

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ByteUnit(Flag):
    """Units a byte count may be expressed in. Combine with ``|``."""

    BYTES = auto()
    KB = auto()
    MB = auto()
    GB = auto()
    TB = auto()
    PB = auto()
    EB = auto()
    ZB = auto()
    YB = auto()
    ALL = BYTES | KB | MB | GB | TB | PB | EB | ZB | YB


class CountStyle(StrEnum):
    """Base used to scale units: file/decimal use 1000, memory/binary 1024."""

    FILE = "file"
    MEMORY = "memory"
    DECIMAL = "decimal"
    BINARY = "binary"

    @property
    def base(self) -> int:
        return 1024 if self in (CountStyle.MEMORY, CountStyle.BINARY) else 1000


# Ascending scale; the index is the power of the base.
_SCALE: tuple[ByteUnit, ...] = (
    ByteUnit.BYTES,
    ByteUnit.KB,
    ByteUnit.MB,
    ByteUnit.GB,
    ByteUnit.TB,
    ByteUnit.PB,
    ByteUnit.EB,
    ByteUnit.ZB,
    ByteUnit.YB,
)


def _decimals_for(exponent: int) -> int:
    if exponent <= 1:
        return 0
    if exponent == 2:
        return 1
    return 2


def _byte_count(data: int | Sized) -> int:
    count = data if isinstance(data, int) else len(data)
    return max(INT64_MIN, min(INT64_MAX, count))


def _render_number(value: Decimal, decimals: int) -> str:
    text = f"{value:,.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _label(unit: ByteUnit, number: str) -> str:
    if unit is ByteUnit.BYTES:
        return f"{number} byte" if number in ("1", "-1") else f"{number} bytes"
    return f"{number} {unit.name}"


def data_size_other_format(
    data: int | Sized,
    units: ByteUnit = ByteUnit.ALL,
    *,
    count_style: CountStyle = CountStyle.FILE,
    allows_nonnumeric: bool = True,
) -> str:
    """Format a byte count (or a buffer's length) using the allowed *units*.

    The largest allowed unit not bigger than the count is chosen; counts
    smaller than every allowed unit use the smallest one. Bytes and KB are
    shown without decimals, MB with one, larger units with two.

    Examples:
        >>> data_size_other_format(1024, ByteUnit.KB)
        '1 KB'
        >>> data_size_other_format(b"abc")
        '3 bytes'
        >>> data_size_other_format(0)
        'Zero KB'
    """
    count = _byte_count(data)
    base = count_style.base

    allowed = [unit for unit in _SCALE if unit in units] or list(_SCALE)
    magnitude = abs(count)

    if magnitude == 0:
        unit = ByteUnit.KB if ByteUnit.KB in allowed else allowed[0]
        if allows_nonnumeric:
            return "Zero bytes" if unit is ByteUnit.BYTES else f"Zero {unit.name}"
        return _label(unit, "0")

    chosen = allowed[0]
    for unit in allowed:
        if magnitude >= base ** _SCALE.index(unit):
            chosen = unit

    exponent = _SCALE.index(chosen)
    decimals = _decimals_for(exponent)
    quantum = Decimal(1).scaleb(-decimals)
    value = (Decimal(magnitude) / Decimal(base**exponent)).quantize(quantum, ROUND_HALF_UP)

    # 999,999 bytes rounds to "1,000 KB"; prefer "1 MB" when MB is allowed.
    larger = [unit for unit in allowed if _SCALE.index(unit) > exponent]
    if larger and value >= base:
        chosen = larger[0]
        exponent = _SCALE.index(chosen)
        decimals = _decimals_for(exponent)
        quantum = Decimal(1).scaleb(-decimals)
        value = (Decimal(magnitude) / Decimal(base**exponent)).quantize(quantum, ROUND_HALF_UP)

    number = _render_number(value, decimals)
    if count < 0:
        number = f"-{number}"
    return _label(chosen, number)
