"""Date <-> text conversion driven by UTS #35 format patterns.

Patterns use the letters of the Unicode date field symbol table
(``yyyy-MM-dd HH:mm``, ``yyMMdd``, ``EEEE, MMM d``). Text inside single
quotes is literal and ``''`` is a single quote. Letters that are not a
supported field are emitted (and expected) verbatim.

Month and weekday names are fixed English (``en_US_POSIX``) so output does
not drift with the process locale.

Parsing never substitutes a fallback value: it returns a
:class:`DateParseResult` and the caller decides what a failure means.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo

from pydantic import BaseModel

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
MONTH_ABBREVIATIONS: tuple[str, ...] = tuple(name[:3] for name in MONTH_NAMES)

WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
WEEKDAY_ABBREVIATIONS: tuple[str, ...] = tuple(name[:3] for name in WEEKDAY_NAMES)

FIELD_LETTERS = frozenset("yMdHhamsSEZX")

# Parsed fields that are absent from the pattern take the reference date.
_EPOCH_FIELDS = {"year": 1970, "month": 1, "day": 1}


@dataclass(frozen=True)
class Literal:
    """Verbatim text between fields."""

    text: str


@dataclass(frozen=True)
class Field:
    """A date field token such as ``yyyy`` (letter ``y``, width 4)."""

    letter: str
    width: int


Token = Literal | Field


class DateParseResult(BaseModel):
    """Outcome of :func:`string_to_date`.

    Attributes:
        ok: Whether *text* matched the pattern and formed a valid date.
        value: The parsed datetime when ``ok`` is True.
        error: Human-readable failure reason when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    value: datetime | None = None
    error: str | None = None

    def value_or(self, default: datetime) -> datetime:
        """Return the parsed value, or *default* when parsing failed."""
        if self.ok and self.value is not None:
            return self.value
        return default


# --- Tokenizing ---


@functools.lru_cache(maxsize=128)
def tokenize_pattern(pattern: str) -> tuple[Token, ...]:
    """Split *pattern* into literal and field tokens.

    Adjacent literals are merged, so ``"yyyy'년' MM'월'"`` yields
    ``Field(y, 4), Literal("년 "), Field(M, 2), Literal("월")``.
    An unterminated quote runs to the end of the pattern.
    """
    tokens: list[Token] = []
    literal: list[str] = []

    def flush_literal() -> None:
        if literal:
            tokens.append(Literal("".join(literal)))
            literal.clear()

    i = 0
    length = len(pattern)
    while i < length:
        ch = pattern[i]
        if ch == "'":
            if i + 1 < length and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            end = i + 1
            while end < length:
                if pattern[end] == "'":
                    if end + 1 < length and pattern[end + 1] == "'":
                        literal.append("'")
                        end += 2
                        continue
                    break
                literal.append(pattern[end])
                end += 1
            i = end + 1
        elif ch in FIELD_LETTERS:
            run_end = i
            while run_end < length and pattern[run_end] == ch:
                run_end += 1
            flush_literal()
            tokens.append(Field(ch, run_end - i))
            i = run_end
        else:
            literal.append(ch)
            i += 1

    flush_literal()
    return tuple(tokens)


# --- Formatting ---


def _format_offset(value: datetime, field: Field) -> str:
    offset = value.utcoffset()
    if offset is None:
        try:
            offset = value.astimezone().utcoffset() or timedelta(0)
        except (ValueError, OverflowError):
            # Too close to year 1 or 9999 to shift into local time.
            offset = timedelta(0)

    total_minutes = int(offset.total_seconds()) // 60
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)

    if field.letter == "X" and total_minutes == 0:
        return "Z"
    if field.letter == "Z":
        if field.width <= 3:
            return f"{sign}{hours:02d}{minutes:02d}"
        if field.width == 4:
            return "GMT" if total_minutes == 0 else f"GMT{sign}{hours:02d}:{minutes:02d}"
        return "Z" if total_minutes == 0 else f"{sign}{hours:02d}:{minutes:02d}"
    # X, XX, XXX
    if field.width == 1:
        return f"{sign}{hours:02d}" if minutes == 0 else f"{sign}{hours:02d}{minutes:02d}"
    if field.width == 2:
        return f"{sign}{hours:02d}{minutes:02d}"
    return f"{sign}{hours:02d}:{minutes:02d}"


def _format_field(value: datetime, field: Field) -> str:
    letter, width = field.letter, field.width
    if letter == "y":
        if width == 2:
            return f"{value.year % 100:02d}"
        return str(value.year).zfill(width)
    if letter == "M":
        if width == 3:
            return MONTH_ABBREVIATIONS[value.month - 1]
        if width >= 4:
            return MONTH_NAMES[value.month - 1]
        return str(value.month).zfill(width)
    if letter == "d":
        return str(value.day).zfill(width)
    if letter == "H":
        return str(value.hour).zfill(width)
    if letter == "h":
        return str(value.hour % 12 or 12).zfill(width)
    if letter == "a":
        return "AM" if value.hour < 12 else "PM"
    if letter == "m":
        return str(value.minute).zfill(width)
    if letter == "s":
        return str(value.second).zfill(width)
    if letter == "S":
        return f"{value.microsecond:06d}".ljust(width, "0")[:width]
    if letter == "E":
        if width >= 4:
            return WEEKDAY_NAMES[value.weekday()]
        return WEEKDAY_ABBREVIATIONS[value.weekday()]
    return _format_offset(value, field)


def date_to_string(value: date | datetime, pattern: str) -> str:
    """Render *value* according to *pattern*.

    Plain :class:`date` values are treated as midnight. Naive datetimes
    render zone fields with the process-local offset.

    Examples:
        >>> date_to_string(datetime(2018, 6, 26), "yyMMdd")
        '180626'
        >>> date_to_string(datetime(2018, 7, 10, 15, 4), "MMM d, h:mm a")
        'Jul 10, 3:04 PM'
    """
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)

    parts: list[str] = []
    for token in tokenize_pattern(pattern):
        if isinstance(token, Literal):
            parts.append(token.text)
        else:
            parts.append(_format_field(value, token))
    return "".join(parts)


# --- Parsing ---


def _alternation(names: tuple[str, ...]) -> str:
    return "|".join(re.escape(name) for name in names)


def _field_regex(field: Field) -> str:
    letter, width = field.letter, field.width
    if letter == "y":
        if width == 1:
            return r"\d{1,4}"
        return rf"\d{{{width}}}"
    if letter == "M" and width == 3:
        return _alternation(MONTH_ABBREVIATIONS)
    if letter == "M" and width >= 4:
        return _alternation(MONTH_NAMES)
    if letter == "E":
        return _alternation(WEEKDAY_NAMES if width >= 4 else WEEKDAY_ABBREVIATIONS)
    if letter == "a":
        return "AM|PM"
    if letter == "S":
        return rf"\d{{{width}}}"
    if letter in ("Z", "X"):
        return r"Z|(?:GMT)?[+-]\d{2}(?::?\d{2})?|GMT"
    if width == 1:
        return r"\d{1,2}"
    return rf"\d{{{width}}}"


@functools.lru_cache(maxsize=128)
def _compile_parser(pattern: str) -> tuple[re.Pattern[str], tuple[Field, ...]]:
    fields: list[Field] = []
    parts: list[str] = []
    for token in tokenize_pattern(pattern):
        if isinstance(token, Literal):
            parts.append(re.escape(token.text))
        else:
            parts.append(f"(?P<f{len(fields)}>{_field_regex(token)})")
            fields.append(token)
    return re.compile("".join(parts), re.IGNORECASE), tuple(fields)


def _parse_offset(raw: str) -> tzinfo:
    text = raw.upper()
    if text in ("Z", "GMT"):
        return timezone.utc
    text = text.removeprefix("GMT").replace(":", "")
    sign = -1 if text[0] == "-" else 1
    hours = int(text[1:3])
    minutes = int(text[3:5]) if len(text) > 3 else 0
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def _lookup_name(raw: str, names: tuple[str, ...]) -> int:
    lowered = raw.lower()
    for index, name in enumerate(names):
        if name.lower() == lowered:
            return index
    raise ValueError(f"unknown name {raw!r}")


def string_to_date(text: str, pattern: str) -> DateParseResult:
    """Parse *text* according to *pattern*.

    The whole of *text* must match. Fields missing from the pattern take
    their value from 1970-01-01 00:00:00. A two-digit year maps into
    2000-2099. An ``h`` hour without an ``a`` marker is read as AM.

    Examples:
        >>> string_to_date("20180710", "yyyyMMdd").value
        datetime.datetime(2018, 7, 10, 0, 0)
        >>> string_to_date("2018-07", "yyyyMMdd").ok
        False
    """
    regex_, fields = _compile_parser(pattern)
    match = regex_.fullmatch(text)
    if match is None:
        return DateParseResult(ok=False, error=f"{text!r} does not match pattern {pattern!r}")

    parts: dict[str, int] = dict(_EPOCH_FIELDS)
    hour12: int | None = None
    is_pm: bool | None = None
    tz: tzinfo | None = None

    try:
        for index, field in enumerate(fields):
            raw = match.group(f"f{index}")
            letter = field.letter
            if letter == "y":
                year = int(raw)
                parts["year"] = 2000 + year if field.width == 2 else year
            elif letter == "M":
                if field.width == 3:
                    parts["month"] = _lookup_name(raw, MONTH_ABBREVIATIONS) + 1
                elif field.width >= 4:
                    parts["month"] = _lookup_name(raw, MONTH_NAMES) + 1
                else:
                    parts["month"] = int(raw)
            elif letter == "d":
                parts["day"] = int(raw)
            elif letter == "H":
                parts["hour"] = int(raw)
            elif letter == "h":
                hour12 = int(raw)
            elif letter == "a":
                is_pm = raw.upper() == "PM"
            elif letter == "m":
                parts["minute"] = int(raw)
            elif letter == "s":
                parts["second"] = int(raw)
            elif letter == "S":
                parts["microsecond"] = int(raw.ljust(6, "0")[:6])
            elif letter in ("Z", "X"):
                tz = _parse_offset(raw)
            # E is matched for shape only; the weekday follows from the date.

        if hour12 is not None:
            if not 1 <= hour12 <= 12:
                raise ValueError(f"hour {hour12} is out of range for a 12-hour clock")
            parts["hour"] = hour12 % 12 + (12 if is_pm else 0)
        elif is_pm and parts.get("hour", 0) < 12:
            parts["hour"] = parts.get("hour", 0) + 12

        value = datetime(tzinfo=tz, **parts)
    except ValueError as exc:
        return DateParseResult(ok=False, error=str(exc))

    return DateParseResult(ok=True, value=value)
