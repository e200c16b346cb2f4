"""String transformations.

Functions that walk "characters" walk grapheme clusters, so emoji
sequences and combining marks are never split. Exceptions are
:func:`initial_korea` and :func:`different_number_font`, which are defined
per code point.
"""

from __future__ import annotations

import re
import unicodedata

from valuefmt.domain.attributed import AttributedText, AttributedTextBuilder
from valuefmt.domain.graphemes import graphemes
from valuefmt.domain.metrics import FontSpec

# Leading consonants in syllable-block order (compatibility jamo).
KOREAN_INITIALS: tuple[str, ...] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)  # fmt: skip

HANGUL_SYLLABLE_FIRST = 0xAC00  # 가
HANGUL_SYLLABLE_LAST = 0xD7A3  # 힣
_VOWEL_COUNT = 21
_TRAILING_COUNT = 28

_PHONE_PATTERN = re.compile(r"(\d{3})(\d{4})(\d{4})", re.ASCII)
_EMAIL_PATTERN = re.compile(r"[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{1,64}")


def reversed_text(text: str) -> str:
    """Reverse *text* by grapheme cluster.

    Examples:
        >>> reversed_text("Hello")
        'olleH'
    """
    return "".join(reversed(graphemes(text)))


def initial_korea(text: str) -> str:
    """Replace each Hangul syllable with its leading consonant.

    Code points outside U+AC00..U+D7A3 are kept as they are.

    Examples:
        >>> initial_korea("안녕하세요")
        'ㅇㄴㅎㅅㅇ'
        >>> initial_korea("SK하이닉스")
        'SKㅎㅇㄴㅅ'
    """
    result: list[str] = []
    for ch in text:
        code = ord(ch)
        if HANGUL_SYLLABLE_FIRST <= code <= HANGUL_SYLLABLE_LAST:
            index = (code - HANGUL_SYLLABLE_FIRST) // (_VOWEL_COUNT * _TRAILING_COUNT)
            result.append(KOREAN_INITIALS[index])
        else:
            result.append(ch)
    return "".join(result)


def make_phone_number(digits: str) -> str:
    """Dash an 11-digit mobile number as ``ddd-dddd-dddd``.

    Anything that is not exactly 11 ASCII digits is returned unchanged.

    Examples:
        >>> make_phone_number("01011112222")
        '010-1111-2222'
        >>> make_phone_number("0101111222")
        '0101111222'
    """
    match = _PHONE_PATTERN.fullmatch(digits)
    if match is None:
        return digits
    return match.expand(r"\1-\2-\3")


def select_text_from_range(text: str, start: int, length: int) -> str:
    """Return grapheme clusters ``start`` through ``start + length`` inclusive.

    The upper bound is inclusive, so a window of *length* yields
    ``length + 1`` characters. A negative *start* is clamped to 0 and an
    empty window returns ``""``.

    Examples:
        >>> select_text_from_range("안녕하세요", 2, 2)
        '하세요'
    """
    chars = graphemes(text)
    lower = max(start, 0)
    upper = start + length + 1
    if upper <= lower:
        return ""
    return "".join(chars[lower:upper])


def character_weight(char: str) -> int:
    """Display weight of one character: 1 for single-byte UTF-8, else 2."""
    return 1 if len(char.encode("utf-8")) == 1 else 2


def reduce_from_count(text: str, limit: int, suffix: str) -> str:
    """Truncate *text* once its weight exceeds *limit*, appending *suffix*.

    Single-byte characters weigh 1 and everything else 2 (see
    :func:`character_weight`). The character that pushes the running weight
    past *limit* is dropped and replaced by *suffix*. Text that never
    exceeds *limit* is returned unchanged, without a suffix.

    Examples:
        >>> reduce_from_count("Swift is Awesome!!", 15, "...")
        'Swift is Awesom...'
        >>> reduce_from_count("short", 15, "...")
        'short'
    """
    kept: list[str] = []
    weight = 0
    for char in graphemes(text):
        weight += character_weight(char)
        if weight > limit:
            return "".join(kept) + suffix
        kept.append(char)
    return text


def is_check_valid_email(text: object) -> bool:
    """Return True when the whole of *text* looks like an email address.

    Examples:
        >>> is_check_valid_email("myoungsc.dev@gmail.com")
        True
        >>> is_check_valid_email("not-an-email")
        False
    """
    if not isinstance(text, str):
        return False
    return _EMAIL_PATTERN.fullmatch(text) is not None


def is_decimal_digit(char: str) -> bool:
    """True for any Unicode decimal digit (category ``Nd``)."""
    return unicodedata.category(char) == "Nd"


def different_number_font(text: str, digit_font: FontSpec, other_font: FontSpec) -> AttributedText:
    """Set decimal digits in *digit_font* and everything else in *other_font*.

    Adjacent characters with the same font share one run.

    Examples:
        >>> bold, plain = FontSpec(13, name="bold"), FontSpec(13)
        >>> len(different_number_font("a1b2", bold, plain).runs)
        4
        >>> len(different_number_font("12ab", bold, plain).runs)
        2
    """
    builder = AttributedTextBuilder()
    for char in text:
        builder.append(char, digit_font if is_decimal_digit(char) else other_font)
    return builder.build()
