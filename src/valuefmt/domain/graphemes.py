"""Grapheme cluster segmentation.

Python strings index by code point, which splits emoji sequences,
combining marks and decomposed Hangul. Everything that walks "characters"
in the string helpers goes through :func:`graphemes` instead.
"""

from __future__ import annotations

import regex

# \X matches one extended grapheme cluster (UAX #29).
_GRAPHEME_PATTERN = regex.compile(r"\X")


def graphemes(text: str) -> list[str]:
    """Split *text* into user-perceived characters.

    Examples:
        >>> len(graphemes("e\\u0301a"))
        2
        >>> graphemes("")
        []
    """
    return _GRAPHEME_PATTERN.findall(text)
