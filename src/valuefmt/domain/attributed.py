"""Styled text made of font runs.

An :class:`AttributedText` pairs a string with runs that tile it exactly:
every code point belongs to one run and runs never overlap. Runs are
built by :class:`AttributedTextBuilder`, which merges adjacent appends that
share a font, so the run list is always the minimal one.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from rich.text import Text

from valuefmt.domain.metrics import FontSpec


@dataclass(frozen=True)
class StyleRun:
    """A span of ``length`` code points starting at ``start`` set in ``font``."""

    start: int
    length: int
    font: FontSpec

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True)
class AttributedText:
    """Immutable text with its font runs."""

    text: str
    runs: tuple[StyleRun, ...] = ()

    def font_at(self, index: int) -> FontSpec:
        """Return the font applied to the code point at *index*."""
        if not 0 <= index < len(self.text):
            raise IndexError(f"index {index} out of range for text of length {len(self.text)}")
        for run in self.runs:
            if run.start <= index < run.end:
                return run.font
        raise IndexError(f"no run covers index {index}")

    def segments(self) -> list[tuple[str, FontSpec]]:
        """Return ``(substring, font)`` pairs in order."""
        return [(self.text[run.start : run.end], run.font) for run in self.runs]

    def to_rich(self, style_for: Callable[[FontSpec], str] | None = None) -> Text:
        """Convert to a :class:`rich.text.Text`.

        *style_for* maps a font to a Rich style string; by default the
        font's ``name`` is used as the style.
        """
        resolve = style_for or (lambda font: font.name)
        rich_text = Text(self.text)
        for run in self.runs:
            style = resolve(run.font)
            if style:
                rich_text.stylize(style, run.start, run.end)
        return rich_text


class AttributedTextBuilder:
    """Accumulates text pieces and their fonts into an :class:`AttributedText`.

    Usage::

        builder = AttributedTextBuilder()
        builder.append("Total ", body)
        builder.append("42", bold)
        styled = builder.build()
    """

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._runs: list[StyleRun] = []
        self._length = 0

    def append(self, text: str, font: FontSpec) -> AttributedTextBuilder:
        if not text:
            return self
        if self._runs and self._runs[-1].font == font:
            last = self._runs[-1]
            self._runs[-1] = StyleRun(last.start, last.length + len(text), font)
        else:
            self._runs.append(StyleRun(self._length, len(text), font))
        self._parts.append(text)
        self._length += len(text)
        return self

    def build(self) -> AttributedText:
        return AttributedText("".join(self._parts), tuple(self._runs))
