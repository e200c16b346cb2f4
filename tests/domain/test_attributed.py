"""Tests for attributed text and its run builder."""

from __future__ import annotations

import pytest

from valuefmt.domain.attributed import AttributedText, AttributedTextBuilder, StyleRun
from valuefmt.domain.metrics import FontSpec

BOLD = FontSpec(13, name="bold")
PLAIN = FontSpec(13)


class TestBuilder:
    def test_merges_adjacent_same_font(self) -> None:
        styled = AttributedTextBuilder().append("ab", PLAIN).append("c", PLAIN).build()
        assert styled.runs == (StyleRun(0, 3, PLAIN),)

    def test_new_run_on_font_change(self) -> None:
        styled = AttributedTextBuilder().append("Total ", PLAIN).append("42", BOLD).build()
        assert styled.text == "Total 42"
        assert styled.runs == (StyleRun(0, 6, PLAIN), StyleRun(6, 2, BOLD))

    def test_empty_pieces_are_ignored(self) -> None:
        styled = AttributedTextBuilder().append("a", PLAIN).append("", BOLD).append("b", PLAIN).build()
        assert styled.runs == (StyleRun(0, 2, PLAIN),)

    def test_runs_tile_the_text(self) -> None:
        builder = AttributedTextBuilder()
        for piece, font in [("x", BOLD), ("yy", PLAIN), ("zzz", BOLD)]:
            builder.append(piece, font)
        styled = builder.build()
        assert sum(run.length for run in styled.runs) == len(styled.text)
        for previous, current in zip(styled.runs, styled.runs[1:]):
            assert previous.end == current.start
            assert previous.font != current.font


class TestAttributedText:
    styled = AttributedText("ab12", (StyleRun(0, 2, PLAIN), StyleRun(2, 2, BOLD)))

    def test_font_at(self) -> None:
        assert [self.styled.font_at(i) for i in range(4)] == [PLAIN, PLAIN, BOLD, BOLD]

    @pytest.mark.parametrize("index", [-1, 4])
    def test_font_at_out_of_range(self, index: int) -> None:
        with pytest.raises(IndexError):
            self.styled.font_at(index)

    def test_segments(self) -> None:
        assert self.styled.segments() == [("ab", PLAIN), ("12", BOLD)]

    def test_to_rich_uses_font_names(self) -> None:
        text = self.styled.to_rich()
        assert text.plain == "ab12"
        assert [(span.start, span.end, str(span.style)) for span in text.spans] == [(2, 4, "bold")]

    def test_to_rich_custom_styles(self) -> None:
        text = self.styled.to_rich(lambda font: "italic" if font == PLAIN else "")
        assert [(span.start, span.end, str(span.style)) for span in text.spans] == [(0, 2, "italic")]


class TestFontSpec:
    def test_size_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            FontSpec(0)

    def test_hashable_and_comparable(self) -> None:
        assert FontSpec(13, name="bold") == BOLD
        assert len({BOLD, PLAIN, FontSpec(13)}) == 2
