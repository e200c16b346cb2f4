"""Text measurement types and the font-metrics contract.

The domain layer does not rasterize glyphs. It describes fonts with
:class:`FontSpec` and delegates measurement to a :class:`FontMetrics`
provider supplied by the caller (see ``valuefmt.infrastructure.fonts``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class FontSpec:
    """A font descriptor.

    Attributes:
        size: Point size, must be positive.
        path: TrueType/OpenType file; None selects the provider's default face.
        name: Display label, also used as the style name for rich output.
    """

    size: float
    path: str | None = None
    name: str = ""

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"font size must be positive, got {self.size}")


@dataclass(frozen=True)
class TextMeasurement:
    """Rendered extent of a piece of text, in points."""

    width: float
    height: float


class FontMetrics(Protocol):
    """Anything that can report the rendered size of text for a font."""

    def measure(self, text: str, font: FontSpec) -> TextMeasurement: ...


def text_size_from_font(text: str, font: FontSpec, metrics: FontMetrics) -> TextMeasurement:
    """Return the width and height of *text* set in *font*.

    Deterministic for a given provider; the result is whatever the
    provider reports for these exact inputs.
    """
    return metrics.measure(text, font)
