"""Font metrics backed by Pillow.

:class:`PillowFontMetrics` satisfies :class:`valuefmt.domain.metrics.FontMetrics`.
Fonts are loaded once per ``(path, size)`` and kept for the life of the
process.
"""

from __future__ import annotations

import functools
import logging

from PIL import ImageFont

from valuefmt.domain.metrics import FontSpec, TextMeasurement

logger = logging.getLogger(__name__)

AnyFont = ImageFont.FreeTypeFont | ImageFont.ImageFont


@functools.lru_cache(maxsize=32)
def load_font(path: str | None, size: float) -> AnyFont:
    """Load a TrueType/OpenType face, or Pillow's bundled face when *path* is None.

    Raises:
        OSError: if *path* does not point to a readable font file.
    """
    if path:
        logger.debug("Loading font %s at %.1fpt", path, size)
        return ImageFont.truetype(path, size)
    logger.debug("Loading default font at %.1fpt", size)
    return ImageFont.load_default(size=size)


def _line_height(font: AnyFont) -> float:
    if isinstance(font, ImageFont.FreeTypeFont):
        ascent, descent = font.getmetrics()
        return float(ascent + descent)
    # Bitmap fonts have no vertical metrics; use the ink box of a tall pair.
    _left, top, _right, bottom = font.getbbox("Ag")
    return float(bottom - top)


class PillowFontMetrics:
    """Measure text with Pillow's font rasterizer.

    Width is the advance width of the widest line; height is the number of
    lines times the font's line height (ascent + descent). Empty text is
    one line tall and zero wide.
    """

    def measure(self, text: str, font: FontSpec) -> TextMeasurement:
        face = load_font(font.path, font.size)
        lines = text.split("\n")
        width = max(float(face.getlength(line)) for line in lines)
        return TextMeasurement(width=width, height=_line_height(face) * len(lines))
