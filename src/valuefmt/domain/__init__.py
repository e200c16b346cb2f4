"""Domain layer — pure value transformations.

This layer depends only on stdlib, pydantic, regex and rich's Text type.
It must never import from services, infrastructure, commands, or config.
"""

from valuefmt.domain.attributed import AttributedText, AttributedTextBuilder, StyleRun
from valuefmt.domain.dates import DateParseResult, date_to_string, string_to_date
from valuefmt.domain.graphemes import graphemes
from valuefmt.domain.localization import StringTable, localized, localized_with_comment
from valuefmt.domain.metrics import FontMetrics, FontSpec, TextMeasurement, text_size_from_font
from valuefmt.domain.numbers import round_to_places
from valuefmt.domain.sizes import ByteUnit, CountStyle, data_size_other_format
from valuefmt.domain.strings import (
    different_number_font,
    initial_korea,
    is_check_valid_email,
    make_phone_number,
    reduce_from_count,
    reversed_text,
    select_text_from_range,
)

__all__ = [
    "AttributedText",
    "AttributedTextBuilder",
    "ByteUnit",
    "CountStyle",
    "DateParseResult",
    "FontMetrics",
    "FontSpec",
    "StringTable",
    "StyleRun",
    "TextMeasurement",
    "data_size_other_format",
    "date_to_string",
    "different_number_font",
    "graphemes",
    "initial_korea",
    "is_check_valid_email",
    "localized",
    "localized_with_comment",
    "make_phone_number",
    "reduce_from_count",
    "reversed_text",
    "round_to_places",
    "select_text_from_range",
    "string_to_date",
    "text_size_from_font",
]
