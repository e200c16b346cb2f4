"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, valuefmt.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from valuefmt.domain.sizes import CountStyle

# --- valuefmt.toml sections ---


class DateConfig(BaseModel):
    """[date] section."""

    model_config = {"frozen": True}

    default_pattern: str = "yyyy-MM-dd HH:mm:ss"


class SizeConfig(BaseModel):
    """[size] section."""

    model_config = {"frozen": True}

    count_style: CountStyle = CountStyle.FILE
    allows_nonnumeric: bool = True


class TextConfig(BaseModel):
    """[text] section."""

    model_config = {"frozen": True}

    truncate_suffix: str = "..."


class FontsConfig(BaseModel):
    """[fonts] section."""

    model_config = {"frozen": True}

    path: str = ""
    size: float = Field(default=15.0, gt=0)
    digit_style: str = "bold"
    other_style: str = ""


class L10nConfig(BaseModel):
    """[l10n] section."""

    model_config = {"frozen": True}

    table: str = ""

