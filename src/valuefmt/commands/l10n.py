"""Command group: localized string lookup."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from valuefmt.commands._base import FmtGroup

if TYPE_CHECKING:
    from valuefmt.commands._context import AppContext


@click.group(
    cls=FmtGroup,
    examples="""\
  valuefmt l10n lookup mainPageTitle
  valuefmt l10n lookup mainPageTitle --table ko.strings""",
)
@click.pass_obj
def l10n(app: AppContext) -> None:
    """Look up strings in a localization table."""


@l10n.command(
    examples="""\
  valuefmt l10n lookup mainPageTitle --comment "Title in main page"
  valuefmt -q l10n lookup settings.title --table strings/en.toml""",
)
@click.argument("key")
@click.option("--comment", default=None, help="Translator note (does not affect the result).")
@click.option(
    "--table",
    "table_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="String table (.toml or .strings). Default from config.",
)
@click.pass_obj
def lookup(app: AppContext, key: str, comment: str | None, table_path: Path | None) -> None:
    """Print the localized string for KEY (the key itself when missing)."""
    app.emit(app.l10n.lookup(key, comment=comment, table_path=table_path))
