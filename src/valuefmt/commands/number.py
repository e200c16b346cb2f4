"""Command: decimal rounding."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from valuefmt.commands._base import FmtCommand

if TYPE_CHECKING:
    from valuefmt.commands._context import AppContext


@click.command(
    "round",
    cls=FmtCommand,
    examples="""\
  valuefmt round 0.2289 2
  valuefmt round -- -2.5 0
  valuefmt round -- 1234.5 -2""",
)
@click.argument("value", type=float)
@click.argument("places", type=int)
@click.pass_obj
def round_cmd(app: AppContext, value: float, places: int) -> None:
    """Round VALUE to PLACES decimal digits, ties away from zero."""
    app.emit(app.values.round(value, places))
