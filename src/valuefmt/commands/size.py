"""Command: format a byte count."""

from __future__ import annotations

import functools
import operator
from typing import TYPE_CHECKING

import click

from valuefmt.commands._base import FmtCommand
from valuefmt.domain.sizes import ByteUnit, CountStyle

if TYPE_CHECKING:
    from valuefmt.commands._context import AppContext

_UNIT_CHOICES = [unit.name.lower() for unit in ByteUnit]


@click.command(
    cls=FmtCommand,
    examples="""\
  valuefmt size 1024 --unit kb
  valuefmt size 1500000
  valuefmt size 1073741824 --style memory
  valuefmt size 5000000 --unit kb --unit gb""",
)
@click.argument("count", type=int)
@click.option(
    "--unit",
    "units",
    multiple=True,
    type=click.Choice(_UNIT_CHOICES, case_sensitive=False),
    help="Allowed unit (repeatable). Default: all units.",
)
@click.option(
    "--style",
    "count_style",
    type=click.Choice([style.value for style in CountStyle], case_sensitive=False),
    default=None,
    help="file/decimal (1000) or memory/binary (1024). Default from config.",
)
@click.pass_obj
def size(app: AppContext, count: int, units: tuple[str, ...], count_style: str | None) -> None:
    """Format COUNT bytes in human-readable units."""
    allowed = ByteUnit.ALL
    if units:
        allowed = functools.reduce(operator.or_, (ByteUnit[name.upper()] for name in units))
    style = CountStyle(count_style.lower()) if count_style else None
    app.emit(app.values.size(count, allowed, style))
