"""Command group: date formatting and parsing."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from valuefmt.commands._base import FmtGroup

if TYPE_CHECKING:
    from valuefmt.commands._context import AppContext

_DATE_EXAMPLES = """\
  valuefmt date format 2018-06-26 yyMMdd
  valuefmt date format now "EEEE, MMM d"
  valuefmt date parse 20180710 yyyyMMdd
  valuefmt --json date parse 'Jul 10, 3:04 PM' 'MMM d, h:mm a'"""


@click.group(cls=FmtGroup, examples=_DATE_EXAMPLES)
@click.pass_obj
def date(app: AppContext) -> None:
    """Format and parse dates with UTS #35 patterns."""


@date.command(
    "format",
    examples="""\
  valuefmt date format 2018-06-26T15:30:00 "yyyy.MM.dd HH:mm"
  valuefmt date format now
  valuefmt -q date format now yyMMdd""",
)
@click.argument("value")
@click.argument("pattern", required=False)
@click.pass_obj
def format_cmd(app: AppContext, value: str, pattern: str | None) -> None:
    """Render VALUE (ISO-8601 or "now") with PATTERN (default from config)."""
    app.emit(app.values.date_format(value, pattern))


@date.command(
    examples="""\
  valuefmt date parse 20180710 yyyyMMdd
  valuefmt date parse "not a date" yyyyMMdd --fallback-now""",
)
@click.argument("text")
@click.argument("pattern", required=False)
@click.option(
    "--fallback-now",
    is_flag=True,
    help="Return the current time (with a warning) instead of failing.",
)
@click.pass_obj
def parse(app: AppContext, text: str, pattern: str | None, fallback_now: bool) -> None:
    """Parse TEXT with PATTERN (default from config)."""
    app.emit(app.values.date_parse(text, pattern, fallback_now=fallback_now))
