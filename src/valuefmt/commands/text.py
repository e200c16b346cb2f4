"""Command group: string transformations."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from valuefmt.commands._base import FmtGroup

if TYPE_CHECKING:
    from valuefmt.commands._context import AppContext

_TEXT_EXAMPLES = """\
  valuefmt text reverse Hello
  valuefmt text initials 안녕하세요
  valuefmt text phone 01011112222
  valuefmt text email myoungsc.dev@gmail.com
  valuefmt text select 안녕하세요 2 2
  valuefmt text truncate "Swift is Awesome!!" 15
  valuefmt text measure Hello --size 15
  valuefmt text digits a1b2c3d4"""


@click.group(cls=FmtGroup, examples=_TEXT_EXAMPLES)
@click.pass_obj
def text(app: AppContext) -> None:
    """Transform, validate and measure strings."""


@text.command(examples="  valuefmt text reverse 'Hello, 세계'")
@click.argument("value")
@click.pass_obj
def reverse(app: AppContext, value: str) -> None:
    """Reverse VALUE by user-perceived character."""
    app.emit(app.text.reverse(value))


@text.command(examples="  valuefmt -q text initials SK하이닉스")
@click.argument("value")
@click.pass_obj
def initials(app: AppContext, value: str) -> None:
    """Replace Hangul syllables with their leading consonants."""
    app.emit(app.text.initials(value))


@text.command(examples="  valuefmt -q text phone 01011112222")
@click.argument("digits")
@click.pass_obj
def phone(app: AppContext, digits: str) -> None:
    """Dash an 11-digit phone number as ddd-dddd-dddd."""
    app.emit(app.text.phone(digits))


@text.command(examples="  valuefmt --json text email someone@example.com")
@click.argument("value")
@click.pass_obj
def email(app: AppContext, value: str) -> None:
    """Check whether VALUE is a well-formed email address."""
    app.emit(app.text.email(value))


@text.command(examples="  valuefmt text select 안녕하세요 2 2")
@click.argument("value")
@click.argument("start", type=int)
@click.argument("length", type=int)
@click.pass_obj
def select(app: AppContext, value: str, start: int, length: int) -> None:
    """Select characters START through START+LENGTH (inclusive)."""
    app.emit(app.text.select(value, start, length))


@text.command(
    examples="""\
  valuefmt text truncate "Swift is Awesome!!" 15
  valuefmt text truncate 안녕하세요반갑습니다 6 --suffix …""",
)
@click.argument("value")
@click.argument("limit", type=int)
@click.option("--suffix", default=None, help="Text appended when truncated. Default from config.")
@click.pass_obj
def truncate(app: AppContext, value: str, limit: int, suffix: str | None) -> None:
    """Cut VALUE once its weight passes LIMIT (wide characters count 2)."""
    app.emit(app.text.truncate(value, limit, suffix))


@text.command(
    examples="""\
  valuefmt text measure Hello
  valuefmt text measure 안녕하세요 --size 15 --font /path/to/NotoSansKR.ttf""",
)
@click.argument("value")
@click.option("--size", type=float, default=None, help="Point size. Default from config.")
@click.option("--font", "font_path", default=None, help="Font file. Default from config.")
@click.pass_obj
def measure(app: AppContext, value: str, size: float | None, font_path: str | None) -> None:
    """Measure the rendered width and height of VALUE."""
    app.emit(app.text.measure(value, size=size, font_path=font_path))


@text.command(examples="  valuefmt text digits 'Order 66 shipped 3 items'")
@click.argument("value")
@click.pass_obj
def digits(app: AppContext, value: str) -> None:
    """Style the digits in VALUE apart from the other characters."""
    app.emit(app.text.digits(value))
