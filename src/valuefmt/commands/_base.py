"""Click command classes that carry usage examples.

``--examples`` prints a command's examples through the same themed Rich
console the results use, then exits before arguments are validated, so
``valuefmt text select --examples`` works without TEXT, START or LENGTH.
"""

from __future__ import annotations

from typing import Any

import click
from rich.text import Text

from valuefmt.output.console import create_console, get_output

PROG_NAME = "valuefmt"


def render_examples(command_path: str, examples: str) -> str:
    """Render *examples* under a heading with the program name highlighted."""
    console = create_console()
    console.print(Text(f"Examples for '{command_path}':", style="fmt.op"))
    console.print()
    for line in examples.splitlines():
        text = Text(line)
        body = line.lstrip()
        if body.startswith(PROG_NAME):
            indent = len(line) - len(body)
            text.stylize("fmt.key", indent, indent + len(PROG_NAME))
        console.print(text)
    return get_output(console).rstrip("\n")


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(render_examples(ctx.command_path, examples))
    ctx.exit(0)


def _examples_option() -> click.Option:
    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_show_examples,
        help="Show usage examples.",
    )


class FmtCommand(click.Command):
    """A command with optional ``examples`` text behind ``--examples``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option())


class FmtGroup(click.Group):
    """A group whose subcommands default to :class:`FmtCommand`."""

    command_class = FmtCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option())
