"""Subcommand modules for valuefmt.

Provides register_commands() which uses deferred imports to keep
``valuefmt --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from valuefmt.commands.date import date
    from valuefmt.commands.l10n import l10n
    from valuefmt.commands.text import text

    cli.add_command(date)
    cli.add_command(text)
    cli.add_command(l10n)

    # --- Standalone commands ---
    from valuefmt.commands.number import round_cmd
    from valuefmt.commands.size import size

    cli.add_command(size)
    cli.add_command(round_cmd)
