"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Builds services on demand and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from valuefmt.config.logging import configure_from_settings
from valuefmt.output.formatters import OutputSettings, format_result
from valuefmt.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from valuefmt.config.settings import ValuefmtSettings
    from valuefmt.services.l10n import LocalizationService
    from valuefmt.services.result import ServiceResult
    from valuefmt.services.text import TextService
    from valuefmt.services.values import ValueService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Services are created lazily so ``--help`` and ``--version`` never
    load fonts or string tables.
    """

    def __init__(self, settings: ValuefmtSettings) -> None:
        self.settings = settings

        configure_from_settings(settings)
        if settings.verbose:
            enable_telemetry()

    @property
    def values(self) -> ValueService:
        from valuefmt.services.values import ValueService

        return ValueService(self.settings)

    @property
    def text(self) -> TextService:
        from valuefmt.services.text import TextService

        return TextService(self.settings)

    @property
    def l10n(self) -> LocalizationService:
        from valuefmt.services.l10n import LocalizationService

        return LocalizationService(self.settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          In quiet mode warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if settings.quiet and not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
