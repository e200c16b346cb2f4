"""Logging setup for the valuefmt CLI.

Modules log through ``logging.getLogger(__name__)``; telemetry logs
through structlog. Both end up on one stderr handler whose renderer is
picked by ``--log-json``. ``--verbose`` opens the ``valuefmt`` logger to
DEBUG while third-party loggers stay at WARNING.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from valuefmt.config.settings import ValuefmtSettings

# Pillow logs every font file and plugin it tries at DEBUG.
_CHATTY_LIBRARIES = ("PIL",)


def _pre_chain() -> list[structlog.types.Processor]:
    """Fields added to every event, structlog or stdlib."""
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _renderers(log_json: bool) -> list[structlog.types.Processor]:
    if log_json:
        return [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route all logging to stderr.

    Safe to call repeatedly: the root handler is replaced, not stacked.
    """
    pre_chain = _pre_chain()
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *_renderers(log_json)],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger("valuefmt").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _CHATTY_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)


def configure_from_settings(settings: ValuefmtSettings) -> None:
    """Apply the ``--verbose`` and ``--log-json`` flags held by *settings*."""
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
