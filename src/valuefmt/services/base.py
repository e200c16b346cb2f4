"""BaseService — shared foundation for valuefmt services.

Every service receives the resolved :class:`ValuefmtSettings` at
construction time and reads its defaults (patterns, count style, fonts,
string table) from there.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from valuefmt.config.settings import ValuefmtSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class ValueService(BaseService):
            def round(self, value: float, places: int) -> ServiceResult:
                ...
    """

    def __init__(self, settings: ValuefmtSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> ValuefmtSettings:
        return self._settings

    def _warn(self, warnings: list[str], message: str) -> None:
        """Record a non-fatal issue on the result and in the debug log."""
        logger.debug("%s: %s", type(self).__name__, message)
        warnings.append(message)
