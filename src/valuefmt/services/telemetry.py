"""Timing for service calls.

Near-zero overhead when disabled (single ContextVar.get per call).
When enabled via --verbose, each @traced service method records its
wall-clock duration in ``ServiceResult.meta`` and logs it.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from contextvars import ContextVar
from typing import ParamSpec, TypeVar

import structlog

from valuefmt.services.result import ServiceResult

_verbose_enabled: ContextVar[bool] = ContextVar("_verbose_enabled", default=False)

_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:
    """Decorator: time a service method and add ``duration_ms`` to its meta."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _verbose_enabled.get():
            return func(*args, **kwargs)

        start = time.perf_counter()
        result = func(*args, **kwargs)
        duration_ms = round((time.perf_counter() - start) * 1000, 3)

        log = structlog.get_logger("valuefmt.telemetry")
        if isinstance(result, ServiceResult):
            log.debug("service.complete", op=result.op, ok=result.ok, duration_ms=duration_ms)
            meta = {**(result.meta or {}), "duration_ms": duration_ms}
            return result.model_copy(update={"meta": meta})  # type: ignore[return-value]
        log.debug("service.complete", func=func.__qualname__, duration_ms=duration_ms)
        return result

    return wrapper


def enable_telemetry() -> None:
    """Enable timing (called by AppContext when --verbose is set)."""
    _verbose_enabled.set(True)


def disable_telemetry() -> None:
    _verbose_enabled.set(False)
