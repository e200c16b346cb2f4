"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult.
Domain functions fail soft; services turn their outcomes into
results that the CLI and JSON output consume.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Error codes shared across services.
PARSE_FAILED = "PARSE_FAILED"
INVALID_VALUE = "INVALID_VALUE"
TABLE_ERROR = "TABLE_ERROR"
FONT_ERROR = "FONT_ERROR"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"date_format"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing when verbose).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Build a failed result carrying a :class:`ServiceError`."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
