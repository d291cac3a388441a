"""Value-style outcomes for membership operations.

Services hand back a :class:`ServiceResult` instead of raising, so the CLI
and library callers that prefer values over exceptions can branch on
``ok`` and read the rejected inputs from ``error.detail``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation was rejected.

    ``code`` is one of ``VALIDATION_FAILED``, ``NO_VALID_EMAILS`` or
    ``INVALID_EMAILS``; ``detail`` holds the offending inputs.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of a ``check`` or ``validate`` operation.

    Attributes:
        ok: False when the input was rejected.
        op: ``"check"`` or ``"validate"``.
        data: The verdict or per-address report when ``ok``.
        error: The rejection when not ``ok``.
        meta: Where the known domains came from, when relevant.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Build a rejected result for *op*."""
        error = ServiceError(code=code, message=message, detail=detail or {})
        return cls(ok=False, op=op, error=error, meta=meta)
