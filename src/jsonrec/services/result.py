"""ServiceResult and ServiceError — the service-layer return contract.

INVARIANT: Every public service method returns ServiceResult and never
terminates the process. The CLI decides how to react to a failure.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"validate"``, ``"decode"``, ``"schema"``).
        data: Operation-specific payload.
        warnings: Non-fatal findings (advisory schema violations).
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry span tree in verbose mode).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
