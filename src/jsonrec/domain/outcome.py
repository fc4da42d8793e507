"""Validation outcome — the single pass/fail result of one invocation."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from jsonrec.domain.errors import SchemaViolation
from jsonrec.domain.types import Variant


class ValidationOutcome(BaseModel):
    """Aggregate result of decode, schema check, and field check.

    Attributes:
        variant: Variant the document was decoded as.
        valid: False if any gating check failed.
        record_count: Number of decoded records.
        reason: Message of the first gating failure, None when valid.
        failed_check: ``"fields"`` or ``"schema"`` when invalid, else None.
        schema_violations: Every schema violation (advisory unless gating).
        schema_gating: Whether schema violations counted toward ``valid``.
    """

    model_config = {"frozen": True}

    variant: Variant
    valid: bool
    record_count: int
    reason: str | None = None
    failed_check: Literal["fields", "schema"] | None = None
    schema_violations: list[SchemaViolation] = Field(default_factory=list)
    schema_gating: bool = False
