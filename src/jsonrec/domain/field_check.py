"""Fail-fast field validation over a record sequence."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import structlog

from jsonrec.domain.errors import FieldViolation
from jsonrec.domain.policies import FieldPolicy
from jsonrec.domain.records import Record

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class FieldCheckResult:
    """Result of a field check.

    Attributes:
        valid: True iff every record passed.
        violations: Violations of the first failing record (empty if valid).
        checked: Number of records pulled from the input and evaluated.
    """

    valid: bool
    violations: list[FieldViolation] = field(default_factory=list)
    checked: int = 0


def validate_fields(records: Iterable[Record], policy: FieldPolicy) -> FieldCheckResult:
    """Check each record against *policy*, stopping at the first failure.

    Both fields of the failing record are checked, but no later record is
    pulled from *records* once one fails.
    """
    checked = 0
    for record in records:
        checked += 1
        violations = policy.name_valid(record.name) + policy.value_valid(record.value)
        if violations:
            logger.info("fields.failed", variant=policy.variant, record=str(record))
            return FieldCheckResult(valid=False, violations=violations, checked=checked)
    return FieldCheckResult(valid=True, checked=checked)
