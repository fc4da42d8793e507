"""Field policy ABC and per-variant policies.

A policy is the fixed set of bound and pattern rules a variant applies
to each decoded record. Constants live on the class and are never read
from configuration.

Every failed rule is logged and returned as a
:class:`FieldViolation`. The log lines are observability output only;
callers decide validity from the returned list.
"""

from __future__ import annotations

import re
from abc import ABC
from dataclasses import dataclass
from typing import ClassVar

import structlog

from jsonrec.domain.errors import FieldViolation

logger = structlog.get_logger(__name__)

HEX_COLOR_PATTERN = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")


@dataclass(frozen=True)
class LengthBound:
    """Inclusive upper bound with an exclusive or inclusive lower bound."""

    minimum: int
    maximum: int
    min_inclusive: bool = False

    def contains(self, length: int) -> bool:
        above = length >= self.minimum if self.min_inclusive else length > self.minimum
        return above and length <= self.maximum

    def describe(self, length: int) -> str:
        op = ">=" if self.min_inclusive else ">"
        return f"length {length} {op} {self.minimum} and {length} <= {self.maximum} is required"


class FieldPolicy(ABC):
    """Bound and pattern rules for one variant.

    Subclasses override the class constants; the checks themselves are
    shared.
    """

    variant: ClassVar[str]
    name_bounds: ClassVar[LengthBound]
    value_bounds: ClassVar[LengthBound]
    value_pattern: ClassVar[re.Pattern[str] | None] = None

    def name_valid(self, name: str) -> list[FieldViolation]:
        """Return violations for *name* (empty when valid)."""
        return self._check_length("name", name, self.name_bounds)

    def value_valid(self, value: str) -> list[FieldViolation]:
        """Return violations for *value* (empty when valid).

        A value inside its length bounds must still match the pattern.
        """
        violations = self._check_length("value", value, self.value_bounds)
        if violations:
            return violations
        if self.value_pattern is not None and not self.value_pattern.fullmatch(value):
            violations.append(
                self._violation("value", value, f"value {value!r} does not match pattern")
            )
        return violations

    def _check_length(self, field: str, text: str, bounds: LengthBound) -> list[FieldViolation]:
        if not text:
            return [self._violation(field, text, f"{field} is empty")]
        length = len(text)
        if not bounds.contains(length):
            return [self._violation(field, text, f"{field} {bounds.describe(length)}")]
        return []

    def _violation(self, field: str, text: str, message: str) -> FieldViolation:
        logger.info("field.violation", variant=self.variant, field=field, detail=message)
        return FieldViolation(field=field, message=message, value=text)


class StringsPolicy(FieldPolicy):
    """Loose rules: both fields non-empty and at most 100 characters."""

    variant = "strings"
    name_bounds = LengthBound(minimum=0, maximum=100)
    value_bounds = LengthBound(minimum=0, maximum=100)


class ColorsPolicy(FieldPolicy):
    """Name as for strings; value 2-7 characters and a hex colour."""

    variant = "colors"
    name_bounds = LengthBound(minimum=0, maximum=100)
    value_bounds = LengthBound(minimum=2, maximum=7, min_inclusive=True)
    value_pattern = HEX_COLOR_PATTERN
