"""Error taxonomy and violation payloads.

Fatal errors (raised):
- DecodeError: the text is not a JSON array of ``{name, value}`` objects.
- UnknownVariantError: the selector names no registered variant.
- ConfigurationError: no usable input could be located or read.

Findings (returned, never raised):
- SchemaViolation: one structural constraint violated, with its JSON path.
- FieldViolation: one field of a decoded record failed its policy.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class JsonrecError(Exception):
    """Base class for all fatal jsonrec errors."""

    code = "JSONREC_ERROR"


class DecodeError(JsonrecError):
    """Raised when raw text cannot be decoded into records.

    Attributes:
        details: ``(message, location)`` pairs describing each problem.
    """

    code = "DECODE_ERROR"

    def __init__(self, message: str, details: list[tuple[str, str]] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or []

    def to_detail(self) -> dict[str, Any]:
        return {"errors": [{"message": m, "location": loc} for m, loc in self.details]}


class UnknownVariantError(JsonrecError):
    """Raised when a variant selector does not match any registered variant."""

    code = "UNKNOWN_VARIANT"


class ConfigurationError(JsonrecError):
    """Raised when the input document cannot be located or read."""

    code = "CONFIGURATION_ERROR"


class SchemaViolation(BaseModel):
    """One structural violation found by the schema check."""

    model_config = {"frozen": True}

    message: str
    path: str


class FieldViolation(BaseModel):
    """One failed field rule on a decoded record."""

    model_config = {"frozen": True}

    field: str
    message: str
    value: str
