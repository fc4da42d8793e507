"""Structural schemas for each variant, built once as frozen specs.

Two Draft-7 documents come out of each :class:`SchemaSpec`:

- the *document* schema constrains the serialized text itself
  (a string of at most ``max_document_length`` characters);
- the *records* schema constrains the parsed array: objects with exactly
  ``name`` and ``value``, each with the variant's length and pattern rules.

INVARIANT: specs are module constants and never mutated. Builders return
fresh dicts so callers cannot alter shared state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DRAFT7_URI = "http://json-schema.org/draft-07/schema#"
MAX_DOCUMENT_LENGTH = 1000
HEX_COLOR_REGEX = r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$"


@dataclass(frozen=True)
class SchemaSpec:
    """Per-variant structural constraints."""

    name_min_length: int
    name_max_length: int
    value_min_length: int
    value_max_length: int
    value_pattern: str | None = None
    max_document_length: int = MAX_DOCUMENT_LENGTH

    def document_schema(self) -> dict[str, Any]:
        """Schema applied to the raw text as a JSON string instance."""
        return {
            "$schema": DRAFT7_URI,
            "type": "string",
            "maxLength": self.max_document_length,
        }

    def records_schema(self) -> dict[str, Any]:
        """Schema applied to the parsed document."""
        value: dict[str, Any] = {
            "type": "string",
            "minLength": self.value_min_length,
            "maxLength": self.value_max_length,
        }
        if self.value_pattern is not None:
            value["pattern"] = self.value_pattern
        return {
            "$schema": DRAFT7_URI,
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {
                        "type": "string",
                        "minLength": self.name_min_length,
                        "maxLength": self.name_max_length,
                    },
                    "value": value,
                },
                "required": ["name", "value"],
                "propertyNames": {"pattern": "^(name|value)$"},
            },
        }


STRINGS_SCHEMA = SchemaSpec(
    name_min_length=1,
    name_max_length=100,
    value_min_length=1,
    value_max_length=100,
)

# Exact length 7 rules out the 3-digit short form the pattern would allow.
COLORS_SCHEMA = SchemaSpec(
    name_min_length=1,
    name_max_length=100,
    value_min_length=7,
    value_max_length=7,
    value_pattern=HEX_COLOR_REGEX,
)
