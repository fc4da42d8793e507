"""Structural schema check, independent of decoding.

The raw text is first checked as a JSON string against the variant's
document schema. When the text also parses as JSON, the parsed value is
checked against the records schema. Parse failures belong to the decoder,
so unparseable text only gets the document-level check.

All violations are collected; the check never stops at the first one.
"""

from __future__ import annotations

import json
from functools import cache
from typing import Any

import structlog
from jsonschema import Draft7Validator

from jsonrec.domain.errors import SchemaViolation
from jsonrec.domain.schemas import SchemaSpec
from jsonrec.domain.types import Variant
from jsonrec.domain.variants import get_variant

logger = structlog.get_logger(__name__)


@cache
def _validators(spec: SchemaSpec) -> tuple[Draft7Validator, Draft7Validator]:
    """Compile the document and records validators once per spec."""
    checker = Draft7Validator.FORMAT_CHECKER
    return (
        Draft7Validator(spec.document_schema(), format_checker=checker),
        Draft7Validator(spec.records_schema(), format_checker=checker),
    )


def _collect(validator: Draft7Validator, instance: Any) -> list[SchemaViolation]:
    errors = sorted(validator.iter_errors(instance), key=lambda e: list(e.absolute_path))
    return [SchemaViolation(message=e.message, path=e.json_path) for e in errors]


def schema_check(raw_text: str, variant: Variant | str) -> list[SchemaViolation]:
    """Return every schema violation in *raw_text* for *variant*.

    An empty list means the text satisfies the schema.
    """
    spec = get_variant(variant)
    document_validator, records_validator = _validators(spec.schema)

    violations = _collect(document_validator, raw_text)
    try:
        parsed = json.loads(raw_text)
    except json.JSONDecodeError:
        logger.debug("schema.records_skipped", variant=spec.variant.value, reason="not json")
    else:
        violations.extend(_collect(records_validator, parsed))

    for v in violations:
        logger.info("schema.violation", variant=spec.variant.value, detail=v.message, path=v.path)
    if not violations:
        logger.debug("schema.ok", variant=spec.variant.value)
    return violations
