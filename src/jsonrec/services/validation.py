"""ValidationService — the decode, schema-check, field-check pipeline.

Per invocation the pipeline moves through
``Start -> Decoded -> SchemaChecked -> FieldChecked -> {Valid, Invalid}``
and is terminal after one pass.

- A decode failure aborts the pipeline; no outcome is produced.
- Schema violations are advisory unless schema gating is on, in which
  case any violation makes the outcome invalid.
- The field check is fail-fast and always gating.
"""

from __future__ import annotations

from typing import Any, Literal

import structlog

from jsonrec.domain.decoder import decode_records
from jsonrec.domain.errors import DecodeError, UnknownVariantError
from jsonrec.domain.field_check import validate_fields
from jsonrec.domain.outcome import ValidationOutcome
from jsonrec.domain.schema_check import schema_check
from jsonrec.domain.types import Variant
from jsonrec.domain.variants import get_variant
from jsonrec.services.base import BaseService
from jsonrec.services.result import ServiceResult
from jsonrec.services.telemetry import trace_span, traced

logger = structlog.get_logger(__name__)

CODE_FIELD_VIOLATION = "FIELD_VIOLATION"
CODE_SCHEMA_VIOLATION = "SCHEMA_VIOLATION"


class ValidationService(BaseService):
    """Decodes and validates record documents for one variant at a time."""

    # ------------------------------------------------------------------
    # Core pipeline
    # ------------------------------------------------------------------

    def run(
        self,
        raw_text: str,
        variant: Variant | str,
        *,
        schema_gating: bool | None = None,
    ) -> ValidationOutcome:
        """Run the full pipeline and return the aggregate outcome.

        Args:
            raw_text: The document as read by the caller.
            variant: Which record variant to decode as.
            schema_gating: Let schema violations invalidate the outcome.
                Defaults to the ``[checks] schema_gating`` setting.

        Raises:
            DecodeError: The text is not a record array; no outcome exists.
            UnknownVariantError: *variant* is not registered.
        """
        spec = get_variant(variant)
        gating = self._settings.checks.schema_gating if schema_gating is None else schema_gating
        log = logger.bind(variant=spec.variant.value, schema_gating=gating)

        with trace_span("decode") as span:
            records = decode_records(raw_text, spec.variant)
            if span:
                span.annotate("records", len(records))

        with trace_span("schema_check") as span:
            violations = schema_check(raw_text, spec.variant)
            if span:
                span.annotate("violations", len(violations))

        with trace_span("field_check") as span:
            fields = validate_fields(records, spec.policy)
            if span:
                span.annotate("checked", fields.checked)

        reason: str | None = None
        failed_check: Literal["fields", "schema"] | None = None
        if not fields.valid:
            reason = "; ".join(v.message for v in fields.violations)
            failed_check = "fields"
        elif gating and violations:
            reason = f"{violations[0].path}: {violations[0].message}"
            failed_check = "schema"

        outcome = ValidationOutcome(
            variant=spec.variant,
            valid=reason is None,
            record_count=len(records),
            reason=reason,
            failed_check=failed_check,
            schema_violations=violations,
            schema_gating=gating,
        )
        log.info("validate.complete", valid=outcome.valid, records=outcome.record_count)
        return outcome

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @traced
    def validate(
        self,
        raw_text: str,
        variant: Variant | str,
        *,
        schema_gating: bool | None = None,
    ) -> ServiceResult:
        """Validate a document, mapping every failure to a ServiceResult."""
        op = "validate"
        try:
            outcome = self.run(raw_text, variant, schema_gating=schema_gating)
        except DecodeError as exc:
            return self._fail(op, exc.code, exc.message, **exc.to_detail())
        except UnknownVariantError as exc:
            return self._fail(op, exc.code, str(exc))

        data = outcome.model_dump(mode="json")
        if outcome.valid:
            warnings = [f"schema: {v.path}: {v.message}" for v in outcome.schema_violations]
            return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

        code = CODE_SCHEMA_VIOLATION if outcome.failed_check == "schema" else CODE_FIELD_VIOLATION
        message = f"{outcome.variant.value} records are not valid: {outcome.reason}"
        return self._fail(op, code, message, **data)

    @traced
    def decode(self, raw_text: str, variant: Variant | str) -> ServiceResult:
        """Decode a document and return its records without validating them."""
        op = "decode"
        try:
            spec = get_variant(variant)
            records = decode_records(raw_text, spec.variant)
        except DecodeError as exc:
            return self._fail(op, exc.code, exc.message, **exc.to_detail())
        except UnknownVariantError as exc:
            return self._fail(op, exc.code, str(exc))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "variant": spec.variant.value,
                "count": len(records),
                "items": [r.to_json() for r in records],
                "display": [str(r) for r in records],
            },
        )

    def schema(self, variant: Variant | str) -> ServiceResult:
        """Return the document and records schemas for *variant*."""
        op = "schema"
        try:
            spec = get_variant(variant)
        except UnknownVariantError as exc:
            return self._fail(op, exc.code, str(exc))

        data: dict[str, Any] = {
            "variant": spec.variant.value,
            "document": spec.schema.document_schema(),
            "records": spec.schema.records_schema(),
        }
        return ServiceResult(ok=True, op=op, data=data)
