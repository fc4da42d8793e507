"""Variant registry.

Binds each :class:`Variant` to its record model, field policy and
structural schema. Lookup is by name and case-insensitive.
"""

from __future__ import annotations

from dataclasses import dataclass

from jsonrec.domain.errors import UnknownVariantError
from jsonrec.domain.policies import ColorsPolicy, FieldPolicy, StringsPolicy
from jsonrec.domain.records import ColorsRecord, Record, StringsRecord
from jsonrec.domain.schemas import COLORS_SCHEMA, STRINGS_SCHEMA, SchemaSpec
from jsonrec.domain.types import Variant


@dataclass(frozen=True)
class VariantSpec:
    """Everything the pipeline needs to handle one variant."""

    variant: Variant
    record_model: type[Record]
    policy: FieldPolicy
    schema: SchemaSpec


VARIANT_REGISTRY: dict[Variant, VariantSpec] = {
    Variant.STRINGS: VariantSpec(
        variant=Variant.STRINGS,
        record_model=StringsRecord,
        policy=StringsPolicy(),
        schema=STRINGS_SCHEMA,
    ),
    Variant.COLORS: VariantSpec(
        variant=Variant.COLORS,
        record_model=ColorsRecord,
        policy=ColorsPolicy(),
        schema=COLORS_SCHEMA,
    ),
}


def get_variant(selector: Variant | str) -> VariantSpec:
    """Look up a variant by enum member or case-insensitive name."""
    try:
        key = Variant(selector.lower() if isinstance(selector, str) else selector)
    except ValueError:
        choices = ", ".join(v.value for v in Variant)
        msg = f"Unknown variant {selector!r} (expected one of: {choices})"
        raise UnknownVariantError(msg) from None
    return VARIANT_REGISTRY[key]
