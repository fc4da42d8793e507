"""Tests for the variant registry."""

import pytest

from jsonrec.domain.errors import UnknownVariantError
from jsonrec.domain.policies import ColorsPolicy, StringsPolicy
from jsonrec.domain.records import ColorsRecord, StringsRecord
from jsonrec.domain.schemas import COLORS_SCHEMA, STRINGS_SCHEMA
from jsonrec.domain.types import Variant
from jsonrec.domain.variants import VARIANT_REGISTRY, get_variant


class TestVariantRegistry:
    def test_all_variants_registered(self) -> None:
        assert set(VARIANT_REGISTRY) == set(Variant)

    def test_strings_spec(self) -> None:
        spec = VARIANT_REGISTRY[Variant.STRINGS]
        assert spec.record_model is StringsRecord
        assert isinstance(spec.policy, StringsPolicy)
        assert spec.schema is STRINGS_SCHEMA

    def test_colors_spec(self) -> None:
        spec = VARIANT_REGISTRY[Variant.COLORS]
        assert spec.record_model is ColorsRecord
        assert isinstance(spec.policy, ColorsPolicy)
        assert spec.schema is COLORS_SCHEMA


class TestGetVariant:
    def test_by_enum(self) -> None:
        assert get_variant(Variant.COLORS).variant is Variant.COLORS

    def test_by_name_case_insensitive(self) -> None:
        assert get_variant("Strings").variant is Variant.STRINGS

    def test_unknown(self) -> None:
        with pytest.raises(UnknownVariantError, match="expected one of: strings, colors"):
            get_variant("numbers")
