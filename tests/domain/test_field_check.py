"""Tests for fail-fast field validation."""

from collections.abc import Iterator

import pytest

from jsonrec.domain.field_check import validate_fields
from jsonrec.domain.policies import ColorsPolicy, StringsPolicy
from jsonrec.domain.records import ColorsRecord, Record, StringsRecord


class _CountingSource:
    """Iterable that records how many records were pulled from it."""

    def __init__(self, records: list[Record]) -> None:
        self._records = records
        self.pulled = 0

    def __iter__(self) -> Iterator[Record]:
        for record in self._records:
            self.pulled += 1
            yield record


class TestValidateFields:
    def test_all_valid(self) -> None:
        records = [StringsRecord(name="a", value="b"), StringsRecord(name="c", value="d")]
        result = validate_fields(records, StringsPolicy())
        assert result.valid
        assert result.violations == []
        assert result.checked == 2

    def test_empty_sequence_is_valid(self) -> None:
        assert validate_fields([], ColorsPolicy()).valid

    def test_fail_fast_stops_pulling(self) -> None:
        source = _CountingSource(
            [
                ColorsRecord(name="ok", value="#FFFFFF"),
                ColorsRecord(name="bad", value="#FF00F"),
                ColorsRecord(name="never", value="nope"),
                ColorsRecord(name="never", value="nope"),
            ]
        )
        result = validate_fields(source, ColorsPolicy())
        assert not result.valid
        assert result.checked == 2
        assert source.pulled == 2

    def test_both_fields_of_failing_record_reported(self) -> None:
        result = validate_fields([StringsRecord(name="", value="")], StringsPolicy())
        assert [v.field for v in result.violations] == ["name", "value"]

    def test_only_first_failing_record_reported(self) -> None:
        records = [StringsRecord(name="", value="x"), StringsRecord(name="y", value="")]
        result = validate_fields(records, StringsPolicy())
        assert [v.message for v in result.violations] == ["name is empty"]

    @pytest.mark.parametrize(
        ("value", "valid"),
        [("#FF00FF", True), ("#abc", True), ("#FF00F", False), ("red", False)],
    )
    def test_colors_valid_iff_pattern(self, value: str, valid: bool) -> None:
        result = validate_fields([ColorsRecord(name="brand", value=value)], ColorsPolicy())
        assert result.valid is valid

    def test_generator_input(self) -> None:
        records = (StringsRecord(name=str(i), value="v") for i in range(3))
        assert validate_fields(records, StringsPolicy()).checked == 3
