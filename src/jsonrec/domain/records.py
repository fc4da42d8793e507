"""Typed record models for each variant.

A record is two strict strings, ``name`` and ``value``. Records are
immutable once decoded and compare by structure only.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """Base record shape shared by all variants.

    Unknown JSON properties are ignored here; the structural schema
    check is what reports them.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    name: str
    value: str

    label: ClassVar[str] = "Record"

    def __str__(self) -> str:
        return f"{self.label}(name={self.name!r}, value={self.value!r})"

    def to_json(self) -> dict[str, Any]:
        """Return the wire shape of this record."""
        return {"name": self.name, "value": self.value}


class StringsRecord(Record):
    """Generic name/value pair with loose rules."""

    label: ClassVar[str] = "Strings"


class ColorsRecord(Record):
    """Name/value pair whose value is a hex colour."""

    label: ClassVar[str] = "Colors"


def encode_records(records: Iterable[Record]) -> str:
    """Serialize *records* back to a JSON array of ``{name, value}`` objects."""
    return json.dumps([r.to_json() for r in records], ensure_ascii=False)
