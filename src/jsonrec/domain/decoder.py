"""Record decoder: raw text to an ordered list of typed records.

Decoding is all-or-nothing. Malformed JSON, a non-array top level, a
repeated key inside an object, or any item that is not an object with
string ``name`` and ``value`` raises :class:`DecodeError`; no partial list
is ever returned.
"""

from __future__ import annotations

import json
from functools import cache
from typing import Any

import structlog
from pydantic import TypeAdapter, ValidationError

from jsonrec.domain.errors import DecodeError
from jsonrec.domain.records import Record
from jsonrec.domain.types import Variant
from jsonrec.domain.variants import get_variant

logger = structlog.get_logger(__name__)


class _RepeatedKeyObject(dict[str, Any]):
    """A decoded JSON object that named *repeated* more than once."""

    repeated: str = ""


@cache
def _adapter(record_model: type[Record]) -> TypeAdapter[list[Record]]:
    return TypeAdapter(list[record_model])  # type: ignore[valid-type]


def _object_pairs(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    obj = dict(pairs)
    if len(obj) == len(pairs):
        return obj
    seen: set[str] = set()
    marked = _RepeatedKeyObject(obj)
    for key, _ in pairs:
        if key in seen:
            marked.repeated = key
            break
        seen.add(key)
    return marked


def _find_repeated(parsed: Any) -> tuple[str, str] | None:
    """Return ``(key, location)`` of the first object with a repeated key."""
    if isinstance(parsed, _RepeatedKeyObject):
        return parsed.repeated, "$"
    if isinstance(parsed, list):
        for idx, item in enumerate(parsed):
            if isinstance(item, _RepeatedKeyObject):
                return item.repeated, f"$[{idx}]"
    return None


def _location(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as a JSON path."""
    path = "$"
    for part in loc:
        path += f"[{part}]" if isinstance(part, int) else f".{part}"
    return path


def _fail(variant: Variant, details: list[tuple[str, str]]) -> DecodeError:
    first_msg, first_loc = details[0]
    return DecodeError(
        f"Cannot decode {variant.value} records: {first_msg} at {first_loc}",
        details,
    )


def decode_records(raw_text: str, variant: Variant | str) -> list[Record]:
    """Decode *raw_text* as a JSON array of records of *variant*.

    Raises:
        DecodeError: If the text is not a well-formed record array.
        UnknownVariantError: If *variant* is not registered.
    """
    spec = get_variant(variant)
    try:
        parsed = json.loads(raw_text, object_pairs_hook=_object_pairs)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON: {exc.msg} at line {exc.lineno} column {exc.colno}"
        raise _fail(spec.variant, [(msg, "$")]) from exc

    repeated = _find_repeated(parsed)
    if repeated is not None:
        key, loc = repeated
        raise _fail(spec.variant, [(f"Duplicate field {key!r}", loc)])

    try:
        records = _adapter(spec.record_model).validate_python(parsed, strict=True)
    except ValidationError as exc:
        details = [(err["msg"], _location(err["loc"])) for err in exc.errors()]
        raise _fail(spec.variant, details) from exc

    logger.debug("decode.complete", variant=spec.variant.value, count=len(records))
    return records
