"""Record variants.

Each variant names one record shape with its own field policy and
structural schema (see :mod:`jsonrec.domain.variants`).
"""

from __future__ import annotations

from enum import StrEnum


class Variant(StrEnum):
    """Supported record variants, selected at the boundary."""

    STRINGS = "strings"
    COLORS = "colors"
