"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, jsonrec.toml only contains
overrides. Field policy bounds are deliberately absent: they are fixed
per variant and never configurable.
"""

from __future__ import annotations

from pydantic import BaseModel


class ChecksConfig(BaseModel):
    """[checks] section."""

    model_config = {"frozen": True}

    schema_gating: bool = False


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    color: bool = True
    width: int = 120

