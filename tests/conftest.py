"""Shared pytest fixtures and test helpers for jsonrec tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from jsonrec.config.settings import JsonrecSettings
from jsonrec.services.telemetry import disable_telemetry
from jsonrec.services.validation import ValidationService

COLORS_DOC = json.dumps(
    [
        {"name": "brand", "value": "#FF00FF"},
        {"name": "background", "value": "#1a2b3c"},
        {"name": "accent", "value": "#0F0"},
    ]
)

STRINGS_DOC = json.dumps(
    [
        {"name": "greeting", "value": "hello"},
        {"name": "farewell", "value": "goodbye"},
    ]
)


@pytest.fixture
def colors_doc() -> str:
    """Three valid colour records, including a 3-digit short form."""
    return COLORS_DOC


@pytest.fixture
def strings_doc() -> str:
    return STRINGS_DOC


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no JSONREC_* overrides.

    Keeps a developer's own jsonrec.toml or environment from leaking in.
    """
    monkeypatch.delenv("JSONREC_CONFIG", raising=False)
    monkeypatch.delenv("JSONREC_CHECKS__SCHEMA_GATING", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_runtime_state() -> Generator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("jsonrec")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
    disable_telemetry()


@pytest.fixture
def settings(tmp_path: Path) -> JsonrecSettings:
    """Default settings with no config file."""
    return JsonrecSettings.from_cli(search_from=tmp_path)


@pytest.fixture
def service(settings: JsonrecSettings) -> ValidationService:
    return ValidationService(settings)


@pytest.fixture
def write_doc(tmp_path: Path) -> Callable[..., Path]:
    """Write a document into the temp dir and return its path."""

    def _write(text: str, name: str = "doc.json") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
