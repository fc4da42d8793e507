"""Parametrized help and --examples tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from jsonrec.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["--json", "--quiet", "--verbose", "--log-json", "--config"]),
    (["validate", "--help"], ["VARIANT", "PATH", "--strict-schema", "--advisory-schema"]),
    (["decode", "--help"], ["VARIANT", "PATH"]),
    (["schema", "--help"], ["VARIANT"]),
]


@pytest.mark.parametrize(
    ("args", "keywords"),
    HELP_COMMANDS,
    ids=[" ".join(a) for a, _ in HELP_COMMANDS],
)
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for kw in keywords:
        assert kw in result.output, f"{kw!r} missing from {' '.join(args)} help"


@pytest.mark.parametrize(
    ("command", "example"),
    [
        ("validate", "jsonrec validate colors palette.json"),
        ("decode", "jsonrec decode colors palette.json"),
        ("schema", "jsonrec schema colors"),
    ],
)
def test_examples(cli_runner: CliRunner, command: str, example: str) -> None:
    result = cli_runner.invoke(cli, [command, "--examples"])
    assert result.exit_code == 0
    assert "Examples for" in result.output
    assert example in result.output


def test_examples_listed_in_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["validate", "--help"])
    assert "--examples" in result.output
