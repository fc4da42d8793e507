"""Tests for the format_result dispatcher and OutputSettings."""

import json

from jsonrec.output.formatters import OutputSettings, format_result
from jsonrec.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False
        assert s.color is True


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok("validate", valid=True), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["valid"] is True

    def test_json_mode_error(self) -> None:
        output = format_result(_err("validate", "Bad"), settings=OutputSettings(json_output=True))
        assert json.loads(output)["error"]["message"] == "Bad"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok("decode"), settings=settings))["op"] == "decode"


class TestFormatResultQuiet:
    def test_quiet_success(self) -> None:
        output = format_result(_ok("validate", valid=True), settings=OutputSettings(quiet=True))
        assert output == "OK: validate"

    def test_quiet_error(self) -> None:
        output = format_result(_err("validate", "Bad input"), settings=OutputSettings(quiet=True))
        assert output == "ERROR: validate — Bad input"


class TestFormatResultDefault:
    def test_default_success_contains_ok(self) -> None:
        output = format_result(_ok("something", key="val"))
        assert "OK" in output
        assert "key: val" in output

    def test_default_error_contains_error(self) -> None:
        output = format_result(_err("validate", "Bad"))
        assert "ERROR" in output
        assert "Bad" in output
