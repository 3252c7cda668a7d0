"""Tests for src/numdisplay/core/cli.py"""
import json

import pytest

from numdisplay.core import cli
from numdisplay.core import config as cfg
from numdisplay.utils.constants import MINUS, THIN_SPACE as S


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("NUMDISPLAY_PRESET", "NUMDISPLAY_MIN_DECIMALS", "NUMDISPLAY_MAX_DECIMALS",
                 "NUMDISPLAY_LOG_LEVEL", "NUMDISPLAY_CLI_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(cfg, "_WARNED_INVALID", False)


class TestFormatCommand:
    def test_default_preset(self, capsys):
        assert cli.main(["format", "1234567.5"]) == 0
        assert capsys.readouterr().out == f"1{S}234{S}567.5\n"

    def test_preset_option(self, capsys):
        assert cli.main(["format", "3.14159265", "--preset", "f32"]) == 0
        assert capsys.readouterr().out == f"3.141{S}593\n"

    def test_preset_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("NUMDISPLAY_PRESET", "f32")
        assert cli.main(["format", "3.14159265"]) == 0
        assert capsys.readouterr().out == f"3.141{S}593\n"

    def test_minus_glyph_input(self, capsys):
        assert cli.main(["format", f"{MINUS}2.5"]) == 0
        assert capsys.readouterr().out == f"{MINUS}2.5\n"

    def test_hyphen_input(self, capsys):
        assert cli.main(["format", "-2.5"]) == 0
        assert capsys.readouterr().out == f"{MINUS}2.5\n"

    def test_sign_decimals_and_zeros(self, capsys):
        assert cli.main(["format", "2", "--always-sign", "--decimals", "2", "--keep-zeros"]) == 0
        assert capsys.readouterr().out == "+2.00\n"

    def test_precision_override(self, capsys):
        assert cli.main(["format", "0.1", "--precision", "2", "--keep-zeros"]) == 0
        assert capsys.readouterr().out == "0.10\n"

    def test_not_a_number(self, capsys):
        assert cli.main(["format", "abc"]) == 1
        assert "Not a number" in capsys.readouterr().err


class TestRoundtripCommand:
    def test_explicit_range(self, capsys):
        assert cli.main(["roundtrip", "0.3333333333", "--min", "1", "--max", "10"]) == 0
        assert capsys.readouterr().out == f"0.333{S}333\n"

    def test_range_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("NUMDISPLAY_MIN_DECIMALS", "3")
        assert cli.main(["roundtrip", "2"]) == 0
        assert capsys.readouterr().out == "2.000\n"

    def test_invalid_range(self, capsys):
        assert cli.main(["roundtrip", "1", "--min", "5", "--max", "2"]) == 1
        assert "Invalid decimal range" in capsys.readouterr().err

    def test_range_too_wide(self, capsys):
        assert cli.main(["--json", "roundtrip", "1", "--max", "100"]) == 1
        payload = json.loads(capsys.readouterr().out)
        assert payload["success"] is False
        assert payload["error_code"] == "INVALID_RANGE"


class TestParseAndLatLon:
    def test_parse_json(self, capsys):
        assert cli.main(["--json", "parse", f"{MINUS}5"]) == 0
        assert json.loads(capsys.readouterr().out) == {"success": True, "data": -5.0}

    def test_parse_grouped(self, capsys):
        assert cli.main(["parse", f"1{S}234.5"]) == 0
        assert capsys.readouterr().out == "1234.5\n"

    def test_parse_failure_json(self, capsys):
        assert cli.main(["--json", "parse", "abc"]) == 1
        payload = json.loads(capsys.readouterr().out)
        assert payload == {
            "success": False,
            "error": "Not a number: 'abc'",
            "error_code": "PARSE_FAILED",
            "input": "abc",
        }

    def test_latlon(self, capsys):
        assert cli.main(["latlon", "59.329444"]) == 0
        assert capsys.readouterr().out == "+59.329444°\n"

    def test_debug_trace(self, monkeypatch, capsys):
        monkeypatch.setenv("NUMDISPLAY_CLI_DEBUG", "1")
        assert cli.main(["parse", "7"]) == 0
        assert "[cli-debug]" in capsys.readouterr().err


def test_missing_command_exits():
    with pytest.raises(SystemExit):
        cli.main([])
