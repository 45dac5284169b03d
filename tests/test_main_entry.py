"""
Tests for the console entry point.

Tests cover:
- Printed output for a full, partial and missing configuration
- Exit codes for success and startup failures
- Environment variable configuration source
"""

import json
from unittest.mock import patch

import pytest

from appsettings_di import main

EXPECTED_HEADER = "Add App Settings to Dependency Injection Demo\n\nMy App Settings:\n"


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run from an empty directory so ./appsettings.json is under test control."""
    monkeypatch.chdir(tmp_path)
    with patch("appsettings_di.main.setup_logging"):
        yield tmp_path


def write_appsettings(directory, section):
    (directory / "appsettings.json").write_text(
        json.dumps({"MyAppSettings": section}), encoding="utf-8"
    )


class TestMain:
    """Test main() output."""

    def test_prints_bound_values(self, workdir, capsys):
        write_appsettings(
            workdir, {"StringSetting": "hello", "IntSetting": "42", "BoolSetting": "true"}
        )

        main.main()

        assert capsys.readouterr().out == (
            EXPECTED_HEADER
            + "String Setting: hello\n"
            + "Int Setting: 42\n"
            + "Bool Setting: True\n"
        )

    def test_missing_file_prints_defaults(self, workdir, capsys):
        main.main()

        out = capsys.readouterr().out
        assert "String Setting: \n" in out
        assert "Int Setting: 0\n" in out
        assert "Bool Setting: False\n" in out

    def test_environment_source(self, workdir, monkeypatch, capsys):
        monkeypatch.setenv("APPSETTINGS_CONFIG_SOURCE", "environment")
        monkeypatch.setenv("APPCONFIG_MyAppSettings__StringSetting", "from env")
        monkeypatch.setenv("APPCONFIG_MyAppSettings__IntSetting", "7")

        main.main()

        out = capsys.readouterr().out
        assert "String Setting: from env\n" in out
        assert "Int Setting: 7\n" in out

    def test_logging_configured_from_host_settings(self, workdir, monkeypatch):
        monkeypatch.setenv("APPSETTINGS_LOG_LEVEL", "info")
        main.main()
        main.setup_logging.assert_called_once_with("INFO")


class TestCliMain:
    """Test cli_main() exit codes."""

    def test_success_exits_zero(self, workdir, capsys):
        write_appsettings(workdir, {"IntSetting": "1"})

        with pytest.raises(SystemExit) as exc_info:
            main.cli_main()

        assert exc_info.value.code == 0
        assert "Int Setting: 1" in capsys.readouterr().out

    def test_binding_error_exits_one(self, workdir, capsys):
        write_appsettings(workdir, {"IntSetting": "abc"})

        with pytest.raises(SystemExit) as exc_info:
            main.cli_main()

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "Startup failed" in captured.err
        assert "IntSetting" in captured.err
        assert "My App Settings" not in captured.out

    def test_invalid_json_exits_one(self, workdir, capsys):
        (workdir / "appsettings.json").write_text("{", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main.cli_main()

        assert exc_info.value.code == 1
        assert "Startup failed" in capsys.readouterr().err

    def test_invalid_host_settings_exits_one(self, workdir, monkeypatch, capsys):
        monkeypatch.setenv("APPSETTINGS_ENVIRONMENT", "qa")

        with pytest.raises(SystemExit) as exc_info:
            main.cli_main()

        assert exc_info.value.code == 1
        assert "Startup failed" in capsys.readouterr().err
