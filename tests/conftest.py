"""
Shared pytest fixtures.

Host settings and the environment configuration source both read
``os.environ``; every test starts with those variables cleared.
"""

import json
import os

import pytest

from appsettings_di.config.configuration import ConfigurationRoot


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove APPSETTINGS_* and APPCONFIG_* variables for test isolation."""
    for name in list(os.environ):
        if name.startswith(("APPSETTINGS_", "APPCONFIG_")):
            monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def sample_data():
    return {
        "MyAppSettings": {"StringSetting": "hello", "IntSetting": "42", "BoolSetting": "true"},
        "Logging": {"LogLevel": {"Default": "Information"}},
    }


@pytest.fixture
def sample_config(sample_data):
    return ConfigurationRoot.from_mapping(sample_data)


@pytest.fixture
def write_settings_file(tmp_path):
    """Write a JSON configuration file and return its path."""

    def _write(data, name="appsettings.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
