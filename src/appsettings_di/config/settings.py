"""
Settings models.

``MyAppSettings`` is the application's bound settings type; its section in
the configuration carries the same name. ``HostSettings`` controls the host
itself and is read from ``APPSETTINGS_*`` environment variables.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MyAppSettings(BaseModel):
    """Application settings bound from the ``MyAppSettings`` section."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    StringSetting: str = ""
    IntSetting: int = 0
    BoolSetting: bool = False


class HostSettings(BaseSettings):
    """Host-level settings with environment variable support."""

    model_config = SettingsConfigDict(env_prefix="APPSETTINGS_", case_sensitive=False, extra="ignore")

    config_file: Path = Field(Path("appsettings.json"), description="JSON configuration file")
    config_source: Literal["file", "environment"] = Field("file")
    config_env_prefix: str = Field("APPCONFIG_", description="Prefix for the environment source")
    config_optional: bool = Field(True, description="Tolerate a missing configuration file")

    environment: str = Field(
        "development", description="Environment: development, staging, production"
    )
    log_level: str = Field("WARNING")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        allowed = {"development", "staging", "production"}
        if v not in allowed:
            raise ValueError(f"environment must be one of {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return v


def load_host_settings() -> HostSettings:
    """Read host settings from the current environment."""
    return HostSettings()
