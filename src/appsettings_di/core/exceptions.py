"""
Exception hierarchy for configuration loading, binding and resolution.

Every error is fatal at startup; callers are not expected to recover.
"""

from typing import Any

__all__ = [
    "AppSettingsError",
    "ConfigurationLoadError",
    "BindingError",
    "MissingSectionError",
    "UnregisteredTypeError",
]


class AppSettingsError(Exception):
    """Base exception for all application-specific errors."""

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context: dict[str, Any] = context or {}

    def __str__(self) -> str:
        return self.message


class ConfigurationLoadError(AppSettingsError):
    """Raised when a configuration source cannot be read or parsed."""


class BindingError(AppSettingsError):
    """Raised when a configuration value cannot be coerced to its field type."""

    def __init__(self, message: str, *, section: str, fields: list[str] | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.section = section
        self.fields = fields or []


class MissingSectionError(AppSettingsError):
    """Raised when a required configuration section is absent."""

    def __init__(self, section: str):
        super().__init__(f"Configuration section '{section}' not found", error_code="missing_section")
        self.section = section


class UnregisteredTypeError(AppSettingsError):
    """Raised when resolving a type that has no registration."""

    def __init__(self, service_type: type):
        super().__init__(
            f"Service {service_type.__name__} not registered", error_code="unregistered_type"
        )
        self.service_type = service_type
