"""Host wiring and the error hierarchy."""

from .exceptions import (
    AppSettingsError,
    BindingError,
    ConfigurationLoadError,
    MissingSectionError,
    UnregisteredTypeError,
)
from .host import Host, HostBuilder, create_default_builder, load_configuration

__all__ = [
    "AppSettingsError",
    "BindingError",
    "ConfigurationLoadError",
    "MissingSectionError",
    "UnregisteredTypeError",
    "Host",
    "HostBuilder",
    "create_default_builder",
    "load_configuration",
]
