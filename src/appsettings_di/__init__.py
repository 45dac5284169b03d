"""
appsettings-di - bind typed settings from configuration into a DI container.

A configuration section named after a settings type is coerced into an
instance of that type and registered in a container, so consumers resolve
settings by type instead of reading raw keys.

Quick Start:
    >>> from appsettings_di import ConfigurationRoot, Container, MyAppSettings, add_app_settings
    >>>
    >>> config = ConfigurationRoot.from_mapping(
    ...     {"MyAppSettings": {"StringSetting": "hello", "IntSetting": "42", "BoolSetting": "true"}}
    ... )
    >>> services = add_app_settings(Container(), MyAppSettings, config)
    >>> services.resolve(MyAppSettings)
    MyAppSettings(StringSetting='hello', IntSetting=42, BoolSetting=True)

Console:
    $ appsettings-di            # reads ./appsettings.json
    $ python -m appsettings_di

Configuration:
    Host behaviour via environment variables:
    - APPSETTINGS_CONFIG_FILE=appsettings.json (JSON configuration file)
    - APPSETTINGS_CONFIG_SOURCE=file|environment (single configuration source)
    - APPSETTINGS_CONFIG_ENV_PREFIX=APPCONFIG_ (prefix for the environment source)
    - APPSETTINGS_LOG_LEVEL=WARNING (logging level)

    With the environment source, APPCONFIG_MyAppSettings__IntSetting=42 sets
    MyAppSettings:IntSetting.
"""

__version__ = "1.0.0"

from .config.binder import add_app_settings, bind
from .config.configuration import ConfigurationRoot, ConfigurationSection
from .config.container import Container
from .config.settings import HostSettings, MyAppSettings
from .core.exceptions import (
    AppSettingsError,
    BindingError,
    ConfigurationLoadError,
    MissingSectionError,
    UnregisteredTypeError,
)
from .core.host import Host, HostBuilder, create_default_builder

__all__ = [
    "AppSettingsError",
    "BindingError",
    "ConfigurationLoadError",
    "ConfigurationRoot",
    "ConfigurationSection",
    "Container",
    "Host",
    "HostBuilder",
    "HostSettings",
    "MissingSectionError",
    "MyAppSettings",
    "UnregisteredTypeError",
    "add_app_settings",
    "bind",
    "create_default_builder",
]
