"""Configuration loading, settings binding and dependency injection."""

from .binder import add_app_settings, bind
from .configuration import ConfigurationRoot, ConfigurationSection
from .container import Container
from .settings import HostSettings, MyAppSettings, load_host_settings

__all__ = [
    "ConfigurationRoot",
    "ConfigurationSection",
    "Container",
    "HostSettings",
    "MyAppSettings",
    "add_app_settings",
    "bind",
    "load_host_settings",
]
