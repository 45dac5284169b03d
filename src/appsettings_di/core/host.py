"""
Application host: loads configuration once and wires the container.

Usage:
    >>> host = (
    ...     create_default_builder()
    ...     .configure_services(lambda services, config: add_app_settings(services, MyAppSettings, config))
    ...     .build()
    ... )
    >>> settings = host.services.resolve(MyAppSettings)
"""

from collections.abc import Callable
from dataclasses import dataclass

from ..config.configuration import ConfigurationRoot
from ..config.container import Container
from ..config.settings import HostSettings, load_host_settings
from ..observability.logging import get_logger

logger = get_logger(__name__)

ConfigureServices = Callable[[Container, ConfigurationRoot], object]


def load_configuration(settings: HostSettings) -> ConfigurationRoot:
    """Load the configuration root from the single source ``settings`` selects."""
    if settings.config_source == "environment":
        return ConfigurationRoot.from_environ(settings.config_env_prefix)
    return ConfigurationRoot.from_json_file(settings.config_file, optional=settings.config_optional)


@dataclass(frozen=True)
class Host:
    """A built host. ``services`` is the container consumers resolve from."""

    settings: HostSettings
    configuration: ConfigurationRoot
    services: Container


class HostBuilder:
    """Collects service registrations and builds a ``Host``."""

    def __init__(
        self,
        settings: HostSettings | None = None,
        configuration: ConfigurationRoot | None = None,
    ):
        self.settings = settings or load_host_settings()
        self._configuration = configuration
        self._callbacks: list[ConfigureServices] = []

    def configure_services(self, callback: ConfigureServices) -> "HostBuilder":
        """Queue ``callback(container, configuration)`` to run during ``build``."""
        self._callbacks.append(callback)
        return self

    def build(self) -> Host:
        configuration = self._configuration or load_configuration(self.settings)

        services = Container()
        services.register_singleton(HostSettings, self.settings)
        services.register_singleton(ConfigurationRoot, configuration)

        for callback in self._callbacks:
            callback(services, configuration)

        logger.info(
            "Host built",
            source=configuration.source,
            environment=self.settings.environment,
            registrations=len(services.registrations),
        )
        return Host(settings=self.settings, configuration=configuration, services=services)


def create_default_builder(settings: HostSettings | None = None) -> HostBuilder:
    """Builder with host settings read from ``APPSETTINGS_*`` variables."""
    return HostBuilder(settings)
