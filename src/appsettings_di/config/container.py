"""
Dependency injection container keyed by type.

Registrations map a type to a factory taking the container. There is no
process-wide instance; the host builds one and hands it to whoever needs it.
Registering the same type twice replaces the earlier registration.
"""

from collections.abc import Callable
from types import MappingProxyType
from typing import Any, TypeVar

from ..core.exceptions import UnregisteredTypeError
from ..observability.logging import get_logger

T = TypeVar("T")

Factory = Callable[["Container"], Any]

logger = get_logger(__name__)


class Container:
    """Type-indexed registry of factories and instances."""

    def __init__(self) -> None:
        self._factories: dict[type, Factory] = {}

    def register_factory(self, service_type: type[T], factory: Callable[["Container"], T]) -> None:
        """Register a factory; it runs on every ``resolve``."""
        if service_type in self._factories:
            logger.debug("Replacing registration", service=service_type.__name__)
        self._factories[service_type] = factory

    def register_singleton(self, service_type: type[T], instance: T) -> None:
        """Register an already-built instance."""
        self.register_factory(service_type, lambda _: instance)

    def is_registered(self, service_type: type) -> bool:
        return service_type in self._factories

    def resolve(self, service_type: type[T]) -> T:
        """Return an instance of ``service_type`` or raise UnregisteredTypeError."""
        factory = self._factories.get(service_type)
        if factory is None:
            raise UnregisteredTypeError(service_type)
        return factory(self)

    def get(self, service_type: type[T], default: Any = None) -> T | Any:
        """Like ``resolve`` but returns ``default`` for unknown types."""
        if service_type not in self._factories:
            return default
        return self.resolve(service_type)

    @property
    def registrations(self) -> MappingProxyType:
        """Read-only view of current registrations."""
        return MappingProxyType(self._factories)
