"""
Bind configuration sections to typed settings objects.

The section is found by the settings type's own ``__name__``: binding
``MyAppSettings`` reads ``MyAppSettings:*``. Matching is case-sensitive and
there is no aliasing.

String values for ``bool`` and ``int`` fields are parsed strictly first:
``bool`` takes ``true``/``false`` in any case, ``int`` takes a signed decimal
that fits in 32 bits, both with surrounding whitespace allowed. Anything
else for those fields is a BindingError. Remaining fields are coerced by
pydantic.
"""

import dataclasses
import re
import time
from collections.abc import Callable
from functools import lru_cache
from typing import Any, TypeVar, get_type_hints

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..core.exceptions import BindingError, MissingSectionError
from ..observability.logging import get_logger
from .configuration import ConfigurationSection
from .container import Container

T = TypeVar("T")

logger = get_logger(__name__)

_INT_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def section_name(settings_type: type) -> str:
    return settings_type.__name__


@lru_cache(maxsize=64)
def _adapter(settings_type: type) -> TypeAdapter:
    return TypeAdapter(settings_type)


def parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def parse_int(raw: str) -> int:
    if not _INT_PATTERN.match(raw):
        raise ValueError(f"not an integer: {raw!r}")
    value = int(raw)
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueError(f"integer out of range: {raw!r}")
    return value


_PARSERS: dict[Any, Callable[[str], Any]] = {bool: parse_bool, int: parse_int}


@lru_cache(maxsize=64)
def _field_types(settings_type: type) -> dict[str, Any]:
    if isinstance(settings_type, type) and issubclass(settings_type, BaseModel):
        return {name: field.annotation for name, field in settings_type.model_fields.items()}
    if dataclasses.is_dataclass(settings_type):
        hints = get_type_hints(settings_type)
        return {field.name: hints.get(field.name) for field in dataclasses.fields(settings_type)}
    return {}


def _parse_scalars(settings_type: type, data: dict[str, Any]) -> list[str]:
    """Parse string values of bool/int fields in place; return the fields that failed."""
    invalid = []
    for name, annotation in _field_types(settings_type).items():
        parser = _PARSERS.get(annotation)
        raw = data.get(name)
        if parser is None or not isinstance(raw, str):
            continue
        try:
            data[name] = parser(raw)
        except ValueError:
            invalid.append(name)
    return invalid


def _binding_error(name: str, fields: list[str], errors: list[Any]) -> BindingError:
    return BindingError(
        f"Failed to bind section '{name}': invalid value for {', '.join(fields)}",
        section=name,
        fields=fields,
        error_code="binding_failed",
        context={"errors": errors},
    )


def bind(config: ConfigurationSection, settings_type: type[T], *, required: bool = False) -> T:
    """
    Build a ``settings_type`` instance from its configuration section.

    Args:
        config: Configuration root (or any parent section)
        settings_type: Pydantic model or dataclass whose fields default cleanly
        required: Raise MissingSectionError instead of falling back to defaults

    Returns:
        A new instance; keys absent from the section keep their defaults

    Raises:
        BindingError: A present value cannot be coerced to its field type
        MissingSectionError: ``required`` is set and the section is absent
    """
    name = section_name(settings_type)
    section = config.get_section(name)

    if not section.exists():
        if required:
            raise MissingSectionError(name)
        logger.debug("Section not found, using defaults", section=name)

    start = time.perf_counter()
    data = section.to_dict()
    invalid = _parse_scalars(settings_type, data)
    if invalid:
        errors = [{"loc": (field,), "input": data[field]} for field in invalid]
        raise _binding_error(name, invalid, errors)

    try:
        instance = _adapter(settings_type).validate_python(data)
    except ValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise _binding_error(name, fields, e.errors(include_url=False)) from e

    duration_ms = (time.perf_counter() - start) * 1000
    logger.timed("Bound settings section", duration_ms, section=name)
    return instance


def add_app_settings(
    container: Container, settings_type: type[T], config: ConfigurationSection, **kwargs: Any
) -> Container:
    """Bind ``settings_type`` from ``config`` and register it in ``container``.

    Binding happens immediately, so a bad value fails here and leaves the
    container untouched. Every later ``resolve(settings_type)`` returns the
    bound instance. Extra keyword arguments go to ``bind``.
    """
    instance = bind(config, settings_type, **kwargs)
    container.register_factory(settings_type, lambda _: instance)
    return container
