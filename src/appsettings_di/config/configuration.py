"""
Key/value configuration tree addressable by ``Section:Key`` paths.

Values are presented as strings regardless of the source, the way a flat
configuration provider stores them. Coercion to real types happens in the
binder, not here.
"""

import json
import os
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from ..core.exceptions import ConfigurationLoadError
from ..observability.logging import get_logger

logger = get_logger(__name__)

KEY_DELIMITER = ":"
ENV_DELIMITER = "__"


def _normalize(value: Any) -> Any:
    """Convert a raw source value to nested dicts of string leaves."""
    if isinstance(value, Mapping):
        return {str(k): _normalize(v) for k, v in value.items()}
    if isinstance(value, list):
        # Arrays are addressed by index, same as any other section
        return {str(i): _normalize(v) for i, v in enumerate(value)}
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ConfigurationSection:
    """A named subtree of the configuration.

    A section that does not exist is still returned by ``get_section``;
    ``exists()`` tells the two apart.
    """

    def __init__(self, path: str, data: Any = None):
        self.path = path
        self._data = data

    @property
    def key(self) -> str:
        return self.path.rsplit(KEY_DELIMITER, 1)[-1]

    @property
    def value(self) -> str | None:
        """Scalar value at this path, or None for sections and missing keys."""
        return self._data if isinstance(self._data, str) else None

    def exists(self) -> bool:
        if isinstance(self._data, dict):
            return bool(self._data)
        return self._data is not None

    def _lookup(self, key: str) -> Any:
        node = self._data
        for segment in key.split(KEY_DELIMITER):
            if not isinstance(node, dict) or segment not in node:
                return None
            node = node[segment]
        return node

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the scalar at ``key`` (``:``-separated), or ``default``."""
        node = self._lookup(key)
        return node if isinstance(node, str) else default

    def get_section(self, key: str) -> "ConfigurationSection":
        path = f"{self.path}{KEY_DELIMITER}{key}" if self.path else key
        return ConfigurationSection(path, self._lookup(key))

    def get_children(self) -> list["ConfigurationSection"]:
        if not isinstance(self._data, dict):
            return []
        return [self.get_section(key) for key in self._data]

    def to_dict(self) -> dict[str, Any]:
        """Plain dict copy of this subtree; empty for scalars and missing sections."""
        if not isinstance(self._data, dict):
            return {}
        return json.loads(json.dumps(self._data))

    def __getitem__(self, key: str) -> str | None:
        return self.get(key)

    def __contains__(self, key: str) -> bool:
        return self._lookup(key) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._data) if isinstance(self._data, dict) else iter(())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r})"


class ConfigurationRoot(ConfigurationSection):
    """Top-level configuration tree loaded from a single source."""

    def __init__(self, data: Mapping[str, Any] | None = None, source: str = "memory"):
        super().__init__("", _normalize(data or {}))
        self.source = source

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ConfigurationRoot":
        return cls(data)

    @classmethod
    def from_json_file(cls, path: str | Path, optional: bool = True) -> "ConfigurationRoot":
        """Load a JSON object file. A missing optional file yields an empty root."""
        path = Path(path)
        if not path.exists():
            if optional:
                logger.info("Optional configuration file not found", path=str(path))
                return cls(source=str(path))
            raise ConfigurationLoadError(
                f"Configuration file not found: {path}",
                error_code="file_not_found",
                context={"path": str(path)},
            )

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ConfigurationLoadError(
                f"Failed to read configuration file {path}: {e}",
                error_code="invalid_file",
                context={"path": str(path)},
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationLoadError(
                f"Configuration file {path} must contain a JSON object",
                error_code="invalid_file",
                context={"path": str(path)},
            )

        logger.debug("Loaded configuration file", path=str(path), sections=len(data))
        return cls(data, source=str(path))

    @classmethod
    def from_environ(
        cls, prefix: str = "", environ: Mapping[str, str] | None = None
    ) -> "ConfigurationRoot":
        """Build a tree from environment variables.

        ``{prefix}Section__Key=value`` becomes ``Section:Key``. Variables not
        starting with ``prefix`` are skipped. A key cannot hold a value and
        children at once: when both ``A`` and ``A__B`` are set, the section
        ``A`` wins whatever the variable order.
        """
        environ = os.environ if environ is None else environ
        tree: dict[str, Any] = {}
        for name, value in environ.items():
            if not name.startswith(prefix):
                continue
            segments = name[len(prefix) :].split(ENV_DELIMITER)
            if not all(segments):
                continue

            node = tree
            for segment in segments[:-1]:
                if not isinstance(node.get(segment), dict):
                    node[segment] = {}
                node = node[segment]
            if not isinstance(node.get(segments[-1]), dict):
                node[segments[-1]] = value

        return cls(tree, source=f"environ:{prefix}")
