"""Exporter configuration.

Wraps the host-supplied settings tree and defines the interface every
exporter-specific configuration accessor implements.
"""

import copy
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


class Configuration:
    """Read-only view over a nested configuration mapping.

    Expected shape::

        {"exporter": {"php": {"destination_folder": "...", "domain": "..."}}}

    Attributes:
        default_format: Format used by get_exporter_options() when none is
            given.
    """

    def __init__(
        self,
        data: Optional[Mapping[str, Any]] = None,
        default_format: Optional[str] = None,
    ):
        self._data = MappingProxyType(copy.deepcopy(dict(data or {})))
        self.default_format = default_format

    @classmethod
    def for_exporter(cls, format_name: str, options: Mapping[str, Any]) -> "Configuration":
        """Build a configuration holding the options of a single exporter.

        Args:
            format_name: Exporter format (e.g., "php").
            options: Flat option mapping for that exporter.

        Returns:
            Configuration with options nested under exporter.<format_name>.
        """
        return cls({"exporter": {format_name: dict(options)}}, format_name)

    def get(self, path: str, default: Any = None) -> Any:
        """Look up a dot-separated path (e.g., "exporter.php.domain").

        Returns:
            A copy of the stored value, or default when any segment is
            absent.
        """
        node: Any = self._data
        for segment in path.split("."):
            if not isinstance(node, Mapping) or segment not in node:
                return default
            node = node[segment]
        return copy.deepcopy(node)

    def has(self, path: str) -> bool:
        marker = object()
        return self.get(path, marker) is not marker

    def get_exporter_options(self, format_name: Optional[str] = None) -> Dict[str, Any]:
        """Get a copy of the option mapping for one exporter.

        Args:
            format_name: Exporter format; falls back to default_format.

        Returns:
            Dict of options, empty when the exporter has no section.
        """
        options = self.get(f"exporter.{format_name or self.default_format}", {})
        if not isinstance(options, Mapping):
            return {}
        return dict(options)

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(dict(self._data))


class ExporterConfiguration(ABC):
    """Accessor for the options every file exporter needs."""

    @abstractmethod
    def get_destination_folder(self) -> str:
        """Folder the exported files are written to.

        Raises:
            MissingConfigurationError: If the folder was never configured.
        """

    @abstractmethod
    def get_domain(self) -> str:
        """Translation domain (e.g., "messages").

        Raises:
            MissingConfigurationError: If the domain was never configured.
        """

    @abstractmethod
    def get_prefix(self) -> str:
        """File name prefix, empty string when unset."""
