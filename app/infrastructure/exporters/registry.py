"""Exporter registry for routing export content by format.

Provides thread-safe registration and retrieval of exporter classes.
"""

import threading
from typing import Dict, List, Type

import structlog

from infrastructure.exporters.base import AbstractExporter
from infrastructure.exporters.configuration import Configuration
from infrastructure.exporters.exceptions import (
    ExporterAlreadyRegisteredError,
    ExporterNotFoundError,
)

logger = structlog.get_logger()


class ExporterRegistry:
    """Thread-safe registry of exporter classes keyed by format.

    Exporter classes must expose a ``FORMAT`` class attribute matching what
    their get_format() returns, so a class can be routed before it is
    instantiated.

    Attributes:
        _exporters: Dict mapping format to exporter class.
        _lock: Threading lock for thread-safe operations.
    """

    def __init__(self):
        self._exporters: Dict[str, Type[AbstractExporter]] = {}
        self._lock = threading.Lock()

    def register(self, exporter_cls: Type[AbstractExporter]) -> None:
        """Register an exporter class under its format.

        Args:
            exporter_cls: AbstractExporter subclass with a FORMAT attribute.

        Raises:
            ExporterAlreadyRegisteredError: If the format is already taken.
            ValueError: If the class declares no FORMAT.
        """
        format_name = getattr(exporter_cls, "FORMAT", None)
        if not format_name:
            raise ValueError(f"{exporter_cls.__name__} does not declare a FORMAT")

        with self._lock:
            if format_name in self._exporters:
                raise ExporterAlreadyRegisteredError(
                    f"Exporter for format '{format_name}' is already registered"
                )
            self._exporters[format_name] = exporter_cls
            logger.info(
                "exporter_registered",
                format=format_name,
                exporter=exporter_cls.__name__,
            )

    def unregister(self, format_name: str) -> None:
        """Unregister the exporter for a format.

        Raises:
            ExporterNotFoundError: If nothing is registered for the format.
        """
        with self._lock:
            if format_name not in self._exporters:
                raise ExporterNotFoundError(
                    f"No exporter registered for format '{format_name}'"
                )
            exporter_cls = self._exporters.pop(format_name)
            logger.info(
                "exporter_unregistered",
                format=format_name,
                exporter=exporter_cls.__name__,
            )

    def get(self, format_name: str) -> Type[AbstractExporter]:
        """Get the exporter class for a format.

        Raises:
            ExporterNotFoundError: If nothing is registered for the format.
        """
        with self._lock:
            exporter_cls = self._exporters.get(format_name)
        if exporter_cls is None:
            raise ExporterNotFoundError(
                f"No exporter registered for format '{format_name}'"
            )
        return exporter_cls

    def create(self, format_name: str, configuration: Configuration) -> AbstractExporter:
        """Instantiate the exporter registered for a format.

        Args:
            format_name: Format to route to (e.g., "php").
            configuration: Host configuration passed to the exporter.

        Returns:
            Configured exporter instance.
        """
        return self.get(format_name)(configuration)

    def has_format(self, format_name: str) -> bool:
        with self._lock:
            return format_name in self._exporters

    def list_formats(self) -> List[str]:
        with self._lock:
            return list(self._exporters)

    def count(self) -> int:
        with self._lock:
            return len(self._exporters)

    def clear(self) -> None:
        """Clear all registered exporters.

        Primarily used for testing.
        """
        with self._lock:
            self._exporters.clear()
            logger.debug("exporter_registry_cleared")
