"""Custom exceptions for the exporter system.

Provides specialized exceptions for exporter configuration errors,
unsupported translation values, and registration problems.
"""

from typing import Any, Optional


class ExporterError(Exception):
    """Base exception for all exporter-related errors.

    Example:
        try:
            exporter.export(content)
        except ExporterError as e:
            logger.error("export_failed", error=str(e))
    """

    pass


class MissingConfigurationError(ExporterError):
    """Raised when a required exporter option was never configured.

    Attributes:
        format_name: Exporter format the option belongs to (e.g., "php").
        option: Name of the missing option (e.g., "domain").

    Example:
        >>> manager.get_domain()
        Traceback (most recent call last):
        ...
        MissingConfigurationError: Missing configuration 'exporter.php.domain'
    """

    def __init__(self, format_name: str, option: str):
        super().__init__(f"Missing configuration 'exporter.{format_name}.{option}'")
        self.format_name = format_name
        self.option = option


class UnsupportedValueError(ExporterError, TypeError):
    """Raised when a translation tree holds a value the renderer cannot express.

    Attributes:
        path: Keys leading to the offending value (empty for the root).
        value_type: Name of the offending value's type.
    """

    def __init__(self, value: Any, path: Optional[tuple] = None):
        self.path = tuple(path or ())
        self.value_type = type(value).__name__
        location = ".".join(str(key) for key in self.path) or "<root>"
        super().__init__(
            f"Unsupported translation value of type {self.value_type} at {location}"
        )


class ExporterNotFoundError(ExporterError):
    """Raised when no exporter is registered for a requested format.

    Example:
        >>> registry.get("xliff")
        Traceback (most recent call last):
        ...
        ExporterNotFoundError: No exporter registered for format 'xliff'
    """

    pass


class ExporterAlreadyRegisteredError(ExporterError):
    """Raised when registering a second exporter for the same format."""

    pass
