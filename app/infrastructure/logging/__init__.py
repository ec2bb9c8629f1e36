"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
for the exporter application using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_export_context(): Context manager for export-scoped logging
    - get_export_id(): Get current export ID from context
    - clear_export_context(): Clear all bound context

Formatters:
    - add_app_info(): Processor to add app name/version
    - add_environment_info(): Processor to add environment name
    - truncate_large_values(): Processor to limit string lengths
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_export_context,
    get_export_id,
    clear_export_context,
)

from infrastructure.logging.formatters import (
    add_app_info,
    add_environment_info,
    truncate_large_values,
)

__all__ = [
    # Setup
    "configure_logging",
    "get_module_logger",
    # Context
    "bind_export_context",
    "get_export_id",
    "clear_export_context",
    # Formatters
    "add_app_info",
    "add_environment_info",
    "truncate_large_values",
]
