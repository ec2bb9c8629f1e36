"""
Application services.

Provides cached provider functions and the plugin hook marker.
"""

from infrastructure.services.plugins import hookimpl
from infrastructure.services.providers import (
    get_settings,
    get_exporter_registry,
)

__all__ = [
    "hookimpl",
    "get_settings",
    "get_exporter_registry",
]
