"""Plugin managers and utilities."""

import pluggy

from infrastructure.services.plugins.exporters import (
    get_exporter_plugin_manager,
    discover_and_register_exporters,
)

# Singleton hookimpl marker for entire application
hookimpl = pluggy.HookimplMarker("translation_exporter")

__all__ = [
    "hookimpl",
    "get_exporter_plugin_manager",
    "discover_and_register_exporters",
]
