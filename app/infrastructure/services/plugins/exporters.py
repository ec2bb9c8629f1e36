"""Exporter plugin manager."""

from functools import lru_cache
from typing import TYPE_CHECKING, List, Optional

import pluggy
import structlog

from infrastructure.hookspecs import exporters as exporter_hookspecs
from infrastructure.services.plugins.base import auto_discover_plugins

if TYPE_CHECKING:
    from infrastructure.exporters.registry import ExporterRegistry

logger = structlog.get_logger()


@lru_cache(maxsize=1)
def get_exporter_plugin_manager() -> pluggy.PluginManager:
    """Get the exporter plugin manager singleton.

    Returns:
        PluginManager configured for exporter registration.
    """
    pm = pluggy.PluginManager("translation_exporter")
    pm.add_hookspecs(exporter_hookspecs)

    logger.info("exporter_plugin_manager_created")
    return pm


def discover_and_register_exporters(
    registry: "ExporterRegistry",
    base_paths: Optional[List[str]] = None,
    pm: Optional[pluggy.PluginManager] = None,
) -> None:
    """Discover exporter plugins and let them register with the registry.

    Args:
        registry: Registry the discovered exporters are registered with.
        base_paths: Base packages to scan (default: ["packages"]).
        pm: Plugin manager to use (default: the shared singleton).
    """
    pm = pm or get_exporter_plugin_manager()

    auto_discover_plugins(pm, base_paths=base_paths or ["packages"])
    logger.info("exporter_plugins_discovered", plugin_count=len(pm.get_plugins()))

    pm.hook.register_exporters(registry=registry)
    logger.info("exporters_registered", formats=registry.list_formats())
