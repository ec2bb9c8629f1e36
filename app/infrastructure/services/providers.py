"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.exporters.registry import ExporterRegistry
from infrastructure.services.plugins import discover_and_register_exporters


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_exporter_registry() -> ExporterRegistry:
    """
    Get application-scoped exporter registry, populated from plugins.

    Exporter packages found under the configured plugin paths register
    themselves through the ``register_exporters`` hook.

    Returns:
        ExporterRegistry: Cached registry with all discovered exporters.

    Usage:
        registry = get_exporter_registry()
        exporter = registry.create("php", configuration)
        content = exporter.export(export_content)
    """
    registry = ExporterRegistry()
    discover_and_register_exporters(
        registry, base_paths=get_settings().exporters.plugin_paths
    )
    return registry
