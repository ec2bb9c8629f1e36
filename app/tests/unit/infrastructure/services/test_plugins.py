"""Tests for infrastructure.services.plugins and providers."""

import pluggy
import pytest

from infrastructure.exporters import ExporterRegistry
from infrastructure.hookspecs import exporters as exporter_hookspecs
from infrastructure.services import get_exporter_registry, get_settings
from infrastructure.services.plugins import (
    discover_and_register_exporters,
    get_exporter_plugin_manager,
)
from infrastructure.services.plugins.base import auto_discover_plugins
from packages.php_exporter import PhpExporter


@pytest.fixture
def plugin_manager():
    pm = pluggy.PluginManager("translation_exporter")
    pm.add_hookspecs(exporter_hookspecs)
    return pm


@pytest.mark.unit
class TestAutoDiscoverPlugins:
    def test_registers_exporter_packages(self, plugin_manager):
        auto_discover_plugins(plugin_manager, base_paths=["packages"])

        names = [plugin.__name__ for plugin in plugin_manager.get_plugins()]
        assert "packages.php_exporter" in names

    def test_missing_base_path_is_skipped(self, plugin_manager):
        auto_discover_plugins(plugin_manager, base_paths=["no_such_base_package"])

        assert plugin_manager.get_plugins() == set()

    def test_rescan_does_not_register_twice(self, plugin_manager):
        auto_discover_plugins(plugin_manager, base_paths=["packages"])
        auto_discover_plugins(plugin_manager, base_paths=["packages"])

        assert len(plugin_manager.get_plugins()) == 1


@pytest.mark.unit
class TestDiscoverAndRegisterExporters:
    def test_php_exporter_registered(self, plugin_manager):
        registry = ExporterRegistry()

        discover_and_register_exporters(
            registry, base_paths=["packages"], pm=plugin_manager
        )

        assert registry.get("php") is PhpExporter

    def test_plugin_manager_is_singleton(self):
        assert get_exporter_plugin_manager() is get_exporter_plugin_manager()


@pytest.mark.unit
class TestProviders:
    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_get_exporter_registry_routes_php(self):
        get_exporter_registry.cache_clear()
        try:
            registry = get_exporter_registry()

            assert registry.has_format("php")
            assert get_exporter_registry() is registry
        finally:
            get_exporter_registry.cache_clear()
