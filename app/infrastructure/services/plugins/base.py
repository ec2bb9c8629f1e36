"""Base plugin discovery utilities."""

import importlib
import pkgutil
from typing import List

import pluggy
import structlog

logger = structlog.get_logger()


def auto_discover_plugins(
    pm: pluggy.PluginManager,
    base_paths: List[str],
) -> None:
    """Auto-discover and register plugins from base packages.

    Imports every sub-package of each base package (e.g., "packages"). If a
    sub-package has functions decorated with @hookimpl, they become
    available to the plugin manager.

    Args:
        pm: Plugin manager to register plugins with.
        base_paths: Importable base packages to scan (e.g., ["packages"]).

    Example:
        >>> pm = pluggy.PluginManager("translation_exporter")
        >>> pm.add_hookspecs(hookspecs.exporters)
        >>> auto_discover_plugins(pm, base_paths=["packages"])
    """
    for base_path in base_paths:
        try:
            base_package = importlib.import_module(base_path)
        except ImportError:
            logger.warning("base_path_not_found", path=base_path)
            continue

        logger.debug("scanning_base_path", path=base_path)

        for pkg_info in pkgutil.iter_modules(base_package.__path__):
            if not pkg_info.ispkg:
                continue
            module_name = f"{base_path}.{pkg_info.name}"
            try:
                module = importlib.import_module(module_name)
                if not pm.is_registered(module):
                    pm.register(module)
                logger.debug("plugin_registered", module=module_name)
            except Exception as e:
                logger.error(
                    "plugin_registration_failed",
                    module=module_name,
                    error=str(e),
                    exc_info=True,
                )
