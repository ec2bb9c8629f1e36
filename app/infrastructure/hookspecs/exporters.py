"""Hook specifications for exporter registration."""

import pluggy
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from infrastructure.exporters.registry import ExporterRegistry

hookspec = pluggy.HookspecMarker("translation_exporter")


@hookspec
def register_exporters(registry: "ExporterRegistry") -> None:
    """Register exporter classes with the registry.

    Args:
        registry: Exporter registry to register exporter classes with.
    """
