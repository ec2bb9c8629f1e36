"""Exporter plugin discovery settings."""

from typing import List

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ExporterSettings(InfrastructureSettings):
    """Exporter plugin discovery configuration.

    Environment Variables:
        EXPORTER_PLUGIN_PATHS: JSON list of base packages scanned for
            exporter plugins (default: ["packages"])

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        base_paths = settings.exporters.plugin_paths
        ```
    """

    plugin_paths: List[str] = Field(
        default_factory=lambda: ["packages"],
        alias="EXPORTER_PLUGIN_PATHS",
        description="Base packages scanned for exporter plugins",
    )
