"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    ExporterSettings: Exporter plugin discovery settings (for testing)
"""

from infrastructure.configuration.exporters import ExporterSettings
from infrastructure.configuration.settings import Settings, settings

__all__ = ["settings", "Settings", "ExporterSettings"]
