"""Exporter framework - turns translation trees into translation files.

Main components:
- models: ExportContent and the TranslationTree type
- configuration: Configuration and the ExporterConfiguration interface
- base: AbstractExporter
- registry: ExporterRegistry for routing content by format
- exceptions: ExporterError hierarchy
"""

from infrastructure.exporters.base import AbstractExporter
from infrastructure.exporters.configuration import (
    Configuration,
    ExporterConfiguration,
)
from infrastructure.exporters.exceptions import (
    ExporterAlreadyRegisteredError,
    ExporterError,
    ExporterNotFoundError,
    MissingConfigurationError,
    UnsupportedValueError,
)
from infrastructure.exporters.models import ExportContent, TranslationTree
from infrastructure.exporters.registry import ExporterRegistry

__all__ = [
    "AbstractExporter",
    "Configuration",
    "ExporterConfiguration",
    "ExportContent",
    "TranslationTree",
    "ExporterRegistry",
    "ExporterError",
    "MissingConfigurationError",
    "UnsupportedValueError",
    "ExporterNotFoundError",
    "ExporterAlreadyRegisteredError",
]
