"""Base class for translation exporters."""

from abc import ABC, abstractmethod
from typing import Optional

import structlog

from infrastructure.exporters.configuration import ExporterConfiguration
from infrastructure.exporters.models import ExportContent
from infrastructure.logging.context import bind_export_context

logger = structlog.get_logger()


class AbstractExporter(ABC):
    """Converts an ExportContent into the text of one translation file.

    Subclasses provide the format identifier used for routing and the
    content builder. Persisting the returned text is left to the caller.

    Attributes:
        configuration: Exporter-specific configuration accessor.
    """

    configuration: Optional[ExporterConfiguration] = None

    @abstractmethod
    def get_format(self) -> str:
        """Format identifier used by the registry (e.g., "php")."""

    @abstractmethod
    def build_content(self, export_content: ExportContent) -> str:
        """Render the export unit as file content.

        Args:
            export_content: Unit holding the translations to render.

        Returns:
            Complete file content.
        """

    def export(self, export_content: ExportContent) -> str:
        """Build file content for one export unit with export context bound.

        Args:
            export_content: Unit holding the translations to render.

        Returns:
            Complete file content, ready to be written verbatim.
        """
        with bind_export_context(
            export_format=self.get_format(),
            locale=export_content.get_locale(),
            destination_file=export_content.get_destination_file(),
        ):
            log = logger.bind(operation="export")
            log.debug("building_export_content")
            try:
                content = self.build_content(export_content)
            except Exception as e:
                log.error("export_content_failed", error=str(e))
                raise
            log.info("export_content_built", content_length=len(content))
            return content
