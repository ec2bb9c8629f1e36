"""PHP array file exporter."""

from typing import Any, Mapping

from infrastructure.exporters.base import AbstractExporter
from infrastructure.exporters.configuration import Configuration
from infrastructure.exporters.models import ExportContent
from infrastructure.logging import get_module_logger
from packages.php_exporter.configuration import (
    PHP_FORMAT,
    PhpExporterConfigurationManager,
)
from packages.php_exporter.renderer import render_php_document

logger = get_module_logger()


class PhpExporter(AbstractExporter):
    """Exports translations as a PHP file returning an array.

    Example:
        exporter = PhpExporter.from_options(
            {"destination_folder": "/var/www/translations", "domain": "messages"}
        )
        exporter.build_content(ExportContent(translations={"hello": "Hello"}))
        # "<?php\\nreturn array (\\n  'hello' => 'Hello',\\n);"
    """

    FORMAT = PHP_FORMAT

    def __init__(self, configuration: Configuration):
        """Initialize the exporter from the host configuration.

        Args:
            configuration: Configuration holding an ``exporter.php`` section.
        """
        self.configuration = PhpExporterConfigurationManager(configuration)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "PhpExporter":
        """Create an exporter from the flat ``exporter.php`` options.

        Args:
            options: Mapping with destination_folder, domain and prefix.

        Returns:
            Configured PhpExporter.
        """
        return cls(Configuration.for_exporter(PHP_FORMAT, options))

    def get_format(self) -> str:
        return PHP_FORMAT

    def build_content(self, export_content: ExportContent) -> str:
        translations = export_content.get_translations()
        content = render_php_document(translations)
        logger.debug(
            "php_content_rendered",
            content_length=len(content),
        )
        return content
