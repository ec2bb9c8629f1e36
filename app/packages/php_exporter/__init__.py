"""PHP exporter package - translation trees as PHP array files."""

from infrastructure.services import hookimpl
from packages.php_exporter.configuration import (
    PhpExporterConfigurationManager,
    PhpExporterOptions,
)
from packages.php_exporter.exporter import PhpExporter
from packages.php_exporter.renderer import (
    PhpLiteralRenderer,
    render_php_document,
    render_php_literal,
)


@hookimpl
def register_exporters(registry):
    """Register the PHP exporter.

    Args:
        registry: Exporter registry instance.
    """
    registry.register(PhpExporter)


__all__ = [
    "PhpExporter",
    "PhpExporterConfigurationManager",
    "PhpExporterOptions",
    "PhpLiteralRenderer",
    "render_php_literal",
    "render_php_document",
]
