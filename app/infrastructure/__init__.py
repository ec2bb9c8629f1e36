"""Infrastructure modules for the translation exporter application.

Centralized infrastructure components:
- configuration: Settings management (settings, Settings)
- logging: Structured logging (configure_logging, get_module_logger)
- exporters: Exporter framework (AbstractExporter, ExporterRegistry)
- hookspecs: Plugin hook specifications
- services: Cached providers and plugin discovery (get_settings, hookimpl)
"""
