"""Fixtures for infrastructure.exporters tests."""

import pytest

from infrastructure.exporters import (
    AbstractExporter,
    ExportContent,
    ExporterRegistry,
)


class EchoExporter(AbstractExporter):
    """Minimal exporter rendering translations with repr()."""

    FORMAT = "echo"

    def __init__(self, configuration=None):
        self.host_configuration = configuration

    def get_format(self) -> str:
        return self.FORMAT

    def build_content(self, export_content: ExportContent) -> str:
        return repr(dict(export_content.get_translations()))


class FailingExporter(EchoExporter):
    FORMAT = "failing"

    def build_content(self, export_content: ExportContent) -> str:
        raise RuntimeError("boom")


@pytest.fixture
def echo_exporter_cls():
    return EchoExporter


@pytest.fixture
def failing_exporter_cls():
    return FailingExporter


@pytest.fixture
def registry():
    return ExporterRegistry()
