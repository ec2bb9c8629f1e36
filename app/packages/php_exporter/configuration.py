"""Configuration accessor for the PHP exporter."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from infrastructure.exporters.configuration import (
    Configuration,
    ExporterConfiguration,
)
from infrastructure.exporters.exceptions import MissingConfigurationError

PHP_FORMAT = "php"


class PhpExporterOptions(BaseModel):
    """Options read from ``exporter.php`` in the host configuration.

    Only types are checked; paths and domains are taken as given.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    destination_folder: Optional[str] = Field(
        None, description="Folder the generated PHP files are written to"
    )
    domain: Optional[str] = Field(
        None, description="Translation domain, e.g. 'messages'"
    )
    prefix: Optional[str] = Field(None, description="Prefix for generated file names")


class PhpExporterConfigurationManager(ExporterConfiguration):
    """Typed access to the PHP exporter options.

    Missing required options are reported on access, not on construction.
    """

    def __init__(self, configuration: Configuration):
        self._options = PhpExporterOptions.model_validate(
            configuration.get_exporter_options(PHP_FORMAT)
        )

    @property
    def options(self) -> PhpExporterOptions:
        return self._options

    def get_destination_folder(self) -> str:
        return self._require("destination_folder")

    def get_domain(self) -> str:
        return self._require("domain")

    def get_prefix(self) -> str:
        return self._options.prefix or ""

    def _require(self, option: str) -> str:
        value = getattr(self._options, option)
        if value is None:
            raise MissingConfigurationError(PHP_FORMAT, option)
        return value
