"""Tests for infrastructure.exporters.configuration module."""

import pytest

from infrastructure.exporters import Configuration, ExporterConfiguration


@pytest.mark.unit
class TestConfiguration:
    """Tests for Configuration."""

    def test_get_nested_path(self):
        config = Configuration({"exporter": {"php": {"domain": "messages"}}})

        assert config.get("exporter.php.domain") == "messages"

    def test_get_missing_path_returns_default(self):
        config = Configuration({"exporter": {"php": {}}})

        assert config.get("exporter.php.domain") is None
        assert config.get("exporter.yaml.domain", "fallback") == "fallback"

    def test_get_through_scalar_returns_default(self):
        config = Configuration({"exporter": "not-a-mapping"})

        assert config.get("exporter.php") is None

    def test_has_distinguishes_none_from_missing(self):
        config = Configuration({"exporter": {"php": {"prefix": None}}})

        assert config.has("exporter.php.prefix") is True
        assert config.has("exporter.php.domain") is False

    def test_for_exporter_wraps_options(self):
        config = Configuration.for_exporter("php", {"domain": "messages"})

        assert config.to_dict() == {"exporter": {"php": {"domain": "messages"}}}
        assert config.default_format == "php"

    def test_get_exporter_options_returns_copy(self):
        config = Configuration.for_exporter("php", {"domain": "messages"})

        options = config.get_exporter_options("php")
        options["domain"] = "changed"

        assert config.get("exporter.php.domain") == "messages"

    def test_get_exporter_options_uses_default_format(self):
        config = Configuration.for_exporter("php", {"domain": "messages"})

        assert config.get_exporter_options() == {"domain": "messages"}

    def test_get_exporter_options_missing_section(self):
        assert Configuration().get_exporter_options("php") == {}
        assert Configuration({"exporter": {"php": "oops"}}).get_exporter_options(
            "php"
        ) == {}

    def test_source_mapping_changes_do_not_leak(self):
        data = {"exporter": {}}
        config = Configuration(data)

        data["other"] = 1

        assert config.get("other") is None

    def test_nested_source_changes_do_not_leak(self):
        data = {"exporter": {"php": {"domain": "messages"}}}
        config = Configuration(data)

        data["exporter"]["php"]["domain"] = "changed"
        data["exporter"]["xliff"] = {}

        assert config.get("exporter.php.domain") == "messages"
        assert not config.has("exporter.xliff")

    def test_get_returns_detached_section(self):
        config = Configuration({"exporter": {"php": {"domain": "messages"}}})

        config.get("exporter.php")["domain"] = "changed"
        config.get("exporter")["xliff"] = {}

        assert config.get("exporter.php.domain") == "messages"
        assert not config.has("exporter.xliff")

    def test_to_dict_returns_detached_copy(self):
        config = Configuration({"exporter": {"php": {"domain": "messages"}}})

        snapshot = config.to_dict()
        snapshot["exporter"]["php"]["domain"] = "changed"

        assert config.get("exporter.php.domain") == "messages"
        assert config.to_dict() == {"exporter": {"php": {"domain": "messages"}}}

    def test_top_level_is_read_only(self):
        config = Configuration({"exporter": {}})

        with pytest.raises(TypeError):
            config._data["exporter"] = {}


@pytest.mark.unit
def test_exporter_configuration_is_abstract():
    with pytest.raises(TypeError):
        ExporterConfiguration()
