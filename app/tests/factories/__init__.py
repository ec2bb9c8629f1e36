"""Test data factories for deterministic test data generation."""

from tests.factories.exporters import (
    make_configuration,
    make_export_content,
    make_php_options,
    make_translation_tree,
)

__all__ = [
    "make_configuration",
    "make_export_content",
    "make_php_options",
    "make_translation_tree",
]
