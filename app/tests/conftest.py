"""Shared fixtures for the exporter test suite."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def clean_log_context():
    """Keep structlog context variables from leaking between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
