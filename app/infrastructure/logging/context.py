"""Export context binding for structured logging.

Binds per-export metadata (format, locale, destination file) to structlog
context variables so every log entry emitted while rendering one export
unit carries it.

Usage:
    from infrastructure.logging import bind_export_context

    with bind_export_context(export_format="php", locale="en"):
        logger.info("building_export_content")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_export_context(
    export_id: Optional[str] = None,
    export_format: Optional[str] = None,
    locale: Optional[str] = None,
    destination_file: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind export-scoped context to all logs within the context manager.

    Args:
        export_id: Unique export identifier. Auto-generated if not provided.
        export_format: Exporter format (e.g., "php").
        locale: Locale being exported.
        destination_file: File the host will write the content to.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {"export_id": export_id or str(uuid.uuid4())}

    if export_format is not None:
        context["export_format"] = export_format

    if locale is not None:
        context["locale"] = locale

    if destination_file:
        context["destination_file"] = destination_file

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_export_id() -> Optional[str]:
    """Get the current export ID from the logging context.

    Returns:
        The export ID if set, None otherwise.
    """
    return structlog.contextvars.get_contextvars().get("export_id")


def clear_export_context() -> None:
    """Clear all bound context from the logging context."""
    structlog.contextvars.clear_contextvars()
