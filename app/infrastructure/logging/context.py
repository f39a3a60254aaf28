"""Operation context binding for structured logging.

Binds the service and operation being invoked to structlog's context vars so
every log entry emitted while a call is in flight (endpoint resolution,
signing, transport, error parsing) carries the same correlation data.

Usage:
    from infrastructure.logging import bind_operation_context

    with bind_operation_context(service="imagebuilder", operation="TagResource"):
        logger.info("aws_api_call")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_operation_context(
    service: str,
    operation: str,
    correlation_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind operation-scoped context to all logs within the block.

    An already-bound correlation ID is reused so nested calls share it. On
    exit every key bound here gets back the value it had before the block,
    or is removed if it had none.

    Args:
        service: Client name of the service (e.g. "SESv2").
        operation: Operation name (e.g. "CreateContact").
        correlation_id: Explicit correlation ID. Generated if absent.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        The correlation ID bound for the block.
    """
    inherited = get_correlation_id()
    context: dict[str, Any] = {"service": service, "operation": operation}
    if correlation_id is not None or inherited is None:
        context["correlation_id"] = correlation_id or str(uuid.uuid4())
    context.update(extra_context)

    with structlog.contextvars.bound_contextvars(**context):
        yield context.get("correlation_id", inherited)


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context."""
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID in the current logging context."""
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def clear_operation_context() -> None:
    """Clear all operation-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
