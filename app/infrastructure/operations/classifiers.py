"""Error classifiers for service errors.

Converts `ServiceError` values (from the error marshaller or from local
checks) and transport exceptions into standardized OperationResult objects.
Centralizes classification so every service client reports failures the
same way.

Key Functions:
- classify_service_error(): ServiceError → OperationResult
- classify_transport_error(): exception raised by the HTTP transport → OperationResult

Usage:
    from infrastructure.operations.classifiers import classify_service_error

    error = marshaller.marshall(response)
    return classify_service_error(error)
"""

from typing import Optional

from botocore.exceptions import (
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)

from infrastructure.operations.errors import ErrorKind, ServiceError
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

# Seconds to wait after throttling when the service gives no hint
DEFAULT_THROTTLE_RETRY_AFTER = 60


def classify_service_error(
    error: ServiceError, retry_after: Optional[int] = None
) -> OperationResult:
    """Classify a ServiceError into an OperationResult.

    Kind Mapping:
    - THROTTLING: → TRANSIENT_ERROR with retry_after
    - SERVICE_UNAVAILABLE, INTERNAL_FAILURE: → TRANSIENT_ERROR
    - NETWORK_CONNECTION, REQUEST_TIMEOUT: → TRANSIENT_ERROR
    - ACCESS_DENIED: → UNAUTHORIZED
    - RESOURCE_NOT_FOUND: → NOT_FOUND
    - Other: → PERMANENT_ERROR

    Args:
        error: ServiceError to classify
        retry_after: Optional retry hint extracted from the response

    Returns:
        OperationResult carrying the error with the appropriate status
    """
    if error.kind == ErrorKind.THROTTLING:
        return OperationResult.transient_error(
            error, retry_after=retry_after or DEFAULT_THROTTLE_RETRY_AFTER
        )

    if error.kind in (
        ErrorKind.SERVICE_UNAVAILABLE,
        ErrorKind.INTERNAL_FAILURE,
        ErrorKind.NETWORK_CONNECTION,
        ErrorKind.REQUEST_TIMEOUT,
    ):
        return OperationResult.transient_error(error, retry_after=retry_after)

    if error.kind == ErrorKind.ACCESS_DENIED:
        return OperationResult.failure(OperationStatus.UNAUTHORIZED, error)

    if error.kind == ErrorKind.RESOURCE_NOT_FOUND:
        return OperationResult.failure(OperationStatus.NOT_FOUND, error)

    # Unknown errors that the service flagged as retryable stay transient
    if error.retryable:
        return OperationResult.transient_error(error, retry_after=retry_after)

    return OperationResult.permanent_error(error)


def classify_transport_error(exc: Exception) -> OperationResult:
    """Classify an exception raised while sending a request.

    Handles botocore transport exceptions: timeouts become REQUEST_TIMEOUT,
    connection failures become NETWORK_CONNECTION. Both are retryable; the
    retry itself belongs to the transport's retry strategy, not this layer.

    Args:
        exc: Exception raised by the HTTP transport

    Returns:
        OperationResult with TRANSIENT_ERROR status
    """
    if isinstance(exc, (ConnectTimeoutError, ReadTimeoutError, TimeoutError)):
        error = ServiceError(
            kind=ErrorKind.REQUEST_TIMEOUT,
            code="RequestTimeout",
            message=f"Request timed out: {exc}",
            retryable=True,
        )
        return classify_service_error(error)

    if isinstance(exc, (EndpointConnectionError, ConnectionError)):
        error = ServiceError(
            kind=ErrorKind.NETWORK_CONNECTION,
            code="NetworkConnection",
            message=f"Unable to connect to endpoint: {exc}",
            retryable=True,
        )
        return classify_service_error(error)

    # Could be any other BotoCoreError (SSL, proxy, ...); network issues are
    # usually temporary
    error = ServiceError(
        kind=ErrorKind.NETWORK_CONNECTION,
        code=type(exc).__name__,
        message=f"Transport error: {type(exc).__name__}: {exc}",
        retryable=True,
    )
    return classify_service_error(error)
