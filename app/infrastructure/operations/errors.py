"""Structured service errors.

`ServiceError` is the error half of an `OperationResult`: a tagged kind, a
machine-readable code, a human message and a retryable flag. Errors raised
locally (missing parameters, endpoint resolution) and errors unmarshalled
from HTTP responses share this shape.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Kinds of errors an operation can report.

    Attributes:
        MISSING_PARAMETER: Required request field not set (local, before I/O)
        ENDPOINT_RESOLUTION_FAILURE: No endpoint could be computed (local)
        CLIENT_SHUTTING_DOWN: Operation called on a closed client (local)
        SIGNING_FAILURE: Request could not be signed (local, no credentials)
        VALIDATION: Request input was rejected, locally or by the service
        ACCESS_DENIED: Caller is not authorized
        RESOURCE_NOT_FOUND: Addressed resource does not exist
        CONFLICT: Resource state conflicts with the request
        THROTTLING: Request rate exceeded
        SERVICE_UNAVAILABLE: Service returned 503 or equivalent
        INTERNAL_FAILURE: Service returned a 5xx failure
        NETWORK_CONNECTION: Request could not reach the service
        REQUEST_TIMEOUT: Transport timed out waiting for the service
        UNKNOWN: Anything the marshaller could not classify
    """

    MISSING_PARAMETER = "MISSING_PARAMETER"
    ENDPOINT_RESOLUTION_FAILURE = "ENDPOINT_RESOLUTION_FAILURE"
    CLIENT_SHUTTING_DOWN = "CLIENT_SHUTTING_DOWN"
    SIGNING_FAILURE = "SIGNING_FAILURE"
    VALIDATION = "VALIDATION"
    ACCESS_DENIED = "ACCESS_DENIED"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    CONFLICT = "CONFLICT"
    THROTTLING = "THROTTLING"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    INTERNAL_FAILURE = "INTERNAL_FAILURE"
    NETWORK_CONNECTION = "NETWORK_CONNECTION"
    REQUEST_TIMEOUT = "REQUEST_TIMEOUT"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class ServiceError:
    """Error returned by a service operation.

    Attributes:
        kind: ErrorKind -- tagged error kind
        code: str -- machine-readable code (service exception name for
            unmarshalled errors, the kind name for local errors)
        message: str -- human-friendly message
        retryable: bool -- whether a retry strategy may repeat the call
        status_code: Optional[int] -- HTTP status when the error came from a
            response
        request_id: Optional[str] -- AWS request id when available
    """

    kind: ErrorKind
    code: str
    message: str
    retryable: bool = False
    status_code: Optional[int] = None
    request_id: Optional[str] = None

    @classmethod
    def missing_parameter(cls, field_name: str) -> "ServiceError":
        return cls(
            kind=ErrorKind.MISSING_PARAMETER,
            code=ErrorKind.MISSING_PARAMETER.value,
            message=f"Missing required field [{field_name}]",
            retryable=False,
        )

    @classmethod
    def invalid_parameter(cls, message: str) -> "ServiceError":
        return cls(
            kind=ErrorKind.VALIDATION,
            code="InvalidParameterValue",
            message=message,
            retryable=False,
        )

    @classmethod
    def endpoint_resolution_failure(cls, message: str) -> "ServiceError":
        return cls(
            kind=ErrorKind.ENDPOINT_RESOLUTION_FAILURE,
            code=ErrorKind.ENDPOINT_RESOLUTION_FAILURE.value,
            message=message,
            retryable=False,
        )

    @classmethod
    def client_shutting_down(cls, operation_name: str) -> "ServiceError":
        return cls(
            kind=ErrorKind.CLIENT_SHUTTING_DOWN,
            code=ErrorKind.CLIENT_SHUTTING_DOWN.value,
            message=f"Unable to call {operation_name}: client is shutting down",
            retryable=False,
        )

    @classmethod
    def signing_failure(cls, message: str) -> "ServiceError":
        return cls(
            kind=ErrorKind.SIGNING_FAILURE,
            code=ErrorKind.SIGNING_FAILURE.value,
            message=message,
            retryable=False,
        )

    def to_dict(self) -> dict:
        """Plain-dict form used for logging and serialization."""
        return {
            "kind": self.kind.value,
            "code": self.code,
            "message": self.message,
            "retryable": self.retryable,
        }
