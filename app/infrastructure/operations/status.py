"""Operation status enumeration.

Status codes for operation results, used to classify outcomes of service
operations for appropriate error handling and retries.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Retryable error (network, timeout, throttling)
        PERMANENT_ERROR: Non-retryable error (validation, missing parameter)
        UNAUTHORIZED: Authentication or authorization failure
        NOT_FOUND: Resource not found
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
