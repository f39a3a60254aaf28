"""Operation result dataclass.

Uniform outcome type returned from every service operation: either a success
payload or a structured `ServiceError`, never both.
"""

from typing import Optional, Any
from dataclasses import dataclass

from infrastructure.operations.errors import ServiceError
from infrastructure.operations.status import OperationStatus


@dataclass(frozen=True)
class OperationResult:
    """Uniform result returned from operations.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs/troubleshooting
        data: Optional[Any] -- payload on success (parsed response body)
        error: Optional[ServiceError] -- structured error on failure
        error_code: Optional[str] -- machine error code (mirrors error.code)
        retry_after: Optional[int] -- seconds until retry when throttled
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error: Optional[ServiceError] = None
    error_code: Optional[str] = None
    retry_after: Optional[int] = None

    def __post_init__(self):
        if self.status == OperationStatus.SUCCESS and self.error is not None:
            raise ValueError("A successful OperationResult cannot carry an error")

    @property
    def is_success(self) -> bool:
        """Helper property to check if operation was successful.

        Returns:
            True if status is SUCCESS, False otherwise
        """
        return self.status == OperationStatus.SUCCESS

    @property
    def retryable(self) -> bool:
        """Whether a retry strategy may repeat the failed call."""
        if self.error is not None:
            return self.error.retryable
        return self.status == OperationStatus.TRANSIENT_ERROR

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        """Create a SUCCESS OperationResult with optional data.

        Args:
            data: Optional payload to include with the result
            message: Human-friendly success message

        Returns:
            OperationResult with SUCCESS status
        """
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def failure(
        cls,
        status: OperationStatus,
        error: ServiceError,
        retry_after: Optional[int] = None,
    ) -> "OperationResult":
        """Create an error OperationResult from a structured error.

        Args:
            status: OperationStatus indicating error type
            error: ServiceError describing the failure
            retry_after: Optional seconds until retry (for throttling)

        Returns:
            OperationResult with specified error status
        """
        return cls(
            status=status,
            message=error.message,
            error=error,
            error_code=error.code,
            retry_after=retry_after,
        )

    @classmethod
    def permanent_error(cls, error: ServiceError) -> "OperationResult":
        """Create a permanent (non-retryable) error result.

        Use for errors that will not succeed on retry, such as missing
        required parameters or an endpoint that cannot be resolved.
        """
        return cls.failure(OperationStatus.PERMANENT_ERROR, error)

    @classmethod
    def transient_error(
        cls, error: ServiceError, retry_after: Optional[int] = None
    ) -> "OperationResult":
        """Create a transient (retryable) error result.

        Use for errors that may succeed on retry, such as:
        - Network timeouts
        - Throttling
        - Temporary service unavailability
        """
        return cls.failure(OperationStatus.TRANSIENT_ERROR, error, retry_after)
