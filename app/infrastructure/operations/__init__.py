"""Operation result types and status enums.

This module contains the standardized outcome type returned by every
service operation, the structured error it carries, and the classifiers
that turn service errors and transport exceptions into results.
"""

from infrastructure.operations.classifiers import (
    classify_service_error,
    classify_transport_error,
)
from infrastructure.operations.errors import ErrorKind, ServiceError
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "ErrorKind",
    "OperationResult",
    "OperationStatus",
    "ServiceError",
    "classify_service_error",
    "classify_transport_error",
]
