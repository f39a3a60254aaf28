"""Error marshalling for AWS JSON error responses.

Reads the error code from the ``x-amzn-ErrorType`` header or the body's
``__type``/``code`` members, and the message from ``message``/``Message``,
then derives an ErrorKind from the code and the HTTP status.
"""

from typing import Any, Iterable, Optional

import structlog

from infrastructure.clients.aws.models import HttpResponse
from infrastructure.operations.errors import ErrorKind, ServiceError

logger = structlog.get_logger()

ACCESS_DENIED_CODES = frozenset(
    {
        "AccessDenied",
        "AccessDeniedException",
        "UnauthorizedOperation",
        "UnrecognizedClientException",
        "InvalidClientTokenId",
        "InvalidSignatureException",
        "SignatureDoesNotMatch",
        "ExpiredToken",
        "ExpiredTokenException",
        "MissingAuthenticationToken",
        "IncompleteSignature",
    }
)
VALIDATION_CODES = frozenset(
    {
        "ValidationException",
        "BadRequestException",
        "InvalidParameterException",
        "InvalidParameterValueException",
        "InvalidRequestException",
        "InvalidInputException",
        "SerializationException",
        "MissingParameter",
    }
)
CONFLICT_CODES = frozenset(
    {
        "ConflictException",
        "AlreadyExistsException",
        "ResourceAlreadyExistsException",
        "ResourceInUseException",
        "ConcurrentModificationException",
        "IdempotentParameterMismatchException",
    }
)
UNAVAILABLE_CODES = frozenset({"ServiceUnavailable", "ServiceUnavailableException"})
INTERNAL_CODES = frozenset(
    {
        "InternalFailure",
        "InternalServerError",
        "InternalServiceError",
        "ServiceException",
    }
)

DEFAULT_THROTTLING_CODES = (
    "Throttling",
    "ThrottlingException",
    "TooManyRequestsException",
    "RequestLimitExceeded",
)
DEFAULT_NOT_FOUND_CODES = ("ResourceNotFoundException", "NotFoundException")

REQUEST_ID_HEADERS = ("x-amzn-requestid", "x-amz-request-id")


def parse_retry_after(response: HttpResponse) -> Optional[int]:
    """Seconds from a numeric Retry-After header, if present."""
    value = response.header("Retry-After")
    if value is None:
        return None
    try:
        return max(int(float(value)), 0)
    except ValueError:
        return None


class JsonErrorMarshaller:
    """Maps AWS JSON (REST-JSON and JSON 1.1) error responses.

    Args:
        throttling_codes: Codes reported as THROTTLING
        not_found_codes: Codes reported as RESOURCE_NOT_FOUND
    """

    def __init__(
        self,
        throttling_codes: Iterable[str] = DEFAULT_THROTTLING_CODES,
        not_found_codes: Iterable[str] = DEFAULT_NOT_FOUND_CODES,
    ) -> None:
        self._throttling_codes = frozenset(throttling_codes)
        self._not_found_codes = frozenset(not_found_codes)

    def marshall(self, response: HttpResponse) -> ServiceError:
        body = self._parse_body(response)
        code = self._error_code(response, body)
        message = (
            _first(body, "message", "Message", "errorMessage")
            or f"HTTP {response.status_code} returned without an error message"
        )
        kind = self._error_kind(code, response.status_code)
        return ServiceError(
            kind=kind,
            code=code,
            message=str(message),
            retryable=kind
            in (
                ErrorKind.THROTTLING,
                ErrorKind.SERVICE_UNAVAILABLE,
                ErrorKind.INTERNAL_FAILURE,
            ),
            status_code=response.status_code,
            request_id=next(
                (response.header(h) for h in REQUEST_ID_HEADERS if response.header(h)),
                None,
            ),
        )

    @staticmethod
    def _parse_body(response: HttpResponse) -> dict:
        try:
            body = response.json()
        except (ValueError, UnicodeDecodeError):
            logger.debug(
                "error_body_not_json",
                status_code=response.status_code,
                body=response.body[:200],
            )
            return {}
        return body if isinstance(body, dict) else {}

    @staticmethod
    def _error_code(response: HttpResponse, body: dict) -> str:
        # "ValidationException:http://internal.amazon.com/coral/..."
        raw = (
            response.header("x-amzn-ErrorType")
            or _first(body, "__type", "code", "Code")
            or ""
        )
        code = str(raw).split(":", 1)[0]
        # "com.amazonaws.lightsail#NotFoundException"
        code = code.rsplit("#", 1)[-1]
        return code or f"Http{response.status_code}"

    def _error_kind(self, code: str, status_code: int) -> ErrorKind:
        if code in self._throttling_codes or status_code == 429:
            return ErrorKind.THROTTLING
        if code in self._not_found_codes or status_code == 404:
            return ErrorKind.RESOURCE_NOT_FOUND
        if code in ACCESS_DENIED_CODES or status_code in (401, 403):
            return ErrorKind.ACCESS_DENIED
        if code in CONFLICT_CODES or status_code == 409:
            return ErrorKind.CONFLICT
        if code in UNAVAILABLE_CODES or status_code == 503:
            return ErrorKind.SERVICE_UNAVAILABLE
        if code in INTERNAL_CODES or status_code >= 500:
            return ErrorKind.INTERNAL_FAILURE
        if code in VALIDATION_CODES or status_code == 400:
            return ErrorKind.VALIDATION
        return ErrorKind.UNKNOWN


def _first(body: dict, *keys: str) -> Any:
    for key in keys:
        if body.get(key):
            return body[key]
    return None
