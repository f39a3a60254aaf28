"""Collaborator interfaces consumed by the service clients.

Each collaborator is injected at client construction. Default
implementations live in `endpoints`, `signer`, `transport` and
`error_marshaller`; tests substitute fakes.
"""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from botocore.awsrequest import AWSRequest

from infrastructure.clients.aws.models import HttpResponse
from infrastructure.operations.errors import ServiceError
from infrastructure.operations.result import OperationResult


@runtime_checkable
class EndpointProvider(Protocol):
    """Computes the endpoint for a call.

    `resolve_endpoint` returns an OperationResult whose data is an
    `Endpoint`; failures are values, never exceptions.
    """

    def init_built_in_parameters(
        self, region: Optional[str], endpoint_url: Optional[str] = None
    ) -> None:  # pragma: no cover - typing helper
        ...

    def override_endpoint(self, url: str) -> None:  # pragma: no cover
        ...

    def resolve_endpoint(
        self, context_params: Mapping[str, Any]
    ) -> OperationResult:  # pragma: no cover
        ...


@runtime_checkable
class Signer(Protocol):
    """Adds authentication material to an outgoing request in place."""

    def sign(self, request: AWSRequest) -> None:  # pragma: no cover
        ...


@runtime_checkable
class HttpTransport(Protocol):
    """Sends one request and returns the raw response.

    Connection failures and timeouts are raised as exceptions; the client
    converts them into errors.
    """

    def send(self, request: AWSRequest) -> HttpResponse:  # pragma: no cover
        ...


@runtime_checkable
class ErrorMarshaller(Protocol):
    """Maps a non-2xx response to a ServiceError."""

    def marshall(self, response: HttpResponse) -> ServiceError:  # pragma: no cover
        ...
