"""Fixtures for AWS client tests.

Provides factory-as-fixture helpers that build service clients over fake
collaborators: a transport that counts calls and replays canned responses,
a signer that records what it signed, and an endpoint provider that can be
told to fail.
"""

import json
from typing import Any, Dict, List, Mapping, Optional

import pytest
from botocore.credentials import Credentials

from infrastructure.clients.aws.models import Endpoint, HttpResponse
from infrastructure.configuration.integrations.aws import AwsSettings
from infrastructure.operations.errors import ServiceError
from infrastructure.operations.result import OperationResult


class FakeTransport:
    """HttpTransport that records requests and replays configured responses.

    Args:
        responses: Responses returned in order (the last one repeats)
        exc: Exception raised instead of returning a response
    """

    def __init__(
        self,
        responses: Optional[List[HttpResponse]] = None,
        exc: Optional[Exception] = None,
    ):
        self._responses = list(responses or [json_response(200, {})])
        self._exc = exc
        self.requests: List[Any] = []
        self.closed = False

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_request(self):
        return self.requests[-1]

    def send(self, request):
        self.requests.append(request)
        if self._exc is not None:
            raise self._exc
        if len(self._responses) > 1:
            return self._responses.pop(0)
        return self._responses[0]

    def close(self):
        self.closed = True


class FakeSigner:
    def __init__(self):
        self.signed: List[Any] = []

    def sign(self, request) -> None:
        request.headers["Authorization"] = "AWS4-HMAC-SHA256 fake"
        self.signed.append(request)


class FakeEndpointProvider:
    """EndpointProvider returning a fixed base URL, or a failure."""

    def __init__(
        self,
        base_url: str = "https://service.us-east-1.amazonaws.com",
        failure_message: Optional[str] = None,
    ):
        self.base_url = base_url
        self.failure_message = failure_message
        self.resolve_calls: List[Dict[str, Any]] = []
        self.built_ins: Dict[str, Any] = {}
        self.overrides: List[str] = []

    def init_built_in_parameters(self, region, endpoint_url=None) -> None:
        self.built_ins = {"Region": region, "Endpoint": endpoint_url}

    def override_endpoint(self, url: str) -> None:
        self.overrides.append(url)
        self.base_url = url

    def resolve_endpoint(self, context_params: Mapping[str, Any]) -> OperationResult:
        self.resolve_calls.append(dict(context_params))
        if self.failure_message is not None:
            return OperationResult.permanent_error(
                ServiceError.endpoint_resolution_failure(self.failure_message)
            )
        return OperationResult.success(data=Endpoint(base_url=self.base_url))


def json_response(
    status_code: int,
    body: Any,
    headers: Optional[Dict[str, str]] = None,
) -> HttpResponse:
    payload = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
    return HttpResponse.create(status_code, headers or {}, payload)


@pytest.fixture
def make_transport():
    def _factory(*responses: HttpResponse, exc: Optional[Exception] = None):
        return FakeTransport(list(responses) or None, exc=exc)

    return _factory


@pytest.fixture
def make_endpoint_provider():
    def _factory(**kwargs):
        return FakeEndpointProvider(**kwargs)

    return _factory


@pytest.fixture
def make_client(recording_telemetry):
    """Factory building a service client over fake collaborators.

    Returns (client, transport, endpoint_provider, signer).
    """

    def _factory(
        client_cls,
        transport: Optional[FakeTransport] = None,
        endpoint_provider: Any = "default",
        error_marshaller=None,
        telemetry_provider=None,
        region: Optional[str] = "us-east-1",
    ):
        transport = transport or FakeTransport()
        if endpoint_provider == "default":
            endpoint_provider = FakeEndpointProvider()
        signer = FakeSigner()
        client = client_cls(
            signer=signer,
            transport=transport,
            endpoint_provider=endpoint_provider,
            error_marshaller=error_marshaller,
            telemetry_provider=telemetry_provider or recording_telemetry,
            region=region,
        )
        return client, transport, endpoint_provider, signer

    return _factory


@pytest.fixture
def static_credentials():
    return Credentials("AKIDEXAMPLE", "wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY")


@pytest.fixture
def mock_aws_settings(monkeypatch):
    """AwsSettings built from a controlled environment."""
    monkeypatch.setenv("AWS_REGION", "ca-central-1")
    monkeypatch.delenv("AWS_ENDPOINT_URL", raising=False)
    monkeypatch.delenv("AWS_ROLE_ARN", raising=False)
    return AwsSettings()
