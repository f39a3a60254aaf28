"""Unit tests for the generic ServiceClient operation template.

Covers required-field validation, endpoint resolution failures, dispatch,
result wrapping, span lifecycle, duration metrics and the client lifecycle.
"""

import json
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from botocore.exceptions import EndpointConnectionError, NoCredentialsError

from infrastructure.clients.aws.imagebuilder import ImagebuilderClient
from infrastructure.clients.aws.lightsail import LightsailClient
from infrastructure.clients.aws.models import HttpResponse, ServiceRequest
from infrastructure.clients.aws.sesv2 import SESV2Client
from infrastructure.operations.errors import ErrorKind
from infrastructure.operations.status import OperationStatus
from infrastructure.telemetry import SpanKind, TraceSpanStatus


def _response(status_code, body, headers=None):
    return HttpResponse.create(
        status_code, headers or {}, json.dumps(body).encode("utf-8")
    )


def _sample_value(shape):
    """A value of the right type for a botocore shape."""
    type_name = shape.type_name
    if type_name == "structure":
        return {}
    if type_name == "list":
        return [_sample_value(shape.member)]
    if type_name == "map":
        return {"key": _sample_value(shape.value)}
    if type_name in ("integer", "long"):
        return 1
    if type_name in ("float", "double"):
        return 1.5
    if type_name == "boolean":
        return True
    if type_name == "timestamp":
        return datetime(2024, 1, 1, tzinfo=timezone.utc)
    if type_name == "blob":
        return b"v"
    return "v"


def _sample_params(client_cls, operation):
    if not operation.checked_fields:
        return {}
    input_shape = client_cls.SERIALIZER.operation_model(operation.name).input_shape
    members = {name.lower(): shape for name, shape in input_shape.members.items()}
    return {
        name: _sample_value(members[name.lower()])
        for name in operation.checked_fields
    }


@pytest.mark.unit
class TestRequiredFields:
    def test_missing_required_field_returns_missing_parameter(self, make_client):
        """UntagResource without ResourceArn fails locally with no I/O."""
        client, transport, endpoint_provider, _ = make_client(ImagebuilderClient)

        result = client.untag_resource(TagKeys=["team"])

        assert not result.is_success
        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error.to_dict() == {
            "kind": "MISSING_PARAMETER",
            "code": "MISSING_PARAMETER",
            "message": "Missing required field [ResourceArn]",
            "retryable": False,
        }
        assert transport.call_count == 0
        assert endpoint_provider.resolve_calls == []

    def test_first_unset_field_in_table_order_is_reported(self, make_client):
        client, transport, _, _ = make_client(ImagebuilderClient)

        result = client.untag_resource(ResourceArn="arn:aws:imagebuilder:x")

        assert result.error.message == "Missing required field [TagKeys]"
        assert transport.call_count == 0

    def test_none_value_counts_as_unset(self, make_client):
        client, transport, _, _ = make_client(SESV2Client)

        result = client.get_contact_list(ContactListName=None)

        assert result.error.kind == ErrorKind.MISSING_PARAMETER
        assert transport.call_count == 0

    @pytest.mark.parametrize(
        "client_cls", [ImagebuilderClient, SESV2Client], ids=lambda c: c.__name__
    )
    def test_every_required_field_is_enforced(self, make_client, client_cls):
        """Dropping any one required field blocks the call."""
        for operation in client_cls.OPERATIONS:
            for missing in operation.required:
                client, transport, _, _ = make_client(client_cls)
                params = {
                    name: "value" for name in operation.required if name != missing
                }

                result = client.execute_operation(operation, ServiceRequest(**params))

                assert result.error.kind == ErrorKind.MISSING_PARAMETER
                assert result.error.message == f"Missing required field [{missing}]"
                assert transport.call_count == 0


@pytest.mark.unit
class TestEndpointResolution:
    def test_endpoint_failure_returns_resolution_error(
        self, make_client, make_endpoint_provider
    ):
        provider = make_endpoint_provider(failure_message="Invalid region")
        client, transport, _, _ = make_client(SESV2Client, endpoint_provider=provider)

        result = client.get_account()

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error.kind == ErrorKind.ENDPOINT_RESOLUTION_FAILURE
        assert result.error.message == "Invalid region"
        assert result.retryable is False
        assert transport.call_count == 0

    def test_missing_endpoint_provider_is_resolution_failure(self, make_client):
        client, transport, _, _ = make_client(LightsailClient, endpoint_provider=None)

        result = client.get_instances()

        assert result.error.kind == ErrorKind.ENDPOINT_RESOLUTION_FAILURE
        assert transport.call_count == 0

    def test_raising_provider_is_resolution_failure(
        self, make_client, make_endpoint_provider
    ):
        provider = make_endpoint_provider()

        def _raise(params):
            raise RuntimeError("rules engine exploded")

        provider.resolve_endpoint = _raise
        client, transport, _, _ = make_client(LightsailClient, endpoint_provider=provider)

        result = client.get_regions()

        assert result.error.kind == ErrorKind.ENDPOINT_RESOLUTION_FAILURE
        assert "rules engine exploded" in result.error.message
        assert transport.call_count == 0

    def test_built_in_parameters_are_seeded_at_construction(self, make_client):
        _, _, provider, _ = make_client(SESV2Client, region="eu-west-1")

        assert provider.built_ins == {"Region": "eu-west-1", "Endpoint": None}

    def test_override_endpoint_is_used_for_later_calls(self, make_client):
        client, transport, provider, _ = make_client(SESV2Client)

        client.override_endpoint("http://localhost:4566")
        client.get_account()

        assert provider.overrides == ["http://localhost:4566"]
        assert transport.last_request.url == "http://localhost:4566/v2/email/account"


@pytest.mark.unit
class TestDispatch:
    def test_happy_path_sends_exactly_once_with_fixed_method(self, make_client):
        client, transport, _, signer = make_client(ImagebuilderClient)

        result = client.tag_resource(
            ResourceArn="arn:aws:imagebuilder:ca-central-1:123:image/x",
            tags={"team": "sre"},
        )

        assert result.is_success
        assert transport.call_count == 1
        request = transport.last_request
        assert request.method == "POST"
        assert request.url == (
            "https://service.us-east-1.amazonaws.com/tags/"
            "arn%3Aaws%3Aimagebuilder%3Aca-central-1%3A123%3Aimage%2Fx"
        )
        assert json.loads(request.data) == {"tags": {"team": "sre"}}
        assert signer.signed == [request]

    @pytest.mark.parametrize(
        "client_cls",
        [ImagebuilderClient, LightsailClient, SESV2Client],
        ids=lambda c: c.__name__,
    )
    def test_every_operation_uses_its_table_method(self, make_client, client_cls):
        for operation in client_cls.OPERATIONS:
            client, transport, _, _ = make_client(client_cls)
            params = _sample_params(client_cls, operation)

            result = client.execute_operation(operation, ServiceRequest(**params))

            assert result.is_success, operation.name
            assert transport.call_count == 1
            assert transport.last_request.method == operation.http_method

    def test_path_building_is_deterministic(self, make_client):
        client, transport, _, _ = make_client(SESV2Client)
        params = {"EmailIdentity": "example.com", "PolicyName": "my policy/1"}

        client.get_email_identity_policies(EmailIdentity="example.com")
        client.delete_email_identity_policy(**params)
        client.delete_email_identity_policy(**params)

        first, second = transport.requests[1].url, transport.requests[2].url
        assert first == second
        assert first.endswith(
            "/v2/email/identities/example.com/policies/my%20policy%2F1"
        )

    @pytest.mark.parametrize(
        "tags",
        [{1, 2}, [{"Key": "team", "Value": Decimal("1.5")}], [object()]],
        ids=["set-of-ints", "decimal", "object"],
    )
    def test_unserializable_value_is_validation_error(
        self, make_client, recording_tracer_provider, tags
    ):
        """Values that do not fit the member's shape fail locally with no I/O."""
        client, transport, _, signer = make_client(SESV2Client)

        result = client.create_contact_list(ContactListName="n", Tags=tags)

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error.kind == ErrorKind.VALIDATION
        assert result.error.code == "InvalidParameterValue"
        assert result.retryable is False
        assert "CreateContactList" in result.error.message
        assert transport.call_count == 0
        assert signer.signed == []
        (span,) = recording_tracer_provider.spans
        assert span.status == TraceSpanStatus.ERROR
        assert span.attributes["aws.error_code"] == "InvalidParameterValue"
        assert span.end_count == 1

    def test_unknown_parameter_is_validation_error(self, make_client):
        client, transport, _, _ = make_client(SESV2Client)

        result = client.get_account(Bogus="x")

        assert result.error.kind == ErrorKind.VALIDATION
        assert "Unknown parameter [Bogus]" in result.error.message
        assert transport.call_count == 0

    def test_generated_method_accepts_request_object(self, make_client):
        client, transport, _, _ = make_client(SESV2Client)
        request = ServiceRequest(ContactListName="newsletter")

        result = client.get_contact_list(request)

        assert result.is_success
        assert transport.last_request.url.endswith("/v2/email/contact-lists/newsletter")

    def test_generated_method_accepts_mapping(self, make_client):
        client, transport, _, _ = make_client(SESV2Client)

        client.get_contact_list({"ContactListName": "newsletter"})

        assert transport.call_count == 1

    def test_generated_method_rejects_request_and_kwargs(self, make_client):
        client, _, _, _ = make_client(SESV2Client)

        with pytest.raises(TypeError):
            client.get_contact_list(
                ServiceRequest(ContactListName="a"), ContactListName="b"
            )

    def test_generated_method_metadata(self):
        method = SESV2Client.create_contact

        assert method.__name__ == "create_contact"
        assert "ContactListName" in method.__doc__


@pytest.mark.unit
class TestResultWrapping:
    def test_success_carries_parsed_json(self, make_client, make_transport):
        transport = make_transport(_response(200, {"SendingEnabled": True}))
        client, _, _, _ = make_client(SESV2Client, transport=transport)

        result = client.get_account()

        assert result.is_success
        assert result.data == {"SendingEnabled": True}
        assert result.message == "SESv2.GetAccount succeeded"

    def test_empty_success_body_is_empty_dict(self, make_client, make_transport):
        transport = make_transport(HttpResponse.create(204, {}, b""))
        client, _, _, _ = make_client(SESV2Client, transport=transport)

        result = client.delete_contact_list(ContactListName="old")

        assert result.is_success
        assert result.data == {}

    def test_unparseable_success_body_is_error(self, make_client, make_transport):
        transport = make_transport(HttpResponse.create(200, {}, b"<html>"))
        client, _, _, _ = make_client(SESV2Client, transport=transport)

        result = client.get_account()

        assert not result.is_success
        assert result.error_code == "ResponseParseError"

    def test_service_error_is_marshalled_and_classified(
        self, make_client, make_transport
    ):
        transport = make_transport(
            _response(
                404,
                {"message": "List does not exist"},
                {"x-amzn-ErrorType": "NotFoundException", "x-amzn-RequestId": "r-1"},
            )
        )
        client, _, _, _ = make_client(SESV2Client, transport=transport)

        result = client.get_contact_list(ContactListName="missing")

        assert result.status == OperationStatus.NOT_FOUND
        assert result.error.kind == ErrorKind.RESOURCE_NOT_FOUND
        assert result.error.code == "NotFoundException"
        assert result.error.request_id == "r-1"
        assert result.message == "List does not exist"
        assert transport.call_count == 1

    def test_throttling_uses_retry_after_header(self, make_client, make_transport):
        transport = make_transport(
            _response(
                400,
                {"__type": "ThrottlingException", "message": "Rate exceeded"},
                {"Retry-After": "3"},
            )
        )
        client, _, _, _ = make_client(LightsailClient, transport=transport)

        result = client.get_instances()

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.retry_after == 3
        assert result.retryable is True

    def test_transport_exception_becomes_network_error(
        self, make_client, make_transport
    ):
        transport = make_transport(
            exc=EndpointConnectionError(endpoint_url="https://email.x.amazonaws.com")
        )
        client, _, _, _ = make_client(SESV2Client, transport=transport)

        result = client.get_account()

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error.kind == ErrorKind.NETWORK_CONNECTION
        assert result.retryable is True
        assert transport.call_count == 1

    def test_signing_failure_is_not_sent(self, make_client):
        client, transport, _, signer = make_client(SESV2Client)

        def _no_credentials(request):
            raise NoCredentialsError()

        signer.sign = _no_credentials

        result = client.get_account()

        assert result.error.kind == ErrorKind.SIGNING_FAILURE
        assert transport.call_count == 0


@pytest.mark.unit
class TestTelemetry:
    def test_span_named_and_tagged_for_operation(
        self, make_client, recording_tracer_provider
    ):
        client, _, _, _ = make_client(LightsailClient)

        client.get_instance(instanceName="web-1")

        (span,) = recording_tracer_provider.spans
        assert span.name == "Lightsail.GetInstance"
        assert span.kind == SpanKind.CLIENT
        assert span.attributes == {
            "rpc.method": "GetInstance",
            "rpc.service": "Lightsail",
            "rpc.system": "aws-api",
        }
        assert span.status == TraceSpanStatus.OK
        assert span.end_count == 1

    def test_span_ends_once_on_validation_failure(
        self, make_client, recording_tracer_provider
    ):
        client, _, _, _ = make_client(ImagebuilderClient)

        client.tag_resource(tags={"a": "b"})

        (span,) = recording_tracer_provider.spans
        assert span.status == TraceSpanStatus.ERROR
        assert span.attributes["aws.error_code"] == "MISSING_PARAMETER"
        assert span.end_count == 1

    def test_span_ends_once_on_endpoint_failure(
        self, make_client, make_endpoint_provider, recording_tracer_provider
    ):
        provider = make_endpoint_provider(failure_message="nope")
        client, _, _, _ = make_client(SESV2Client, endpoint_provider=provider)

        client.get_account()

        (span,) = recording_tracer_provider.spans
        assert span.status == TraceSpanStatus.ERROR
        assert span.end_count == 1

    def test_span_ends_once_on_service_error(
        self, make_client, make_transport, recording_tracer_provider
    ):
        transport = make_transport(_response(500, {"message": "oops"}))
        client, _, _, _ = make_client(SESV2Client, transport=transport)

        client.get_account()

        (span,) = recording_tracer_provider.spans
        assert span.status == TraceSpanStatus.ERROR
        assert span.end_count == 1

    def test_span_ends_once_when_transport_raises_unexpectedly(
        self, make_client, make_transport, recording_tracer_provider
    ):
        transport = make_transport(exc=KeyError("bug"))
        client, _, _, _ = make_client(SESV2Client, transport=transport)

        with pytest.raises(KeyError):
            client.get_account()

        (span,) = recording_tracer_provider.spans
        assert span.status == TraceSpanStatus.ERROR
        assert span.end_count == 1

    def test_duration_metrics_recorded_with_rpc_attributes(
        self, make_client, recording_meter_provider
    ):
        client, _, _, _ = make_client(SESV2Client)

        client.get_account()

        names = recording_meter_provider.metric_names()
        assert names == [
            "smithy.client.resolve_endpoint_duration",
            "smithy.client.duration",
        ]
        for sample in recording_meter_provider.samples:
            assert sample["units"] == "ms"
            assert sample["attributes"] == {
                "rpc.method": "GetAccount",
                "rpc.service": "SESv2",
            }

    def test_validation_failure_records_no_duration(
        self, make_client, recording_meter_provider
    ):
        client, _, _, _ = make_client(SESV2Client)

        client.get_contact_list()

        assert recording_meter_provider.samples == []

    def test_broken_tracer_does_not_fail_call(self, make_client, recording_telemetry):
        client, transport, _, _ = make_client(SESV2Client)

        def _broken(*args, **kwargs):
            raise RuntimeError("tracer down")

        client._tracer.create_span = _broken

        result = client.get_account()

        assert result.is_success
        assert transport.call_count == 1

    def test_construction_runs_telemetry_init_once(self, make_client):
        from infrastructure.telemetry import TelemetryProvider

        calls = []
        telemetry = TelemetryProvider(init=lambda: calls.append("init"))

        make_client(SESV2Client, telemetry_provider=telemetry)
        make_client(LightsailClient, telemetry_provider=telemetry)

        assert calls == ["init"]


@pytest.mark.unit
class TestLifecycle:
    def test_closed_client_refuses_calls(self, make_client, recording_tracer_provider):
        client, transport, _, _ = make_client(SESV2Client)

        client.close()
        result = client.get_account()

        assert client.closed
        assert result.error.kind == ErrorKind.CLIENT_SHUTTING_DOWN
        assert transport.call_count == 0
        assert recording_tracer_provider.spans == []

    def test_context_manager_closes_client(self, make_client):
        client, _, _, _ = make_client(LightsailClient)

        with client as entered:
            assert entered is client

        assert client.closed

    def test_close_does_not_shut_down_shared_telemetry(
        self, make_client, recording_telemetry
    ):
        client, _, _, _ = make_client(SESV2Client)

        client.close()

        assert recording_telemetry.is_shut_down is False

    def test_operation_lookup(self):
        assert "TagResource" in ImagebuilderClient.operation_names()
        assert ImagebuilderClient.get_operation("TagResource").required == (
            "ResourceArn",
        )
