"""Base service client for the AWS JSON services.

Every API operation is described by an `OperationModel` row in the
subclass's ``OPERATIONS`` table. `ServiceClient.__init_subclass__`
generates one snake_case method per row, and every generated method runs
the same `execute_operation` template:

    required-field check -> endpoint resolution -> path construction
    -> serialization from the botocore service model -> signing
    -> one transport call -> result wrapping

Each call is wrapped in a CLIENT span named ``"{service}.{Operation}"`` and
timed into the ``smithy.client.duration`` and
``smithy.client.resolve_endpoint_duration`` histograms. All expected
failures come back as `OperationResult` values.
"""

from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Union

import structlog
from botocore import xform_name  # type: ignore
from botocore.exceptions import BotoCoreError, NoCredentialsError  # type: ignore

from infrastructure.clients.aws.endpoints import StaticEndpointProvider
from infrastructure.clients.aws.error_marshaller import (
    JsonErrorMarshaller,
    parse_retry_after,
)
from infrastructure.clients.aws.models import (
    OperationModel,
    ServiceRequest,
    build_path,
)
from infrastructure.clients.aws.protocols import (
    EndpointProvider,
    ErrorMarshaller,
    HttpTransport,
    Signer,
)
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.clients.aws.signer import SigV4Signer
from infrastructure.logging import bind_operation_context
from infrastructure.operations.classifiers import (
    classify_service_error,
    classify_transport_error,
)
from infrastructure.operations.errors import ErrorKind, ServiceError
from infrastructure.operations.result import OperationResult
from infrastructure.telemetry import (
    CLIENT_DURATION_METRIC,
    RESOLVE_ENDPOINT_DURATION_METRIC,
    SpanKind,
    TelemetryProvider,
    TraceSpan,
    TraceSpanStatus,
    make_call_with_timing,
)
from infrastructure.telemetry.noop import NoopTraceSpan
from infrastructure.telemetry.timing import (
    RPC_METHOD,
    RPC_SERVICE,
    RPC_SYSTEM,
    RPC_SYSTEM_AWS,
)

logger = structlog.get_logger()

RequestLike = Union[ServiceRequest, Mapping[str, Any], None]


def _create_api_method(operation: OperationModel):
    py_operation_name = xform_name(operation.name)

    def _api_call(self, request: RequestLike = None, **kwargs) -> OperationResult:
        if request is not None and kwargs:
            raise TypeError(
                f"{py_operation_name}() accepts a request or keyword arguments, "
                "not both."
            )
        if request is None:
            request = ServiceRequest(**kwargs)
        elif not isinstance(request, ServiceRequest):
            request = ServiceRequest(**dict(request))
        return self.execute_operation(operation, request)

    _api_call.__name__ = str(py_operation_name)
    _api_call.__qualname__ = str(py_operation_name)
    doc = f"Call {operation.name} ({operation.http_method} {operation.path_template})."
    if operation.required:
        doc += f"\n\nRequired fields: {', '.join(operation.required)}."
    _api_call.__doc__ = doc
    return _api_call


class ServiceClient:
    """Generic client for one AWS service.

    Subclasses declare the service identity and operation table:

        class LightsailClient(ServiceClient):
            SERVICE_NAME = "Lightsail"
            SIGNING_NAME = "lightsail"
            ENDPOINT_PREFIX = "lightsail"
            SERIALIZER = ModelSerializer("lightsail")
            OPERATIONS = (OperationModel("GetInstance", "POST", "/"), ...)

    Args:
        signer: Signs each outgoing request
        transport: Sends the signed request
        endpoint_provider: Resolves the endpoint; a missing provider makes
            every call fail with ENDPOINT_RESOLUTION_FAILURE
        error_marshaller: Maps non-2xx responses to ServiceError
        telemetry_provider: Tracing and metrics facade (defaults to no-op)
        region: Region handed to the endpoint provider's built-in parameters
        endpoint_url: Endpoint override handed to the endpoint provider
    """

    SERVICE_NAME: ClassVar[str] = ""
    SIGNING_NAME: ClassVar[str] = ""
    ENDPOINT_PREFIX: ClassVar[str] = ""
    SERIALIZER: ClassVar[Any] = None
    OPERATIONS: ClassVar[Tuple[OperationModel, ...]] = ()

    _operations_by_name: ClassVar[Dict[str, OperationModel]] = {}

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls._operations_by_name = {op.name: op for op in cls.OPERATIONS}
        for operation in cls.OPERATIONS:
            py_operation_name = xform_name(operation.name)
            if py_operation_name not in cls.__dict__:
                setattr(cls, py_operation_name, _create_api_method(operation))

    def __init__(
        self,
        signer: Signer,
        transport: HttpTransport,
        endpoint_provider: Optional[EndpointProvider] = None,
        error_marshaller: Optional[ErrorMarshaller] = None,
        telemetry_provider: Optional[TelemetryProvider] = None,
        region: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ) -> None:
        self._signer = signer
        self._transport = transport
        self._endpoint_provider = endpoint_provider
        self._error_marshaller = error_marshaller or JsonErrorMarshaller()
        self._telemetry_provider = telemetry_provider or TelemetryProvider.noop()
        self._telemetry_provider.run_init()
        self._tracer = self._telemetry_provider.get_tracer(self.SERVICE_NAME)
        self._meter = self._telemetry_provider.get_meter(self.SERVICE_NAME)
        self._closed = False
        self._logger = logger.bind(component=f"{self.SERVICE_NAME.lower()}_client")

        if self._endpoint_provider is not None:
            self._endpoint_provider.init_built_in_parameters(region, endpoint_url)

    @classmethod
    def from_session(
        cls,
        session_provider: SessionProvider,
        transport: HttpTransport,
        telemetry_provider: Optional[TelemetryProvider] = None,
        error_marshaller: Optional[ErrorMarshaller] = None,
    ):
        """Build a client signing with the session provider's credentials."""
        region = session_provider.region
        return cls(
            signer=SigV4Signer(
                session_provider.get_credentials, cls.SIGNING_NAME, region or ""
            ),
            transport=transport,
            endpoint_provider=StaticEndpointProvider(cls.ENDPOINT_PREFIX),
            error_marshaller=error_marshaller,
            telemetry_provider=telemetry_provider,
            region=region,
            endpoint_url=session_provider.endpoint_url,
        )

    @classmethod
    def operation_names(cls) -> Tuple[str, ...]:
        return tuple(cls._operations_by_name)

    @classmethod
    def get_operation(cls, name: str) -> OperationModel:
        return cls._operations_by_name[name]

    @property
    def closed(self) -> bool:
        return self._closed

    def override_endpoint(self, url: str) -> None:
        """Send every subsequent call to `url`."""
        if self._endpoint_provider is None:
            self._logger.warning("endpoint_override_ignored", endpoint_url=url)
            return
        self._endpoint_provider.override_endpoint(url)
        self._logger.info("endpoint_overridden", endpoint_url=url)

    def close(self) -> None:
        """Refuse further calls. Shared collaborators are left open."""
        if not self._closed:
            self._closed = True
            self._logger.debug("client_closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def execute_operation(
        self, operation: OperationModel, request: ServiceRequest
    ) -> OperationResult:
        """Run one operation and return its outcome.

        Args:
            operation: Row from the OPERATIONS table
            request: Request parameters

        Returns:
            OperationResult with the parsed JSON body on success
        """
        if self._closed:
            return OperationResult.permanent_error(
                ServiceError.client_shutting_down(operation.name)
            )

        attributes = {RPC_METHOD: operation.name, RPC_SERVICE: self.SERVICE_NAME}
        span = self._start_span(operation, attributes)
        result: Optional[OperationResult] = None
        try:
            with bind_operation_context(
                service=self.SERVICE_NAME, operation=operation.name
            ):
                result = self._invoke(operation, request, attributes)
            return result
        finally:
            self._finish_span(span, result)

    def _invoke(
        self,
        operation: OperationModel,
        request: ServiceRequest,
        attributes: Mapping[str, str],
    ) -> OperationResult:
        for field_name in operation.checked_fields:
            if not request.has_been_set(field_name):
                self._logger.error(
                    "required_field_missing",
                    operation=operation.name,
                    field=field_name,
                )
                return OperationResult.permanent_error(
                    ServiceError.missing_parameter(field_name)
                )

        return make_call_with_timing(
            lambda: self._dispatch(operation, request, attributes),
            CLIENT_DURATION_METRIC,
            self._meter,
            attributes,
            "The time it takes to complete an entire call, including retries",
        )

    def _dispatch(
        self,
        operation: OperationModel,
        request: ServiceRequest,
        attributes: Mapping[str, str],
    ) -> OperationResult:
        endpoint_result = make_call_with_timing(
            lambda: self._resolve_endpoint(request),
            RESOLVE_ENDPOINT_DURATION_METRIC,
            self._meter,
            attributes,
            "The time it takes to resolve an endpoint for a request",
        )
        if not endpoint_result.is_success:
            self._logger.error(
                "endpoint_resolution_failed",
                operation=operation.name,
                error=endpoint_result.message,
            )
            return endpoint_result

        params = request.to_params()
        try:
            endpoint = build_path(endpoint_result.data, operation, params)
            http_request = self.SERIALIZER.serialize(operation, params, endpoint)
        except (TypeError, ValueError, KeyError, AttributeError) as e:
            self._logger.error(
                "request_serialization_failed",
                operation=operation.name,
                error=str(e),
                error_type=type(e).__name__,
            )
            return OperationResult.permanent_error(
                ServiceError.invalid_parameter(
                    f"Unable to serialize {operation.name} request: {e}"
                )
            )

        try:
            self._signer.sign(http_request)
        except NoCredentialsError as e:
            self._logger.error(
                "request_signing_failed", operation=operation.name, error=str(e)
            )
            return OperationResult.permanent_error(ServiceError.signing_failure(str(e)))

        try:
            response = self._transport.send(http_request)
        except (BotoCoreError, OSError) as e:
            self._logger.warning(
                "aws_api_transport_error",
                operation=operation.name,
                error=str(e),
                error_type=type(e).__name__,
            )
            return classify_transport_error(e)

        if not response.is_success:
            error = self._error_marshaller.marshall(response)
            self._logger.warning(
                "aws_api_error",
                operation=operation.name,
                status_code=response.status_code,
                code=error.code,
                request_id=error.request_id,
                message=error.message,
            )
            return classify_service_error(
                error, retry_after=parse_retry_after(response)
            )

        try:
            data = response.json()
        except (ValueError, UnicodeDecodeError) as e:
            self._logger.error(
                "aws_api_response_unparseable",
                operation=operation.name,
                status_code=response.status_code,
                error=str(e),
            )
            return OperationResult.permanent_error(
                ServiceError(
                    kind=ErrorKind.UNKNOWN,
                    code="ResponseParseError",
                    message=f"Unable to parse response body: {e}",
                    status_code=response.status_code,
                )
            )

        self._logger.debug(
            "aws_api_call",
            operation=operation.name,
            method=operation.http_method,
            path=endpoint.path,
            status_code=response.status_code,
        )
        return OperationResult.success(
            data=data, message=f"{self.SERVICE_NAME}.{operation.name} succeeded"
        )

    def _resolve_endpoint(self, request: ServiceRequest) -> OperationResult:
        if self._endpoint_provider is None:
            return OperationResult.permanent_error(
                ServiceError.endpoint_resolution_failure(
                    "Endpoint provider is not initialized"
                )
            )
        try:
            result = self._endpoint_provider.resolve_endpoint(
                request.endpoint_context_params()
            )
        except Exception as e:  # pylint: disable=broad-except
            self._logger.exception("endpoint_provider_raised")
            return OperationResult.permanent_error(
                ServiceError.endpoint_resolution_failure(str(e))
            )

        if result.is_success:
            return result
        if (
            result.error is not None
            and result.error.kind == ErrorKind.ENDPOINT_RESOLUTION_FAILURE
        ):
            return result
        return OperationResult.permanent_error(
            ServiceError.endpoint_resolution_failure(result.message)
        )

    def _start_span(
        self, operation: OperationModel, attributes: Mapping[str, str]
    ) -> TraceSpan:
        name = f"{self.SERVICE_NAME}.{operation.name}"
        try:
            return self._tracer.create_span(
                name,
                {**attributes, RPC_SYSTEM: RPC_SYSTEM_AWS},
                SpanKind.CLIENT,
            )
        except Exception:  # pylint: disable=broad-except
            self._logger.warning("span_start_failed", span=name, exc_info=True)
            return NoopTraceSpan(name)

    def _finish_span(self, span: TraceSpan, result: Optional[OperationResult]) -> None:
        try:
            if result is not None and result.is_success:
                span.set_status(TraceSpanStatus.OK)
            else:
                if result is not None and result.error_code:
                    span.set_attribute("aws.error_code", result.error_code)
                span.set_status(TraceSpanStatus.ERROR)
        except Exception:  # pylint: disable=broad-except
            self._logger.warning("span_status_failed", span=span.name, exc_info=True)
        finally:
            try:
                span.end()
            except Exception:  # pylint: disable=broad-except
                self._logger.warning("span_end_failed", span=span.name, exc_info=True)
