"""AWS Clients facade for all AWS service operations.

Provides attribute-based access to per-service clients (Imagebuilder,
Lightsail, SESv2) with consistent error handling and OperationResult return
types.

Composition-based design: each service has a focused client class, composed
together in a lightweight facade sharing one session, one HTTP transport and
one telemetry provider.
"""

from typing import Optional

import structlog

from infrastructure.clients.aws.error_marshaller import JsonErrorMarshaller
from infrastructure.clients.aws.imagebuilder import ImagebuilderClient
from infrastructure.clients.aws.lightsail import LightsailClient
from infrastructure.clients.aws.protocols import HttpTransport
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.clients.aws.sesv2 import SESV2Client
from infrastructure.clients.aws.transport import BotocoreTransport
from infrastructure.configuration.integrations.aws import AwsSettings
from infrastructure.telemetry import TelemetryProvider

logger = structlog.get_logger()


class AWSClients:
    """Facade for all AWS service clients.

    Each service client is built from the shared SessionProvider (region,
    endpoint override, credentials) and shares the transport and telemetry
    provider. Closing the facade closes every client and runs the telemetry
    provider's shutdown once.

    Args:
        aws_settings: AWS configuration from settings.aws
        telemetry_provider: Shared telemetry facade (defaults to no-op)
        transport: Shared HTTP transport (defaults to BotocoreTransport)
        session_provider: Shared session provider (built from settings if absent)

    Usage:
        with AWSClients(settings.aws) as aws:
            result = aws.sesv2.get_account()
            if result.is_success:
                return result.data
    """

    def __init__(
        self,
        aws_settings: AwsSettings,
        telemetry_provider: Optional[TelemetryProvider] = None,
        transport: Optional[HttpTransport] = None,
        session_provider: Optional[SessionProvider] = None,
    ) -> None:
        """Initialize AWS clients facade with settings.

        Args:
            aws_settings: AWS configuration from settings.aws
        """
        self._session_provider = session_provider or SessionProvider(
            region=aws_settings.AWS_REGION,
            role_arn=aws_settings.ROLE_ARN,
            role_session_name=aws_settings.ROLE_SESSION_NAME,
            endpoint_url=aws_settings.ENDPOINT_URL,
        )
        self._owns_transport = transport is None
        self._transport = transport or BotocoreTransport(
            connect_timeout=aws_settings.CONNECT_TIMEOUT,
            read_timeout=aws_settings.READ_TIMEOUT,
            max_pool_connections=aws_settings.MAX_POOL_CONNECTIONS,
        )
        self._telemetry_provider = telemetry_provider or TelemetryProvider.noop()
        error_marshaller = JsonErrorMarshaller(
            throttling_codes=aws_settings.THROTTLING_ERRS,
            not_found_codes=aws_settings.RESOURCE_NOT_FOUND_ERRS,
        )

        self.imagebuilder: ImagebuilderClient = ImagebuilderClient.from_session(
            self._session_provider,
            self._transport,
            telemetry_provider=self._telemetry_provider,
            error_marshaller=error_marshaller,
        )
        self.lightsail: LightsailClient = LightsailClient.from_session(
            self._session_provider,
            self._transport,
            telemetry_provider=self._telemetry_provider,
            error_marshaller=error_marshaller,
        )
        self.sesv2: SESV2Client = SESV2Client.from_session(
            self._session_provider,
            self._transport,
            telemetry_provider=self._telemetry_provider,
            error_marshaller=error_marshaller,
        )
        self._logger = logger.bind(component="aws_clients")
        self._logger.debug(
            "aws_clients_created",
            region=aws_settings.AWS_REGION,
            endpoint_url=aws_settings.ENDPOINT_URL,
        )

    @property
    def telemetry_provider(self) -> TelemetryProvider:
        return self._telemetry_provider

    def override_endpoint(self, url: str) -> None:
        """Point every service client at `url` (LocalStack, tests)."""
        for client in (self.imagebuilder, self.lightsail, self.sesv2):
            client.override_endpoint(url)

    def close(self) -> None:
        for client in (self.imagebuilder, self.lightsail, self.sesv2):
            client.close()
        if self._owns_transport and hasattr(self._transport, "close"):
            self._transport.close()
        self._telemetry_provider.run_shutdown()

    def __enter__(self) -> "AWSClients":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
