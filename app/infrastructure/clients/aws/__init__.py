"""Infrastructure AWS clients public API.

This package provides DI-friendly AWS clients with per-service class
decomposition. Every client method is generated from a declarative
operation table and returns an OperationResult.

The main facade is AWSClients, which composes the per-service clients
(Imagebuilder, Lightsail, SESv2) and exposes them as attributes:

    from infrastructure.services import get_aws_clients

    aws = get_aws_clients()

    result = aws.imagebuilder.tag_resource(
        ResourceArn="arn:aws:imagebuilder:...", tags={"team": "sre"}
    )
    if result.is_success:
        return result.data

    result = aws.lightsail.get_instance(instanceName="web-1")

All infrastructure services are accessed through `infrastructure/services/`
as the single point of entry for dependency injection.
"""

from infrastructure.clients.aws.client import ServiceClient
from infrastructure.clients.aws.endpoints import StaticEndpointProvider
from infrastructure.clients.aws.error_marshaller import JsonErrorMarshaller
from infrastructure.clients.aws.facade import AWSClients
from infrastructure.clients.aws.imagebuilder import ImagebuilderClient
from infrastructure.clients.aws.lightsail import LightsailClient
from infrastructure.clients.aws.models import (
    Endpoint,
    HttpResponse,
    OperationModel,
    ServiceRequest,
)
from infrastructure.clients.aws.protocols import (
    EndpointProvider,
    ErrorMarshaller,
    HttpTransport,
    Signer,
)
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.clients.aws.sesv2 import SESV2Client
from infrastructure.clients.aws.signer import SigV4Signer
from infrastructure.clients.aws.transport import BotocoreTransport

__all__ = [
    "AWSClients",
    "SessionProvider",
    "ServiceClient",
    "ImagebuilderClient",
    "LightsailClient",
    "SESV2Client",
    "Endpoint",
    "HttpResponse",
    "OperationModel",
    "ServiceRequest",
    "EndpointProvider",
    "ErrorMarshaller",
    "HttpTransport",
    "Signer",
    "StaticEndpointProvider",
    "JsonErrorMarshaller",
    "SigV4Signer",
    "BotocoreTransport",
]
