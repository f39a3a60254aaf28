"""Request serialization driven by botocore's bundled service models.

The operation tables own the HTTP verb and the path; the service model owns
everything else on the wire: member names and locations (uri, querystring,
header, body), the JSON body shape and the protocol headers
(``X-Amz-Target`` for JSON 1.1, ``Content-Type`` for both JSON protocols).

Callers may name top-level parameters in any case (``ImageBuildVersionArn``
or ``imageBuildVersionArn``); they are matched to the model's members before
serialization. Nested structures are passed through as given.
"""

from functools import cached_property, lru_cache
from typing import Any, Dict, Mapping

import botocore.session  # type: ignore
from botocore.awsrequest import AWSRequest  # type: ignore
from botocore.model import OperationModel as BotocoreOperationModel  # type: ignore
from botocore.model import ServiceModel  # type: ignore
from botocore.serialize import create_serializer  # type: ignore
from botocore.utils import percent_encode_sequence  # type: ignore

from infrastructure.clients.aws.models import Endpoint, OperationModel


class UnknownParameterError(ValueError):
    """Raised when a parameter is not a member of the operation's input."""


@lru_cache(maxsize=None)
def load_service_model(service_name: str) -> ServiceModel:
    """Load (once per process) the bundled model for a botocore service name."""
    return botocore.session.get_session().get_service_model(service_name)


def to_wire_value(value: Any) -> Any:
    """Normalize container types the protocol serializers iterate over."""
    if hasattr(value, "model_dump"):
        value = value.model_dump(exclude_none=True)
    if isinstance(value, Mapping):
        return {key: to_wire_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_wire_value(item) for item in value]
    return value


def to_member_params(
    operation_model: BotocoreOperationModel, params: Mapping[str, Any]
) -> Dict[str, Any]:
    """Key parameters by the model's member names.

    Raises:
        UnknownParameterError: a parameter matches no input member
    """
    input_shape = operation_model.input_shape
    members = input_shape.members if input_shape is not None else {}
    by_lower = {name.lower(): name for name in members}
    wire: Dict[str, Any] = {}
    for name, value in params.items():
        member = name if name in members else by_lower.get(name.lower())
        if member is None:
            raise UnknownParameterError(
                f"Unknown parameter [{name}] for {operation_model.name}"
            )
        wire[member] = to_wire_value(value)
    return wire


class ModelSerializer:
    """Builds unsigned requests for one service from its botocore model.

    Args:
        service_name: botocore service name (e.g. "sesv2")
    """

    def __init__(self, service_name: str) -> None:
        self.service_name = service_name

    @cached_property
    def service_model(self) -> ServiceModel:
        return load_service_model(self.service_name)

    @cached_property
    def _protocol_serializer(self):
        return create_serializer(self.service_model.protocol, include_validation=False)

    def operation_model(self, name: str) -> BotocoreOperationModel:
        return self.service_model.operation_model(name)

    def serialize(
        self,
        operation: OperationModel,
        params: Mapping[str, Any],
        endpoint: Endpoint,
    ) -> AWSRequest:
        """Serialize one call onto an endpoint whose path is already built.

        Raises:
            UnknownParameterError: a parameter is not an input member
            TypeError, ValueError, KeyError, AttributeError: a value does not
                fit its member's shape
        """
        operation_model = self.operation_model(operation.name)
        serialized = self._protocol_serializer.serialize_to_request(
            to_member_params(operation_model, params), operation_model
        )

        url = endpoint.url
        if serialized["query_string"]:
            url = f"{url}?{percent_encode_sequence(serialized['query_string'])}"

        headers: Dict[str, str] = dict(endpoint.headers)
        headers.update(serialized["headers"])
        return AWSRequest(
            method=operation.http_method,
            url=url,
            headers=headers,
            data=serialized["body"],
        )
