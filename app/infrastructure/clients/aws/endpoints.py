"""Endpoint resolution for the service clients.

`StaticEndpointProvider` applies the regional host template
``https://{prefix}.{region}.{dns_suffix}`` unless an endpoint override is
configured. Context parameters supplied with a request (``Region``,
``Endpoint``) take precedence over the built-in parameters set from client
configuration.
"""

import re
from typing import Any, Mapping, Optional

import structlog

from infrastructure.clients.aws.models import Endpoint
from infrastructure.operations.errors import ServiceError
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()

# A region must be a valid DNS host label
_REGION_PATTERN = re.compile(r"^[a-z0-9]([a-z0-9-]{0,61}[a-z0-9])?$")

_DNS_SUFFIXES = (
    ("cn-", "amazonaws.com.cn"),
    ("us-iso-", "c2s.ic.gov"),
    ("us-isob-", "sc2s.sgov.gov"),
)
_DEFAULT_DNS_SUFFIX = "amazonaws.com"


def dns_suffix_for_region(region: str) -> str:
    for prefix, suffix in _DNS_SUFFIXES:
        if region.startswith(prefix):
            return suffix
    return _DEFAULT_DNS_SUFFIX


class StaticEndpointProvider:
    """Endpoint provider for a single service.

    Args:
        endpoint_prefix: Host prefix of the service (e.g. "email" for SESv2)
        region: Default region; usually set later through
            `init_built_in_parameters`
    """

    def __init__(self, endpoint_prefix: str, region: Optional[str] = None) -> None:
        self._endpoint_prefix = endpoint_prefix
        self._built_ins: dict[str, Any] = {}
        if region:
            self._built_ins["Region"] = region

    @property
    def endpoint_prefix(self) -> str:
        return self._endpoint_prefix

    def init_built_in_parameters(
        self, region: Optional[str], endpoint_url: Optional[str] = None
    ) -> None:
        """Seed the provider from client configuration."""
        if region:
            self._built_ins["Region"] = region
        if endpoint_url:
            self._built_ins["Endpoint"] = endpoint_url

    def override_endpoint(self, url: str) -> None:
        self._built_ins["Endpoint"] = url

    def resolve_endpoint(self, context_params: Mapping[str, Any]) -> OperationResult:
        """Resolve the endpoint for one call.

        Returns:
            OperationResult with an `Endpoint` on success, or a
            permanent ENDPOINT_RESOLUTION_FAILURE error
        """
        params = {**self._built_ins, **dict(context_params)}

        override = params.get("Endpoint")
        if override:
            if not str(override).startswith(("http://", "https://")):
                return self._failure(
                    f"Invalid Configuration: endpoint override [{override}] "
                    "is not a valid URL"
                )
            return OperationResult.success(data=Endpoint(base_url=str(override)))

        region = params.get("Region")
        if not region:
            return self._failure("Invalid Configuration: Missing Region")
        if not _REGION_PATTERN.match(str(region)):
            return self._failure(f"Invalid Configuration: invalid region [{region}]")

        base_url = (
            f"https://{self._endpoint_prefix}.{region}."
            f"{dns_suffix_for_region(str(region))}"
        )
        return OperationResult.success(data=Endpoint(base_url=base_url))

    def _failure(self, message: str) -> OperationResult:
        logger.debug(
            "endpoint_rules_rejected",
            endpoint_prefix=self._endpoint_prefix,
            reason=message,
        )
        return OperationResult.permanent_error(
            ServiceError.endpoint_resolution_failure(message)
        )
