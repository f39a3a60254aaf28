"""AWS integration settings."""

from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class AwsSettings(IntegrationSettings):
    """AWS configuration settings.

    Environment Variables:
        AWS_REGION: AWS region for service clients (default: us-east-1)
        AWS_ENDPOINT_URL: Endpoint override applied to every client (LocalStack, tests)
        AWS_ROLE_ARN: Optional role assumed to obtain signing credentials
        AWS_ROLE_SESSION_NAME: Session name used when assuming AWS_ROLE_ARN
        AWS_CONNECT_TIMEOUT: HTTP connect timeout in seconds (default: 60)
        AWS_READ_TIMEOUT: HTTP read timeout in seconds (default: 60)
        AWS_MAX_POOL_CONNECTIONS: HTTP connection pool size (default: 10)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        region = settings.aws.AWS_REGION
        endpoint = settings.aws.ENDPOINT_URL
        ```
    """

    AWS_REGION: str = Field(default="us-east-1", alias="AWS_REGION")
    ENDPOINT_URL: Optional[str] = Field(default=None, alias="AWS_ENDPOINT_URL")
    ROLE_ARN: str = Field(default="", alias="AWS_ROLE_ARN")
    ROLE_SESSION_NAME: str = Field(
        default="ServiceClientSession", alias="AWS_ROLE_SESSION_NAME"
    )
    CONNECT_TIMEOUT: float = Field(default=60.0, alias="AWS_CONNECT_TIMEOUT")
    READ_TIMEOUT: float = Field(default=60.0, alias="AWS_READ_TIMEOUT")
    MAX_POOL_CONNECTIONS: int = Field(default=10, alias="AWS_MAX_POOL_CONNECTIONS")

    THROTTLING_ERRS: list[str] = [
        "Throttling",
        "ThrottlingException",
        "TooManyRequestsException",
        "RequestLimitExceeded",
    ]
    RESOURCE_NOT_FOUND_ERRS: list[str] = [
        "ResourceNotFoundException",
        "NotFoundException",
        "NoSuchEntity",
    ]
