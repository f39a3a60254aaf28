"""Session provider for AWS client operations.

Centralizes boto3 session creation and credential handling for the service
clients. Credentials come from boto3's default chain, or from an assumed role
when a role ARN is configured.
"""

from typing import Optional

import boto3  # type: ignore
import structlog
from botocore.credentials import Credentials  # type: ignore

logger = structlog.get_logger()


class SessionProvider:
    """Centralized provider for AWS session configuration and credentials.

    Manages region, endpoint URL, and role assumption logic so per-service
    clients don't need to duplicate this code.

    Args:
        region: AWS region for all clients (e.g., 'us-east-1')
        role_arn: Optional role assumed through STS to obtain credentials
        role_session_name: Session name used for the assumed role
        endpoint_url: Custom endpoint URL (for testing/LocalStack)
        session: Pre-built boto3 session (tests, custom profiles)
    """

    def __init__(
        self,
        region: Optional[str] = None,
        role_arn: Optional[str] = None,
        role_session_name: str = "ServiceClientSession",
        endpoint_url: Optional[str] = None,
        session: Optional[boto3.Session] = None,
    ) -> None:
        self.region = region
        self.role_arn = role_arn or None
        self.role_session_name = role_session_name
        self.endpoint_url = endpoint_url
        self._session = session

    def get_session(self) -> boto3.Session:
        """Return the boto3 session, creating it on first use."""
        if self._session is None:
            self._session = self._create_session()
        return self._session

    def get_credentials(self) -> Optional[Credentials]:
        """Credentials used to sign requests, or None if none are available."""
        return self.get_session().get_credentials()

    def _create_session(self) -> boto3.Session:
        session_config = {}
        if self.region:
            session_config["region_name"] = self.region

        if not self.role_arn:
            logger.debug("creating_default_session", region=self.region)
            return boto3.Session(**session_config)

        logger.debug(
            "assuming_role",
            role_arn=self.role_arn,
            role_session_name=self.role_session_name,
        )
        sts = boto3.client("sts", **session_config)
        assumed = sts.assume_role(
            RoleArn=self.role_arn, RoleSessionName=self.role_session_name
        )
        creds = assumed["Credentials"]
        return boto3.Session(
            aws_access_key_id=creds["AccessKeyId"],
            aws_secret_access_key=creds["SecretAccessKey"],
            aws_session_token=creds["SessionToken"],
            **session_config,
        )
