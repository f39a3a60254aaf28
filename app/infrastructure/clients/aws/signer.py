"""SigV4 request signing backed by botocore."""

from typing import Callable, Optional

from botocore.auth import SigV4Auth  # type: ignore
from botocore.awsrequest import AWSRequest  # type: ignore
from botocore.credentials import Credentials  # type: ignore
from botocore.exceptions import NoCredentialsError  # type: ignore

CredentialsSource = Callable[[], Optional[Credentials]]


class SigV4Signer:
    """Signs requests with AWS Signature Version 4.

    Credentials are fetched on every call so refreshed credentials are
    picked up.

    Args:
        credentials_source: Callable returning current credentials
            (typically `SessionProvider.get_credentials`)
        signing_name: Service signing name (e.g. "ses" for SESv2)
        region: Signing region
    """

    def __init__(
        self, credentials_source: CredentialsSource, signing_name: str, region: str
    ) -> None:
        self._credentials_source = credentials_source
        self.signing_name = signing_name
        self.region = region

    def sign(self, request: AWSRequest) -> None:
        """Add the Authorization (and security token) headers in place.

        Raises:
            NoCredentialsError: If no credentials can be found
        """
        credentials = self._credentials_source()
        if credentials is None:
            raise NoCredentialsError()
        SigV4Auth(credentials, self.signing_name, self.region).add_auth(request)
