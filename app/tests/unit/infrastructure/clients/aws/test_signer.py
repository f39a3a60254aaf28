"""Unit tests for SigV4Signer."""

import pytest
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials
from botocore.exceptions import NoCredentialsError

from infrastructure.clients.aws.signer import SigV4Signer


def _request():
    return AWSRequest(
        method="GET",
        url="https://email.us-east-1.amazonaws.com/v2/email/account",
        headers={},
        data=b"",
    )


@pytest.mark.unit
class TestSigV4Signer:
    def test_adds_authorization_scoped_to_signing_name(self, static_credentials):
        request = _request()

        SigV4Signer(lambda: static_credentials, "ses", "us-east-1").sign(request)

        authorization = request.headers["Authorization"]
        assert authorization.startswith("AWS4-HMAC-SHA256 Credential=AKIDEXAMPLE/")
        assert "/us-east-1/ses/aws4_request" in authorization
        assert "X-Amz-Date" in request.headers

    def test_session_token_header(self):
        credentials = Credentials("AKID", "secret", "session-token")
        request = _request()

        SigV4Signer(lambda: credentials, "lightsail", "us-west-2").sign(request)

        assert request.headers["X-Amz-Security-Token"] == "session-token"

    def test_credentials_fetched_per_call(self, static_credentials):
        calls = []

        def _source():
            calls.append(1)
            return static_credentials

        signer = SigV4Signer(_source, "imagebuilder", "us-east-1")
        signer.sign(_request())
        signer.sign(_request())

        assert len(calls) == 2

    def test_missing_credentials_raise(self):
        with pytest.raises(NoCredentialsError):
            SigV4Signer(lambda: None, "ses", "us-east-1").sign(_request())
