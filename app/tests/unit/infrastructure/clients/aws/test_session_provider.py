"""Unit tests for SessionProvider."""

from unittest.mock import MagicMock

import pytest

from infrastructure.clients.aws import session_provider as session_provider_module
from infrastructure.clients.aws.session_provider import SessionProvider


@pytest.fixture
def mock_boto3(monkeypatch):
    """Replace boto3 in the session provider module with a MagicMock."""
    boto3 = MagicMock()
    boto3.client.return_value.assume_role.return_value = {
        "Credentials": {
            "AccessKeyId": "ASIATEST",
            "SecretAccessKey": "secret",
            "SessionToken": "token",
        }
    }
    monkeypatch.setattr(session_provider_module, "boto3", boto3)
    return boto3


@pytest.mark.unit
class TestSessionProvider:
    def test_default_session_uses_region(self, mock_boto3):
        provider = SessionProvider(region="ca-central-1")

        session = provider.get_session()

        mock_boto3.Session.assert_called_once_with(region_name="ca-central-1")
        mock_boto3.client.assert_not_called()
        assert session is mock_boto3.Session.return_value

    def test_session_is_created_once(self, mock_boto3):
        provider = SessionProvider(region="ca-central-1")

        provider.get_session()
        provider.get_session()

        assert mock_boto3.Session.call_count == 1

    def test_assume_role_session(self, mock_boto3):
        provider = SessionProvider(
            region="us-east-1",
            role_arn="arn:aws:iam::123456789012:role/Ops",
            role_session_name="ops-session",
        )

        provider.get_session()

        mock_boto3.client.assert_called_once_with("sts", region_name="us-east-1")
        mock_boto3.client.return_value.assume_role.assert_called_once_with(
            RoleArn="arn:aws:iam::123456789012:role/Ops",
            RoleSessionName="ops-session",
        )
        mock_boto3.Session.assert_called_once_with(
            aws_access_key_id="ASIATEST",
            aws_secret_access_key="secret",
            aws_session_token="token",
            region_name="us-east-1",
        )

    def test_empty_role_arn_means_default_chain(self, mock_boto3):
        provider = SessionProvider(region="us-east-1", role_arn="")

        provider.get_session()

        assert provider.role_arn is None
        mock_boto3.client.assert_not_called()

    def test_get_credentials_reads_from_session(self, static_credentials):
        session = MagicMock()
        session.get_credentials.return_value = static_credentials

        provider = SessionProvider(region="us-east-1", session=session)

        assert provider.get_credentials() is static_credentials

    def test_get_credentials_none_when_unavailable(self):
        session = MagicMock()
        session.get_credentials.return_value = None

        assert SessionProvider(session=session).get_credentials() is None
