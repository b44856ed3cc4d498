from __future__ import annotations

import pytest
from botocore.exceptions import EndpointConnectionError, NoCredentialsError
from botocore.stub import Stubber

from item_loader.infrastructure.credentials import CredentialCheckError, check_credentials

REGION = "us-west-2"
ACCOUNT = "123456789012"


class _CountingClient:
    def __init__(self, exc: Exception) -> None:
        self.calls = 0
        self._exc = exc

    def get_caller_identity(self):
        self.calls += 1
        raise self._exc


def test_returns_account_id(sts_client) -> None:
    with Stubber(sts_client) as stubber:
        stubber.add_response(
            "get_caller_identity",
            {"UserId": "AIDATEST", "Account": ACCOUNT, "Arn": f"arn:aws:iam::{ACCOUNT}:user/ci"},
        )
        assert check_credentials(REGION, client=sts_client) == ACCOUNT


def test_missing_account_is_rejected(sts_client) -> None:
    with Stubber(sts_client) as stubber:
        stubber.add_response("get_caller_identity", {"UserId": "AIDATEST"})
        with pytest.raises(CredentialCheckError, match="No active AWS credentials"):
            check_credentials(REGION, client=sts_client)


def test_missing_credentials_fail_without_retry() -> None:
    client = _CountingClient(NoCredentialsError())

    with pytest.raises(NoCredentialsError):
        check_credentials(REGION, client=client)

    assert client.calls == 1


def test_unreachable_endpoint_is_retried_once() -> None:
    client = _CountingClient(EndpointConnectionError(endpoint_url="https://sts.amazonaws.com"))

    with pytest.raises(EndpointConnectionError):
        check_credentials(REGION, client=client)

    assert client.calls == 2
