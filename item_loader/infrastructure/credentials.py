"""
Fast preflight check for active AWS credentials.

Asks STS who the caller is with a one-second timeout and a single botocore
attempt, so a missing or broken credential chain fails before the loader
starts writing. Transient transport errors get one more try via tenacity.
"""

from __future__ import annotations

from typing import Any, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import ConnectTimeoutError, EndpointConnectionError, ReadTimeoutError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from item_loader.utils.logging import get_logger

log = get_logger(__name__)

_QUICK_CONFIG = Config(
    connect_timeout=1,
    read_timeout=1,
    retries={"max_attempts": 1, "mode": "standard"},
)


class CredentialCheckError(Exception):
    """Raised when the caller identity carries no account."""


def create_sts_client(region: str) -> Any:
    session = boto3.session.Session(region_name=region)
    return session.client("sts", config=_QUICK_CONFIG)


@retry(
    stop=stop_after_attempt(2),
    wait=wait_exponential(multiplier=0.5, min=0.5, max=2),
    retry=retry_if_exception_type(
        (EndpointConnectionError, ConnectTimeoutError, ReadTimeoutError)
    ),
    reraise=True,
)
def check_credentials(region: str, client: Optional[Any] = None) -> str:
    """
    Verify that the default credential chain resolves to an AWS account.

    Parameters
    ----------
    region : str
        Region used for the STS endpoint.
    client : optional
        Pre-built STS client (tests pass a stubbed one).

    Returns
    -------
    str
        The caller's account id.

    Raises
    ------
    CredentialCheckError
        If STS answers without an account.
    botocore.exceptions.BotoCoreError, botocore.exceptions.ClientError
        If credentials are missing or rejected, or STS is unreachable after
        the retry.
    """
    sts = client or create_sts_client(region)
    identity = sts.get_caller_identity()
    account = identity.get("Account") or ""
    if not account:
        raise CredentialCheckError("No active AWS credentials")
    log.debug("Credentials resolved", extra={"account": account, "region": region})
    return account


__all__ = ["CredentialCheckError", "check_credentials", "create_sts_client"]
