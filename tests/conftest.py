"""
Pytest configuration for the item loader.

Provides fixtures for:
- In-memory item stores (always succeeding, failing, or scripted per call)
- A recording sleeper so loader tests never wait on the wall clock
- Settings with test-specific overrides
- A stub-friendly DynamoDB client with dummy credentials
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

import boto3
import pytest

from item_loader.config import Settings
from item_loader.infrastructure.store import StoreServiceError

TEST_REGION = "us-west-2"
TEST_TABLE = "item-loader-test"


class FakeStore:
    """
    In-memory ItemStore.

    `failures` maps a 1-based call number to the exception raised on that call;
    `fail_always` raises the same exception on every call.
    """

    def __init__(
        self,
        failures: Optional[Dict[int, BaseException]] = None,
        fail_always: Optional[BaseException] = None,
        unprocessed: int = 0,
    ) -> None:
        self.calls: List[tuple[str, Dict[str, str]]] = []
        self.batch_calls: List[tuple[str, List[Dict[str, str]]]] = []
        self._failures = failures or {}
        self._fail_always = fail_always
        self._unprocessed = unprocessed

    def _maybe_fail(self, call_number: int) -> None:
        if self._fail_always is not None:
            raise self._fail_always
        if call_number in self._failures:
            raise self._failures[call_number]

    def put(self, table: str, item: Mapping[str, str]) -> None:
        self.calls.append((table, dict(item)))
        self._maybe_fail(len(self.calls))

    def put_batch(self, table: str, items: Sequence[Mapping[str, str]]) -> int:
        self.batch_calls.append((table, [dict(item) for item in items]))
        self._maybe_fail(len(self.batch_calls))
        return self._unprocessed


class RecordingSleeper:
    def __init__(self) -> None:
        self.calls: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def throttled_store() -> FakeStore:
    return FakeStore(
        fail_always=StoreServiceError(
            "Rate of requests exceeds the allowed throughput.",
            code="ProvisionedThroughputExceededException",
        )
    )


@pytest.fixture
def make_store() -> Callable[..., FakeStore]:
    return FakeStore


@pytest.fixture
def sleeper() -> RecordingSleeper:
    return RecordingSleeper()


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides; never reads `.env`.
    """
    return Settings(
        _env_file=None,
        aws_region=TEST_REGION,
        table_name=TEST_TABLE,
        loader_iterations=3,
        loader_interval_s=0.0,
        batch_count=2,
        log_level="DEBUG",
    )


@pytest.fixture
def dynamodb_client() -> Any:
    """
    Real botocore client with dummy credentials, meant to be wrapped in a
    botocore Stubber; it must never reach AWS.
    """
    return boto3.client(
        "dynamodb",
        region_name=TEST_REGION,
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def sts_client() -> Any:
    return boto3.client(
        "sts",
        region_name=TEST_REGION,
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
