"""
DynamoDB client factory and store adapter for the item loader.

Provides centralized management of boto3 DynamoDB clients with proper
lifecycle management. The ClientManager singleton builds one client per region
and closes them on application exit.

DynamoItemStore adapts a client to the ItemStore protocol, translating
botocore ClientError (a service-level rejection) into StoreServiceError.
Transport and credential failures are left to propagate.
"""

from __future__ import annotations

import atexit
import threading
from typing import Any, Dict, Mapping, Optional, Sequence

import boto3
from boto3.dynamodb.types import TypeSerializer
from botocore.exceptions import ClientError

from item_loader.config import Settings, get_settings
from item_loader.infrastructure.store import StoreServiceError
from item_loader.utils.logging import get_logger

log = get_logger(__name__)


class ClientManager:
    """
    Thread-safe singleton for managing boto3 DynamoDB clients.

    Handles lifecycle management with automatic cleanup via atexit hook.
    """

    _instance: Optional["ClientManager"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "ClientManager":
        """Create or return the singleton instance."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._clients: Dict[str, Any] = {}
                atexit.register(cls._instance.close_all)
            return cls._instance

    def get_client(self, region: str) -> Any:
        """
        Get or create the DynamoDB client for a region.

        Parameters
        ----------
        region : str
            AWS region name (e.g., "us-west-2").

        Returns
        -------
        botocore.client.DynamoDB
            The managed client instance.
        """
        with self._lock:
            client = self._clients.get(region)
            if client is None:
                client = create_dynamodb_client(region)
                self._clients[region] = client
            return client

    def close_all(self) -> None:
        """
        Close all managed clients and release their HTTP connection pools.

        This is called automatically on exit via atexit hook.
        """
        with self._lock:
            clients, self._clients = self._clients, {}
        for region, client in clients.items():
            try:
                client.close()
            except Exception:
                log.debug("Ignoring error while closing client", extra={"region": region})


def create_dynamodb_client(region: str) -> Any:
    """Build a fresh DynamoDB client bound to `region`."""
    session = boto3.session.Session(region_name=region)
    return session.client("dynamodb")


class DynamoItemStore:
    """
    ItemStore backed by a boto3 DynamoDB client.
    """

    def __init__(self, client: Any) -> None:
        self._client = client
        self._serializer = TypeSerializer()

    def _serialize(self, item: Mapping[str, str]) -> Dict[str, Any]:
        return {name: self._serializer.serialize(value) for name, value in item.items()}

    def put(self, table: str, item: Mapping[str, str]) -> None:
        try:
            self._client.put_item(TableName=table, Item=self._serialize(item))
        except ClientError as exc:
            raise _service_error(exc) from exc

    def put_batch(self, table: str, items: Sequence[Mapping[str, str]]) -> int:
        """
        Write `items` with a single BatchWriteItem call.

        Returns
        -------
        int
            Number of put requests the service reported as unprocessed.
        """
        request_items = {
            table: [{"PutRequest": {"Item": self._serialize(item)}} for item in items]
        }
        try:
            response = self._client.batch_write_item(RequestItems=request_items)
        except ClientError as exc:
            raise _service_error(exc) from exc
        unprocessed = response.get("UnprocessedItems") or {}
        return sum(len(requests) for requests in unprocessed.values())


def _service_error(exc: ClientError) -> StoreServiceError:
    error = exc.response.get("Error", {})
    return StoreServiceError(error.get("Message") or str(exc), code=error.get("Code"))


def get_item_store(settings: Optional[Settings] = None) -> DynamoItemStore:
    """
    Build the DynamoDB-backed store for the configured region.

    The underlying client is shared for the life of the process.
    """
    settings = settings or get_settings()
    return DynamoItemStore(ClientManager().get_client(settings.aws_region))


__all__ = [
    "ClientManager",
    "DynamoItemStore",
    "create_dynamodb_client",
    "get_item_store",
]
