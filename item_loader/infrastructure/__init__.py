"""
Infrastructure package for the item loader.

Centralizes AWS connectivity concerns (DynamoDB clients, the item store
adapter, the credential preflight). Keep this layer focused on I/O and
resource management, decoupled from loader logic.
"""

from item_loader.infrastructure.credentials import CredentialCheckError, check_credentials
from item_loader.infrastructure.dynamo_factory import (
    ClientManager,
    DynamoItemStore,
    create_dynamodb_client,
    get_item_store,
)
from item_loader.infrastructure.store import ItemStore, StoreServiceError

__all__ = [
    "ClientManager",
    "CredentialCheckError",
    "DynamoItemStore",
    "ItemStore",
    "StoreServiceError",
    "check_credentials",
    "create_dynamodb_client",
    "get_item_store",
]
