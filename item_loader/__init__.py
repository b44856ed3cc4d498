"""
item-loader - write synthetic items to a DynamoDB table at a steady pace.

The package generates throwaway records and loads them into a table, either
one put per interval (to exercise change streams and replication against a
live source table) or in 25-item batches (to seed a table quickly):

- Put-item loader with a fixed pause between writes
- BatchWriteItem writer
- Credential preflight via STS

Service-level rejections are echoed and skipped; every other failure stops
the run.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from item_loader.batch import run_batches
from item_loader.config import Settings, get_settings
from item_loader.domain.models import Record, build_batch_record, build_record
from item_loader.infrastructure.dynamo_factory import DynamoItemStore, get_item_store
from item_loader.infrastructure.store import ItemStore, StoreServiceError
from item_loader.loader import LoadResult, Loader, LoaderState
from item_loader.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Records
    "Record",
    "build_record",
    "build_batch_record",
    # Stores
    "ItemStore",
    "StoreServiceError",
    "DynamoItemStore",
    "get_item_store",
    # Loading
    "Loader",
    "LoaderState",
    "LoadResult",
    "run_batches",
    # Logging
    "configure_logging",
    "get_logger",
]
