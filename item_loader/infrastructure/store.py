"""
Item store contract for the item loader.

The loader talks to its destination through the ItemStore protocol so the
DynamoDB-backed store can be swapped for an in-memory double in tests.
Only StoreServiceError is treated as recoverable by callers; anything else a
store raises is fatal.
"""

from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence, runtime_checkable


class StoreServiceError(Exception):
    """
    A structured failure returned by the storage service for one request
    (throttling, validation, internal server error, ...).
    """

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return self.message


@runtime_checkable
class ItemStore(Protocol):
    """
    Destination table-store interface.
    """

    def put(self, table: str, item: Mapping[str, str]) -> None:
        """
        Write a single item.

        Raises
        ------
        StoreServiceError
            If the service rejects or fails the write.
        """
        ...

    def put_batch(self, table: str, items: Sequence[Mapping[str, str]]) -> int:
        """
        Write several items in one request and return how many were left
        unprocessed by the service.
        """
        ...


__all__ = ["ItemStore", "StoreServiceError"]
