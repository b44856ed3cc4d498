"""
Put-item loader: generate a record, write it, wait, repeat.

The loop is strictly sequential. Each iteration makes exactly one write
attempt; a StoreServiceError is echoed and the item is dropped, while any other
exception aborts the run. The pause between writes goes through an injected
`sleep` callable so tests never wait on the wall clock.

Usage:
    from item_loader.infrastructure import get_item_store
    from item_loader.loader import Loader

    loader = Loader(get_item_store(), table_name="ddb-sync-source")
    loader.run(iterations=1000, interval=2.0)
"""

from __future__ import annotations

import enum
import time
import uuid
from typing import Callable, Optional, TypedDict

import typer

from item_loader.domain.models import build_record
from item_loader.infrastructure.store import ItemStore, StoreServiceError
from item_loader.utils.logging import get_logger

log = get_logger(__name__)


class LoadResult(TypedDict):
    """Counters reported at the end of a run."""

    attempted: int
    succeeded: int
    failed: int
    duration_seconds: float


class LoaderState(str, enum.Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    COMPLETED = "completed"
    ABORTED = "aborted"


class Loader:
    """
    Drives the generate-write-wait cycle against a single table.

    Parameters
    ----------
    store : ItemStore
        Destination store; only its `put` method is used.
    table_name : str
        Table every record is written to.
    sleep : callable
        Blocking pause, called with the interval in seconds after each attempt.
    id_factory : callable
        Source of the unique value substituted into each record's artist.
    """

    def __init__(
        self,
        store: ItemStore,
        table_name: str,
        sleep: Callable[[float], None] = time.sleep,
        id_factory: Callable[[], uuid.UUID] = uuid.uuid4,
    ) -> None:
        self._store = store
        self._table_name = table_name
        self._sleep = sleep
        self._id_factory = id_factory
        self.state = LoaderState.NOT_STARTED

    def run(self, iterations: int, interval: float) -> LoadResult:
        """
        Write `iterations` records, pausing `interval` seconds after each.

        Raises
        ------
        ValueError
            If `iterations` is not positive or `interval` is negative.
        RuntimeError
            If this loader has already run.
        Exception
            Anything the store raises other than StoreServiceError; the loop
            stops at the failing iteration.
        """
        if iterations <= 0:
            raise ValueError(f"iterations must be positive, got {iterations}")
        if interval < 0:
            raise ValueError(f"interval must be non-negative, got {interval}")
        if self.state is not LoaderState.NOT_STARTED:
            raise RuntimeError(f"loader already {self.state.value}")

        self.state = LoaderState.RUNNING
        attempted = succeeded = failed = 0
        start = time.perf_counter()
        log.info(
            "Starting load",
            extra={"table": self._table_name, "iterations": iterations, "interval": interval},
        )

        try:
            for n in range(1, iterations + 1):
                record = build_record(seq=str(self._id_factory()))
                typer.echo(f"Writing item #{n}")
                attempted += 1
                try:
                    self._store.put(self._table_name, record.to_item())
                except StoreServiceError as exc:
                    failed += 1
                    typer.echo(exc.message)
                    log.debug(
                        "Write rejected",
                        extra={"iteration": n, "code": exc.code, "table": self._table_name},
                    )
                else:
                    succeeded += 1
                    log.debug("Write accepted", extra={"iteration": n})
                self._sleep(interval)
        except BaseException:
            self.state = LoaderState.ABORTED
            log.error("Load aborted", extra={"iteration": attempted, "table": self._table_name})
            raise

        self.state = LoaderState.COMPLETED
        result = LoadResult(
            attempted=attempted,
            succeeded=succeeded,
            failed=failed,
            duration_seconds=time.perf_counter() - start,
        )
        log.info("Load completed", extra=dict(result))
        return result


def run(
    store: ItemStore,
    table_name: str,
    iterations: int,
    interval: float,
    sleep: Optional[Callable[[float], None]] = None,
) -> LoadResult:
    """Convenience wrapper: build a Loader and run it once."""
    loader = Loader(store, table_name, sleep=sleep or time.sleep)
    return loader.run(iterations=iterations, interval=interval)


__all__ = ["LoadResult", "Loader", "LoaderState", "run"]
