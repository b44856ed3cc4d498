from __future__ import annotations

import json
import sys
from typing import Optional

import typer

from item_loader.batch import run_batches
from item_loader.config import get_settings
from item_loader.infrastructure import check_credentials, get_item_store
from item_loader.loader import Loader
from item_loader.utils.logging import configure_logging

app = typer.Typer(help="Write synthetic items to a DynamoDB table.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"table={settings.table_name} region={settings.aws_region} | "
        f"iterations={settings.loader_iterations} interval={settings.loader_interval_s}s "
        f"batches={settings.batch_count}"
    )


@app.command()
def check() -> None:
    """
    Verify that AWS credentials resolve to an account.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    account = check_credentials(settings.aws_region)
    typer.echo(f"Credentials OK (account {account}, region {settings.aws_region}).")


@app.command()
def run(
    iterations: Optional[int] = typer.Option(
        None,
        "--iterations",
        "-n",
        min=1,
        help="Number of items to write (default from settings).",
    ),
    interval: Optional[float] = typer.Option(
        None,
        "--interval",
        "-i",
        min=0.0,
        help="Seconds to pause after each write (default from settings).",
    ),
) -> None:
    """
    Write items one at a time, pausing between writes.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    loader = Loader(get_item_store(settings), table_name=settings.table_name)
    result = loader.run(
        iterations=iterations or settings.loader_iterations,
        interval=settings.loader_interval_s if interval is None else interval,
    )
    typer.echo(json.dumps(result, indent=2), err=True)


@app.command()
def batch(
    table: Optional[str] = typer.Argument(
        None,
        help="Destination table (default from settings).",
    ),
    batches: Optional[int] = typer.Option(
        None,
        "--batches",
        "-b",
        min=1,
        help="Number of 25-item batches to send (default from settings).",
    ),
) -> None:
    """
    Fill a table with BatchWriteItem requests, as fast as the service allows.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    result = run_batches(
        get_item_store(settings),
        table_name=table or settings.table_name,
        batches=batches or settings.batch_count,
    )
    typer.echo(json.dumps(result, indent=2), err=True)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
