"""
Configuration settings for the item loader.

Uses Pydantic Settings to load the target region and table, the loader's
iteration count and pause, and logging options. Defaults reproduce the fixed
values the loader has always run with; the environment (or a local `.env`)
is the only override path.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # AWS target
    aws_region: str = Field("us-west-2", alias="AWS_REGION")
    table_name: str = Field("ddb-sync-source", alias="ITEM_LOADER_TABLE")

    # Loader defaults
    loader_iterations: int = Field(1000, alias="ITEM_LOADER_ITERATIONS", gt=0)
    loader_interval_s: float = Field(2.0, alias="ITEM_LOADER_INTERVAL", ge=0)
    batch_count: int = Field(500, alias="ITEM_LOADER_BATCHES", gt=0)

    # Application
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
