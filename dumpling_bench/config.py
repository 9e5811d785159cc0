"""
Configuration settings for dumpling-bench.

Uses Pydantic Settings to load environment variables for the database
connection target, logging, and the per-run benchmark defaults that CLI flags
override.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database (TiDB / MySQL protocol)
    db_host: str = Field("127.0.0.1", alias="DB_HOST")
    db_port: int = Field(4000, alias="DB_PORT")
    db_user: str = Field("root", alias="DB_USER")
    db_password: str = Field("", alias="DB_PASSWORD")
    db_name: str = Field("test", alias="DB_NAME")
    db_read_timeout: int = Field(900, alias="DB_READ_TIMEOUT")
    db_write_timeout: int = Field(30, alias="DB_WRITE_TIMEOUT")

    # Application
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Benchmark defaults
    benchmark_rows: int = Field(100_000, alias="BENCHMARK_ROWS")
    benchmark_chunk_rows: int = Field(10_000, alias="BENCHMARK_CHUNK_ROWS")
    benchmark_regions: int = Field(16, alias="BENCHMARK_REGIONS")
    dumpling_bin: str = Field("./dumpling", alias="DUMPLING_BIN")

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
