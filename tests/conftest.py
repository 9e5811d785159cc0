"""
Pytest configuration for dumpling-bench.

Provides fixtures for:
- Fake connections that record every statement (unit tests)
- Database connection management (integration tests)
- Settings override for integration tests
"""

from __future__ import annotations

import os
from typing import Generator

import pymysql
import pytest

from dumpling_bench.config import Settings, get_settings
from dumpling_bench.infrastructure.db_factory import connect_kwargs


class FakeCursor:
    def __init__(self, connection: FakeConnection) -> None:
        self._connection = connection

    def execute(self, query: str) -> int:
        if self._connection.fail_on is not None and self._connection.fail_on in query:
            raise pymysql.err.OperationalError(1105, "injected failure")
        self._connection.executed.append(query)
        return 0

    def __enter__(self) -> FakeCursor:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        del exc_type, exc, tb
        return False


class FakeConnection:
    """Records statements instead of sending them to a server."""

    def __init__(self, fail_on: str | None = None) -> None:
        self.executed: list[str] = []
        self.fail_on = fail_on
        self.closed = False

    def cursor(self) -> FakeCursor:
        return FakeCursor(self)

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_connection() -> FakeConnection:
    return FakeConnection()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.

    Can be overridden via environment variables in CI or local testing.
    """
    return Settings(
        db_host=os.getenv("DB_HOST", "127.0.0.1"),
        db_port=int(os.getenv("DB_PORT", "4000")),
        db_user=os.getenv("DB_USER", "root"),
        db_password=os.getenv("DB_PASSWORD", ""),
        db_name=os.getenv("DB_NAME", "test"),
        log_level="DEBUG",
    )


@pytest.fixture(scope="session")
def db_connection_available(test_settings: Settings) -> bool:
    """
    Check if database is reachable.

    Used to conditionally skip integration tests when DB is not available.
    """
    kwargs = connect_kwargs(test_settings)
    kwargs["connect_timeout"] = 5
    try:
        conn = pymysql.connect(**kwargs)
    except pymysql.MySQLError:
        return False
    conn.close()
    return True


@pytest.fixture
def db_connection(
    test_settings: Settings, db_connection_available: bool
) -> Generator[pymysql.connections.Connection, None, None]:
    """
    Provide a database connection for integration tests.

    Skips tests if database is not available.
    """
    if not db_connection_available:
        pytest.skip("Database not available for integration tests")

    conn = pymysql.connect(**connect_kwargs(test_settings))
    try:
        yield conn
    finally:
        conn.close()
