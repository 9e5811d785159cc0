"""
Database connection factory utilities for dumpling-bench.

The harness borrows a single synchronous PyMySQL connection for the whole
prepare step. Every statement goes through `run_sql`, which logs a truncated
copy of the statement before sending it. There are no retries: connection and
statement errors propagate to the caller.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

import pymysql
from pymysql.connections import Connection

from dumpling_bench.config import Settings, get_settings
from dumpling_bench.utils.logging import get_logger

log = get_logger(__name__)

# Largest packet the MySQL protocol allows.
MAX_ALLOWED_PACKET = 1 << 30
LOGGED_SQL_CHARS = 30


def connect_kwargs(settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Compose PyMySQL connection arguments from settings."""
    settings = settings or get_settings()
    return {
        "host": settings.db_host,
        "port": settings.db_port,
        "user": settings.db_user,
        "password": settings.db_password,
        "database": settings.db_name,
        "charset": "utf8mb4",
        "read_timeout": settings.db_read_timeout,
        "write_timeout": settings.db_write_timeout,
        "max_allowed_packet": MAX_ALLOWED_PACKET,
        "autocommit": True,
    }


def get_sync_connection(settings: Optional[Settings] = None) -> Connection:
    """
    Open a dedicated synchronous connection.

    Raises
    ------
    pymysql.MySQLError
        If the server cannot be reached or rejects the credentials.
    """
    kwargs = connect_kwargs(settings)
    log.debug(
        "Connecting to database",
        extra={"host": kwargs["host"], "port": kwargs["port"], "database": kwargs["database"]},
    )
    return pymysql.connect(**kwargs)


@contextmanager
def open_connection(settings: Optional[Settings] = None) -> Generator[Connection, None, None]:
    """
    Context manager yielding a connection that is closed on exit.

    Example
    -------
        with open_connection() as conn:
            run_sql(conn, "select 1")
    """
    conn = get_sync_connection(settings)
    try:
        yield conn
    finally:
        conn.close()


def truncate_sql(query: str, limit: int = LOGGED_SQL_CHARS) -> str:
    if len(query) > limit:
        return query[:limit] + "..."
    return query


def run_sql(conn: Connection, query: str) -> None:
    """Log `query` (truncated) and execute it, propagating any error."""
    log.info(truncate_sql(query))
    with conn.cursor() as cur:
        cur.execute(query)


__all__ = [
    "connect_kwargs",
    "get_sync_connection",
    "open_connection",
    "run_sql",
    "truncate_sql",
]
