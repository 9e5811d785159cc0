"""
Infrastructure package for dumpling-bench.

Centralizes database connectivity concerns. Keep this layer focused on I/O
and resource management, decoupled from the preparer and orchestrator logic.
"""

from dumpling_bench.infrastructure.db_factory import (
    connect_kwargs,
    get_sync_connection,
    open_connection,
    run_sql,
    truncate_sql,
)

__all__ = [
    "connect_kwargs",
    "get_sync_connection",
    "open_connection",
    "run_sql",
    "truncate_sql",
]
