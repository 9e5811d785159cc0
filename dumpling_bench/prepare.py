"""
Data preparation for the dumpling benchmark.

Recreates table `t`, optionally pre-splits it into regions, then bulk-inserts
`rows` synthetic rows as multi-row INSERT statements of bounded size. With
`skewed` set, a single extra row keyed at the largest signed 64-bit integer
is appended so the export has to cope with one far-away key.

Nothing here is transactional: a failure part way through leaves whatever was
already inserted in place.
"""

from __future__ import annotations

from typing import Iterator, List

from pymysql.connections import Connection

from dumpling_bench.domain.models import RunConfig, SyntheticRow
from dumpling_bench.infrastructure.db_factory import run_sql
from dumpling_bench.utils.logging import get_logger

log = get_logger(__name__)

TABLE_NAME = "t"
INSERT_BATCH_BYTES = 1_000_000

DROP_SQL = f"drop table if exists {TABLE_NAME};"
CREATE_SQL = (
    f"create table {TABLE_NAME} "
    "(a bigint primary key auto_increment, b int, c int, d varchar(255));"
)


def split_sql(rows: int, regions: int) -> str:
    return f"split table {TABLE_NAME} between (0) and ({rows}) regions {regions}"


def _insert_sql(values: str) -> str:
    return f"insert into {TABLE_NAME} values {values};"


def iter_insert_statements(rows: int, batch_bytes: int = INSERT_BATCH_BYTES) -> Iterator[str]:
    """
    Yield INSERT statements covering rows 1..`rows`.

    Tuples are joined with commas into a value list; the list is emitted
    before it would grow past `batch_bytes`, and whatever remains after the
    last row is emitted as a final partial batch.
    """
    parts: List[str] = []
    size = 0
    for i in range(1, rows + 1):
        value = SyntheticRow.ordinal(i).as_sql_tuple()
        extra = len(value) + (1 if parts else 0)
        if parts and size + extra > batch_bytes:
            yield _insert_sql(",".join(parts))
            parts.clear()
            size = 0
            extra = len(value)
        parts.append(value)
        size += extra
    if parts:
        yield _insert_sql(",".join(parts))


def skewed_insert_sql(rows: int) -> str:
    return _insert_sql(SyntheticRow.skewed(rows).as_sql_tuple())


def prepare_statements(config: RunConfig, batch_bytes: int = INSERT_BATCH_BYTES) -> Iterator[str]:
    """Yield every statement the prepare step sends, in order."""
    yield DROP_SQL
    yield CREATE_SQL
    if config.regions != 0:
        yield split_sql(config.rows, config.regions)
    yield from iter_insert_statements(config.rows, batch_bytes)
    if config.skewed:
        yield skewed_insert_sql(config.rows)


def prepare_data(
    conn: Connection, config: RunConfig, batch_bytes: int = INSERT_BATCH_BYTES
) -> int:
    """
    Populate the benchmark table on `conn`.

    Returns the number of rows inserted (`rows`, plus one when skewed).
    The first failing statement aborts the step; its error propagates.
    """
    log.info(
        "Preparing table",
        extra={
            "table": TABLE_NAME,
            "rows": config.rows,
            "regions": config.regions,
            "skewed": config.skewed,
        },
    )
    statements = 0
    for query in prepare_statements(config, batch_bytes):
        run_sql(conn, query)
        statements += 1

    inserted = config.rows + (1 if config.skewed else 0)
    log.info(
        "Table prepared",
        extra={"table": TABLE_NAME, "rows": inserted, "statements": statements},
    )
    return inserted


__all__ = [
    "CREATE_SQL",
    "DROP_SQL",
    "INSERT_BATCH_BYTES",
    "TABLE_NAME",
    "iter_insert_statements",
    "prepare_data",
    "prepare_statements",
    "skewed_insert_sql",
    "split_sql",
]
