"""
Export runner: invoke dumpling once against the benchmark table and time it.

The child's stdout and stderr are buffered in memory until it exits. A
nonzero exit status or a failure to launch is logged and re-raised; nothing
is retried and the files dumpling writes are never inspected.
"""

from __future__ import annotations

import subprocess
from typing import List, Optional

from dumpling_bench.config import Settings, get_settings
from dumpling_bench.domain.models import RunConfig
from dumpling_bench.prepare import TABLE_NAME
from dumpling_bench.utils.logging import get_logger
from dumpling_bench.utils.profiler import ProfileStats, profile_block

log = get_logger(__name__)

MEM_QUOTA_QUERY = 8 << 30
DUMP_LOGFILE = "dump.log"
DUMP_LOGLEVEL = "debug"
DUMP_THREADS = 32


def build_dump_args(config: RunConfig, settings: Optional[Settings] = None) -> List[str]:
    """Full argv for the dumpling process, binary first."""
    settings = settings or get_settings()
    return [
        config.dumpling_bin,
        "--host", settings.db_host,
        "--port", str(settings.db_port),
        "--filter", f"{settings.db_name}.{TABLE_NAME}",
        "--tidb-mem-quota-query", str(MEM_QUOTA_QUERY),
        "--logfile", DUMP_LOGFILE,
        "--rows", str(config.chunk_rows),
        "--loglevel", DUMP_LOGLEVEL,
        "--threads", str(DUMP_THREADS),
    ]  # fmt: skip


def _decode(output: Optional[bytes]) -> str:
    if not output:
        return ""
    return output.decode("utf-8", errors="replace")


def dump_data(config: RunConfig, settings: Optional[Settings] = None) -> ProfileStats:
    """
    Run dumpling and return the wall-clock timing of the child process.

    Raises
    ------
    subprocess.CalledProcessError
        If dumpling exits with a nonzero status.
    OSError
        If the binary cannot be launched.
    """
    args = build_dump_args(config, settings)
    log.info("Starting dumpling", extra={"binary": config.dumpling_bin, "chunk_rows": config.chunk_rows})

    with profile_block("dumpling") as stats:
        try:
            completed = subprocess.run(args, capture_output=True, check=True)
        except subprocess.CalledProcessError as exc:
            log.error(_decode(exc.stderr), extra={"returncode": exc.returncode})
            raise
        except OSError as exc:
            log.error("Failed to launch %s: %s", config.dumpling_bin, exc)
            raise

    log.info(_decode(completed.stdout))
    log.info(
        "dumpling took %.3fs",
        stats.duration_seconds,
        extra={"duration_seconds": stats.duration_seconds},
    )
    return stats


__all__ = [
    "DUMP_LOGFILE",
    "DUMP_THREADS",
    "MEM_QUOTA_QUERY",
    "build_dump_args",
    "dump_data",
]
