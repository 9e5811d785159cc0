"""
Orchestrator sequencing the benchmark steps.

Usage (example from CLI):
    from dumpling_bench.domain.models import RunConfig
    from dumpling_bench.orchestrator import run_bench

    outcome = run_bench(RunConfig(rows=1_000, action="all"))

Steps run strictly in order: prepare (actions `prepare` and `all`) then
dump (actions `run` and `all`). A database connection is only opened when
the prepare step runs. Errors propagate untouched to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from dumpling_bench.config import Settings, get_settings
from dumpling_bench.domain.models import RunConfig
from dumpling_bench.export import dump_data
from dumpling_bench.infrastructure.db_factory import open_connection
from dumpling_bench.prepare import prepare_data
from dumpling_bench.utils.logging import get_logger
from dumpling_bench.utils.profiler import ProfileStats

log = get_logger(__name__)


@dataclass
class BenchOutcome:
    """What each executed step reported; `None` for steps that were skipped."""

    rows_inserted: Optional[int] = None
    dump_stats: Optional[ProfileStats] = None


def run_bench(config: RunConfig, settings: Optional[Settings] = None) -> BenchOutcome:
    """
    Run the steps selected by `config.action`.

    Parameters
    ----------
    config : RunConfig
        Validated per-run configuration.
    settings : Settings | None
        Connection target; defaults to the cached environment settings.
    """
    settings = settings or get_settings()
    outcome = BenchOutcome()

    if config.should_prepare:
        log.info("[PREPARE] start", extra={"action": config.action.value})
        with open_connection(settings) as conn:
            outcome.rows_inserted = prepare_data(conn, config)

    if config.should_run:
        log.info("[RUN] start", extra={"action": config.action.value})
        outcome.dump_stats = dump_data(config, settings)

    return outcome


__all__ = ["BenchOutcome", "run_bench"]
