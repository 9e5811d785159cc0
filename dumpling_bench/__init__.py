"""
dumpling-bench - load generator and timing harness for the Dumpling export tool.

The package fills a TiDB / MySQL table with synthetic rows (optionally with a
single skewed outlier key), then runs the external `dumpling` binary against
it and reports how long the export took:

- Configuration from CLI flags and environment settings
- Table (re)creation, region pre-splitting and batched inserts
- One timed, fully captured dumpling invocation
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from dumpling_bench.config import Settings, get_settings
from dumpling_bench.domain.models import Action, RunConfig, SyntheticRow
from dumpling_bench.export import build_dump_args, dump_data
from dumpling_bench.orchestrator import BenchOutcome, run_bench
from dumpling_bench.prepare import prepare_data
from dumpling_bench.utils.logging import configure_logging, get_logger
from dumpling_bench.utils.profiler import ProfileStats, profile_block

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    "Action",
    "RunConfig",
    "SyntheticRow",
    # Steps
    "prepare_data",
    "build_dump_args",
    "dump_data",
    # Orchestration
    "BenchOutcome",
    "run_bench",
    # Logging
    "configure_logging",
    "get_logger",
    # Timing
    "ProfileStats",
    "profile_block",
]
