"""
Utilities package for dumpling-bench.

Exports shared helpers for logging and timing.
Keep this package lightweight and free of domain-specific logic.
"""

from dumpling_bench.utils.logging import configure_logging, get_logger
from dumpling_bench.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
]
