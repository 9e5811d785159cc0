"""
Timing utilities for dumpling-bench.

The harness measures one thing: wall-clock time of the blocking export
process. `profile_block` wraps a block with `time.perf_counter` and yields a
`ProfileStats` that is filled in when the block exits, even on failure.

Usage:
    from dumpling_bench.utils.profiler import profile_block

    with profile_block("dumpling") as stats:
        subprocess.run([...], check=True)

    print(stats.duration_seconds)
"""

from __future__ import annotations

import contextlib
import time
from dataclasses import dataclass, field
from typing import Any, Generator


@dataclass
class ProfileStats:
    """
    Container for timing measurements.
    """

    label: str
    start_ts: float = field(default=0.0)
    end_ts: float = field(default=0.0)
    duration_seconds: float = field(default=0.0)
    extra: dict[str, Any] = field(default_factory=dict)


@contextlib.contextmanager
def profile_block(label: str) -> Generator[ProfileStats, None, None]:
    """
    Context manager measuring the wall-clock duration of a block.

    Parameters
    ----------
    label : str
        Human-friendly label for the timed block.
    """
    stats = ProfileStats(label=label)
    stats.start_ts = time.perf_counter()
    try:
        yield stats
    finally:
        stats.end_ts = time.perf_counter()
        stats.duration_seconds = stats.end_ts - stats.start_ts


__all__ = ["ProfileStats", "profile_block"]
