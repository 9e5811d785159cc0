"""
Domain package for dumpling-bench.

Exports the run configuration and the synthetic row schema.
"""

from dumpling_bench.domain.models import PAYLOAD, SKEWED_KEY, Action, RunConfig, SyntheticRow

__all__ = [
    "Action",
    "PAYLOAD",
    "RunConfig",
    "SKEWED_KEY",
    "SyntheticRow",
]
