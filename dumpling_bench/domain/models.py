"""
Domain models for dumpling-bench.

`RunConfig` is the validated, read-only set of knobs for a single benchmark
run. `SyntheticRow` mirrors the schema of the benchmark table `t`.
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

SKEWED_KEY = 2**63 - 1
PAYLOAD = "string_payload_payload_payload"


class Action(str, Enum):
    ALL = "all"
    PREPARE = "prepare"
    RUN = "run"


class RunConfig(BaseModel):
    """
    Immutable configuration for one invocation of the harness.
    """

    rows: int = Field(100_000, ge=0, description="Rows to generate in the table.")
    chunk_rows: int = Field(10_000, gt=0, description="Rows per chunk passed to dumpling.")
    regions: int = Field(16, ge=0, description="Regions to pre-split into (0 disables).")
    skewed: bool = Field(False, description="Insert one extreme-key outlier row.")
    dumpling_bin: str = Field("./dumpling", description="Path to the dumpling binary.")
    action: Action = Field(Action.ALL, description="Which steps to run.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    @field_validator("action", mode="before")
    @classmethod
    def _check_action(cls, value: object) -> object:
        if isinstance(value, Action):
            return value
        choices = {a.value for a in Action}
        if not isinstance(value, str) or value not in choices:
            raise ValueError(f"unrecognized action: {value}")
        return value

    @property
    def should_prepare(self) -> bool:
        return self.action in (Action.ALL, Action.PREPARE)

    @property
    def should_run(self) -> bool:
        return self.action in (Action.ALL, Action.RUN)


class SyntheticRow(BaseModel):
    """
    Representation of a single row in the `t` table.
    """

    a: int = Field(..., description="Primary key (BIGINT AUTO_INCREMENT).")
    b: int = Field(..., description="Mirrors the row ordinal.")
    c: int = Field(..., description="Mirrors the row ordinal.")
    d: str = Field(PAYLOAD, description="Constant filler payload.")

    model_config = {
        "frozen": True,
    }

    @classmethod
    def ordinal(cls, i: int) -> "SyntheticRow":
        return cls(a=i, b=i, c=i)

    @classmethod
    def skewed(cls, row_count: int) -> "SyntheticRow":
        """The single out-of-range row appended after `row_count` regular rows."""
        return cls(a=SKEWED_KEY, b=row_count + 1, c=row_count + 1)

    def as_sql_tuple(self) -> str:
        return f"({self.a}, {self.b}, {self.c}, '{self.d}')"


__all__ = ["Action", "PAYLOAD", "RunConfig", "SKEWED_KEY", "SyntheticRow"]
