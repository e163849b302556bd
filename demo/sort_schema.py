#!/usr/bin/env python3
"""Schema/types for sort benchmark runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

GateOutcome = Literal["pass", "fail", "warn", "na"]


@dataclass
class BenchmarkProfile:
    name: str
    warmup_runs: int
    measured_runs: int
    algorithms: list[str]  # SortAlgorithm values


@dataclass
class RunSample:
    run_index: int
    wall_time_s: float
    cpu_time_s: float
    records: int


@dataclass
class RunStats:
    samples: int
    median_cpu_s: float
    p95_cpu_s: float
    mad_cpu_s: float
    median_wall_s: float
    p95_wall_s: float
    median_ns_per_record: float


@dataclass
class GateStatus:
    sorted_order: GateOutcome
    permutation: GateOutcome
    stability: GateOutcome
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def failed(self) -> bool:
        return "fail" in (self.sorted_order, self.permutation, self.stability)
