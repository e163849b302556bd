#!/usr/bin/env python3
"""Statistics over repeated sort timings (stdlib-only)."""

from __future__ import annotations

import math
import statistics

from sort_schema import RunSample, RunStats


def percentile(values: list[float], p: float) -> float:
    if not values:
        return 0.0
    if len(values) == 1:
        return values[0]
    s = sorted(values)
    pos = (len(s) - 1) * p
    lo = int(math.floor(pos))
    hi = int(math.ceil(pos))
    if lo == hi:
        return s[lo]
    w = pos - lo
    return s[lo] * (1.0 - w) + s[hi] * w


def mad(values: list[float]) -> float:
    if not values:
        return 0.0
    med = statistics.median(values)
    deviations = [abs(v - med) for v in values]
    return statistics.median(deviations)


def compute_run_stats(samples: list[RunSample]) -> RunStats:
    cpu = [s.cpu_time_s for s in samples]
    wall = [s.wall_time_s for s in samples]
    per_record = [
        (s.wall_time_s * 1e9) / s.records for s in samples if s.records > 0
    ]
    return RunStats(
        samples=len(samples),
        median_cpu_s=statistics.median(cpu) if cpu else 0.0,
        p95_cpu_s=percentile(cpu, 0.95),
        mad_cpu_s=mad(cpu),
        median_wall_s=statistics.median(wall) if wall else 0.0,
        p95_wall_s=percentile(wall, 0.95),
        median_ns_per_record=statistics.median(per_record) if per_record else 0.0,
    )
