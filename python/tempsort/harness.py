"""
Timing harness for the two record sorts.

measure() times a single sort call and returns elapsed seconds.
profile_sort() captures wall and CPU time together, and compare_sorts()
runs both algorithms over independent copies of one extracted collection.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Literal

from tempsort.records import RecordCollection
from tempsort.sorts import Records, SortAlgorithm, sort_function

Clock = Literal["cpu", "wall"]

_CLOCKS = {
    "cpu": time.process_time_ns,
    "wall": time.perf_counter_ns,
}


def measure(
    records: Records,
    count: int,
    algorithm: SortAlgorithm,
    *,
    clock: Clock = "cpu",
) -> float:
    """
    Sort records[0..count-1] with algorithm and return the elapsed seconds.

    Args:
        records: Mutable record sequence, sorted in place.
        count: Number of leading records to sort.
        algorithm: Which sort to run.
        clock: "cpu" for process CPU time (default), "wall" for a
            monotonic wall clock.

    Returns:
        Non-negative elapsed time in seconds.

    Raises:
        ValueError: Unknown algorithm or clock, or count outside
            [0, len(records)].
    """
    sort = sort_function(algorithm)
    try:
        now = _CLOCKS[clock]
    except KeyError:
        raise ValueError(f"clock must be 'cpu' or 'wall', not {clock!r}") from None
    if count < 0 or count > len(records):
        raise ValueError(f"count {count} outside [0, {len(records)}]")

    start = now()
    sort(records, 0, count - 1)
    end = now()
    return max(0, end - start) / 1e9


@dataclass
class SortTiming:
    """Wall and CPU time of one sort run."""

    algorithm: SortAlgorithm
    records: int
    wall_time_s: float = 0.0
    cpu_time_s: float = 0.0

    @property
    def records_per_sec(self) -> float:
        return self.records / self.wall_time_s if self.wall_time_s > 0 else 0.0

    @property
    def ns_per_record(self) -> float:
        return (self.wall_time_s * 1e9) / self.records if self.records > 0 else 0.0


def profile_sort(records: Records, algorithm: SortAlgorithm) -> SortTiming:
    """Sort all of records with algorithm, timing wall and CPU clocks."""
    sort = sort_function(algorithm)
    count = len(records)

    # Timing order matters: CPU clock inside the wall clock window.
    start_wall = time.perf_counter_ns()
    start_cpu = time.process_time_ns()
    sort(records, 0, count - 1)
    end_cpu = time.process_time_ns()
    end_wall = time.perf_counter_ns()

    return SortTiming(
        algorithm=algorithm,
        records=count,
        wall_time_s=max(0, end_wall - start_wall) / 1e9,
        cpu_time_s=max(0, end_cpu - start_cpu) / 1e9,
    )


@dataclass
class ComparisonResult:
    """Outcome of sorting one collection with every algorithm."""

    source: RecordCollection
    sorted_by: dict[SortAlgorithm, RecordCollection]
    timings: dict[SortAlgorithm, SortTiming]


def compare_sorts(
    collection: RecordCollection,
    algorithms: tuple[SortAlgorithm, ...] = (SortAlgorithm.QUICK, SortAlgorithm.MERGE),
) -> ComparisonResult:
    """
    Sort an independent copy of collection with each algorithm.

    The input collection is left untouched.
    """
    sorted_by: dict[SortAlgorithm, RecordCollection] = {}
    timings: dict[SortAlgorithm, SortTiming] = {}
    for algorithm in algorithms:
        work = collection.copy()
        timings[algorithm] = profile_sort(work, algorithm)
        sorted_by[algorithm] = work
    return ComparisonResult(source=collection, sorted_by=sorted_by, timings=timings)


def faster_algorithm(
    timings: dict[SortAlgorithm, SortTiming],
    *,
    clock: Clock = "cpu",
) -> SortAlgorithm | None:
    """Return the algorithm with the smallest time, or None on a tie."""
    attr = "cpu_time_s" if clock == "cpu" else "wall_time_s"
    ranked = sorted(timings.values(), key=lambda t: getattr(t, attr))
    if not ranked:
        return None
    if len(ranked) > 1 and getattr(ranked[0], attr) == getattr(ranked[1], attr):
        return None
    return ranked[0].algorithm
