#!/usr/bin/env python3
"""Core execution engine for sort benchmarks."""

from __future__ import annotations

import os
import platform
import sys
from collections import Counter
from dataclasses import asdict
from typing import Any

import psutil

from sort_models import compute_run_stats
from sort_schema import BenchmarkProfile, GateStatus, RunSample
from tempsort import RecordCollection, SortAlgorithm, profile_sort


def check_sorted(records: RecordCollection) -> tuple[bool, str]:
    for i in range(len(records) - 1):
        if records[i].value > records[i + 1].value:
            return False, f"values out of order at index {i}: {records[i].value} > {records[i + 1].value}"
    return True, "ok"


def check_permutation(original: RecordCollection, result: RecordCollection) -> tuple[bool, str]:
    if len(original) != len(result):
        return False, f"size changed: {len(original)} -> {len(result)}"
    if Counter(original) != Counter(result):
        return False, "sorted output is not a permutation of the input records"
    return True, "ok"


def check_stable(original: RecordCollection, result: RecordCollection) -> tuple[bool, str]:
    # sorted() is stable, so it is the reference ordering for equal values.
    expected = sorted(original, key=lambda r: r.value)
    for i, (want, got) in enumerate(zip(expected, result)):
        if want != got:
            return False, f"equal-valued records reordered at index {i}"
    return True, "ok"


def evaluate_gates(
    algorithm: SortAlgorithm,
    original: RecordCollection,
    result: RecordCollection,
) -> GateStatus:
    failures: list[str] = []

    ok, msg = check_sorted(result)
    sorted_gate = "pass" if ok else "fail"
    if not ok:
        failures.append(msg)

    ok, msg = check_permutation(original, result)
    perm_gate = "pass" if ok else "fail"
    if not ok:
        failures.append(msg)

    # Only merge sort promises stability.
    stability_gate = "na"
    if algorithm is SortAlgorithm.MERGE:
        ok, msg = check_stable(original, result)
        stability_gate = "pass" if ok else "fail"
        if not ok:
            failures.append(msg)

    return GateStatus(
        sorted_order=sorted_gate,
        permutation=perm_gate,
        stability=stability_gate,
        details={"failures": failures},
    )


def run_algorithm(
    collection: RecordCollection,
    algorithm: SortAlgorithm,
    warmup_runs: int,
    measured_runs: int,
) -> tuple[dict[str, Any], RecordCollection]:
    """Time algorithm on fresh copies of collection; return payload and last sorted copy."""
    warmup_runs = max(0, warmup_runs)
    measured_runs = max(1, measured_runs)

    for _ in range(warmup_runs):
        profile_sort(collection.copy(), algorithm)

    samples: list[RunSample] = []
    work = collection
    for i in range(measured_runs):
        # Copy outside the timed region.
        work = collection.copy()
        timing = profile_sort(work, algorithm)
        samples.append(
            RunSample(
                run_index=i,
                wall_time_s=timing.wall_time_s,
                cpu_time_s=timing.cpu_time_s,
                records=timing.records,
            )
        )

    stats = compute_run_stats(samples)
    gates = evaluate_gates(algorithm, collection, work)

    payload = {
        "algorithm": algorithm.value,
        "name": algorithm.label,
        "records": len(collection),
        "warmup_runs": warmup_runs,
        "measured_runs": measured_runs,
        "stats": asdict(stats),
        "samples": [asdict(s) for s in samples],
        "gates": {
            "sorted_order": gates.sorted_order,
            "permutation": gates.permutation,
            "stability": gates.stability,
            "details": gates.details,
        },
    }
    return payload, work


def run_comparison_suite(
    collection: RecordCollection,
    profile: BenchmarkProfile,
) -> tuple[list[dict[str, Any]], dict[SortAlgorithm, RecordCollection]]:
    results: list[dict[str, Any]] = []
    sorted_by: dict[SortAlgorithm, RecordCollection] = {}
    for name in profile.algorithms:
        algorithm = SortAlgorithm(name)
        payload, work = run_algorithm(
            collection,
            algorithm,
            warmup_runs=profile.warmup_runs,
            measured_runs=profile.measured_runs,
        )
        results.append(payload)
        sorted_by[algorithm] = work
    return results, sorted_by


def summarize_gate_counts(results: list[dict[str, Any]]) -> dict[str, Any]:
    counts = {
        "sorted_order": {"pass": 0, "fail": 0, "na": 0, "warn": 0},
        "permutation": {"pass": 0, "fail": 0, "na": 0, "warn": 0},
        "stability": {"pass": 0, "fail": 0, "na": 0, "warn": 0},
    }
    for r in results:
        gates = r.get("gates", {})
        for gate_name in counts:
            state = gates.get(gate_name, "na")
            counts[gate_name][state] = counts[gate_name].get(state, 0) + 1

    return {
        "platform": platform.platform(),
        "algorithm_count": len(results),
        "gate_counts": counts,
    }


def get_system_info() -> dict[str, Any]:
    """Capture system information for benchmark context."""
    vm = psutil.virtual_memory()
    return {
        "python_version": sys.version,
        "platform": platform.platform(),
        "processor": platform.processor(),
        "cpu_count": os.cpu_count(),
        "machine": platform.machine(),
        "psutil_version": psutil.__version__,
        "rss_mb": psutil.Process().memory_info().rss / (1024 * 1024),
        "mem_total_gb": round(vm.total / (1024 ** 3), 2),
        "mem_available_gb": round(vm.available / (1024 ** 3), 2),
    }
