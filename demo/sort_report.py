#!/usr/bin/env python3
"""Console and Markdown reporting for sort benchmark results."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from tempsort import RecordCollection, SortAlgorithm, SortTiming, faster_algorithm

SEPARATOR = "================================="


def format_sorted_lines(records: RecordCollection) -> list[str]:
    lines = [
        f"{rank}. Timestamp: {rec.timestamp} | Temperature: {rec.value:.1f}"
        for rank, rec in enumerate(records, start=1)
    ]
    lines.append(SEPARATOR)
    lines.append(f"Total entries: {len(records)}")
    return lines


def comparison_sentence(quick_time_s: float, merge_time_s: float) -> str:
    timings = {
        SortAlgorithm.QUICK: SortTiming(SortAlgorithm.QUICK, 0, cpu_time_s=quick_time_s),
        SortAlgorithm.MERGE: SortTiming(SortAlgorithm.MERGE, 0, cpu_time_s=merge_time_s),
    }
    faster = faster_algorithm(timings)
    if faster is SortAlgorithm.MERGE:
        return "Merge sort is faster than quick sort."
    if faster is SortAlgorithm.QUICK:
        return "Quick sort is faster than merge sort."
    return "Both algorithms are equal in speed."


def format_timing_lines(quick_time_s: float, merge_time_s: float) -> list[str]:
    return [
        f"Quick sort time: {quick_time_s:.3f} seconds",
        f"Merge sort time: {merge_time_s:.3f} seconds",
        comparison_sentence(quick_time_s, merge_time_s),
    ]


def print_console_report(
    sorted_by: dict[SortAlgorithm, RecordCollection],
    times_s: dict[SortAlgorithm, float],
    *,
    listing: bool = True,
    out: TextIO | None = None,
) -> None:
    """Print sorted listings followed by the timing comparison."""
    def emit(line: str = "") -> None:
        print(line, file=out)

    for i, (algorithm, records) in enumerate(sorted_by.items()):
        if i > 0:
            emit(SEPARATOR)
        if listing:
            emit(f"{algorithm.label} results:")
            emit()
            for line in format_sorted_lines(records):
                emit(line)
        else:
            emit(f"{algorithm.label}: {len(records)} entries sorted")

    emit(SEPARATOR)
    if SortAlgorithm.QUICK in times_s and SortAlgorithm.MERGE in times_s:
        for line in format_timing_lines(times_s[SortAlgorithm.QUICK], times_s[SortAlgorithm.MERGE]):
            emit(line)
    else:
        for algorithm, t in times_s.items():
            emit(f"{algorithm.label} time: {t:.3f} seconds")


def _fmt_gate(g: str) -> str:
    return g.upper()


def build_markdown_report(payload: dict[str, Any]) -> str:
    ts = payload.get("timestamp", datetime.now().isoformat())
    system = payload.get("system", {})
    summary = payload.get("summary", {})
    results = payload.get("results", [])

    lines: list[str] = []
    lines.append("# Sort Benchmark Report")
    lines.append("")
    lines.append(f"- Timestamp: `{ts}`")
    lines.append(f"- Profile: `{payload.get('profile', 'unknown')}`")
    lines.append(f"- Platform: `{system.get('platform', 'unknown')}`")
    lines.append(f"- CPU Count: `{system.get('cpu_count', 'unknown')}`")
    lines.append(f"- Data Path: `{payload.get('config', {}).get('data_path', 'unknown')}`")
    lines.append(f"- Records: `{payload.get('records', 0)}`")
    lines.append("")

    gate_counts = summary.get("gate_counts", {})
    lines.append("## Gate Summary")
    lines.append("")
    lines.append("| Gate | pass | fail | na |")
    lines.append("|---|---:|---:|---:|")
    for gate in ("sorted_order", "permutation", "stability"):
        c = gate_counts.get(gate, {})
        lines.append(f"| {gate} | {c.get('pass', 0)} | {c.get('fail', 0)} | {c.get('na', 0)} |")

    lines.append("")
    lines.append("## Algorithm Results")
    lines.append("")
    lines.append("| Algorithm | Runs | Median CPU (s) | p95 CPU (s) | Median wall (s) | ns/record | Sorted | Permutation | Stable |")
    lines.append("|---|---:|---:|---:|---:|---:|---|---|---|")
    for r in results:
        stats = r.get("stats", {})
        gates = r.get("gates", {})
        lines.append(
            f"| {r.get('name')} | {stats.get('samples', 0)} "
            f"| {stats.get('median_cpu_s', 0.0):.6f} | {stats.get('p95_cpu_s', 0.0):.6f} "
            f"| {stats.get('median_wall_s', 0.0):.6f} | {stats.get('median_ns_per_record', 0.0):,.1f} "
            f"| {_fmt_gate(gates.get('sorted_order', 'na'))} "
            f"| {_fmt_gate(gates.get('permutation', 'na'))} "
            f"| {_fmt_gate(gates.get('stability', 'na'))} |"
        )

    lines.append("")
    return "\n".join(lines)


def write_markdown_report(payload: dict[str, Any], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(build_markdown_report(payload), encoding="utf-8")
