#!/usr/bin/env python3
"""
Sort comparison harness: extract temperature readings and time two sorts.

Reads a tempm.txt-style dump, extracts (timestamp, temperature) records,
sorts independent copies with quick sort and merge sort, prints both
sorted listings and the CPU time of each, and optionally exports JSON and
Markdown reports.

Usage:
    python demo/sort_benchmark.py [--data=PATH] [--profile=quick|full|custom]

Exit status:
    0  success
    1  input file could not be read
    2  a correctness gate failed
"""

from __future__ import annotations

import argparse
import json
from datetime import datetime
from pathlib import Path
from typing import Any

from sort_profiles import default_profile, load_custom_profile, profile_to_dict
from sort_report import print_console_report, write_markdown_report
from sort_runner import get_system_info, run_comparison_suite, summarize_gate_counts
from sort_schema import BenchmarkProfile
from tempsort import SortAlgorithm, SourceUnavailableError, extract, read_all

DEFAULT_SEED = 12345
DEFAULT_DATA = "tempm.txt"


def _resolve_profile(args: argparse.Namespace) -> BenchmarkProfile:
    if args.profile == "custom":
        if args.config is None:
            raise SystemExit("--profile custom requires --config")
        return load_custom_profile(Path(args.config))
    return default_profile(args.profile)


def _ensure_data_generated(args: argparse.Namespace) -> None:
    """Generate a synthetic dump if --generate-data is set and the file is missing."""
    if not getattr(args, "generate_data", False):
        return
    data_path = Path(args.data)
    if data_path.exists():
        return
    from temperature_synthetic import generate_file

    print(f"[benchmark] Generating test data: {data_path} (rows={args.generate_rows})")
    generate_file(data_path, rows=args.generate_rows, noise_rate=args.noise_rate, seed=args.seed)


def run_benchmark(args: argparse.Namespace) -> tuple[int, dict[str, Any]]:
    _ensure_data_generated(args)
    profile = _resolve_profile(args)

    try:
        text = read_all(args.data)
    except SourceUnavailableError as exc:
        print("Failed to read file. Exiting.")
        print(f"[benchmark] {exc}")
        return 1, {}

    collection = extract(text)
    del text

    results, sorted_by = run_comparison_suite(collection, profile)

    # Console timings use the median CPU time (the single run in "quick").
    times_s = {
        SortAlgorithm(r["algorithm"]): r["stats"]["median_cpu_s"] for r in results
    }
    if not args.quiet:
        print_console_report(sorted_by, times_s, listing=not args.no_listing)

    summary = summarize_gate_counts(results)
    payload: dict[str, Any] = {
        "timestamp": datetime.now().isoformat(),
        "profile": profile.name,
        "system": get_system_info(),
        "records": len(collection),
        "config": {
            "data_path": args.data,
            "seed": args.seed,
            "profile": profile_to_dict(profile),
        },
        "results": results,
        "summary": summary,
    }

    if args.export_json:
        out_json = Path(args.export_json)
        out_json.parent.mkdir(parents=True, exist_ok=True)
        with out_json.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
        print(f"[benchmark] JSON exported: {out_json}")

    if args.export_md:
        out_md = Path(args.export_md)
        write_markdown_report(payload, out_md)
        print(f"[benchmark] Markdown exported: {out_md}")

    gate_counts = summary.get("gate_counts", {})
    failures = sum(gate_counts.get(g, {}).get("fail", 0) for g in gate_counts)
    print(
        "Benchmark summary | "
        f"records={len(collection)} "
        f"algorithms={summary.get('algorithm_count', 0)} "
        f"gate_failures={failures}"
    )

    if failures > 0:
        return 2, payload
    return 0, payload


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Quick sort vs merge sort on extracted temperature readings")
    parser.add_argument("--data", type=str, default=DEFAULT_DATA,
                        help=f"Input text dump (default: {DEFAULT_DATA})")
    parser.add_argument("--profile", choices=["quick", "full", "custom"], default="quick")
    parser.add_argument("--config", type=str, help="Path to custom profile JSON config")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--export-json", type=str, default=None)
    parser.add_argument("--export-md", type=str, default=None)
    parser.add_argument("--no-listing", action="store_true",
                        help="Print entry counts instead of full sorted listings")
    parser.add_argument("--quiet", action="store_true",
                        help="Skip the console report (summary line only)")
    parser.add_argument("--generate-data", action="store_true",
                        help="Generate a synthetic dump before running if the file is missing")
    parser.add_argument("--generate-rows", type=int, default=10_000,
                        help="Reading count when generating data (default: 10000)")
    parser.add_argument("--noise-rate", type=float, default=0.0,
                        help="Malformed entry rate for generated data (default: 0.0)")
    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    if args.generate_rows <= 0:
        raise SystemExit("--generate-rows must be positive")
    if not (0.0 <= args.noise_rate <= 1.0):
        raise SystemExit("--noise-rate must be between 0.0 and 1.0")
    code, _payload = run_benchmark(args)
    return code


if __name__ == "__main__":
    raise SystemExit(main())
