#!/usr/bin/env python3
"""Sort benchmark profile definitions."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from sort_schema import BenchmarkProfile

ALL_ALGORITHMS = ["quick", "merge"]


def default_profile(profile_name: str) -> BenchmarkProfile:
    if profile_name == "full":
        return BenchmarkProfile(
            name="full",
            warmup_runs=2,
            measured_runs=15,
            algorithms=list(ALL_ALGORITHMS),
        )

    # "quick": one measurement per algorithm, no warmup
    return BenchmarkProfile(
        name="quick",
        warmup_runs=0,
        measured_runs=1,
        algorithms=list(ALL_ALGORITHMS),
    )


def load_custom_profile(config_path: Path) -> BenchmarkProfile:
    with config_path.open(encoding="utf-8") as f:
        raw = json.load(f)

    algorithms = [str(a).lower() for a in raw.get("algorithms", ALL_ALGORITHMS)]
    unknown = sorted(set(algorithms) - set(ALL_ALGORITHMS))
    if unknown:
        raise SystemExit(f"Unknown algorithms in {config_path}: {', '.join(unknown)}")

    return BenchmarkProfile(
        name=str(raw.get("name", "custom")),
        warmup_runs=max(0, int(raw.get("warmup_runs", 0))),
        measured_runs=max(1, int(raw.get("measured_runs", 1))),
        algorithms=algorithms,
    )


def profile_to_dict(profile: BenchmarkProfile) -> dict[str, Any]:
    return {
        "name": profile.name,
        "warmup_runs": profile.warmup_runs,
        "measured_runs": profile.measured_runs,
        "algorithms": profile.algorithms,
    }
