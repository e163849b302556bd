#!/usr/bin/env python3
"""
Synthetic temperature dump generator.

Produces text shaped like the Aarhus ``tempm.txt`` weather dump: a single
JSON-like object mapping ``"2014-MM-DDTHH:MM:SS"`` timestamps to quoted
temperature readings. Optional noise injects the irregularities the
extractor must tolerate (typographic quotes, non-numeric values and
over-long timestamps). Every noisy entry is one the extractor rejects, so
the number of extracted records equals the number of clean entries.

Readings run every 30 minutes from 2014-02-13; past roughly 15,000 rows the
timestamps leave 2014 and no longer match the default anchor.

Two APIs:
  - generate_readings(): Iterator[(timestamp, value)] of clean readings
  - generate_file():     writes a dump to disk for the benchmark CLI
"""

from __future__ import annotations

import argparse
import math
import random
from datetime import datetime, timedelta
from pathlib import Path
from typing import Iterator

START = datetime(2014, 2, 13, 6, 20, 0)
STEP = timedelta(minutes=30)

# (open, close) quote pairs used around keys when noise is enabled
_QUOTE_STYLES = [('"', '"'), ("'", "'"), ("“", "”")]


def generate_readings(
    *,
    count: int,
    seed: int = 42,
    start: datetime = START,
) -> Iterator[tuple[str, float]]:
    """
    Yield (timestamp, temperature) pairs every 30 minutes from start.

    Temperatures follow a daily cycle plus Gaussian noise, rounded to one
    decimal so duplicates are common (which exercises sort stability).
    """
    rng = random.Random(seed)
    ts = start
    for i in range(count):
        hour = ts.hour + ts.minute / 60.0
        daily = 4.0 * math.sin((hour - 9.0) / 24.0 * 2.0 * math.pi)
        value = round(2.0 + daily + rng.gauss(0.0, 1.5), 1)
        yield ts.strftime("%Y-%m-%dT%H:%M:%S"), value
        ts += STEP


def _noisy_entry(rng: random.Random, ts: str) -> str:
    kind = rng.randint(0, 3)
    if kind == 0:
        return f'"{ts}": "-"'
    if kind == 1:
        return f'"{ts}": "N/A"'
    if kind == 2:
        return f'"{ts}T00:00:00.000000": "1.0"'
    return f'"{ts}": abc'


def render_text(
    readings: list[tuple[str, float]],
    *,
    noise_rate: float = 0.0,
    seed: int = 42,
) -> str:
    """Render readings as a JSON-like dump, injecting noise at noise_rate."""
    rng = random.Random(seed)
    parts: list[str] = []
    for ts, value in readings:
        if noise_rate and rng.random() < noise_rate:
            parts.append(_noisy_entry(rng, ts))
            continue
        open_q, close_q = rng.choice(_QUOTE_STYLES) if noise_rate else _QUOTE_STYLES[0]
        parts.append(f'{open_q}{ts}{close_q}: "{value}"')
    return "{" + ", ".join(parts) + "}"


def generate_file(
    output_path: str | Path,
    *,
    rows: int = 10_000,
    noise_rate: float = 0.0,
    seed: int = 42,
) -> None:
    """Write a synthetic dump with rows readings to output_path."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    readings = list(generate_readings(count=rows, seed=seed))
    output_path.write_text(render_text(readings, noise_rate=noise_rate, seed=seed), encoding="utf-8")
    print(f"Dump generated: {output_path} ({rows:,} readings, noise_rate={noise_rate})")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic tempm.txt-style temperature dump"
    )
    parser.add_argument("--output", type=str, required=True,
                        help="Output text file path")
    parser.add_argument("--rows", type=int, default=10_000,
                        help="Number of readings to generate (default: 10000)")
    parser.add_argument("--noise-rate", type=float, default=0.0,
                        help="Fraction of malformed entries (0.0 to 1.0, default: 0.0)")
    parser.add_argument("--seed", type=int, default=42,
                        help="RNG seed for reproducibility (default: 42)")
    return parser.parse_args()


if __name__ == "__main__":
    args = _parse_args()
    if not (0.0 <= args.noise_rate <= 1.0):
        raise SystemExit("--noise-rate must be between 0.0 and 1.0")
    if args.rows <= 0:
        raise SystemExit("--rows must be positive")
    generate_file(
        args.output,
        rows=args.rows,
        noise_rate=args.noise_rate,
        seed=args.seed,
    )
