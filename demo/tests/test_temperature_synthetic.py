#!/usr/bin/env python3

from __future__ import annotations

import sys
import tempfile
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from temperature_synthetic import generate_file, generate_readings, render_text  # noqa: E402
from tempsort import MAX_TIMESTAMP_LEN, extract, read_all  # noqa: E402


class ReadingGenerationTests(unittest.TestCase):
    def test_same_seed_same_output(self) -> None:
        a = list(generate_readings(count=200, seed=42))
        b = list(generate_readings(count=200, seed=42))
        self.assertEqual(a, b)

    def test_different_seed_different_values(self) -> None:
        a = [v for _, v in generate_readings(count=50, seed=1)]
        b = [v for _, v in generate_readings(count=50, seed=2)]
        self.assertNotEqual(a, b)

    def test_timestamp_shape(self) -> None:
        for ts, _ in generate_readings(count=100):
            self.assertTrue(ts.startswith("2014-"))
            self.assertEqual(len(ts), MAX_TIMESTAMP_LEN)

    def test_one_decimal_values(self) -> None:
        for _, value in generate_readings(count=100):
            self.assertEqual(value, round(value, 1))


class RenderTests(unittest.TestCase):
    def test_clean_text_extracts_every_reading(self) -> None:
        readings = list(generate_readings(count=500, seed=9))
        records = extract(render_text(readings))
        self.assertEqual([(r.timestamp, r.value) for r in records], readings)

    def test_noisy_text_extracts_only_clean_entries(self) -> None:
        readings = list(generate_readings(count=500, seed=9))
        text = render_text(readings, noise_rate=0.3, seed=9)
        records = extract(text)
        self.assertLess(len(records), len(readings))
        self.assertGreater(len(records), 0)
        # Every extracted pair is a real reading, in order.
        it = iter(readings)
        for rec in records:
            self.assertIn((rec.timestamp, rec.value), it)

    def test_generate_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "sub" / "tempm.txt"
            generate_file(path, rows=100, seed=3)
            self.assertTrue(path.exists())
            self.assertEqual(len(extract(read_all(path))), 100)


if __name__ == "__main__":
    unittest.main()
