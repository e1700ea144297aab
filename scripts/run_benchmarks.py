#!/usr/bin/env python3
"""
Convenience wrapper to run the example benchmarks.

Usage:
    python scripts/run_benchmarks.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from benchtimer.benchmarks.drivers import ExampleBenchmarks


def main() -> None:
    benchmark = ExampleBenchmarks()
    results = benchmark.run_all()

    print("\n" + "=" * 80)
    print("MEAN TIMES")
    print("=" * 80)
    for name, rows in results["suites"].items():
        for row in rows:
            print(f"{name:<16} {row['variant']:<10} {row['size']:>10} {row['mean_ms']:>14.4f} ms")


if __name__ == "__main__":
    main()
