"""
Example benchmark drivers.

Times union-find "count pairs" experiments and insertion sort over four
input orderings, doubling the problem size on each step, and prints the
mean running time per size.
"""

import json
import os
import random
import time
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from benchtimer.benchmarks.timer_benchmark import BenchmarkTimer, Logger, get_warmup_runs
from benchtimer.scenarios.arrays import ORDERINGS, array_supplier
from benchtimer.scenarios.sorting import insertion_sort, is_sorted
from benchtimer.scenarios.union_find import PATH_COMPRESSION_MODES, count_pairs
from benchtimer.utils.stats import StatisticsCollector
from benchtimer.utils.system import current_rss_bytes, format_bytes, system_snapshot

# Shipped as package data so installed copies find it too.
DEFAULT_CONFIG_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'config', 'benchmark.json'
)

SUITE_ORDER = ('union_find', 'insertion_sort')


def load_config(config_path: Optional[str] = None) -> Dict:
    """Read the JSON driver configuration."""
    with open(config_path or DEFAULT_CONFIG_PATH, 'r') as f:
        return json.load(f)


def check_sorted(values: List) -> None:
    if not is_sorted(values):
        raise RuntimeError("Array is not sorted after measurement")


class ExampleBenchmarks:
    """
    Runs the configured example suites with a BenchmarkTimer per size.

    Suites:
    - union_find: count_pairs(n) per path-compression variant
    - insertion_sort: insertion sort per input ordering
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        config: Optional[Dict] = None,
        logger: Optional[Logger] = None,
    ):
        self.config = config if config is not None else load_config(config_path)
        self.params = self.config['experiment_params']
        self.runs = int(self.params['runs'])
        self.doublings = int(self.params.get('doublings', 5))
        self.rng = random.Random(self.params.get('seed'))
        self.logger = logger or (lambda msg: print(f"    {msg}"))

        if self.runs <= 0:
            raise ValueError(f"experiment_params.runs must be positive, got {self.runs}")

        unknown = set(self.config.get('suites', {})) - set(SUITE_ORDER)
        if unknown:
            raise ValueError(f"Unknown benchmark suites: {', '.join(sorted(unknown))}")

    def run_all(self) -> Dict[str, Any]:
        """
        Run every configured suite and print one line per problem size.
        Returns the results dictionary.
        """
        snapshot = system_snapshot()

        print("=" * 80)
        print("BENCHMARK TIMER EXAMPLES")
        print("=" * 80)
        print(f"Started at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        print(f"Platform: {snapshot['platform']} | Python {snapshot['python']}")
        print(f"CPUs: {snapshot['logical_cpus']} logical / {snapshot['physical_cpus']} physical | "
              f"Memory: {format_bytes(snapshot['total_memory_bytes'])}")
        print(f"Runs per size: {self.runs} (+{get_warmup_runs(self.runs)} warmup)")
        print("=" * 80)
        print()

        start_time = time.time()
        suites: Dict[str, List[Dict[str, Any]]] = {}
        suite_config = self.config.get('suites', {})

        for name in SUITE_ORDER:
            if name not in suite_config:
                continue
            if name == 'union_find':
                suites[name] = self._run_union_find(suite_config[name])
            else:
                suites[name] = self._run_insertion_sort(suite_config[name])
            print("-" * 80)

        total_time = time.time() - start_time
        rss = current_rss_bytes()

        print(f"Completed at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        print(f"Total time: {StatisticsCollector.format_duration(total_time)}")
        if rss is not None:
            print(f"Resident memory: {format_bytes(rss)}")
        print("=" * 80)

        return {
            'metadata': {
                'timestamp': datetime.now().isoformat(),
                'system': snapshot,
                'experiment_params': self.params,
                'warmup_runs': get_warmup_runs(self.runs),
                'total_seconds': total_time,
            },
            'suites': suites,
        }

    def _run_union_find(self, suite: Dict) -> List[Dict[str, Any]]:
        rows = []
        for variant in suite.get('variants', list(PATH_COMPRESSION_MODES)):
            if variant not in PATH_COMPRESSION_MODES:
                raise ValueError(f"Unknown union-find variant: {variant}")
            print(f"Union-find count pairs ({variant} path compression)")
            for n in self._sizes(suite['start_size']):
                benchmark = BenchmarkTimer(
                    f"Number of sites {StatisticsCollector.format_whole(n)}",
                    self._count_pairs_function(variant),
                    logger=self.logger,
                )
                rows.append(self._time(benchmark, n, lambda n=n: n, variant))
        return rows

    def _run_insertion_sort(self, suite: Dict) -> List[Dict[str, Any]]:
        rows = []
        for ordering in suite.get('orderings', list(ORDERINGS)):
            print(f"Insertion sort ({ordering} array)")
            for n in self._sizes(suite['start_size']):
                benchmark = BenchmarkTimer(
                    f"Insertion sort for {ordering} array with length {StatisticsCollector.format_whole(n)}",
                    insertion_sort,
                    verify=check_sorted,
                    logger=self.logger,
                )
                rows.append(self._time(benchmark, n, array_supplier(ordering, n, self.rng), ordering))
        return rows

    def _time(self, benchmark: BenchmarkTimer, n: int, supplier: Callable[[], Any], variant: str) -> Dict[str, Any]:
        mean_ms = benchmark.run_from_supplier(supplier, self.runs)
        print(f"  n={StatisticsCollector.format_whole(n):>12}  mean={StatisticsCollector.format_time(mean_ms):>14}")
        return {
            'description': benchmark.description,
            'variant': variant,
            'size': n,
            'runs': self.runs,
            'mean_ms': mean_ms,
        }

    def _count_pairs_function(self, variant: str) -> Callable[[int], int]:
        rng = self.rng
        return lambda n: count_pairs(n, rng, variant)

    def _sizes(self, start_size: int) -> List[int]:
        """Problem sizes starting at start_size and doubling each step."""
        return [int(start_size) * 2 ** k for k in range(self.doublings)]


def main():
    """Command-line entry point for the example benchmarks."""
    benchmark = ExampleBenchmarks()
    results = benchmark.run_all()

    print("\n" + "=" * 80)
    print("SUMMARY")
    print("=" * 80)
    for name, rows in results['suites'].items():
        print(f"{name}: {len(rows)} timings")
    print("=" * 80)


if __name__ == '__main__':
    main()
