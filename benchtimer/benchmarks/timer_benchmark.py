"""
Stopwatch-based benchmark for a single function.

Every repetition has three phases:

1. prepare: builds the input for the measured function (optional);
2. measure: the function being timed, called for its side effects;
3. verify: checks or cleans up after the measured function (optional).

The clock only runs while measure is executing. A short warmup phase,
with verify skipped, precedes the timed phase.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from benchtimer.benchmarks.base import Benchmark
from benchtimer.utils.stats import StatisticsCollector
from benchtimer.utils.timer import Timer

Logger = Callable[[str], None]

MIN_WARMUP_RUNS = 2
MAX_WARMUP_RUNS = 10


def get_warmup_runs(m: int) -> int:
    """Number of untimed runs before a timed run of m: a tenth of m, between 2 and 10."""
    return max(MIN_WARMUP_RUNS, min(MAX_WARMUP_RUNS, m // 10))


class BenchmarkTimer(Benchmark):
    """
    Measures the average running time of ``measure`` in milliseconds.

    Args:
        description: Label used in log output.
        measure: Function of the input whose running time is wanted. Its
            return value is ignored.
        prepare: Function mapping the supplied input to the input of
            ``measure``. Runs with the clock paused.
        verify: Function called with the input after ``measure`` returns,
            e.g. to assert the result is correct. Runs with the clock
            paused and is skipped during warmup.
        clock: Monotonic clock in seconds, ``time.perf_counter`` by default.
        logger: Receives progress messages; silent by default.
    """

    def __init__(
        self,
        description: str,
        measure: Callable[[Any], Any],
        prepare: Optional[Callable[[Any], Any]] = None,
        verify: Optional[Callable[[Any], Any]] = None,
        clock: Optional[Callable[[], float]] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        if measure is None:
            raise ValueError("A measured function is required")
        self._description = description
        self._measure = measure
        self._prepare = prepare
        self._verify = verify
        self.clock = clock
        self.logger = logger or (lambda msg: None)

    @property
    def description(self) -> str:
        return self._description

    @property
    def measure(self) -> Callable[[Any], Any]:
        return self._measure

    @property
    def prepare(self) -> Optional[Callable[[Any], Any]]:
        return self._prepare

    @property
    def verify(self) -> Optional[Callable[[Any], Any]]:
        return self._verify

    def run_from_supplier(self, supplier: Callable[[], Any], m: int) -> float:
        if m <= 0:
            raise ValueError(f"Number of runs must be positive, got {m}")

        self.logger(
            f"Begin run: {self._description} with {StatisticsCollector.format_whole(m)} runs"
        )

        # The measured function's result is discarded; verify sees the input.
        def function(value: Any) -> Any:
            self._measure(value)
            return value

        Timer(self.clock).repeat(get_warmup_runs(m), supplier, function, self._prepare, None)
        return Timer(self.clock).repeat(m, supplier, function, self._prepare, self._verify)

    def __repr__(self) -> str:
        return f"BenchmarkTimer({self._description!r})"
