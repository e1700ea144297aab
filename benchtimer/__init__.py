from .benchmarks.base import Benchmark
from .benchmarks.timer_benchmark import BenchmarkTimer, get_warmup_runs
from .utils.timer import Timer, TimerError

__version__ = "0.1.0"

__all__ = [
    'Benchmark',
    'BenchmarkTimer',
    'Timer',
    'TimerError',
    'get_warmup_runs',
]
