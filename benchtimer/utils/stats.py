import numpy as np
from typing import Sequence


class StatisticsCollector:
    """Arithmetic helpers and formatting for benchmark results."""

    @staticmethod
    def mean(values: Sequence[float]) -> float:
        """Arithmetic mean of a non-empty sequence."""
        if len(values) == 0:
            raise ValueError("Cannot compute the mean of no values")
        return float(np.mean(np.asarray(values, dtype=float)))

    @staticmethod
    def format_time(millis: float) -> str:
        """Format a duration given in milliseconds in the closest unit (s, ms, μs, ns)."""
        seconds = millis / 1e3
        if seconds >= 1:
            return f"{seconds:.3f} s"
        elif seconds >= 1e-3:
            return f"{seconds * 1e3:.3f} ms"
        elif seconds >= 1e-6:
            return f"{seconds * 1e6:.3f} μs"
        else:
            return f"{seconds * 1e9:.3f} ns"

    @staticmethod
    def format_duration(seconds: float) -> str:
        """Format a wall-clock duration as whole seconds or minutes, e.g. 2m5s."""
        mins, secs = divmod(int(seconds), 60)
        if mins == 0:
            return f"{secs}s"
        return f"{mins}m{secs}s" if secs else f"{mins}m"

    @staticmethod
    def format_whole(number: int) -> str:
        """Format an integer with thousands separators."""
        return f"{number:,d}"
