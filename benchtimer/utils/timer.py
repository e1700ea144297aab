import time
from typing import Any, Callable, List, Optional

from benchtimer.utils.stats import StatisticsCollector


class TimerError(RuntimeError):
    """Raised when the stopwatch is driven through an invalid state change."""


class Timer:
    """
    Pausable stopwatch that records one lap per timed call.

    The timer starts running as soon as it is constructed. Time only
    accumulates while it is running; each lap stores the running time
    since the previous lap.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self.clock = clock or time.perf_counter
        self.running = False
        self.ticks = 0.0
        self.lap_times: List[float] = []
        self._lap_ticks = 0.0
        self._last = 0.0
        self.resume()

    @property
    def laps(self) -> int:
        return len(self.lap_times)

    def pause(self):
        """Stop the clock without recording a lap."""
        if not self.running:
            raise TimerError("Timer is already paused")
        self._accumulate()
        self.running = False

    def resume(self):
        """Restart the clock after a pause."""
        if self.running:
            raise TimerError("Timer is already running")
        self._last = self.clock()
        self.running = True

    def lap(self):
        """Record the running time since the previous lap."""
        if not self.running:
            raise TimerError("Timer must be running to record a lap")
        self._accumulate()
        self._record_lap()

    def pause_and_lap(self):
        """Stop the clock and record a lap in one reading."""
        self.pause()
        self._record_lap()

    def stop(self) -> float:
        """Stop the clock, record a final lap and return the mean lap time in ms."""
        self.pause_and_lap()
        return self.mean_lap_time()

    def millisecs(self) -> float:
        """Total running time so far, in milliseconds."""
        if self.running:
            self._accumulate()
        return self.ticks * 1000

    def mean_lap_time(self) -> float:
        """Average lap duration in milliseconds."""
        if not self.lap_times:
            raise TimerError("Timer has no laps")
        return StatisticsCollector.mean(self.lap_times) * 1000

    def repeat(
        self,
        n: int,
        supplier: Callable[[], Any],
        function: Callable[[Any], Any],
        pre_function: Optional[Callable[[Any], Any]] = None,
        post_function: Optional[Callable[[Any], None]] = None,
    ) -> float:
        """
        Run function n times and return its mean duration in milliseconds.

        Each cycle takes a fresh input from supplier and passes it through
        pre_function (if any) with the clock paused. Only the call to
        function is timed. post_function (if any) receives the result of
        function, again with the clock paused. The timer is left running.
        """
        if n <= 0:
            raise ValueError(f"Repetition count must be positive, got {n}")

        self.pause()
        for _ in range(n):
            value = supplier()
            if pre_function is not None:
                value = pre_function(value)
            self.resume()
            result = function(value)
            self.pause_and_lap()
            if post_function is not None:
                post_function(result)

        mean = self.mean_lap_time()
        self.resume()
        return mean

    def _accumulate(self):
        now = self.clock()
        elapsed = now - self._last
        self.ticks += elapsed
        self._lap_ticks += elapsed
        self._last = now

    def _record_lap(self):
        self.lap_times.append(self._lap_ticks)
        self._lap_ticks = 0.0

    def __repr__(self) -> str:
        state = "running" if self.running else "paused"
        return f"Timer({state}, laps={self.laps}, ticks={self.ticks:.6f}s)"
