from abc import ABC, abstractmethod
from typing import Any, Callable


class Benchmark(ABC):
    """Base interface for anything that times a function over repeated runs."""

    @abstractmethod
    def run_from_supplier(self, supplier: Callable[[], Any], m: int) -> float:
        """Run m times, taking each input from supplier, and return the mean milliseconds."""
        pass

    def run(self, value: Any, m: int) -> float:
        """Run m times on the same input value and return the mean milliseconds."""
        return self.run_from_supplier(lambda: value, m)
