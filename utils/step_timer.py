from contextlib import contextmanager
from time import perf_counter
from typing import Dict, List


class StepTimer:
    """Accumulate wall-clock time per named pipeline step."""

    def __init__(self):
        self.durations: Dict[str, float] = {}   # {label: seconds}
        self._stack: List[str] = []

    @contextmanager
    def timeit(self, label: str):
        start = perf_counter()
        self._stack.append(label)
        try:
            yield
        finally:
            elapsed = perf_counter() - start
            self.durations[label] = self.durations.get(label, 0.0) + elapsed
            self._stack.pop()

    def total(self) -> float:
        return sum(self.durations.values())

    def summary_lines(self) -> List[str]:
        width = max((len(k) for k in self.durations), default=10)
        lines = [f"{k.ljust(width)} : {v:8.3f}s" for k, v in self.durations.items()]
        lines.append(f"{'total'.ljust(width)} : {self.total():8.3f}s")
        return lines

    def print_summary(self, title: str = "⏱️ Runtime summary"):
        lines = self.summary_lines()
        print("\n" + title)
        print("-" * (max(len(line) for line in lines) + 2))
        for line in lines:
            print(line)
