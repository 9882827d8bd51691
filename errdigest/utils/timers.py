import time
from contextlib import contextmanager
from typing import Dict


class Timer:
    """Collects wall-clock durations of named stages."""

    def __init__(self):
        self.timings: Dict[str, float] = {}

    @contextmanager
    def time(self, name: str):
        start = time.perf_counter()
        try:
            yield
        finally:
            self.timings[name] = self.timings.get(name, 0.0) + time.perf_counter() - start

    def get_summary(self) -> Dict[str, float]:
        return self.timings.copy()
