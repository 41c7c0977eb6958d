"""Scoped wall-clock timers with running averages per name."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass


@dataclass
class TimerResult:
    """Accumulated timings, in milliseconds, for one timer name."""

    all_times: float = 0.0
    sample_count: int = 0

    def average(self):
        """Mean time per sample in milliseconds (NaN if nothing was recorded)."""
        if self.sample_count == 0:
            return math.nan
        return self.all_times / self.sample_count


TIMER_RESULTS: dict[str, TimerResult] = {}


class Timer:
    """Context manager that times its block and prints the time and running average."""

    def __init__(self, name, results=None):
        self.name = name
        self.results = TIMER_RESULTS if results is None else results
        self.elapsed_ms = 0.0
        self._start = time.perf_counter()

    def __enter__(self):
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000.0
        result = self.results.setdefault(self.name, TimerResult())
        result.all_times += self.elapsed_ms
        result.sample_count += 1
        spacing = " " * max(0, 40 - len(self.name))
        print(
            f"{self.name}: {spacing}{self.elapsed_ms:.4f}ms"
            f"      average: {result.average():.4f}ms"
        )
        return None