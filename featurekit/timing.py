"""Wall-clock timers, a timing context manager and a simple benchmark runner."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass

__all__ = [
    "Timer",
    "ScopedTimer",
    "BenchmarkResult",
    "benchmark",
    "format_result",
    "print_result",
    "time_function",
    "profile_function",
]

_NS_PER_UNIT = {
    "ns": 1,
    "us": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
}


def _format_ns(elapsed_ns):
    if elapsed_ns < 1_000:
        return f"{elapsed_ns}ns"
    if elapsed_ns < 1_000_000:
        return f"{elapsed_ns / 1_000:.2f}μs"
    if elapsed_ns < 1_000_000_000:
        return f"{elapsed_ns / 1_000_000:.2f}ms"
    return f"{elapsed_ns / 1_000_000_000:.2f}s"


class Timer:
    """Measures time from construction (or ``start``) to ``stop`` or now.

    ``clock`` is a callable returning nanoseconds; it defaults to
    ``time.perf_counter_ns``.
    """

    def __init__(self, clock=time.perf_counter_ns):
        self._clock = clock
        self._start = clock()
        self._end = None

    def start(self):
        """Restart the measurement from now."""
        self._start = self._clock()

    def stop(self):
        """Fix the end of the measurement at now."""
        self._end = self._clock()

    def _elapsed_ns(self):
        end = self._clock() if self._end is None else self._end
        return end - self._start

    def elapsed(self, unit="ms"):
        """Return whole units elapsed; ``unit`` is one of ns, us, ms, s."""
        try:
            scale = _NS_PER_UNIT[unit]
        except KeyError:
            raise ValueError(f"unknown time unit {unit!r}") from None
        return self._elapsed_ns() // scale

    def elapsed_string(self):
        """Return the elapsed time in the largest fitting unit, e.g. ``1.50ms``."""
        return _format_ns(self._elapsed_ns())

    def reset(self):
        """Restart from now and forget any stop time."""
        self._start = self._clock()
        self._end = None


class ScopedTimer:
    """Context manager that reports how long its block took.

    On exit it writes ``"<name>: <elapsed>"`` to ``stream`` (standard output by
    default) and, if given, calls ``callback`` with the elapsed nanoseconds.
    """

    def __init__(self, name, callback=None, *, stream=None, clock=time.perf_counter_ns):
        self.name = str(name)
        self._callback = callback
        self._stream = stream
        self._timer = Timer(clock)

    def __enter__(self):
        self._timer.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self._timer.stop()
        stream = self._stream if self._stream is not None else sys.stdout
        print(f"{self.name}: {self._timer.elapsed_string()}", file=stream)
        if self._callback is not None:
            self._callback(self._timer.elapsed("ns"))
        return False


@dataclass(frozen=True)
class BenchmarkResult:
    """Timing statistics of a benchmark, in nanoseconds."""

    name: str
    iterations: int
    total_ns: int
    avg_ns: int
    min_ns: int
    max_ns: int


def benchmark(name, func, iterations=1000):
    """Call ``func`` ``iterations`` times and collect timing statistics."""
    if iterations < 1:
        raise ValueError("iterations must be at least 1")
    times = []
    for _ in range(iterations):
        timer = Timer()
        func()
        timer.stop()
        times.append(timer.elapsed("ns"))
    total = sum(times)
    return BenchmarkResult(
        name=str(name),
        iterations=iterations,
        total_ns=total,
        avg_ns=total // iterations,
        min_ns=min(times),
        max_ns=max(times),
    )


def format_result(result):
    """Return a multi-line human-readable report of a benchmark result."""
    return "\n".join(
        [
            f"Benchmark: {result.name}",
            f"  Iterations: {result.iterations}",
            f"  Total time: {result.total_ns / 1_000_000:.2f}ms",
            f"  Average: {result.avg_ns / 1_000:.2f}μs",
            f"  Min: {result.min_ns / 1_000:.2f}μs",
            f"  Max: {result.max_ns / 1_000:.2f}μs",
        ]
    )


def print_result(result):
    """Write the report of a benchmark result to standard output."""
    print(format_result(result), file=sys.stdout)


def time_function(func):
    """Call ``func`` once and return how many nanoseconds it took."""
    timer = Timer()
    func()
    timer.stop()
    return timer.elapsed("ns")


def profile_function(name, func, iterations=1):
    """Time ``func`` once, or benchmark it over several iterations, and report."""
    if iterations == 1:
        with ScopedTimer(name):
            func()
    else:
        print_result(benchmark(name, func, iterations))