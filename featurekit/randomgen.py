"""Random number generation with seeding, plus shuffling and sampling helpers."""

from __future__ import annotations

import numbers
import random
import threading
import time
from collections.abc import MutableSequence

__all__ = [
    "RandomGenerator",
    "shuffle_container",
    "sample_from_range",
]

_SEED_MASK = 0xFFFFFFFF


def _check_integral(*values):
    for value in values:
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError(f"expected an integer, got {type(value).__name__}")


def _check_real(*values):
    for value in values:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f"expected a real number, got {type(value).__name__}")


def _check_bounds(low, high):
    if low > high:
        raise ValueError(f"lower bound {low!r} exceeds upper bound {high!r}")


class RandomGenerator:
    """Seedable source of uniform, normal and Bernoulli random values.

    Without a seed the generator is seeded from system entropy; with one it
    produces a reproducible sequence.
    """

    def __init__(self, seed=None):
        self._rng = random.Random()
        if seed is None:
            self._rng.seed()
        else:
            self.seed(seed)

    def generate_int(self, low, high):
        """Return a uniformly distributed integer in ``[low, high]``."""
        _check_integral(low, high)
        _check_bounds(low, high)
        return self._rng.randint(low, high)

    def generate_real(self, low, high):
        """Return a uniformly distributed float in ``[low, high)``."""
        _check_real(low, high)
        _check_bounds(low, high)
        return self._uniform_real(float(low), float(high))

    def _uniform_real(self, low, high):
        value = low + (high - low) * self._rng.random()
        # Rounding can land exactly on the upper bound; keep the interval half-open.
        return low if value >= high and high > low else value

    def generate_int_vector(self, low, high, count):
        """Return ``count`` independent integers, each in ``[low, high]``."""
        _check_integral(low, high)
        _check_bounds(low, high)
        if count < 0:
            raise ValueError("count must not be negative")
        return [self._rng.randint(low, high) for _ in range(count)]

    def generate_real_vector(self, low, high, count):
        """Return ``count`` independent floats, each in ``[low, high)``."""
        _check_real(low, high)
        _check_bounds(low, high)
        if count < 0:
            raise ValueError("count must not be negative")
        low, high = float(low), float(high)
        return [self._uniform_real(low, high) for _ in range(count)]

    def generate_bool(self, probability=0.5):
        """Return True with the given probability."""
        if not 0.0 <= probability <= 1.0:
            raise ValueError("probability must lie in [0, 1]")
        return self._rng.random() < probability

    def generate_normal(self, mean, stddev):
        """Return a value drawn from a normal distribution."""
        _check_real(mean, stddev)
        if not stddev > 0:
            raise ValueError("standard deviation must be positive")
        return self._rng.gauss(float(mean), float(stddev))

    def seed(self, seed):
        """Re-seed with a 32-bit value for a reproducible sequence."""
        _check_integral(seed)
        self._rng.seed(int(seed) & _SEED_MASK)

    def seed_with_time(self):
        """Re-seed from the current high-resolution clock."""
        self._rng.seed(time.perf_counter_ns() & _SEED_MASK)


_thread_state = threading.local()


def _thread_rng():
    rng = getattr(_thread_state, "rng", None)
    if rng is None:
        rng = random.Random()
        rng.seed()
        _thread_state.rng = rng
    return rng


def shuffle_container(items):
    """Shuffle a mutable sequence in place."""
    if not isinstance(items, MutableSequence):
        raise TypeError(f"cannot shuffle a {type(items).__name__} in place")
    _thread_rng().shuffle(items)


def sample_from_range(items, count):
    """Return up to ``count`` items chosen without replacement, in their original order.

    When ``count`` is at least the number of items, all of them are returned.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    pool = list(items)
    if count >= len(pool):
        return pool
    chosen = sorted(_thread_rng().sample(range(len(pool)), count))
    return [pool[position] for position in chosen]