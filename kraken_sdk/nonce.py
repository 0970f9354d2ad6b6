"""Monotonic nonce source for private requests."""

import threading
import time
from typing import Callable, Optional


def microseconds() -> int:
    """Current wall-clock time in microseconds since the epoch."""
    return time.time_ns() // 1000


class NonceGenerator:
    """
    Strictly increasing integer nonces.

    Values follow the clock while it moves forward. When two calls land in the
    same microsecond, or the clock steps back, the previous value plus one is
    used instead.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        """
        Initialize nonce generator.

        Args:
            clock: Callable returning the current time as an int (defaults to microseconds)
        """
        self._clock = clock or microseconds
        self._last = 0
        self._lock = threading.Lock()

    def next(self) -> int:
        """Return a nonce strictly greater than every nonce seen so far."""
        with self._lock:
            self._last = max(int(self._clock()), self._last + 1)
            return self._last

    def observe(self, nonce: int) -> None:
        """Record an externally supplied nonce so generated ones stay above it."""
        with self._lock:
            self._last = max(self._last, nonce)

    @property
    def last(self) -> int:
        """Most recent nonce (0 if none yet)."""
        return self._last
