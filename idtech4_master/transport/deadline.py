"""Deadline tracking for blocking socket operations."""

import time
from typing import Optional


class Deadline:
    """A fixed point in time after which a wait is abandoned."""

    def __init__(self, timeout: float):
        """Initialize the deadline.

        Args:
            timeout: Seconds allowed once the deadline is started.
        """
        self.timeout = timeout
        self._start_time: Optional[float] = None

    @property
    def elapsed(self) -> float:
        """Seconds elapsed since start."""
        if self._start_time is None:
            return 0.0
        return time.monotonic() - self._start_time

    @property
    def remaining(self) -> float:
        """Seconds remaining before the deadline."""
        return max(0.0, self.timeout - self.elapsed)

    @property
    def is_expired(self) -> bool:
        return self._start_time is not None and self.elapsed >= self.timeout

    def start(self) -> "Deadline":
        """Start the timer and return self."""
        self._start_time = time.monotonic()
        return self
