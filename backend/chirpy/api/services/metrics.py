"""
Request counter for the admin metrics page.

This module provides a thread-safe in-memory counter of fileserver hits.
The counter is created by the application factory and shared through
``app.state``; it is never persisted.
"""

import logging
import threading

logger = logging.getLogger(__name__)


class HitCounter:
    """
    Thread-safe process-wide hit counter.

    Example:
        >>> counter = HitCounter()
        >>> counter.increment()
        1
        >>> counter.read()
        1
        >>> counter.reset()
        >>> counter.value
        0
    """

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Add one hit and return the new total."""
        with self._lock:
            self._value += 1
            return self._value

    def read(self) -> int:
        """Return the current number of hits."""
        with self._lock:
            return self._value

    @property
    def value(self) -> int:
        return self.read()

    def reset(self) -> None:
        """Set the counter back to zero."""
        with self._lock:
            previous = self._value
            self._value = 0
        logger.info(f"Hit counter reset (was {previous})")
