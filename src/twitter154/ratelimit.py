"""Admission gates that pace outgoing requests."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from typing import Protocol


class Limiter(Protocol):
    """Blocks the caller until a request may be sent."""

    def take(self) -> float:
        """Wait for admission and return the admission time."""
        ...


class RateLimiter:
    """Leaky-bucket limiter admitting `rate` calls per `per` seconds.

    Admissions are spaced evenly, `per / rate` seconds apart. The lock only
    guards reserving the next slot; callers sleep outside it, so once
    admitted, concurrent calls proceed independently.
    """

    def __init__(
        self,
        rate: float,
        *,
        per: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize rate limiter.

        Args:
            rate: Admissions allowed per `per` seconds.
            per: Length of the window in seconds.
            clock: Monotonic time source.
            sleep: Blocking sleep used while waiting for a slot.

        Raises:
            ValueError: If rate or per is not positive.
        """
        if rate <= 0 or per <= 0:
            msg = f"rate and per must be positive, got rate={rate} per={per}"
            raise ValueError(msg)

        self.rate = rate
        self.interval = per / rate
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._next_slot: float | None = None

    def take(self) -> float:
        """Block until the next slot and return its time."""
        with self._lock:
            now = self._clock()
            slot = now if self._next_slot is None else max(now, self._next_slot)
            self._next_slot = slot + self.interval

        wait = slot - now
        if wait > 0:
            self._sleep(wait)
        return slot

    def __repr__(self) -> str:
        return f"RateLimiter(rate={self.rate}, interval={self.interval:.3f}s)"


class UnlimitedLimiter:
    """Limiter that admits every call immediately."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock

    def take(self) -> float:
        return self._clock()

    def __repr__(self) -> str:
        return "UnlimitedLimiter()"
