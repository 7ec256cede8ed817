"""
Resubmission delay policies for unprocessed batch requests.

A policy is any callable taking the 1-based resubmission attempt for the
current chunk and returning the number of seconds to wait before it.
"""

import random
from typing import Callable

RetryDelay = Callable[[int], float]


def no_delay(attempt: int) -> float:
    """Resubmit immediately and leave backoff to the client's own retry policy."""
    return 0.0


class ExponentialBackoff:
    """Exponential backoff with optional full jitter.

    delay = min(cap, base * 2 ** (attempt - 1)), scaled by a random factor
    in [0, 1) when jitter is enabled.
    """

    def __init__(self, base: float = 0.05, cap: float = 20.0, jitter: bool = True):
        if base < 0 or cap < 0:
            raise ValueError("Backoff base and cap cannot be negative")
        self.base = base
        self.cap = cap
        self.jitter = jitter

    def __call__(self, attempt: int) -> float:
        delay = min(self.cap, self.base * (2 ** max(attempt - 1, 0)))
        if self.jitter:
            delay *= random.random()
        return delay

    def __repr__(self) -> str:
        return f"ExponentialBackoff(base={self.base!r}, cap={self.cap!r}, jitter={self.jitter!r})"
