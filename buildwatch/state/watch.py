"""
Watch state and the iteration budget shared by discovery and monitoring.
"""

from enum import Enum


class WatchState(str, Enum):
    """States of a single watch run."""

    SEARCHING = "searching"
    FOUND = "found"
    POLLING = "polling"
    SUCCESS = "success"
    FAILURE = "failure"
    EXHAUSTED = "exhausted"

    @property
    def is_terminal(self) -> bool:
        return self in (WatchState.SUCCESS, WatchState.FAILURE, WatchState.EXHAUSTED)


class IterationBudget:
    """Counter of attempts, carried over from discovery into monitoring."""

    def __init__(self, max_iterations: int):
        if max_iterations < 0:
            raise ValueError("max_iterations must not be negative")
        self._max = max_iterations
        self._count = 0

    @property
    def used(self) -> int:
        """Number of attempts consumed so far."""
        return self._count

    @property
    def exhausted(self) -> bool:
        """True once the counter has passed the ceiling."""
        return self._count > self._max

    def consume(self) -> None:
        """Spend one attempt."""
        self._count += 1
