r"""Backoff strategy reading delays from an explicit schedule."""

from __future__ import annotations

__all__ = ["ScheduleBackoff"]

from typing import TYPE_CHECKING

from tente.backoff.base import BaseBackoffStrategy

if TYPE_CHECKING:
    from collections.abc import Iterable


class ScheduleBackoff(BaseBackoffStrategy):
    """Per-attempt delays taken from a sequence.

    The delay of attempt ``i`` is ``delays[i]``. Past the end of the
    schedule the last delay repeats. An empty schedule always yields 0.

    Args:
        delays: The delays in seconds, one per failed attempt.

    Example:
        ```pycon
        >>> from tente.backoff import ScheduleBackoff
        >>> backoff = ScheduleBackoff([1.0, 2.0, 5.0])
        >>> [backoff.calculate(i) for i in range(5)]
        [1.0, 2.0, 5.0, 5.0, 5.0]

        ```
    """

    def __init__(self, delays: Iterable[float]) -> None:
        self.delays = tuple(delays)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(delays={list(self.delays)})"

    def calculate(self, attempt: int) -> float:
        if not self.delays:
            return 0.0
        return self.delays[min(attempt, len(self.delays) - 1)]
