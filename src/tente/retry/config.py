r"""Resolved retry policy and per-invocation retry state.

This module provides the immutable ``Policy`` consumed by the retry
executors and the mutable ``InvocationState`` they advance.
"""

from __future__ import annotations

__all__ = ["InvocationState", "Policy"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True)
class Policy:
    """Canonical retry policy of a decorated operation.

    Instances are built by ``tente.retry.policy.resolve_policy`` and never
    change afterwards.

    Attributes:
        max_attempts: Maximum number of retries (0 means never retry).
        delay_fn: Function ``(error, attempt_index) -> seconds``. It always
            returns a finite, non-negative float.
        can_retry: Optional veto predicate ``(error, attempt_index) -> bool``.
        on_retry: Optional observation callback
            ``(error, attempt_index, delay) -> None``.
    """

    max_attempts: int
    delay_fn: Callable[[Exception, int], float]
    can_retry: Callable[[Exception, int], bool] | None = None
    on_retry: Callable[[Exception, int, float], None] | None = None


@dataclass
class InvocationState:
    """Progress of a logical invocation through its retries.

    Attributes:
        attempt_index: Index of the current attempt (0-indexed). It only
            ever grows, by exactly one after each retried failure.
    """

    attempt_index: int = 0

    def advance(self) -> None:
        """Move on to the next attempt."""
        self.attempt_index += 1
