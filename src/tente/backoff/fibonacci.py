r"""Fibonacci backoff strategy."""

from __future__ import annotations

__all__ = ["FibonacciBackoff"]

from tente.backoff.base import BaseBackoffStrategy


class FibonacciBackoff(BaseBackoffStrategy):
    """Fibonacci backoff strategy.

    The n-th retry waits ``base_delay`` times the n-th Fibonacci number
    (1, 1, 2, 3, 5, 8, ...), optionally capped at ``max_delay``. Delays
    grow faster than ``LinearBackoff`` and slower than
    ``ExponentialBackoff``.

    Args:
        base_delay: The delay unit in seconds (default: 1.0).
        max_delay: Optional cap in seconds.

    Example:
        ```pycon
        >>> from tente.backoff import FibonacciBackoff
        >>> backoff = FibonacciBackoff(base_delay=0.5)
        >>> [backoff.calculate(i) for i in range(6)]
        [0.5, 0.5, 1.0, 1.5, 2.5, 4.0]
        >>> FibonacciBackoff(max_delay=10.0).calculate(10)
        10.0

        ```
    """

    def __init__(self, base_delay: float = 1.0, max_delay: float | None = None) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        if max_delay is not None and max_delay <= 0:
            msg = f"max_delay must be positive if specified, got {max_delay}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )

    @staticmethod
    def _fibonacci(n: int) -> int:
        """Return the n-th Fibonacci number, with ``_fibonacci(1) == 1``
        and 0 for ``n <= 0``."""
        previous, current = 0, 1
        if n <= 0:
            return previous
        for _ in range(n - 1):
            previous, current = current, previous + current
        return current

    def calculate(self, attempt: int) -> float:
        delay = self.base_delay * self._fibonacci(attempt + 1)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
