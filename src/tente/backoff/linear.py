r"""Linear backoff strategy."""

from __future__ import annotations

__all__ = ["LinearBackoff"]

from tente.backoff.base import BaseBackoffStrategy


class LinearBackoff(BaseBackoffStrategy):
    """Linear backoff strategy.

    The delay grows by ``base_delay`` with every failed attempt:
    ``base_delay * (attempt + 1)``, optionally capped at ``max_delay``.

    Args:
        base_delay: The delay step in seconds (default: 1.0).
        max_delay: Optional cap in seconds.

    Example:
        ```pycon
        >>> from tente.backoff import LinearBackoff
        >>> backoff = LinearBackoff(base_delay=0.5)
        >>> [backoff.calculate(i) for i in range(3)]
        [0.5, 1.0, 1.5]
        >>> LinearBackoff(base_delay=2.0, max_delay=5.0).calculate(5)
        5.0

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

    def calculate(self, attempt: int) -> float:
        delay = self.base_delay * (attempt + 1)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
