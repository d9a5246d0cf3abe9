r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy maps the index of a failed attempt to the delay
    to wait before the next one. Any strategy can be passed as the
    ``delay`` option of ``tente.tente``.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the delay before retrying a failed attempt.

        Args:
            attempt: The index of the failed attempt (0-indexed). For
                example, attempt=0 is the initial call, so its delay is
                the one before the first retry.

        Returns:
            The delay in seconds.
        """
