r"""Retry decision logic for failed attempts.

This module provides the ``RetryDecider`` class that decides whether a
failed attempt is retried. The retry bound is always checked before the
caller's veto predicate.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class RetryDecider:
    """Decides whether a failed attempt should be retried.

    Args:
        max_attempts: Maximum number of retries.
        can_retry: Optional veto predicate ``(error, attempt_index) -> bool``.
            Only a ``False`` result vetoes the retry; ``None`` or any other
            value lets it happen.
    """

    def __init__(
        self,
        max_attempts: int,
        can_retry: Callable[[Exception, int], bool] | None = None,
    ) -> None:
        self.max_attempts = max_attempts
        self.can_retry = can_retry

    def should_retry(self, error: Exception, attempt_index: int) -> tuple[bool, str]:
        """Determine if a failed attempt should be retried.

        Args:
            error: The exception raised by the attempt.
            attempt_index: Index of the failed attempt (0-indexed).

        Returns:
            Tuple of (should_retry, reason).

        Example:
            ```pycon
            >>> from tente.retry import RetryDecider
            >>> decider = RetryDecider(max_attempts=1)
            >>> decider.should_retry(ValueError(), 0)
            (True, 'ValueError')
            >>> decider.should_retry(ValueError(), 1)
            (False, 'max attempts exhausted')

            ```
        """
        if attempt_index >= self.max_attempts:
            return (False, "max attempts exhausted")
        if self.can_retry is not None and self.can_retry(error, attempt_index) is False:
            return (False, "can_retry returned False")
        return (True, type(error).__name__)
