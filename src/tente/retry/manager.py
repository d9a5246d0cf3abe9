r"""Callback manager for retry observation."""

from __future__ import annotations

__all__ = ["CallbackManager"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CallbackManager:
    """Invokes the user-defined observation callback.

    Args:
        on_retry: Optional callback ``(error, attempt_index, delay)``.
    """

    def __init__(self, on_retry: Callable[[Exception, int, float], None] | None = None) -> None:
        self.on_retry_callback = on_retry

    def on_retry(self, error: Exception, attempt_index: int, delay: float) -> None:
        """Invoke the on_retry callback if provided.

        The callback runs synchronously, before the retry delay starts.
        Its return value is ignored.

        Args:
            error: The exception that triggered the retry.
            attempt_index: Index of the failed attempt (0-indexed).
            delay: The delay in seconds before the next attempt.
        """
        if self.on_retry_callback is not None:
            self.on_retry_callback(error, attempt_index, delay)
