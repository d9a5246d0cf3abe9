r"""Asynchronous retry executor.

This module provides the ``AsyncRetryExecutor`` class that runs an
async operation with automatic retries according to a resolved policy.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import inspect
from typing import TYPE_CHECKING, Any

from tente.retry.config import InvocationState
from tente.retry.decider import RetryDecider
from tente.retry.executor_core import handle_failure, operation_name
from tente.retry.manager import CallbackManager

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping, Sequence

    from tente.retry.config import Policy


class AsyncRetryExecutor:
    """Executes async operations with automatic retry logic.

    The executor orchestrates the following components:
    - Policy: the resolved retry configuration
    - RetryDecider: decides whether a failed attempt is retried
    - CallbackManager: invokes the ``on_retry`` observation callback

    Args:
        policy: The resolved retry policy.
        sleep: Optional sleep capability ``sleep(seconds)``. It may return
            an awaitable, which is awaited. Defaults to ``asyncio.sleep``.

    Attributes:
        policy: The resolved retry policy.
        decider: Logic for deciding whether to retry.
        callbacks: Manager for invoking callbacks.
        sleep: The custom sleep capability, or ``None`` for ``asyncio.sleep``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from tente.retry import AsyncRetryExecutor, resolve_policy
        >>> async def fetch(key):
        ...     return key.upper()
        ...
        >>> executor = AsyncRetryExecutor(resolve_policy({"attempts": {"max": 3}}))
        >>> asyncio.run(executor.execute(fetch, ("abc",)))
        'ABC'

        ```
    """

    def __init__(
        self,
        policy: Policy,
        sleep: Callable[[float], Awaitable[None] | None] | None = None,
    ) -> None:
        self.policy = policy
        self.decider: RetryDecider = RetryDecider(policy.max_attempts, policy.can_retry)
        self.callbacks: CallbackManager = CallbackManager(policy.on_retry)
        self.sleep = sleep

    async def execute(
        self,
        operation: Callable[..., Awaitable[Any]],
        args: Sequence[Any] = (),
        kwargs: Mapping[str, Any] | None = None,
        state: InvocationState | None = None,
    ) -> Any:
        """Run an async operation until it succeeds or fails terminally.

        Attempts the operation up to ``max_attempts + 1`` times. Every
        attempt is called with the same arguments. After a failure:
        - if the retry bound is exhausted, the error is re-raised
        - if ``can_retry`` vetoes the retry, the error is re-raised
        - otherwise the delay is computed, ``on_retry`` is invoked, the
          executor sleeps and the operation is called again

        Only ``Exception`` subclasses are retried. Cancellation and other
        ``BaseException`` subclasses propagate immediately.

        Args:
            operation: The async callable to run.
            args: Positional arguments for every attempt.
            kwargs: Keyword arguments for every attempt.
            state: Optional invocation state to advance. A fresh state
                starting at attempt 0 is used when ``None``.

        Returns:
            The value returned by the first successful attempt.

        Raises:
            Exception: The exception of the last attempt, unchanged.
        """
        if state is None:
            state = InvocationState()
        kwargs = kwargs or {}
        name = operation_name(operation)

        while True:
            try:
                return await operation(*args, **kwargs)
            except Exception as exc:
                delay = handle_failure(
                    exc, state, self.policy, self.decider, self.callbacks, name
                )
                if delay is None:
                    raise

            await self._sleep(delay)
            state.advance()

    async def _sleep(self, delay: float) -> None:
        if self.sleep is None:
            await asyncio.sleep(delay)
            return
        result = self.sleep(delay)
        if inspect.isawaitable(result):
            await result
