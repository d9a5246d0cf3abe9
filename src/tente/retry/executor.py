r"""Synchronous retry executor.

This module provides the ``RetryExecutor`` class, the blocking
counterpart of ``AsyncRetryExecutor`` for plain callables.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import functools
import inspect
import time
from typing import TYPE_CHECKING, Any

from tente.retry.config import InvocationState
from tente.retry.decider import RetryDecider
from tente.retry.executor_async import AsyncRetryExecutor
from tente.retry.executor_core import handle_failure, operation_name
from tente.retry.manager import CallbackManager

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping, Sequence

    from tente.retry.config import Policy


class RetryExecutor:
    """Executes synchronous operations with automatic retry logic.

    Args:
        policy: The resolved retry policy.
        sleep: Optional sleep capability ``sleep(seconds)``. Defaults to
            ``time.sleep``.

    Example:
        ```pycon
        >>> from tente.retry import RetryExecutor, resolve_policy
        >>> executor = RetryExecutor(resolve_policy({"attempts": {"max": 3}}))
        >>> executor.execute(str.upper, ("abc",))
        'ABC'

        ```
    """

    def __init__(
        self,
        policy: Policy,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.policy = policy
        self.decider: RetryDecider = RetryDecider(policy.max_attempts, policy.can_retry)
        self.callbacks: CallbackManager = CallbackManager(policy.on_retry)
        self.sleep = sleep

    def execute(
        self,
        operation: Callable[..., Any],
        args: Sequence[Any] = (),
        kwargs: Mapping[str, Any] | None = None,
        state: InvocationState | None = None,
    ) -> Any:
        """Run an operation until it succeeds or fails terminally.

        See ``AsyncRetryExecutor.execute`` for the retry semantics, which
        are identical apart from the blocking sleep.

        Args:
            operation: The callable to run.
            args: Positional arguments for every attempt.
            kwargs: Keyword arguments for every attempt.
            state: Optional invocation state to advance.

        Returns:
            The value returned by the first successful attempt. If an
            attempt returns an awaitable instead, a coroutine is returned
            that awaits it and keeps retrying asynchronously, sleeping
            with ``asyncio.sleep`` unless a sleep capability was given.

        Raises:
            Exception: The exception of the last attempt, unchanged.
        """
        if state is None:
            state = InvocationState()
        kwargs = kwargs or {}
        name = operation_name(operation)
        sleep = self.sleep if self.sleep is not None else time.sleep

        while True:
            try:
                result = operation(*args, **kwargs)
            except Exception as exc:
                delay = handle_failure(
                    exc, state, self.policy, self.decider, self.callbacks, name
                )
                if delay is None:
                    raise
            else:
                if inspect.isawaitable(result):
                    return self._await_with_retries(result, operation, args, kwargs, state)
                return result

            sleep(delay)
            state.advance()

    async def _await_with_retries(
        self,
        pending: Awaitable[Any],
        operation: Callable[..., Any],
        args: Sequence[Any],
        kwargs: Mapping[str, Any],
        state: InvocationState,
    ) -> Any:
        """Finish an invocation whose operation returned an awaitable.

        ``pending`` is the current attempt. It and every later attempt
        are awaited by an ``AsyncRetryExecutor`` sharing this policy,
        sleep capability and invocation state, so failures raised while
        awaiting are retried too.
        """
        pending_attempts = [pending]

        @functools.wraps(operation)
        async def attempt(*args: Any, **kwargs: Any) -> Any:
            result = pending_attempts.pop() if pending_attempts else operation(*args, **kwargs)
            if inspect.isawaitable(result):
                result = await result
            return result

        executor = AsyncRetryExecutor(self.policy, sleep=self.sleep)
        return await executor.execute(attempt, args, kwargs, state=state)
