r"""Retry decoration entry points.

This module provides ``tente``, which wraps an operation into a
``RetryingOperation``, and the decorator factory ``retryable``.

Example:
    ```pycon
    >>> import asyncio
    >>> from tente import retryable
    >>> calls = []
    >>> @retryable(max_attempts=3, delay=0)
    ... async def flaky():
    ...     calls.append(1)
    ...     if len(calls) < 3:
    ...         raise ConnectionError("try again")
    ...     return "ok"
    ...
    >>> asyncio.run(flaky())
    'ok'
    >>> len(calls)
    3

    ```
"""

from __future__ import annotations

__all__ = ["RetryingOperation", "retryable", "tente"]

import functools
import inspect
import types
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from tente.core.config import RetryOptions
from tente.retry.config import InvocationState, Policy
from tente.retry.executor import RetryExecutor
from tente.retry.executor_async import AsyncRetryExecutor
from tente.retry.policy import resolve_policy

if TYPE_CHECKING:
    from collections.abc import Callable

    from tente.core.config import DelayOption


def _is_async_callable(operation: Any) -> bool:
    if inspect.iscoroutinefunction(operation):
        return True
    call = getattr(operation, "__call__", None)  # noqa: B004
    return inspect.iscoroutinefunction(call)


class RetryingOperation:
    """Callable wrapper adding automatic retries to an operation.

    Calling the wrapper has the same contract as calling the operation:
    same arguments, same return value (a coroutine for async
    operations), same exceptions, with retries happening in between
    according to the policy.

    Public attributes that the wrapper does not define itself are
    forwarded to the wrapped operation: reading them returns the
    operation's attribute (methods stay bound to the operation), and
    setting or deleting them applies to the operation.

    Args:
        operation: The operation to wrap.
        policy: The resolved retry policy.
        sleep: Optional sleep capability used between attempts.
        share_state: If ``True``, a single ``InvocationState`` is carried
            across all calls, so the attempt index of a call starts where
            the previous calls left it and is never reset. By default
            every call starts from attempt 0.
        asynchronous: Whether the operation is async. Detected with
            ``inspect.iscoroutinefunction`` when ``None``. Set it to
            ``True`` for plain functions returning an awaitable.
    """

    def __init__(
        self,
        operation: Callable[..., Any],
        policy: Policy,
        sleep: Callable[[float], Any] | None = None,
        share_state: bool = False,
        asynchronous: bool | None = None,
    ) -> None:
        original = operation
        if asynchronous is None:
            asynchronous = _is_async_callable(operation)
        if asynchronous:
            executor = AsyncRetryExecutor(policy, sleep=sleep)
            if not inspect.iscoroutinefunction(operation):
                operation = _awaiting(operation)
        else:
            executor = RetryExecutor(policy, sleep=sleep)

        object.__setattr__(self, "_target", operation)
        object.__setattr__(self, "_executor", executor)
        object.__setattr__(self, "_state", InvocationState() if share_state else None)
        for attr in functools.WRAPPER_ASSIGNMENTS:
            try:
                value = getattr(original, attr)
            except AttributeError:
                continue
            object.__setattr__(self, attr, value)
        object.__setattr__(self, "__wrapped__", original)

    @property
    def policy(self) -> Policy:
        """The resolved retry policy."""
        return self._executor.policy

    @property
    def state(self) -> InvocationState | None:
        """The shared invocation state, or ``None`` without ``share_state``."""
        return self._state

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._executor.execute(self._target, args, kwargs, state=self._state)

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return types.MethodType(self, instance)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or name in {"_target", "_executor", "_state"}:
            raise AttributeError(name)
        return getattr(self.__wrapped__, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_") or hasattr(type(self), name):
            object.__setattr__(self, name, value)
        else:
            setattr(self.__wrapped__, name, value)

    def __delattr__(self, name: str) -> None:
        if name.startswith("_") or hasattr(type(self), name):
            object.__delattr__(self, name)
        else:
            delattr(self.__wrapped__, name)

    def __repr__(self) -> str:
        name = getattr(self, "__qualname__", None) or repr(self.__wrapped__)
        return f"<{self.__class__.__name__} {name} max_attempts={self.policy.max_attempts}>"


def _awaiting(operation: Callable[..., Any]) -> Callable[..., Any]:
    """Adapt a plain function returning an awaitable into a coroutine
    function, so failures raised while awaiting are retried too."""

    @functools.wraps(operation)
    async def call(*args: Any, **kwargs: Any) -> Any:
        result = operation(*args, **kwargs)
        if inspect.isawaitable(result):
            result = await result
        return result

    return call


def tente(
    operation: Callable[..., Any] | None = None,
    options: RetryOptions | Mapping[str, Any] | Policy | None = None,
    *,
    max_attempts: int | None = None,
    delay: DelayOption | None = None,
    can_retry: Callable[[Exception, int], bool] | None = None,
    on_retry: Callable[[Exception, int, float], None] | None = None,
    sleep: Callable[[float], Any] | None = None,
    share_state: bool = False,
    asynchronous: bool | None = None,
) -> Any:
    """Decorate an operation with automatic retries.

    The options are resolved once into a ``Policy`` which is shared by
    every call of the returned operation.

    Args:
        operation: The operation to decorate. When ``None``, a decorator
            is returned instead.
        options: Retry options as ``RetryOptions``, as a nested mapping
            ``{"attempts": {"max": ..., "delay": ...}, "can_retry": ...,
            "on_retry": ...}``, or as an already resolved ``Policy``.
        max_attempts: Overrides ``attempts.max``, the maximum number of
            retries (default 0, never retry).
        delay: Overrides ``attempts.delay``: seconds, a function
            ``(error, attempt_index) -> seconds``, a sequence of
            per-attempt delays or a backoff strategy (default 0).
        can_retry: Overrides the veto predicate
            ``(error, attempt_index) -> bool``.
        on_retry: Overrides the observation callback
            ``(error, attempt_index, delay)``.
        sleep: Sleep capability used between attempts. Defaults to
            ``asyncio.sleep`` for async operations and ``time.sleep``
            otherwise.
        share_state: Carry the attempt index across calls instead of
            starting every call at 0.
        asynchronous: Force async (``True``) or sync (``False``)
            execution instead of detecting it.

    Returns:
        The ``RetryingOperation``, or a decorator when ``operation`` is
        ``None``.

    Raises:
        TypeError: If keyword overrides are combined with a resolved
            ``Policy``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from tente import tente
        >>> async def fetch(key):
        ...     return {"key": key}
        ...
        >>> fetch_with_retries = tente(fetch, {"attempts": {"max": 5, "delay": 0.1}})
        >>> asyncio.run(fetch_with_retries("abc"))
        {'key': 'abc'}
        >>> fetch_with_retries.policy.max_attempts
        5

        ```
    """
    if operation is None:
        return functools.partial(
            tente,
            options=options,
            max_attempts=max_attempts,
            delay=delay,
            can_retry=can_retry,
            on_retry=on_retry,
            sleep=sleep,
            share_state=share_state,
            asynchronous=asynchronous,
        )

    overrides = {
        "max_attempts": max_attempts,
        "delay": delay,
        "can_retry": can_retry,
        "on_retry": on_retry,
    }
    if isinstance(options, Policy):
        if any(value is not None for value in overrides.values()):
            msg = "keyword overrides cannot be combined with a resolved Policy"
            raise TypeError(msg)
        policy = options
    else:
        if options is None:
            options = RetryOptions()
        elif isinstance(options, Mapping):
            options = RetryOptions.from_mapping(options)
        policy = resolve_policy(options.merge(**overrides))

    return RetryingOperation(
        operation,
        policy,
        sleep=sleep,
        share_state=share_state,
        asynchronous=asynchronous,
    )


def retryable(
    options: RetryOptions | Mapping[str, Any] | Policy | None = None,
    **kwargs: Any,
) -> Callable[[Callable[..., Any]], RetryingOperation]:
    """Create a retry decorator.

    Args:
        options: Retry options, see ``tente``.
        **kwargs: Keyword arguments accepted by ``tente``.

    Returns:
        A decorator wrapping an operation into a ``RetryingOperation``.

    Example:
        ```pycon
        >>> from tente import retryable
        >>> @retryable(max_attempts=2)
        ... def parse(text):
        ...     return int(text)
        ...
        >>> parse("42")
        42

        ```
    """
    return tente(None, options, **kwargs)
