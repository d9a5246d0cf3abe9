r"""Shared core logic for retry executors.

This module provides helpers used by both the synchronous and the
asynchronous retry executors: the failure handling step of the retry
state machine and its logging.
"""

from __future__ import annotations

__all__ = ["handle_failure", "operation_name"]

import logging
from typing import TYPE_CHECKING, Any

from tente.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from tente.retry.config import InvocationState, Policy
    from tente.retry.decider import RetryDecider
    from tente.retry.manager import CallbackManager

logger: logging.Logger = logging.getLogger(__name__)


def operation_name(operation: Any) -> str:
    """Return a readable name for an operation, used in log records.

    Example:
        ```pycon
        >>> from tente.retry.executor_core import operation_name
        >>> def fetch():
        ...     pass
        ...
        >>> operation_name(fetch)
        'fetch'

        ```
    """
    return getattr(operation, "__qualname__", None) or repr(operation)


def handle_failure(
    error: Exception,
    state: InvocationState,
    policy: Policy,
    decider: RetryDecider,
    callbacks: CallbackManager,
    name: str,
) -> float | None:
    """Process a failed attempt.

    The bound is checked first, then the veto predicate. When the
    attempt is retried, the delay is computed and ``on_retry`` is invoked
    before returning, so the observation always happens before the delay.

    Args:
        error: The exception raised by the attempt.
        state: The invocation state. It is not advanced here, the
            executor advances it after the delay.
        policy: The resolved policy.
        decider: The retry decider built from the policy.
        callbacks: The callback manager built from the policy.
        name: The operation name for log records.

    Returns:
        The delay in seconds before the next attempt, or ``None`` if the
        failure is terminal.
    """
    attempt_index = state.attempt_index
    should_retry, reason = decider.should_retry(error, attempt_index)
    if not should_retry:
        log_structured(
            logger,
            logging.DEBUG,
            f"{name}: giving up after attempt {attempt_index} ({reason})",
            operation=name,
            attempt_index=attempt_index,
            reason=reason,
        )
        return None

    delay = policy.delay_fn(error, attempt_index)
    callbacks.on_retry(error, attempt_index, delay)
    log_structured(
        logger,
        logging.DEBUG,
        f"{name}: attempt {attempt_index} failed, will retry in {delay:.2f}s ({reason})",
        operation=name,
        attempt_index=attempt_index,
        delay=delay,
        reason=reason,
    )
    return delay
