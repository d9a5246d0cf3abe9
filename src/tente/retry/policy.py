r"""Policy resolution from caller-supplied retry options.

The resolver turns the polymorphic ``delay`` option (fixed value,
per-attempt function, schedule or backoff strategy) into a single
uniform delay function, so the executors never branch on the shape of
the configuration.
"""

from __future__ import annotations

__all__ = ["make_delay_fn", "resolve_policy"]

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from tente.backoff import BaseBackoffStrategy, ScheduleBackoff
from tente.core.config import RetryOptions
from tente.core.validation import is_real_number, sanitize_delay, sanitize_max_attempts
from tente.retry.config import Policy

if TYPE_CHECKING:
    from tente.core.config import DelayOption

logger: logging.Logger = logging.getLogger(__name__)


def make_delay_fn(delay: DelayOption | None) -> Callable[[Exception, int], float]:
    """Build the sanitized delay function for a ``delay`` option.

    Args:
        delay: The raw option. A backoff strategy is called with the
            attempt index, a callable with ``(error, attempt_index)``, a
            sequence is read as a per-attempt schedule, and anything else
            is used as a fixed value.

    Returns:
        A function ``(error, attempt_index) -> seconds`` whose result is
        always a finite, non-negative float. Non-finite, negative or
        non-numeric raw values become 0.

    Example:
        ```pycon
        >>> from tente.retry.policy import make_delay_fn
        >>> make_delay_fn(2)(ValueError(), 0)
        2.0
        >>> make_delay_fn(lambda error, i: i * 10)(ValueError(), 3)
        30.0
        >>> make_delay_fn([1, 2])(ValueError(), 5)
        2.0
        >>> make_delay_fn(-1)(ValueError(), 0)
        0.0

        ```
    """
    if isinstance(delay, BaseBackoffStrategy):
        strategy = delay
        return lambda error, attempt_index: sanitize_delay(  # noqa: ARG005
            strategy.calculate(attempt_index)
        )
    if callable(delay):
        func = delay
        return lambda error, attempt_index: sanitize_delay(func(error, attempt_index))
    if isinstance(delay, Sequence) and not isinstance(delay, (str, bytes)):
        return make_delay_fn(ScheduleBackoff(delay))

    if delay is not None and not is_real_number(delay):
        logger.debug(f"Ignoring unsupported delay option {delay!r}, using 0.0")
    fixed = sanitize_delay(delay)
    return lambda error, attempt_index: fixed  # noqa: ARG005


def resolve_policy(options: RetryOptions | Mapping[str, Any] | Policy | None = None) -> Policy:
    """Normalize retry options into a canonical ``Policy``.

    Resolution never fails and has no side effects: malformed values are
    silently sanitized. A negative, non-finite or non-numeric
    ``attempts.max`` means no retry, and a fractional one is floored.

    Args:
        options: The retry options, either as ``RetryOptions``, as a
            nested mapping (see ``RetryOptions.from_mapping``), or an
            already resolved ``Policy`` which is returned unchanged.
            ``None`` yields the default policy (no retry).

    Returns:
        The resolved policy.

    Example:
        ```pycon
        >>> from tente.retry.policy import resolve_policy
        >>> policy = resolve_policy({"attempts": {"max": 3, "delay": float("nan")}})
        >>> policy.max_attempts
        3
        >>> policy.delay_fn(ValueError(), 0)
        0.0
        >>> policy.can_retry is None
        True

        ```
    """
    if isinstance(options, Policy):
        return options
    if options is None:
        options = RetryOptions()
    elif not isinstance(options, RetryOptions):
        options = RetryOptions.from_mapping(options)

    return Policy(
        max_attempts=sanitize_max_attempts(options.attempts.max),
        delay_fn=make_delay_fn(options.attempts.delay),
        can_retry=options.can_retry,
        on_retry=options.on_retry,
    )
