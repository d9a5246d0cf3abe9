r"""Lenient sanitizers for retry configuration values.

Retry configuration is never rejected: malformed numeric values are
silently corrected to a safe floor instead of raising.
"""

from __future__ import annotations

__all__ = ["is_real_number", "sanitize_delay", "sanitize_max_attempts"]

import math
from numbers import Real
from typing import Any

from tente.core.config import DEFAULT_DELAY, DEFAULT_MAX_ATTEMPTS


def is_real_number(value: Any) -> bool:
    """Indicate if a value is a real number usable as a duration or count.

    ``bool`` values are excluded even though they subclass ``int``.

    Example:
        ```pycon
        >>> from tente.core.validation import is_real_number
        >>> is_real_number(1.5)
        True
        >>> is_real_number(True)
        False
        >>> is_real_number("1")
        False

        ```
    """
    return isinstance(value, Real) and not isinstance(value, bool)


def sanitize_delay(delay: Any) -> float:
    """Sanitize a delay value in seconds.

    Args:
        delay: The raw delay value. It can be anything, typically the
            value returned by a user-supplied delay function.

    Returns:
        The delay as a float if it is a finite, non-negative real number,
        otherwise ``DEFAULT_DELAY`` (0.0).

    Example:
        ```pycon
        >>> from tente.core.validation import sanitize_delay
        >>> sanitize_delay(1.5)
        1.5
        >>> sanitize_delay(-3)
        0.0
        >>> sanitize_delay(float("nan"))
        0.0
        >>> sanitize_delay(float("inf"))
        0.0
        >>> sanitize_delay(None)
        0.0

        ```
    """
    if not is_real_number(delay):
        return DEFAULT_DELAY
    delay = float(delay)
    if not math.isfinite(delay) or delay < 0:
        return DEFAULT_DELAY
    return delay


def sanitize_max_attempts(max_attempts: Any) -> int:
    """Sanitize the maximum number of retries.

    Args:
        max_attempts: The raw maximum number of retries.

    Returns:
        The value floored to an integer if it is a finite, non-negative
        real number, otherwise ``DEFAULT_MAX_ATTEMPTS`` (0, no retries).

    Example:
        ```pycon
        >>> from tente.core.validation import sanitize_max_attempts
        >>> sanitize_max_attempts(3)
        3
        >>> sanitize_max_attempts(2.7)
        2
        >>> sanitize_max_attempts(-1)
        0
        >>> sanitize_max_attempts(float("inf"))
        0

        ```
    """
    if not is_real_number(max_attempts):
        return DEFAULT_MAX_ATTEMPTS
    if not math.isfinite(max_attempts) or max_attempts < 0:
        return DEFAULT_MAX_ATTEMPTS
    return math.floor(max_attempts)
