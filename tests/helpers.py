r"""Shared test helpers for retry tests."""

from __future__ import annotations

__all__ = ["failing_async_operation", "failing_operation", "failures"]

from typing import Any
from unittest.mock import AsyncMock, Mock


def failures(count: int, value: Any = "ok") -> list[Any]:
    """Create a side effect failing ``count`` times, then returning
    ``value``.

    The n-th error has the message ``"Failure (n/count)"``.

    Example:
        ```pycon
        >>> from tests.helpers import failures
        >>> failures(2)
        [ConnectionError('Failure (1/2)'), ConnectionError('Failure (2/2)'), 'ok']

        ```
    """
    return [ConnectionError(f"Failure ({i}/{count})") for i in range(1, count + 1)] + [value]


def failing_async_operation(count: int, value: Any = "ok") -> AsyncMock:
    """Create an async operation failing ``count`` times before
    returning ``value``."""
    return AsyncMock(side_effect=failures(count, value))


def failing_operation(count: int, value: Any = "ok") -> Mock:
    """Create a sync operation failing ``count`` times before returning
    ``value``."""
    return Mock(side_effect=failures(count, value))
