r"""Unit tests for FibonacciBackoff strategy."""

from __future__ import annotations

from unittest.mock import AsyncMock, call

import pytest

from tente import tente
from tente.backoff import FibonacciBackoff
from tests.helpers import failing_async_operation


@pytest.mark.parametrize(
    ("attempt", "expected"),
    [(0, 1.0), (1, 1.0), (2, 2.0), (3, 3.0), (4, 5.0), (5, 8.0), (6, 13.0)],
)
def test_fibonacci_backoff_calculate(attempt: int, expected: float) -> None:
    assert FibonacciBackoff().calculate(attempt) == expected


def test_fibonacci_backoff_base_delay() -> None:
    backoff = FibonacciBackoff(base_delay=0.5)
    assert [backoff.calculate(i) for i in range(6)] == [0.5, 0.5, 1.0, 1.5, 2.5, 4.0]


def test_fibonacci_backoff_max_delay() -> None:
    backoff = FibonacciBackoff(base_delay=1.0, max_delay=10.0)
    assert backoff.calculate(5) == 8.0
    assert backoff.calculate(6) == 10.0
    assert backoff.calculate(10) == 10.0


def test_fibonacci_backoff_zero_base_delay() -> None:
    backoff = FibonacciBackoff(base_delay=0.0)
    assert backoff.calculate(0) == 0.0
    assert backoff.calculate(5) == 0.0


@pytest.mark.parametrize(("n", "expected"), [(-1, 0), (0, 0), (1, 1), (2, 1), (3, 2), (7, 13), (11, 89)])
def test_fibonacci_number(n: int, expected: int) -> None:
    assert FibonacciBackoff._fibonacci(n) == expected


def test_fibonacci_backoff_invalid_base_delay() -> None:
    with pytest.raises(ValueError, match=r"base_delay must be non-negative"):
        FibonacciBackoff(base_delay=-1.0)


@pytest.mark.parametrize("max_delay", [0.0, -5.0])
def test_fibonacci_backoff_invalid_max_delay(max_delay: float) -> None:
    with pytest.raises(ValueError, match=r"max_delay must be positive"):
        FibonacciBackoff(max_delay=max_delay)


def test_fibonacci_backoff_repr() -> None:
    assert repr(FibonacciBackoff(base_delay=2.0)) == (
        "FibonacciBackoff(base_delay=2.0, max_delay=None)"
    )


@pytest.mark.asyncio
async def test_fibonacci_backoff_as_delay_option(asleep: AsyncMock) -> None:
    retrying = tente(
        failing_async_operation(4), max_attempts=4, delay=FibonacciBackoff(), sleep=asleep
    )
    assert await retrying() == "ok"
    assert asleep.await_args_list == [call(1.0), call(1.0), call(2.0), call(3.0)]
