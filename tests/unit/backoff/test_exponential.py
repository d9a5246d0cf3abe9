r"""Unit tests for ExponentialBackoff strategy."""

from __future__ import annotations

import math

import pytest

from tente.backoff import ExponentialBackoff


@pytest.mark.parametrize(("attempt", "expected"), [(0, 1.0), (1, 2.0), (2, 4.0), (5, 32.0)])
def test_exponential_backoff_calculate(attempt: int, expected: float) -> None:
    assert ExponentialBackoff(base_delay=1.0).calculate(attempt) == expected


def test_exponential_backoff_default_values() -> None:
    backoff = ExponentialBackoff()
    assert backoff.base_delay == 0.3
    assert backoff.max_delay is None
    assert backoff.calculate(0) == 0.3


def test_exponential_backoff_max_delay() -> None:
    assert ExponentialBackoff(base_delay=1.0, max_delay=5.0).calculate(10) == 5.0


def test_exponential_backoff_overflow_without_cap() -> None:
    assert ExponentialBackoff(base_delay=1.0).calculate(5000) == math.inf


def test_exponential_backoff_overflow_with_cap() -> None:
    assert ExponentialBackoff(base_delay=1.0, max_delay=60.0).calculate(5000) == 60.0


def test_exponential_backoff_zero_base_delay() -> None:
    assert ExponentialBackoff(base_delay=0.0).calculate(5000) == 0.0


def test_exponential_backoff_invalid_base_delay() -> None:
    with pytest.raises(ValueError, match=r"base_delay must be non-negative"):
        ExponentialBackoff(base_delay=-0.1)


def test_exponential_backoff_invalid_max_delay() -> None:
    with pytest.raises(ValueError, match=r"max_delay must be positive"):
        ExponentialBackoff(max_delay=0)
