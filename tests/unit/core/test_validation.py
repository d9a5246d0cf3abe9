r"""Unit tests for configuration sanitizers."""

from __future__ import annotations

import math
from fractions import Fraction

import pytest

from tente.core.validation import is_real_number, sanitize_delay, sanitize_max_attempts

####################################
#     Tests for is_real_number     #
####################################


@pytest.mark.parametrize("value", [0, 1, 2.5, -3, math.inf, math.nan, Fraction(1, 2)])
def test_is_real_number_true(value: object) -> None:
    assert is_real_number(value)


@pytest.mark.parametrize("value", [True, False, None, "1", [1], 1j])
def test_is_real_number_false(value: object) -> None:
    assert not is_real_number(value)


####################################
#     Tests for sanitize_delay     #
####################################


@pytest.mark.parametrize(("delay", "expected"), [(0, 0.0), (1, 1.0), (2.5, 2.5), (100, 100.0)])
def test_sanitize_delay_valid(delay: float, expected: float) -> None:
    assert sanitize_delay(delay) == expected


def test_sanitize_delay_returns_float() -> None:
    assert isinstance(sanitize_delay(3), float)


@pytest.mark.parametrize(
    "delay", [-14000, -0.1, math.nan, math.inf, -math.inf, None, "10", True, object()]
)
def test_sanitize_delay_invalid(delay: object) -> None:
    assert sanitize_delay(delay) == 0.0


###########################################
#     Tests for sanitize_max_attempts     #
###########################################


@pytest.mark.parametrize(("max_attempts", "expected"), [(0, 0), (1, 1), (5, 5), (2.7, 2)])
def test_sanitize_max_attempts_valid(max_attempts: float, expected: int) -> None:
    assert sanitize_max_attempts(max_attempts) == expected


def test_sanitize_max_attempts_returns_int() -> None:
    assert isinstance(sanitize_max_attempts(3.0), int)


@pytest.mark.parametrize("max_attempts", [-1, -0.5, math.nan, math.inf, None, "3", False])
def test_sanitize_max_attempts_invalid(max_attempts: object) -> None:
    assert sanitize_max_attempts(max_attempts) == 0
