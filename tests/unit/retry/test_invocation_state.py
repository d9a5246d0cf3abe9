r"""Unit tests for invocation state."""

from __future__ import annotations

from tente.retry.config import InvocationState


def test_invocation_state_starts_at_zero() -> None:
    assert InvocationState().attempt_index == 0


def test_invocation_state_advance() -> None:
    state = InvocationState()
    state.advance()
    state.advance()
    assert state.attempt_index == 2


def test_invocation_state_custom_start() -> None:
    state = InvocationState(attempt_index=4)
    state.advance()
    assert state.attempt_index == 5
