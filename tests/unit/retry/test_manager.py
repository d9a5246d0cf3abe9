r"""Unit tests for callback manager."""

from __future__ import annotations

from unittest.mock import Mock

from tente.retry.manager import CallbackManager


def test_callback_manager_creation() -> None:
    on_retry = Mock()
    assert CallbackManager(on_retry).on_retry_callback is on_retry


def test_on_retry_callback_invoked() -> None:
    on_retry = Mock()
    error = ConnectionError("boom")
    CallbackManager(on_retry).on_retry(error, 2, 1.5)
    on_retry.assert_called_once_with(error, 2, 1.5)


def test_on_retry_callback_none() -> None:
    # Should not raise
    CallbackManager().on_retry(ConnectionError("boom"), 0, 0.0)
