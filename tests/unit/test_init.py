r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import pytest

import tente


def test_package_version_is_string() -> None:
    assert isinstance(tente.__version__, str)


def test_package_version_format() -> None:
    assert "." in tente.__version__


def test_all_exports_defined() -> None:
    for name in tente.__all__:
        assert hasattr(tente, name), f"{name} is in __all__ but not defined in module"


def test_default_constants() -> None:
    assert tente.DEFAULT_MAX_ATTEMPTS == 0
    assert tente.DEFAULT_DELAY == 0.0


@pytest.mark.parametrize("func_name", ["tente", "retryable", "resolve_policy"])
def test_entry_points_are_callable(func_name: str) -> None:
    assert callable(getattr(tente, func_name))


def test_retry_subpackage_is_not_shadowed() -> None:
    from tente.retry import AsyncRetryExecutor

    assert tente.AsyncRetryExecutor is AsyncRetryExecutor


@pytest.mark.parametrize(
    "name",
    [
        "ConstantBackoff",
        "ExponentialBackoff",
        "FibonacciBackoff",
        "LinearBackoff",
        "ScheduleBackoff",
    ],
)
def test_backoff_strategies_exported(name: str) -> None:
    from tente import backoff

    assert name in tente.__all__
    assert getattr(tente, name) is getattr(backoff, name)
