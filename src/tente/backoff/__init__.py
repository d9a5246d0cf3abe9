r"""Backoff strategies for retry delays.

This package provides delay strategies that can be passed as the
``delay`` option: constant, linear, exponential, Fibonacci and explicit
schedule.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "FibonacciBackoff",
    "LinearBackoff",
    "ScheduleBackoff",
]

from tente.backoff.base import BaseBackoffStrategy
from tente.backoff.constant import ConstantBackoff
from tente.backoff.exponential import ExponentialBackoff
from tente.backoff.fibonacci import FibonacciBackoff
from tente.backoff.linear import LinearBackoff
from tente.backoff.schedule import ScheduleBackoff
