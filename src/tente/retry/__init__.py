r"""Retry engine.

Public API:
    - Policy: Resolved, immutable retry policy
    - InvocationState: Attempt progress of one logical invocation
    - resolve_policy: Normalizes caller options into a Policy
    - RetryDecider: Logic for deciding whether to retry
    - CallbackManager: Manager for callback invocations
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "CallbackManager",
    "InvocationState",
    "Policy",
    "RetryDecider",
    "RetryExecutor",
    "make_delay_fn",
    "resolve_policy",
]

from tente.retry.config import InvocationState, Policy
from tente.retry.decider import RetryDecider
from tente.retry.executor import RetryExecutor
from tente.retry.executor_async import AsyncRetryExecutor
from tente.retry.manager import CallbackManager
from tente.retry.policy import make_delay_fn, resolve_policy
