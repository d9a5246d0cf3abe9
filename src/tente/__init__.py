r"""tente - Automatic retries for async (and sync) operations.

This package decorates a potentially failing operation with automatic
retry behavior: on failure the operation is called again after a
computed delay, up to a bound, subject to a caller-supplied predicate,
with an observation hook fired before every retry.

Key Features:
    - Bounded retries (``attempts.max``, 0 by default)
    - Fixed, per-attempt function, schedule or backoff strategy delays
    - Lenient configuration: invalid delays and bounds are sanitized
    - ``can_retry`` veto predicate and ``on_retry`` observation hook
    - Errors are surfaced unchanged, never wrapped
    - Transparent attribute forwarding to the wrapped operation
    - Opt-in structured JSON logging

Example:
    ```pycon
    >>> import asyncio
    >>> from tente import tente
    >>> async def fetch():
    ...     return "ok"
    ...
    >>> fetch_with_retries = tente(
    ...     fetch,
    ...     {"attempts": {"max": 5, "delay": 0.1}},
    ...     on_retry=lambda error, index, delay: print(f"retry {index} in {delay}s"),
    ... )
    >>> asyncio.run(fetch_with_retries())
    'ok'

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_MAX_ATTEMPTS",
    "AsyncRetryExecutor",
    "AttemptsOptions",
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "FibonacciBackoff",
    "InvocationState",
    "LinearBackoff",
    "Policy",
    "RetryExecutor",
    "RetryOptions",
    "RetryingOperation",
    "ScheduleBackoff",
    "__version__",
    "resolve_policy",
    "retryable",
    "tente",
]

from importlib.metadata import PackageNotFoundError, version

from tente.backoff import (
    BaseBackoffStrategy,
    ConstantBackoff,
    ExponentialBackoff,
    FibonacciBackoff,
    LinearBackoff,
    ScheduleBackoff,
)
from tente.core.config import (
    DEFAULT_DELAY,
    DEFAULT_MAX_ATTEMPTS,
    AttemptsOptions,
    RetryOptions,
)
from tente.decorator import RetryingOperation, retryable, tente
from tente.retry import (
    AsyncRetryExecutor,
    InvocationState,
    Policy,
    RetryExecutor,
    resolve_policy,
)

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
