r"""Configuration defaults and lenient validation shared by the retry
engine."""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_MAX_ATTEMPTS",
    "AttemptsOptions",
    "RetryOptions",
    "is_real_number",
    "sanitize_delay",
    "sanitize_max_attempts",
]

from tente.core.config import (
    DEFAULT_DELAY,
    DEFAULT_MAX_ATTEMPTS,
    AttemptsOptions,
    RetryOptions,
)
from tente.core.validation import is_real_number, sanitize_delay, sanitize_max_attempts
