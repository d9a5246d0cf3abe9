r"""Configuration dataclasses and defaults for retry decoration.

This module provides the default constants and the dataclass-based
configuration objects accepted by ``tente.tente`` and
``tente.retry.policy.resolve_policy``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_MAX_ATTEMPTS",
    "AttemptsOptions",
    "RetryOptions",
]

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

    from tente.backoff import BaseBackoffStrategy

    DelayOption = Union[
        float,
        Callable[[Exception, int], float],
        Sequence[float],
        BaseBackoffStrategy,
    ]


# Default maximum number of retries
# Total attempts = max + 1 (initial attempt), so 0 disables retrying
DEFAULT_MAX_ATTEMPTS = 0

# Default delay in seconds between two attempts
DEFAULT_DELAY = 0.0


@dataclass(frozen=True)
class AttemptsOptions:
    """Options controlling how many retries happen and how far apart.

    Args:
        max: Maximum number of retries after the initial attempt.
            Values that are negative or not a finite number are treated
            as 0 when the policy is resolved.
        delay: Delay before each retry. It can be a fixed number of
            seconds, a function ``(error, attempt_index) -> seconds``, a
            sequence of per-attempt delays, or a backoff strategy.

    Example:
        ```pycon
        >>> from tente.core.config import AttemptsOptions
        >>> AttemptsOptions(max=3, delay=0.5)
        AttemptsOptions(max=3, delay=0.5)

        ```
    """

    max: int = DEFAULT_MAX_ATTEMPTS
    delay: DelayOption | None = DEFAULT_DELAY


@dataclass(frozen=True)
class RetryOptions:
    """Caller-supplied retry configuration.

    The values are stored as given; normalization happens in
    ``tente.retry.policy.resolve_policy``.

    Args:
        attempts: Retry count and delay options.
        can_retry: Optional predicate ``(error, attempt_index) -> bool``.
            Returning ``False`` stops retrying regardless of the remaining
            budget. When ``None``, retrying is always permitted.
        on_retry: Optional callback ``(error, attempt_index, delay)``
            invoked once before each retry delay.

    Example:
        ```pycon
        >>> from tente.core.config import AttemptsOptions, RetryOptions
        >>> options = RetryOptions(attempts=AttemptsOptions(max=5))
        >>> options.attempts.max
        5
        >>> options.merge(max_attempts=2).attempts.max
        2

        ```
    """

    attempts: AttemptsOptions = field(default_factory=AttemptsOptions)
    can_retry: Callable[[Exception, int], bool] | None = None
    on_retry: Callable[[Exception, int, float], None] | None = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> RetryOptions:
        """Create options from a plain mapping.

        The mapping follows the nested layout
        ``{"attempts": {"max": ..., "delay": ...}, "can_retry": ...,
        "on_retry": ...}``. The camelCase keys ``canRetry`` and
        ``onRetry`` are accepted as aliases. Unknown keys are ignored.

        Args:
            options: The mapping to convert.

        Returns:
            The equivalent ``RetryOptions``.

        Example:
            ```pycon
            >>> from tente.core.config import RetryOptions
            >>> options = RetryOptions.from_mapping({"attempts": {"max": 2, "delay": 1}})
            >>> options.attempts
            AttemptsOptions(max=2, delay=1)

            ```
        """
        attempts = options.get("attempts")
        if attempts is None:
            attempts = AttemptsOptions()
        elif not isinstance(attempts, AttemptsOptions):
            attempts = AttemptsOptions(
                max=attempts.get("max", DEFAULT_MAX_ATTEMPTS),
                delay=attempts.get("delay", DEFAULT_DELAY),
            )
        return cls(
            attempts=attempts,
            can_retry=options.get("can_retry", options.get("canRetry")),
            on_retry=options.get("on_retry", options.get("onRetry")),
        )

    def merge(self, **overrides: Any) -> RetryOptions:
        """Create new options with specified values overridden.

        Only non-None override values are applied. ``max_attempts`` and
        ``delay`` override the nested ``attempts`` fields.

        Args:
            **overrides: Any of ``max_attempts``, ``delay``, ``can_retry``
                and ``on_retry``.

        Returns:
            A new ``RetryOptions`` instance with overrides applied.
        """
        filtered = {k: v for k, v in overrides.items() if v is not None}
        attempts_overrides = {}
        if "max_attempts" in filtered:
            attempts_overrides["max"] = filtered.pop("max_attempts")
        if "delay" in filtered:
            attempts_overrides["delay"] = filtered.pop("delay")
        if attempts_overrides:
            filtered["attempts"] = replace(self.attempts, **attempts_overrides)
        return replace(self, **filtered)

    def to_dict(self) -> dict[str, Any]:
        """Convert the options to the nested mapping layout.

        Example:
            ```pycon
            >>> from tente.core.config import RetryOptions
            >>> RetryOptions().to_dict()
            {'attempts': {'max': 0, 'delay': 0.0}, 'can_retry': None, 'on_retry': None}

            ```
        """
        return {
            "attempts": {"max": self.attempts.max, "delay": self.attempts.delay},
            "can_retry": self.can_retry,
            "on_retry": self.on_retry,
        }
