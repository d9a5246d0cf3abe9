r"""Structured logging utilities for machine-readable log output.

The retry executors emit their "will retry" and "giving up" records with
``operation``, ``attempt_index``, ``delay`` and ``reason`` fields. With
``StructuredFormatter`` these records become one JSON object per line,
which log aggregation systems can index directly.

The structured logging system is opt-in and is enabled by configuring
Python's logging system to use the provided formatter.

Example:
    ```python
    import logging
    from tente.utils.structured_logging import StructuredFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())

    logger = logging.getLogger("tente")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    ```

    Use correlation IDs to group the retries of one logical call:

    ```python
    from tente.utils.structured_logging import set_correlation_id, clear_correlation_id

    set_correlation_id("job-123")
    try:
        await fetch_with_retries()
    finally:
        clear_correlation_id()
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
from typing import Any

_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "tente_correlation_id", default=None
)

# Attributes every LogRecord has, excluded from the extra fields
_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


def get_correlation_id() -> str | None:
    """Get the correlation ID of the current context, or ``None``."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Tag the retry records of the current context with
    ``correlation_id``.

    Each asyncio task keeps its own value.
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id.set(None)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Each record is rendered as a JSON object with the fields
    ``timestamp``, ``level``, ``logger``, ``message``, ``module``,
    ``function`` and ``line``, plus ``correlation_id`` when one is set,
    ``exception`` when the record carries exception info, and every
    field passed through ``extra``. Values that are not JSON
    serializable are rendered with ``repr``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from tente.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doctest_structured")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> logger.info("retrying", extra={"attempt_index": 1})
        >>> json.loads(stream.getvalue())["attempt_index"]
        1

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = dict(
            timestamp=self.formatTime(record, self.datefmt),
            level=record.levelname,
            logger=record.name,
            message=record.getMessage(),
            module=record.module,
            function=record.funcName,
            line=record.lineno,
        )
        if (correlation_id := get_correlation_id()) is not None:
            payload["correlation_id"] = correlation_id
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        # retry fields passed through ``extra``
        payload.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRIBUTES
        )
        return json.dumps(payload, default=repr)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Format the record time as ISO 8601 UTC with milliseconds.

        ``datefmt`` is ignored.
        """
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log ``message`` with ``extra`` fields, skipping the record when
    ``level`` is disabled for ``logger``."""
    if logger.isEnabledFor(level):
        logger.log(level, message, extra=extra)
