r"""Shared core logic for retry executors.

This module provides helper functions used by both the blocking and the
suspending retry executors: elapsed time tracking and the continuation
bound check performed after each unsuccessful attempt.
"""

from __future__ import annotations

__all__ = ["check_continuation", "elapsed_since", "next_attempt"]

import logging
import time
from typing import TYPE_CHECKING

from aretry.exceptions import (
    OverMaxTryCountError,
    OverMaxTryTimeError,
    RetryCancelledError,
    RetryError,
)

if TYPE_CHECKING:
    import asyncio

    from aretry.config import RetryOptions
    from aretry.context import RetryContext

logger: logging.Logger = logging.getLogger(__name__)


def elapsed_since(start_time: float) -> float:
    """Return the elapsed time in seconds since ``start_time``.

    Args:
        start_time: A value returned by ``time.monotonic()``.
    """
    return time.monotonic() - start_time


def next_attempt(context: RetryContext, start_time: float) -> None:
    """Move the context to the next attempt.

    Args:
        context: The live context of the execution.
        start_time: When the execution started.
    """
    context.tried_count += 1
    context.tried_time = elapsed_since(start_time)
    if context.tried_count > 1:
        context.retry_count = context.tried_count - 1


def check_continuation(
    options: RetryOptions,
    context: RetryContext,
    start_time: float,
    cancel_event: asyncio.Event | None = None,
) -> RetryError | None:
    """Check whether another attempt may be performed.

    The bounds are checked in order: elapsed time, attempt count, then
    cancellation.

    Args:
        options: The options of the execution.
        context: The live context. Its ``tried_time`` is refreshed.
        start_time: When the execution started.
        cancel_event: Optional cancellation event.

    Returns:
        The terminal error if the execution must stop, otherwise
        ``None``.

    Example:
        ```pycon
        >>> import time
        >>> from aretry.config import RetryOptions
        >>> from aretry.context import RetryContext
        >>> from aretry.retry.executor_core import check_continuation
        >>> context = RetryContext(tried_count=2, retry_count=1)
        >>> check_continuation(RetryOptions(max_try_count=2), context, time.monotonic())
        OverMaxTryCountError('maximum try count exceeded after 2 attempts')
        >>> check_continuation(RetryOptions(max_try_count=3), context, time.monotonic())

        ```
    """
    context.tried_time = elapsed_since(start_time)
    if options.max_try_time is not None and context.tried_time >= options.max_try_time:
        logger.debug(
            f"Stopping: elapsed time {context.tried_time:.3f}s >= "
            f"max_try_time {options.max_try_time:.3f}s"
        )
        return OverMaxTryTimeError(context.tried_time)
    if context.tried_count >= options.max_try_count:
        logger.debug(f"Stopping: {context.tried_count} attempts >= max_try_count")
        return OverMaxTryCountError(context.tried_count)
    if cancel_event is not None and cancel_event.is_set():
        logger.debug(f"Stopping: cancelled after {context.tried_count} attempts")
        return RetryCancelledError(context.tried_count)
    return None
