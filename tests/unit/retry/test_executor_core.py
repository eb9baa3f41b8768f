r"""Unit tests for the shared executor helpers."""

from __future__ import annotations

import asyncio
import time
from unittest.mock import patch

from aretry.config import RetryOptions
from aretry.context import RetryContext
from aretry.exceptions import OverMaxTryCountError, OverMaxTryTimeError, RetryCancelledError
from aretry.retry.executor_core import check_continuation, elapsed_since, next_attempt

################################################
#     Tests for next_attempt                  #
################################################


def test_next_attempt_first() -> None:
    context = RetryContext()
    next_attempt(context, time.monotonic())
    assert context.tried_count == 1
    assert context.retry_count == 0


def test_next_attempt_retry() -> None:
    context = RetryContext(tried_count=2, retry_count=1)
    with patch("aretry.retry.executor_core.elapsed_since", return_value=1.5):
        next_attempt(context, 0.0)
    assert context.tried_count == 3
    assert context.retry_count == 2
    assert context.tried_time == 1.5


def test_elapsed_since() -> None:
    assert elapsed_since(time.monotonic()) >= 0.0


################################################
#     Tests for check_continuation            #
################################################


def test_check_continuation_continue() -> None:
    context = RetryContext(tried_count=1)
    assert check_continuation(RetryOptions(max_try_count=3), context, time.monotonic()) is None


def test_check_continuation_max_try_count() -> None:
    error = check_continuation(
        RetryOptions(max_try_count=3), RetryContext(tried_count=3), time.monotonic()
    )
    assert isinstance(error, OverMaxTryCountError)
    assert error.tried_count == 3


def test_check_continuation_max_try_time_first() -> None:
    """Test that the time bound is checked before the count bound."""
    context = RetryContext(tried_count=3)
    with patch("aretry.retry.executor_core.elapsed_since", return_value=10.0):
        error = check_continuation(
            RetryOptions(max_try_count=3, max_try_time=10.0), context, 0.0
        )
    assert isinstance(error, OverMaxTryTimeError)
    assert error.tried_time == 10.0
    assert context.tried_time == 10.0


def test_check_continuation_unbounded_time() -> None:
    with patch("aretry.retry.executor_core.elapsed_since", return_value=1e9):
        error = check_continuation(RetryOptions(max_try_count=5), RetryContext(tried_count=1), 0.0)
    assert error is None


def test_check_continuation_cancelled() -> None:
    cancel_event = asyncio.Event()
    cancel_event.set()
    error = check_continuation(
        RetryOptions(max_try_count=5), RetryContext(tried_count=2), time.monotonic(), cancel_event
    )
    assert isinstance(error, RetryCancelledError)
    assert error.tried_count == 2


def test_check_continuation_not_cancelled() -> None:
    error = check_continuation(
        RetryOptions(max_try_count=5),
        RetryContext(tried_count=2),
        time.monotonic(),
        asyncio.Event(),
    )
    assert error is None
