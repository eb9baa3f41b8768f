r"""Exceptions produced by the retry engine.

None of these exceptions are raised to the caller of ``run()``. They are
stored in ``RetryResult.error`` to describe why an execution ended. The
error raised by the operation itself is never wrapped: when it is not
retryable, it is stored as-is.

The callback exceptions wrap the error raised by a user hook or by the
acceptance condition. The wrapped error is available as ``inner`` and is
also chained as ``__cause__``.
"""

from __future__ import annotations

__all__ = [
    "AssertCallbackError",
    "CallbackError",
    "FailureCallbackError",
    "OverMaxTryCountError",
    "OverMaxTryTimeError",
    "RetryCallbackError",
    "RetryCancelledError",
    "RetryError",
    "SuccessCallbackError",
]


class RetryError(Exception):
    """Base class for all the errors produced by the retry engine."""


class OverMaxTryTimeError(RetryError):
    """Error stored when the elapsed time reached ``max_try_time``.

    Args:
        tried_time: The total elapsed time in seconds.

    Example:
        ```pycon
        >>> from aretry.exceptions import OverMaxTryTimeError
        >>> error = OverMaxTryTimeError(tried_time=1.5)
        >>> error.tried_time
        1.5

        ```
    """

    def __init__(self, tried_time: float) -> None:
        super().__init__(f"maximum try time exceeded after {tried_time:.3f}s")
        self.tried_time = tried_time


class OverMaxTryCountError(RetryError):
    """Error stored when the number of attempts reached
    ``max_try_count``.

    Args:
        tried_count: The total number of attempts.

    Example:
        ```pycon
        >>> from aretry.exceptions import OverMaxTryCountError
        >>> error = OverMaxTryCountError(tried_count=3)
        >>> error.tried_count
        3
        >>> str(error)
        'maximum try count exceeded after 3 attempts'

        ```
    """

    def __init__(self, tried_count: int) -> None:
        super().__init__(f"maximum try count exceeded after {tried_count} attempts")
        self.tried_count = tried_count


class RetryCancelledError(RetryError):
    """Error stored when the cancellation event of an asynchronous
    execution is set.

    Args:
        tried_count: The number of attempts performed before the
            cancellation was observed.
    """

    def __init__(self, tried_count: int) -> None:
        super().__init__(f"retry cancelled after {tried_count} attempts")
        self.tried_count = tried_count


class CallbackError(RetryError):
    """Base class for errors raised inside a hook or the acceptance
    condition.

    Args:
        inner: The original error raised by the user code.
    """

    stage: str = "callback"

    def __init__(self, inner: Exception) -> None:
        super().__init__(f"An exception occurred during {self.stage} execution: {inner!r}")
        self.inner = inner
        self.__cause__ = inner


class RetryCallbackError(CallbackError):
    """Error stored when a retry hook raises."""

    stage = "on_retry"


class SuccessCallbackError(CallbackError):
    """Error stored when a success hook raises."""

    stage = "on_success"


class FailureCallbackError(CallbackError):
    """Error stored when a failure hook raises.

    Note:
        It replaces the terminal error that was being reported, so the
        original error is only reachable through the failure hook
        arguments.
    """

    stage = "on_failure"


class AssertCallbackError(CallbackError):
    """Error stored when evaluating the acceptance condition raises."""

    stage = "assert"
