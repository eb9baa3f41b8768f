r"""aretry - Retry execution engine for synchronous and asynchronous
operations.

This package repeatedly invokes a fallible operation until it succeeds,
an acceptance condition is met, or a bound (attempt count, elapsed time,
cancellation) is reached. The outcome is always returned as a
``RetryResult``, never raised.

Key Features:
    - Blocking (``RetryExecutor``) and suspending (``AsyncRetryExecutor``)
      executors sharing one state machine
    - Constant and exponential-with-jitter interval strategies
    - Retry, success and failure hooks, synchronous or asynchronous
    - Allow-list of retryable exception types
    - Acceptance condition to retry on unsatisfying results
    - Cooperative cancellation with ``asyncio.Event``

Example:
    ```pycon
    >>> from aretry import RetryBuilder
    >>> from aretry.interval import ExponentialRetryInterval
    >>> executor = (
    ...     RetryBuilder()
    ...     .configure_options(
    ...         retry_interval=ExponentialRetryInterval(initial=0.1, max_interval=5.0),
    ...         max_try_count=5,
    ...     )
    ...     .retry_on_exception(ConnectionError)
    ...     .build(lambda: "data")
    ... )
    >>> result = executor.on_failure(lambda result: print(result.error)).run()
    >>> result.is_success
    True

    ```
"""

from __future__ import annotations

__all__ = [
    "AssertCallbackError",
    "AsyncRetryExecutor",
    "CallbackError",
    "ConstantRetryInterval",
    "ExceptionClassifier",
    "ExponentialRetryInterval",
    "FailureCallbackError",
    "OverMaxTryCountError",
    "OverMaxTryTimeError",
    "RetryBuilder",
    "RetryCallbackError",
    "RetryCancelledError",
    "RetryContext",
    "RetryError",
    "RetryExecutor",
    "RetryOptions",
    "RetryResult",
    "SuccessCallbackError",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.builder import RetryBuilder
from aretry.config import RetryOptions
from aretry.context import RetryContext
from aretry.exceptions import (
    AssertCallbackError,
    CallbackError,
    FailureCallbackError,
    OverMaxTryCountError,
    OverMaxTryTimeError,
    RetryCallbackError,
    RetryCancelledError,
    RetryError,
    SuccessCallbackError,
)
from aretry.interval import ConstantRetryInterval, ExponentialRetryInterval
from aretry.result import RetryResult
from aretry.retry import AsyncRetryExecutor, ExceptionClassifier, RetryExecutor

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
