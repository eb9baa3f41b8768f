r"""Blocking retry executor.

This module provides the RetryExecutor class that runs a synchronous
operation with automatic retry logic, blocking the calling thread
between attempts.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import asyncio
import inspect
import logging
import time
from typing import TYPE_CHECKING, Any, Generic, Self, TypeVar

from aretry.config import RetryOptions
from aretry.context import RetryContext
from aretry.exceptions import (
    AssertCallbackError,
    FailureCallbackError,
    RetryCallbackError,
    SuccessCallbackError,
)
from aretry.result import RetryResult
from aretry.retry.classifier import ExceptionClassifier
from aretry.retry.executor_async import AsyncRetryExecutor
from aretry.retry.executor_core import check_continuation, next_attempt
from aretry.retry.hooks import CallbackRegistry, make_sync_hook
from aretry.validation import validate_max_try_count

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor(Generic[T]):
    """Runs a synchronous operation with automatic retry logic.

    The calling thread performs the whole loop, including the waits
    between attempts (``time.sleep``). Hooks are invoked sequentially,
    in registration order.

    The executor itself keeps no state between two calls to ``run``,
    but the interval strategy of the options may. Use one options
    instance per concurrent execution when the strategy is stateful.

    Args:
        operation: The callable to retry. It takes no arguments.
        options: The retry options. Defaults to ``RetryOptions()``.
        classifier: The classifier deciding which errors are retried.
            Defaults to a classifier retrying every error.
        callbacks: Optional registry of hooks. A new empty registry is
            created if not provided.

    Raises:
        ValueError: If ``options.max_try_count`` is lower than 1.
        TypeError: If ``operation`` is a coroutine function.

    Example:
        ```pycon
        >>> from aretry.config import RetryOptions
        >>> from aretry.interval import ConstantRetryInterval
        >>> from aretry.retry import RetryExecutor
        >>> attempts = []
        >>> def operation():
        ...     attempts.append(1)
        ...     if len(attempts) < 2:
        ...         raise ConnectionError("unreachable")
        ...     return "ok"
        ...
        >>> executor = RetryExecutor(
        ...     operation,
        ...     RetryOptions(retry_interval=ConstantRetryInterval(0.0), max_try_count=3),
        ... )
        >>> result = executor.run()
        >>> result.is_success, result.result, len(attempts)
        (True, 'ok', 2)

        ```
    """

    def __init__(
        self,
        operation: Callable[[], T],
        options: RetryOptions | None = None,
        classifier: ExceptionClassifier | None = None,
        callbacks: CallbackRegistry | None = None,
    ) -> None:
        if inspect.iscoroutinefunction(operation):
            msg = f"{operation!r} is a coroutine function, use AsyncRetryExecutor"
            raise TypeError(msg)
        self.operation = operation
        self.options = options if options is not None else RetryOptions.default()
        validate_max_try_count(self.options.max_try_count)
        self.classifier = classifier if classifier is not None else ExceptionClassifier()
        self.callbacks = callbacks if callbacks is not None else CallbackRegistry()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(operation={self.operation!r}, "
            f"options={self.options!r}, classifier={self.classifier!r})"
        )

    def on_retry(self, hook: Callable[..., Any]) -> Self:
        """Register a hook invoked before each retry.

        Args:
            hook: A callable taking ``(result)`` or ``(result, context)``.
                It must not return an awaitable, use
                ``as_async`` for asynchronous hooks.

        Returns:
            The executor, to chain registrations.
        """
        self.callbacks.add_retry(make_sync_hook(hook))
        return self

    def on_success(self, hook: Callable[..., Any]) -> Self:
        """Register a hook invoked when the operation succeeded.

        Args:
            hook: A callable taking ``(result)`` or ``(result, context)``.
                It must not return an awaitable, use
                ``as_async`` for asynchronous hooks.

        Returns:
            The executor, to chain registrations.
        """
        self.callbacks.add_success(make_sync_hook(hook))
        return self

    def on_failure(self, hook: Callable[..., Any]) -> Self:
        """Register a hook invoked when the execution failed.

        Args:
            hook: A callable taking ``(result)`` or ``(result, context)``.
                It must not return an awaitable, use
                ``as_async`` for asynchronous hooks.

        Returns:
            The executor, to chain registrations.
        """
        self.callbacks.add_failure(make_sync_hook(hook))
        return self

    def as_async(self) -> AsyncRetryExecutor[T]:
        """Create a suspending executor backed by the same operation.

        The blocking operation runs in a worker thread
        (``asyncio.to_thread``) for each attempt. The options, the
        classifier and a copy of the registered hooks are shared with
        the new executor.

        Returns:
            The asynchronous executor.
        """
        operation = self.operation

        async def run_in_thread() -> T:
            return await asyncio.to_thread(operation)

        return AsyncRetryExecutor(
            run_in_thread,
            options=self.options,
            classifier=self.classifier,
            callbacks=self.callbacks.copy(),
        )

    def run(self, condition: Callable[[RetryResult[T]], bool] | None = None) -> RetryResult[T]:
        """Run the operation until it succeeds or a bound is reached.

        The loop stops when:
        - The operation succeeded and, if provided, ``condition``
          accepted the result: success hooks run and the result is
          returned.
        - The operation raised a non-retryable error: the error is
          stored unwrapped.
        - The elapsed time reached ``max_try_time`` or the number of
          attempts reached ``max_try_count``.
        - A hook or the condition raised: the error is wrapped in the
          matching ``CallbackError`` subclass.
        - The interval strategy raised: the error is stored unwrapped.

        Failure hooks run for every outcome except success.

        Args:
            condition: Optional predicate over the result. A falsy value
                means the result is not acceptable yet and the operation
                is attempted again.

        Returns:
            The result of the execution. It never raises for errors
            raised by the operation, the hooks or the condition.
        """
        context = RetryContext()
        result: RetryResult[T] = RetryResult()
        start_time = time.monotonic()
        logger.debug(
            f"Starting retry execution (max_try_count={self.options.max_try_count}, "
            f"max_try_time={self.options.max_try_time})"
        )

        while True:
            next_attempt(context, start_time)

            if context.tried_count > 1:
                try:
                    self.callbacks.invoke(self.callbacks.retry_hooks, result, context)
                except Exception as exc:
                    result.error = RetryCallbackError(exc)
                    break
                try:
                    interval = self.options.retry_interval.get_interval()
                except Exception as exc:
                    logger.debug(f"Retry interval strategy failed with {exc!r}")
                    result.error = exc
                    break
                if interval > 0:
                    logger.debug(f"Waiting {interval:.3f}s before attempt {context.tried_count}")
                    time.sleep(interval)

            logger.debug(f"Attempt {context.tried_count}/{self.options.max_try_count}")
            try:
                result.result = self.operation()
            except Exception as exc:
                if not self.classifier.is_retryable(exc):
                    logger.debug(f"Attempt {context.tried_count} failed with non-retryable {exc!r}")
                    result.error = exc
                    break
                logger.debug(f"Attempt {context.tried_count} failed with retryable {exc!r}")
            else:
                try:
                    accepted = condition is None or condition(result)
                except Exception as exc:
                    result.error = AssertCallbackError(exc)
                    break

                if accepted:
                    try:
                        self.callbacks.invoke(self.callbacks.success_hooks, result, context)
                    except Exception as exc:
                        result.error = SuccessCallbackError(exc)
                        break
                    logger.debug(f"Operation succeeded after {context.tried_count} attempts")
                    return result
                logger.debug(f"Attempt {context.tried_count} result not accepted by condition")

            error = check_continuation(self.options, context, start_time)
            if error is not None:
                result.error = error
                break

        self._report_failure(result, context)
        return result

    def _report_failure(self, result: RetryResult[T], context: RetryContext) -> None:
        logger.debug(f"Retry execution failed after {context.tried_count} attempts: {result.error!r}")
        try:
            self.callbacks.invoke(self.callbacks.failure_hooks, result, context)
        except Exception as exc:
            # The terminal error is replaced by the hook error
            result.error = FailureCallbackError(exc)
