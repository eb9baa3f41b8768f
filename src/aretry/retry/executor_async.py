r"""Suspending retry executor.

This module provides the AsyncRetryExecutor class that runs an
asynchronous operation with automatic retry logic, yielding to the
event loop between attempts and supporting cooperative cancellation.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import contextvars
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
    RetryCancelledError,
    SuccessCallbackError,
)
from aretry.result import RetryResult
from aretry.retry.classifier import ExceptionClassifier
from aretry.retry.executor_core import check_continuation, next_attempt
from aretry.retry.hooks import CallbackRegistry, make_async_hook, make_sync_hook
from aretry.validation import validate_max_try_count

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor(Generic[T]):
    """Runs an asynchronous operation with automatic retry logic.

    The loop follows the same state machine as ``RetryExecutor`` but
    awaits the operation, the asynchronous hooks and the waits between
    attempts, so other tasks can run in the meantime.

    Cancellation is cooperative: the optional ``cancel_event`` passed to
    ``run`` is checked before and during the wait between attempts and
    after each unsuccessful attempt. An attempt in flight is never
    interrupted. Cancelling the task awaiting ``run`` is not handled by
    the executor and propagates ``asyncio.CancelledError`` as usual.

    Args:
        operation: A callable taking no arguments and returning an
            awaitable, usually a coroutine function.
        options: The retry options. Defaults to ``RetryOptions()``.
        classifier: The classifier deciding which errors are retried.
            Defaults to a classifier retrying every error.
        callbacks: Optional registry of hooks. A new empty registry is
            created if not provided.

    Raises:
        ValueError: If ``options.max_try_count`` is lower than 1.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.config import RetryOptions
        >>> from aretry.interval import ConstantRetryInterval
        >>> from aretry.retry import AsyncRetryExecutor
        >>> async def operation():
        ...     return 42
        ...
        >>> executor = AsyncRetryExecutor(
        ...     operation, RetryOptions(retry_interval=ConstantRetryInterval(0.0))
        ... )
        >>> result = asyncio.run(executor.run())
        >>> result.is_success, result.result
        (True, 42)

        ```
    """

    def __init__(
        self,
        operation: Callable[[], Awaitable[T]],
        options: RetryOptions | None = None,
        classifier: ExceptionClassifier | None = None,
        callbacks: CallbackRegistry | None = None,
    ) -> None:
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
        """Register a synchronous hook invoked before each retry.

        Coroutine functions must be registered with ``on_retry_async``.
        An awaitable returned by the hook is awaited.
        """
        self.callbacks.add_retry(make_sync_hook(hook))
        return self

    def on_retry_async(self, hook: Callable[..., Awaitable[Any]]) -> Self:
        """Register an asynchronous hook invoked before each retry."""
        self.callbacks.add_retry(make_async_hook(hook))
        return self

    def on_success(self, hook: Callable[..., Any]) -> Self:
        """Register a synchronous hook invoked when the operation
        succeeded.

        Coroutine functions must be registered with ``on_success_async``.
        An awaitable returned by the hook is awaited.
        """
        self.callbacks.add_success(make_sync_hook(hook))
        return self

    def on_success_async(self, hook: Callable[..., Awaitable[Any]]) -> Self:
        """Register an asynchronous hook invoked when the operation
        succeeded."""
        self.callbacks.add_success(make_async_hook(hook))
        return self

    def on_failure(self, hook: Callable[..., Any]) -> Self:
        """Register a synchronous hook invoked when the execution
        failed.

        Coroutine functions must be registered with ``on_failure_async``.
        An awaitable returned by the hook is awaited.
        """
        self.callbacks.add_failure(make_sync_hook(hook))
        return self

    def on_failure_async(self, hook: Callable[..., Awaitable[Any]]) -> Self:
        """Register an asynchronous hook invoked when the execution
        failed."""
        self.callbacks.add_failure(make_async_hook(hook))
        return self

    async def run(
        self,
        condition: Callable[[RetryResult[T]], bool | Awaitable[bool]] | None = None,
        cancel_event: asyncio.Event | None = None,
        preserve_context: bool = False,
    ) -> RetryResult[T]:
        """Run the operation until it succeeds or a bound is reached.

        The loop stops for the same reasons as ``RetryExecutor.run``
        and additionally when ``cancel_event`` is set, in which case the
        result holds a ``RetryCancelledError``.

        Args:
            condition: Optional predicate over the result. It may return
                a boolean or an awaitable resolving to a boolean. A falsy
                value means the result is not acceptable yet and the
                operation is attempted again.
            cancel_event: Optional event requesting cancellation.
            preserve_context: If ``True``, each attempt is awaited in the
                caller's task and its ``contextvars`` changes stay
                visible to the caller. If ``False``, each attempt runs
                in a child task with a copy of the current context.

        Returns:
            The result of the execution. It never raises for errors
            raised by the operation, the hooks or the condition.
        """
        context = RetryContext()
        result: RetryResult[T] = RetryResult()
        start_time = time.monotonic()
        logger.debug(
            f"Starting async retry execution (max_try_count={self.options.max_try_count}, "
            f"max_try_time={self.options.max_try_time})"
        )

        while True:
            next_attempt(context, start_time)

            if context.tried_count > 1:
                try:
                    await self.callbacks.ainvoke(self.callbacks.retry_hooks, result, context)
                except Exception as exc:
                    result.error = RetryCallbackError(exc)
                    break
                try:
                    interval = self.options.retry_interval.get_interval()
                except Exception as exc:
                    logger.debug(f"Retry interval strategy failed with {exc!r}")
                    result.error = exc
                    break
                if await self._wait(interval, context, cancel_event):
                    result.error = RetryCancelledError(context.tried_count)
                    break

            logger.debug(f"Attempt {context.tried_count}/{self.options.max_try_count}")
            try:
                result.result = await self._attempt(preserve_context)
            except Exception as exc:
                if not self.classifier.is_retryable(exc):
                    logger.debug(f"Attempt {context.tried_count} failed with non-retryable {exc!r}")
                    result.error = exc
                    break
                logger.debug(f"Attempt {context.tried_count} failed with retryable {exc!r}")
            else:
                try:
                    accepted = await self._evaluate(condition, result)
                except Exception as exc:
                    result.error = AssertCallbackError(exc)
                    break

                if accepted:
                    try:
                        await self.callbacks.ainvoke(self.callbacks.success_hooks, result, context)
                    except Exception as exc:
                        result.error = SuccessCallbackError(exc)
                        break
                    logger.debug(f"Operation succeeded after {context.tried_count} attempts")
                    return result
                logger.debug(f"Attempt {context.tried_count} result not accepted by condition")

            error = check_continuation(self.options, context, start_time, cancel_event)
            if error is not None:
                result.error = error
                break

        logger.debug(f"Retry execution failed after {context.tried_count} attempts: {result.error!r}")
        try:
            await self.callbacks.ainvoke(self.callbacks.failure_hooks, result, context)
        except Exception as exc:
            # The terminal error is replaced by the hook error
            result.error = FailureCallbackError(exc)
        return result

    async def _attempt(self, preserve_context: bool) -> T:
        if preserve_context:
            return await self.operation()

        async def call() -> T:
            return await self.operation()

        return await asyncio.create_task(call(), context=contextvars.copy_context())

    @staticmethod
    async def _evaluate(
        condition: Callable[[RetryResult[T]], bool | Awaitable[bool]] | None,
        result: RetryResult[T],
    ) -> bool:
        if condition is None:
            return True
        accepted = condition(result)
        if inspect.isawaitable(accepted):
            accepted = await accepted
        return bool(accepted)

    @staticmethod
    async def _wait(
        interval: float,
        context: RetryContext,
        cancel_event: asyncio.Event | None,
    ) -> bool:
        """Wait before the next attempt.

        Returns:
            ``True`` if the cancellation event was set before or during
            the wait.
        """
        if cancel_event is not None and cancel_event.is_set():
            return True
        if interval <= 0:
            return False

        logger.debug(f"Waiting {interval:.3f}s before attempt {context.tried_count}")
        if cancel_event is None:
            await asyncio.sleep(interval)
            return False
        try:
            await asyncio.wait_for(cancel_event.wait(), timeout=interval)
        except TimeoutError:
            return False
        return True
