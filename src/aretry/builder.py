r"""Fluent builder assembling retry executors.

The builder collects the retry options and the retryable exception types
and creates the matching executor for an operation: a blocking
``RetryExecutor`` for plain callables and a suspending
``AsyncRetryExecutor`` for coroutine functions.

Example:
    ```pycon
    >>> from aretry import RetryBuilder
    >>> executor = (
    ...     RetryBuilder()
    ...     .configure_options(max_try_count=3)
    ...     .retry_on_exception(ConnectionError, TimeoutError)
    ...     .build(lambda: "ok")
    ... )
    >>> executor.run().result
    'ok'

    ```
"""

from __future__ import annotations

__all__ = ["RetryBuilder"]

import inspect
import logging
from typing import TYPE_CHECKING, Any, Self

from aretry.config import RetryOptions
from aretry.retry.classifier import ExceptionClassifier
from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor
from aretry.validation import validate_exception_types

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger: logging.Logger = logging.getLogger(__name__)


class RetryBuilder:
    """Builder of retry executors.

    Args:
        options: The base options. A new ``RetryOptions()`` is used for
            each built executor when not provided.
    """

    def __init__(self, options: RetryOptions | None = None) -> None:
        self._options = options
        self._overrides: dict[str, Any] = {}
        self._retry_exceptions: list[type[BaseException]] = []

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(options={self._options!r}, "
            f"overrides={self._overrides!r}, retry_exceptions={self._retry_exceptions!r})"
        )

    def configure_options(self, **overrides: Any) -> Self:
        """Override some retry options.

        Args:
            **overrides: ``RetryOptions`` fields to override. They are
                validated when the executor is built.

        Returns:
            The builder.
        """
        self._overrides.update(overrides)
        return self

    def retry_on_exception(self, *exception_types: type[BaseException]) -> Self:
        """Retry only on errors of the given types.

        Can be called several times, the types accumulate.

        Raises:
            TypeError: If one of the values is not an exception type.
        """
        self._retry_exceptions.extend(validate_exception_types(exception_types))
        return self

    def retry_all_exceptions(self) -> Self:
        """Retry on every error, forgetting previously added types."""
        self._retry_exceptions.clear()
        return self

    def build_options(self) -> RetryOptions:
        """Create the options of a new executor.

        Raises:
            ValueError: If the configured options are invalid.
        """
        options = self._options if self._options is not None else RetryOptions.default()
        return options.merge(**self._overrides)

    def build_classifier(self) -> ExceptionClassifier:
        return ExceptionClassifier(self._retry_exceptions)

    def build(
        self, operation: Callable[[], Any]
    ) -> RetryExecutor[Any] | AsyncRetryExecutor[Any]:
        """Build an executor for ``operation``.

        Args:
            operation: The callable to retry. Coroutine functions get an
                ``AsyncRetryExecutor``, other callables a
                ``RetryExecutor``.

        Returns:
            The executor.
        """
        if inspect.iscoroutinefunction(operation):
            return self.build_async(operation)
        logger.debug(f"Building blocking retry executor for {operation!r}")
        return RetryExecutor(operation, self.build_options(), self.build_classifier())

    def build_async(self, operation: Callable[[], Awaitable[Any]]) -> AsyncRetryExecutor[Any]:
        """Build a suspending executor for a callable returning an
        awaitable."""
        logger.debug(f"Building async retry executor for {operation!r}")
        return AsyncRetryExecutor(operation, self.build_options(), self.build_classifier())
