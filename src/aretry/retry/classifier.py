r"""Exception classification for retry decisions.

This module provides the ExceptionClassifier class that decides whether
an error raised by the retried operation should trigger another attempt
or end the execution immediately.
"""

from __future__ import annotations

__all__ = ["UNRECOVERABLE_EXCEPTIONS", "ExceptionClassifier"]

import logging
from typing import TYPE_CHECKING

from aretry.validation import validate_exception_types

if TYPE_CHECKING:
    from collections.abc import Iterable

logger: logging.Logger = logging.getLogger(__name__)

# Errors signaling that the interpreter itself is in a bad state
UNRECOVERABLE_EXCEPTIONS: tuple[type[BaseException], ...] = (MemoryError, SystemError)


class ExceptionClassifier:
    """Decides whether an error raised by the operation is retryable.

    The rules are applied in order:

    1. ``MemoryError`` and ``SystemError`` are never retryable.
    2. If ``retry_exceptions`` is not empty, an error that is not an
       instance of any of the configured types is not retryable.
    3. Otherwise the error is retryable.

    The classifier is only consulted for errors raised by the operation.
    Errors raised by hooks or by the acceptance condition always end the
    execution.

    Args:
        retry_exceptions: The exception types to retry on. An empty
            sequence means every error is retried.

    Example:
        ```pycon
        >>> from aretry.retry import ExceptionClassifier
        >>> classifier = ExceptionClassifier([ConnectionError])
        >>> classifier.is_retryable(ConnectionResetError())
        True
        >>> classifier.is_retryable(KeyError("key"))
        False
        >>> ExceptionClassifier().is_retryable(KeyError("key"))
        True

        ```
    """

    def __init__(self, retry_exceptions: Iterable[type[BaseException]] = ()) -> None:
        self.retry_exceptions = validate_exception_types(retry_exceptions)

    def __repr__(self) -> str:
        names = ", ".join(exc.__qualname__ for exc in self.retry_exceptions)
        return f"{self.__class__.__qualname__}(retry_exceptions=({names}))"

    def is_retryable(self, error: BaseException) -> bool:
        """Determine if an error raised by the operation should trigger
        a retry.

        Args:
            error: The error raised by the operation.

        Returns:
            ``True`` if the operation can be attempted again.
        """
        if isinstance(error, UNRECOVERABLE_EXCEPTIONS):
            logger.debug(f"{type(error).__name__} is unrecoverable")
            return False

        if self.retry_exceptions and all(
            not isinstance(error, exc_type) for exc_type in self.retry_exceptions
        ):
            logger.debug(f"{type(error).__name__} does not match any retryable exception type")
            return False

        return True
