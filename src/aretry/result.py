r"""Outcome of a retry execution."""

from __future__ import annotations

__all__ = ["RetryResult"]

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class RetryResult(Generic[T]):
    """Outcome of a retry execution.

    The executor fills the result while it runs and returns it once the
    execution is over. ``result`` keeps the value of the last completed
    attempt (``None`` for operations without return value) and ``error``
    the terminal error, if any.

    Attributes:
        result: The value returned by the last successful attempt.
        error: The terminal error, or ``None`` on success.

    Example:
        ```pycon
        >>> from aretry.result import RetryResult
        >>> RetryResult(result=42).is_success
        True
        >>> RetryResult(error=ValueError("boom")).is_success
        False

        ```
    """

    result: T | None = None
    error: BaseException | None = None

    @property
    def is_success(self) -> bool:
        return self.error is None
