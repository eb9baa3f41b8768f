r"""Parameter validation utilities for retry options.

This module provides validation functions for retry parameters to
ensure they meet the required constraints before being used by the
retry executors.
"""

from __future__ import annotations

__all__ = ["validate_exception_types", "validate_max_try_count", "validate_retry_options"]

from typing import TYPE_CHECKING, Any

from aretry.interval.base import BaseRetryInterval

if TYPE_CHECKING:
    from collections.abc import Iterable


def validate_max_try_count(max_try_count: int) -> None:
    """Validate the maximum number of attempts.

    Args:
        max_try_count: The maximum number of attempts, including the
            first one. Must be >= 1.

    Raises:
        ValueError: If max_try_count is lower than 1.

    Example:
        ```pycon
        >>> from aretry.validation import validate_max_try_count
        >>> validate_max_try_count(3)
        >>> validate_max_try_count(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: max_try_count must be >= 1, got 0

        ```
    """
    if max_try_count < 1:
        msg = f"max_try_count must be >= 1, got {max_try_count}"
        raise ValueError(msg)


def validate_retry_options(
    retry_interval: Any,
    max_try_time: float | None,
    max_try_count: int,
) -> None:
    """Validate retry options.

    Args:
        retry_interval: The interval strategy. Must be a
            ``BaseRetryInterval`` instance.
        max_try_time: The maximum total time in seconds. Must be > 0 if
            provided. ``None`` means unbounded.
        max_try_count: The maximum number of attempts. Must be >= 1.

    Raises:
        TypeError: If retry_interval is not a ``BaseRetryInterval``.
        ValueError: If max_try_time or max_try_count are out of range.

    Example:
        ```pycon
        >>> from aretry.interval import ConstantRetryInterval
        >>> from aretry.validation import validate_retry_options
        >>> validate_retry_options(ConstantRetryInterval(), max_try_time=None, max_try_count=2)
        >>> validate_retry_options(ConstantRetryInterval(), max_try_time=5.0, max_try_count=3)

        ```
    """
    if not isinstance(retry_interval, BaseRetryInterval):
        msg = (
            f"retry_interval must be a BaseRetryInterval instance, "
            f"got {type(retry_interval).__qualname__}"
        )
        raise TypeError(msg)
    if max_try_time is not None and max_try_time <= 0:
        msg = f"max_try_time must be > 0, got {max_try_time}"
        raise ValueError(msg)
    validate_max_try_count(max_try_count)


def validate_exception_types(
    exception_types: Iterable[Any],
) -> tuple[type[BaseException], ...]:
    """Validate and deduplicate exception types.

    Args:
        exception_types: The exception types. Order is preserved and
            duplicates are removed.

    Returns:
        The validated exception types.

    Raises:
        TypeError: If one of the values is not an exception type.

    Example:
        ```pycon
        >>> from aretry.validation import validate_exception_types
        >>> validate_exception_types([ValueError, KeyError, ValueError])
        (<class 'ValueError'>, <class 'KeyError'>)

        ```
    """
    validated: dict[type[BaseException], None] = {}
    for exception_type in exception_types:
        if not (isinstance(exception_type, type) and issubclass(exception_type, BaseException)):
            msg = f"{exception_type!r} must be an exception type"
            raise TypeError(msg)
        validated[exception_type] = None
    return tuple(validated)
