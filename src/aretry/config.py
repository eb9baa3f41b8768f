r"""Configuration dataclass and defaults for retry executors.

This module provides the default constants and the ``RetryOptions``
dataclass consumed by ``RetryExecutor`` and ``AsyncRetryExecutor``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_TRY_COUNT",
    "DEFAULT_MAX_TRY_TIME",
    "DEFAULT_RETRY_INTERVAL",
    "RetryOptions",
]

from dataclasses import dataclass, field, replace
from typing import Any

from aretry.interval.base import BaseRetryInterval
from aretry.interval.constant import ConstantRetryInterval
from aretry.validation import validate_retry_options

# Default maximum number of attempts (first attempt included)
DEFAULT_MAX_TRY_COUNT = 2

# Default maximum total time in seconds, None means unbounded
DEFAULT_MAX_TRY_TIME = None

# Default delay in seconds between two attempts
DEFAULT_RETRY_INTERVAL = 0.1


@dataclass(frozen=True)
class RetryOptions:
    """Options of a retry execution.

    The options are immutable. Use ``merge`` to derive new options.

    Note:
        The interval strategy may be stateful (for example
        ``ExponentialRetryInterval``). Options holding such a strategy
        must not be shared by concurrent executions.

    Args:
        retry_interval: The strategy computing the delay between two
            attempts. Defaults to a constant interval of 0.1 seconds.
        max_try_time: Optional maximum total time in seconds. Must be > 0
            if provided. ``None`` means unbounded.
        max_try_count: The maximum number of attempts, including the
            first one. Must be >= 1.

    Example:
        ```pycon
        >>> from aretry.config import RetryOptions
        >>> options = RetryOptions()
        >>> options.max_try_count
        2
        >>> options = options.merge(max_try_count=5)
        >>> options.max_try_count
        5

        ```
    """

    retry_interval: BaseRetryInterval = field(
        default_factory=lambda: ConstantRetryInterval(DEFAULT_RETRY_INTERVAL)
    )
    max_try_time: float | None = DEFAULT_MAX_TRY_TIME
    max_try_count: int = DEFAULT_MAX_TRY_COUNT

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            TypeError: If retry_interval is not an interval strategy.
            ValueError: If any parameter fails validation.
        """
        validate_retry_options(
            retry_interval=self.retry_interval,
            max_try_time=self.max_try_time,
            max_try_count=self.max_try_count,
        )

    @classmethod
    def default(cls) -> RetryOptions:
        """Create options with the default values.

        A new interval strategy is created on each call.
        """
        return cls()

    def merge(self, **overrides: Any) -> RetryOptions:
        """Create new options with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ``RetryOptions`` instance with overrides applied.

        Example:
            ```pycon
            >>> from aretry.config import RetryOptions
            >>> options = RetryOptions(max_try_count=3)
            >>> options.merge(max_try_count=5, max_try_time=None).max_try_count
            5
            >>> options.max_try_count  # Original unchanged
            3

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)
