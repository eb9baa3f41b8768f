r"""Mutable counters of a single retry execution."""

from __future__ import annotations

__all__ = ["RetryContext"]

from dataclasses import dataclass, replace


@dataclass
class RetryContext:
    """Attempt counters and elapsed time of one retry execution.

    The executor owns the live instance and only passes clones to the
    hooks, so a hook keeping a reference never observes later updates.

    Attributes:
        tried_count: The current attempt number (1-indexed). It is
            incremented at the start of each attempt.
        retry_count: The number of retries, ``tried_count - 1`` once a
            retry happened, 0 before.
        tried_time: The elapsed time in seconds since the execution
            started, refreshed once per attempt.

    Example:
        ```pycon
        >>> from aretry.context import RetryContext
        >>> context = RetryContext(tried_count=2, retry_count=1, tried_time=0.5)
        >>> snapshot = context.clone()
        >>> context.tried_count += 1
        >>> snapshot.tried_count
        2

        ```
    """

    tried_count: int = 0
    retry_count: int = 0
    tried_time: float = 0.0

    def clone(self) -> RetryContext:
        """Return an independent copy of the context."""
        return replace(self)
