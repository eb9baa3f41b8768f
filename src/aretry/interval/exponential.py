r"""Exponential retry interval strategy with jitter."""

from __future__ import annotations

__all__ = ["JITTER_FACTOR", "ExponentialRetryInterval"]

import logging
import math
import random

from aretry.interval.base import BaseRetryInterval

logger: logging.Logger = logging.getLogger(__name__)

# Upper bound (exclusive) of the positive random jitter added to each delay
JITTER_FACTOR = 0.1


class ExponentialRetryInterval(BaseRetryInterval):
    """Exponential retry interval strategy with positive jitter.

    The n-th call returns ``initial * (2 ** n - 1) * (1 + jitter)`` where
    ``jitter`` is drawn uniformly from ``[0, 0.1)``, capped at
    ``max_interval``. Once a returned delay reaches ``max_interval``,
    the strategy is saturated and every later call returns that same
    delay.

    The strategy keeps the number of calls and the previous delay, so
    one instance must be used by a single retry execution.

    Args:
        initial: The first delay in seconds. The first call returns a
            value in ``[initial, 1.1 * initial)``.
        max_interval: The maximum delay in seconds (default: unbounded).

    Example:
        ```pycon
        >>> from aretry.interval import ExponentialRetryInterval
        >>> interval = ExponentialRetryInterval(initial=1.0, max_interval=2.0)
        >>> 1.0 <= interval.get_interval() < 1.1
        True
        >>> interval.get_interval()  # 3.0+ capped
        2.0
        >>> interval.get_interval()  # saturated
        2.0

        ```
    """

    def __init__(self, initial: float, max_interval: float = math.inf) -> None:
        if initial < 0:
            msg = f"initial must be non-negative, got {initial}"
            raise ValueError(msg)
        if max_interval <= 0:
            msg = f"max_interval must be positive, got {max_interval}"
            raise ValueError(msg)

        self.initial = initial
        self.max_interval = max_interval
        self._attempt_count = 0
        self._previous = initial

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(initial={self.initial}, "
            f"max_interval={self.max_interval})"
        )

    @property
    def attempt_count(self) -> int:
        """The number of times ``get_interval`` was called."""
        return self._attempt_count

    def get_interval(self) -> float:
        """Compute the next exponential delay.

        Returns:
            The delay in seconds, never above ``max_interval``.
        """
        self._attempt_count += 1

        if self._previous >= self.max_interval:
            return self._previous

        delta = (2**self._attempt_count - 1) * (1 + random.random() * JITTER_FACTOR)  # noqa: S311
        delay = min(self.initial * delta, self.max_interval)
        logger.debug(f"Exponential interval #{self._attempt_count}: {delay:.3f}s")

        self._previous = delay
        return delay
