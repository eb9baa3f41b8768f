r"""Constant retry interval strategy."""

from __future__ import annotations

__all__ = ["ConstantRetryInterval"]

from aretry.interval.base import BaseRetryInterval


class ConstantRetryInterval(BaseRetryInterval):
    """Constant/fixed retry interval strategy.

    Returns the same delay for every retry, regardless of how many
    retries already happened.

    Args:
        interval: The fixed delay in seconds (default: 0.1).

    Example:
        ```pycon
        >>> from aretry.interval import ConstantRetryInterval
        >>> interval = ConstantRetryInterval(interval=0.5)
        >>> interval.get_interval()
        0.5
        >>> interval.get_interval()
        0.5

        ```
    """

    def __init__(self, interval: float = 0.1) -> None:
        if interval < 0:
            msg = f"interval must be non-negative, got {interval}"
            raise ValueError(msg)

        self.interval = interval

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(interval={self.interval})"

    def get_interval(self) -> float:
        return self.interval
