r"""Abstract base class for retry interval strategies."""

from __future__ import annotations

__all__ = ["BaseRetryInterval"]

from abc import ABC, abstractmethod


class BaseRetryInterval(ABC):
    """Abstract base class for retry interval strategies.

    An interval strategy determines how long to wait before the next
    attempt. It is called once per retry and never before the first
    attempt.

    Note:
        Implementations may keep state between calls. An instance must
        only be used by one retry execution at a time; sharing it
        between concurrent executions is the caller's responsibility.
    """

    @abstractmethod
    def get_interval(self) -> float:
        """Return the delay before the next attempt.

        Returns:
            The delay in seconds.
        """
