r"""Interval strategies for retry delays.

This package provides strategies that compute how long to wait before
the next attempt, including constant and exponential-with-jitter
intervals.
"""

from __future__ import annotations

__all__ = [
    "BaseRetryInterval",
    "ConstantRetryInterval",
    "ExponentialRetryInterval",
]

from aretry.interval.base import BaseRetryInterval
from aretry.interval.constant import ConstantRetryInterval
from aretry.interval.exponential import ExponentialRetryInterval
