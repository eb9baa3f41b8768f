r"""Unit tests for BaseRetryInterval abstract class."""

from __future__ import annotations

import pytest

from aretry.interval import BaseRetryInterval


def test_base_interval_cannot_be_instantiated() -> None:
    """Test that BaseRetryInterval is abstract."""
    with pytest.raises(TypeError):
        BaseRetryInterval()  # type: ignore[abstract]


def test_custom_interval() -> None:
    """Test that a custom strategy only needs get_interval."""

    class LinearInterval(BaseRetryInterval):
        def __init__(self) -> None:
            self.count = 0

        def get_interval(self) -> float:
            self.count += 1
            return 0.5 * self.count

    interval = LinearInterval()
    assert interval.get_interval() == 0.5
    assert interval.get_interval() == 1.0
