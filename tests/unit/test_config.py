r"""Unit tests for RetryOptions and default constants."""

from __future__ import annotations

import dataclasses

import pytest

from aretry.config import (
    DEFAULT_MAX_TRY_COUNT,
    DEFAULT_MAX_TRY_TIME,
    DEFAULT_RETRY_INTERVAL,
    RetryOptions,
)
from aretry.interval import ConstantRetryInterval, ExponentialRetryInterval


def test_default_constants() -> None:
    assert DEFAULT_MAX_TRY_COUNT == 2
    assert DEFAULT_MAX_TRY_TIME is None
    assert DEFAULT_RETRY_INTERVAL == 0.1


def test_retry_options_defaults() -> None:
    options = RetryOptions()
    assert options.max_try_count == 2
    assert options.max_try_time is None
    assert isinstance(options.retry_interval, ConstantRetryInterval)
    assert options.retry_interval.get_interval() == 0.1


def test_retry_options_default_creates_new_interval() -> None:
    """Test that default options do not share interval instances."""
    assert RetryOptions.default().retry_interval is not RetryOptions.default().retry_interval


def test_retry_options_custom_values() -> None:
    interval = ExponentialRetryInterval(initial=0.5, max_interval=10.0)
    options = RetryOptions(retry_interval=interval, max_try_time=30.0, max_try_count=5)
    assert options.retry_interval is interval
    assert options.max_try_time == 30.0
    assert options.max_try_count == 5


def test_retry_options_are_frozen() -> None:
    options = RetryOptions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.max_try_count = 10  # type: ignore[misc]


@pytest.mark.parametrize("max_try_count", [0, -1])
def test_retry_options_invalid_max_try_count(max_try_count: int) -> None:
    with pytest.raises(ValueError, match=r"max_try_count must be >= 1"):
        RetryOptions(max_try_count=max_try_count)


@pytest.mark.parametrize("max_try_time", [0, -1.0])
def test_retry_options_invalid_max_try_time(max_try_time: float) -> None:
    with pytest.raises(ValueError, match=r"max_try_time must be > 0"):
        RetryOptions(max_try_time=max_try_time)


def test_retry_options_invalid_retry_interval() -> None:
    with pytest.raises(TypeError, match=r"retry_interval must be a BaseRetryInterval"):
        RetryOptions(retry_interval=0.5)  # type: ignore[arg-type]


def test_retry_options_merge() -> None:
    options = RetryOptions(max_try_count=3)
    merged = options.merge(max_try_count=5)
    assert merged.max_try_count == 5
    assert options.max_try_count == 3
    assert merged.retry_interval is options.retry_interval


def test_retry_options_merge_ignores_none() -> None:
    options = RetryOptions(max_try_count=3, max_try_time=10.0)
    merged = options.merge(max_try_count=None, max_try_time=None)
    assert merged == options


def test_retry_options_merge_validates() -> None:
    with pytest.raises(ValueError, match=r"max_try_count must be >= 1"):
        RetryOptions().merge(max_try_count=0)
