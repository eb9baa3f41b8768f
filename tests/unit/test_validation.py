r"""Unit tests for parameter validation utilities."""

from __future__ import annotations

import pytest

from aretry.interval import ConstantRetryInterval
from aretry.validation import (
    validate_exception_types,
    validate_max_try_count,
    validate_retry_options,
)

################################################
#     Tests for validate_max_try_count        #
################################################


@pytest.mark.parametrize("max_try_count", [1, 2, 100])
def test_validate_max_try_count_valid(max_try_count: int) -> None:
    validate_max_try_count(max_try_count)


@pytest.mark.parametrize("max_try_count", [0, -3])
def test_validate_max_try_count_invalid(max_try_count: int) -> None:
    with pytest.raises(ValueError, match=r"max_try_count must be >= 1"):
        validate_max_try_count(max_try_count)


################################################
#     Tests for validate_retry_options        #
################################################


def test_validate_retry_options_valid() -> None:
    validate_retry_options(ConstantRetryInterval(), max_try_time=None, max_try_count=2)
    validate_retry_options(ConstantRetryInterval(), max_try_time=0.5, max_try_count=1)


def test_validate_retry_options_invalid_interval() -> None:
    with pytest.raises(TypeError, match=r"got float"):
        validate_retry_options(0.1, max_try_time=None, max_try_count=2)


def test_validate_retry_options_invalid_max_try_time() -> None:
    with pytest.raises(ValueError, match=r"max_try_time must be > 0, got 0"):
        validate_retry_options(ConstantRetryInterval(), max_try_time=0, max_try_count=2)


################################################
#     Tests for validate_exception_types      #
################################################


def test_validate_exception_types_deduplicates() -> None:
    assert validate_exception_types([ValueError, KeyError, ValueError]) == (ValueError, KeyError)


def test_validate_exception_types_empty() -> None:
    assert validate_exception_types([]) == ()


@pytest.mark.parametrize("value", [ValueError("instance"), int, "ValueError"])
def test_validate_exception_types_invalid(value: object) -> None:
    with pytest.raises(TypeError, match=r"must be an exception type"):
        validate_exception_types([value])
