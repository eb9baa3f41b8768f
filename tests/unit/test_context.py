r"""Unit tests for RetryContext."""

from __future__ import annotations

from coola.equality import objects_are_equal

from aretry.context import RetryContext


def test_retry_context_defaults() -> None:
    assert objects_are_equal(
        RetryContext(), RetryContext(tried_count=0, retry_count=0, tried_time=0.0)
    )


def test_retry_context_clone_is_equal() -> None:
    context = RetryContext(tried_count=3, retry_count=2, tried_time=1.5)
    assert objects_are_equal(context.clone(), context)


def test_retry_context_clone_is_independent() -> None:
    """Test that mutating the original does not change the clone and
    vice versa."""
    context = RetryContext(tried_count=1, retry_count=0, tried_time=0.1)
    clone = context.clone()
    assert clone is not context

    context.tried_count = 5
    clone.retry_count = 9
    assert clone.tried_count == 1
    assert context.retry_count == 0
