r"""Unit tests for the httpx retryable exception preset."""

from __future__ import annotations

from unittest.mock import Mock

import httpx
import pytest

from aretry.config import RetryOptions
from aretry.exceptions import OverMaxTryCountError
from aretry.extras.httpx import HTTPX_RETRYABLE_EXCEPTIONS, httpx_classifier
from aretry.interval import ConstantRetryInterval
from aretry.retry import RetryExecutor


@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectTimeout("timed out"),
        httpx.ReadTimeout("timed out"),
        httpx.ConnectError("refused"),
        httpx.RemoteProtocolError("broken"),
    ],
)
def test_httpx_classifier_retries_transient_errors(error: Exception) -> None:
    assert httpx_classifier().is_retryable(error)


def test_httpx_classifier_does_not_retry_status_errors() -> None:
    request = httpx.Request("GET", "https://example.com")
    response = httpx.Response(503, request=request)
    error = httpx.HTTPStatusError("unavailable", request=request, response=response)
    assert not httpx_classifier().is_retryable(error)
    assert httpx_classifier(httpx.HTTPStatusError).is_retryable(error)


def test_httpx_classifier_exception_types() -> None:
    assert httpx_classifier().retry_exceptions == HTTPX_RETRYABLE_EXCEPTIONS


def test_httpx_classifier_with_executor() -> None:
    request = httpx.Request("GET", "https://example.com")
    operation = Mock(side_effect=httpx.ConnectError("refused", request=request))
    executor = RetryExecutor(
        operation,
        RetryOptions(retry_interval=ConstantRetryInterval(0.0), max_try_count=3),
        httpx_classifier(),
    )

    result = executor.run()

    assert isinstance(result.error, OverMaxTryCountError)
    assert operation.call_count == 3
