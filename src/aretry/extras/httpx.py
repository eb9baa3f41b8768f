r"""Retryable exception types for operations performed with ``httpx``.

Requires the ``httpx`` extra (``pip install aretry[httpx]``).

Example:
    ```pycon
    >>> import httpx
    >>> from aretry.extras.httpx import httpx_classifier
    >>> classifier = httpx_classifier()
    >>> classifier.is_retryable(httpx.ConnectTimeout("timed out"))
    True
    >>> classifier.is_retryable(ValueError("bad value"))
    False

    ```
"""

from __future__ import annotations

__all__ = ["HTTPX_RETRYABLE_EXCEPTIONS", "httpx_classifier"]

import httpx

from aretry.retry.classifier import ExceptionClassifier

# Timeouts and network-level failures. HTTPStatusError is not included:
# raise_for_status() errors are retried only when requested explicitly.
HTTPX_RETRYABLE_EXCEPTIONS: tuple[type[Exception], ...] = (
    httpx.TimeoutException,
    httpx.TransportError,
)


def httpx_classifier(*extra: type[BaseException]) -> ExceptionClassifier:
    """Create a classifier retrying httpx transient errors.

    Args:
        *extra: Additional exception types to retry on, for example
            ``httpx.HTTPStatusError``.

    Returns:
        The classifier.
    """
    return ExceptionClassifier((*HTTPX_RETRYABLE_EXCEPTIONS, *extra))
