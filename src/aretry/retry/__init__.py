r"""Retry package implementing the retry state machine.

Public API:
    - ExceptionClassifier: Decides which operation errors are retried
    - CallbackRegistry: Ordered retry/success/failure hooks
    - SyncHook, AsyncHook: The two hook variants
    - RetryExecutor: Blocking retry executor
    - AsyncRetryExecutor: Suspending retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncHook",
    "AsyncRetryExecutor",
    "CallbackRegistry",
    "ExceptionClassifier",
    "RetryExecutor",
    "SyncHook",
]

from aretry.retry.classifier import ExceptionClassifier
from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor
from aretry.retry.hooks import AsyncHook, CallbackRegistry, SyncHook
