r"""Lifecycle hooks of the retry executors.

A hook is stored as one of two variants, ``SyncHook`` or ``AsyncHook``,
both with the canonical ``(result, context)`` signature. User callables
taking only ``(result)`` are adapted once, when they are registered.

The CallbackRegistry keeps the ordered retry, success and failure hooks
and invokes them sequentially, handing each hook its own copy of the
retry context.
"""

from __future__ import annotations

__all__ = [
    "AsyncHook",
    "CallbackRegistry",
    "Hook",
    "SyncHook",
    "accepts_context",
    "make_async_hook",
    "make_sync_hook",
]

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from aretry.context import RetryContext
    from aretry.result import RetryResult


@dataclass(frozen=True)
class SyncHook:
    """Hook called synchronously with ``(result, context)``."""

    func: Callable[[RetryResult[Any], RetryContext], Any]


@dataclass(frozen=True)
class AsyncHook:
    """Hook returning an awaitable, called with ``(result, context)``."""

    func: Callable[[RetryResult[Any], RetryContext], Awaitable[Any]]


Hook = SyncHook | AsyncHook


def accepts_context(func: Callable[..., Any]) -> bool:
    """Indicate if a callable accepts the ``(result, context)`` shape.

    Args:
        func: The user callable.

    Returns:
        ``True`` if the callable takes at least two positional arguments
        (or variable positional arguments), ``False`` if it only takes
        the result. Callables without an inspectable signature are
        assumed to take both.

    Example:
        ```pycon
        >>> from aretry.retry.hooks import accepts_context
        >>> accepts_context(lambda result: None)
        False
        >>> accepts_context(lambda result, context: None)
        True
        >>> accepts_context(print)
        True

        ```
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return True

    positional = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return True
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            positional += 1
    return positional >= 2


def make_sync_hook(func: Callable[..., Any]) -> SyncHook:
    """Adapt a synchronous user callable to a ``SyncHook``.

    Args:
        func: A callable taking ``(result)`` or ``(result, context)``.

    Returns:
        The hook.

    Raises:
        TypeError: If ``func`` is not callable or is a coroutine
            function.
    """
    if not callable(func):
        msg = f"hook must be callable, got {func!r}"
        raise TypeError(msg)
    if inspect.iscoroutinefunction(func):
        msg = f"{func!r} is a coroutine function, register it with the *_async method"
        raise TypeError(msg)
    if accepts_context(func):
        return SyncHook(func)
    return SyncHook(lambda result, _context: func(result))


def make_async_hook(func: Callable[..., Awaitable[Any]]) -> AsyncHook:
    """Adapt a user callable returning an awaitable to an
    ``AsyncHook``.

    Args:
        func: A callable taking ``(result)`` or ``(result, context)``.

    Returns:
        The hook.

    Raises:
        TypeError: If ``func`` is not callable.
    """
    if not callable(func):
        msg = f"hook must be callable, got {func!r}"
        raise TypeError(msg)
    if accepts_context(func):
        return AsyncHook(func)
    return AsyncHook(lambda result, _context: func(result))


class CallbackRegistry:
    """Ordered collections of retry, success and failure hooks.

    Hooks of one category are invoked in registration order. Each hook
    receives the live result and a clone of the context, so it cannot
    modify the counters of the execution.

    Attributes:
        retry_hooks: Hooks invoked before each retry.
        success_hooks: Hooks invoked when the operation succeeded.
        failure_hooks: Hooks invoked when the execution failed.
    """

    def __init__(self) -> None:
        self.retry_hooks: list[Hook] = []
        self.success_hooks: list[Hook] = []
        self.failure_hooks: list[Hook] = []

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(retry={len(self.retry_hooks)}, "
            f"success={len(self.success_hooks)}, failure={len(self.failure_hooks)})"
        )

    def add_retry(self, hook: Hook) -> None:
        self.retry_hooks.append(hook)

    def add_success(self, hook: Hook) -> None:
        self.success_hooks.append(hook)

    def add_failure(self, hook: Hook) -> None:
        self.failure_hooks.append(hook)

    def copy(self) -> CallbackRegistry:
        """Return a registry with the same hooks and independent lists."""
        registry = CallbackRegistry()
        registry.retry_hooks.extend(self.retry_hooks)
        registry.success_hooks.extend(self.success_hooks)
        registry.failure_hooks.extend(self.failure_hooks)
        return registry

    @staticmethod
    def invoke(hooks: list[Hook], result: RetryResult[Any], context: RetryContext) -> None:
        """Invoke hooks synchronously.

        Args:
            hooks: The hooks to invoke, in order.
            result: The result of the execution.
            context: The live context. Each hook receives a clone.

        Raises:
            TypeError: If one of the hooks is an ``AsyncHook`` or
                returns an awaitable.
            Exception: Any error raised by a hook, after which the
                remaining hooks are not invoked.
        """
        for hook in hooks:
            match hook:
                case SyncHook(func):
                    value = func(result, context.clone())
                    if inspect.isawaitable(value):
                        if inspect.iscoroutine(value):
                            value.close()
                        msg = (
                            f"hook {func!r} returned an awaitable, "
                            "a blocking executor cannot await it"
                        )
                        raise TypeError(msg)
                case AsyncHook(func):
                    msg = f"asynchronous hook {func!r} cannot be invoked by a blocking executor"
                    raise TypeError(msg)

    @staticmethod
    async def ainvoke(hooks: list[Hook], result: RetryResult[Any], context: RetryContext) -> None:
        """Invoke hooks, awaiting the asynchronous ones.

        An awaitable returned by a ``SyncHook`` is awaited as well.

        Args:
            hooks: The hooks to invoke, in order.
            result: The result of the execution.
            context: The live context. Each hook receives a clone.

        Raises:
            Exception: Any error raised by a hook, after which the
                remaining hooks are not invoked.
        """
        for hook in hooks:
            match hook:
                case SyncHook(func):
                    value = func(result, context.clone())
                    if inspect.isawaitable(value):
                        await value
                case AsyncHook(func):
                    await func(result, context.clone())
