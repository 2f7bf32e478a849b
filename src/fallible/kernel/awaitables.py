"""Helpers for callbacks that may return either a value or an awaitable."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable
from typing import TypeVar

T = TypeVar("T")


async def resolve(value: T | Awaitable[T]) -> T:
    """Await ``value`` if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value  # type: ignore[return-value]


def discard(value: object) -> None:
    """Drop an operand that will not be awaited.

    A bare coroutine is closed so it is not reported as never awaited.
    Anything else is left alone; an unawaited container never starts.
    """
    if inspect.iscoroutine(value):
        value.close()
