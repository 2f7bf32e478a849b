"""Single-settlement wrapper shared by the asynchronous containers."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Generator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


async def _ready(value: T) -> T:
    return value


@dataclass(frozen=True, eq=False)
class Deferred(Generic[T]):
    """A computation that settles at most once.

    ``_run`` is called on the first await and scheduled as a task. The task is
    kept, so every later await returns the same value (or raises the same
    exception) without running the computation again. Awaiters are shielded
    from each other: cancelling one does not cancel the shared task.
    """

    _run: Callable[[], Awaitable[T]]
    _task: asyncio.Future[T] | None = field(default=None, init=False, repr=False)

    def __await__(self) -> Generator[Any, None, T]:
        return self.resolve().__await__()

    async def resolve(self) -> T:
        """Wait for the computation and return its settled value."""
        if self._task is None:
            object.__setattr__(self, "_task", asyncio.ensure_future(self._run()))
        return await asyncio.shield(self._task)

    @property
    def is_settled(self) -> bool:
        return self._task is not None and self._task.done()
