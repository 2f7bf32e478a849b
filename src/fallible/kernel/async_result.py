"""AsyncResult - a Result that settles asynchronously."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

from fallible.kernel.awaitables import discard, resolve
from fallible.kernel.deferred import Deferred, _ready
from fallible.kernel.result import Catchable, Result

if TYPE_CHECKING:
    from fallible.kernel.async_option import AsyncOption
    from fallible.kernel.option import Option

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
R = TypeVar("R")

ResultLike = Result[U, F] | Awaitable[Result[U, F]]


@dataclass(frozen=True, eq=False)
class AsyncResult(Deferred[Result[T, E]]):
    """A Result whose computation may still be pending.

    Combinators wrap a continuation of the prior computation; terminal
    operations settle the chain and return plain values. An exception raised
    inside the chain propagates out of the awaiting coroutine, except within
    ``challenge`` / ``try_async`` / ``attempt``, which capture it as a failure.
    """

    # -- entry points ------------------------------------------------------

    @staticmethod
    def begin() -> AsyncResult[None, Any]:
        """Just begin a fallible asynchronous process."""
        return AsyncResult.lift(Result.begin_chain())

    @staticmethod
    def lift(result: Result[T, E]) -> AsyncResult[T, E]:
        """Wrap an already settled result."""
        return AsyncResult(_run=lambda: _ready(result))

    @staticmethod
    def from_awaitable(awaitable: Awaitable[Result[T, E]]) -> AsyncResult[T, E]:
        return AsyncResult(_run=lambda: awaitable)

    @staticmethod
    def challenge(
        f: Callable[[], T | Awaitable[T]], exceptions: Catchable = (Exception,)
    ) -> AsyncResult[T, Any]:
        """Convert an exception into a failure if the given function raises.

        ``f`` may be a plain function or return an awaitable. Both a raised
        exception and a failed awaitable become the failure payload.

        ``f`` is not called here. It runs when the returned AsyncResult (or a
        chain built on it) is first awaited, so a chain that is never awaited
        never calls ``f`` and none of its side effects happen.

        Args:
            f: Zero-argument callable, called when the chain is first awaited
            exceptions: Exception types to capture; anything else propagates

        Returns:
            AsyncResult settling to Success of the value or Failure of the exception
        """
        async def run() -> Result[T, Any]:
            try:
                return Result.Success(await resolve(f()))
            except exceptions as exc:
                logger.debug("Captured %s from %r as failure", type(exc).__name__, f)
                return Result.Failure(exc)

        return AsyncResult(_run=run)

    @staticmethod
    def try_async(
        f: Callable[[], T | Awaitable[T]], exceptions: Catchable = (Exception,)
    ) -> AsyncResult[T, Any]:
        """Alias of challenge()."""
        return AsyncResult.challenge(f, exceptions)

    def _then(self, op: Callable[[Result[T, E]], ResultLike[U, F]]) -> AsyncResult[U, F]:
        async def run() -> Result[U, F]:
            return await resolve(op(await self))

        return AsyncResult(_run=run)

    # -- combinators -------------------------------------------------------

    def map(self, transform: Callable[[T], U | Awaitable[U]]) -> AsyncResult[U, E]:
        """Transform the inner value; does nothing on failure or a raised computation."""
        return self._then(lambda r: r.map_async(transform))

    def map_err(self, transform: Callable[[E], F | Awaitable[F]]) -> AsyncResult[T, F]:
        return self._then(lambda r: r.map_err_async(transform))

    def and_then(self, transform: Callable[[T], ResultLike[U, F]]) -> AsyncResult[U, E | F]:
        return self._then(lambda r: r.and_then_async(transform))

    def or_else(self, alter: Callable[[E], ResultLike[U, F]]) -> AsyncResult[T | U, F]:
        return self._then(lambda r: r.or_else_async(alter))

    def attempt(
        self,
        transform: Callable[[T], ResultLike[U, F]],
        exceptions: Catchable = (Exception,),
    ) -> AsyncResult[U, Any]:
        """Like and_then(), but a raised exception becomes the failure payload."""
        return self._then(lambda r: r.attempt_async(transform, exceptions))

    def and_(self, replace: ResultLike[U, F]) -> AsyncResult[U, E | F]:
        """Settle to ``replace`` if successful; ``replace`` is not awaited on failure."""
        async def run() -> Result[U, E | F]:
            result = await self
            if result.is_failure:
                discard(replace)
                return result  # type: ignore[return-value]
            return await resolve(replace)

        return AsyncResult(_run=run)

    def or_(self, replace: ResultLike[U, F]) -> AsyncResult[T | U, F]:
        async def run() -> Result[T | U, F]:
            result = await self
            if result.is_success:
                discard(replace)
                return result  # type: ignore[return-value]
            return await resolve(replace)

        return AsyncResult(_run=run)

    # -- terminal operations -----------------------------------------------

    async def unwrap(self) -> T:
        """Settle and return the inner value.

        Raises:
            UnwrapOnFailure: If the settled result is a failure.
        """
        return (await self).unwrap()

    async def expect(self, message: str) -> T:
        return (await self).expect(message)

    async def unwrap_err(self) -> E:
        return (await self).unwrap_err()

    async def unwrap_or(self, alternate: U) -> T | U:
        return (await self).unwrap_or(alternate)

    async def unwrap_or_else(self, alter: Callable[[E], U | Awaitable[U]]) -> T | U:
        result = await self
        if result.is_success:
            return result.value  # type: ignore[return-value]
        return await resolve(alter(result.error))  # type: ignore[arg-type]

    async def match(
        self,
        *,
        success: Callable[[T], R | Awaitable[R]],
        failure: Callable[[E], R | Awaitable[R]],
    ) -> R:
        result = await self
        return await resolve(result.match(success=success, failure=failure))

    async def test(self, predicate: Callable[[T], bool | Awaitable[bool]]) -> bool:
        return await (await self).test_async(predicate)

    # -- conversions -------------------------------------------------------

    async def to_option(self) -> Option[T]:
        """Settle and discard the error channel."""
        return (await self).to_option()

    def to_async_option(self) -> AsyncOption[T]:
        from fallible.kernel.async_option import AsyncOption

        return AsyncOption(_run=self.to_option)

    def __repr__(self) -> str:
        state = "settled" if self.is_settled else "pending"
        return f"AsyncResult(<{state}>)"
