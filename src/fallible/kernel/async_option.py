"""AsyncOption - an Option that settles asynchronously."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from fallible.kernel.awaitables import discard, resolve
from fallible.kernel.deferred import Deferred, _ready
from fallible.kernel.option import Option

if TYPE_CHECKING:
    from fallible.kernel.async_result import AsyncResult
    from fallible.kernel.result import Result

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")
E = TypeVar("E")

OptionLike = Option[U] | Awaitable[Option[U]]


@dataclass(frozen=True, eq=False)
class AsyncOption(Deferred[Option[T]]):
    """A class for treating an optional value that is still being computed.

    Every combinator awaits the wrapped computation, delegates to the
    matching Option operation and wraps the outcome in a new AsyncOption.
    Stages of a chain therefore run strictly in call order. Terminal
    operations (``unwrap``, ``match``, ...) are coroutines returning plain
    values.
    """

    @staticmethod
    def lift(option: Option[T]) -> AsyncOption[T]:
        """Wrap an already settled option."""
        return AsyncOption(_run=lambda: _ready(option))

    @staticmethod
    def from_awaitable(awaitable: Awaitable[Option[T]]) -> AsyncOption[T]:
        return AsyncOption(_run=lambda: awaitable)

    def _then(self, op: Callable[[Option[T]], Option[U] | Awaitable[Option[U]]]) -> AsyncOption[U]:
        """Create the next stage of the chain."""
        async def run() -> Option[U]:
            return await resolve(op(await self))

        return AsyncOption(_run=run)

    # -- combinators -------------------------------------------------------

    def map(self, transform: Callable[[T], U | Awaitable[U]]) -> AsyncOption[U]:
        return self._then(lambda o: o.map_async(transform))

    def and_then(self, transform: Callable[[T], OptionLike[U]]) -> AsyncOption[U]:
        return self._then(lambda o: o.and_then_async(transform))

    def filter(self, predicate: Callable[[T], bool | Awaitable[bool]]) -> AsyncOption[T]:
        return self._then(lambda o: o.filter_async(predicate))

    def insert(self, alternate: U) -> AsyncOption[T | U]:
        return self._then(lambda o: o.insert(alternate))

    def insert_with(self, alter: Callable[[], U | Awaitable[U]]) -> AsyncOption[T | U]:
        return self._then(lambda o: o.insert_with_async(alter))

    def or_else(self, alter: Callable[[], OptionLike[U]]) -> AsyncOption[T | U]:
        return self._then(lambda o: o.or_else_async(alter))

    # The other operand is only awaited when the receiver does not decide the
    # outcome alone. xor always needs both sides.

    def and_(self, replace: OptionLike[U]) -> AsyncOption[U]:
        async def run() -> Option[U]:
            option = await self
            if option.is_absent:
                discard(replace)
                return option
            return await resolve(replace)

        return AsyncOption(_run=run)

    def or_(self, alternate: OptionLike[U]) -> AsyncOption[T | U]:
        async def run() -> Option[T | U]:
            option = await self
            if option.is_present:
                discard(alternate)
                return option
            return await resolve(alternate)

        return AsyncOption(_run=run)

    def xor(self, other: OptionLike[U]) -> AsyncOption[T | U]:
        async def run() -> Option[T | U]:
            option = await self
            return option.xor(await resolve(other))

        return AsyncOption(_run=run)

    def zip(self, other: OptionLike[U]) -> AsyncOption[tuple[T, U]]:
        async def run() -> Option[tuple[T, U]]:
            option = await self
            if option.is_absent:
                discard(other)
                return option
            return option.zip(await resolve(other))

        return AsyncOption(_run=run)

    def zip_with(
        self, other: OptionLike[U], transform: Callable[[T, U], R | Awaitable[R]]
    ) -> AsyncOption[R]:
        async def run() -> Option[R]:
            option = await self
            if option.is_absent:
                discard(other)
                return option
            return await option.zip_with_async(other, transform)

        return AsyncOption(_run=run)

    # -- terminal operations -----------------------------------------------

    async def unwrap(self) -> T:
        return (await self).unwrap()

    async def expect(self, message: str) -> T:
        return (await self).expect(message)

    async def unwrap_or(self, alternate: U) -> T | U:
        return (await self).unwrap_or(alternate)

    async def unwrap_or_else(self, alter: Callable[[], U | Awaitable[U]]) -> T | U:
        option = await self
        if option.is_present:
            return option.value  # type: ignore[return-value]
        return await resolve(alter())

    async def match(
        self,
        *,
        present: Callable[[T], R | Awaitable[R]],
        absent: Callable[[], R | Awaitable[R]],
    ) -> R:
        """Evaluate the handler for the settled kind; async handlers are awaited."""
        option = await self
        return await resolve(option.match(present=present, absent=absent))

    async def test(self, predicate: Callable[[T], bool | Awaitable[bool]]) -> bool:
        return await (await self).test_async(predicate)

    # -- conversions -------------------------------------------------------

    async def to_result(self, create_error: Callable[[], E | Awaitable[E]]) -> Result[T, E]:
        """Settle and convert to a Result, creating the error if absent."""
        return await (await self).to_result_async(create_error)

    def to_async_result(self, create_error: Callable[[], E | Awaitable[E]]) -> AsyncResult[T, E]:
        """Convert into an AsyncResult, creating the error if absent.

        Args:
            create_error: Called only when the settled option is absent; may be async

        Returns:
            An AsyncResult that settles to Success of the value or Failure
            of the created error
        """
        from fallible.kernel.async_result import AsyncResult

        return AsyncResult(_run=lambda: self.to_result(create_error))

    def __repr__(self) -> str:
        state = "settled" if self.is_settled else "pending"
        return f"AsyncOption(<{state}>)"