"""Result - the outcome of a computation that may fail."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Literal, TypeVar

from fallible.kernel.awaitables import resolve
from fallible.kernel.errors import UnwrapErrOnSuccess, UnwrapOnFailure
from fallible.kernel.option import Option, absent, present

if TYPE_CHECKING:
    from fallible.kernel.async_result import AsyncResult

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
R = TypeVar("R")

Catchable = tuple[type[BaseException], ...]


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """
    A container for either a successful value or an error.

    Kinds:
    - success: ``value`` holds the result, ``error`` is unused
    - failure: ``error`` holds the error, ``value`` is unused

    Build instances with ``success()`` / ``failure()`` so that only the slot
    belonging to ``kind`` is ever meaningful.
    """

    kind: Literal["success", "failure"]
    value: T | None = None
    error: E | None = None

    @staticmethod
    def Success(value: Any = None) -> Result[Any, Any]:
        return Result(kind="success", value=value)

    @staticmethod
    def Failure(error: Any = None) -> Result[Any, Any]:
        return Result(kind="failure", error=error)

    @staticmethod
    def begin_chain() -> Result[None, Any]:
        """Just begin a fallible process."""
        return Result(kind="success", value=None)

    @staticmethod
    def challenge(f: Callable[[], T], exceptions: Catchable = (Exception,)) -> Result[T, Any]:
        """Call ``f`` and capture a raised exception as a failure.

        This is the boundary between exception flow and the Result algebra;
        the caught exception is stored as the error unchanged.

        Args:
            f: Zero-argument callable to run
            exceptions: Exception types to capture; anything else propagates

        Returns:
            Success of ``f()`` or Failure of the raised exception
        """
        try:
            return Result(kind="success", value=f())
        except exceptions as exc:
            logger.debug("Captured %s from %r as failure", type(exc).__name__, f)
            return Result(kind="failure", error=exc)

    @property
    def is_success(self) -> bool:
        return self.kind == "success"

    @property
    def is_failure(self) -> bool:
        return self.kind == "failure"

    def __iter__(self) -> Iterator[T]:
        if self.kind == "success":
            yield self.value  # type: ignore[misc]

    def __repr__(self) -> str:
        if self.kind == "success":
            return f"success({self.value!r})"
        return f"failure({self.error!r})"

    def _cause(self) -> BaseException | None:
        return self.error if isinstance(self.error, BaseException) else None

    # -- accessors ---------------------------------------------------------

    def unwrap(self) -> T:
        """Return the success value.

        Raises:
            UnwrapOnFailure: If this is a failure. An exception payload is
                chained as the cause.
        """
        if self.kind == "success":
            return self.value  # type: ignore[return-value]
        raise UnwrapOnFailure(self.error) from self._cause()

    def expect(self, message: str) -> T:
        if self.kind == "success":
            return self.value  # type: ignore[return-value]
        raise UnwrapOnFailure(self.error, message) from self._cause()

    def unwrap_err(self) -> E:
        """Return the error.

        Raises:
            UnwrapErrOnSuccess: If this is a success.
        """
        if self.kind == "failure":
            return self.error  # type: ignore[return-value]
        raise UnwrapErrOnSuccess(self.value)

    def unwrap_or(self, alternate: U) -> T | U:
        if self.kind == "success":
            return self.value  # type: ignore[return-value]
        return alternate

    def unwrap_or_else(self, alter: Callable[[E], U]) -> T | U:
        if self.kind == "success":
            return self.value  # type: ignore[return-value]
        return alter(self.error)  # type: ignore[arg-type]

    def match(self, *, success: Callable[[T], R], failure: Callable[[E], R]) -> R:
        """Evaluate the success or failure handler, corresponding to current kind."""
        if self.kind == "success":
            return success(self.value)  # type: ignore[arg-type]
        return failure(self.error)  # type: ignore[arg-type]

    def test(self, predicate: Callable[[T], bool]) -> bool:
        if self.kind == "success":
            return predicate(self.value)  # type: ignore[arg-type]
        return False

    # -- transformations ---------------------------------------------------

    def map(self, transform: Callable[[T], U]) -> Result[U, E]:
        if self.kind == "success":
            return Result(kind="success", value=transform(self.value))  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    def map_err(self, transform: Callable[[E], F]) -> Result[T, F]:
        if self.kind == "failure":
            return Result(kind="failure", error=transform(self.error))  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    def and_then(self, transform: Callable[[T], Result[U, F]]) -> Result[U, E | F]:
        """Transform the value by a function which may fail; failures pass through."""
        if self.kind == "success":
            return transform(self.value)  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    def or_else(self, alter: Callable[[E], Result[U, F]]) -> Result[T | U, F]:
        """Turn the error into a new result; successes pass through."""
        if self.kind == "failure":
            return alter(self.error)  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    def and_(self, replace: Result[U, F]) -> Result[U, E | F]:
        if self.kind == "success":
            return replace
        return self  # type: ignore[return-value]

    def or_(self, replace: Result[U, F]) -> Result[T | U, F]:
        if self.kind == "failure":
            return replace
        return self  # type: ignore[return-value]

    def attempt(
        self, transform: Callable[[T], Result[U, F]], exceptions: Catchable = (Exception,)
    ) -> Result[U, Any]:
        """Like ``and_then``, but a raised exception becomes the failure payload.

        Args:
            transform: Function applied to the success value, returning a Result
            exceptions: Exception types to capture; anything else propagates

        Returns:
            The transform's result, Failure of the raised exception, or
            self unchanged if already a failure
        """
        if self.kind == "failure":
            return self
        try:
            return transform(self.value)  # type: ignore[arg-type]
        except exceptions as exc:
            logger.debug("Captured %s from %r as failure", type(exc).__name__, transform)
            return Result(kind="failure", error=exc)

    # -- conversions -------------------------------------------------------

    def to_option(self) -> Option[T]:
        """Present of the value, or absent with the error discarded."""
        if self.kind == "success":
            return present(self.value)  # type: ignore[arg-type]
        return absent()

    def to_async(self) -> AsyncResult[T, E]:
        from fallible.kernel.async_result import AsyncResult

        return AsyncResult.lift(self)

    # -- async variants ----------------------------------------------------

    async def test_async(self, predicate: Callable[[T], bool | Awaitable[bool]]) -> bool:
        if self.kind == "success":
            return await resolve(predicate(self.value))  # type: ignore[arg-type]
        return False

    async def map_async(self, transform: Callable[[T], U | Awaitable[U]]) -> Result[U, E]:
        """Like ``map``, awaiting the transform. Avoids a Result of an awaitable."""
        if self.kind == "success":
            return Result(kind="success", value=await resolve(transform(self.value)))  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    async def map_err_async(self, transform: Callable[[E], F | Awaitable[F]]) -> Result[T, F]:
        if self.kind == "failure":
            return Result(kind="failure", error=await resolve(transform(self.error)))  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    async def and_then_async(
        self, transform: Callable[[T], Result[U, F] | Awaitable[Result[U, F]]]
    ) -> Result[U, E | F]:
        if self.kind == "success":
            return await resolve(transform(self.value))  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    async def or_else_async(
        self, alter: Callable[[E], Result[U, F] | Awaitable[Result[U, F]]]
    ) -> Result[T | U, F]:
        if self.kind == "failure":
            return await resolve(alter(self.error))  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    async def attempt_async(
        self,
        transform: Callable[[T], Result[U, F] | Awaitable[Result[U, F]]],
        exceptions: Catchable = (Exception,),
    ) -> Result[U, Any]:
        """Like ``attempt``; a raised exception or failed awaitable becomes the error."""
        if self.kind == "failure":
            return self
        try:
            return await resolve(transform(self.value))  # type: ignore[arg-type]
        except exceptions as exc:
            logger.debug("Captured %s from %r as failure", type(exc).__name__, transform)
            return Result(kind="failure", error=exc)


def success(value: T = None) -> Result[T, Any]:  # type: ignore[assignment]
    """Return a successful result."""
    return Result(kind="success", value=value)


def failure(error: E = None) -> Result[Any, E]:  # type: ignore[assignment]
    """Return a failed result."""
    return Result(kind="failure", error=error)
