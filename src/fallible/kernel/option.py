"""Option - a value that may or may not be present."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Literal, TypeVar

from fallible.kernel.awaitables import resolve
from fallible.kernel.errors import EmptyAccess

if TYPE_CHECKING:
    from fallible.kernel.async_option import AsyncOption
    from fallible.kernel.result import Result

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")
E = TypeVar("E")


@dataclass(frozen=True)
class Option(Generic[T]):
    """
    A container for a value that may be absent.

    Kinds:
    - present: holds exactly one value (``None`` and other falsy values included)
    - absent: holds nothing; a single shared instance is returned by ``absent()``

    Every combinator returns a new Option (or ``self`` / the shared absent
    instance) and never mutates the receiver.
    """

    kind: Literal["present", "absent"]
    value: T | None = None

    @staticmethod
    def Present(value: Any) -> Option[Any]:
        return Option(kind="present", value=value)

    @staticmethod
    def Absent() -> Option[Any]:
        return _ABSENT

    @property
    def is_present(self) -> bool:
        return self.kind == "present"

    @property
    def is_absent(self) -> bool:
        return self.kind == "absent"

    def __iter__(self) -> Iterator[T]:
        if self.kind == "present":
            yield self.value  # type: ignore[misc]

    def __repr__(self) -> str:
        if self.kind == "present":
            return f"present({self.value!r})"
        return "absent()"

    # -- accessors ---------------------------------------------------------

    def unwrap(self) -> T:
        """Return the inner value.

        Raises:
            EmptyAccess: If the option is absent.
        """
        if self.kind == "present":
            return self.value  # type: ignore[return-value]
        raise EmptyAccess()

    def expect(self, message: str) -> T:
        """Return the inner value, raising EmptyAccess with ``message`` if absent."""
        if self.kind == "present":
            return self.value  # type: ignore[return-value]
        raise EmptyAccess(message)

    def unwrap_or(self, alternate: U) -> T | U:
        if self.kind == "present":
            return self.value  # type: ignore[return-value]
        return alternate

    def unwrap_or_else(self, alter: Callable[[], U]) -> T | U:
        if self.kind == "present":
            return self.value  # type: ignore[return-value]
        return alter()

    def match(self, *, present: Callable[[T], R], absent: Callable[[], R]) -> R:
        """Call the handler that corresponds to the current kind.

        Args:
            present: Called with the inner value if present
            absent: Called with no arguments if absent

        Returns:
            Whatever the selected handler returns
        """
        if self.kind == "present":
            return present(self.value)  # type: ignore[arg-type]
        return absent()

    def test(self, predicate: Callable[[T], bool]) -> bool:
        """True if present and the inner value satisfies ``predicate``."""
        if self.kind == "present":
            return predicate(self.value)  # type: ignore[arg-type]
        return False

    # -- transformations ---------------------------------------------------

    def map(self, transform: Callable[[T], U]) -> Option[U]:
        if self.kind == "present":
            return Option(kind="present", value=transform(self.value))  # type: ignore[arg-type]
        return _ABSENT

    def and_then(self, transform: Callable[[T], Option[U]]) -> Option[U]:
        if self.kind == "present":
            return transform(self.value)  # type: ignore[arg-type]
        return _ABSENT

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        if self.kind == "present" and predicate(self.value):  # type: ignore[arg-type]
            return self
        return _ABSENT

    def insert(self, alternate: U) -> Option[T | U]:
        """Return self if present, otherwise a new present option of ``alternate``."""
        if self.kind == "present":
            return self
        return Option(kind="present", value=alternate)

    def insert_with(self, alter: Callable[[], U]) -> Option[T | U]:
        if self.kind == "present":
            return self
        return Option(kind="present", value=alter())

    # -- boolean algebra ---------------------------------------------------

    def and_(self, replace: Option[U]) -> Option[U]:
        """Return ``replace`` if present, otherwise absent."""
        if self.kind == "present":
            return replace
        return _ABSENT

    def or_(self, alternate: Option[U]) -> Option[T | U]:
        """Return self if present, otherwise ``alternate``."""
        if self.kind == "present":
            return self
        return alternate

    def xor(self, other: Option[U]) -> Option[T | U]:
        """Return whichever side is present if exactly one is, otherwise absent."""
        if self.kind == "absent":
            return other
        if other.kind == "absent":
            return self
        return _ABSENT

    def or_else(self, alter: Callable[[], Option[U]]) -> Option[T | U]:
        if self.kind == "present":
            return self
        return alter()

    def zip(self, other: Option[U]) -> Option[tuple[T, U]]:
        """Pair both inner values if both options are present."""
        if self.kind == "absent":
            return _ABSENT
        return other.map(lambda o: (self.value, o))  # type: ignore[return-value]

    def zip_with(self, other: Option[U], transform: Callable[[T, U], R]) -> Option[R]:
        if self.kind == "absent":
            return _ABSENT
        return other.map(lambda o: transform(self.value, o))  # type: ignore[arg-type]

    # -- conversions -------------------------------------------------------

    def to_result(self, create_error: Callable[[], E]) -> Result[T, E]:
        """Success of the inner value, or Failure of ``create_error()`` if absent."""
        from fallible.kernel.result import Result

        if self.kind == "present":
            return Result.Success(self.value)
        return Result.Failure(create_error())

    def to_async(self) -> AsyncOption[T]:
        """Lift this option into an already settled AsyncOption."""
        from fallible.kernel.async_option import AsyncOption

        return AsyncOption.lift(self)

    # -- async variants ----------------------------------------------------
    # User callbacks may return a plain value or an awaitable. The absent
    # side settles without calling them.

    async def test_async(self, predicate: Callable[[T], bool | Awaitable[bool]]) -> bool:
        if self.kind == "present":
            return await resolve(predicate(self.value))  # type: ignore[arg-type]
        return False

    async def map_async(self, transform: Callable[[T], U | Awaitable[U]]) -> Option[U]:
        """Like ``map``, but awaits the transform before wrapping its result.

        Use this to avoid getting an ``Option`` of an awaitable.
        """
        if self.kind == "present":
            return Option(kind="present", value=await resolve(transform(self.value)))  # type: ignore[arg-type]
        return _ABSENT

    async def and_then_async(
        self, transform: Callable[[T], Option[U] | Awaitable[Option[U]]]
    ) -> Option[U]:
        if self.kind == "present":
            return await resolve(transform(self.value))  # type: ignore[arg-type]
        return _ABSENT

    async def filter_async(self, predicate: Callable[[T], bool | Awaitable[bool]]) -> Option[T]:
        if self.kind == "present" and await resolve(predicate(self.value)):  # type: ignore[arg-type]
            return self
        return _ABSENT

    async def insert_with_async(self, alter: Callable[[], U | Awaitable[U]]) -> Option[T | U]:
        if self.kind == "present":
            return self
        return Option(kind="present", value=await resolve(alter()))

    async def or_else_async(
        self, alter: Callable[[], Option[U] | Awaitable[Option[U]]]
    ) -> Option[T | U]:
        if self.kind == "present":
            return self
        return await resolve(alter())

    async def zip_with_async(
        self,
        other: Option[U] | Awaitable[Option[U]],
        transform: Callable[[T, U], R | Awaitable[R]],
    ) -> Option[R]:
        """Combine both inner values with ``transform`` if both are present.

        Args:
            other: An Option, or an awaitable that settles to one
            transform: Called with both inner values; may be async

        Returns:
            Present of the transform result, otherwise absent
        """
        if self.kind == "absent":
            return _ABSENT
        other_ = await resolve(other)
        if other_.kind == "absent":
            return _ABSENT
        return Option(kind="present", value=await resolve(transform(self.value, other_.value)))  # type: ignore[arg-type]

    async def to_result_async(self, create_error: Callable[[], E | Awaitable[E]]) -> Result[T, E]:
        from fallible.kernel.result import Result

        if self.kind == "present":
            return Result.Success(self.value)
        return Result.Failure(await resolve(create_error()))


_ABSENT: Option[Any] = Option(kind="absent")


def present(value: T) -> Option[T]:
    """Return ``value`` wrapped in a present option."""
    return Option(kind="present", value=value)


def absent() -> Option[Any]:
    """Return the shared absent option."""
    return _ABSENT
