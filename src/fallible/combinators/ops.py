"""Collection combinators: sequence, traverse, collect, partition, flatten."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from fallible.kernel import AsyncResult, Option, Result, absent, failure, present, success

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect success values, stopping at the first failure.

    Args:
        results: Results to combine, consumed in order

    Returns:
        Success of all values in order, or the first failure unchanged
    """
    values: list[T] = []
    for result in results:
        if result.is_failure:
            return result  # type: ignore[return-value]
        values.append(result.value)  # type: ignore[arg-type]
    return success(values)


def traverse(items: Iterable[T], f: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Apply ``f`` to each item and sequence the results.

    ``f`` is not called for items after the first failure.
    """
    return sequence(f(item) for item in items)


def collect_results(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect all values, or every error if at least one result failed."""
    values, errors = partition(results)
    if errors:
        return failure(errors)
    return success(values)


def partition(results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        if result.is_success:
            values.append(result.value)  # type: ignore[arg-type]
        else:
            errors.append(result.error)  # type: ignore[arg-type]
    return values, errors


def collect_options(options: Iterable[Option[T]]) -> Option[list[T]]:
    """Present of all values if every option is present, otherwise absent."""
    values: list[T] = []
    for option in options:
        if option.is_absent:
            return absent()
        values.append(option.value)  # type: ignore[arg-type]
    return present(values)


def first_present(options: Iterable[Option[T]]) -> Option[T]:
    for option in options:
        if option.is_present:
            return option
    return absent()


def flatten_option(option: Option[Option[T]]) -> Option[T]:
    return option.and_then(lambda inner: inner)


def flatten_result(result: Result[Result[T, E], E]) -> Result[T, E]:
    return result.and_then(lambda inner: inner)


def sequence_async(results: Iterable[AsyncResult[T, E]]) -> AsyncResult[list[T], E]:
    """Settle async results one at a time, in order, stopping at the first failure.

    Result N+1 is not awaited until result N has settled as a success.

    Args:
        results: AsyncResults to settle in order

    Returns:
        AsyncResult of all success values, or the first failure
    """
    async def run() -> Result[list[T], Any]:
        values: list[T] = []
        for pending in results:
            result = await pending
            if result.is_failure:
                return result  # type: ignore[return-value]
            values.append(result.value)  # type: ignore[arg-type]
        return success(values)

    return AsyncResult(_run=run)
