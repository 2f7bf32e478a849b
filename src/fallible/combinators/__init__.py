"""Combinators - helpers over collections of containers, and the algebraic laws."""

from fallible.combinators import laws
from fallible.combinators.ops import (
    collect_options,
    collect_results,
    first_present,
    flatten_option,
    flatten_result,
    partition,
    sequence,
    sequence_async,
    traverse,
)

__all__ = [
    "laws",
    "sequence",
    "traverse",
    "collect_results",
    "partition",
    "collect_options",
    "first_present",
    "flatten_option",
    "flatten_result",
    "sequence_async",
]
