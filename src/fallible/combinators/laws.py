"""Combinator laws and algebra checks."""

# Containers satisfy the following algebraic laws:
#
# 1. Functor identity: m.map(id) == m
#
# 2. Functor composition: m.map(f).map(g) == m.map(lambda v: g(f(v)))
#
# 3. Left identity: unit(x).and_then(f) == f(x)
#
# 4. Right identity: m.and_then(unit) == m
#
# 5. Associativity: m.and_then(f).and_then(g) == m.and_then(lambda v: f(v).and_then(g))
#
# 6. Short circuit: present(a).and_(o) == o, absent().and_(o) == absent(),
#    present(a).or_(o) == present(a), absent().or_(o) == o
#
# 7. Exclusive or: exactly one present side survives, otherwise absent
#
# Each check below evaluates both sides on concrete values and compares
# them with ==.

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from fallible.kernel import Option, Result, absent

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

Monad = Option[Any] | Result[Any, Any]


def _identity(value: T) -> T:
    return value


def functor_identity(m: Monad) -> bool:
    return m.map(_identity) == m


def functor_composition(m: Monad, f: Callable[[Any], U], g: Callable[[U], V]) -> bool:
    return m.map(f).map(g) == m.map(lambda v: g(f(v)))


def left_identity(unit: Callable[[T], Monad], value: T, f: Callable[[T], Monad]) -> bool:
    return unit(value).and_then(f) == f(value)


def right_identity(m: Monad, unit: Callable[[Any], Monad]) -> bool:
    return m.and_then(unit) == m


def associativity(m: Monad, f: Callable[[Any], Monad], g: Callable[[Any], Monad]) -> bool:
    return m.and_then(f).and_then(g) == m.and_then(lambda v: f(v).and_then(g))


def short_circuit(option: Option[Any], other: Option[Any]) -> bool:
    """Check the and_/or_ identities for ``option`` against ``other``."""
    if option.is_present:
        return option.and_(other) is other and option.or_(other) is option
    return option.and_(other) is absent() and option.or_(other) is other


def exclusive_or(option: Option[Any], other: Option[Any]) -> bool:
    expected = {
        (True, True): absent(),
        (True, False): option,
        (False, True): other,
        (False, False): absent(),
    }[(option.is_present, other.is_present)]
    return option.xor(other) is expected


def absorption(m: Monad, f: Callable[[Any], Any]) -> bool:
    """An absent option or a failure is returned unchanged by map and and_then."""
    if isinstance(m, Option):
        if m.is_present:
            return True
        return m.map(f) is absent() and m.and_then(f) is absent()
    if m.is_success:
        return True
    return m.map(f) == m and m.and_then(f) == m
