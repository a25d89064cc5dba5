"""
Equality oracles.

An oracle is a plain callable ``(x, y) -> bool``. Oracles for generic types take
the element oracle as an argument, so composite oracles are built by nesting
calls, e.g. ``ilist_eq(box_eq(universal))``.
"""

from collections.abc import Callable, Sequence
from typing import Any, TypeAlias, TypeVar


T = TypeVar("T")
U = TypeVar("U")

Eq: TypeAlias = Callable[[T, T], bool]


def universal(x: object, y: object) -> bool:
    """Equality via Python's ``==``."""
    return x == y


def by(project: Callable[[U], T], eq: Eq[T] = universal) -> Eq[U]:
    """Compare two values by comparing their projections with ``eq``."""

    def eqv(x: U, y: U) -> bool:
        return eq(project(x), project(y))

    return eqv


def optional(eq: Eq[T]) -> Eq[T | None]:
    def eqv(x: T | None, y: T | None) -> bool:
        if x is None or y is None:
            return x is None and y is None
        return eq(x, y)

    return eqv


def sequence(eq: Eq[T]) -> Eq[Sequence[T]]:
    """Equal lengths and pairwise equal elements."""

    def eqv(x: Sequence[T], y: Sequence[T]) -> bool:
        return len(x) == len(y) and all(map(eq, x, y))

    return eqv


def tuples(*eqs: Eq[Any]) -> Eq[tuple[Any, ...]]:
    """
    Compare fixed-size tuples position by position.

    ``eqs[n]`` compares the ``n``-th components. Tuples of a different arity than
    ``eqs`` are unequal.
    """

    def eqv(x: tuple[Any, ...], y: tuple[Any, ...]) -> bool:
        if len(x) != len(eqs) or len(y) != len(eqs):
            return False
        return all(eq(a, b) for eq, a, b in zip(eqs, x, y))

    return eqv
