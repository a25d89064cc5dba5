from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Final, Generic, Never, TypeVar, final

from adt_fixtures import eq, gen


T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Snoc(Generic[T_co]):
    """Base class of snoc lists: either :class:`SNil` or :class:`SCons`.

    A snoc list is built from the end: ``SCons(init=..., last=...)`` appends
    ``last`` to ``init``. It holds the same sequences as :class:`~adt_fixtures.ilist.IList`
    with the recursion running the other way.

    Example::

        >>> values = Snoc.from_iterable([1, 2, 3])
        >>> values.last, values.init.last
        (3, 2)
        >>> values.to_list()
        [1, 2, 3]
    """

    __slots__ = ()

    @staticmethod
    def from_iterable(values: Iterable[T]) -> Snoc[T]:
        """Create a snoc list by folding ``values`` from the left."""
        result: Snoc[T] = SNil.INSTANCE
        for element in values:
            result = SCons(init=result, last=element)
        return result

    def __iter__(self) -> Iterator[T_co]:
        raise NotImplementedError

    def to_list(self) -> list[T_co]:
        """The elements in head-to-tail order, i.e. the order they were appended."""
        return list(self)


@final
class SNil(Snoc[Never], Enum):
    """Singleton representing the empty snoc list."""

    INSTANCE = auto()

    def __iter__(self) -> Iterator[Never]:
        return iter(())


@final
@dataclass(kw_only=True, slots=True, frozen=True, eq=False, repr=False)
class SCons(Snoc[T]):
    init: Final[Snoc[T]]
    last: Final[T]

    def __iter__(self) -> Iterator[T]:
        reversed_elements: list[T] = []
        current: Snoc[T] = self
        while isinstance(current, SCons):
            reversed_elements.append(current.last)
            current = current.init
        return reversed(reversed_elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snoc):
            return NotImplemented
        return snoc_eq(eq.universal)(self, other)

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"Snoc.from_iterable({self.to_list()!r})"


def snoc_eq(element: eq.Eq[T]) -> eq.Eq[Snoc[T]]:
    """
    Structural equality of snoc lists in constant stack depth.

    Compares from the last element towards the first and stops at the first
    unequal pair.
    """

    def eqv(x: Snoc[T], y: Snoc[T]) -> bool:
        while True:
            match x, y:
                case SCons(init=init_x, last=last_x), SCons(init=init_y, last=last_y):
                    if not element(last_x, last_y):
                        return False
                    x, y = init_x, init_y
                case SNil(), SNil():
                    return True
                case _:
                    return False

    return eqv


def snoc_gen(element: gen.Gen[T]) -> gen.Gen[Snoc[T]]:
    """A snoc list of at most ``size`` elements.

    Holds the same sequence that :func:`~adt_fixtures.ilist.ilist_gen` would
    produce from the same random source.
    """
    return gen.lists(element).map(Snoc.from_iterable)
