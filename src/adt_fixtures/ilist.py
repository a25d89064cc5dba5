from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Final, Generic, Never, TypeVar, final

from adt_fixtures import cogen, eq, gen


T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class IList(Generic[T_co]):
    """Base class of cons lists: either :class:`INil` or :class:`ICons`.

    The set of variants is closed. Ownership of tails is tree-shaped: a node is
    never shared between two lists, which rules out cycles.

    Example::

        >>> values = IList.from_iterable([1, 2, 3])
        >>> values.head, values.tail.head
        (1, 2)
        >>> values.to_list()
        [1, 2, 3]
        >>> IList.from_iterable([]) is INil.INSTANCE
        True
    """

    __slots__ = ()

    @staticmethod
    def from_iterable(values: Iterable[T]) -> IList[T]:
        """Create a cons list by folding ``values`` from the right.

        :param values: The elements, in head-to-tail order.
        :return: :data:`INil.INSTANCE` if ``values`` is empty, otherwise an :class:`ICons`.
        """
        result: IList[T] = INil.INSTANCE
        for element in reversed(tuple(values)):
            result = ICons(head=element, tail=result)
        return result

    def __iter__(self) -> Iterator[T_co]:
        raise NotImplementedError

    def to_list(self) -> list[T_co]:
        """The elements in head-to-tail order."""
        return list(self)


@final
class INil(IList[Never], Enum):
    """
    Singleton representing the empty cons list.

    Uses Enum to guarantee exactly one instance exists.
    """

    INSTANCE = auto()

    def __iter__(self) -> Iterator[Never]:
        return iter(())


@final
@dataclass(kw_only=True, slots=True, frozen=True, eq=False, repr=False)
class ICons(IList[T]):
    """Non-empty cons list node.

    ``==``, ``hash`` and ``repr`` walk the list in a loop, so they do not
    recurse on long lists the way dataclass-generated methods would.
    """

    head: Final[T]
    tail: Final[IList[T]]

    def __iter__(self) -> Iterator[T]:
        current: IList[T] = self
        while isinstance(current, ICons):
            yield current.head
            current = current.tail

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IList):
            return NotImplemented
        return ilist_eq(eq.universal)(self, other)

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"IList.from_iterable({self.to_list()!r})"


def ilist_eq(element: eq.Eq[T]) -> eq.Eq[IList[T]]:
    """
    Structural equality of cons lists in constant stack depth.

    Stops at the first pair of unequal heads. Lists of different lengths are
    unequal because one reaches :class:`INil` while the other is still an
    :class:`ICons`.
    """

    def eqv(x: IList[T], y: IList[T]) -> bool:
        while True:
            match x, y:
                case ICons(head=head_x, tail=tail_x), ICons(head=head_y, tail=tail_y):
                    if not element(head_x, head_y):
                        return False
                    x, y = tail_x, tail_y
                case INil(), INil():
                    return True
                case _:
                    return False

    return eqv


def ilist_gen(element: gen.Gen[T]) -> gen.Gen[IList[T]]:
    """A cons list of at most ``size`` elements."""
    return gen.lists(element).map(IList.from_iterable)


def ilist_cogen(element: cogen.Cogen[T]) -> cogen.Cogen[IList[T]]:
    return cogen.sequence(element).contramap(IList.to_list)

