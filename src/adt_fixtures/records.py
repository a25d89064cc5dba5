"""
Non-recursive and self-referential record fixtures, with their reference
oracles, generators and cogens.

Scala ``List`` fields are stored as tuples.
"""

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import Final, Generic, TypeVar, final

from adt_fixtures import cogen, eq, gen


T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class Box(Generic[T_co]):
    content: Final[T_co]


def box_eq(element: eq.Eq[T]) -> eq.Eq[Box[T]]:
    return eq.by(lambda box: box.content, element)


def box_gen(element: gen.Gen[T]) -> gen.Gen[Box[T]]:
    return element.map(lambda content: Box(content=content))


@final
@dataclass(kw_only=True, slots=True, frozen=True, eq=False, repr=False)
class Recursive:
    """A record optionally linked to another one of its own type.

    ``==``, ``hash`` and ``repr`` walk the ``next`` chain in a loop, so long
    hand-built chains do not hit the recursion limit.
    """

    i: Final[int]
    next: Final[Recursive | None]

    def _values(self) -> tuple[int, ...]:
        values: list[int] = []
        current: Recursive | None = self
        while current is not None:
            values.append(current.i)
            current = current.next
        return tuple(values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Recursive):
            return NotImplemented
        return recursive_eq(self, other)

    def __hash__(self) -> int:
        return hash(self._values())

    def __repr__(self) -> str:
        values = self._values()
        prefix = "".join(f"Recursive(i={i!r}, next=" for i in values)
        return prefix + "None" + ")" * len(values)


def recursive_eq(x: Recursive, y: Recursive) -> bool:
    """Field-wise equality, walking the ``next`` chain in a loop."""
    current_x: Recursive | None = x
    current_y: Recursive | None = y
    while current_x is not None and current_y is not None:
        if current_x.i != current_y.i:
            return False
        current_x, current_y = current_x.next, current_y.next
    return current_x is None and current_y is None


def _recursive(random: Random, size: int) -> Recursive:
    return Recursive(i=gen.integers(random, size), next=_next_recursive(random, size))


recursive_gen: Final[gen.Gen[Recursive]] = gen.Gen(_recursive)
"""
Chains of :class:`Recursive`; a chain generated at size ``s`` has at most
``s.bit_length() + 1`` links (see :func:`adt_fixtures.gen.optional`).
"""

_next_recursive: Final = gen.optional(recursive_gen)


def chain_length(value: Recursive) -> int:
    length = 1
    while value.next is not None:
        value = value.next
        length += 1
    return length


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class Interleaved(Generic[T]):
    """Fixed fields interleaved with a generic field and a generic list field."""

    i: Final[int]
    t: Final[T]
    l: Final[int]
    tt: Final[tuple[T, ...]]
    s: Final[str]


def interleaved_eq(element: eq.Eq[T]) -> eq.Eq[Interleaved[T]]:
    return eq.by(
        lambda value: (value.i, value.t, value.l, value.tt, value.s),
        eq.tuples(eq.universal, element, eq.universal, eq.sequence(element), eq.universal),
    )


def interleaved_gen(element: gen.Gen[T]) -> gen.Gen[Interleaved[T]]:
    elements = gen.lists(element)

    def run(random: Random, size: int) -> Interleaved[T]:
        return Interleaved(
            i=gen.integers(random, size),
            t=element(random, size),
            l=gen.longs(random, size),
            tt=tuple(elements(random, size)),
            s=gen.text(random, size),
        )

    return gen.Gen(run)


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class Foo:
    i: Final[int]
    b: Final[str | None]


foo_eq: Final[eq.Eq[Foo]] = eq.universal

foo_gen: Final[gen.Gen[Foo]] = gen.Gen(
    lambda random, size: Foo(
        i=gen.integers(random, size), b=gen.optional(gen.text)(random, size)
    )
)

foo_cogen: Final[cogen.Cogen[Foo]] = cogen.integers.contramap(lambda foo: foo.i)
"""Perturbs by ``i`` only; ``b`` does not affect the seed."""


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class Inner:
    i: Final[int]


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class Outer:
    inner: Final[Inner]


inner_gen: Final[gen.Gen[Inner]] = gen.integers.map(lambda i: Inner(i=i))

outer_gen: Final[gen.Gen[Outer]] = inner_gen.map(lambda inner: Outer(inner=inner))

inner_cogen: Final[cogen.Cogen[Inner]] = cogen.integers.contramap(lambda inner: inner.i)

outer_cogen: Final[cogen.Cogen[Outer]] = inner_cogen.contramap(lambda outer: outer.inner)


class GenericAdt(Generic[T_co]):
    """A sum type with a single variant, :class:`GenericAdtCase`."""

    __slots__ = ()


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class GenericAdtCase(GenericAdt[T]):
    value: Final[T | None]


def generic_adt_eq(element: eq.Eq[T]) -> eq.Eq[GenericAdt[T]]:
    values_eq = eq.optional(element)

    def eqv(x: GenericAdt[T], y: GenericAdt[T]) -> bool:
        match x, y:
            case GenericAdtCase(value=value_x), GenericAdtCase(value=value_y):
                return values_eq(value_x, value_y)
            case _:
                raise TypeError(f"not a GenericAdt variant: {x!r}, {y!r}")

    return eqv


def generic_adt_gen(element: gen.Gen[T]) -> gen.Gen[GenericAdt[T]]:
    return gen.optional(element).map(lambda value: GenericAdtCase(value=value))


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class CaseClassWOption(Generic[T]):
    value: Final[T | None]


def case_class_w_option_eq(element: eq.Eq[T]) -> eq.Eq[CaseClassWOption[T]]:
    return eq.by(lambda record: record.value, eq.optional(element))


def case_class_w_option_gen(element: gen.Gen[T]) -> gen.Gen[CaseClassWOption[T]]:
    return gen.optional(element).map(lambda value: CaseClassWOption(value=value))


# =============================================================================
# Nested records
# =============================================================================


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class First:
    value: Final[str]


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class Second:
    value: Final[str]


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class Middle:
    first: Final[First]
    second: Final[Second | None]


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class Top:
    middle: Final[Middle]


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class Address:
    street: Final[str]
    city: Final[str]
    state: Final[str]


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class ContactInfo:
    phone_number: Final[str]
    address: Final[Address]


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class People:
    name: Final[str]
    contact_info: Final[ContactInfo]


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class ListFieldChild:
    c: Final[int]


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class ListField:
    a: Final[str]
    b: Final[tuple[ListFieldChild, ...]]
