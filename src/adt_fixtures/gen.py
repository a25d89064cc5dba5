"""
Size-bounded random generators.

A :class:`Gen` wraps a function of a caller-supplied :class:`random.Random` and a
non-negative size hint. Generators never own a random source; two independent
sources may be used concurrently, a shared one is the caller's to serialize.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from random import Random
from typing import Final, Generic, TypeVar, final


T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
U = TypeVar("U")

INT_MIN: Final = -(2**31)
INT_MAX: Final = 2**31 - 1
LONG_MIN: Final = -(2**63)
LONG_MAX: Final = 2**63 - 1


@final
@dataclass(frozen=True, slots=True)
class Gen(Generic[T_co]):
    """
    A random generator driven by an explicit random source and size hint.

    Example::

        >>> from random import Random
        >>> pairs = integers.flat_map(lambda i: constant((i, -i)))
        >>> i, j = pairs(Random(0), 10)
        >>> i == -j
        True
    """

    run: Final[Callable[[Random, int], T_co]]

    def __call__(self, random: Random, size: int) -> T_co:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        return self.run(random, size)

    def map(self, function: Callable[[T_co], U]) -> Gen[U]:
        return Gen(lambda random, size: function(self(random, size)))

    def flat_map(self, function: Callable[[T_co], Gen[U]]) -> Gen[U]:
        return Gen(lambda random, size: function(self(random, size))(random, size))


def constant(value: T) -> Gen[T]:
    return Gen(lambda random, size: value)


def choose(low: int, high: int) -> Gen[int]:
    """Uniform integer in the closed range ``[low, high]``."""
    if low > high:
        raise ValueError(f"empty range [{low}, {high}]")
    return Gen(lambda random, size: random.randint(low, high))


def sized(function: Callable[[int], Gen[T]]) -> Gen[T]:
    """Build a generator from the ambient size hint."""
    return Gen(lambda random, size: function(size)(random, size))


def resize(size: int, gen: Gen[T]) -> Gen[T]:
    """Run ``gen`` with a fixed size hint, ignoring the ambient one."""
    return Gen(lambda random, _: gen(random, size))


def one_of(*gens: Gen[T]) -> Gen[T]:
    """Pick one of ``gens`` uniformly and run it."""
    if not gens:
        raise ValueError("one_of requires at least one generator")
    return Gen(lambda random, size: gens[random.randint(0, len(gens) - 1)](random, size))


def frequency(*weighted: tuple[int, Gen[T]]) -> Gen[T]:
    """Pick a generator with probability proportional to its weight."""
    choices = tuple((weight, gen) for weight, gen in weighted if weight > 0)
    if not choices:
        raise ValueError("frequency requires at least one positive weight")
    total = sum(weight for weight, _ in choices)

    def run(random: Random, size: int) -> T:
        remaining = random.randint(1, total)
        for weight, gen in choices:
            if remaining <= weight:
                return gen(random, size)
            remaining -= weight
        raise AssertionError("unreachable: weights are exhausted")

    return Gen(run)


integers: Final[Gen[int]] = choose(INT_MIN, INT_MAX)
"""Signed 32-bit integers."""

longs: Final[Gen[int]] = choose(LONG_MIN, LONG_MAX)
"""Signed 64-bit integers."""

booleans: Final[Gen[bool]] = Gen(lambda random, size: random.randint(0, 1) == 1)

characters: Final[Gen[str]] = choose(0x20, 0x7E).map(chr)
"""Printable ASCII characters."""


def lists(element: Gen[T]) -> Gen[list[T]]:
    """A list whose length is uniform in ``[0, size]``."""

    def run(random: Random, size: int) -> list[T]:
        length = random.randint(0, size)
        return [element(random, size) for _ in range(length)]

    return Gen(run)


text: Final[Gen[str]] = lists(characters).map("".join)


def optional(element: Gen[T]) -> Gen[T | None]:
    """
    ``None`` or a value of ``element``, with a size-decaying chance of a value.

    At size ``0`` the result is always ``None``. Otherwise ``None`` is chosen with
    probability ``1 / (size + 1)`` and the element is generated at ``size // 2``,
    so nesting ``optional`` inside its own element (as a self-referential record
    does) produces at most ``size.bit_length() + 1`` levels.
    """

    def run(random: Random, size: int) -> T | None:
        if size == 0 or random.randint(0, size) == 0:
            return None
        return element(random, size // 2)

    return Gen(run)
