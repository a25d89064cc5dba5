"""
Cogens: deterministic perturbation of a random seed by a value.

A cogen is what lets a random *function* depend on its argument: the argument
perturbs the seed from which the result is generated, so equal arguments give
equal results (see :func:`function_of`).

Seeds are unsigned 64-bit integers. Mixing uses the SplitMix64 finalizer rather
than :func:`hash`, whose value for strings changes from one process to the next.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from random import Random
from typing import Final, Generic, TypeVar, final

from adt_fixtures import gen


T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)
U = TypeVar("U")

_MASK: Final = (1 << 64) - 1


def _mix(seed: int, value: int) -> int:
    z = (seed * 0x9E3779B97F4A7C15 + value * 0xD1B54A32D192ED03 + 0x9E3779B97F4A7C15) & _MASK
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK
    return z ^ (z >> 31)


def _perturb_int(seed: int, value: int) -> int:
    # 64 bits at a time; stops once only sign bits remain
    seed = _mix(seed, value & _MASK)
    value >>= 64
    while value not in (0, -1):
        seed = _mix(seed, value & _MASK)
        value >>= 64
    return seed


@final
@dataclass(frozen=True, slots=True)
class Cogen(Generic[T_contra]):
    perturb_function: Final[Callable[[int, T_contra], int]]

    def perturb(self, seed: int, value: T_contra) -> int:
        return self.perturb_function(seed & _MASK, value)

    def contramap(self, project: Callable[[U], T_contra]) -> Cogen[U]:
        """A cogen for ``U`` that perturbs by the projection of each value."""
        return Cogen(lambda seed, value: self.perturb(seed, project(value)))


integers: Final[Cogen[int]] = Cogen(_perturb_int)

booleans: Final[Cogen[bool]] = integers.contramap(int)

text: Final[Cogen[str]] = integers.contramap(
    # The leading 0x01 byte keeps trailing NUL characters significant; lone
    # surrogates are valid in a str and must encode too.
    lambda value: int.from_bytes(b"\x01" + value.encode("utf-8", "surrogatepass"), "big")
)


def sequence(element: Cogen[T]) -> Cogen[Sequence[T]]:
    """Perturb by the length and then by each element in order."""

    def perturb(seed: int, values: Sequence[T]) -> int:
        seed = _perturb_int(seed, len(values))
        for value in values:
            seed = element.perturb(seed, value)
        return seed

    return Cogen(perturb)


def optional(element: Cogen[T]) -> Cogen[T | None]:
    def perturb(seed: int, value: T | None) -> int:
        if value is None:
            return _mix(seed, 0)
        return element.perturb(_mix(seed, 1), value)

    return Cogen(perturb)


def function_of(argument: Cogen[T], result: gen.Gen[U]) -> gen.Gen[Callable[[T], U]]:
    """
    Random pure functions from ``T`` to ``U``.

    Each generated function draws its result from a fresh :class:`~random.Random`
    seeded by perturbing one fixed seed with the argument, at the size the function
    was generated at.
    """

    def run(random: Random, size: int) -> Callable[[T], U]:
        seed = random.getrandbits(64)

        def function(value: T) -> U:
            return result(Random(argument.perturb(seed, value)), size)

        return function

    return gen.Gen(run)
