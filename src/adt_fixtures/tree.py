from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import Final, Generic, TypeVar, assert_never, final

from adt_fixtures import eq, gen


T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Tree(Generic[T_co]):
    """Base class of binary trees: either :class:`Leaf` or :class:`Node`.

    A tree always has at least one leaf.
    """

    __slots__ = ()


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class Leaf(Tree[T]):
    value: Final[T]


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class Node(Tree[T]):
    left: Final[Tree[T]]
    right: Final[Tree[T]]


def depth(tree: Tree[object]) -> int:
    """The number of edges on the longest path from the root to a leaf."""
    match tree:
        case Leaf():
            return 0
        case Node(left=left, right=right):
            return 1 + max(depth(left), depth(right))
        case _:
            assert_never(tree)


def tree_eq(element: eq.Eq[T]) -> eq.Eq[Tree[T]]:
    """
    Structural equality of trees.

    Plain recursion: tree depth is bounded by the size hint of :func:`tree_gen`.
    Stops at the first ``Leaf``/``Node`` mismatch or the first unequal leaf.
    """

    def eqv(x: Tree[T], y: Tree[T]) -> bool:
        match x, y:
            case Leaf(value=value_x), Leaf(value=value_y):
                return element(value_x, value_y)
            case Node(left=left_x, right=right_x), Node(left=left_y, right=right_y):
                return eqv(left_x, left_y) and eqv(right_x, right_y)
            case _:
                return False

    return eqv


def tree_gen(element: gen.Gen[T]) -> gen.Gen[Tree[T]]:
    """
    A tree whose depth is at most the size hint.

    With a remaining depth budget ``d``, a budget of ``0`` always yields a
    :class:`Leaf`; otherwise a :class:`Leaf` or a :class:`Node` is chosen with
    equal probability, and each child of a :class:`Node` gets its own budget drawn
    uniformly from ``[0, d - 1]``. Leaf values are generated at the ambient size.
    """
    leaf: gen.Gen[Tree[T]] = element.map(lambda value: Leaf(value=value))

    def tree(max_depth: int) -> gen.Gen[Tree[T]]:
        if max_depth == 0:
            return leaf
        return gen.one_of(leaf, node(max_depth))

    def node(max_depth: int) -> gen.Gen[Tree[T]]:
        def run(random: Random, size: int) -> Tree[T]:
            depth_left = random.randint(0, max_depth - 1)
            depth_right = random.randint(0, max_depth - 1)
            return Node(
                left=tree(depth_left)(random, size),
                right=tree(depth_right)(random, size),
            )

        return gen.Gen(run)

    return gen.sized(tree)


class IntTree:
    """A monomorphic binary tree of ``int`` leaves."""

    __slots__ = ()


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class IntLeaf(IntTree):
    t: Final[int]


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class IntNode(IntTree):
    l: Final[IntTree]
    r: Final[IntTree]
