"""Tests for the equality combinators."""

from adt_fixtures import eq


def _same_parity(x: int, y: int) -> bool:
    return x % 2 == y % 2


class TestCombinators:
    def test_universal(self) -> None:
        assert eq.universal(1, 1)
        assert not eq.universal(1, "1")

    def test_by(self) -> None:
        assert eq.by(len)("ab", "cd")
        assert eq.by(abs, _same_parity)(-1, 3)

    def test_optional(self) -> None:
        optional = eq.optional(_same_parity)
        assert optional(None, None)
        assert optional(1, 3)
        assert not optional(None, 0)
        assert not optional(0, None)

    def test_sequence(self) -> None:
        sequence = eq.sequence(_same_parity)
        assert sequence([1, 2], (3, 4))
        assert not sequence([1, 2], [1])
        assert sequence([], [])

    def test_tuples(self) -> None:
        pairs = eq.tuples(_same_parity, eq.universal)
        assert pairs((1, "a"), (3, "a"))
        assert not pairs((1, "a"), (3, "b"))
        assert not pairs((1, "a"), (1, "a", None))
