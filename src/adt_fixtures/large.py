"""
Wide records with twenty or more fields.

Scala ``Set`` fields are stored as :class:`frozenset` and ``Map`` fields as
:class:`~collections.abc.Mapping`. Records holding a mapping compare by content
but are not hashable.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final, final


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class Large:
    bar1: Final[str]
    bar2: Final[int]
    bar3: Final[bool]
    bar4: Final[Large2]
    bar5: Final[tuple[str, ...]]
    bar6: Final[frozenset[bool]]
    bar7: Final[float]
    bar8: Final[int]
    bar9: Final[str]
    bar10: Final[float]
    bar11: Final[str]
    bar12: Final[Mapping[str, int]]
    bar13: Final[bool]
    bar14: Final[str | None]
    bar15: Final[tuple[str, ...]]
    bar16: Final[frozenset[bool]]
    bar17: Final[float]
    bar18: Final[int]
    bar19: Final[str]
    bar20: Final[float]


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class Large2:
    bar1: Final[str]
    bar2: Final[int]
    bar3: Final[bool]
    bar4: Final[str | None]
    bar5: Final[tuple[str, ...]]
    bar6: Final[frozenset[bool]]
    bar7: Final[float]
    bar8: Final[int]
    bar9: Final[str]
    bar10: Final[float]
    bar11: Final[str]
    bar12: Final[Mapping[str, int]]
    bar13: Final[bool]
    bar14: Final[str | None]
    bar15: Final[tuple[str, ...]]
    bar16: Final[frozenset[bool]]
    bar17: Final[float]
    bar18: Final[int]
    bar19: Final[str]
    bar20: Final[float]
    bar21: Final[str]


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class Large3:
    bar1: Final[str]
    bar2: Final[int]
    bar3: Final[bool]
    bar4: Final[str | None]
    bar5: Final[tuple[str, ...]]
    bar6: Final[frozenset[bool]]
    bar7: Final[float]
    bar8: Final[int]
    bar9: Final[str]
    bar10: Final[float]
    bar11: Final[str]
    bar12: Final[Mapping[str, int]]
    bar13: Final[bool]
    bar14: Final[str | None]
    bar15: Final[tuple[str, ...]]
    bar16: Final[frozenset[bool]]
    bar17: Final[float]
    bar18: Final[int]
    bar19: Final[str]
    bar20: Final[float]
    bar21: Final[str]


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class Large4:
    bar1: Final[str]
    bar2: Final[int]
    bar3: Final[bool]
    bar4: Final[Large5]
    bar5: Final[tuple[str, ...]]
    bar6: Final[tuple[bool, ...]]
    bar7: Final[float]
    bar8: Final[int]
    bar9: Final[str]
    bar10: Final[float]
    bar11: Final[str]
    bar12: Final[str]
    bar13: Final[bool]
    bar14: Final[str | None]
    bar15: Final[tuple[str, ...]]
    bar16: Final[tuple[bool, ...]]
    bar17: Final[float]
    bar18: Final[int]
    bar19: Final[str]
    bar20: Final[float]


@final
@dataclass(kw_only=True, slots=True, frozen=True)
class Large5:
    bar1: Final[str]
    bar2: Final[int]
    bar3: Final[bool]
    bar4: Final[str | None]
    bar5: Final[tuple[str, ...]]
    bar6: Final[tuple[bool, ...]]
    bar7: Final[float]
    bar8: Final[int]
    bar9: Final[str]
    bar10: Final[float]
    bar11: Final[str]
    bar12: Final[int]
    bar13: Final[bool]
    bar14: Final[str | None]
    bar15: Final[tuple[str, ...]]
    bar16: Final[tuple[bool, ...]]
    bar17: Final[float]
    bar18: Final[int]
    bar19: Final[str]
    bar20: Final[float]
    bar21: Final[str]
