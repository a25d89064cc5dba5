"""
Reference fixtures for checking derived equality, generators and cogens against
hand-written ones.

Recursive types:
    - :class:`~adt_fixtures.ilist.IList` (:class:`~adt_fixtures.ilist.ICons`, :class:`~adt_fixtures.ilist.INil`)
    - :class:`~adt_fixtures.snoc.Snoc` (:class:`~adt_fixtures.snoc.SCons`, :class:`~adt_fixtures.snoc.SNil`)
    - :class:`~adt_fixtures.tree.Tree` (:class:`~adt_fixtures.tree.Leaf`, :class:`~adt_fixtures.tree.Node`)

Every generic oracle or generator takes the element-level one as an explicit
argument, e.g. ``ilist_eq(box_eq(eq.universal))`` or ``tree_gen(gen.integers)``.
"""

from adt_fixtures import cogen as cogen
from adt_fixtures import eq as eq
from adt_fixtures import gen as gen
from adt_fixtures.config import GenerationParameters as GenerationParameters
from adt_fixtures.ilist import ICons as ICons
from adt_fixtures.ilist import IList as IList
from adt_fixtures.ilist import INil as INil
from adt_fixtures.ilist import ilist_cogen as ilist_cogen
from adt_fixtures.ilist import ilist_eq as ilist_eq
from adt_fixtures.ilist import ilist_gen as ilist_gen
from adt_fixtures.records import Box as Box
from adt_fixtures.records import Recursive as Recursive
from adt_fixtures.records import box_eq as box_eq
from adt_fixtures.records import box_gen as box_gen
from adt_fixtures.records import recursive_eq as recursive_eq
from adt_fixtures.records import recursive_gen as recursive_gen
from adt_fixtures.snoc import SCons as SCons
from adt_fixtures.snoc import SNil as SNil
from adt_fixtures.snoc import Snoc as Snoc
from adt_fixtures.snoc import snoc_eq as snoc_eq
from adt_fixtures.snoc import snoc_gen as snoc_gen
from adt_fixtures.tree import Leaf as Leaf
from adt_fixtures.tree import Node as Node
from adt_fixtures.tree import Tree as Tree
from adt_fixtures.tree import tree_eq as tree_eq
from adt_fixtures.tree import tree_gen as tree_gen
