"""
Variable indexing for a batch of constraints.

Every distinct variable name is assigned a dense integer position in
first-seen order: constraints in order, left terms before right terms,
terms in the order given. The positions index the dense coefficient
vectors built by lp_canon.lp.condense.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from .terms import Constraint


@dataclass(frozen=True)
class VariableTable:
    """
    Immutable name <-> position table.

    Attributes
    ----------
    names : tuple of str
        Variable names in position order, no duplicates.
    index : Mapping[str, int]
        Read-only mapping with index[names[i]] == i.
    """
    names: Tuple[str, ...]
    index: Mapping[str, int]

    def __len__(self) -> int:
        return len(self.names)

    def __contains__(self, name) -> bool:
        return name in self.index

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "VariableTable":
        """Build a table from explicit names; repeats keep their first position."""
        ordered: List[str] = []
        index: Dict[str, int] = {}
        for name in names:
            add_name_if_new(name, ordered, index)
        return cls(names=tuple(ordered), index=MappingProxyType(index))


def add_name_if_new(name: str, names: List[str], index: Dict[str, int]) -> int:
    """
    Return the position of `name`, appending it to `names` if unseen.

    Parameters
    ----------
    name : str
        Variable name.
    names : list of str
        Names seen so far, in position order. Mutated.
    index : dict
        Name -> position for every entry of `names`. Mutated.

    Returns
    -------
    int
        The 0-based position of `name`.
    """
    position = index.get(name)
    if position is None:
        position = len(names)
        names.append(name)
        index[name] = position
    return position


def index_variables(constraints: Sequence[Constraint]) -> VariableTable:
    """
    Assign each variable appearing in `constraints` a unique position.

    Parameters
    ----------
    constraints : sequence of Constraint
        The batch to index. May be empty.

    Returns
    -------
    VariableTable
        Table whose names are in first-occurrence order.

    Examples
    --------
    >>> from lp_canon.model.terms import Constraint
    >>> cons = [Constraint.from_pairs([("b", 1.0)], [("a", 2.0), ("b", 3.0)])]
    >>> index_variables(cons).names
    ('b', 'a')
    """
    names: List[str] = []
    index: Dict[str, int] = {}

    for con in constraints:
        for term in con.left:
            add_name_if_new(term.variable, names, index)
        for term in con.right:
            add_name_if_new(term.variable, names, index)

    return VariableTable(names=tuple(names), index=MappingProxyType(index))
