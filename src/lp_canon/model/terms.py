"""
Symbolic linear constraints.

A constraint is two lists of (variable, coefficient) terms:

    w1*v1 + w2*v6 <= w3*v1 + w4*v7

is represented as Constraint(left=[Term("v1", w1), Term("v6", w2)],
right=[Term("v1", w3), Term("v7", w4)]).
"""

from dataclasses import dataclass, field
from typing import Iterable, Tuple


@dataclass(frozen=True)
class Term:
    """A single (variable, coefficient) pair."""
    variable: str
    value: float


@dataclass(frozen=True)
class Constraint:
    """
    The inequality sum(left) <= sum(right).

    Attributes
    ----------
    left : tuple of Term
        Terms on the left-hand side, in the order given.
    right : tuple of Term
        Terms on the right-hand side, in the order given.
    """
    left: Tuple[Term, ...] = field(default_factory=tuple)
    right: Tuple[Term, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Lists are accepted but stored as tuples so the constraint stays immutable
        object.__setattr__(self, "left", tuple(self.left))
        object.__setattr__(self, "right", tuple(self.right))

    @classmethod
    def from_pairs(
        cls,
        left: Iterable[Tuple[str, float]] = (),
        right: Iterable[Tuple[str, float]] = (),
    ) -> "Constraint":
        """
        Build a constraint from (name, value) pairs.

        Examples
        --------
        >>> c = Constraint.from_pairs([("a", 1.0), ("b", 2.0)], [("a", 1.0)])
        >>> c.left[1]
        Term(variable='b', value=2.0)
        """
        return cls(
            left=tuple(Term(name, value) for name, value in left),
            right=tuple(Term(name, value) for name, value in right),
        )

    def iter_terms(self):
        """Yield left terms, then right terms, in order."""
        yield from self.left
        yield from self.right
