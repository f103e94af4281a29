"""
Unit tests for the Term and Constraint value types.
"""

import dataclasses
import pytest

from lp_canon.model.terms import Term, Constraint


class TestTerm:
    """Tests for Term."""

    def test_fields(self):
        t = Term("x", 1.5)
        assert t.variable == "x"
        assert t.value == 1.5

    def test_immutable(self):
        """Terms cannot be modified after construction."""
        t = Term("x", 1.5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            t.value = 2.0

    def test_equality(self):
        assert Term("x", 1.0) == Term("x", 1.0)
        assert Term("x", 1.0) != Term("y", 1.0)


class TestConstraint:
    """Tests for Constraint."""

    def test_lists_stored_as_tuples(self):
        c = Constraint(left=[Term("a", 1.0)], right=[Term("b", 2.0)])
        assert isinstance(c.left, tuple)
        assert isinstance(c.right, tuple)

    def test_default_sides_empty(self):
        c = Constraint()
        assert c.left == ()
        assert c.right == ()

    def test_immutable(self):
        c = Constraint(left=[Term("a", 1.0)])
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.left = ()

    def test_from_pairs(self):
        c = Constraint.from_pairs([("a", 1.0), ("b", 2.0)], [("a", 3.0)])
        assert c.left == (Term("a", 1.0), Term("b", 2.0))
        assert c.right == (Term("a", 3.0),)

    def test_from_pairs_matches_constructor(self):
        c1 = Constraint.from_pairs([("a", 1.0)], [("b", -1.0)])
        c2 = Constraint(left=[Term("a", 1.0)], right=[Term("b", -1.0)])
        assert c1 == c2

    def test_iter_terms_order(self):
        """Left terms come before right terms, each in given order."""
        c = Constraint.from_pairs([("a", 1.0), ("b", 2.0)], [("c", 3.0)])
        assert [t.variable for t in c.iter_terms()] == ["a", "b", "c"]
