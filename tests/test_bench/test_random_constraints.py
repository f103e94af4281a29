"""
Tests for the random constraint generator.
"""

import pytest

from lp_canon.model.terms import Constraint
from lp_canon.bench.random_constraints import random_constraints


class TestRandomConstraints:
    """Tests for random_constraints."""

    def test_count(self):
        assert len(random_constraints(10, 37)) == 37

    def test_zero_constraints(self):
        assert random_constraints(0, 0) == []

    def test_both_sides_nonempty(self):
        for c in random_constraints(10, 200, seed=1):
            assert isinstance(c, Constraint)
            assert len(c.left) >= 1
            assert len(c.right) >= 1

    def test_names_from_pool(self):
        pool = {f"v{k}" for k in range(15)}
        for c in random_constraints(15, 200, seed=2):
            for t in c.iter_terms():
                assert t.variable in pool

    def test_values_in_unit_interval(self):
        for c in random_constraints(15, 200, seed=3):
            for t in c.iter_terms():
                assert isinstance(t.value, float)
                assert 0.0 <= t.value < 1.0

    def test_same_seed_same_batch(self):
        assert random_constraints(100, 50, seed=42) == \
            random_constraints(100, 50, seed=42)

    def test_different_seed_different_batch(self):
        assert random_constraints(100, 50, seed=1) != \
            random_constraints(100, 50, seed=2)

    def test_sparse(self):
        """Most sides have one or two terms."""
        cons = random_constraints(1000, 500, seed=4)
        sizes = [len(c.left) for c in cons] + [len(c.right) for c in cons]
        assert sum(s <= 2 for s in sizes) > 0.7 * len(sizes)

    def test_negative_counts(self):
        with pytest.raises(ValueError):
            random_constraints(-1, 10)
        with pytest.raises(ValueError):
            random_constraints(10, -1)

    def test_no_variables(self):
        with pytest.raises(ValueError):
            random_constraints(0, 5)
