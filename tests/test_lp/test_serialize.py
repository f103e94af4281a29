"""
Tests for coefficient formatting and term-list serialization.
"""

import pytest
import numpy as np

from lp_canon.errors import LengthMismatchError
from lp_canon.lp.serialize import (
    format_coefficient,
    format_constraint_line,
    serialize_terms,
)


class TestFormatCoefficient:
    """Test 16-significant-digit general formatting."""

    def test_integers_have_no_decimal_point(self):
        assert format_coefficient(2.0) == "2"
        assert format_coefficient(-3.0) == "-3"
        assert format_coefficient(0.0) == "0"

    def test_fractions(self):
        assert format_coefficient(0.5) == "0.5"
        assert format_coefficient(-1.25) == "-1.25"

    def test_sixteen_digits(self):
        assert format_coefficient(1.0 / 3.0) == "0.3333333333333333"

    def test_rounding_noise_dropped(self):
        """16 digits hide the last-bit error of 0.1 + 0.2."""
        assert format_coefficient(0.1 + 0.2) == "0.3"

    def test_exponent_notation(self):
        assert format_coefficient(1e-5) == "1e-05"
        assert format_coefficient(1e20) == "1e+20"
        assert format_coefficient(1e16) == "1e+16"
        assert format_coefficient(1e15) == "1000000000000000"

    def test_numpy_scalar(self):
        assert format_coefficient(np.float64(2.5)) == "2.5"

    def test_non_finite(self):
        """Infinities and NaN use the solver-input spellings."""
        assert format_coefficient(float("inf")) == "+Inf"
        assert format_coefficient(float("-inf")) == "-Inf"
        assert format_coefficient(float("nan")) == "NaN"
        assert format_coefficient(np.float64(np.inf)) == "+Inf"


class TestSerializeTerms:
    """Test serialize_terms."""

    def test_single_term(self):
        assert serialize_terms(np.array([0.0, 2.0]), ["a", "b"]) == "2 b"

    def test_index_order_and_separator(self):
        w = np.array([1.0, 0.0, -0.5, 0.0, 3.0])
        names = ["v0", "v1", "v2", "v3", "v4"]
        assert serialize_terms(w, names) == "1 v0 + -0.5 v2 + 3 v4"

    def test_all_zero_is_empty(self):
        assert serialize_terms(np.zeros(4), ["a", "b", "c", "d"]) == ""

    def test_empty_vector(self):
        assert serialize_terms(np.zeros(0), []) == ""

    def test_negative_zero_skipped(self):
        assert serialize_terms(np.array([-0.0, 1.0]), ["a", "b"]) == "1 b"

    def test_tiny_values_kept(self):
        """Zero detection is exact, with no tolerance."""
        assert serialize_terms(np.array([1e-300]), ["a"]) == "1e-300 a"

    def test_non_finite_terms_kept(self):
        w = np.array([np.inf, np.nan, -np.inf])
        assert serialize_terms(w, ["a", "b", "c"]) == "+Inf a + NaN b + -Inf c"

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            serialize_terms(np.zeros(2), ["a"])


class TestFormatConstraintLine:
    """Test full line rendering."""

    def test_line(self):
        line = format_constraint_line(np.array([0.0, 2.0]), ["a", "b"])
        assert line == "2 b <= 0\n"

    def test_empty_term_list(self):
        assert format_constraint_line(np.zeros(1), ["a"]) == " <= 0\n"

    def test_explicit_constant(self):
        line = format_constraint_line(np.array([1.0]), ["a"], constant=4.5)
        assert line == "1 a <= 4.5\n"
