"""
Tests for the int and float predicate families.

These tests verify:
1. Integer relations and inclusive ranges
2. Float equality is exact (no hidden tolerance)
3. approx-eq applies an explicit epsilon
4. Sign tests
"""

import math

import pytest

from istest.evaluator import check


# =============================================================================
# INTEGER
# =============================================================================

class TestIntegerPredicates:
    """Test the int family."""

    @pytest.mark.parametrize("verb,a,b,expected", [
        ("eq", 10, 10, True),
        ("eq", 10, 5, False),
        ("ne", 10, 5, True),
        ("ne", 10, 10, False),
        ("gt", 10, 5, True),
        ("gt", 5, 10, False),
        ("ge", 10, 10, True),
        ("ge", 9, 10, False),
        ("lt", 5, 10, True),
        ("lt", 10, 10, False),
        ("le", 10, 10, True),
        ("le", 11, 10, False),
    ])
    def test_relations(self, verb, a, b, expected):
        assert check("int", verb, a, b) is expected

    def test_negative_operands(self):
        assert check("int", "lt", -5, 3)
        assert check("int", "gt", -1, -2)

    def test_in_range_inclusive(self):
        assert check("int", "in-range", 7, 5, 10)
        assert check("int", "in-range", 5, 5, 10)
        assert check("int", "in-range", 10, 5, 10)
        assert not check("int", "in-range", 12, 5, 10)
        assert not check("int", "in-range", 4, 5, 10)

    def test_sign(self):
        assert check("int", "positive", 0.5)
        assert not check("int", "positive", 0.0)
        assert check("int", "negative", -3.0)
        assert not check("int", "negative", 0.0)
        assert not check("int", "positive", math.nan)


# =============================================================================
# FLOAT
# =============================================================================

class TestFloatPredicates:
    """Test the float family."""

    def test_equality_is_exact(self):
        assert check("float", "eq", 10.5, 10.5)
        assert not check("float", "eq", 0.1 + 0.2, 0.3)
        assert check("float", "ne", 0.1 + 0.2, 0.3)

    def test_approx_eq(self):
        assert check("float", "approx-eq", 0.1 + 0.2, 0.3, 1e-9)
        assert check("float", "approx-eq", 10.0, 10.0001, 0.001)
        assert not check("float", "approx-eq", 10.0, 10.1, 0.001)

    def test_relations(self):
        assert check("float", "gt", 10.5, 5.5)
        assert check("float", "ge", 5.5, 5.5)
        assert check("float", "lt", -1.5, 0.0)
        assert check("float", "le", 5.5, 5.5)
        assert not check("float", "lt", 5.5, 5.5)

    def test_in_range_takes_bounds_first(self):
        """float in-range is ``min max value``."""
        assert check("float", "in-range", 0.0, 1.0, 0.5)
        assert check("float", "in-range", 0.0, 1.0, 1.0)
        assert not check("float", "in-range", 0.0, 1.0, 1.5)

    def test_nan_is_never_equal(self):
        assert not check("float", "eq", math.nan, math.nan)
        assert check("float", "ne", math.nan, math.nan)
        assert not check("float", "gt", math.nan, 0.0)

    def test_infinities_compare_equal(self):
        assert check("float", "eq", math.inf, math.inf)
        assert check("float", "gt", math.inf, 1e308)
