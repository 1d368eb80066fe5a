"""
Integer and floating-point predicates.

Float equality is ordinary IEEE equality with no hidden tolerance:
``float eq 0.30000000000000004 0.3`` is False. Callers that need a
tolerance use ``float approx-eq`` with an explicit epsilon.
"""

from __future__ import annotations

import operator
from typing import Callable

from ..domain import Family, Operand, OperandKind
from ..registry import predicate


# Relational verbs shared by int and float
RELATIONS: dict[str, tuple[Callable[[object, object], bool], str]] = {
    "eq": (operator.eq, "equal"),
    "ne": (operator.ne, "not equal"),
    "gt": (operator.gt, "greater than"),
    "ge": (operator.ge, "greater than or equal"),
    "lt": (operator.lt, "less than"),
    "le": (operator.le, "less than or equal"),
}


def _register_relations(family: Family, kind: OperandKind, label: str) -> None:
    """Register eq/ne/gt/ge/lt/le for one numeric family."""
    num1 = Operand("num1", kind, "Left-hand number")
    num2 = Operand("num2", kind, "Right-hand number")

    for verb, (compare, description) in RELATIONS.items():
        def check(left, right, _compare=compare) -> bool:
            return _compare(left, right)

        check.__name__ = f"{family.value}_{verb}"
        predicate(
            family, verb, num1, num2,
            help=f"{label} comparison: {description} (-{verb}).",
        )(check)


# =============================================================================
# INTEGER
# =============================================================================

_register_relations(Family.INT, OperandKind.INT64, "Integer")


@predicate(Family.INT, "in-range",
           Operand("value", OperandKind.INT64, "Value to test"),
           Operand("min", OperandKind.INT64, "Inclusive lower bound"),
           Operand("max", OperandKind.INT64, "Inclusive upper bound"),
           help="Integer in inclusive range [min, max].")
def int_in_range(value: int, minimum: int, maximum: int) -> bool:
    return minimum <= value <= maximum


@predicate(Family.INT, "positive", Operand("n", OperandKind.FLOAT64, "Number to test"),
           help="Number is positive (> 0).")
def is_positive(n: float) -> bool:
    return n > 0.0


@predicate(Family.INT, "negative", Operand("n", OperandKind.FLOAT64, "Number to test"),
           help="Number is negative (< 0).")
def is_negative(n: float) -> bool:
    return n < 0.0


# =============================================================================
# FLOAT
# =============================================================================

@predicate(Family.FLOAT, "in-range",
           Operand("min", OperandKind.FLOAT64, "Inclusive lower bound"),
           Operand("max", OperandKind.FLOAT64, "Inclusive upper bound"),
           Operand("value", OperandKind.FLOAT64, "Value to test"),
           help="Float in inclusive range [min, max].")
def float_in_range(minimum: float, maximum: float, value: float) -> bool:
    return minimum <= value <= maximum


_register_relations(Family.FLOAT, OperandKind.FLOAT64, "Float")


@predicate(Family.FLOAT, "approx-eq",
           Operand("a", OperandKind.FLOAT64, "First number"),
           Operand("b", OperandKind.FLOAT64, "Second number"),
           Operand("epsilon", OperandKind.FLOAT64, "Maximum absolute difference"),
           help="Float approximately equal within epsilon.")
def approx_equal(a: float, b: float, epsilon: float) -> bool:
    return abs(a - b) <= epsilon
