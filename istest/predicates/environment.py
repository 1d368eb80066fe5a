"""
Environment variable predicates.

A variable that is defined but empty counts as unset for ``set``.
"""

from __future__ import annotations

import os

from ..domain import Family, Operand, OperandKind
from ..registry import predicate


NAME = Operand("name", OperandKind.ENV_NAME, "Environment variable name")


@predicate(Family.ENV, "set", NAME,
           help="Check if environment variable is set and non-empty.")
def is_set(name: str) -> bool:
    return bool(os.environ.get(name))


@predicate(Family.ENV, "equal-to", NAME,
           Operand("value", OperandKind.TEXT, "Expected value"),
           help="Environment variable equals value.")
def equals(name: str, value: str) -> bool:
    return os.environ.get(name) == value
