"""
Semantic version predicates.

Both operands are parsed with ``istest.semver``. If either fails to parse
every verb is False, including ``ne``.
"""

from __future__ import annotations

import logging

from ..domain import Family, Operand, OperandKind
from ..registry import predicate
from ..semver import compare_versions, try_parse_version
from .numbers import RELATIONS

logger = logging.getLogger(__name__)


V1 = Operand("v1", OperandKind.VERSION, "First version")
V2 = Operand("v2", OperandKind.VERSION, "Second version")


def compare_version_strings(v1: str, v2: str, verb: str) -> bool:
    """Parse both versions and apply the relational verb to their precedence."""
    left = try_parse_version(v1)
    right = try_parse_version(v2)
    if left is None or right is None:
        logger.debug("not a semantic version: %r", v1 if left is None else v2)
        return False
    compare, _ = RELATIONS[verb]
    return compare(compare_versions(left, right), 0)


def _register() -> None:
    for verb, (_, description) in RELATIONS.items():
        def check(v1: str, v2: str, _verb=verb) -> bool:
            return compare_version_strings(v1, v2, _verb)

        check.__name__ = f"semver_{verb}"
        predicate(
            Family.SEMVER, verb, V1, V2,
            help=f"Semantic version compare: {description}.",
        )(check)


_register()
