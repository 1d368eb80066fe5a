"""
Normalization helpers shared by every predicate family.

All comparisons that need them go through this module so that the same
input is never normalized two different ways:

    expand_tilde  : leading ``~`` to the home directory, shell-style
    fold_case     : Unicode case folding for case-insensitive compares
    parse_int     : strict decimal integer literal with range check
    parse_float   : strict floating-point literal
"""

from __future__ import annotations

import os
import re
from typing import Optional


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
UINT64_MAX = 2 ** 64 - 1
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

# No whitespace, no underscores, ASCII digits only
_INT_LITERAL = re.compile(r"[+-]?[0-9]+", re.ASCII)

_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:"
    r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|inf|infinity|nan"
    r")",
    re.ASCII | re.IGNORECASE,
)


# =============================================================================
# PATHS
# =============================================================================

def expand_tilde(path: str) -> str:
    """
    Expand a leading ``~`` (alone or followed by a separator).

    ``~user`` forms are left alone. If no home directory can be resolved
    the input is returned unchanged, like shell tilde expansion.
    """
    separators = tuple("~" + sep for sep in (os.sep, os.altsep) if sep)
    if path == "~" or path.startswith(separators):
        return os.path.expanduser(path)
    return path


# =============================================================================
# CASE FOLDING
# =============================================================================

def fold_case(value: str) -> str:
    """
    Fold a string for case-insensitive comparison.

    Uses full Unicode case folding (``"ß"`` folds to ``"ss"``), not
    ASCII-only lowering.
    """
    return value.casefold()


def equal_ci(left: str, right: str) -> bool:
    """Case-insensitive equality under Unicode case folding."""
    return fold_case(left) == fold_case(right)


# =============================================================================
# NUMERIC LITERALS
# =============================================================================

def parse_int(
    text: str,
    minimum: int = INT64_MIN,
    maximum: int = INT64_MAX,
) -> Optional[int]:
    """
    Parse a strict base-10 integer literal.

    Returns None for anything that is not ``[+-]?[0-9]+`` or that falls
    outside ``[minimum, maximum]``.
    """
    if not _INT_LITERAL.fullmatch(text):
        return None
    value = int(text)
    if value < minimum or value > maximum:
        return None
    return value


def parse_float(text: str) -> Optional[float]:
    """
    Parse a strict floating-point literal.

    Accepts decimal and exponent notation plus ``inf``, ``infinity`` and
    ``nan`` (any case, optional sign). Rejects whitespace, underscores and
    hexadecimal forms that ``float()`` would otherwise tolerate.
    """
    if not _FLOAT_LITERAL.fullmatch(text):
        return None
    return float(text)
