"""
String predicates.

Case-insensitive variants come in two flavors:
    - equality/containment/prefix/suffix fold both operands with
      ``fold_case`` (full Unicode case folding)
    - ``matches-regex-ci`` compiles the pattern behind a leading ``(?i)``
      flag and leaves the input untouched

Lengths count code points, not bytes. A malformed regex is False.
"""

from __future__ import annotations

import ipaddress
import logging
import re
from typing import Optional

from ..domain import Family, Operand, OperandKind
from ..normalize import equal_ci, fold_case, parse_float, parse_int
from ..registry import predicate

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE | re.ASCII,
)

# Tokens a shell `test` would parse as operators rather than operands
QUOTE_SUSPICIOUS_TOKENS = frozenset({"-a", "-o", "!", "(", ")"})

QUOTE_ADVICE = "Value '{value}' may need quoting. Consider using \"$VAR\" in your shell."


STRING = Operand("string", OperandKind.TEXT, "String to check")
STRING1 = Operand("string1", OperandKind.TEXT, "First string")
STRING2 = Operand("string2", OperandKind.TEXT, "Second string")
REGEX = Operand("pattern", OperandKind.PATTERN, "Regular expression")
NEEDLE = Operand("needle", OperandKind.TEXT, "Substring to look for")
PREFIX = Operand("prefix", OperandKind.TEXT, "Expected prefix")
SUFFIX = Operand("suffix", OperandKind.TEXT, "Expected suffix")
LENGTH = Operand("n", OperandKind.COUNT, "Length in characters")


# =============================================================================
# EQUALITY AND EMPTINESS
# =============================================================================

@predicate(Family.STRING, "equal", STRING1, STRING2, help="String equals (=).")
def equal(string1: str, string2: str) -> bool:
    return string1 == string2


@predicate(Family.STRING, "not-equals", STRING1, STRING2,
           help="String not equals (!=).", aliases=("not-equal",))
def not_equal(string1: str, string2: str) -> bool:
    return string1 != string2


@predicate(Family.STRING, "empty", STRING, help="String is empty (-z).")
def is_empty(string: str) -> bool:
    return string == ""


@predicate(Family.STRING, "not-empty", STRING, help="String is not empty (-n).")
def is_not_empty(string: str) -> bool:
    return string != ""


@predicate(Family.STRING, "equal-ci", STRING1, STRING2,
           help="Case-insensitive string equality (Unicode case folding).")
def equal_case_insensitive(string1: str, string2: str) -> bool:
    return equal_ci(string1, string2)


# =============================================================================
# REGULAR EXPRESSIONS
# =============================================================================

def regex_search(string: str, pattern: str, ignore_case: bool = False) -> bool:
    """
    Unanchored search; a pattern that fails to compile never matches.

    The pattern must compile on its own before the ``(?i)`` prefix is
    added, so a pattern's own leading global flags (``(?s)abc``) still
    stack after it. Nesting too deep for the regex parser counts as a
    failed compile.
    """
    try:
        compiled = re.compile(pattern)
        if ignore_case:
            compiled = re.compile("(?i)" + pattern)
    except (re.error, OverflowError, RecursionError) as exc:
        logger.debug("invalid regular expression %r: %s", pattern, exc)
        return False
    return compiled.search(string) is not None


@predicate(Family.STRING, "matches-regex", STRING, REGEX,
           help="Regex full or partial match.")
def matches_regex(string: str, pattern: str) -> bool:
    return regex_search(string, pattern)


@predicate(Family.STRING, "matches-regex-ci", STRING, REGEX,
           help="Case-insensitive regex match.")
def matches_regex_ci(string: str, pattern: str) -> bool:
    return regex_search(string, pattern, ignore_case=True)


# =============================================================================
# CONTAINMENT
# =============================================================================

@predicate(Family.STRING, "contains", STRING, NEEDLE, help="String contains substring.")
def contains(string: str, needle: str) -> bool:
    return needle in string


@predicate(Family.STRING, "contains-ci", STRING, NEEDLE,
           help="String contains substring, case-insensitive.")
def contains_ci(string: str, needle: str) -> bool:
    return fold_case(needle) in fold_case(string)


@predicate(Family.STRING, "starts-with", STRING, PREFIX, help="String starts with prefix.")
def starts_with(string: str, prefix: str) -> bool:
    return string.startswith(prefix)


@predicate(Family.STRING, "starts-with-ci", STRING, PREFIX,
           help="String starts with prefix, case-insensitive.")
def starts_with_ci(string: str, prefix: str) -> bool:
    return fold_case(string).startswith(fold_case(prefix))


@predicate(Family.STRING, "ends-with", STRING, SUFFIX, help="String ends with suffix.")
def ends_with(string: str, suffix: str) -> bool:
    return string.endswith(suffix)


@predicate(Family.STRING, "ends-with-ci", STRING, SUFFIX,
           help="String ends with suffix, case-insensitive.")
def ends_with_ci(string: str, suffix: str) -> bool:
    return fold_case(string).endswith(fold_case(suffix))


# =============================================================================
# CLASSIFICATION
# =============================================================================

@predicate(Family.STRING, "integer", STRING,
           help="Is the provided string an integer (base 10).")
def is_integer(string: str) -> bool:
    return parse_int(string) is not None


@predicate(Family.STRING, "number", STRING,
           help="Is the provided string a number (integer or float).")
def is_number(string: str) -> bool:
    return parse_float(string) is not None


@predicate(Family.STRING, "uuid", STRING, help="String is UUID (8-4-4-4-12 hex).")
def is_uuid(string: str) -> bool:
    return UUID_PATTERN.fullmatch(string) is not None


@predicate(Family.STRING, "ipv4", STRING, help="String is IPv4 address.")
def is_ipv4(string: str) -> bool:
    try:
        ipaddress.IPv4Address(string)
    except ValueError:
        return False
    return True


@predicate(Family.STRING, "ascii", STRING, help="String is ASCII only.")
def is_ascii(string: str) -> bool:
    return string.isascii()


# =============================================================================
# LENGTH
# =============================================================================

@predicate(Family.STRING, "len-gt", STRING, LENGTH, help="String length compare (>).")
def len_gt(string: str, n: int) -> bool:
    return len(string) > n


@predicate(Family.STRING, "len-ge", STRING, LENGTH, help="String length compare (>=).")
def len_ge(string: str, n: int) -> bool:
    return len(string) >= n


@predicate(Family.STRING, "len-lt", STRING, LENGTH, help="String length compare (<).")
def len_lt(string: str, n: int) -> bool:
    return len(string) < n


@predicate(Family.STRING, "len-le", STRING, LENGTH, help="String length compare (<=).")
def len_le(string: str, n: int) -> bool:
    return len(string) <= n


@predicate(Family.STRING, "len-eq", STRING, LENGTH, help="String length compare (=).")
def len_eq(string: str, n: int) -> bool:
    return len(string) == n


# =============================================================================
# QUOTING ADVISORY
# =============================================================================

def looks_like_shell_operator(value: str) -> bool:
    """
    True when a shell ``test`` would likely misread the value.

    Empty strings vanish when unquoted; anything starting with ``-`` reads
    as a flag; the remaining tokens are ``test`` operators.
    """
    return (
        value == ""
        or value.startswith("-")
        or value in QUOTE_SUSPICIOUS_TOKENS
    )


def quote_advice(value: str) -> Optional[str]:
    """Diagnostic for a suspicious value, None otherwise."""
    if looks_like_shell_operator(value):
        return QUOTE_ADVICE.format(value=value)
    return None


@predicate(Family.STRING, "advise-quote",
           Operand("value", OperandKind.TEXT, "Value to inspect"),
           help="Advise quoting if a value looks like an unquoted shell word "
                "that may be misinterpreted.",
           diagnose=quote_advice)
def advise_quote(value: str) -> bool:
    return not looks_like_shell_operator(value)
