"""
Core Domain Objects for is-test.

Every invocation flows through the same small set of objects:

Domain Objects:
    Family           : The predicate family selected by the first verb
    OperandKind      : The semantic type of one positional/flag operand
    Operand          : A named, typed operand declared by a predicate
    PredicateRequest : A fully resolved, immutable request for one predicate
    Outcome          : TRUE or FALSE, mapped directly to an exit status
    EvaluationResult : Outcome plus the optional advisory diagnostic
    UsageError       : The only error tier; raised by the resolver
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


# =============================================================================
# EXIT STATUS
# =============================================================================

EXIT_TRUE = 0
EXIT_FALSE = 1
EXIT_USAGE = 2


# =============================================================================
# FAMILIES AND OPERANDS
# =============================================================================

class Family(Enum):
    """Predicate families, selected by the first CLI verb."""
    FILE = "file"
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    SEMVER = "semver"
    ENV = "env"
    NET = "net"
    SYSTEM = "system"


FAMILY_HELP = {
    Family.FILE: "File-related checks",
    Family.STRING: "String-related checks",
    Family.INT: "Integer-related checks",
    Family.FLOAT: "Floating point-related checks",
    Family.SEMVER: "Semantic versioning-related checks",
    Family.ENV: "Environment variable-related checks",
    Family.NET: "Network-related checks",
    Family.SYSTEM: "System-related checks",
}


class OperandKind(Enum):
    """
    Semantic type of an operand.

    The resolver converts raw argv text according to the kind; the
    evaluator receives already-converted Python values:
    - PATH, TEXT, PATTERN, VERSION, ENV_NAME, HOST -> str (unexpanded)
    - INT64, UINT64, COUNT, PORT, MILLIS, FD       -> int (range-checked)
    - FLOAT64                                      -> float
    """
    PATH = "path"
    TEXT = "text"
    PATTERN = "pattern"
    INT64 = "int64"
    UINT64 = "uint64"
    COUNT = "count"
    FLOAT64 = "float64"
    VERSION = "version"
    ENV_NAME = "env_name"
    HOST = "host"
    PORT = "port"
    MILLIS = "millis"
    FD = "fd"


@dataclass(frozen=True)
class Operand:
    """
    A single operand declared by a predicate.

    Operands without a default are positional. An operand with a default
    is exposed as a named flag (``--timeout-ms``) and is optional.
    """
    name: str
    kind: OperandKind
    help: str = ""
    default: Any = None

    @property
    def is_flag(self) -> bool:
        return self.default is not None

    @property
    def flag(self) -> str:
        return "--" + self.name.replace("_", "-")


# =============================================================================
# REQUEST / RESULT
# =============================================================================

@dataclass(frozen=True)
class PredicateRequest:
    """
    A resolved request for exactly one predicate.

    The verb is always the canonical verb, never an alias. Operands are
    stored in declaration order and already carry their semantic types.
    """
    family: Family
    verb: str
    operands: tuple[Any, ...] = ()

    def describe(self) -> str:
        """Human-readable one-liner, used in debug logs."""
        args = " ".join(repr(op) for op in self.operands)
        return f"{self.family.value} {self.verb} {args}".rstrip()


class Outcome(Enum):
    """Terminal outcome of one evaluation."""
    TRUE = EXIT_TRUE
    FALSE = EXIT_FALSE

    @classmethod
    def from_bool(cls, value: bool) -> Outcome:
        return cls.TRUE if value else cls.FALSE

    @property
    def exit_code(self) -> int:
        return self.value


@dataclass(frozen=True)
class EvaluationResult:
    """
    Outcome of evaluating one PredicateRequest.

    ``diagnostic`` is only ever set by the quoting advisory and is meant
    for the error stream, never standard output.
    """
    outcome: Outcome
    diagnostic: Optional[str] = None

    @property
    def exit_code(self) -> int:
        return self.outcome.exit_code


# =============================================================================
# ERRORS
# =============================================================================

class UsageError(Exception):
    """
    Raised when an invocation is malformed.

    Covers unknown verbs at either level, wrong arity, and operands that
    fail to convert to their required primitive type. Never raised for a
    domain-level failure; those are folded into Outcome.FALSE.
    """

    def __init__(self, message: str, usage: str = "", prog: str = "is-test"):
        self.message = message
        self.usage = usage
        self.prog = prog
        super().__init__(message)
