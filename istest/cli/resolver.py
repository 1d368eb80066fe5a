"""
Command Resolver for is-test.

Turns argv into a PredicateRequest. The parser is built from the
predicate registry, two levels deep:

    is-test <family> <verb> <operands...> [--timeout-ms N]

Resolution is total and side-effect free: it never touches the
filesystem, the network or the environment. Any malformed invocation
(unknown verb at either level, wrong arity, an operand that does not
convert to its type) raises UsageError instead of exiting.
"""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence

from .. import __version__
from .. import predicates  # noqa: F401  (populates the registry)
from ..domain import (
    FAMILY_HELP,
    Family,
    Operand,
    OperandKind,
    PredicateRequest,
    UsageError,
)
from ..normalize import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    parse_float,
    parse_int,
)
from ..registry import PredicateDef, iter_predicates


PROG = "is-test"
DESCRIPTION = "A modern, descriptive replacement for the 'test' command."
EPILOG = (
    "Exit status: 0 if the predicate holds, 1 if it does not, "
    "2 on a usage error. Put values starting with '-' after '--'."
)


# =============================================================================
# OPERAND CONVERSION
# =============================================================================

def integer_converter(kind: str, minimum: int, maximum: int) -> Callable[[str], int]:
    """Build an argparse ``type`` for a bounded integer kind."""

    def convert(text: str) -> int:
        value = parse_int(text, minimum, maximum)
        if value is None:
            raise argparse.ArgumentTypeError(
                f"invalid {kind} value: {text!r} (expected integer in [{minimum}, {maximum}])"
            )
        return value

    convert.__name__ = kind
    return convert


def convert_float(text: str) -> float:
    value = parse_float(text)
    if value is None:
        raise argparse.ArgumentTypeError(f"invalid float value: {text!r}")
    return value


CONVERTERS: dict[OperandKind, Callable[[str], object]] = {
    OperandKind.PATH: str,
    OperandKind.TEXT: str,
    OperandKind.PATTERN: str,
    OperandKind.VERSION: str,
    OperandKind.ENV_NAME: str,
    OperandKind.HOST: str,
    OperandKind.INT64: integer_converter("int64", INT64_MIN, INT64_MAX),
    OperandKind.UINT64: integer_converter("uint64", 0, UINT64_MAX),
    OperandKind.COUNT: integer_converter("count", 0, UINT64_MAX),
    OperandKind.MILLIS: integer_converter("milliseconds", 0, UINT64_MAX),
    OperandKind.PORT: integer_converter("port", 0, 65535),
    OperandKind.FD: integer_converter("fd", INT32_MIN, INT32_MAX),
    OperandKind.FLOAT64: convert_float,
}


# =============================================================================
# PARSER
# =============================================================================

class ResolverArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message: str):
        raise UsageError(message, usage=self.format_usage(), prog=self.prog)


def add_operand(parser: argparse.ArgumentParser, operand: Operand) -> None:
    """Declare one operand as a positional or, if it has a default, a flag."""
    convert = CONVERTERS[operand.kind]
    if operand.is_flag:
        parser.add_argument(
            operand.flag,
            dest=operand.name,
            type=convert,
            default=operand.default,
            metavar=operand.name.upper(),
            help=f"{operand.help} (default: {operand.default})",
        )
    else:
        parser.add_argument(operand.name, type=convert, help=operand.help)


def create_parser() -> ResolverArgumentParser:
    """Create the two-level CLI parser from the predicate registry."""
    parser = ResolverArgumentParser(
        prog=PROG,
        description=DESCRIPTION,
        epilog=EPILOG,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log evaluation details to stderr",
    )

    families = parser.add_subparsers(
        title="families",
        dest="family",
        metavar="<family>",
        required=True,
    )

    for family in Family:
        family_parser = families.add_parser(
            family.value,
            help=FAMILY_HELP[family],
            description=FAMILY_HELP[family],
        )
        verbs = family_parser.add_subparsers(
            title="predicates",
            dest="verb",
            metavar="<predicate>",
            required=True,
        )
        for definition in iter_predicates(family):
            verb_parser = verbs.add_parser(
                definition.verb,
                aliases=list(definition.aliases),
                help=definition.help,
                description=definition.help,
            )
            for operand in definition.operands:
                add_operand(verb_parser, operand)
            verb_parser.set_defaults(definition=definition)

    return parser


# =============================================================================
# RESOLUTION
# =============================================================================

def resolve_arguments(args: argparse.Namespace) -> tuple[PredicateRequest, PredicateDef]:
    """Build the request from a parsed namespace."""
    definition: PredicateDef = args.definition
    operands = tuple(getattr(args, operand.name) for operand in definition.operands)
    request = PredicateRequest(
        family=definition.family,
        verb=definition.verb,
        operands=operands,
    )
    return request, definition


def resolve(argv: Optional[Sequence[str]] = None) -> PredicateRequest:
    """
    Parse argv into a PredicateRequest.

    Raises:
        UsageError: If the invocation is malformed
    """
    args = create_parser().parse_args(argv)
    request, _ = resolve_arguments(args)
    return request
