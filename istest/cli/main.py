"""
is-test CLI: one predicate per invocation, answered by exit status.

    is-test file directory ~/projects       # 0 if it is a directory
    is-test string equal-ci "$a" "$b"       # 0 if equal ignoring case
    is-test semver ge "$version" 2.0.0      # 0 if version >= 2.0.0

Exit status:
    0: the predicate holds
    1: it does not (including any missing file, failed parse, failed
        connection, unset variable)
    2: usage error (unknown verb, wrong arity, bad operand type)

Nothing is written to standard output. The only predicate that writes
anything is ``string advise-quote``, which prints its advice to stderr
when it returns false.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from ..domain import EXIT_USAGE, EvaluationResult, UsageError
from ..evaluator import evaluate
from ..logging_setup import configure_logging
from .resolver import create_parser, resolve_arguments

logger = logging.getLogger(__name__)


# =============================================================================
# OUTPUT
# =============================================================================

def report_usage_error(error: UsageError) -> None:
    """Write usage line and message to stderr, argparse style."""
    if error.usage:
        print(error.usage, end="", file=sys.stderr)
    print(f"{error.prog}: error: {error.message}", file=sys.stderr)


def report_diagnostic(result: EvaluationResult) -> None:
    """Write the advisory diagnostic, if any, to stderr."""
    if result.diagnostic:
        print(result.diagnostic, file=sys.stderr)


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Parses, evaluates one predicate, and returns the exit status. The
    process exits exactly once, in the caller.
    """
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as error:
        report_usage_error(error)
        return EXIT_USAGE

    configure_logging(args.verbose)
    request, definition = resolve_arguments(args)
    logger.debug("resolved request: %s", request.describe())

    result = evaluate(request, definition)
    report_diagnostic(result)
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
