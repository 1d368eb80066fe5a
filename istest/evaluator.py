"""
Predicate Evaluator for is-test.

Takes a resolved PredicateRequest, runs exactly one predicate, and
returns an EvaluationResult. It never exits the process and never
prints; the CLI maps the result to an exit status once, at the top.

Domain failures are folded to FALSE inside each predicate. Nothing here
catches exceptions: an exception escaping a predicate is a bug, not an
outcome.
"""

from __future__ import annotations

import logging
from typing import Optional

from . import predicates  # noqa: F401  (populates the registry)
from .domain import EvaluationResult, Family, Outcome, PredicateRequest
from .registry import PredicateDef, canonical_verb, get_predicate

logger = logging.getLogger(__name__)


def evaluate(
    request: PredicateRequest,
    definition: Optional[PredicateDef] = None,
) -> EvaluationResult:
    """
    Evaluate one request.

    Args:
        request: The resolved request
        definition: Pre-resolved definition (looked up from the registry
            if omitted)

    Returns:
        EvaluationResult with the outcome and, for the quoting advisory
        only, a diagnostic line
    """
    if definition is None:
        definition = get_predicate(request.family, request.verb)

    value = bool(definition.func(*request.operands))
    outcome = Outcome.from_bool(value)
    logger.debug("%s -> %s", request.describe(), outcome.name)

    diagnostic = None
    if outcome is Outcome.FALSE and definition.diagnose is not None:
        diagnostic = definition.diagnose(*request.operands)

    return EvaluationResult(outcome=outcome, diagnostic=diagnostic)


def check(family, verb: str, *operands) -> bool:
    """
    Convenience wrapper: evaluate a predicate by name and return a bool.

    ``family`` may be a Family or its string value.
    """
    family = Family(family)
    request = PredicateRequest(family, canonical_verb(family, verb), tuple(operands))
    return evaluate(request).outcome is Outcome.TRUE
