# is-test: descriptive predicates for shell conditionals

"""
Core invariant: one invocation evaluates exactly one predicate and maps it
to an exit status (0 true, 1 false, 2 usage error).

This package exposes the predicate registry, the resolver that turns argv
into a typed request, and the evaluator that reduces the request to a
boolean outcome.
"""

__version__ = "0.1.0"
