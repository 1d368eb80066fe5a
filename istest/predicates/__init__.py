# Predicate families for is-test
"""
One module per predicate family.

Importing this package registers every predicate in the verb table
(``istest.registry``).
"""

from . import environment, files, network, numbers, strings, system, versions

__all__ = [
    "environment",
    "files",
    "network",
    "numbers",
    "strings",
    "system",
    "versions",
]
