# CLI package for is-test
"""
Command-line interface for is-test.

Usage:
    is-test <family> <predicate> <operands...>

Families:
    file, string, int, float, semver, env, net, system
"""
