"""
Tests for the predicate registry.

These tests verify:
1. Every verb in the command table is registered exactly once
2. Aliases resolve to the canonical definition
3. Duplicate registration and unknown lookups raise RegistryError
"""

import pytest

from istest.domain import Family, Operand, OperandKind
from istest.evaluator import check
from istest.registry import (
    PredicateDef,
    RegistryError,
    canonical_verb,
    get_predicate,
    iter_predicates,
    register,
)
import istest.predicates  # noqa: F401


EXPECTED_VERBS = {
    Family.FILE: {
        "exists", "directory", "regular", "symlink", "block-device",
        "character-device", "named-pipe", "socket", "non-empty",
        "readable", "writable", "executable", "has-suid", "has-sgid",
        "has-sticky", "owned-by-effective-user", "owned-by-effective-group",
        "has-same-inode", "newer-than", "older-than", "exists-glob",
        "non-empty-glob", "size-gt", "size-ge", "size-lt", "size-le",
        "size-eq", "mtime-older-than", "mtime-newer-than",
    },
    Family.STRING: {
        "equal", "not-equals", "empty", "not-empty", "equal-ci",
        "matches-regex", "matches-regex-ci", "contains", "contains-ci",
        "starts-with", "starts-with-ci", "ends-with", "ends-with-ci",
        "integer", "number", "uuid", "ipv4", "ascii", "len-gt", "len-ge",
        "len-lt", "len-le", "len-eq", "advise-quote",
    },
    Family.INT: {"eq", "ne", "gt", "ge", "lt", "le", "in-range", "positive", "negative"},
    Family.FLOAT: {"eq", "ne", "gt", "ge", "lt", "le", "in-range", "approx-eq"},
    Family.SEMVER: {"eq", "ne", "gt", "ge", "lt", "le"},
    Family.ENV: {"set", "equal-to"},
    Family.NET: {"online", "port-open"},
    Family.SYSTEM: {"os", "arch", "command-exists", "fd-tty"},
}


# =============================================================================
# VERB TABLE
# =============================================================================

class TestVerbTable:
    """Test the registered command table."""

    @pytest.mark.parametrize("family", list(Family))
    def test_family_verbs(self, family):
        verbs = {d.verb for d in iter_predicates(family)}
        assert verbs == EXPECTED_VERBS[family]

    def test_no_duplicate_canonical_verbs(self):
        keys = [(d.family, d.verb) for d in iter_predicates()]
        assert len(keys) == len(set(keys))

    def test_every_definition_has_help(self):
        for definition in iter_predicates():
            assert definition.help, definition.verb

    def test_only_port_open_has_a_flag(self):
        flagged = [
            (d.family, d.verb)
            for d in iter_predicates()
            if any(op.is_flag for op in d.operands)
        ]
        assert flagged == [(Family.NET, "port-open")]


# =============================================================================
# ALIASES
# =============================================================================

class TestAliases:
    """Test alias resolution."""

    @pytest.mark.parametrize("family,alias,canonical", [
        (Family.FILE, "dir", "directory"),
        (Family.FILE, "file", "regular"),
        (Family.FILE, "link", "symlink"),
        (Family.FILE, "fifo", "named-pipe"),
        (Family.STRING, "not-equal", "not-equals"),
    ])
    def test_alias_maps_to_canonical(self, family, alias, canonical):
        assert canonical_verb(family, alias) == canonical
        assert get_predicate(family, alias) is get_predicate(family, canonical)

    def test_canonical_maps_to_itself(self):
        assert canonical_verb(Family.FILE, "exists") == "exists"

    def test_aliases_are_family_scoped(self):
        assert canonical_verb(Family.STRING, "dir") == "dir"
        with pytest.raises(RegistryError):
            get_predicate(Family.STRING, "dir")

    def test_alias_evaluates_identically(self):
        assert check("string", "not-equal", "a", "b") == check("string", "not-equals", "a", "b")


# =============================================================================
# ERRORS
# =============================================================================

class TestRegistryErrors:
    """Test registry error handling."""

    def test_unknown_verb(self):
        with pytest.raises(RegistryError, match="Unknown predicate 'frobnicate'"):
            get_predicate(Family.FILE, "frobnicate")

    def test_duplicate_verb_rejected(self):
        duplicate = PredicateDef(
            family=Family.FILE,
            verb="exists",
            func=lambda path: True,
            operands=(Operand("path", OperandKind.PATH),),
            help="duplicate",
        )
        with pytest.raises(RegistryError, match="already registered"):
            register(duplicate)

    def test_alias_colliding_with_verb_rejected(self):
        colliding = PredicateDef(
            family=Family.FILE,
            verb="exists",
            func=lambda path: True,
            operands=(Operand("path", OperandKind.PATH),),
            help="collides",
            aliases=("dir",),
        )
        with pytest.raises(RegistryError):
            register(colliding)
        assert get_predicate(Family.FILE, "dir").verb == "directory"
