"""
Tests for the env predicate family.

These tests verify:
1. ``set`` treats a defined-but-empty variable as unset
2. ``equal-to`` requires a defined variable with the exact value
"""

from istest.evaluator import check


class TestEnvSet:
    """Test env set."""

    def test_set_and_non_empty(self, monkeypatch):
        monkeypatch.setenv("ISTEST_VAR", "hello")
        assert check("env", "set", "ISTEST_VAR")

    def test_defined_but_empty_is_unset(self, monkeypatch):
        monkeypatch.setenv("ISTEST_VAR", "")
        assert not check("env", "set", "ISTEST_VAR")

    def test_undefined(self, monkeypatch):
        monkeypatch.delenv("ISTEST_VAR", raising=False)
        assert not check("env", "set", "ISTEST_VAR")


class TestEnvEqualTo:
    """Test env equal-to."""

    def test_exact_value(self, monkeypatch):
        monkeypatch.setenv("ISTEST_VAR", "hello")
        assert check("env", "equal-to", "ISTEST_VAR", "hello")
        assert not check("env", "equal-to", "ISTEST_VAR", "Hello")

    def test_empty_value_matches_empty(self, monkeypatch):
        monkeypatch.setenv("ISTEST_VAR", "")
        assert check("env", "equal-to", "ISTEST_VAR", "")

    def test_undefined_never_equal(self, monkeypatch):
        monkeypatch.delenv("ISTEST_VAR", raising=False)
        assert not check("env", "equal-to", "ISTEST_VAR", "")
