"""
Tests for the net predicate family.

Local sockets stand in for remote hosts; nothing here leaves the machine.

These tests verify:
1. A listening port is open, a released port is not
2. Every connection failure folds to False
3. The timeout is passed in seconds, from milliseconds
4. ``online`` probes the configured address exactly once
"""

import socket

import pytest

from istest.evaluator import check
from istest.predicates import network


class TestPortOpen:
    """Test net port-open."""

    def test_listening_port_is_open(self, listening_port):
        assert check("net", "port-open", "127.0.0.1", listening_port, 1000)

    def test_host_name_is_resolved(self, listening_port):
        assert check("net", "port-open", "localhost", listening_port, 1000)

    def test_closed_port(self, closed_port):
        assert not check("net", "port-open", "127.0.0.1", closed_port, 1000)

    def test_default_timeout(self, listening_port):
        assert network.is_port_open("127.0.0.1", listening_port)

    @pytest.mark.parametrize("error", [
        socket.gaierror("Name or service not known"),
        socket.timeout("timed out"),
        ConnectionRefusedError(),
        ValueError("bad address"),
    ])
    def test_failures_fold_to_false(self, monkeypatch, error):
        def fail(address, timeout=None):
            raise error

        monkeypatch.setattr(network.socket, "create_connection", fail)
        assert not check("net", "port-open", "example.invalid", 80, 100)

    def test_timeout_in_seconds(self, monkeypatch):
        calls = []

        class FakeConnection:
            def __enter__(self):
                return self

            def __exit__(self, *exc):
                return False

        def connect(address, timeout=None):
            calls.append((address, timeout))
            return FakeConnection()

        monkeypatch.setattr(network.socket, "create_connection", connect)
        assert check("net", "port-open", "db.internal", 5432, 250)
        assert calls == [(("db.internal", 5432), 0.25)]


class TestOnline:
    """Test net online."""

    def test_reachable_probe(self, monkeypatch, listening_port):
        monkeypatch.setattr(network, "ONLINE_PROBE_ADDRESS", ("127.0.0.1", listening_port))
        assert check("net", "online")

    def test_unreachable_probe(self, monkeypatch, closed_port):
        monkeypatch.setattr(network, "ONLINE_PROBE_ADDRESS", ("127.0.0.1", closed_port))
        assert not check("net", "online")

    def test_single_attempt(self, monkeypatch):
        attempts = []

        def fail(address, timeout=None):
            attempts.append((address, timeout))
            raise socket.timeout("timed out")

        monkeypatch.setattr(network.socket, "create_connection", fail)
        assert not check("net", "online")
        assert attempts == [(("1.1.1.1", 53), 0.8)]
