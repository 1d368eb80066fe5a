"""Shared fixtures for the is-test suite."""

import os
import socket

import pytest


@pytest.fixture
def fixture_dir(tmp_path):
    """
    A directory with the usual suspects:

        empty_file.txt   (0 bytes)
        file.txt         ("hello\\n", 6 bytes)
        subdir/
        symlink_to_file  -> file.txt
        dangling_link    -> missing.txt
    """
    (tmp_path / "empty_file.txt").touch()
    (tmp_path / "file.txt").write_text("hello\n")
    (tmp_path / "subdir").mkdir()
    os.symlink(tmp_path / "file.txt", tmp_path / "symlink_to_file")
    os.symlink(tmp_path / "missing.txt", tmp_path / "dangling_link")
    return tmp_path


@pytest.fixture
def listening_port():
    """A TCP port on 127.0.0.1 with a listening socket behind it."""
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    try:
        yield server.getsockname()[1]
    finally:
        server.close()


@pytest.fixture
def closed_port():
    """A TCP port on 127.0.0.1 that was just released and has no listener."""
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    return port
