"""
System identity predicates.

OS and architecture names are normalized to a small canonical vocabulary
(``linux``, ``macos``, ``windows``; ``x86_64``, ``aarch64``, ``x86``, ...)
and compared case-insensitively. ``arch`` also accepts the raw machine
string the OS reports, so ``is-test system arch "$(uname -m)"`` holds.
"""

from __future__ import annotations

import logging
import os
import platform
import shutil
import sys

from ..domain import Family, Operand, OperandKind
from ..normalize import equal_ci, fold_case
from ..registry import predicate

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

# sys.platform prefix -> canonical OS name
OS_NAMES = {
    "linux": "linux",
    "darwin": "macos",
    "win32": "windows",
    "cygwin": "windows",
    "freebsd": "freebsd",
    "netbsd": "netbsd",
    "openbsd": "openbsd",
    "dragonfly": "dragonfly",
    "android": "android",
    "ios": "ios",
    "sunos": "solaris",
    "aix": "aix",
}

# platform.machine() (folded) -> canonical architecture name
ARCH_NAMES = {
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "x64": "x86_64",
    "i386": "x86",
    "i486": "x86",
    "i586": "x86",
    "i686": "x86",
    "x86": "x86",
    "aarch64": "aarch64",
    "arm64": "aarch64",
    "armv6l": "arm",
    "armv7l": "arm",
    "armv8l": "arm",
    "arm": "arm",
    "riscv64": "riscv64",
    "ppc64le": "powerpc64",
    "ppc64": "powerpc64",
    "ppc": "powerpc",
    "s390x": "s390x",
    "mips": "mips",
    "mips64": "mips64",
    "loongarch64": "loongarch64",
}


def current_os() -> str:
    """Canonical name of the running operating system."""
    for prefix, name in OS_NAMES.items():
        if sys.platform.startswith(prefix):
            return name
    return sys.platform


def current_arch() -> str:
    """Canonical name of the running machine architecture."""
    machine = platform.machine()
    return ARCH_NAMES.get(fold_case(machine), machine)


# =============================================================================
# PREDICATES
# =============================================================================

@predicate(Family.SYSTEM, "os",
           Operand("name", OperandKind.TEXT, "Operating system name"),
           help="Detect operating system equals the given name (linux, macos, windows, "
                "freebsd, netbsd, openbsd, dragonfly, android, ios).")
def os_is(name: str) -> bool:
    return equal_ci(current_os(), name)


@predicate(Family.SYSTEM, "arch",
           Operand("name", OperandKind.TEXT, "Architecture name"),
           help="Architecture equals given name.")
def arch_is(name: str) -> bool:
    return equal_ci(current_arch(), name) or equal_ci(platform.machine(), name)


@predicate(Family.SYSTEM, "command-exists",
           Operand("command", OperandKind.TEXT, "Command name or path"),
           help="Check if a command exists in PATH and is executable.")
def command_exists(command: str) -> bool:
    """
    PATH search for an executable.

    A name containing a path separator is checked directly instead of
    being searched for. With PATH unset nothing is found; there is no
    fallback to a default search path.
    """
    if not command:
        return False
    try:
        found = shutil.which(command, path=os.environ.get("PATH", ""))
    except (OSError, ValueError) as exc:
        logger.debug("PATH search failed for %r: %s", command, exc)
        return False
    logger.debug("command %r resolved to %r (PATH=%r)", command, found, os.environ.get("PATH"))
    return found is not None


@predicate(Family.SYSTEM, "fd-tty",
           Operand("fd", OperandKind.FD, "File descriptor number"),
           help="Checks if a file descriptor is open on a terminal (-t FD).")
def fd_is_tty(fd: int) -> bool:
    try:
        return os.isatty(fd)
    except (OSError, ValueError, OverflowError):
        return False
