"""
Network predicates.

Each predicate makes exactly one TCP connection attempt with a bounded
timeout. Any failure (refused, timed out, unresolvable host, malformed
address) is False. No retries.

``online`` is a heuristic: it only proves that one well-known public
resolver accepted a TCP connection, not that general internet access
works.
"""

from __future__ import annotations

import logging
import socket

from ..domain import Family, Operand, OperandKind
from ..registry import predicate

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

# Cloudflare public DNS over TCP
ONLINE_PROBE_ADDRESS = ("1.1.1.1", 53)
ONLINE_PROBE_TIMEOUT_MS = 800

DEFAULT_PORT_TIMEOUT_MS = 1000


def tcp_connect(host: str, port: int, timeout_ms: int) -> bool:
    """
    Attempt a single TCP connection and close it immediately.

    Returns True only if the handshake completed within ``timeout_ms``.
    """
    try:
        with socket.create_connection((host, port), timeout=timeout_ms / 1000.0):
            return True
    except (OSError, ValueError, OverflowError) as exc:
        logger.debug("connect to %s:%s failed: %s", host, port, exc)
        return False


@predicate(Family.NET, "online",
           help="Check whether we can reach the internet (TCP connect 1.1.1.1:53). "
                "Heuristic only.")
def is_online() -> bool:
    host, port = ONLINE_PROBE_ADDRESS
    return tcp_connect(host, port, ONLINE_PROBE_TIMEOUT_MS)


@predicate(Family.NET, "port-open",
           Operand("host", OperandKind.HOST, "Host name or IP address"),
           Operand("port", OperandKind.PORT, "TCP port"),
           Operand("timeout_ms", OperandKind.MILLIS, "Connect timeout in milliseconds",
                   default=DEFAULT_PORT_TIMEOUT_MS),
           help="Check if TCP port is open on host within optional timeout (ms).")
def is_port_open(host: str, port: int, timeout_ms: int = DEFAULT_PORT_TIMEOUT_MS) -> bool:
    return tcp_connect(host, port, timeout_ms)
