"""Amount conversion and formatting, and block broadcasting to peers."""

from __future__ import annotations

import json
import logging
import socket
from collections.abc import Iterable

from .block import Block
from .config import MIZUTSI_PER_PBC

_log = logging.getLogger(__name__)

_CONNECT_TIMEOUT = 10.0


def to_mizutsi(pbc: float) -> int:
    """Convert PBC to Mizutsi, truncating any fraction."""
    return int(pbc * MIZUTSI_PER_PBC)


def from_mizutsi(m: int) -> float:
    """Convert Mizutsi to PBC."""
    return m / float(MIZUTSI_PER_PBC)


def format_amount(amount: int) -> str:
    """Format Mizutsi as PBC with eight decimals."""
    return f"{from_mizutsi(amount):.8f} PBC"


def format_amount_with_unit(amount: int) -> str:
    """Format Mizutsi in the largest unit that keeps the value at least one."""
    if amount >= 100_000_000:
        return format_amount(amount)
    if amount >= 100_000:
        return f"{amount / 100_000.0:.5f} mPBC"
    if amount >= 100:
        return f"{amount / 100.0:.3f} μPBC"
    return f"{amount} Mizutsi"


def block_to_message(block: Block) -> str:
    """Return the JSON message that announces ``block`` to peers."""
    payload = {
        "type": "block",
        "index": block.index,
        "timestamp": block.timestamp,
        "previousHash": block.previous_hash,
        "hash": block.hash,
        "nonce": block.nonce,
        "data": block.data,
    }
    return json.dumps(payload, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


def send_block_to_peers(block: Block, peers: Iterable[str], port: int) -> list[str]:
    """Send ``block`` to every peer; return the peers that received it."""
    message = block_to_message(block).encode("utf-8")
    delivered: list[str] = []
    for peer in peers:
        try:
            address = socket.gethostbyname(peer)
        except OSError:
            _log.error("Failed to resolve: %s", peer)
            continue
        try:
            with socket.create_connection((address, port), timeout=_CONNECT_TIMEOUT) as sock:
                sock.sendall(message)
        except OSError:
            _log.warning("Could not connect to: %s", peer)
            continue
        _log.info("Block sent to peer: %s", peer)
        delivered.append(peer)
    return delivered