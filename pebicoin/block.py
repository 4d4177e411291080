"""A single block of the Pebicoin chain and its proof-of-work search."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .hashing import double_sha256_hex

_log = logging.getLogger(__name__)

_PROGRESS_INTERVAL = 100_000
_NONCE_MASK = 0xFFFFFFFF


def _meets_difficulty(block_hash: str, difficulty: int) -> bool:
    """Return whether ``block_hash`` starts with ``difficulty`` zeros."""
    return len(block_hash) >= difficulty and block_hash.startswith("0" * difficulty)


@dataclass
class Block:
    """A block; its hash is computed from the other fields unless given."""

    index: int
    timestamp: int
    data: str
    nonce: int
    previous_hash: str
    hash: str | None = None

    def __post_init__(self) -> None:
        if self.hash is None:
            self.hash = self.calculate_hash()

    def calculate_hash(self) -> str:
        """Return the hex double SHA-256 of the block's fields."""
        payload = f"{self.index}{self.timestamp}{self.data}{self.nonce}{self.previous_hash}"
        return double_sha256_hex(payload)

    def mine_block(self, difficulty: int) -> int:
        """Raise the nonce until the hash has ``difficulty`` leading zeros.

        Returns the number of hashes computed.
        """
        _log.info("Mining block with difficulty: %d...", difficulty)
        hashes_computed = 0
        while not _meets_difficulty(self.hash, difficulty):
            self.nonce = (self.nonce + 1) & _NONCE_MASK
            self.hash = self.calculate_hash()
            hashes_computed += 1
            if hashes_computed % _PROGRESS_INTERVAL == 0:
                _log.info(
                    "Computed %d hashes, current nonce: %d", hashes_computed, self.nonce
                )
        _log.info("Block Mined! Hash: %s", self.hash)
        _log.info("Nonce: %d (%d hashes computed)", self.nonce, hashes_computed)
        return hashes_computed