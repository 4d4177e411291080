"""The chain of blocks, its validation and difficulty adjustment."""

from __future__ import annotations

import logging
import time

from .block import Block, _meets_difficulty
from .config import BLOCK_TIME, DIFFICULTY_ADJUSTMENT_INTERVAL, STARTING_DIFFICULTY

_log = logging.getLogger(__name__)

GENESIS_DATA = "Genesis Block - Pebicoin"


class InvalidBlockError(ValueError):
    """Raised when a block cannot be appended to the chain."""


def _genesis_time() -> int:
    # Noon local standard time on June 21, 2025.
    return int(time.mktime((2025, 6, 21, 12, 0, 0, 0, 0, 0)))


class Blockchain:
    """An append-only list of blocks starting from the genesis block."""

    def __init__(self) -> None:
        self.difficulty: int = STARTING_DIFFICULTY
        genesis_time = _genesis_time()
        self.chain: list[Block] = [Block(0, genesis_time, GENESIS_DATA, 0, "0")]
        self.last_difficulty_adjustment_time: int = genesis_time

    @property
    def last_block(self) -> Block:
        """The most recent block."""
        return self.chain[-1]

    def add_block(self, block: Block) -> None:
        """Append a block that links to the tip and meets the difficulty."""
        if block.previous_hash != self.last_block.hash:
            raise InvalidBlockError("Invalid block: previous hash doesn't match")
        if not _meets_difficulty(block.hash, self.difficulty):
            raise InvalidBlockError("Invalid block: hash doesn't meet difficulty target")
        self.chain.append(block)
        if len(self.chain) % DIFFICULTY_ADJUSTMENT_INTERVAL == 0:
            self.adjust_difficulty()

    def is_chain_valid(self) -> bool:
        """Check every block's hash, link and proof of work."""
        for previous, current in zip(self.chain, self.chain[1:]):
            if current.hash != current.calculate_hash():
                return False
            if current.previous_hash != previous.hash:
                return False
            if not _meets_difficulty(current.hash, self.difficulty):
                return False
        return True

    def adjust_difficulty(self) -> None:
        """Retarget difficulty from the time the last interval took."""
        current_time = self.last_block.timestamp
        time_expected = DIFFICULTY_ADJUSTMENT_INTERVAL * BLOCK_TIME
        time_taken = current_time - self.last_difficulty_adjustment_time
        if time_taken < time_expected // 4:
            self.difficulty += 1
        elif time_taken > time_expected * 4 and self.difficulty > 1:
            self.difficulty -= 1
        self.last_difficulty_adjustment_time = current_time
        _log.info("Difficulty adjusted to: %d", self.difficulty)