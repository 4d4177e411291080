"""Proof-of-work mining of new blocks and the block reward schedule."""

from __future__ import annotations

import dataclasses
import itertools
import logging
import threading
import time

from .block import Block, _meets_difficulty
from .blockchain import Blockchain
from .config import HALVING_INTERVAL, INITIAL_BLOCK_REWARD, MIZUTSI_PER_PBC

_log = logging.getLogger(__name__)

_NONCE_MASK = 0xFFFFFFFF


class Miner:
    """Mines coinbase blocks onto a blockchain."""

    def block_reward(self, block_height: int) -> int:
        """Return the reward in Mizutsi for a block at ``block_height``."""
        halvings = block_height // HALVING_INTERVAL
        if halvings >= 64:
            return 0
        return (INITIAL_BLOCK_REWARD * MIZUTSI_PER_PBC) >> halvings

    def _candidate(self, blockchain: Blockchain, miner_address: str) -> Block:
        last = blockchain.last_block
        index = last.index + 1
        data = f"coinbase:{miner_address}:{self.block_reward(index)}"
        return Block(index, int(time.time()), data, 0, last.hash)

    def _report(self, block: Block, miner_address: str) -> None:
        _log.info("Block mined by: %s", miner_address)
        _log.info("Block hash: %s", block.hash)
        _log.info("Block reward: %d PBC", self.block_reward(block.index))

    def mine_block(self, blockchain: Blockchain, miner_address: str) -> Block:
        """Mine one block on a single thread and append it to the chain."""
        _log.info("Mining a new block...")
        block = self._candidate(blockchain, miner_address)
        block.mine_block(blockchain.difficulty)
        blockchain.add_block(block)
        self._report(block, miner_address)
        return block

    def mine_block_multithreaded(
        self, blockchain: Blockchain, miner_address: str, num_threads: int
    ) -> Block | None:
        """Mine one block with threads sharing a nonce counter.

        Returns the appended block, or None when no thread was started.
        """
        _log.info("Mining a new block with %d threads...", num_threads)
        template = self._candidate(blockchain, miner_address)
        found = threading.Event()
        lock = threading.Lock()
        nonces = itertools.count()
        winners: list[Block] = []

        def work() -> None:
            candidate = dataclasses.replace(template)
            while not found.is_set():
                with lock:
                    candidate.nonce = next(nonces) & _NONCE_MASK
                candidate.hash = candidate.calculate_hash()
                if _meets_difficulty(candidate.hash, blockchain.difficulty):
                    with lock:
                        if not found.is_set():
                            winners.append(dataclasses.replace(candidate))
                            found.set()
                    return

        threads = [threading.Thread(target=work, daemon=True) for _ in range(num_threads)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        if not winners:
            return None
        block = winners[0]
        blockchain.add_block(block)
        self._report(block, miner_address)
        return block