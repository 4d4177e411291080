"""Command-line miner that keeps mining blocks until interrupted."""

from __future__ import annotations

import re
import signal
import sys
import threading
import time
from collections.abc import Sequence

from .blockchain import Blockchain, InvalidBlockError
from .config import COIN_NAME, COIN_TICKER, INITIAL_BLOCK_REWARD
from .miner import Miner

_PROGRAM = "pebiminer"
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1


class UsageError(Exception):
    """Raised when the command line cannot be used to start mining."""

    def __init__(self, message: str = "", show_help: bool = True) -> None:
        super().__init__(message)
        self.message = message
        self.show_help = show_help


def _help_text(program: str = _PROGRAM) -> str:
    return "\n".join(
        [
            "Pebicoin Miner - CLI mining tool for Pebicoin cryptocurrency",
            f"Usage: {program} [options]",
            "Options:",
            "  --address=<addr>    Wallet address to receive mining rewards (required)",
            "  --threads=<num>     Number of mining threads (default: 1)",
            "  --help              Display this help message",
        ]
    )


def _parse_thread_count(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise UsageError(f"Invalid thread count: {text}", show_help=False)
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise UsageError(f"Invalid thread count: {text}", show_help=False)
    return value & 0xFFFFFFFF


def parse_args(argv: Sequence[str]) -> tuple[str, int]:
    """Return the reward address and thread count given on the command line."""
    address = ""
    threads = 1
    for arg in argv:
        if arg.startswith("--address="):
            address = arg[len("--address="):]
        elif arg.startswith("--threads="):
            threads = _parse_thread_count(arg[len("--threads="):])
        elif arg == "--help":
            raise UsageError()
        else:
            raise UsageError(f"Unknown option: {arg}")
    if not address:
        raise UsageError("Error: Wallet address is required")
    return address, threads


def mining_loop(
    blockchain: Blockchain, address: str, threads: int, stop_event: threading.Event
) -> int:
    """Mine blocks to ``address`` until ``stop_event`` is set; return the count."""
    miner = Miner()
    blocks_mined = 0

    print(f"Starting Pebicoin miner with {threads} threads")
    print(f"Mining to address: {address}")
    print("Press Ctrl+C to stop mining")

    start = time.monotonic()
    while not stop_event.is_set():
        print(f"\nMining block #{len(blockchain.chain)}...")
        try:
            miner.mine_block_multithreaded(blockchain, address, threads)
        except InvalidBlockError as exc:
            print(str(exc), file=sys.stderr)
        blocks_mined += 1

        elapsed = int(time.monotonic() - start)
        if elapsed > 0:
            hashrate = blocks_mined / elapsed
            print("Mining statistics:")
            print(f"  Blocks mined: {blocks_mined}")
            print(f"  Running time: {elapsed} seconds")
            print(f"  Average hashrate: {hashrate:g} blocks/s")
    return blocks_mined


def main(argv: Sequence[str] | None = None) -> int:
    """Start the miner from command-line arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        address, threads = parse_args(args)
    except UsageError as exc:
        if exc.message:
            print(exc.message, file=sys.stderr)
        if exc.show_help:
            print(_help_text())
        return 1

    stop_event = threading.Event()

    def _on_signal(signum, frame) -> None:
        print(f"\nReceived signal {signum}, shutting down...")
        stop_event.set()

    try:
        previous = signal.signal(signal.SIGINT, _on_signal)
    except ValueError:
        previous = None

    try:
        blockchain = Blockchain()
        print("Pebicoin Miner v1.0")
        print(f"Coin: {COIN_NAME} ({COIN_TICKER})")
        print(f"Block reward: {INITIAL_BLOCK_REWARD} PBC")
        print(f"Difficulty: {blockchain.difficulty}")
        mining_loop(blockchain, address, threads, stop_event)
    finally:
        if previous is not None:
            signal.signal(signal.SIGINT, previous)

    print("Miner stopped. Goodbye!")
    return 0