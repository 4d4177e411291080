"""Command-line entry point of the Pebicoin node."""

from __future__ import annotations

import json
import socket
import sys
import time
from collections.abc import Iterable, Sequence

from .block import Block
from .blockchain import Blockchain, InvalidBlockError
from .config import (
    BLOCK_TIME,
    COIN_NAME,
    COIN_TICKER,
    GENESIS_BLOCK_DATE,
    HALVING_INTERVAL,
    INITIAL_BLOCK_REWARD,
    MAX_SUPPLY,
    P2P_PORT,
    SEED_NODES,
)
from .miner import Miner
from .utils import send_block_to_peers

_BUFFER_SIZE = 4096
_PEER_TIMEOUT = 10.0
_BACKLOG = 3


def _help_text() -> str:
    return "\n".join(
        [
            "Pebicoin Core v1.0 - A standalone cryptocurrency",
            "Usage: pebicoin [command] [options]",
            "",
            "Commands:",
            "  help                   Display this help message",
            "  info                   Display blockchain information",
            "  mine <address>         Mine a block with the specified wallet address",
            "  createwallet           Create a new wallet",
            "  balance <address>      Check the balance of an address",
            f"  seed                   Run as a seed node on port {P2P_PORT}",
        ]
    )


def blockchain_info(blockchain: Blockchain) -> str:
    """Return a readable summary of the chain and its latest block."""
    latest = blockchain.last_block
    lines = [
        "",
        "Pebicoin Blockchain Information:",
        f"  Name: {COIN_NAME} ({COIN_TICKER})",
        f"  Current height: {len(blockchain.chain) - 1}",
        f"  Current difficulty: {blockchain.difficulty}",
        f"  Genesis block date: {GENESIS_BLOCK_DATE}",
        f"  Block time: {BLOCK_TIME} seconds",
        f"  Initial block reward: {INITIAL_BLOCK_REWARD} PBC",
        f"  Halving interval: Every {HALVING_INTERVAL} blocks",
        f"  Max supply: {MAX_SUPPLY} PBC",
        "",
        "Latest block:",
        f"  Height: {latest.index}",
        f"  Hash: {latest.hash}",
        f"  Previous hash: {latest.previous_hash}",
        f"  Timestamp: {time.ctime(latest.timestamp)}",
        f"  Nonce: {latest.nonce}",
        f"  Data: {latest.data}",
    ]
    return "\n".join(lines)


def handle_block_message(blockchain: Blockchain, message: str) -> Block | None:
    """Append the block announced by a peer message to the chain.

    Returns the appended block, or None when the message is not a block
    announcement. Raises ValueError for malformed messages and
    InvalidBlockError when the block does not extend the chain's tip.
    """
    payload = json.loads(message)
    if not isinstance(payload, dict) or payload.get("type") != "block":
        return None
    try:
        block = Block(
            index=int(payload["index"]),
            timestamp=int(payload["timestamp"]),
            data=str(payload["data"]),
            nonce=int(payload["nonce"]),
            previous_hash=str(payload["previousHash"]),
            hash=str(payload["hash"]),
        )
    except (KeyError, TypeError) as exc:
        raise ValueError(f"malformed block message: {exc}") from exc

    latest = blockchain.last_block
    if block.previous_hash != latest.hash or block.index != latest.index + 1:
        raise InvalidBlockError("Invalid block received (wrong previous hash or index)")
    blockchain.chain.append(block)
    return block


def _greet_seeds(seeds: Iterable[str], port: int) -> None:
    current_host = socket.gethostname()
    for seed in seeds:
        if seed == current_host:
            continue
        try:
            address = socket.gethostbyname(seed)
            with socket.create_connection((address, port), timeout=_PEER_TIMEOUT):
                pass
        except OSError:
            continue


def run_seed_node(blockchain: Blockchain, port: int, seeds: Iterable[str]) -> None:
    """Listen for block announcements on ``port`` until interrupted."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        if hasattr(socket, "SO_REUSEPORT"):
            server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEPORT, 1)
        server.bind(("0.0.0.0", port))
        server.listen(_BACKLOG)
        print(f"✅ Pebicoin Seed Node is running on port {port}...")

        _greet_seeds(seeds, port)

        try:
            while True:
                try:
                    connection, _ = server.accept()
                except OSError:
                    continue
                with connection:
                    try:
                        raw = connection.recv(_BUFFER_SIZE)
                    except OSError:
                        continue
                if not raw:
                    continue
                try:
                    block = handle_block_message(
                        blockchain, raw.decode("utf-8", errors="replace")
                    )
                except InvalidBlockError as exc:
                    print(f"⚠️ {exc}", file=sys.stderr)
                except ValueError as exc:
                    print(f"❌ Error parsing message: {exc}", file=sys.stderr)
                else:
                    if block is not None:
                        print(f"🧱 New block received and added at height: {block.index}")
        except KeyboardInterrupt:
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Run the node command given in ``argv``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    blockchain = Blockchain()

    if not args:
        print(_help_text())
        return 0

    command = args[0]
    if command == "help":
        print(_help_text())
    elif command == "info":
        print(blockchain_info(blockchain))
    elif command == "mine" and len(args) >= 2:
        miner_address = args[1]
        print(f"Mining a block for address: {miner_address}")
        try:
            Miner().mine_block(blockchain, miner_address)
        except InvalidBlockError as exc:
            print(str(exc), file=sys.stderr)
            return 1
        print("Block successfully mined!")
        print(blockchain_info(blockchain))
        send_block_to_peers(blockchain.last_block, SEED_NODES, P2P_PORT)
    elif command == "createwallet":
        print("This feature requires the wallet module.")
        print("Please use the standalone wallet application.")
    elif command == "balance" and len(args) >= 2:
        address = args[1]
        print("This feature requires the wallet module.")
        print(
            "Please use the standalone wallet application to check balance for: "
            + address
        )
    elif command == "seed":
        try:
            run_seed_node(blockchain, P2P_PORT, SEED_NODES)
        except OSError as exc:
            print(f"bind failed: {exc}", file=sys.stderr)
            return 1
    else:
        print("Unknown command or missing arguments.")
        print(_help_text())
        return 1
    return 0