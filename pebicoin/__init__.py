"""Pebicoin: a proof-of-work blockchain with miner, seed node, addresses, signing and a key wallet."""

__version__ = "1.0.0"