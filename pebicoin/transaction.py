"""Transactions made of inputs spending earlier outputs and new outputs."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from .hashing import double_sha256_hex
from .signer import sign_message


@dataclass
class TransactionInput:
    """A reference to an output of an earlier transaction."""

    txid: str
    output_index: int
    signature: str = ""


@dataclass
class TransactionOutput:
    """An amount in Mizutsi paid to an address."""

    address: str
    amount: int


@dataclass
class Transaction:
    """A transaction; its id is computed at creation unless given."""

    inputs: list[TransactionInput] = field(default_factory=list)
    outputs: list[TransactionOutput] = field(default_factory=list)
    timestamp: int = field(default_factory=lambda: int(time.time()))
    txid: str = ""

    def __post_init__(self) -> None:
        if not self.txid:
            self.txid = self.calculate_txid()

    def calculate_txid(self) -> str:
        """Return the hex double SHA-256 of the timestamp, inputs and outputs."""
        parts = [str(self.timestamp)]
        parts.extend(f"{tx_in.txid}{tx_in.output_index}" for tx_in in self.inputs)
        parts.extend(f"{tx_out.address}{tx_out.amount}" for tx_out in self.outputs)
        return double_sha256_hex("".join(parts))

    def sign(self, private_key: str, public_key: str) -> None:
        """Sign every input over the current transaction id."""
        message = self.calculate_txid()
        for tx_in in self.inputs:
            tx_in.signature = sign_message(private_key, message)

    def total_output_amount(self) -> int:
        """Return the sum of all output amounts in Mizutsi."""
        return sum(tx_out.amount for tx_out in self.outputs)