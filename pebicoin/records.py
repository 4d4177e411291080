"""Wallet-facing views of transactions and amount conversion helpers."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime

from .config import MIZUTSI_PER_PBC
from .transaction import Transaction

COLUMNS: tuple[str, ...] = ("Date", "Type", "Address", "Amount", "Status")

_DATE_FORMAT = "%Y-%m-%d %H:%M"


def format_pbc(amount: int) -> str:
    """Format Mizutsi as PBC with eight decimals."""
    return f"{mizutsi_to_pbc(amount):.8f} PBC"


def format_mizutsi(amount: int) -> str:
    """Format an amount in its base unit."""
    return f"{amount} Mizutsi"


def pbc_to_mizutsi(pbc: float) -> int:
    """Convert PBC to Mizutsi, rounding halves away from zero."""
    scaled = pbc * float(MIZUTSI_PER_PBC)
    return int(math.copysign(math.floor(abs(scaled) + 0.5), scaled))


def mizutsi_to_pbc(mizutsi: int) -> float:
    """Convert Mizutsi to PBC."""
    return mizutsi / float(MIZUTSI_PER_PBC)


@dataclass
class TransactionRecord:
    """One transaction as seen from a single wallet address."""

    txid: str = ""
    timestamp: datetime | None = None
    type: str = ""
    address: str = ""
    amount: int = 0
    confirmed: bool = False

    @classmethod
    def from_transaction(
        cls, tx: Transaction, wallet_address: str, confirmed: bool = False
    ) -> TransactionRecord:
        """Classify ``tx`` as sent or received relative to ``wallet_address``.

        The first output paid to the wallet address makes it a receipt;
        otherwise the last output names the recipient of a payment.
        """
        is_send = False
        address = ""
        amount = 0
        for tx_out in tx.outputs:
            address = tx_out.address
            amount = tx_out.amount
            if tx_out.address == wallet_address:
                is_send = False
                break
            is_send = True
        return cls(
            txid=tx.txid,
            timestamp=datetime.fromtimestamp(tx.timestamp),
            type="Sent" if is_send else "Received",
            address=address,
            amount=amount,
            confirmed=confirmed,
        )


class TransactionTable:
    """Transaction records, newest first."""

    def __init__(self) -> None:
        self._records: list[TransactionRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TransactionRecord]:
        return iter(self._records)

    def add_transaction(self, tx: Transaction, wallet_address: str) -> TransactionRecord:
        """Insert ``tx`` at the top as seen from ``wallet_address``."""
        record = TransactionRecord.from_transaction(tx, wallet_address)
        self.add_record(record)
        return record

    def add_record(self, record: TransactionRecord) -> None:
        """Insert ``record`` at the top of the table."""
        self._records.insert(0, record)

    def clear(self) -> None:
        """Remove every record."""
        self._records.clear()

    def get_transaction(self, index: int) -> TransactionRecord:
        """Return the record at ``index``, or an empty record when out of range."""
        if 0 <= index < len(self._records):
            return self._records[index]
        return TransactionRecord()

    def recent(self, count: int) -> list[TransactionRecord]:
        """Return up to ``count`` of the newest records."""
        return self._records[: max(count, 0)]

    def display_row(self, index: int) -> tuple[str, str, str, str, str]:
        """Return the displayed cells of a row, in the order of ``COLUMNS``."""
        if not 0 <= index < len(self._records):
            raise IndexError(f"row {index} out of range")
        record = self._records[index]
        date = record.timestamp.strftime(_DATE_FORMAT) if record.timestamp else ""
        return (
            date,
            record.type,
            record.address,
            format_pbc(record.amount),
            "Confirmed" if record.confirmed else "Pending",
        )