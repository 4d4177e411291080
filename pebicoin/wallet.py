"""A file-backed wallet holding key pairs, a balance and spending logic."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from collections.abc import Iterable

from .transaction import Transaction, TransactionInput, TransactionOutput

_log = logging.getLogger(__name__)

_PLACEHOLDER_TXID = "0" * 64


@dataclass
class KeyPair:
    """A hex private key, its hex public key and the address they back."""

    private_key: str
    public_key: str
    address: str = ""


class WalletError(Exception):
    """Raised when the wallet file is unusable or a spend is not possible."""


class Wallet:
    """Key pairs stored as JSON in a wallet file, keyed by address."""

    def __init__(self, filename: str | Path = "wallet.dat") -> None:
        self.path = Path(filename)
        self._key_pairs: dict[str, KeyPair] = {}
        self._balance = 0
        if not self.load():
            _log.info("Creating new wallet file: %s", filename)

    def __enter__(self) -> Wallet:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.save()

    def save(self) -> None:
        """Write all key pairs to the wallet file."""
        document = {
            "keys": [
                {
                    "address": address,
                    "private_key": pair.private_key,
                    "public_key": pair.public_key,
                }
                for address, pair in sorted(self._key_pairs.items())
            ]
        }
        try:
            self.path.write_text(json.dumps(document, indent=4), encoding="utf-8")
        except OSError as exc:
            raise WalletError(f"Failed to open wallet file for writing: {self.path}") from exc

    def load(self) -> bool:
        """Read key pairs from the wallet file; return False if it does not exist."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise WalletError(f"Error loading wallet: {exc}") from exc
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise WalletError(f"Error loading wallet: {exc}") from exc
        keys = document.get("keys") if isinstance(document, dict) else None
        if isinstance(keys, list):
            for entry in keys:
                try:
                    address = entry["address"]
                    pair = KeyPair(entry["private_key"], entry["public_key"], address)
                except (KeyError, TypeError) as exc:
                    raise WalletError(f"Error loading wallet: bad key entry {entry!r}") from exc
                self._key_pairs[address] = pair
        return True

    def add_key_pair(self, address: str, key_pair: KeyPair) -> None:
        """Store a key pair under ``address`` and save the wallet."""
        self._key_pairs[address] = KeyPair(key_pair.private_key, key_pair.public_key, address)
        self.save()

    def addresses(self) -> list[str]:
        """Return the wallet's addresses in sorted order."""
        return sorted(self._key_pairs)

    def has_private_key(self, address: str) -> bool:
        """Return whether the wallet holds the key for ``address``."""
        return address in self._key_pairs

    def balance(self) -> int:
        """Return the last computed balance in Mizutsi."""
        return self._balance

    def update_balance(self, transactions: Iterable[Transaction]) -> None:
        """Recompute the balance from outputs paid to the wallet's addresses."""
        ours = set(self._key_pairs)
        self._balance = sum(
            tx_out.amount
            for tx in transactions
            for tx_out in tx.outputs
            if tx_out.address in ours
        )

    def create_transaction(
        self, from_address: str, to_address: str, amount: int, fee: int
    ) -> Transaction:
        """Build an unsigned payment, with change back to ``from_address``."""
        if not self.has_private_key(from_address):
            raise WalletError("Cannot create transaction: private key not found for address")
        if self._balance < amount + fee:
            raise WalletError("Insufficient balance for transaction")
        tx = Transaction()
        tx.inputs.append(TransactionInput(_PLACEHOLDER_TXID, 0))
        tx.outputs.append(TransactionOutput(to_address, amount))
        if self._balance > amount + fee:
            tx.outputs.append(TransactionOutput(from_address, self._balance - amount - fee))
        return tx

    def sign_transaction(self, transaction: Transaction, from_address: str) -> None:
        """Sign ``transaction`` with the key held for ``from_address``."""
        pair = self._key_pairs.get(from_address)
        if pair is None:
            raise WalletError(f"No private key for address: {from_address}")
        transaction.sign(pair.private_key, pair.public_key)