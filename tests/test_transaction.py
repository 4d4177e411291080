import time

from pebicoin.hashing import double_sha256_hex
from pebicoin.signer import verify_signature
from pebicoin.transaction import Transaction, TransactionInput, TransactionOutput

PRIVATE_ONE = "00" * 31 + "01"
G_COMPRESSED = "0279BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798"


def test_empty_transaction_txid_hashes_timestamp():
    tx = Transaction(timestamp=5)
    assert tx.txid == double_sha256_hex("5")


def test_txid_covers_inputs_and_outputs():
    tx = Transaction(
        [TransactionInput("ab", 1)],
        [TransactionOutput("Pbcx", 250)],
        timestamp=5,
    )
    assert tx.txid == double_sha256_hex("5ab1Pbcx250")


def test_txid_changes_with_outputs():
    base = Transaction([], [TransactionOutput("a", 1)], timestamp=10)
    other = Transaction([], [TransactionOutput("a", 2)], timestamp=10)
    assert base.txid != other.txid
    assert base.txid == base.calculate_txid()


def test_explicit_txid_is_kept():
    tx = Transaction(timestamp=1, txid="given")
    assert tx.txid == "given"


def test_default_timestamp_is_now():
    before = int(time.time())
    tx = Transaction()
    after = int(time.time())
    assert before <= tx.timestamp <= after


def test_total_output_amount():
    tx = Transaction(
        outputs=[TransactionOutput("a", 100), TransactionOutput("b", 250)], timestamp=1
    )
    assert tx.total_output_amount() == 350


def test_total_output_amount_empty():
    assert Transaction(timestamp=1).total_output_amount() == 0


def test_sign_sets_verifiable_signature_on_every_input():
    tx = Transaction(
        [TransactionInput("aa", 0), TransactionInput("bb", 3)],
        [TransactionOutput("dest", 42)],
        timestamp=100,
    )
    tx.sign(PRIVATE_ONE, G_COMPRESSED)
    message = tx.calculate_txid()
    assert all(tx_in.signature for tx_in in tx.inputs)
    for tx_in in tx.inputs:
        assert verify_signature(G_COMPRESSED, message, tx_in.signature) is True


def test_sign_without_inputs_leaves_nothing_signed():
    tx = Transaction(outputs=[TransactionOutput("dest", 1)], timestamp=1)
    tx.sign(PRIVATE_ONE, G_COMPRESSED)
    assert tx.inputs == []