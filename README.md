# pebicoin

A small proof-of-work cryptocurrency in Python. It provides a blockchain
whose blocks are hashed with double SHA-256, a miner that can search for
nonces on several threads, a seed node that accepts blocks from peers over
TCP, Base58Check-style addresses with the `Pbc` prefix, ECDSA signing on
secp256k1, transactions, and a JSON key wallet.

## Coin parameters

These live in `pebicoin.config`.

| Parameter            | Value                        |
|----------------------|------------------------------|
| Name / ticker        | Pebicoin (PBC)               |
| Genesis date         | June 21, 2025                |
| Block time           | 600 seconds                  |
| Initial reward       | 50 PBC                       |
| Halving interval     | every 170000 blocks          |
| Maximum supply       | 17000000 PBC                 |
| Base unit            | 1 PBC = 100000000 Mizutsi    |
| Peer port            | 24444                        |

Difficulty is the number of leading `0` characters a block's hex hash must
have. A new `Blockchain` starts at `STARTING_DIFFICULTY` (`0x1D00FFFF`),
far more zeros than a 64-character hash can hold, so mining at that
difficulty never finishes. `Blockchain.difficulty` is a plain attribute and
can be lowered for experiments, as in the examples below.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

### `pebicoin`

```
pebicoin help              # show the list of commands
pebicoin info              # print blockchain information
pebicoin mine <address>    # mine one block paying the reward to <address>
pebicoin seed              # run a seed node on port 24444
```

Every run starts from a fresh chain holding only the genesis block. After
`mine`, the new block is sent as a JSON message to each node in
`config.SEED_NODES`. A seed node listens on port 24444 and appends a received
block when its previous hash and index follow the tip of its chain; it does
not check the block's proof of work. `createwallet` and `balance <address>`
only print a message pointing to the wallet tools.

### `pebiminer`

```
pebiminer --address=<addr> [--threads=<num>]
pebiminer --help
```

Mines blocks to the given address until interrupted with Ctrl+C, printing
running statistics after each block. `--address` is required; `--threads`
defaults to 1.

### `pebicoin-keygen`

```
pebicoin-keygen
```

Generates a fresh secp256k1 key pair and prints the private key, the
compressed public key (both upper-case hex) and a hex address made of a
zero version byte, the HASH160 of the key and a four-byte checksum.

## Library use

Mining onto a chain:

```python
from pebicoin.blockchain import Blockchain
from pebicoin.miner import Miner
from pebicoin.utils import format_amount, format_amount_with_unit

chain = Blockchain()
chain.difficulty = 2

miner = Miner()
block = miner.mine_block(chain, "PbcExampleAddress")
print(block.hash, block.nonce)
print(chain.last_block.index)          # 1
print(chain.is_chain_valid())          # True

print(miner.block_reward(0))           # 5000000000 (Mizutsi)
print(format_amount(5_000_000_000))    # 50.00000000 PBC
print(format_amount_with_unit(250))    # 2.500 μPBC
```

`Blockchain.add_block` raises `InvalidBlockError` when a block does not link
to the tip or does not meet the difficulty. `Miner.mine_block_multithreaded`
mines with several threads sharing one nonce counter.

Addresses and Base58:

```python
from pebicoin.address import decode_address, generate_address, validate_address
from pebicoin.base58 import base58_decode, base58_encode

print(base58_encode(b"\x00\x01"))      # 12
assert base58_decode("12") == b"\x00\x01"

address = generate_address("02" + "11" * 32)   # hex text or bytes
assert address.startswith("Pbc")
assert validate_address(address)
version, key_hash = decode_address(address)    # 0x37, 20-byte hash
```

Signing and verifying a message:

```python
from pebicoin.signer import sign_message, verify_signature
from pebicoin.simple_wallet import generate_key_pair

private_key_hex, public_key_hex = generate_key_pair()
signature = sign_message(private_key_hex, "hello")
assert verify_signature(public_key_hex, "hello", signature)
```

A wallet holding a key, and a signed payment:

```python
from pebicoin.address import generate_address
from pebicoin.simple_wallet import generate_key_pair
from pebicoin.transaction import Transaction, TransactionOutput
from pebicoin.wallet import KeyPair, Wallet

private_key_hex, public_key_hex = generate_key_pair()
address = generate_address(public_key_hex)

with Wallet("example_wallet.dat") as wallet:   # saved as JSON on exit
    wallet.add_key_pair(address, KeyPair(private_key_hex, public_key_hex))
    wallet.update_balance([Transaction(outputs=[TransactionOutput(address, 1_000)])])
    tx = wallet.create_transaction(address, "PbcRecipient", 600, 100)
    wallet.sign_transaction(tx, address)
    print(tx.total_output_amount())            # 900: payment plus change
```

`pebicoin.records` offers a `TransactionTable` of `TransactionRecord` rows,
newest first, with `display_row` giving the date, type, address, amount and
status cells, plus `format_pbc`, `format_mizutsi`, `pbc_to_mizutsi` and
`mizutsi_to_pbc`.

## What the package does not do

- There is no graphical wallet; `pebicoin.records` only prepares data a
  front end would show.
- Chains live in memory only. Neither the commands nor the seed node store
  blocks, and a seed node does not send its chain to others.
- `Wallet` does not generate keys itself; keys are added with
  `add_key_pair`. Its balance counts only outputs paid to its addresses,
  never spends, and `create_transaction` uses a placeholder input instead of
  real unspent outputs.
- Transactions can be signed but not verified, and there is no input total
  or fee calculation.