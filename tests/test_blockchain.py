import time

import pytest

from pebicoin.block import Block
from pebicoin.blockchain import Blockchain, InvalidBlockError
from pebicoin.config import BLOCK_TIME, DIFFICULTY_ADJUSTMENT_INTERVAL, STARTING_DIFFICULTY


def next_block(chain, data="tx", offset=1, difficulty=None):
    last = chain.last_block
    block = Block(last.index + 1, last.timestamp + offset, data, 0, last.hash)
    block.mine_block(chain.difficulty if difficulty is None else difficulty)
    return block


def test_genesis_block():
    chain = Blockchain()
    genesis = chain.chain[0]
    assert len(chain.chain) == 1
    assert genesis.index == 0
    assert genesis.previous_hash == "0"
    assert genesis.data == "Genesis Block - Pebicoin"
    assert genesis.nonce == 0
    assert genesis.hash == genesis.calculate_hash()


def test_genesis_date():
    chain = Blockchain()
    local = time.localtime(chain.chain[0].timestamp)
    assert (local.tm_year, local.tm_mon, local.tm_mday) == (2025, 6, 21)
    assert chain.last_difficulty_adjustment_time == chain.chain[0].timestamp


def test_starting_difficulty():
    assert Blockchain().difficulty == STARTING_DIFFICULTY


def test_last_block_is_tip():
    chain = Blockchain()
    chain.difficulty = 1
    block = next_block(chain)
    chain.add_block(block)
    assert chain.last_block is block


def test_add_block_rejects_wrong_previous_hash():
    chain = Blockchain()
    chain.difficulty = 0
    block = Block(1, 0, "tx", 0, "not-the-tip")
    with pytest.raises(InvalidBlockError):
        chain.add_block(block)
    assert len(chain.chain) == 1


def test_add_block_rejects_unmet_difficulty():
    chain = Blockchain()
    chain.difficulty = 1
    last = chain.last_block
    block = Block(1, 0, "tx", 0, last.hash)
    while block.hash.startswith("0"):
        block.nonce += 1
        block.hash = block.calculate_hash()
    with pytest.raises(InvalidBlockError):
        chain.add_block(block)
    assert len(chain.chain) == 1


def test_huge_difficulty_is_never_met():
    chain = Blockchain()
    block = Block(1, 0, "tx", 0, chain.last_block.hash, hash="0" * 64)
    with pytest.raises(InvalidBlockError):
        chain.add_block(block)


def test_chain_valid_after_adds():
    chain = Blockchain()
    chain.difficulty = 1
    for n in range(3):
        chain.add_block(next_block(chain, data=f"tx{n}"))
    assert len(chain.chain) == 4
    assert chain.is_chain_valid()


def test_single_genesis_chain_is_valid():
    assert Blockchain().is_chain_valid()


def test_tampered_data_invalidates_chain():
    chain = Blockchain()
    chain.difficulty = 1
    chain.add_block(next_block(chain))
    chain.add_block(next_block(chain))
    chain.chain[1].data = "tampered"
    assert not chain.is_chain_valid()


def test_broken_link_invalidates_chain():
    chain = Blockchain()
    chain.difficulty = 1
    chain.add_block(next_block(chain))
    chain.add_block(next_block(chain))
    bad = chain.chain[2]
    bad.previous_hash = "x"
    bad.hash = bad.calculate_hash()
    assert not chain.is_chain_valid()


def test_raised_difficulty_invalidates_chain():
    chain = Blockchain()
    chain.difficulty = 1
    chain.add_block(next_block(chain))
    chain.difficulty = 64
    assert not chain.is_chain_valid()


def test_adjust_difficulty_increases_when_fast():
    chain = Blockchain()
    chain.difficulty = 3
    chain.last_difficulty_adjustment_time = chain.last_block.timestamp
    chain.adjust_difficulty()
    assert chain.difficulty == 4


def test_adjust_difficulty_decreases_when_slow():
    chain = Blockchain()
    chain.difficulty = 3
    expected = DIFFICULTY_ADJUSTMENT_INTERVAL * BLOCK_TIME
    chain.last_difficulty_adjustment_time = chain.last_block.timestamp - expected * 4 - 1
    chain.adjust_difficulty()
    assert chain.difficulty == 2
    assert chain.last_difficulty_adjustment_time == chain.last_block.timestamp


def test_adjust_difficulty_never_below_one():
    chain = Blockchain()
    chain.difficulty = 1
    expected = DIFFICULTY_ADJUSTMENT_INTERVAL * BLOCK_TIME
    chain.last_difficulty_adjustment_time = chain.last_block.timestamp - expected * 10
    chain.adjust_difficulty()
    assert chain.difficulty == 1


def test_adjust_difficulty_keeps_on_schedule():
    chain = Blockchain()
    chain.difficulty = 3
    expected = DIFFICULTY_ADJUSTMENT_INTERVAL * BLOCK_TIME
    chain.last_difficulty_adjustment_time = chain.last_block.timestamp - expected
    chain.adjust_difficulty()
    assert chain.difficulty == 3


def test_adjustment_runs_at_interval():
    chain = Blockchain()
    chain.difficulty = 0
    for _ in range(DIFFICULTY_ADJUSTMENT_INTERVAL - 2):
        chain.add_block(next_block(chain, difficulty=0))
    assert chain.difficulty == 0
    chain.add_block(next_block(chain, difficulty=0))
    assert len(chain.chain) == DIFFICULTY_ADJUSTMENT_INTERVAL
    assert chain.difficulty == 1
    assert chain.last_difficulty_adjustment_time == chain.last_block.timestamp