"""Network-wide constants for the Pebicoin chain."""

COIN_NAME = "Pebicoin"
COIN_TICKER = "PBC"
GENESIS_BLOCK_DATE = "June 21, 2025"

# Timing and difficulty.
BLOCK_TIME = 10 * 60  # target seconds per block
HALVING_INTERVAL = 170 * 1000  # blocks between reward halvings
STARTING_DIFFICULTY = 0x1D00FFFF
DIFFICULTY_ADJUSTMENT_INTERVAL = 2016  # roughly two weeks of blocks

# Rewards and supply, expressed in whole coins.
INITIAL_BLOCK_REWARD = 50
MAX_SUPPLY = 17 * 10**6

# The base unit, the Mizutsi, is this fraction of a coin.
MIZUTSI_PER_PBC = 10**8

P2P_PORT = 24444

_SEED_SUFFIXES = ("", "1", "2", "3", "4", "6", "7", "8")

SEED_NODES: tuple[str, ...] = tuple(
    f"pebicoin-seed{suffix}.fly.dev" for suffix in _SEED_SUFFIXES
)