"""
Indexer constants.

Centralized defaults for the indexing loop, RPC access and logging.
"""

# ========================================================================
# INDEXING LOOP
# ========================================================================

# Delay between successful iterations (in seconds)
INDEXER_POLL_INTERVAL = 2.0

# Delay after a failed iteration before retrying (in seconds)
INDEXER_ERROR_BACKOFF = 3.0

# Singleton checkpoint row id in indexer_state
CHECKPOINT_ROW_ID = 1

# ========================================================================
# BLOCKCHAIN CONSTANTS
# ========================================================================

# Per-call RPC timeout (in seconds)
RPC_TIMEOUT = 30.0

# Local development chain (hardhat/anvil default)
DEFAULT_RPC_URL = "http://127.0.0.1:8545"

# Contracts deployed on the local development chain, in scan order.
# MockMantle, OligToken, GameStore, VeOlig, OligVoter, RegionFarm, WarTheater.
# GameStore and OligVoter share an address there; duplicates are dropped
# when the list is parsed.
DEFAULT_CONTRACT_ADDRESSES = ",".join(
    [
        "0x5FbDB2315678afecb367f032d93F642f64180aa3",
        "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512",
        "0x9fE46736679d2D9a65F0992F2272dE9f3c7fa6e0",
        "0xCf7Ed3AccA5a467e9e704C703E8D87F634fB0Fc9",
        "0x9fE46736679d2D9a65F0992F2272dE9f3c7fa6e0",
        "0x5FC8d32690cc91D4c39d9d3abcBD16989F875707",
        "0x0165878A594ca255338adfa4d48449f69242Eb8F",
    ]
)

# ========================================================================
# LOGGING
# ========================================================================

LOG_FILE = "logs/indexer.log"
LOG_ROTATION = "1 day"
LOG_RETENTION = "7 days"
