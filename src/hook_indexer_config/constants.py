"""Configuration constants for hook-indexer-config library."""

# Network configuration based on ethereum-lists/chains
NETWORK_CONFIG = {
    "unichain": {
        "chain_id": 130,
        "default_rpc_env": "UNICHAIN_RPC_URL",
        "default_rpc_url": "http://127.0.0.1:8545",
        "disable_cache": True,
    },
}

DEFAULT_NETWORK = "unichain"

# Uniswap v4 singleton, same address on every chain it is deployed to
POOL_MANAGER_ADDRESS = "0x1F98400000000000000000000000000000000004"
POOL_MANAGER_START_BLOCK = 27859493  # 0x1a91a25

# Start block the indexer has historically been pinned to for both contracts
PINNED_START_BLOCK = 28799000  # 0x1b77018
PINNED_START_BLOCK_ENV = "INDEXER_PINNED_START_BLOCK"

# Foundry broadcast script that deploys the async-swap hook
HOOK_DEPLOY_SCRIPT = "01_DeployHook.s.sol"

# Logical contract name -> ABI file stem under abis/
CONTRACT_ABIS = {
    "PoolManager": "PoolManager",
    "CsmmHook": "AsyncSwap",
}
