"""Configuration constants for flow-project-config library."""

DEFAULT_CONFIG_FILENAME = "flow.json"

# Environment variables
CONFIG_PATH_ENV = "FLOW_CONFIG_PATH"
STAGING_ADDRESS_ENV_PREFIX = "FLOW_STAGING_ADDRESS_"

# Well-known networks, used to fill in chain ids and defaults for new projects
KNOWN_NETWORKS = {
    "emulator": {
        "host": "127.0.0.1:3569",
        "chain_id": "flow-emulator",
    },
    "testnet": {
        "host": "access.devnet.nodes.onflow.org:9000",
        "chain_id": "flow-testnet",
    },
    "mainnet": {
        "host": "access.mainnet.nodes.onflow.org:9000",
        "chain_id": "flow-mainnet",
    },
}

# Service account of the emulator chain
EMULATOR_ACCOUNT_NAME = "emulator-account"
EMULATOR_NETWORK_NAME = "emulator"
EMULATOR_SERVICE_ADDRESS = "f8d6e0586b0a20c1"

DEFAULT_SIG_ALGO = "ECDSA_P256"
DEFAULT_HASH_ALGO = "SHA3_256"

# Defaults for StagingSettings; resolution code never reads this table directly
DEFAULT_STAGING_ADDRESSES = {
    "testnet": "0x2ceae959ed1a7e7a",
    "crescendo": "0x27b2302520211b67",
}

# Key algorithms accepted for the service account of a new project
SIGNATURE_ALGORITHMS = ("ECDSA_P256", "ECDSA_secp256k1", "BLS_BLS12_381")
HASH_ALGORITHMS = ("SHA2_256", "SHA2_384", "SHA3_256", "SHA3_384", "KMAC128", "Keccak_256")
