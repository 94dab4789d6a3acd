"""Protocol constants and chain classification for smart-account-address."""

from .types import ChainType

# keccak256("zksyncCreate2"), the domain separator of ZKSync's CREATE2 preimage.
ZKSYNC_CREATE2_PREFIX = bytes.fromhex("2020dba91b30cc0006188af794c2fb30dd8520db7e2c088b7fc7c103c00ca494")

# Bytecode hash of the account proxy deployed by the factory on ZKSync.
# Must be updated together with the on-chain proxy implementation.
ZKSYNC_PROXY_BYTECODE_HASH = bytes.fromhex("010000a505a8e771299c39236e5ae06861f782f4b9ddcd7ad958faa01720094d")

# ZKSync-family chain IDs (addresses are computed offline)
ZKSYNC_CHAIN_IDS: frozenset[int] = frozenset(
    {
        324,  # ZKSync Era mainnet
        300,  # ZKSync Era Sepolia
        280,  # ZKSync Era Goerli (legacy)
    }
)

# Ethereum mainnet
DEFAULT_CHAIN_ID = 1

# Request timeout for the factory call, in seconds
DEFAULT_REQUEST_TIMEOUT = 30.0

# Upper bound on in-flight factory calls in batch mode
DEFAULT_MAX_CONCURRENCY = 8


def is_zksync_chain(chain_id: int) -> bool:
    """Check if a chain uses ZKSync address derivation."""
    return chain_id in ZKSYNC_CHAIN_IDS


def classify_chain(chain_id: int) -> ChainType:
    """
    Classify a chain by its address derivation strategy.

    Never fails: any chain not in ZKSYNC_CHAIN_IDS, known or not, is EVM.
    """
    return "ZKSync" if is_zksync_chain(chain_id) else "EVM"
