# Suppress websockets deprecation warning from web3.py (ethereum/web3.py#3530)
# web3.py unconditionally imports LegacyWebSocketProvider even for HTTP-only usage.
# This will be fixed in web3.py v8. Remove this filter after upgrading.
import warnings

warnings.filterwarnings(
    "ignore",
    message="websockets.legacy is deprecated",
    category=DeprecationWarning,
    module=r"websockets\.legacy",
)

"""
Smart Account Address

Predict the deployment address of a factory-deployed smart account.
EVM chains ask the factory contract; ZKSync chains are computed offline.

Usage (async client):
    import asyncio
    from smart_account_address import AsyncSmartAccountClient

    async def main():
        client = AsyncSmartAccountClient()
        report = await client.resolve(
            factory="0x1234...",
            implementation="0x5678...",
            salt="my-salt",
            owner="0x9abc...",
            chain_id=324,
        )
        print(report.account_address)

    asyncio.run(main())

Offline ZKSync computation:
    from smart_account_address import compute_zksync_account_address, hash_salt

    address = compute_zksync_account_address(factory, implementation, owner, hash_salt("my-salt"))

Command line:
    smart-account-address <factory> <implementation> <salt> <owner> [chainId] [rpcUrl]
"""

from ._exceptions import (
    ChainNotSupportedError,
    ConfigurationError,
    EncodingError,
    InvalidArgumentCountError,
    MalformedAddressError,
    MissingOwnerAddressError,
    NetworkError,
    SmartAccountAddressError,
)
from ._version import __version__

# ABIs (for advanced usage)
from .abi import SMART_ACCOUNT_FACTORY_ABI

# Async client
from .async_client import AsyncSmartAccountClient

# Async helpers (for use with AsyncWeb3)
from .async_helpers import get_address_with_nonce, prepare_factory_arguments

# Chain registry
from .chains import DEFAULT_CHAINS, ChainRegistry

# Constants
from .constants import (
    DEFAULT_CHAIN_ID,
    ZKSYNC_CHAIN_IDS,
    ZKSYNC_CREATE2_PREFIX,
    ZKSYNC_PROXY_BYTECODE_HASH,
    classify_chain,
    is_zksync_chain,
)
from .encoding import encode_params, hash_salt, to_address

# Resolvers
from .resolvers import (
    AddressResolver,
    ContractCaller,
    ContractCallerFactory,
    EvmAddressResolver,
    ZkSyncAddressResolver,
    web3_contract_caller,
)

# Types
from .types import AddressReport, AddressRequest, ChainConfig, ChainType, NativeCurrency

# Offline ZKSync derivation
from .zksync import compute_zksync_account_address, compute_zksync_create2_address

__all__ = [
    # Version
    "__version__",
    # Client
    "AsyncSmartAccountClient",
    # Resolvers
    "AddressResolver",
    "EvmAddressResolver",
    "ZkSyncAddressResolver",
    "ContractCaller",
    "ContractCallerFactory",
    "web3_contract_caller",
    # Types
    "AddressReport",
    "AddressRequest",
    "ChainConfig",
    "ChainType",
    "NativeCurrency",
    # Chains
    "ChainRegistry",
    "DEFAULT_CHAINS",
    # Constants
    "DEFAULT_CHAIN_ID",
    "ZKSYNC_CHAIN_IDS",
    "ZKSYNC_CREATE2_PREFIX",
    "ZKSYNC_PROXY_BYTECODE_HASH",
    "classify_chain",
    "is_zksync_chain",
    # Helpers
    "hash_salt",
    "to_address",
    "encode_params",
    "prepare_factory_arguments",
    "get_address_with_nonce",
    "compute_zksync_account_address",
    "compute_zksync_create2_address",
    # ABIs
    "SMART_ACCOUNT_FACTORY_ABI",
    # Exceptions
    "SmartAccountAddressError",
    "ConfigurationError",
    "InvalidArgumentCountError",
    "MissingOwnerAddressError",
    "ChainNotSupportedError",
    "MalformedAddressError",
    "NetworkError",
    "EncodingError",
]
