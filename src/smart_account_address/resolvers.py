"""Address resolvers: one per chain type, selected once from the chain classification."""

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Awaitable, Callable

from eth_typing import ChecksumAddress
from web3 import AsyncWeb3

from .async_helpers import get_address_with_nonce
from .types import ChainConfig, ChainType
from .zksync import compute_zksync_account_address

# (factory, owner, salt_hash) -> account address, computed by the factory contract
ContractCaller = Callable[[str, str, bytes], Awaitable[ChecksumAddress]]

# (chain, rpc_url override) -> scoped contract-call channel for that chain
ContractCallerFactory = Callable[[ChainConfig, str | None], AsyncContextManager[ContractCaller]]


@asynccontextmanager
async def web3_contract_caller(chain: ChainConfig, rpc_url: str | None = None) -> AsyncIterator[ContractCaller]:
    """Open an AsyncWeb3 HTTP connection for one resolution and close it afterwards."""
    w3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(rpc_url or chain.rpc_url))

    async def call(factory: str, owner: str, salt_hash: bytes) -> ChecksumAddress:
        return await get_address_with_nonce(w3, factory, owner, salt_hash, chain_id=chain.chain_id)

    try:
        yield call
    finally:
        await w3.provider.disconnect()


class AddressResolver(ABC):
    """Computes the account address for (factory, implementation, owner, salt_hash)."""

    chain_type: ChainType

    @abstractmethod
    async def resolve(
        self,
        factory: str,
        implementation: str,
        owner: str,
        salt_hash: bytes,
    ) -> ChecksumAddress:
        """Resolve the account address."""


class ZkSyncAddressResolver(AddressResolver):
    """Offline CREATE2 computation for ZKSync-family chains. Never suspends."""

    chain_type: ChainType = "ZKSync"

    def compute(self, factory: str, implementation: str, owner: str, salt_hash: bytes) -> ChecksumAddress:
        return compute_zksync_account_address(factory, implementation, owner, salt_hash)

    async def resolve(
        self,
        factory: str,
        implementation: str,
        owner: str,
        salt_hash: bytes,
    ) -> ChecksumAddress:
        return self.compute(factory, implementation, owner, salt_hash)


class EvmAddressResolver(AddressResolver):
    """
    Delegates address computation to the factory's getAddressWithNonce.

    The implementation address is not sent: the factory already knows it.
    """

    chain_type: ChainType = "EVM"

    def __init__(self, caller: ContractCaller) -> None:
        self.caller = caller

    async def resolve(
        self,
        factory: str,
        implementation: str,
        owner: str,
        salt_hash: bytes,
    ) -> ChecksumAddress:
        return await self.caller(factory, owner, salt_hash)
