"""Async high-level client for smart account address resolution."""

import asyncio
import logging
import os
from typing import Iterable

from eth_typing import ChecksumAddress

from ._exceptions import ConfigurationError, MissingOwnerAddressError, NetworkError
from .async_helpers import prepare_factory_arguments
from .chains import ChainRegistry
from .constants import DEFAULT_CHAIN_ID, DEFAULT_MAX_CONCURRENCY, DEFAULT_REQUEST_TIMEOUT, classify_chain
from .encoding import hash_salt, to_address
from .resolvers import (
    ContractCallerFactory,
    EvmAddressResolver,
    ZkSyncAddressResolver,
    web3_contract_caller,
)
from .types import AddressReport, AddressRequest

logger = logging.getLogger(__name__)


class AsyncSmartAccountClient:
    """
    Async high-level client for predicting smart account addresses.

    ZKSync-family chains are resolved offline. Every other chain is resolved by one
    read-only call to the factory, using the registry to find the chain's RPC endpoint.

    Example:
        >>> import asyncio
        >>> from smart_account_address import AsyncSmartAccountClient
        >>>
        >>> async def main():
        ...     client = AsyncSmartAccountClient()
        ...     report = await client.resolve(
        ...         factory="0x1234...",
        ...         implementation="0x5678...",
        ...         salt="my-salt",
        ...         owner="0x9abc...",
        ...         chain_id=8453,
        ...     )
        ...     print(report.account_address)
        >>>
        >>> asyncio.run(main())
    """

    def __init__(
        self,
        registry: ChainRegistry | None = None,
        rpc_url: str | None = None,
        caller_factory: ContractCallerFactory | None = None,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    ) -> None:
        """
        Initialize the client.

        Args:
            registry: Chain registry (defaults to ChainRegistry.default())
            rpc_url: RPC endpoint override for the EVM path. Falls back to
                SMART_ACCOUNT_RPC_URL env var, then to the chain's default endpoint.
            caller_factory: Opens a contract-call channel for a chain (defaults to AsyncWeb3 over HTTP)
            request_timeout: Seconds allowed for each factory call
            max_concurrency: Maximum in-flight resolutions in resolve_many

        Raises:
            ConfigurationError: If request_timeout or max_concurrency is not positive
        """
        if request_timeout <= 0:
            raise ConfigurationError(f"request_timeout must be positive, got {request_timeout}")
        if max_concurrency < 1:
            raise ConfigurationError(f"max_concurrency must be at least 1, got {max_concurrency}")

        self.registry = registry if registry is not None else ChainRegistry.default()
        self.rpc_url = rpc_url or os.environ.get("SMART_ACCOUNT_RPC_URL") or None
        self.caller_factory: ContractCallerFactory = caller_factory or web3_contract_caller
        self.request_timeout = request_timeout
        self.max_concurrency = max_concurrency

    async def resolve(
        self,
        factory: str,
        implementation: str,
        salt: str,
        owner: str | None,
        chain_id: int = DEFAULT_CHAIN_ID,
    ) -> AddressReport:
        """
        Resolve the smart account address for a salt and owner.

        Args:
            factory: Smart account factory address
            implementation: Account implementation address
            salt: Arbitrary salt string
            owner: Account owner address
            chain_id: Chain ID (defaults to Ethereum mainnet)

        Returns:
            AddressReport with the checksummed account address and salt hash

        Raises:
            MissingOwnerAddressError: If owner is empty
            MalformedAddressError: If any address is not 20 bytes
            ChainNotSupportedError: If an EVM chain is not in the registry
            NetworkError: If the factory call fails or times out
        """
        chain_type = classify_chain(chain_id)
        if not owner:
            raise MissingOwnerAddressError(chain_type)

        factory_address = to_address(factory, "factory")
        implementation_address = to_address(implementation, "implementation")

        logger.info("Using %s address calculation for chain %d", chain_type, chain_id)

        if chain_type == "ZKSync":
            owner_address = to_address(owner, "owner")
            salt_hash = hash_salt(salt)
            account_address = await ZkSyncAddressResolver().resolve(
                factory_address,
                implementation_address,
                owner_address,
                salt_hash,
            )
        else:
            salt_hash, owner_address = prepare_factory_arguments(salt, owner)
            account_address = await self._resolve_evm(
                chain_id,
                factory_address,
                implementation_address,
                owner_address,
                salt_hash,
            )

        return AddressReport(
            factory=factory_address,
            implementation=implementation_address,
            salt=salt,
            owner=owner_address,
            chain_id=chain_id,
            chain_type=chain_type,
            salt_hash="0x" + salt_hash.hex(),
            account_address=account_address,
        )

    async def resolve_many(
        self,
        requests: Iterable[AddressRequest],
        chain_id: int = DEFAULT_CHAIN_ID,
    ) -> list[AddressReport]:
        """
        Resolve many requests on one chain concurrently.

        At most max_concurrency resolutions run at once. Reports are returned in
        request order. The first failure is raised after every other resolution
        still in flight has been cancelled.
        """
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def _resolve_one(request: AddressRequest) -> AddressReport:
            async with semaphore:
                return await self.resolve(
                    factory=request.factory,
                    implementation=request.implementation,
                    salt=request.salt,
                    owner=request.owner,
                    chain_id=chain_id,
                )

        tasks = [asyncio.create_task(_resolve_one(r)) for r in requests]
        try:
            return list(await asyncio.gather(*tasks))
        except Exception:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def _resolve_evm(
        self,
        chain_id: int,
        factory: ChecksumAddress,
        implementation: ChecksumAddress,
        owner: ChecksumAddress,
        salt_hash: bytes,
    ) -> ChecksumAddress:
        # Registry lookup happens before any connection is opened
        chain = self.registry.get(chain_id)

        async with self.caller_factory(chain, self.rpc_url) as caller:
            resolver = EvmAddressResolver(caller)
            try:
                return await asyncio.wait_for(
                    resolver.resolve(factory, implementation, owner, salt_hash),
                    timeout=self.request_timeout,
                )
            except asyncio.TimeoutError as e:
                raise NetworkError(chain_id, f"timed out after {self.request_timeout}s") from e
