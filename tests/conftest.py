"""Pytest configuration and fixtures for smart-account-address tests."""

from contextlib import asynccontextmanager

import pytest

from smart_account_address import ChainConfig, ChainRegistry, NativeCurrency

# Reference inputs with addresses pinned in the golden-vector tests
FACTORY = "0x1234567890123456789012345678901234567890"
IMPLEMENTATION = "0x0987654321098765432109876543210987654321"
OWNER = "0xabcdefabcdefabcdefabcdefabcdefabcdefabcd"
OWNER_CHECKSUM = "0xABcdEFABcdEFabcdEfAbCdefabcdeFABcDEFabCD"
SALT = "salt"

# keccak256("salt")
SALT_HASH = bytes.fromhex("a05e334153147e75f3f416139b5109d1179cb56fef6a4ecb4c4cbc92a7c37b70")

# ZKSync account address for (FACTORY, IMPLEMENTATION, OWNER, SALT)
ZKSYNC_ACCOUNT = "0xa38A65ff8CC46ebCBE246e2eC324A34cb2752cE5"

# Address a fake factory "returns" on EVM chains
EVM_ACCOUNT = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"

# Anvil's default chain ID, not in the default registry
ANVIL_CHAIN_ID = 31337


class FakeCallerFactory:
    """
    Stand-in for web3_contract_caller.

    Records every connection opened and every factory call made, and answers
    each call with a fixed address (or raises a fixed exception).
    """

    def __init__(self, result: str = EVM_ACCOUNT, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.connections: list[tuple[int, str | None]] = []
        self.calls: list[tuple[str, str, bytes]] = []
        self.closed = 0

    @asynccontextmanager
    async def __call__(self, chain: ChainConfig, rpc_url: str | None = None):
        self.connections.append((chain.chain_id, rpc_url))

        async def call(factory: str, owner: str, salt_hash: bytes) -> str:
            self.calls.append((factory, owner, salt_hash))
            if self.error is not None:
                raise self.error
            return self.result

        try:
            yield call
        finally:
            self.closed += 1


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's RPC settings out of the tests."""
    monkeypatch.delenv("SMART_ACCOUNT_RPC_URL", raising=False)
    monkeypatch.delenv("SMART_ACCOUNT_CHAINS_FILE", raising=False)


@pytest.fixture
def caller_factory() -> FakeCallerFactory:
    """Fake contract-call channel answering with EVM_ACCOUNT."""
    return FakeCallerFactory()


@pytest.fixture
def anvil_chain() -> ChainConfig:
    """A local chain that is not part of the default registry."""
    return ChainConfig(
        chain_id=ANVIL_CHAIN_ID,
        name="Anvil",
        rpc_url="http://localhost:8545",
        native_currency=NativeCurrency(name="Ether", symbol="ETH"),
    )


@pytest.fixture
def registry(anvil_chain: ChainConfig) -> ChainRegistry:
    """Default registry plus the local Anvil chain."""
    registry = ChainRegistry.default()
    registry.register(anvil_chain)
    return registry
