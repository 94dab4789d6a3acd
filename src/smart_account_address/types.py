"""Type definitions for smart-account-address."""

from typing import Literal

from pydantic import BaseModel, Field

# Address derivation strategy for a chain
ChainType = Literal["EVM", "ZKSync"]


class NativeCurrency(BaseModel):
    """Native gas currency of a chain."""

    name: str
    symbol: str
    decimals: int = Field(default=18, ge=0)

    model_config = {"frozen": True}


class ChainConfig(BaseModel):
    """
    Network connection parameters for a chain.

    Only needed on the EVM path, where the factory contract is called over RPC.

    Example:
        ChainConfig(
            chain_id=8453,
            name="Base",
            rpc_url="https://mainnet.base.org",
            native_currency=NativeCurrency(name="Ether", symbol="ETH"),
        )
    """

    chain_id: int = Field(gt=0)
    name: str
    rpc_url: str
    native_currency: NativeCurrency
    block_explorer_url: str | None = None

    model_config = {"frozen": True}


class AddressRequest(BaseModel):
    """Inputs for one account in a batch resolution; the chain is set per batch."""

    factory: str
    implementation: str
    salt: str
    owner: str | None = None

    model_config = {"frozen": True}


class AddressReport(BaseModel):
    """
    Result of a resolution.

    All addresses are checksummed; salt_hash is the 0x-prefixed Keccak-256 of the salt.
    """

    factory: str
    implementation: str
    salt: str
    owner: str
    chain_id: int
    chain_type: ChainType
    salt_hash: str
    account_address: str

    model_config = {"frozen": True}
