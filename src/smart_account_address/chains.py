"""Chain registry: network connection parameters per chain ID."""

import json
import logging
from pathlib import Path
from typing import Iterable, Iterator

from pydantic import TypeAdapter, ValidationError

from ._exceptions import ChainNotSupportedError, ConfigurationError
from .types import ChainConfig, NativeCurrency

logger = logging.getLogger(__name__)

_ETH = NativeCurrency(name="Ether", symbol="ETH")
_SEPOLIA_ETH = NativeCurrency(name="Sepolia Ether", symbol="ETH")

# Chains with a built-in default RPC endpoint
DEFAULT_CHAINS: tuple[ChainConfig, ...] = (
    ChainConfig(
        chain_id=1,
        name="Ethereum",
        rpc_url="https://eth.merkle.io",
        native_currency=_ETH,
        block_explorer_url="https://etherscan.io",
    ),
    ChainConfig(
        chain_id=137,
        name="Polygon",
        rpc_url="https://polygon-rpc.com",
        native_currency=NativeCurrency(name="POL", symbol="POL"),
        block_explorer_url="https://polygonscan.com",
    ),
    ChainConfig(
        chain_id=42161,
        name="Arbitrum One",
        rpc_url="https://arb1.arbitrum.io/rpc",
        native_currency=_ETH,
        block_explorer_url="https://arbiscan.io",
    ),
    ChainConfig(
        chain_id=8453,
        name="Base",
        rpc_url="https://mainnet.base.org",
        native_currency=_ETH,
        block_explorer_url="https://basescan.org",
    ),
    ChainConfig(
        chain_id=43114,
        name="Avalanche",
        rpc_url="https://api.avax.network/ext/bc/C/rpc",
        native_currency=NativeCurrency(name="Avalanche", symbol="AVAX"),
        block_explorer_url="https://snowtrace.io",
    ),
    ChainConfig(
        chain_id=11155111,
        name="Sepolia",
        rpc_url="https://sepolia.drpc.org",
        native_currency=_SEPOLIA_ETH,
        block_explorer_url="https://sepolia.etherscan.io",
    ),
    ChainConfig(
        chain_id=80002,
        name="Polygon Amoy",
        rpc_url="https://rpc-amoy.polygon.technology",
        native_currency=NativeCurrency(name="POL", symbol="POL"),
        block_explorer_url="https://amoy.polygonscan.com",
    ),
    ChainConfig(
        chain_id=421614,
        name="Arbitrum Sepolia",
        rpc_url="https://sepolia-rollup.arbitrum.io/rpc",
        native_currency=_ETH,
        block_explorer_url="https://sepolia.arbiscan.io",
    ),
    ChainConfig(
        chain_id=84532,
        name="Base Sepolia",
        rpc_url="https://sepolia.base.org",
        native_currency=_SEPOLIA_ETH,
        block_explorer_url="https://sepolia.basescan.org",
    ),
    ChainConfig(
        chain_id=13337,
        name="Beam Testnet",
        rpc_url="https://build.onbeam.com/rpc/testnet",
        native_currency=NativeCurrency(name="Beam", symbol="BEAM"),
        block_explorer_url="https://subnets-test.avax.network/beam",
    ),
    ChainConfig(
        chain_id=10,
        name="OP Mainnet",
        rpc_url="https://mainnet.optimism.io",
        native_currency=_ETH,
        block_explorer_url="https://optimistic.etherscan.io",
    ),
    ChainConfig(
        chain_id=56,
        name="BNB Smart Chain",
        rpc_url="https://bsc-dataseed.bnbchain.org",
        native_currency=NativeCurrency(name="BNB", symbol="BNB"),
        block_explorer_url="https://bscscan.com",
    ),
)

_CHAIN_LIST = TypeAdapter(list[ChainConfig])


class ChainRegistry:
    """
    Mapping of chain ID to ChainConfig.

    Passed explicitly to the client so callers can add or replace chains
    (including fake ones in tests) without touching module state.

    Example:
        >>> registry = ChainRegistry.default()
        >>> registry.register(ChainConfig(chain_id=31337, name="Anvil", ...))
        >>> registry.get(31337).rpc_url
    """

    def __init__(self, chains: Iterable[ChainConfig] = ()) -> None:
        self._chains: dict[int, ChainConfig] = {}
        for chain in chains:
            self.register(chain)

    @classmethod
    def default(cls) -> "ChainRegistry":
        """Registry pre-populated with DEFAULT_CHAINS."""
        return cls(DEFAULT_CHAINS)

    @classmethod
    def from_file(cls, path: str | Path, include_defaults: bool = True) -> "ChainRegistry":
        """
        Load chains from a JSON file holding a list of ChainConfig objects.

        Entries override defaults with the same chain_id.

        Raises:
            ConfigurationError: If the file is missing or malformed
        """
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ConfigurationError(f"Cannot read chain registry file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Chain registry file {path} is not valid JSON: {e}") from e

        try:
            chains = _CHAIN_LIST.validate_python(raw)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid chain registry file {path}: {e}") from e

        registry = cls.default() if include_defaults else cls()
        for chain in chains:
            registry.register(chain)
        logger.info("Loaded %d chain(s) from %s", len(chains), path)
        return registry

    def register(self, chain: ChainConfig) -> None:
        """Add a chain, replacing any existing entry with the same ID."""
        if chain.chain_id in self._chains:
            logger.debug("Replacing chain %d (%s)", chain.chain_id, self._chains[chain.chain_id].name)
        self._chains[chain.chain_id] = chain

    def get(self, chain_id: int) -> ChainConfig:
        """
        Get the configuration for a chain.

        Raises:
            ChainNotSupportedError: If chain_id is not registered
        """
        chain = self._chains.get(chain_id)
        if chain is None:
            raise ChainNotSupportedError(chain_id)
        return chain

    def is_supported(self, chain_id: int) -> bool:
        """Check if a chain is registered."""
        return chain_id in self._chains

    @property
    def chain_ids(self) -> list[int]:
        """Registered chain IDs, sorted."""
        return sorted(self._chains)

    def __contains__(self, chain_id: object) -> bool:
        return chain_id in self._chains

    def __iter__(self) -> Iterator[ChainConfig]:
        return iter(self._chains.values())

    def __len__(self) -> int:
        return len(self._chains)
