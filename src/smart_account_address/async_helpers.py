"""Async helper functions for resolving account addresses through the factory contract."""

import logging

from eth_typing import ChecksumAddress
from web3 import AsyncWeb3
from web3.exceptions import ContractLogicError, Web3Exception

from ._exceptions import MissingOwnerAddressError, NetworkError
from .abi import SMART_ACCOUNT_FACTORY_ABI
from .encoding import hash_salt, to_address

logger = logging.getLogger(__name__)


def prepare_factory_arguments(salt: str | bytes, owner: str | None) -> tuple[bytes, ChecksumAddress]:
    """
    Build the (nonce, owner) arguments of getAddressWithNonce.

    The factory computes the final address itself; this only validates the owner
    and hashes the salt. No network access.

    Raises:
        MissingOwnerAddressError: If owner is empty
        MalformedAddressError: If owner is not a 20-byte address
    """
    if not owner:
        raise MissingOwnerAddressError("EVM")
    owner_address = to_address(owner, "owner")
    return hash_salt(salt), owner_address


async def get_address_with_nonce(
    w3: AsyncWeb3,
    factory_address: str,
    owner: str,
    salt_hash: bytes,
    chain_id: int | None = None,
) -> ChecksumAddress:
    """
    Ask the factory for the account address of (owner, salt_hash).

    Performs exactly one eth_call. Failures are not retried.

    Args:
        w3: AsyncWeb3 instance connected to the chain
        factory_address: The smart account factory contract address
        owner: Account owner address
        salt_hash: 32-byte hash of the salt
        chain_id: Chain ID, only used in error messages

    Returns:
        Checksummed account address

    Raises:
        NetworkError: If the call reverts or the RPC request fails
    """
    factory = w3.eth.contract(
        address=AsyncWeb3.to_checksum_address(factory_address),
        abi=SMART_ACCOUNT_FACTORY_ABI,
    )

    logger.info("Calling factory contract at %s (owner %s, nonce 0x%s)", factory_address, owner, salt_hash.hex())

    try:
        address = await factory.functions.getAddressWithNonce(
            AsyncWeb3.to_checksum_address(owner),
            salt_hash,
        ).call()
    except ContractLogicError as e:
        raise NetworkError(chain_id, f"factory reverted: {e}") from e
    except Web3Exception as e:
        raise NetworkError(chain_id, str(e)) from e
    except Exception as e:
        # Transport errors (connection refused, DNS, timeouts) come from the HTTP client
        raise NetworkError(chain_id, str(e) or type(e).__name__) from e

    return AsyncWeb3.to_checksum_address(address)
