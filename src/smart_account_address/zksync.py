"""
Offline account address derivation for ZKSync-family chains.

ZKSync does not use the EVM's 0xff CREATE2 preimage. The deployed address is the
low 20 bytes of:

    keccak256(
        keccak256("zksyncCreate2")
        ++ pad32(sender)
        ++ salt
        ++ bytecodeHash
        ++ keccak256(constructorInput)
    )

The factory deploys a proxy whose constructor input is abi.encode(implementation, ""),
salted with keccak256(abi.encode(owner, saltHash)).
"""

import logging

from eth_typing import ChecksumAddress
from web3 import Web3

from ._exceptions import EncodingError
from .constants import ZKSYNC_CREATE2_PREFIX, ZKSYNC_PROXY_BYTECODE_HASH
from .encoding import encode_params, keccak, pad_address, to_address

logger = logging.getLogger(__name__)


def compute_zksync_create2_address(
    sender: str,
    salt: bytes,
    input_data: bytes,
    bytecode_hash: bytes = ZKSYNC_PROXY_BYTECODE_HASH,
) -> ChecksumAddress:
    """
    Compute a ZKSync CREATE2 address.

    Args:
        sender: Deployer address (the factory)
        salt: 32-byte salt
        input_data: ABI-encoded constructor input
        bytecode_hash: 32-byte hash of the deployed bytecode

    Returns:
        Checksummed 20-byte address

    Raises:
        EncodingError: If salt or bytecode_hash is not 32 bytes
    """
    if len(salt) != 32:
        raise EncodingError(["bytes32"], f"salt must be 32 bytes, got {len(salt)}")
    if len(bytecode_hash) != 32:
        raise EncodingError(["bytes32"], f"bytecode hash must be 32 bytes, got {len(bytecode_hash)}")

    sender = to_address(sender, "sender")
    preimage = ZKSYNC_CREATE2_PREFIX + pad_address(sender) + salt + bytecode_hash + keccak(input_data)
    return Web3.to_checksum_address(keccak(preimage)[12:])


def compute_account_salt(owner: str, salt_hash: bytes) -> bytes:
    """Salt the factory passes to CREATE2: keccak256(abi.encode(owner, saltHash))."""
    # eth_abi right-pads short bytes32 values
    if len(salt_hash) != 32:
        raise EncodingError(["address", "bytes32"], f"salt hash must be 32 bytes, got {len(salt_hash)}")
    return keccak(encode_params(["address", "bytes32"], [to_address(owner, "owner"), salt_hash]))


def encode_proxy_input(implementation: str) -> bytes:
    """Constructor input of the account proxy: abi.encode(implementation, "")."""
    return encode_params(["address", "bytes"], [to_address(implementation, "implementation"), b""])


def compute_zksync_account_address(
    factory: str,
    implementation: str,
    owner: str,
    salt_hash: bytes,
) -> ChecksumAddress:
    """
    Predict the address of an account deployed by the factory on ZKSync.

    Pure and offline: the result matches the chain's own deployment address only if
    ZKSYNC_PROXY_BYTECODE_HASH matches the deployed proxy.

    Args:
        factory: Smart account factory address
        implementation: Account implementation address
        owner: Account owner address
        salt_hash: 32-byte hash of the salt (see encoding.hash_salt)

    Returns:
        Checksummed account address
    """
    account_salt = compute_account_salt(owner, salt_hash)
    proxy_input = encode_proxy_input(implementation)
    logger.debug("ZKSync account salt 0x%s, proxy input %d bytes", account_salt.hex(), len(proxy_input))
    return compute_zksync_create2_address(factory, account_salt, proxy_input)
