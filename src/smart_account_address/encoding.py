"""Salt hashing, address decoding and ABI parameter encoding."""

from typing import Any, Sequence

from eth_abi import encode
from eth_abi.exceptions import EncodingError as AbiEncodingError
from eth_abi.exceptions import ParseError
from eth_typing import ChecksumAddress
from eth_utils import is_hex, is_hex_address, to_bytes
from web3 import Web3

from ._exceptions import EncodingError, MalformedAddressError


def keccak(data: bytes) -> bytes:
    """Keccak-256 of raw bytes."""
    return bytes(Web3.keccak(data))


def hash_salt(salt: str | bytes) -> bytes:
    """
    Hash a salt into the 32-byte digest consumed by both derivation paths.

    A string that is 0x-prefixed hex is hashed as the bytes it encodes (odd-length
    hex gets a leading zero nibble); any other string is hashed as UTF-8. Any input
    is valid, including the empty salt.

    Example:
        >>> hash_salt("salt").hex()
        'a05e334153147e75f3f416139b5109d1179cb56fef6a4ecb4c4cbc92a7c37b70'
    """
    if isinstance(salt, str):
        raw = to_bytes(hexstr=salt) if salt.startswith("0x") and is_hex(salt) else salt.encode("utf-8")
    else:
        raw = bytes(salt)
    return keccak(raw)


def to_address(value: str | bytes | None, field: str = "address") -> ChecksumAddress:
    """
    Decode an address input into its checksummed form.

    Accepts 40 hex characters (with or without 0x, any letter case) or 20 raw bytes.

    Raises:
        MalformedAddressError: If value does not decode to exactly 20 bytes
    """
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 20:
            raise MalformedAddressError(field, value)
        return Web3.to_checksum_address(bytes(value))

    if not isinstance(value, str):
        raise MalformedAddressError(field, value)

    candidate = value.strip()
    if not candidate.lower().startswith("0x"):
        candidate = "0x" + candidate
    if not is_hex_address(candidate):
        raise MalformedAddressError(field, value)
    return Web3.to_checksum_address(candidate)


def pad_address(address: str) -> bytes:
    """Left-pad a 20-byte address to a 32-byte word."""
    return bytes.fromhex(address[2:]).rjust(32, b"\x00")


def encode_params(types: Sequence[str], values: Sequence[Any]) -> bytes:
    """
    ABI-encode values as a parameter tuple.

    Raises:
        EncodingError: If the arity differs or a value does not fit its type
    """
    if len(types) != len(values):
        raise EncodingError(types, f"expected {len(types)} values, got {len(values)}")
    try:
        return encode(list(types), list(values))
    except (AbiEncodingError, ParseError, TypeError, ValueError) as e:
        raise EncodingError(types, str(e)) from e
