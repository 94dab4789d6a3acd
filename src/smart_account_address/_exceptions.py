"""Custom exceptions for smart-account-address."""

from typing import Any, Sequence


class SmartAccountAddressError(Exception):
    """Base exception for smart-account-address."""


class ConfigurationError(SmartAccountAddressError):
    """Invalid configuration (unreadable chain registry file, bad env var, etc.)."""


class InvalidArgumentCountError(SmartAccountAddressError):
    """Not enough positional arguments were supplied."""

    def __init__(self, expected: int, received: int) -> None:
        super().__init__(f"Expected at least {expected} arguments, got {received}")
        self.expected = expected
        self.received = received


class MissingOwnerAddressError(SmartAccountAddressError):
    """Owner address is required on every chain type."""

    def __init__(self, chain_type: str) -> None:
        super().__init__(f"Owner address is required for {chain_type} chains")
        self.chain_type = chain_type


class ChainNotSupportedError(SmartAccountAddressError):
    """Chain ID is not present in the chain registry."""

    def __init__(self, chain_id: int) -> None:
        super().__init__(f"Chain {chain_id} is not supported")
        self.chain_id = chain_id


class MalformedAddressError(SmartAccountAddressError):
    """Input does not decode to exactly 20 bytes."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(f"Invalid {field} address: {value!r} (expected 20 bytes of hex)")
        self.field = field
        self.value = value


class NetworkError(SmartAccountAddressError):
    """The factory contract call did not complete."""

    def __init__(self, chain_id: int | None, message: str) -> None:
        prefix = f"Factory call on chain {chain_id} failed" if chain_id is not None else "Factory call failed"
        super().__init__(f"{prefix}: {message}")
        self.chain_id = chain_id


class EncodingError(SmartAccountAddressError):
    """ABI parameter encoding was given the wrong arity or types."""

    def __init__(self, types: Sequence[str], message: str) -> None:
        super().__init__(f"Cannot ABI-encode ({', '.join(types)}): {message}")
        self.types = tuple(types)
