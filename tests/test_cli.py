"""Tests for the command-line interface."""

import json
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from smart_account_address import NetworkError
from smart_account_address.cli import app

from .conftest import (
    ANVIL_CHAIN_ID,
    EVM_ACCOUNT,
    FACTORY,
    IMPLEMENTATION,
    OWNER,
    SALT,
    SALT_HASH,
    ZKSYNC_ACCOUNT,
    FakeCallerFactory,
)

runner = CliRunner()


class TestZkSyncCommand:
    """CLI runs on ZKSync chains."""

    def test_prints_address(self) -> None:
        """The account address, salt hash and chain type are printed."""
        result = runner.invoke(app, [FACTORY, IMPLEMENTATION, SALT, OWNER, "324"])

        assert result.exit_code == 0, result.output
        assert "Using ZKSync address calculation" in result.output
        assert ZKSYNC_ACCOUNT in result.output
        assert "0x" + SALT_HASH.hex() in result.output
        assert "Chain Type: ZKSync" in result.output

    def test_echoes_inputs(self) -> None:
        """Inputs are echoed with the result."""
        result = runner.invoke(app, [FACTORY, IMPLEMENTATION, SALT, OWNER, "324"])

        assert f"Factory Address: {FACTORY}" in result.output
        assert f"Implementation Address: {IMPLEMENTATION}" in result.output
        assert f"Owner Address: {OWNER}" in result.output
        assert "Chain ID: 324" in result.output

    def test_hex_salt(self) -> None:
        """A 0x-prefixed salt is hashed as the bytes it encodes."""
        result = runner.invoke(app, [FACTORY, IMPLEMENTATION, "0x1234", OWNER, "324"])

        assert result.exit_code == 0, result.output
        assert "0x79146D620cBFbe7746Ba8D712798Aa1b68Eb64c9" in result.output
        assert "Salt Hash: 0x56570de287d73cd1cb6092bb8fdee6173974955fdef345ae579ee9f475ea7432" in result.output

    def test_missing_owner(self) -> None:
        """Missing owner exits non-zero and shows only the error."""
        result = runner.invoke(app, [FACTORY, IMPLEMENTATION, SALT])

        assert result.exit_code == 1
        assert "Owner address is required" in result.output
        assert "Smart Account Address Generator" not in result.output
        assert "Factory Address:" not in result.output
        assert "address calculation" not in result.output
        assert "Generated Smart Account Address" not in result.output


class TestEvmCommand:
    """CLI runs on EVM chains, with the factory call faked."""

    def test_prints_factory_answer(self) -> None:
        """The default chain asks the factory."""
        fake = FakeCallerFactory()
        with patch("smart_account_address.async_client.web3_contract_caller", fake):
            result = runner.invoke(app, [FACTORY, IMPLEMENTATION, SALT, OWNER])

        assert result.exit_code == 0, result.output
        assert "Chain ID: 1" in result.output
        assert "Using EVM address calculation" in result.output
        assert EVM_ACCOUNT in result.output
        assert fake.connections == [(1, None)]

    def test_rpc_url_argument(self) -> None:
        """The sixth positional argument overrides the RPC endpoint."""
        fake = FakeCallerFactory()
        with patch("smart_account_address.async_client.web3_contract_caller", fake):
            result = runner.invoke(app, [FACTORY, IMPLEMENTATION, SALT, OWNER, "8453", "http://custom:8545"])

        assert result.exit_code == 0, result.output
        assert fake.connections == [(8453, "http://custom:8545")]

    def test_unsupported_chain(self) -> None:
        """Unknown chain exits non-zero without connecting."""
        fake = FakeCallerFactory()
        with patch("smart_account_address.async_client.web3_contract_caller", fake):
            result = runner.invoke(app, [FACTORY, IMPLEMENTATION, SALT, OWNER, "999999"])

        assert result.exit_code == 1
        assert "Chain 999999 is not supported" in result.output
        assert fake.connections == []

    def test_network_failure(self) -> None:
        """A failed factory call exits non-zero with the reason."""
        fake = FakeCallerFactory(error=NetworkError(1, "connection refused"))
        with patch("smart_account_address.async_client.web3_contract_caller", fake):
            result = runner.invoke(app, [FACTORY, IMPLEMENTATION, SALT, OWNER])

        assert result.exit_code == 1
        assert "connection refused" in result.output
        assert "Generated Smart Account Address" not in result.output
        assert "Factory Address:" not in result.output
        assert "Using EVM address calculation" not in result.output

    def test_chains_file(self, tmp_path: Path) -> None:
        """Chains from --chains-file can be used."""
        chains_file = tmp_path / "chains.json"
        chains_file.write_text(
            json.dumps(
                [
                    {
                        "chain_id": ANVIL_CHAIN_ID,
                        "name": "Anvil",
                        "rpc_url": "http://localhost:8545",
                        "native_currency": {"name": "Ether", "symbol": "ETH"},
                    }
                ]
            ),
            encoding="utf-8",
        )
        fake = FakeCallerFactory()
        with patch("smart_account_address.async_client.web3_contract_caller", fake):
            result = runner.invoke(
                app,
                [FACTORY, IMPLEMENTATION, SALT, OWNER, str(ANVIL_CHAIN_ID), "--chains-file", str(chains_file)],
            )

        assert result.exit_code == 0, result.output
        assert fake.connections == [(ANVIL_CHAIN_ID, None)]


class TestArgumentErrors:
    """CLI argument validation."""

    def test_too_few_arguments(self) -> None:
        """Fewer than three positionals prints usage and exits 1."""
        result = runner.invoke(app, [FACTORY])

        assert result.exit_code == 1
        assert "Usage: smart-account-address" in result.output
        assert "Expected at least 3 arguments, got 1" in result.output

    def test_no_arguments(self) -> None:
        """No arguments at all is also an argument count error."""
        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "got 0" in result.output

    def test_malformed_factory(self) -> None:
        """A short factory address names the bad field."""
        result = runner.invoke(app, ["0x1234", IMPLEMENTATION, SALT, OWNER, "324"])

        assert result.exit_code == 1
        assert "Invalid factory address" in result.output
        assert "Smart Account Address Generator" not in result.output
        assert "Generated Smart Account Address" not in result.output

    def test_bad_chains_file(self, tmp_path: Path) -> None:
        """An unreadable chains file is reported."""
        result = runner.invoke(
            app,
            [FACTORY, IMPLEMENTATION, SALT, OWNER, "--chains-file", str(tmp_path / "missing.json")],
        )

        assert result.exit_code == 1
        assert "Cannot read chain registry file" in result.output
