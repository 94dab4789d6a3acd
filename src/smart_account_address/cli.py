"""smart-account-address command-line interface."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ._exceptions import InvalidArgumentCountError, SmartAccountAddressError
from .async_client import AsyncSmartAccountClient
from .chains import ChainRegistry
from .constants import DEFAULT_CHAIN_ID, DEFAULT_REQUEST_TIMEOUT
from .types import AddressReport

app = typer.Typer(help="Generate smart account addresses for EVM and ZKSync chains.", add_completion=False)
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

USAGE = """Usage: smart-account-address FACTORY IMPLEMENTATION SALT [OWNER] [CHAIN_ID] [RPC_URL]

Examples:
  # Ethereum mainnet (asks the factory contract)
  smart-account-address 0x1234...abcd 0x5678...efgh "salt" 0x9abc...def0

  # ZKSync Era (computed offline)
  smart-account-address 0x1234...abcd 0x5678...efgh "salt" 0x9abc...def0 324"""


def _load_registry(chains_file: Optional[Path]) -> ChainRegistry:
    if chains_file is None:
        return ChainRegistry.default()
    return ChainRegistry.from_file(chains_file)


def _print_inputs(
    factory: str,
    implementation: str,
    salt: str,
    owner: str,
    chain_id: int,
) -> None:
    console.print("[bold]Smart Account Address Generator[/]")
    console.print("================================")
    console.print(f"Factory Address: {escape(factory)}")
    console.print(f"Implementation Address: {escape(implementation)}")
    console.print(f"Salt: {escape(salt)}")
    console.print(f"Owner Address: {escape(owner)}")
    console.print(f"Chain ID: {chain_id}")
    console.print()


def _print_report(report: AddressReport) -> None:
    console.print("[bold green]Generated Smart Account Address:[/]")
    console.print(f"   {report.account_address}")
    console.print()
    console.print("[cyan]Verification Details:[/]")
    console.print(f"   Salt Hash: {report.salt_hash}")
    console.print(f"   Chain Type: {report.chain_type}")


@app.command()
def generate(
    factory: Optional[str] = typer.Argument(None, help="Smart account factory contract address."),
    implementation: Optional[str] = typer.Argument(None, help="Smart account implementation contract address."),
    salt: Optional[str] = typer.Argument(None, help="Salt value."),
    owner: Optional[str] = typer.Argument(None, help="Owner address (required)."),
    chain_id: Optional[int] = typer.Argument(None, help=f"Chain ID (default: {DEFAULT_CHAIN_ID})."),
    rpc_url: Optional[str] = typer.Argument(
        None,
        envvar="SMART_ACCOUNT_RPC_URL",
        help="RPC URL override for EVM chains.",
    ),
    chains_file: Optional[Path] = typer.Option(
        None,
        "--chains-file",
        envvar="SMART_ACCOUNT_CHAINS_FILE",
        help="JSON file with extra chain configurations.",
    ),
    timeout: float = typer.Option(DEFAULT_REQUEST_TIMEOUT, help="Factory call timeout in seconds."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable info logging."),
) -> None:
    """Generate the address of a smart account before it is deployed."""
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING)

    try:
        received = sum(arg is not None for arg in (factory, implementation, salt))
        if received < 3:
            err_console.print(USAGE, markup=False, highlight=False)
            raise InvalidArgumentCountError(3, received)

        resolved_chain_id = chain_id if chain_id is not None else DEFAULT_CHAIN_ID

        client = AsyncSmartAccountClient(
            registry=_load_registry(chains_file),
            rpc_url=rpc_url,
            request_timeout=timeout,
        )
        report = asyncio.run(client.resolve(factory, implementation, salt, owner, resolved_chain_id))
    except SmartAccountAddressError as e:
        err_console.print("[bold red]Error generating smart account address:[/]")
        err_console.print(f"   {escape(str(e))}")
        raise typer.Exit(code=1) from e

    # Nothing reaches stdout unless the whole report is available
    _print_inputs(factory, implementation, salt, owner, resolved_chain_id)
    console.print(f"Using {report.chain_type} address calculation...")
    _print_report(report)


def main() -> None:  # pragma: no cover - CLI entrypoint
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
