"""CLI entry point."""

import asyncio
import json
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from figi.client import FigiClient
from figi.config import config
from figi.exceptions import FigiError
from figi.models import IdentifierType, MappingRequest

app = typer.Typer(
    name="figi",
    help="figi — OpenFIGI identifier mapping",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log request diagnostics to stderr"),
):
    """OpenFIGI identifier mapping."""
    if verbose or config.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command(name="mapping")
def mapping_cmd(
    value: str = typer.Argument(..., help="Identifier to map, a ticker unless --id-type says otherwise"),
    id_type: str = typer.Option("TICKER", "--id-type", "-t", help="OpenFIGI idType (e.g. ID_ISIN, ID_CUSIP)"),
    exch_code: Optional[str] = typer.Option(None, "--exch-code", help="Exchange code, e.g. US"),
    security_type2: Optional[str] = typer.Option(
        None, "--security-type2", help="Required for BASE_TICKER and ID_EXCH_SYMBOL",
    ),
    api_key: Optional[str] = typer.Option(None, "--api-key", envvar="OPENFIGI_API_KEY", help="OpenFIGI API key"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Override the API origin"),
):
    """Map an identifier to FIGI records and print them as JSON."""
    try:
        request = MappingRequest(
            id_type=IdentifierType.parse(id_type),
            id_value=value,
            exchange_code=exch_code,
            security_type2=security_type2,
        )
    except ValueError as exc:
        err_console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    client = FigiClient(api_key=api_key, base_url=base_url)
    try:
        results = asyncio.run(client.mapping([request]))
    except FigiError as exc:
        err_console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    typer.echo(json.dumps([r.to_dict() for r in results]))


@app.command(name="id-types")
def id_types_cmd():
    """List the identifier types accepted by --id-type."""
    table = Table(title="OpenFIGI identifier types")
    table.add_column("idType", style="cyan")
    table.add_column("Description")
    for member in IdentifierType:
        if IdentifierType.is_valid(member):
            table.add_row(member.name, member.description)
    console.print(table)


if __name__ == "__main__":
    app()
