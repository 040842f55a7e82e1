"""Mini README: Entry point CLI for the Moneycount widget.

This script exposes a Typer CLI that starts the FastAPI application with
configurable host, port and production flags, and prints a quick summary of
the stored ledger without starting a server.
"""

from __future__ import annotations

import typer
import uvicorn

from moneycount.configuration import get_settings
from moneycount.ledger import compute_totals, format_amount, format_rate
from moneycount.logging_utils import configure_root_logger
from moneycount.persistence import JsonFileStorage
from moneycount.runtime import ledger_runtime

cli = typer.Typer(help="Run the Moneycount web widget and inspect its stored ledger.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger()

    # Browsers cannot open the 0.0.0.0 / :: wildcard addresses directly.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Moneycount on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "moneycount.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def summary() -> None:
    """Print entry count and both grand totals from the stored ledger."""

    settings = get_settings()
    state = ledger_runtime(JsonFileStorage(settings.storage_path)).state
    totals = compute_totals(state)
    typer.echo(
        f"{totals.entry_count} expenses "
        f"{settings.left_currency} {format_amount(totals.left_total)} "
        f"{settings.right_currency} {format_amount(totals.right_total)} "
        f"under rate {format_rate(state.rate)}"
    )


if __name__ == "__main__":
    cli()
