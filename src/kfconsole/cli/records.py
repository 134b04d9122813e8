"""
Record store commands: list, import, export.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich import print as rprint
from rich.table import Table

from ..errors import RecordStoreError
from ..logging_config import setup_cli_logging
from ._shared import StoreOption, app, console, resolve_store


def _store_from(ctx: typer.Context, store):
    """Command-level --store wins over the one given before the command."""
    if store is None and ctx.obj:
        store = ctx.obj.get("store")
    return resolve_store(store)


@app.command("list")
def list_records(ctx: typer.Context, store: StoreOption = None):
    """List stored port-forward configs."""
    setup_cli_logging()
    record_store = _store_from(ctx, store)
    try:
        records = record_store.load_records()
    except RecordStoreError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if not records:
        rprint(f"[dim]No configs in {record_store.path}[/dim]")
        return

    table = Table(title=f"Configs ({len(records)})")
    table.add_column("ID", justify="right")
    table.add_column("Alias")
    table.add_column("Context")
    table.add_column("Namespace")
    table.add_column("Target")
    table.add_column("Ports")
    table.add_column("Protocol")
    for record in records:
        table.add_row(
            str(record.id),
            record.alias or "-",
            record.context or "-",
            record.namespace,
            record.target,
            f"{record.local_port} → {record.remote_port}",
            record.protocol,
        )
    console.print(table)


@app.command("import")
def import_records(
    ctx: typer.Context,
    file: Annotated[Path, typer.Argument(help="JSON file with one config or a list of configs")],
    store: StoreOption = None,
):
    """Import configs from a JSON file into the store."""
    setup_cli_logging()
    record_store = _store_from(ctx, store)
    try:
        text = file.read_text()
    except OSError as e:
        rprint(f"[red]Error:[/red] cannot read {file}: {e}")
        raise typer.Exit(1)

    try:
        count = record_store.import_text(text)
    except RecordStoreError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    rprint(f"[green]✓[/green] Imported {count} config(s) from [bold]{file}[/bold]")


@app.command("export")
def export_records(
    ctx: typer.Context,
    file: Annotated[Path, typer.Argument(help="Destination JSON file")],
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite an existing file")
    ] = False,
    store: StoreOption = None,
):
    """Export all stored configs to a JSON file."""
    setup_cli_logging()
    record_store = _store_from(ctx, store)

    if file.exists() and not force:
        rprint(f"[yellow]File already exists:[/yellow] {file}")
        rprint("[dim]Use --force to overwrite[/dim]")
        raise typer.Exit(1)

    try:
        text = record_store.export_text()
        file.write_text(text)
    except RecordStoreError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except OSError as e:
        rprint(f"[red]Error:[/red] cannot write {file}: {e}")
        raise typer.Exit(1)

    rprint(f"[green]✓[/green] Configs exported successfully to [bold]{file}[/bold]")
