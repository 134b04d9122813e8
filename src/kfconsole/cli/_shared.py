"""
Shared CLI state: Typer apps, console, options.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

# Main app
app = typer.Typer(
    name="kfconsole",
    help="Manage Kubernetes port-forwards from the terminal",
    no_args_is_help=False,
    invoke_without_command=True,
    rich_markup_mode="rich",
)

# Config subcommand group
config_app = typer.Typer(
    name="config",
    help="Manage configuration",
    no_args_is_help=False,
    invoke_without_command=True,
)
app.add_typer(config_app, name="config")

# Console for rich output
console = Console()

StoreOption = Annotated[
    Optional[Path],
    typer.Option(
        "--store",
        help="Records file (default: store_path from config, else ~/.kfconsole/records.json)",
    ),
]


def resolve_store(store: Optional[Path]):
    """Open the record store at `store`, or the configured one."""
    from ..config import get_store_path
    from ..implementations import JsonRecordStore

    return JsonRecordStore(store or get_store_path())


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    store: StoreOption = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Log level for the Logs pane (DEBUG, INFO, ...)"),
    ] = None,
):
    """Launch the console TUI when no command is given."""
    ctx.obj = {"store": store}
    if ctx.invoked_subcommand is None:
        from ..tui import run_tui

        run_tui(store_path=store, log_level=log_level)
