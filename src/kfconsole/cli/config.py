"""
Config commands: init, show, path.
"""

from typing import Annotated

import typer
from rich import print as rprint

from ._shared import config_app


CONFIG_TEMPLATE = """\
# kfconsole configuration
# Location: ~/.kfconsole/config.yaml

# JSON file holding the port-forward configs
# store_path: ~/.kfconsole/records.json

# kubectl binary used to start port-forwards
# kubectl: kubectl

# Log level shown in the Logs pane (DEBUG, INFO, WARNING, ERROR)
# log_level: INFO

# Also write the TUI log to a file
# log_file: ~/.kfconsole/kfconsole.log

# Seconds between record/status reloads in the TUI
# refresh_seconds: 2
"""

KNOWN_KEYS = ["store_path", "kubectl", "log_level", "log_file", "refresh_seconds"]


@config_app.callback(invoke_without_command=True)
def config_default(ctx: typer.Context):
    """Show current configuration (default when no subcommand given)."""
    if ctx.invoked_subcommand is None:
        _config_show()


@config_app.command("init")
def config_init(
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite existing config file")
    ] = False,
):
    """Create a config file with documented defaults.

    Creates ~/.kfconsole/config.yaml with all options commented out.
    Use --force to overwrite an existing config file.
    """
    from .. import config

    path = config.CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)

    if path.exists() and not force:
        rprint(f"[yellow]Config file already exists:[/yellow] {path}")
        rprint("[dim]Use --force to overwrite[/dim]")
        raise typer.Exit(1)

    path.write_text(CONFIG_TEMPLATE)
    rprint(f"[green]✓[/green] Created config file: [bold]{path}[/bold]")
    rprint("[dim]Edit to customize your settings[/dim]")


@config_app.command("show")
def config_show():
    """Show current configuration."""
    _config_show()


def _config_show():
    """Internal function to display current config."""
    from .. import config

    path = config.CONFIG_PATH
    if not path.exists():
        rprint(f"[dim]No config file found at {path}[/dim]")
        rprint("[dim]Run 'kfconsole config init' to create one[/dim]")
        return

    data = config.load_config()
    if not data:
        rprint(f"[dim]Config file is empty: {path}[/dim]")
        return

    rprint(f"[bold]Configuration[/bold] ({path}):\n")
    for key in KNOWN_KEYS:
        if key in data:
            rprint(f"  {key}: {data[key]}")

    unknown = [key for key in data if key not in KNOWN_KEYS]
    if unknown:
        rprint(f"[yellow]  Unknown keys ignored:[/yellow] {', '.join(unknown)}")


@config_app.command("path")
def config_path():
    """Show the config file path."""
    from .. import config
    print(config.CONFIG_PATH)
