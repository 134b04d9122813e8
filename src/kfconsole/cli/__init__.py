"""
CLI interface for kfconsole using Typer.

Running `kfconsole` with no command launches the TUI; the subcommands
manage the record store and the config file without it.
"""

# Import shared state (apps, options) — must come first
from ._shared import app, main_callback  # noqa: F401

# Import submodules to register their commands with the Typer apps
from . import records  # noqa: F401
from . import config  # noqa: F401


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
