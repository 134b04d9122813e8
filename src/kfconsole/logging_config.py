"""
Logging configuration for kfconsole.

All loggers live under the "kfconsole" hierarchy. The TUI routes log
records into the shared LogBuffer so they show up in the Logs pane;
the CLI keeps logging quiet unless something goes wrong.
"""

import logging
from pathlib import Path
from typing import Optional

from .log_buffer import LogBuffer, LogBufferHandler


ROOT_LOGGER_NAME = "kfconsole"
DEFAULT_LOG_DIR = Path.home() / ".kfconsole" / "logs"

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
BUFFER_FORMAT = "%(asctime)s %(levelname)-7s %(message)s"
DATE_FORMAT = "%H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the kfconsole namespace.

    Args:
        name: Component name, e.g. "dispatcher"

    Returns:
        Logger named "kfconsole.<name>"
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    console: bool = True,
    rich_console: bool = True,
) -> logging.Logger:
    """Configure the kfconsole logger.

    Existing handlers are removed first so repeated calls don't stack.

    Args:
        level: Logging level
        log_file: Optional file to also log to
        console: Whether to log to the console
        rich_console: Use Rich's handler for console output when available

    Returns:
        The root kfconsole logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(level)
    logger.propagate = False

    if console:
        handler = None
        if rich_console:
            try:
                from rich.logging import RichHandler
                handler = RichHandler(show_path=False, rich_tracebacks=True)
                handler.setFormatter(logging.Formatter("%(message)s", datefmt=DATE_FORMAT))
            except ImportError:
                handler = None
        if handler is None:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def setup_tui_logging(
    buffer: LogBuffer,
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Configure logging for the TUI: capture into the live log buffer.

    Console output would corrupt the terminal while the TUI owns it,
    so only the buffer (and optionally a file) receive records.
    """
    logger = setup_logging(level=level, log_file=log_file, console=False)
    handler = LogBufferHandler(buffer)
    handler.setFormatter(logging.Formatter(BUFFER_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return get_logger("tui")


def setup_cli_logging() -> logging.Logger:
    """Configure minimal logging for CLI commands."""
    setup_logging(level=logging.WARNING, console=True)
    return get_logger("cli")


def parse_level(name: str) -> int:
    """Map a level name like "debug" to its logging constant (INFO if unknown)."""
    value = logging.getLevelName(str(name).upper())
    return value if isinstance(value, int) else logging.INFO
