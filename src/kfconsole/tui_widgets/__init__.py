"""
TUI Widget components for kfconsole.

This package contains the widget classes composed by the console app.
Widgets only render the Session; input goes through the dispatcher.
"""

from .help_overlay import HelpOverlay
from .modal_overlay import ModalOverlay
from .panes import DetailsPane, LogsPane, MenuBar, RecordTable, StatusLine

__all__ = [
    "HelpOverlay",
    "ModalOverlay",
    "MenuBar",
    "RecordTable",
    "DetailsPane",
    "LogsPane",
    "StatusLine",
]
