"""
Console session state.

The Session is the aggregate root the dispatcher and every action handler
operate on: modal state, focus, the two record tables, the four scroll
regions and the transient messages shown in popups.
"""

from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, TYPE_CHECKING

from .constants import compute_visible_rows
from .log_buffer import LogBuffer
from .models import Record, RecordState, partition_records
from .scroll import ScrollRegion
from .table_model import SelectableTable

if TYPE_CHECKING:
    from .protocols import FileBrowser


class ModalState(Enum):
    """Exactly one is active; it decides which handler gets the next key."""

    NORMAL = "normal"
    ERROR_POPUP = "error_popup"
    CONFIRMATION_POPUP = "confirmation_popup"
    IMPORT_BROWSER = "import_browser"
    EXPORT_BROWSER = "export_browser"
    INPUT_PROMPT = "input_prompt"
    HELP = "help"
    ABOUT = "about"
    DELETE_CONFIRMATION = "delete_confirmation"


class Pane(Enum):
    MENU = "menu"
    STOPPED_TABLE = "stopped_table"
    RUNNING_TABLE = "running_table"
    DETAILS = "details"
    LOGS = "logs"


class ActiveTable(Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class DeleteButton(Enum):
    CONFIRM = "confirm"
    CLOSE = "close"


TABLE_PANES = {
    ActiveTable.STOPPED: Pane.STOPPED_TABLE,
    ActiveTable.RUNNING: Pane.RUNNING_TABLE,
}


class Session:
    """Aggregate UI state for one console run."""

    def __init__(
        self,
        log_buffer: Optional[LogBuffer] = None,
        import_browser: Optional["FileBrowser"] = None,
        export_browser: Optional["FileBrowser"] = None,
        terminal_height: Optional[int] = None,
    ):
        self.modal_state = ModalState.NORMAL
        self.focus = Pane.STOPPED_TABLE
        self.active_table = ActiveTable.STOPPED

        self.stopped: SelectableTable[Record] = SelectableTable()
        self.running: SelectableTable[Record] = SelectableTable()

        self.stopped_scroll = ScrollRegion()
        self.running_scroll = ScrollRegion()
        self.details_scroll = ScrollRegion()
        self.logs_scroll = ScrollRegion()
        self.visible_rows = 0

        self.input_buffer = ""
        self.selected_file_path: Optional[Path] = None
        self.error_message: Optional[str] = None
        self.import_export_message: Optional[str] = None
        self.delete_confirmation_message: Optional[str] = None
        self.selected_delete_button = DeleteButton.CONFIRM
        self.selected_menu_item = 0

        # Externally owned resources
        self.log_buffer = log_buffer if log_buffer is not None else LogBuffer()
        self.import_browser = import_browser
        self.export_browser = export_browser

        if terminal_height is not None:
            self.set_terminal_height(terminal_height)

    # -------------------------------------------------------------------------
    # Table access
    # -------------------------------------------------------------------------

    def table(self, which: ActiveTable) -> SelectableTable[Record]:
        return self.stopped if which == ActiveTable.STOPPED else self.running

    @property
    def current_table(self) -> SelectableTable[Record]:
        """The active table (target of toggle, select-all and dispatch)."""
        return self.table(self.active_table)

    def table_scroll(self, which: ActiveTable) -> ScrollRegion:
        return self.stopped_scroll if which == ActiveTable.STOPPED else self.running_scroll

    def scroll_regions(self) -> List[ScrollRegion]:
        return [self.stopped_scroll, self.running_scroll, self.details_scroll, self.logs_scroll]

    def clear_tables(self) -> None:
        """Drop selection and cursor in both tables."""
        self.stopped.clear()
        self.running.clear()

    def enter_table(self, which: ActiveTable) -> None:
        """Focus a table pane.

        Makes it the active table, selects its first row and clears the
        other table's selection and cursor.
        """
        self.focus = TABLE_PANES[which]
        self.active_table = which
        other = ActiveTable.RUNNING if which == ActiveTable.STOPPED else ActiveTable.STOPPED
        self.table(other).clear()
        self.table(which).select_first()

    def focused_record(self) -> Optional[Record]:
        """Record shown in the Details pane: the active table's cursor row."""
        return self.current_table.current()

    # -------------------------------------------------------------------------
    # Sizing and scrolling
    # -------------------------------------------------------------------------

    def set_terminal_height(self, height: int) -> None:
        self.visible_rows = compute_visible_rows(height)
        self.sync_table_scroll()

    def sync_table_scroll(self) -> None:
        """Keep each table's viewport bounded and showing its cursor."""
        for which in (ActiveTable.STOPPED, ActiveTable.RUNNING):
            table = self.table(which)
            region = self.table_scroll(which)
            region.set_content_height(len(table), self.visible_rows)
            if table.cursor is not None:
                region.follow(table.cursor, self.visible_rows)

    # -------------------------------------------------------------------------
    # Data refresh
    # -------------------------------------------------------------------------

    def refresh(self, records: Iterable[Record], statuses: Iterable[RecordState]) -> bool:
        """Repartition records into the Running and Stopped tables.

        Tables whose rows changed get their selection cleared and cursor
        clamped; unchanged tables keep both.

        Returns:
            True if either table changed
        """
        running, stopped = partition_records(list(records), list(statuses))
        changed_running = self.running.replace_rows(running)
        changed_stopped = self.stopped.replace_rows(stopped)
        self.sync_table_scroll()
        return changed_running or changed_stopped

    # -------------------------------------------------------------------------
    # Messages
    # -------------------------------------------------------------------------

    def status_message(self) -> str:
        """Most relevant transient message for the status line."""
        if self.delete_confirmation_message and self.modal_state != ModalState.DELETE_CONFIRMATION:
            return self.delete_confirmation_message
        return ""
