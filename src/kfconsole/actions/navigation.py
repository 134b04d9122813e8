"""
Navigation handlers for the Normal state.

Handles the focus graph between the five panes, the common hotkeys,
cursor movement inside the tables and page-wise scrolling.
"""

from typing import TYPE_CHECKING

from ..constants import (
    KEY_DOWN,
    KEY_ENTER,
    KEY_LEFT,
    KEY_PAGE_DOWN,
    KEY_PAGE_UP,
    KEY_RIGHT,
    KEY_SPACE,
    KEY_TAB,
    KEY_UP,
    MENU_ABOUT,
    MENU_EXIT,
    MENU_EXPORT,
    MENU_HELP,
    MENU_IMPORT,
    MENU_ITEMS,
)
from ..logging_config import get_logger
from ..state import ActiveTable, ModalState, Pane

if TYPE_CHECKING:
    from ..input_events import KeyPress
    from ..state import Session

logger = get_logger("navigation")


# Tab cycles the top-level panes; the right-hand column falls back to Menu
TAB_ORDER = {
    Pane.MENU: Pane.STOPPED_TABLE,
    Pane.STOPPED_TABLE: Pane.DETAILS,
    Pane.DETAILS: Pane.MENU,
    Pane.RUNNING_TABLE: Pane.MENU,
    Pane.LOGS: Pane.MENU,
}


class NavigationActionsMixin:
    """Mixin providing Normal-state navigation for InputDispatcher."""

    PANE_HANDLERS = {
        Pane.MENU: "_handle_menu_input",
        Pane.STOPPED_TABLE: "_handle_stopped_table_input",
        Pane.RUNNING_TABLE: "_handle_running_table_input",
        Pane.DETAILS: "_handle_details_input",
        Pane.LOGS: "_handle_logs_input",
    }

    async def handle_normal_input(self, session: "Session", key: "KeyPress") -> None:
        """Common hotkeys first, then Tab/paging, then the focused pane."""
        if self._handle_common_hotkeys(session, key):
            return

        if key.key == KEY_TAB:
            self.action_cycle_focus(session)
        elif key.key == KEY_PAGE_UP:
            self.action_page_up(session)
        elif key.key == KEY_PAGE_DOWN:
            self.action_page_down(session)
        else:
            handler = getattr(self, self.PANE_HANDLERS[session.focus])
            await handler(session, key)

    def _handle_common_hotkeys(self, session: "Session", key: "KeyPress") -> bool:
        """Hotkeys that work in every pane. Returns True if handled."""
        if key.key == "c":
            self.action_clear_logs(session)
        elif key.key == "q":
            session.modal_state = ModalState.ABOUT
        elif key.key == "i":
            self.action_open_import_browser(session)
        elif key.key == "e":
            self.action_open_export_browser(session)
        elif key.key == "h":
            session.modal_state = ModalState.HELP
        else:
            return False
        return True

    # -------------------------------------------------------------------------
    # Focus graph
    # -------------------------------------------------------------------------

    def action_cycle_focus(self, session: "Session") -> None:
        """Tab: Menu -> Stopped table -> Details -> Menu."""
        target = TAB_ORDER[session.focus]
        if target == Pane.STOPPED_TABLE:
            session.enter_table(ActiveTable.STOPPED)
        else:
            session.focus = target

    def _leave_table(self, session: "Session", target: Pane) -> None:
        """Move focus out of a table, dropping both tables' selection and cursor."""
        session.focus = target
        session.clear_tables()

    async def _handle_menu_input(self, session: "Session", key: "KeyPress") -> None:
        if key.key == KEY_LEFT:
            if session.selected_menu_item > 0:
                session.selected_menu_item -= 1
        elif key.key == KEY_RIGHT:
            if session.selected_menu_item < len(MENU_ITEMS) - 1:
                session.selected_menu_item += 1
        elif key.key == KEY_DOWN:
            session.enter_table(ActiveTable.STOPPED)
        elif key.key == KEY_ENTER:
            self.action_activate_menu_item(session)

    def action_activate_menu_item(self, session: "Session") -> None:
        item = MENU_ITEMS[session.selected_menu_item]
        logger.debug(f"Menu item activated: {item}")
        if item == MENU_HELP:
            session.modal_state = ModalState.HELP
        elif item == MENU_IMPORT:
            self.action_open_import_browser(session)
        elif item == MENU_EXPORT:
            self.action_open_export_browser(session)
        elif item == MENU_ABOUT:
            session.modal_state = ModalState.ABOUT
        elif item == MENU_EXIT:
            self.shutdown.request()

    async def _handle_stopped_table_input(self, session: "Session", key: "KeyPress") -> None:
        table = session.stopped
        if key.key == KEY_RIGHT:
            session.enter_table(ActiveTable.RUNNING)
        elif key.key == KEY_UP:
            if table.at_first_row():
                self._leave_table(session, Pane.MENU)
            else:
                table.cursor_up()
        elif key.key == KEY_DOWN:
            if table.at_last_row():
                self._leave_table(session, Pane.DETAILS)
            else:
                table.cursor_down()
        else:
            await self._handle_table_action_keys(session, key)

    async def _handle_running_table_input(self, session: "Session", key: "KeyPress") -> None:
        table = session.running
        if key.key == KEY_LEFT:
            session.enter_table(ActiveTable.STOPPED)
        elif key.key == KEY_UP:
            if table.at_first_row():
                self._leave_table(session, Pane.MENU)
            else:
                table.cursor_up()
        elif key.key == KEY_DOWN:
            if table.at_last_row():
                self._leave_table(session, Pane.LOGS)
            else:
                table.cursor_down()
        else:
            await self._handle_table_action_keys(session, key)

    async def _handle_table_action_keys(self, session: "Session", key: "KeyPress") -> None:
        """Selection, forwarding and delete keys shared by both tables."""
        if key.key == KEY_SPACE:
            self.action_toggle_row(session)
        elif key.key == "a":
            self.action_toggle_select_all(session)
        elif key.key == "f":
            await self.action_port_forward(session)
        elif key.key == "d":
            self.action_show_delete_confirmation(session)

    async def _handle_details_input(self, session: "Session", key: "KeyPress") -> None:
        if key.key == KEY_RIGHT:
            session.focus = Pane.LOGS
        elif key.key == KEY_UP:
            session.enter_table(ActiveTable.STOPPED)

    async def _handle_logs_input(self, session: "Session", key: "KeyPress") -> None:
        if key.key == KEY_LEFT:
            session.focus = Pane.DETAILS
        elif key.key == KEY_UP:
            session.enter_table(ActiveTable.RUNNING)

    # -------------------------------------------------------------------------
    # Paging
    # -------------------------------------------------------------------------

    def action_page_up(self, session: "Session") -> None:
        """Page the focused region up by visible_rows."""
        rows = session.visible_rows
        if session.focus == Pane.STOPPED_TABLE:
            session.stopped.page_up(rows)
        elif session.focus == Pane.RUNNING_TABLE:
            session.running.page_up(rows)
        elif session.focus == Pane.DETAILS:
            session.details_scroll.page_up(rows)
        elif session.focus == Pane.LOGS:
            session.logs_scroll.page_up(rows)

    def action_page_down(self, session: "Session") -> None:
        """Page the focused region down by visible_rows."""
        rows = session.visible_rows
        if session.focus == Pane.STOPPED_TABLE:
            session.stopped.page_down(rows)
        elif session.focus == Pane.RUNNING_TABLE:
            session.running.page_down(rows)
        elif session.focus == Pane.DETAILS:
            session.details_scroll.page_down(rows)
        elif session.focus == Pane.LOGS:
            session.logs_scroll.page_down(rows)

    def action_clear_logs(self, session: "Session") -> None:
        """Empty the live log buffer and rewind the Logs pane."""
        session.log_buffer.clear()
        session.logs_scroll.set_max_offset(0)
