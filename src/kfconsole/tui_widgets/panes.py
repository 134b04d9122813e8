"""
Pane widgets for TUI.

Each pane renders its slice of the Session; none of them handles input.
Keys reach the dispatcher through the app's input source instead.
"""

from textual.widgets import Static
from rich.panel import Panel

from ..state import ActiveTable, Pane, Session
from ..tui_render import (
    border_style,
    details_lines,
    render_details,
    render_logs,
    render_menu,
    render_record_table,
    render_status_line,
)


class MenuBar(Static):
    """Top menu: Help, Import, Export, About, Exit"""

    def update_from_session(self, session: Session) -> None:
        focused = session.focus == Pane.MENU
        self.update(Panel(
            render_menu(session.selected_menu_item, focused),
            border_style=border_style(focused),
            title="kfconsole",
            title_align="left",
        ))


class RecordTable(Static):
    """Stopped or Running configs table"""

    TITLES = {
        ActiveTable.STOPPED: "Stopped Configs",
        ActiveTable.RUNNING: "Running Configs",
    }
    PANES = {
        ActiveTable.STOPPED: Pane.STOPPED_TABLE,
        ActiveTable.RUNNING: Pane.RUNNING_TABLE,
    }

    def __init__(self, which: ActiveTable, **kwargs):
        super().__init__(**kwargs)
        self.which = which

    def update_from_session(self, session: Session) -> None:
        table = session.table(self.which)
        focused = session.focus == self.PANES[self.which]
        title = f"{self.TITLES[self.which]} ({len(table)})"
        if table.selected:
            title += f" · {len(table.selected)} selected"
        self.update(render_record_table(
            title,
            table,
            session.table_scroll(self.which),
            session.visible_rows,
            focused,
        ))


class DetailsPane(Static):
    """Details of the config under the active table's cursor"""

    def update_from_session(self, session: Session) -> None:
        record = session.focused_record()
        height = max(1, self.size.height - 2)
        session.details_scroll.set_content_height(len(details_lines(record)), height)
        focused = session.focus == Pane.DETAILS
        self.update(Panel(
            render_details(record, session.details_scroll.offset),
            title="Details",
            title_align="left",
            border_style=border_style(focused),
        ))


class LogsPane(Static):
    """Live log output captured from the log buffer"""

    def update_from_session(self, session: Session) -> None:
        lines = session.log_buffer.lines()
        height = max(1, self.size.height - 2)
        region = session.logs_scroll
        # Follow the tail unless the user paged up
        at_bottom = region.offset >= region.max_offset
        region.set_content_height(len(lines), height)
        if at_bottom:
            region.offset = region.max_offset
        focused = session.focus == Pane.LOGS
        self.update(Panel(
            render_logs(lines, region.offset, height),
            title="Logs",
            title_align="left",
            border_style=border_style(focused),
        ))


class StatusLine(Static):
    """One-line footer with counts, last message and key hints"""

    def update_from_session(self, session: Session) -> None:
        total = len(session.stopped) + len(session.running)
        self.update(render_status_line(session.status_message(), total, len(session.running)))
