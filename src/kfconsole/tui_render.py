"""
Pure render functions for TUI components.

These functions are extracted from TUI widgets to enable unit testing
without requiring the full Textual framework.

All functions are pure - they take data as input and return Rich
renderables. No side effects beyond reading the objects passed in.
"""

from pathlib import Path
from typing import List, Optional, Tuple

from rich import box
from rich.table import Table
from rich.text import Text

from .constants import MENU_ITEMS
from .models import Record
from .protocols import FileBrowser
from .scroll import ScrollRegion
from .state import DeleteButton
from .table_model import SelectableTable


FOCUSED_BORDER = "bold cyan"
UNFOCUSED_BORDER = "dim"


def border_style(focused: bool) -> str:
    return FOCUSED_BORDER if focused else UNFOCUSED_BORDER


def render_menu(selected_item: int, focused: bool) -> Text:
    """Render the top menu bar."""
    content = Text()
    for i, item in enumerate(MENU_ITEMS):
        if i == selected_item and focused:
            style = "bold black on cyan"
        elif i == selected_item:
            style = "bold"
        else:
            style = ""
        content.append(f" {item} ", style=style)
        content.append("  ")
    return content


def format_ports(record: Record) -> str:
    return f"{record.local_port} → {record.remote_port}"


def render_record_table(
    title: str,
    table: SelectableTable[Record],
    region: ScrollRegion,
    visible_rows: int,
    focused: bool,
) -> Table:
    """Render one record table, windowed by its scroll region.

    Args:
        title: Table title
        table: Rows, cursor and selection
        region: Scroll region giving the first visible row
        visible_rows: Rows to show (0 shows everything)
        focused: Whether the pane has focus

    Returns:
        Rich Table for the visible slice
    """
    grid = Table(
        title=title,
        box=box.SIMPLE_HEAD,
        expand=True,
        border_style=border_style(focused),
        title_style=FOCUSED_BORDER if focused else "bold",
    )
    grid.add_column(" ", width=3, no_wrap=True)
    grid.add_column("Alias", ratio=2, no_wrap=True)
    grid.add_column("Context", ratio=2, no_wrap=True)
    grid.add_column("Namespace", ratio=2, no_wrap=True)
    grid.add_column("Target", ratio=3, no_wrap=True)
    grid.add_column("Ports", ratio=2, no_wrap=True)

    if table.is_empty:
        grid.add_row("", Text("(no configs)", style="dim italic"), "", "", "", "")
        return grid

    start = region.offset
    end = len(table) if visible_rows <= 0 else start + visible_rows
    for index in range(start, min(end, len(table))):
        record = table.rows[index]
        selected = index in table.selected
        marker = Text("[x]" if selected else "[ ]", style="bold green" if selected else "dim")
        if index == table.cursor:
            style = "reverse" if focused else "bold"
        else:
            style = ""
        grid.add_row(
            marker,
            Text(record.display_name),
            Text(record.context or "-"),
            Text(record.namespace),
            Text(record.target),
            format_ports(record),
            style=style,
        )
    return grid


def details_lines(record: Optional[Record]) -> List[Tuple[str, str]]:
    """Label/value pairs describing a record."""
    if record is None:
        return []
    return [
        ("Alias", record.alias or "-"),
        ("Service", record.service),
        ("Workload", record.workload_type),
        ("Namespace", record.namespace),
        ("Context", record.context or "-"),
        ("Local address", f"{record.local_address}:{record.local_port}"),
        ("Remote port", str(record.remote_port)),
        ("Remote address", record.remote_address or "-"),
        ("Protocol", record.protocol),
        ("Kubeconfig", record.kubeconfig or "default"),
        ("ID", str(record.id) if record.id is not None else "unsaved"),
    ]


def render_details(record: Optional[Record], offset: int) -> Text:
    """Render the Details pane starting at line `offset`."""
    lines = details_lines(record)
    content = Text()
    if not lines:
        content.append("No config selected", style="dim italic")
        return content
    for label, value in lines[offset:]:
        content.append(f"{label:<15}", style="bold cyan")
        content.append(f"{value}\n")
    return content


def render_logs(lines: List[str], offset: int, height: int) -> Text:
    """Render the visible window of the Logs pane."""
    content = Text()
    if not lines:
        content.append("(no output)", style="dim italic")
        return content
    window = lines[offset:offset + height] if height > 0 else lines[offset:]
    for line in window:
        if " ERROR " in line:
            content.append(line + "\n", style="red")
        elif " WARNING " in line:
            content.append(line + "\n", style="yellow")
        else:
            content.append(line + "\n")
    return content


def render_about(version: str) -> Text:
    content = Text()
    content.append("kfconsole", style="bold cyan")
    content.append(f"  v{version}\n\n")
    content.append("Manage Kubernetes port-forwards from the terminal.\n\n")
    content.append("Esc / Enter / q to close", style="dim")
    return content


def render_message_popup(title: str, message: str, style: str) -> Text:
    """Render an error or confirmation popup body."""
    content = Text()
    content.append(f"{title}\n\n", style=f"bold {style}")
    content.append(message or "")
    content.append("\n\nEnter / Esc to close", style="dim")
    return content


def render_delete_dialog(message: Optional[str], button: DeleteButton) -> Text:
    content = Text()
    content.append("Delete configs\n\n", style="bold red")
    content.append(f"{message or ''}\n\n")
    confirm_style = "bold black on red" if button == DeleteButton.CONFIRM else "dim"
    close_style = "bold black on cyan" if button == DeleteButton.CLOSE else "dim"
    content.append(" Confirm ", style=confirm_style)
    content.append("   ")
    content.append(" Close ", style=close_style)
    content.append("\n\n←/→ choose · Enter apply · Esc cancel", style="dim")
    return content


def render_input_prompt(directory: Optional[Path], buffer: str) -> Text:
    content = Text()
    content.append("Export configs\n\n", style="bold cyan")
    content.append("Directory: ", style="bold")
    content.append(f"{directory or ''}\n")
    content.append("File name: ", style="bold")
    content.append(buffer)
    content.append("█\n\n", style="blink")
    content.append("Enter save · Esc cancel", style="dim")
    return content


def render_file_browser(title: str, browser: Optional[FileBrowser], max_rows: int = 20) -> Text:
    """Render a file browser listing around its highlighted entry."""
    content = Text()
    content.append(f"{title}\n", style="bold cyan")
    if browser is None:
        content.append("(no browser available)", style="dim italic")
        return content

    content.append(f"{browser.cwd}\n\n", style="dim")
    entries = browser.entries()
    current = browser.current()
    if not entries:
        content.append("(empty directory)", style="dim italic")
    else:
        index = entries.index(current) if current in entries else 0
        start = max(0, index - max_rows // 2)
        for entry in entries[start:start + max_rows]:
            label = entry.name + ("/" if entry.is_dir() else "")
            style = "reverse" if entry == current else ("bold blue" if entry.is_dir() else "")
            content.append(f" {label}\n", style=style)
    content.append("\n↑/↓ move · →/Enter open · ←/Backspace up · Esc close", style="dim")
    return content


def render_status_line(message: str, record_count: int, running_count: int) -> Text:
    content = Text()
    content.append(f" {running_count}/{record_count} forwarding ", style="bold")
    if message:
        content.append(" │ ", style="dim")
        content.append(message, style="yellow")
    content.append("   h:Help  Tab:Focus  space:Select  a:All  f:Start/Stop  d:Delete  Ctrl+C:Quit", style="dim")
    return content
