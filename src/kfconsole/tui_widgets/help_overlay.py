"""
Help overlay widget for TUI.

Displays keyboard shortcuts and pane navigation in a two-column layout.
"""

from textual.widgets import Static
from rich.table import Table
from rich.text import Text
from rich.panel import Panel
from rich import box


class HelpOverlay(Static):
    """Help overlay listing every console key binding"""

    def _build_keybindings(self) -> Text:
        """Build the keybindings column."""
        t = Text()

        def section(title):
            t.append(f"  {title}\n", style="bold bright_white")
            t.append("  " + "─" * 50 + "\n", style="dim")

        def row(k, desc, k2=None, desc2=None):
            t.append(f"  {k:<10}", style="bold cyan")
            if k2:
                t.append(f"{desc:<22}", style="white")
                t.append(f"{k2:<10}", style="bold cyan")
                t.append(f"{desc2}\n", style="white")
            else:
                t.append(f"{desc}\n", style="white")

        section("NAVIGATION")
        row("↑/↓", "Move / change pane", "←/→", "Switch pane")
        row("Tab", "Menu → Stopped → Details")
        row("PgUp/PgDn", "Page the focused pane")
        t.append("\n")

        section("CONFIGS")
        row("space", "Select row", "a", "Select all / none")
        row("f", "Start / stop forward", "d", "Delete selected")
        t.append("\n")

        section("OTHER")
        row("i", "Import configs", "e", "Export configs")
        row("c", "Clear logs", "q", "About")
        row("h", "Toggle help", "Ctrl+C", "Stop all and quit")

        return t

    def _build_pane_reference(self) -> Text:
        """Build the pane layout column."""
        t = Text()

        def section(title):
            t.append(f"{title}\n", style="bold bright_white")
            t.append("─" * 34 + "\n", style="dim")

        def pane(name, desc):
            t.append(f"{name}\n", style="bold white")
            t.append(f"   {desc}\n\n", style="dim")

        section("PANES")
        pane("Menu", "Help · Import · Export · About · Exit")
        pane("Stopped", "Configs not forwarding (→ Running)")
        pane("Running", "Active forwards (← Stopped)")
        pane("Details", "Config under the cursor (→ Logs)")
        pane("Logs", "Live output (c clears)")

        section("DIALOGS")
        t.append("Enter", style="bold cyan")
        t.append(" confirm   ", style="dim")
        t.append("Esc", style="bold cyan")
        t.append(" cancel\n", style="dim")

        return t

    def render(self):
        layout = Table(
            show_header=False,
            show_edge=False,
            box=None,
            padding=(0, 2),
            expand=True,
        )
        layout.add_column("keys", ratio=3, no_wrap=True)
        layout.add_column("panes", ratio=2)

        layout.add_row(
            self._build_keybindings(),
            self._build_pane_reference(),
        )

        title = Text()
        title.append(" KFCONSOLE HELP ", style="bold bright_white")

        return Panel(
            layout,
            title=title,
            subtitle=Text("Press h, Enter or Esc to close", style="dim"),
            border_style="bright_blue",
            box=box.DOUBLE,
        )
