"""
Textual TUI for kfconsole.

The app owns layout and rendering only. Every key is translated into a
KeyPress and queued; a single worker runs the dispatcher's event loop,
which mutates the Session and asks the app to re-render after each poll.
"""

import os
import sys
from pathlib import Path
from typing import Optional

from textual import events, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Header

from . import __version__
from .config import (
    get_kubectl_command,
    get_log_file,
    get_log_level,
    get_refresh_seconds,
    get_store_path,
)
from .constants import KEY_SPACE, SPECIAL_KEYS
from .dispatcher import InputDispatcher
from .errors import ForwardingError, InputSourceError, RecordStoreError
from .implementations import (
    DirectoryBrowser,
    JsonRecordStore,
    KubectlForwardingEngine,
    QueueInputSource,
)
from .input_events import KeyPress, Resize
from .log_buffer import LogBuffer
from .logging_config import get_logger, parse_level, setup_tui_logging
from .protocols import FileBrowser, ForwardingEngine, RecordStore
from .shutdown import ShutdownCoordinator
from .state import ActiveTable, ModalState, Pane, Session
from .tui_widgets import (
    DetailsPane,
    HelpOverlay,
    LogsPane,
    MenuBar,
    ModalOverlay,
    RecordTable,
    StatusLine,
)

logger = get_logger("tui")


class ConsoleTUI(App):
    """kfconsole port-forward dashboard"""

    AUTO_FOCUS = None

    # Load CSS from external file
    CSS_PATH = "tui.tcss"

    # Special keys bypass Textual's focus handling so Tab, Enter and
    # Ctrl+C always reach the dispatcher
    BINDINGS = [
        Binding(key, f"forward_key('{key}')", show=False, priority=True)
        for key in SPECIAL_KEYS
    ]

    def __init__(
        self,
        store: RecordStore,
        engine: ForwardingEngine,
        log_buffer: Optional[LogBuffer] = None,
        import_browser: Optional[FileBrowser] = None,
        export_browser: Optional[FileBrowser] = None,
        refresh_seconds: float = 2.0,
    ):
        super().__init__()
        self.store = store
        self.engine = engine
        self.refresh_seconds = refresh_seconds
        self.input_source = QueueInputSource()
        self.session = Session(
            log_buffer=log_buffer,
            import_browser=import_browser,
            export_browser=export_browser,
        )
        self.coordinator = ShutdownCoordinator(engine, on_exit=self.exit)
        self.dispatcher = InputDispatcher(
            self.input_source, engine, store, shutdown=self.coordinator
        )
        self._loaded = False

    def compose(self) -> ComposeResult:
        """Create child widgets"""
        yield Header(show_clock=True)
        yield MenuBar(id="menu-bar")
        with Horizontal(id="tables"):
            yield RecordTable(ActiveTable.STOPPED, id="stopped-table")
            yield RecordTable(ActiveTable.RUNNING, id="running-table")
        with Horizontal(id="bottom"):
            yield DetailsPane(id="details-pane")
            yield LogsPane(id="logs-pane")
        yield StatusLine(id="status-line")
        yield ModalOverlay(id="modal-overlay")
        yield HelpOverlay(id="help-overlay")

    def on_mount(self) -> None:
        """Called when app starts"""
        self.title = f"kfconsole v{__version__}"
        self.session.set_terminal_height(self.size.height)
        self.render_session()
        self.reload_records()
        self.set_interval(self.refresh_seconds, self.reload_records)
        self.run_worker(self._run_dispatcher(), exclusive=True, group="dispatcher")

    async def _run_dispatcher(self) -> None:
        try:
            await self.dispatcher.run_event_loop(self.session, on_tick=self.render_session)
        except InputSourceError as e:
            logger.error(f"Input channel failed: {e}")
            await self.coordinator.shutdown()

    # -------------------------------------------------------------------------
    # Input translation
    # -------------------------------------------------------------------------

    def action_forward_key(self, key: str) -> None:
        """Queue a special key for the dispatcher."""
        if key == KEY_SPACE:
            self.input_source.push(KeyPress.char(" "))
        else:
            self.input_source.push(KeyPress(key))

    def on_key(self, event: events.Key) -> None:
        """Queue typed characters; special keys arrive via bindings."""
        if event.character and event.is_printable:
            self.input_source.push(KeyPress.char(event.character))
            event.stop()

    def on_resize(self, event: events.Resize) -> None:
        self.input_source.push(Resize(event.size.width, event.size.height))

    # -------------------------------------------------------------------------
    # Data refresh
    # -------------------------------------------------------------------------

    @work(exclusive=True, group="reload_records")
    async def reload_records(self) -> None:
        """Re-read records and forward states, then repartition the tables."""
        if self.dispatcher.busy:
            return
        try:
            records = await self.store.list_records()
            states = await self.engine.list_states()
        except (RecordStoreError, ForwardingError) as e:
            logger.error(f"Failed to reload configs: {e}")
            return
        # A key may have been handled while we were reading
        if self.dispatcher.busy:
            return
        changed = self.session.refresh(records, states)
        if not self._loaded:
            self._loaded = True
            if self.session.focus == Pane.STOPPED_TABLE:
                self.session.enter_table(ActiveTable.STOPPED)
                changed = True
        if changed:
            self.render_session()

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render_session(self) -> None:
        """Push the current Session into every widget."""
        if not self.is_running:
            return
        for widget_type in (MenuBar, RecordTable, DetailsPane, LogsPane, StatusLine, ModalOverlay):
            for widget in self.query(widget_type):
                widget.update_from_session(self.session)
        help_overlay = self.query_one("#help-overlay", HelpOverlay)
        help_overlay.set_class(self.session.modal_state == ModalState.HELP, "visible")

    def on_unmount(self) -> None:
        """Release the input channel"""
        self.input_source.close()


def run_tui(store_path: Optional[Path] = None, log_level: Optional[str] = None):
    """Run the console TUI"""
    # Ensure we're using a proper terminal
    if not sys.stdout.isatty():
        print("Error: Must run in a TTY terminal", file=sys.stderr)
        sys.exit(1)

    os.environ.setdefault("TERM", "xterm-256color")

    buffer = LogBuffer()
    setup_tui_logging(
        buffer,
        level=parse_level(log_level or get_log_level()),
        log_file=get_log_file(),
    )
    store = JsonRecordStore(store_path or get_store_path())
    engine = KubectlForwardingEngine(get_kubectl_command())
    logger.info(f"kfconsole v{__version__} starting (store: {store.path})")

    app = ConsoleTUI(
        store,
        engine,
        log_buffer=buffer,
        import_browser=DirectoryBrowser(),
        export_browser=DirectoryBrowser(),
        refresh_seconds=get_refresh_seconds(),
    )
    app.run()
