"""
Input dispatcher and event loop.

Each call to handle_input polls the input source once with a bounded
wait, applies the global interrupt hotkey, then routes the key to the
single handler registered for the current modal state. Resize events
recompute the page step.
"""

from pathlib import Path
from typing import Callable, Optional

from .actions import (
    FileActionsMixin,
    ForwardingActionsMixin,
    NavigationActionsMixin,
    PopupActionsMixin,
    SelectionActionsMixin,
)
from .constants import KEY_INTERRUPT, POLL_TIMEOUT_SECONDS
from .input_events import KeyPress, Resize
from .logging_config import get_logger
from .protocols import ForwardingEngine, InputSource, RecordStore
from .shutdown import ShutdownCoordinator
from .state import ModalState, Session

logger = get_logger("dispatcher")


# One handler per modal state. Must stay total over ModalState.
MODAL_HANDLERS = {
    ModalState.NORMAL: "handle_normal_input",
    ModalState.ERROR_POPUP: "handle_error_popup_input",
    ModalState.CONFIRMATION_POPUP: "handle_confirmation_popup_input",
    ModalState.IMPORT_BROWSER: "handle_import_browser_input",
    ModalState.EXPORT_BROWSER: "handle_export_browser_input",
    ModalState.INPUT_PROMPT: "handle_input_prompt_input",
    ModalState.HELP: "handle_help_input",
    ModalState.ABOUT: "handle_about_input",
    ModalState.DELETE_CONFIRMATION: "handle_delete_confirmation_input",
}


class InputDispatcher(
    NavigationActionsMixin,
    SelectionActionsMixin,
    ForwardingActionsMixin,
    PopupActionsMixin,
    FileActionsMixin,
):
    """Routes input events to the handler for the current modal state."""

    def __init__(
        self,
        input_source: InputSource,
        engine: ForwardingEngine,
        store: RecordStore,
        shutdown: Optional[ShutdownCoordinator] = None,
        cwd: Callable[[], Path] = Path.cwd,
        poll_timeout: float = POLL_TIMEOUT_SECONDS,
    ):
        self.input_source = input_source
        self.engine = engine
        self.store = store
        self.shutdown = shutdown or ShutdownCoordinator(engine)
        self.cwd = cwd
        self.poll_timeout = poll_timeout
        # Set while a key is being handled; periodic reloads wait for it
        self.busy = False

    async def handle_input(self, session: Session) -> bool:
        """Process at most one input event.

        Returns:
            True once shutdown has been requested

        Raises:
            InputSourceError: if the input channel fails
        """
        event = await self.input_source.poll(self.poll_timeout)
        if event is None:
            return self.shutdown.requested

        if isinstance(event, KeyPress):
            logger.debug(f"Key pressed: {event.key} (state={session.modal_state.value})")
            if event.key == KEY_INTERRUPT:
                self.shutdown.request()
                return True
            await self.dispatch_key(session, event)
        elif isinstance(event, Resize):
            logger.debug(f"Terminal resized to {event.width}x{event.height}")
            session.set_terminal_height(event.height)

        return self.shutdown.requested

    async def dispatch_key(self, session: Session, key: KeyPress) -> None:
        """Route one key to exactly one modal handler."""
        handler = getattr(self, MODAL_HANDLERS[session.modal_state])
        self.busy = True
        try:
            await handler(session, key)
            session.sync_table_scroll()
        finally:
            self.busy = False

    async def run_event_loop(
        self,
        session: Session,
        on_tick: Optional[Callable[[], None]] = None,
    ) -> None:
        """Poll until shutdown is requested, then perform the orderly stop.

        Args:
            session: Session to operate on
            on_tick: Called after every poll (e.g. to re-render)
        """
        while True:
            should_quit = await self.handle_input(session)
            if on_tick is not None:
                on_tick()
            if should_quit:
                break
        await self.shutdown.shutdown()
