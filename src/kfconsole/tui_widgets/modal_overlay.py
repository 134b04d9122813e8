"""
Modal overlay widget for TUI.

One centered box that shows whichever popup the current modal state
calls for: error, confirmation, delete dialog, export prompt, a file
browser or the About box. Help has its own full-screen overlay.
"""

from textual.widgets import Static
from rich.panel import Panel
from rich import box

from .. import __version__
from ..state import ModalState, Session
from ..tui_render import (
    render_about,
    render_delete_dialog,
    render_file_browser,
    render_input_prompt,
    render_message_popup,
)


# States this overlay draws; Normal and Help are handled elsewhere
OVERLAY_STATES = {
    ModalState.ERROR_POPUP,
    ModalState.CONFIRMATION_POPUP,
    ModalState.IMPORT_BROWSER,
    ModalState.EXPORT_BROWSER,
    ModalState.INPUT_PROMPT,
    ModalState.ABOUT,
    ModalState.DELETE_CONFIRMATION,
}


class ModalOverlay(Static):
    """Popup box for the non-Normal modal states"""

    def update_from_session(self, session: Session) -> None:
        state = session.modal_state
        if state not in OVERLAY_STATES:
            self.remove_class("visible")
            return

        border = "bright_blue"
        if state == ModalState.ERROR_POPUP:
            body = render_message_popup("Error", session.error_message, "red")
            border = "red"
        elif state == ModalState.CONFIRMATION_POPUP:
            body = render_message_popup("Done", session.import_export_message, "green")
            border = "green"
        elif state == ModalState.DELETE_CONFIRMATION:
            body = render_delete_dialog(
                session.delete_confirmation_message, session.selected_delete_button
            )
            border = "red"
        elif state == ModalState.INPUT_PROMPT:
            body = render_input_prompt(session.selected_file_path, session.input_buffer)
        elif state == ModalState.IMPORT_BROWSER:
            body = render_file_browser("Import configs from file", session.import_browser)
        elif state == ModalState.EXPORT_BROWSER:
            body = render_file_browser("Export configs to directory", session.export_browser)
        else:
            body = render_about(__version__)

        self.update(Panel(body, border_style=border, box=box.ROUNDED))
        self.add_class("visible")
