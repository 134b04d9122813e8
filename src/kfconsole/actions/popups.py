"""
Modal popup handlers.

Error and confirmation popups, the Help and About overlays and the
delete confirmation dialog. None of these ever fall through to pane
navigation.
"""

from typing import TYPE_CHECKING

from ..constants import (
    DELETE_CONFIRMATION_PROMPT,
    DELETE_FAILURE_PREFIX,
    DELETE_SUCCESS_MESSAGE,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
)
from ..errors import RecordStoreError
from ..logging_config import get_logger
from ..state import DeleteButton, ModalState

if TYPE_CHECKING:
    from ..input_events import KeyPress
    from ..state import Session

logger = get_logger("popups")


class PopupActionsMixin:
    """Mixin providing popup and dialog handlers for InputDispatcher."""

    async def handle_error_popup_input(self, session: "Session", key: "KeyPress") -> None:
        if key.key in (KEY_ENTER, KEY_ESCAPE):
            session.error_message = None
            session.modal_state = ModalState.NORMAL

    async def handle_confirmation_popup_input(self, session: "Session", key: "KeyPress") -> None:
        if key.key in (KEY_ENTER, KEY_ESCAPE):
            session.import_export_message = None
            session.modal_state = ModalState.NORMAL

    async def handle_help_input(self, session: "Session", key: "KeyPress") -> None:
        if key.key in (KEY_ENTER, KEY_ESCAPE, "h"):
            session.modal_state = ModalState.NORMAL

    async def handle_about_input(self, session: "Session", key: "KeyPress") -> None:
        if key.key in (KEY_ENTER, KEY_ESCAPE, "q"):
            session.modal_state = ModalState.NORMAL

    # -------------------------------------------------------------------------
    # Delete confirmation
    # -------------------------------------------------------------------------

    def action_show_delete_confirmation(self, session: "Session") -> None:
        """Open the delete dialog if any stopped rows are selected."""
        if not session.stopped.selected:
            return
        session.delete_confirmation_message = DELETE_CONFIRMATION_PROMPT
        session.selected_delete_button = DeleteButton.CONFIRM
        session.modal_state = ModalState.DELETE_CONFIRMATION

    async def handle_delete_confirmation_input(self, session: "Session", key: "KeyPress") -> None:
        if key.key in (KEY_LEFT, KEY_RIGHT):
            if session.selected_delete_button == DeleteButton.CONFIRM:
                session.selected_delete_button = DeleteButton.CLOSE
            else:
                session.selected_delete_button = DeleteButton.CONFIRM
        elif key.key == KEY_ENTER:
            if session.selected_delete_button == DeleteButton.CONFIRM:
                await self._delete_selected_stopped(session)
            else:
                session.delete_confirmation_message = None
            session.stopped.clear_selection()
            session.modal_state = ModalState.NORMAL
        elif key.key == KEY_ESCAPE:
            session.delete_confirmation_message = None
            session.modal_state = ModalState.NORMAL

    async def _delete_selected_stopped(self, session: "Session") -> None:
        """Delete every still-present selected stopped record from the store."""
        ids = [r.id for r in session.stopped.selected_rows() if r.id is not None]
        if not ids:
            session.delete_confirmation_message = None
            return

        try:
            await self.store.delete(ids)
        except RecordStoreError as e:
            logger.error(f"Failed to delete configs {ids}: {e}")
            session.delete_confirmation_message = f"{DELETE_FAILURE_PREFIX}: {e}"
            return

        doomed = set(ids)
        session.stopped.remove_where(lambda record: record.id in doomed)
        logger.info(f"Deleted {len(ids)} config(s)")
        session.delete_confirmation_message = DELETE_SUCCESS_MESSAGE
