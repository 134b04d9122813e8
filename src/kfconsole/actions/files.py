"""
Import/export handlers.

Drives the two file browsers and the export filename prompt. Record
parsing and serialization are left to the record store.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from ..constants import (
    EXPORT_SUCCESS_TEMPLATE,
    IMPORT_SUCCESS_TEMPLATE,
    KEY_BACKSPACE,
    KEY_ENTER,
    KEY_ESCAPE,
)
from ..errors import RecordStoreError
from ..logging_config import get_logger
from ..state import ModalState

if TYPE_CHECKING:
    from ..input_events import KeyPress
    from ..state import Session

logger = get_logger("files")


def export_target(directory: Path, filename: str) -> Path:
    """Path an export is written to; '.json' is appended when missing."""
    name = filename.strip()
    if not name.lower().endswith(".json"):
        name += ".json"
    return directory / name


class FileActionsMixin:
    """Mixin providing import/export handlers for InputDispatcher."""

    def action_open_import_browser(self, session: "Session") -> None:
        session.modal_state = ModalState.IMPORT_BROWSER
        session.selected_file_path = self.cwd()
        if session.import_browser is not None:
            session.import_browser.set_cwd(session.selected_file_path)

    def action_open_export_browser(self, session: "Session") -> None:
        session.modal_state = ModalState.EXPORT_BROWSER
        session.selected_file_path = self.cwd()
        if session.export_browser is not None:
            session.export_browser.set_cwd(session.selected_file_path)

    async def handle_import_browser_input(self, session: "Session", key: "KeyPress") -> None:
        browser = session.import_browser
        if key.key == KEY_ESCAPE:
            session.modal_state = ModalState.NORMAL
            return
        if browser is None:
            return

        current = browser.current()
        if key.key == KEY_ENTER and current is not None and not current.is_dir():
            session.selected_file_path = current
            await self._import_file(session)
        else:
            browser.handle_key(key.key)

    async def _import_file(self, session: "Session") -> None:
        path = session.selected_file_path
        try:
            text = session.import_browser.read_current()
            count = await self.store.import_records(text)
        except (OSError, UnicodeDecodeError, RecordStoreError) as e:
            logger.error(f"Import from {path} failed: {e}")
            session.error_message = f"Failed to import configs: {e}"
            session.modal_state = ModalState.ERROR_POPUP
            return
        logger.info(f"Imported {count} config(s) from {path}")
        session.import_export_message = IMPORT_SUCCESS_TEMPLATE.format(count=count, path=path)
        session.modal_state = ModalState.CONFIRMATION_POPUP

    async def handle_export_browser_input(self, session: "Session", key: "KeyPress") -> None:
        browser = session.export_browser
        if key.key == KEY_ESCAPE:
            session.modal_state = ModalState.NORMAL
            return
        if browser is None:
            return

        if key.key == KEY_ENTER:
            current = browser.current()
            # A highlighted file exports next to it
            if current is not None and current.is_dir():
                session.selected_file_path = current
            else:
                session.selected_file_path = browser.cwd
            session.input_buffer = ""
            session.modal_state = ModalState.INPUT_PROMPT
        else:
            browser.handle_key(key.key)

    async def handle_input_prompt_input(self, session: "Session", key: "KeyPress") -> None:
        if key.key == KEY_ESCAPE:
            session.input_buffer = ""
            session.modal_state = ModalState.NORMAL
        elif key.key == KEY_BACKSPACE:
            session.input_buffer = session.input_buffer[:-1]
        elif key.key == KEY_ENTER:
            if session.input_buffer.strip():
                await self._export_file(session)
        elif key.is_printable:
            session.input_buffer += key.character

    async def _export_file(self, session: "Session") -> None:
        directory = session.selected_file_path or self.cwd()
        target = export_target(directory, session.input_buffer)
        session.input_buffer = ""
        try:
            text = await self.store.export_records()
            target.write_text(text)
        except (OSError, RecordStoreError) as e:
            logger.error(f"Export to {target} failed: {e}")
            session.error_message = f"Failed to export configs: {e}"
            session.modal_state = ModalState.ERROR_POPUP
            return
        logger.info(f"Exported configs to {target}")
        session.import_export_message = EXPORT_SUCCESS_TEMPLATE.format(path=target)
        session.modal_state = ModalState.CONFIRMATION_POPUP
