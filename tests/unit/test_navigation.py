"""
Unit tests for Normal-state navigation.

Covers the focus graph between panes, the common hotkeys and paging.
"""

import pytest

from kfconsole.constants import MENU_ITEMS
from kfconsole.models import RecordState
from kfconsole.state import ActiveTable, ModalState, Pane, Session

from tests.fixtures import create_records, key


def loaded_session(stopped: int = 5, running: int = 3) -> Session:
    """Session with `stopped` stopped rows and `running` running rows."""
    session = Session(terminal_height=40)
    records = create_records(stopped + running)
    states = [RecordState(record_id=r.id, running=True) for r in records[stopped:]]
    session.refresh(records, states)
    return session


async def press(dispatcher, session, *names):
    for name in names:
        await dispatcher.dispatch_key(session, key(name))


class TestTabCycle:
    """Test Tab: Menu -> Stopped -> Details -> Menu."""

    @pytest.mark.asyncio
    async def test_full_cycle(self, dispatcher):
        session = loaded_session()
        session.focus = Pane.MENU

        await press(dispatcher, session, "tab")
        assert session.focus == Pane.STOPPED_TABLE
        assert session.stopped.cursor == 0

        await press(dispatcher, session, "tab")
        assert session.focus == Pane.DETAILS

        await press(dispatcher, session, "tab")
        assert session.focus == Pane.MENU

    @pytest.mark.asyncio
    @pytest.mark.parametrize("pane", [Pane.RUNNING_TABLE, Pane.LOGS])
    async def test_right_column_returns_to_menu(self, dispatcher, pane):
        session = loaded_session()
        session.focus = pane

        await press(dispatcher, session, "tab")

        assert session.focus == Pane.MENU


class TestMenu:
    """Test the menu bar."""

    @pytest.mark.asyncio
    async def test_left_right_saturate(self, dispatcher):
        session = loaded_session()
        session.focus = Pane.MENU

        await press(dispatcher, session, "left")
        assert session.selected_menu_item == 0

        await press(dispatcher, session, *["right"] * 10)
        assert session.selected_menu_item == len(MENU_ITEMS) - 1

    @pytest.mark.asyncio
    async def test_down_enters_stopped_table(self, dispatcher):
        session = loaded_session()
        session.focus = Pane.MENU

        await press(dispatcher, session, "down")

        assert session.focus == Pane.STOPPED_TABLE
        assert session.active_table == ActiveTable.STOPPED
        assert session.stopped.cursor == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("index,state", [
        (0, ModalState.HELP),
        (1, ModalState.IMPORT_BROWSER),
        (2, ModalState.EXPORT_BROWSER),
        (3, ModalState.ABOUT),
    ])
    async def test_enter_activates_item(self, dispatcher, index, state):
        session = loaded_session()
        session.focus = Pane.MENU
        session.selected_menu_item = index

        await press(dispatcher, session, "enter")

        assert session.modal_state == state


class TestStoppedTable:
    """Test navigation out of and within the Stopped table."""

    @pytest.mark.asyncio
    async def test_up_from_first_row_goes_to_menu_and_clears(self, dispatcher):
        session = loaded_session()
        session.enter_table(ActiveTable.STOPPED)
        session.stopped.selected = {1, 3}
        session.running.selected = {0}

        await press(dispatcher, session, "up")

        assert session.focus == Pane.MENU
        assert session.stopped.selected == set()
        assert session.stopped.cursor is None
        assert session.running.selected == set()
        assert session.running.cursor is None

    @pytest.mark.asyncio
    async def test_up_from_empty_table_goes_to_menu(self, dispatcher):
        session = loaded_session(stopped=0)
        session.focus = Pane.STOPPED_TABLE

        await press(dispatcher, session, "up")

        assert session.focus == Pane.MENU

    @pytest.mark.asyncio
    async def test_down_from_last_row_goes_to_details(self, dispatcher):
        session = loaded_session()
        session.enter_table(ActiveTable.STOPPED)
        session.stopped.cursor = 4

        await press(dispatcher, session, "down")

        assert session.focus == Pane.DETAILS
        assert session.stopped.cursor is None

    @pytest.mark.asyncio
    async def test_up_down_move_cursor_inside(self, dispatcher):
        session = loaded_session()
        session.enter_table(ActiveTable.STOPPED)

        await press(dispatcher, session, "down", "down", "up")

        assert session.focus == Pane.STOPPED_TABLE
        assert session.stopped.cursor == 1

    @pytest.mark.asyncio
    async def test_right_enters_running_table(self, dispatcher):
        session = loaded_session()
        session.enter_table(ActiveTable.STOPPED)
        session.stopped.selected = {2}

        await press(dispatcher, session, "right")

        assert session.focus == Pane.RUNNING_TABLE
        assert session.active_table == ActiveTable.RUNNING
        assert session.running.cursor == 0
        assert session.stopped.selected == set()
        assert session.stopped.cursor is None


class TestRunningTable:
    """Test navigation out of and within the Running table."""

    @pytest.mark.asyncio
    async def test_left_enters_stopped_table(self, dispatcher):
        session = loaded_session()
        session.enter_table(ActiveTable.RUNNING)

        await press(dispatcher, session, "left")

        assert session.focus == Pane.STOPPED_TABLE
        assert session.running.cursor is None

    @pytest.mark.asyncio
    async def test_up_from_first_row_goes_to_menu(self, dispatcher):
        session = loaded_session()
        session.enter_table(ActiveTable.RUNNING)

        await press(dispatcher, session, "up")

        assert session.focus == Pane.MENU

    @pytest.mark.asyncio
    async def test_down_from_last_row_goes_to_logs(self, dispatcher):
        session = loaded_session()
        session.enter_table(ActiveTable.RUNNING)
        session.running.cursor = 2

        await press(dispatcher, session, "down")

        assert session.focus == Pane.LOGS


class TestDetailsAndLogs:
    """Test the bottom panes."""

    @pytest.mark.asyncio
    async def test_details_right_goes_to_logs(self, dispatcher):
        session = loaded_session()
        session.focus = Pane.DETAILS

        await press(dispatcher, session, "right")

        assert session.focus == Pane.LOGS

    @pytest.mark.asyncio
    async def test_details_up_enters_stopped_table(self, dispatcher):
        session = loaded_session()
        session.focus = Pane.DETAILS

        await press(dispatcher, session, "up")

        assert session.focus == Pane.STOPPED_TABLE
        assert session.stopped.cursor == 0

    @pytest.mark.asyncio
    async def test_logs_left_goes_to_details(self, dispatcher):
        session = loaded_session()
        session.focus = Pane.LOGS

        await press(dispatcher, session, "left")

        assert session.focus == Pane.DETAILS

    @pytest.mark.asyncio
    async def test_logs_up_enters_running_table(self, dispatcher):
        session = loaded_session()
        session.focus = Pane.LOGS

        await press(dispatcher, session, "up")

        assert session.focus == Pane.RUNNING_TABLE
        assert session.running.cursor == 0


class TestCommonHotkeys:
    """Test hotkeys that work from any pane."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("pane", list(Pane))
    @pytest.mark.parametrize("hotkey,state", [
        ("h", ModalState.HELP),
        ("q", ModalState.ABOUT),
        ("i", ModalState.IMPORT_BROWSER),
        ("e", ModalState.EXPORT_BROWSER),
    ])
    async def test_hotkey_opens_modal(self, dispatcher, pane, hotkey, state):
        session = loaded_session()
        session.focus = pane

        await press(dispatcher, session, hotkey)

        assert session.modal_state == state
        assert session.focus == pane

    @pytest.mark.asyncio
    async def test_c_clears_logs(self, dispatcher):
        session = loaded_session()
        session.log_buffer.append("line one\nline two\n")
        session.logs_scroll.set_max_offset(5)
        session.logs_scroll.offset = 3

        await press(dispatcher, session, "c")

        assert session.log_buffer.read() == ""
        assert session.logs_scroll.offset == 0


class TestPaging:
    """Test PageUp/PageDown on the focused region."""

    @pytest.mark.asyncio
    async def test_page_down_in_stopped_table(self, dispatcher):
        session = Session(terminal_height=39)
        session.refresh(create_records(40), [])
        session.enter_table(ActiveTable.STOPPED)
        assert session.visible_rows == 20

        await press(dispatcher, session, "pagedown")
        assert session.stopped.cursor == 20

        await press(dispatcher, session, "pagedown")
        assert session.stopped.cursor == 39

        await press(dispatcher, session, "pageup", "pageup")
        assert session.stopped.cursor == 0

    @pytest.mark.asyncio
    async def test_table_viewport_follows_cursor(self, dispatcher):
        session = Session(terminal_height=39)
        session.refresh(create_records(40), [])
        session.enter_table(ActiveTable.STOPPED)

        await press(dispatcher, session, "pagedown", "pagedown")

        region = session.stopped_scroll
        assert region.offset <= 39 < region.offset + session.visible_rows

    @pytest.mark.asyncio
    async def test_page_down_in_logs_saturates(self, dispatcher):
        session = Session(terminal_height=39)
        session.focus = Pane.LOGS
        session.logs_scroll.set_max_offset(25)

        await press(dispatcher, session, "pagedown", "pagedown")

        assert session.logs_scroll.offset == 25

    @pytest.mark.asyncio
    async def test_page_in_menu_is_noop(self, dispatcher):
        session = loaded_session()
        session.focus = Pane.MENU

        await press(dispatcher, session, "pagedown")

        assert session.focus == Pane.MENU
        assert session.stopped.cursor is None
