"""
Test fixtures and factories for kfconsole unit tests.

This module provides factory functions and in-memory collaborators so
handlers can be exercised without kubectl, a terminal or the filesystem.
"""

from typing import Iterable, List, Optional
from unittest.mock import AsyncMock, MagicMock

from kfconsole.errors import InputSourceError
from kfconsole.input_events import InputEvent, KeyPress
from kfconsole.models import Record, RecordState


def create_record(id: Optional[int] = 1, service: str = None, **kwargs) -> Record:
    """Create a Record with sensible defaults."""
    return Record(
        id=id,
        service=service or f"svc-{id}",
        local_port=kwargs.pop("local_port", 8000 + (id or 0)),
        remote_port=kwargs.pop("remote_port", 80),
        **kwargs,
    )


def create_records(count: int, start: int = 1) -> List[Record]:
    """Create `count` records with consecutive ids starting at `start`."""
    return [create_record(id=i) for i in range(start, start + count)]


def key(name: str) -> KeyPress:
    """KeyPress for a special key name or a single typed character."""
    if len(name) == 1:
        return KeyPress.char(name)
    return KeyPress(name)


class ScriptedInputSource:
    """InputSource that replays a fixed list of events.

    Returns None once the script runs out, or raises InputSourceError
    when `fail_when_empty` is set.
    """

    def __init__(self, events: Iterable[InputEvent] = (), fail_when_empty: bool = False):
        self.events = list(events)
        self.fail_when_empty = fail_when_empty
        self.timeouts: List[float] = []

    async def poll(self, timeout: float) -> Optional[InputEvent]:
        self.timeouts.append(timeout)
        if self.events:
            return self.events.pop(0)
        if self.fail_when_empty:
            raise InputSourceError("input closed")
        return None


def create_mock_engine(running_ids: Iterable[int] = ()) -> MagicMock:
    """ForwardingEngine mock whose async methods succeed by default."""
    engine = MagicMock()
    engine.start_or_stop = AsyncMock(return_value=None)
    engine.stop_all = AsyncMock(return_value=None)
    engine.list_states = AsyncMock(
        return_value=[RecordState(record_id=i, running=True) for i in running_ids]
    )
    return engine


def create_mock_store(records: Iterable[Record] = ()) -> MagicMock:
    """RecordStore mock whose async methods succeed by default."""
    store = MagicMock()
    store.list_records = AsyncMock(return_value=list(records))
    store.delete = AsyncMock(return_value=None)
    store.import_records = AsyncMock(return_value=0)
    store.export_records = AsyncMock(return_value="[]")
    return store
