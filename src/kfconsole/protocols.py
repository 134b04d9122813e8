"""
Protocol definitions for external collaborators.

The console core only talks to the forwarding engine, the record store,
the file browsers and the input channel through these interfaces, so
tests can swap in mocks and the real implementations stay replaceable.
"""

from pathlib import Path
from typing import List, Optional, Protocol, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from .input_events import InputEvent
    from .models import Record, RecordState


@runtime_checkable
class InputSource(Protocol):
    """Interface for the terminal input channel"""

    async def poll(self, timeout: float) -> Optional["InputEvent"]:
        """Wait at most `timeout` seconds for the next event.

        Returns:
            The event, or None on timeout

        Raises:
            InputSourceError: if the channel is closed or broken
        """
        ...


@runtime_checkable
class ForwardingEngine(Protocol):
    """Interface for starting and stopping port-forwards"""

    async def start_or_stop(self, record: "Record", start: bool) -> None:
        """Start (start=True) or stop a forward for one record.

        Raises:
            ForwardingError: if the operation failed
        """
        ...

    async def stop_all(self) -> None:
        """Stop every active forward."""
        ...

    async def list_states(self) -> List["RecordState"]:
        """Runtime state of every record the engine knows about."""
        ...


@runtime_checkable
class RecordStore(Protocol):
    """Interface for persisted record storage"""

    async def list_records(self) -> List["Record"]:
        ...

    async def delete(self, ids: List[int]) -> None:
        """Delete records by id.

        Raises:
            RecordStoreError: on failure; nothing is deleted
        """
        ...

    async def import_records(self, text: str) -> int:
        """Import records from JSON text.

        Returns:
            Number of records imported
        """
        ...

    async def export_records(self) -> str:
        """Serialize every record to JSON text."""
        ...


@runtime_checkable
class FileBrowser(Protocol):
    """Interface for the filesystem-browsing widget"""

    cwd: Path

    def current(self) -> Optional[Path]:
        """The highlighted entry, or None for an empty directory."""
        ...

    def entries(self) -> List[Path]:
        """Entries of the current directory in display order."""
        ...

    def set_cwd(self, path: Path) -> None:
        ...

    def handle_key(self, key: str) -> None:
        """Navigate inside the browser (move highlight, enter/leave dirs)."""
        ...

    def read_current(self) -> str:
        """Read the highlighted file as text.

        Raises:
            OSError: if the file cannot be read
        """
        ...
