"""
Real implementations of protocol interfaces.

These are the production collaborators: a queue-backed input source fed
by the TUI, a JSON-file record store, a kubectl-based forwarding engine
and a pathlib directory browser.
"""

import asyncio
import json
from pathlib import Path
from typing import Dict, List, Optional

from .constants import (
    KEY_BACKSPACE,
    KEY_DOWN,
    KEY_ENTER,
    KEY_LEFT,
    KEY_PAGE_DOWN,
    KEY_PAGE_UP,
    KEY_RIGHT,
    KEY_UP,
    PROTOCOL_UDP,
)
from .errors import ForwardingError, InputSourceError, RecordStoreError
from .input_events import InputEvent
from .logging_config import get_logger
from .models import Record, RecordState

logger = get_logger("implementations")


class QueueInputSource:
    """InputSource backed by an asyncio.Queue.

    The TUI pushes translated key and resize events; the dispatcher polls.
    """

    def __init__(self):
        self._queue: asyncio.Queue = asyncio.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def push(self, event: InputEvent) -> None:
        if self._closed:
            return
        self._queue.put_nowait(event)

    def close(self) -> None:
        self._closed = True

    async def poll(self, timeout: float) -> Optional[InputEvent]:
        if self._closed and self._queue.empty():
            raise InputSourceError("Input source is closed")
        try:
            return await asyncio.wait_for(self._queue.get(), timeout)
        except asyncio.TimeoutError:
            return None


class JsonRecordStore:
    """RecordStore persisting records as a JSON list in a single file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> List[Record]:
        if not self.path.exists():
            return []
        try:
            with open(self.path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise RecordStoreError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, list):
            raise RecordStoreError(f"{self.path} does not contain a list of configs")
        return [self._parse(item) for item in data if isinstance(item, dict)]

    def _parse(self, item: dict) -> Record:
        try:
            return Record.from_dict(item)
        except (ValueError, TypeError) as e:
            raise RecordStoreError(f"Invalid config {item.get('service') or item}: {e}") from e

    def _save(self, records: List[Record]) -> None:
        """Write atomically via a temp file."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path = self.path.with_suffix('.tmp')
            with open(temp_path, 'w') as f:
                json.dump([r.to_dict() for r in records], f, indent=2)
            temp_path.replace(self.path)
        except OSError as e:
            raise RecordStoreError(f"Cannot write {self.path}: {e}") from e

    def load_records(self) -> List[Record]:
        """Synchronous read, for CLI commands."""
        return self._load()

    def _next_id(self, records: List[Record]) -> int:
        return max((r.id for r in records if r.id is not None), default=0) + 1

    def _delete(self, ids: List[int]) -> None:
        doomed = set(ids)
        records = self._load()
        self._save([r for r in records if r.id not in doomed])

    def _import(self, text: str) -> int:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise RecordStoreError(f"Invalid JSON: {e}") from e
        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise RecordStoreError("Expected a JSON object or a list of objects")

        records = self._load()
        next_id = self._next_id(records)
        for item in data:
            record = self._parse(item)
            if not record.service:
                raise RecordStoreError("Every config needs a 'service'")
            record.id = next_id
            next_id += 1
            records.append(record)
        self._save(records)
        return len(data)

    def _export(self) -> str:
        return json.dumps([r.to_dict(include_id=False) for r in self._load()], indent=2)

    async def list_records(self) -> List[Record]:
        return await asyncio.to_thread(self._load)

    async def delete(self, ids: List[int]) -> None:
        await asyncio.to_thread(self._delete, list(ids))

    async def import_records(self, text: str) -> int:
        return await asyncio.to_thread(self._import, text)

    async def export_records(self) -> str:
        return await asyncio.to_thread(self._export)

    def import_text(self, text: str) -> int:
        """Synchronous import, for CLI commands."""
        return self._import(text)

    def export_text(self) -> str:
        """Synchronous export, for CLI commands."""
        return self._export()


def build_port_forward_command(record: Record, kubectl: str = "kubectl") -> List[str]:
    """Build the kubectl port-forward command line for a record."""
    cmd = [
        kubectl, "port-forward", record.target,
        f"{record.local_port}:{record.remote_port}",
        "--namespace", record.namespace or "default",
        "--address", record.local_address,
    ]
    if record.context:
        cmd.extend(["--context", record.context])
    if record.kubeconfig:
        cmd.extend(["--kubeconfig", record.kubeconfig])
    return cmd


class KubectlForwardingEngine:
    """ForwardingEngine running one `kubectl port-forward` process per record."""

    def __init__(self, kubectl: str = "kubectl", startup_grace: float = 0.5):
        self.kubectl = kubectl
        self.startup_grace = startup_grace
        self._processes: Dict[int, asyncio.subprocess.Process] = {}
        self._drainers: Dict[int, List[asyncio.Task]] = {}

    def is_running(self, record_id: int) -> bool:
        proc = self._processes.get(record_id)
        return proc is not None and proc.returncode is None

    async def start_or_stop(self, record: Record, start: bool) -> None:
        if record.id is None:
            raise ForwardingError("Config has not been saved yet", record_id=None)
        if start:
            await self._start(record)
        else:
            await self._stop(record.id)

    async def _start(self, record: Record) -> None:
        if self.is_running(record.id):
            return
        if record.protocol == PROTOCOL_UDP:
            raise ForwardingError("UDP is not supported by kubectl port-forward", record_id=record.id)

        cmd = build_port_forward_command(record, self.kubectl)
        logger.debug(f"Launching: {' '.join(cmd)}")
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                stdin=asyncio.subprocess.DEVNULL,
            )
        except OSError as e:
            raise ForwardingError(f"Cannot run {self.kubectl}: {e}", record_id=record.id) from e

        # A process that dies right away never forwarded anything
        try:
            await asyncio.wait_for(proc.wait(), timeout=self.startup_grace)
        except asyncio.TimeoutError:
            self._processes[record.id] = proc
            self._drainers[record.id] = [
                asyncio.create_task(self._drain(record, proc.stdout, warn=False)),
                asyncio.create_task(self._drain(record, proc.stderr, warn=True)),
            ]
            return

        stderr = (await proc.stderr.read()).decode(errors="replace").strip()
        raise ForwardingError(
            stderr or f"kubectl exited with code {proc.returncode}", record_id=record.id
        )

    async def _drain(self, record: Record, stream, warn: bool) -> None:
        """Relay kubectl output into the log."""
        while True:
            line = await stream.readline()
            if not line:
                return
            text = line.decode(errors="replace").rstrip()
            if warn:
                logger.warning(f"[{record.display_name}] {text}")
            else:
                logger.info(f"[{record.display_name}] {text}")

    async def _stop(self, record_id: int) -> None:
        proc = self._processes.pop(record_id, None)
        drainers = self._drainers.pop(record_id, [])
        if proc is not None and proc.returncode is None:
            proc.terminate()
            try:
                await asyncio.wait_for(proc.wait(), timeout=3.0)
            except asyncio.TimeoutError:
                proc.kill()
                await proc.wait()
        for task in drainers:
            task.cancel()

    async def stop_all(self) -> None:
        for record_id in list(self._processes):
            await self._stop(record_id)

    async def list_states(self) -> List[RecordState]:
        # Forget processes that exited on their own
        for record_id in [rid for rid, p in self._processes.items() if p.returncode is not None]:
            logger.warning(f"Port forward for config {record_id} exited")
            await self._stop(record_id)
        return [RecordState(record_id=rid, running=True) for rid in self._processes]


class DirectoryBrowser:
    """FileBrowser over the local filesystem.

    Directories are listed before files. Up/Down move the highlight,
    Enter/Right descend into a directory, Left/Backspace go to the parent.
    """

    def __init__(self, cwd: Optional[Path] = None, show_hidden: bool = False, page_size: int = 10):
        self.show_hidden = show_hidden
        self.page_size = page_size
        self.cwd = Path.cwd()
        self.index = 0
        self._entries: List[Path] = []
        self.set_cwd(cwd or Path.cwd())

    def set_cwd(self, path: Path) -> None:
        self.cwd = Path(path).resolve()
        self.index = 0
        self.reload()

    def reload(self) -> None:
        try:
            children = list(self.cwd.iterdir())
        except OSError:
            children = []
        if not self.show_hidden:
            children = [p for p in children if not p.name.startswith(".")]
        self._entries = sorted(children, key=lambda p: (not p.is_dir(), p.name.lower()))
        self.index = min(self.index, max(0, len(self._entries) - 1))

    def entries(self) -> List[Path]:
        return list(self._entries)

    def current(self) -> Optional[Path]:
        if not self._entries:
            return None
        return self._entries[self.index]

    def handle_key(self, key: str) -> None:
        last = len(self._entries) - 1
        if key == KEY_UP:
            self.index = max(0, self.index - 1)
        elif key == KEY_DOWN:
            self.index = max(0, min(last, self.index + 1))
        elif key == KEY_PAGE_UP:
            self.index = max(0, self.index - self.page_size)
        elif key == KEY_PAGE_DOWN:
            self.index = max(0, min(last, self.index + self.page_size))
        elif key in (KEY_ENTER, KEY_RIGHT):
            current = self.current()
            if current is not None and current.is_dir():
                self.set_cwd(current)
        elif key in (KEY_LEFT, KEY_BACKSPACE):
            self.go_parent()

    def go_parent(self) -> None:
        previous = self.cwd
        if previous.parent == previous:
            return
        self.set_cwd(previous.parent)
        # Keep the directory we came from highlighted
        for i, entry in enumerate(self._entries):
            if entry == previous:
                self.index = i
                break

    def read_current(self) -> str:
        current = self.current()
        if current is None:
            raise FileNotFoundError(f"No file selected in {self.cwd}")
        return current.read_text()
