"""
Shared live-log buffer.

A single owned, append-only text buffer that log output is captured into
and the Logs pane reads from. The lock is only held inside the short
synchronous methods below, never across an await.
"""

import logging
import threading
from typing import List


class LogBuffer:
    """Lock-guarded growable text buffer with a narrow read/clear interface."""

    def __init__(self, max_chars: int = 512 * 1024):
        self._lock = threading.Lock()
        self._chunks: List[str] = []
        self._size = 0
        self._max_chars = max_chars

    def append(self, text: str) -> None:
        if not text:
            return
        with self._lock:
            self._chunks.append(text)
            self._size += len(text)
            # Drop oldest output once over capacity
            while self._size > self._max_chars and len(self._chunks) > 1:
                self._size -= len(self._chunks.pop(0))

    def read(self) -> str:
        with self._lock:
            return "".join(self._chunks)

    def lines(self) -> List[str]:
        return self.read().splitlines()

    def clear(self) -> None:
        with self._lock:
            self._chunks.clear()
            self._size = 0

    def __len__(self) -> int:
        with self._lock:
            return self._size


class LogBufferHandler(logging.Handler):
    """logging.Handler that writes formatted records into a LogBuffer."""

    def __init__(self, buffer: LogBuffer, level: int = logging.NOTSET):
        super().__init__(level)
        self.buffer = buffer

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.buffer.append(self.format(record) + "\n")
        except Exception:
            self.handleError(record)
