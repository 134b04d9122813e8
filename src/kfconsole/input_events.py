"""
Input events consumed by the dispatcher.

Terminal-independent: the Textual app translates its own events into
these before queueing them.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class KeyPress:
    """A key event.

    key uses Textual key names ("up", "pagedown", "ctrl+c", "a", ...).
    character is the typed text for printable keys, None otherwise.
    """

    key: str
    character: Optional[str] = None

    @property
    def is_printable(self) -> bool:
        return self.character is not None and len(self.character) == 1 and self.character.isprintable()

    @classmethod
    def char(cls, ch: str) -> "KeyPress":
        """Build the event for a typed character."""
        return cls(key="space" if ch == " " else ch, character=ch)


@dataclass(frozen=True)
class Resize:
    """Terminal size change."""

    width: int
    height: int


InputEvent = Union[KeyPress, Resize]
