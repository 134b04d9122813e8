"""
Scroll region model.

Each scrollable region keeps an offset and a maximum offset. All
arithmetic is saturating so offset always stays within [0, max_offset].
"""

from dataclasses import dataclass


@dataclass
class ScrollRegion:
    """Offset/max-offset pair for one scrollable region."""

    offset: int = 0
    max_offset: int = 0

    def page_up(self, rows: int) -> None:
        self.offset = max(0, self.offset - rows)

    def page_down(self, rows: int) -> None:
        self.offset = min(self.max_offset, self.offset + rows)

    def set_max_offset(self, max_offset: int) -> None:
        """Update the maximum offset and clamp the current offset into range."""
        self.max_offset = max(0, max_offset)
        self.offset = min(self.offset, self.max_offset)

    def set_content_height(self, content_lines: int, visible_rows: int) -> None:
        """Derive max_offset from content length and viewport height."""
        self.set_max_offset(content_lines - visible_rows)

    def follow(self, index: int, visible_rows: int) -> None:
        """Scroll just enough to keep row `index` inside the viewport.

        Args:
            index: Row that must stay visible
            visible_rows: Viewport height in rows
        """
        if visible_rows <= 0:
            return
        if index < self.offset:
            self.offset = index
        elif index >= self.offset + visible_rows:
            self.offset = index - visible_rows + 1
        self.offset = max(0, min(self.offset, self.max_offset))

    def reset(self) -> None:
        self.offset = 0
