"""
Selectable table model.

One generic model backs both the Stopped and Running tables: an ordered
row list, a single navigation cursor and a set of rows marked for batch
actions.

Invariants kept by every method:
- every selected index is < len(rows)
- cursor, when set, is within [0, len(rows) - 1]
All operations on an empty table are no-ops.
"""

from typing import Generic, Iterable, List, Optional, Set, TypeVar

T = TypeVar('T')


class SelectableTable(Generic[T]):
    """Row list with a cursor and a multi-select set."""

    def __init__(self, rows: Optional[Iterable[T]] = None):
        self.rows: List[T] = list(rows) if rows is not None else []
        self.cursor: Optional[int] = None
        self.selected: Set[int] = set()

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def last_index(self) -> int:
        return len(self.rows) - 1

    def current(self) -> Optional[T]:
        """Row under the cursor, or None."""
        if self.cursor is None or self.is_empty:
            return None
        return self.rows[self.cursor]

    # -------------------------------------------------------------------------
    # Cursor movement
    # -------------------------------------------------------------------------

    def cursor_up(self) -> None:
        if self.is_empty or self.cursor is None:
            return
        if self.cursor > 0:
            self.cursor -= 1

    def cursor_down(self) -> None:
        if self.is_empty:
            return
        if self.cursor is None:
            self.cursor = 0
        elif self.cursor < self.last_index:
            self.cursor += 1

    def page_up(self, rows: int) -> None:
        if self.is_empty:
            return
        self.cursor = max(0, (self.cursor or 0) - rows)

    def page_down(self, rows: int) -> None:
        if self.is_empty:
            return
        self.cursor = min(self.last_index, (self.cursor or 0) + rows)

    def at_first_row(self) -> bool:
        """True when Up should leave the table (empty, no cursor, or row 0)."""
        return self.is_empty or self.cursor is None or self.cursor == 0

    def at_last_row(self) -> bool:
        """True when Down should leave the table (empty or last row)."""
        return self.is_empty or self.cursor == self.last_index

    def select_first(self) -> None:
        if not self.is_empty:
            self.cursor = 0

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    def toggle_row(self) -> None:
        """Add or remove the cursor row (row 0 without a cursor) from the selection."""
        if self.is_empty:
            return
        row = self.cursor if self.cursor is not None else 0
        if row in self.selected:
            self.selected.discard(row)
        else:
            self.selected.add(row)

    def toggle_select_all(self) -> None:
        """Select every row, or clear the selection if every row is selected."""
        if len(self.selected) == len(self.rows):
            self.selected.clear()
        else:
            self.selected = set(range(len(self.rows)))

    def clear_selection(self) -> None:
        self.selected.clear()

    def clear(self) -> None:
        """Drop both the selection set and the cursor."""
        self.selected.clear()
        self.cursor = None

    def target_indices(self) -> List[int]:
        """Indices a batch action applies to.

        The selection set in ascending order when non-empty, otherwise the
        cursor row (row 0 without a cursor). Empty for an empty table.
        """
        if self.is_empty:
            return []
        if self.selected:
            return sorted(i for i in self.selected if i < len(self.rows))
        return [self.cursor if self.cursor is not None else 0]

    def targets(self) -> List[T]:
        return [self.rows[i] for i in self.target_indices()]

    def selected_rows(self) -> List[T]:
        return [self.rows[i] for i in sorted(self.selected) if i < len(self.rows)]

    # -------------------------------------------------------------------------
    # Backing list mutation
    # -------------------------------------------------------------------------

    def remove_indices(self, indices: Iterable[int]) -> List[T]:
        """Remove rows by index, preserving the order of the rest.

        Returns:
            The removed rows in ascending index order
        """
        doomed = {i for i in indices if 0 <= i < len(self.rows)}
        if not doomed:
            return []
        removed = [row for i, row in enumerate(self.rows) if i in doomed]
        self.rows = [row for i, row in enumerate(self.rows) if i not in doomed]
        # Indices shift after removal so the old selection no longer applies
        self.selected.clear()
        self._clamp_cursor()
        return removed

    def remove_where(self, predicate) -> List[T]:
        """Remove every row matching predicate. Returns the removed rows."""
        return self.remove_indices(i for i, row in enumerate(self.rows) if predicate(row))

    def extend(self, rows: Iterable[T]) -> None:
        """Append rows. Existing indices keep their meaning."""
        self.rows.extend(rows)

    def replace_rows(self, rows: Iterable[T]) -> bool:
        """Swap in a new backing list.

        An identical list leaves cursor and selection untouched; any other
        list clears the selection and clamps the cursor.

        Returns:
            True if the rows changed
        """
        new_rows = list(rows)
        if new_rows == self.rows:
            return False
        self.rows = new_rows
        self.selected.clear()
        self._clamp_cursor()
        return True

    def _clamp_cursor(self) -> None:
        if self.cursor is None:
            return
        if self.is_empty:
            self.cursor = None
        else:
            self.cursor = min(self.cursor, self.last_index)
