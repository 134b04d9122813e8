"""
Selection actions for the record tables.

Both act on the active table only.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..state import Session


class SelectionActionsMixin:
    """Mixin providing row-selection actions for InputDispatcher."""

    def action_toggle_row(self, session: "Session") -> None:
        """Mark or unmark the cursor row of the active table."""
        session.current_table.toggle_row()

    def action_toggle_select_all(self, session: "Session") -> None:
        """Select every row of the active table, or clear if all are selected."""
        session.current_table.toggle_select_all()
