"""
Port-forward dispatch.

Starts every targeted record of the Stopped table or stops every targeted
record of the Running table, then moves the records that succeeded to
the opposite table.
"""

from typing import TYPE_CHECKING, List

from ..errors import ForwardingError
from ..logging_config import get_logger
from ..state import ActiveTable, ModalState

if TYPE_CHECKING:
    from ..state import Session

logger = get_logger("forwarding")


class ForwardingActionsMixin:
    """Mixin providing the start/stop action for InputDispatcher."""

    async def action_port_forward(self, session: "Session") -> None:
        """Start or stop the selected rows (or the cursor row) of the active table.

        Operations are awaited one at a time in ascending row order. Only
        records whose operation succeeded migrate; failures stay in place
        and are reported in the error popup. The selection is cleared
        either way.
        """
        which = session.active_table
        source = session.table(which)
        indices = source.target_indices()
        if not indices:
            return

        start = which == ActiveTable.STOPPED
        destination = session.table(ActiveTable.RUNNING if start else ActiveTable.STOPPED)
        verb = "start" if start else "stop"
        done = "started" if start else "stopped"

        succeeded: List[int] = []
        failures: List[str] = []
        for index in indices:
            record = source.rows[index]
            try:
                await self.engine.start_or_stop(record, start=start)
            except ForwardingError as e:
                logger.error(f"Failed to {verb} forward for {record.display_name}: {e}")
                failures.append(f"{record.display_name}: {e}")
                continue
            logger.info(f"Port forward {done} for {record.display_name}")
            succeeded.append(index)

        moved = source.remove_indices(succeeded)
        destination.extend(moved)
        source.clear_selection()

        if failures:
            session.error_message = f"Failed to {verb} {len(failures)} forward(s):\n" + "\n".join(failures)
            session.modal_state = ModalState.ERROR_POPUP
