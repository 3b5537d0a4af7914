"""Single-slot hand-off between the poll and tick drivers.

The poll driver writes, the tick driver reads once per tick and clears on
source switch. Replacing the slot is a single reference assignment, so a
reader always sees either the old or the new snapshot as a whole.

A fetch still in flight when the source changes may land afterwards;
:meth:`SnapshotMailbox.publish` drops it when its source tag no longer
matches the expected source. Without that tag check the window would be at
most one poll period of stale overlay, which is accepted.
"""

from __future__ import annotations

import logging

from missiontelemetry.models.snapshot import Snapshot
from missiontelemetry.models.vehicle import DataSource

_logger = logging.getLogger(__name__)


class SnapshotMailbox:
    """Holds at most one "latest" snapshot."""

    def __init__(self) -> None:
        self._latest: Snapshot | None = None

    def publish(self, snapshot: Snapshot, *, expected_source: DataSource | None = None) -> bool:
        """Replace the held snapshot. Returns ``False`` if it was dropped."""
        if expected_source is not None and snapshot.source != expected_source:
            _logger.debug("Dropping %s snapshot after switch to %s", snapshot.source, expected_source)
            return False
        self._latest = snapshot
        return True

    def peek(self) -> Snapshot | None:
        return self._latest

    def clear(self) -> None:
        self._latest = None
