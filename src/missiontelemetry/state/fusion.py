"""Overlay of a snapshot onto the live state."""

from __future__ import annotations

from missiontelemetry.models.snapshot import Snapshot
from missiontelemetry.models.state import LiveState


def overlay_snapshot(state: LiveState, snapshot: Snapshot | None) -> LiveState:
    """Return *state* with the snapshot's present fields applied.

    Each supplied field is clamped to its channel bound; absent fields keep
    their current value.
    """
    if snapshot is None or snapshot.is_empty:
        return state
    merged = state.model_dump()
    merged.update(snapshot.present_fields())
    return LiveState.clamped(**merged)
