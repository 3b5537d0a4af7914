"""Per-channel rolling histories updated in lock-step."""

from __future__ import annotations

import random

from missiontelemetry._constants import HISTORY_MAX_POINTS, HISTORY_STEP_MS
from missiontelemetry.models.state import Channel, LiveState
from missiontelemetry.simulator import SEED_PROFILES
from missiontelemetry.state.series import RollingSeries


class HistoryStore:
    """One :class:`RollingSeries` per channel.

    Every update writes all four series with the same timestamp, so they
    stay aligned by index.
    """

    def __init__(
        self,
        max_points: int = HISTORY_MAX_POINTS,
        step_ms: int = HISTORY_STEP_MS,
        *,
        rng: random.Random | None = None,
    ) -> None:
        rng = rng or random.Random()
        self._series: dict[Channel, RollingSeries] = {
            channel: RollingSeries(max_points, step_ms, rng=rng) for channel in Channel
        }

    def seed(self, anchor_ms: int) -> None:
        """Backfill every series with a synthetic month ending at *anchor_ms*."""
        for channel, profile in SEED_PROFILES.items():
            self._series[channel].seed(
                profile.start,
                profile.step_variance,
                profile.minimum,
                profile.maximum,
                anchor_ms,
            )

    def record(self, state: LiveState, timestamp_ms: int) -> None:
        for channel, series in self._series.items():
            series.add_or_update(state.value(channel), timestamp_ms)

    def series(self, channel: Channel) -> RollingSeries:
        return self._series[Channel(channel)]

    def as_mapping(self) -> dict[Channel, RollingSeries]:
        return dict(self._series)
