"""Bounded, time-bucketed history for one channel."""

from __future__ import annotations

import random

from missiontelemetry._constants import HISTORY_MAX_POINTS, HISTORY_STEP_MS


class RollingSeries:
    """Ordered ``(timestamp_ms, value)`` pairs at fixed bucket width.

    Timestamps are strictly increasing and the length never exceeds
    ``max_points``; the oldest entries are evicted first. Index 0 is the
    oldest sample.
    """

    def __init__(
        self,
        max_points: int = HISTORY_MAX_POINTS,
        step_ms: int = HISTORY_STEP_MS,
        *,
        rng: random.Random | None = None,
    ) -> None:
        if max_points < 1:
            raise ValueError(f"max_points must be at least 1, got {max_points}")
        if step_ms < 1:
            raise ValueError(f"step_ms must be at least 1, got {step_ms}")
        self.max_points = max_points
        self.step_ms = step_ms
        self._rng = rng or random.Random()
        self._values: list[float] = []
        self._timestamps: list[int] = []

    def seed(
        self,
        start: float,
        step_variance: float,
        minimum: float,
        maximum: float,
        anchor_ms: int,
    ) -> None:
        """Replace the contents with a bounded Gaussian random walk.

        Fills ``max_points`` samples spaced exactly ``step_ms`` apart, the last
        one on the most recent step boundary at or before *anchor_ms*.
        """
        last_ts = anchor_ms - (anchor_ms % self.step_ms)
        first_ts = last_ts - (self.max_points - 1) * self.step_ms
        self._values.clear()
        self._timestamps.clear()
        current = start
        for i in range(self.max_points):
            current = max(minimum, min(maximum, current + self._rng.gauss(0.0, 1.0) * step_variance))
            self._values.append(current)
            self._timestamps.append(first_ts + i * self.step_ms)

    def add_or_update(self, value: float, timestamp_ms: int) -> None:
        """Record *value* at *timestamp_ms*.

        Within the open bucket the last entry is overwritten. Past it, every
        skipped bucket is filled with *value* (no interpolation). A timestamp
        earlier than the last entry (wall clock stepped back) only replaces
        the last value, so timestamps stay strictly increasing.
        """
        if not self._values:
            self._values.append(value)
            self._timestamps.append(timestamp_ms)
            return

        cursor = self._timestamps[-1]
        if timestamp_ms < cursor:
            self._values[-1] = value
            return
        if timestamp_ms - cursor < self.step_ms:
            self._values[-1] = value
            self._timestamps[-1] = timestamp_ms
            return

        while timestamp_ms - cursor >= self.step_ms:
            cursor += self.step_ms
            self._values.append(value)
            self._timestamps.append(cursor)
        self._trim()

    def _trim(self) -> None:
        excess = len(self._values) - self.max_points
        if excess > 0:
            del self._values[:excess]
            del self._timestamps[:excess]

    def size(self) -> int:
        """Number of samples currently held."""
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def get_value(self, index: int) -> float:
        """Value at *index* (0 is the oldest sample)."""
        return self._values[index]

    def get_timestamp(self, index: int) -> int:
        """Timestamp in epoch milliseconds at *index*."""
        return self._timestamps[index]

    def values(self) -> list[float]:
        """Copy of all values, oldest first."""
        return list(self._values)

    def timestamps(self) -> list[int]:
        """Copy of all timestamps, oldest first."""
        return list(self._timestamps)

    def latest(self) -> tuple[int, float] | None:
        """Return the newest ``(timestamp_ms, value)`` pair, or ``None`` when empty."""
        if not self._values:
            return None
        return self._timestamps[-1], self._values[-1]
