"""Synthetic per-tick telemetry.

Battery drains linearly with random rate and occasionally recharges; the
other channels follow independent Gaussian random walks.
"""

from __future__ import annotations

import random
from typing import NamedTuple

from missiontelemetry.models.state import CHANNEL_BOUNDS, Channel, ChannelBounds, LiveState

BATTERY_DRAIN_MAX = 0.4
BATTERY_RECHARGE_BELOW = 5.0
BATTERY_RECHARGE_CHANCE = 0.3
BATTERY_RECHARGE_LEVEL = 95.0

TEMPERATURE_SIGMA = 1.2
SIGNAL_SIGMA = 1.5
VELOCITY_SIGMA = 20.0

# The walk stays within cruise range even though overlays may go lower.
VELOCITY_WALK_BOUNDS = ChannelBounds(800.0, 2400.0)


class SeedProfile(NamedTuple):
    start: float
    step_variance: float
    minimum: float
    maximum: float


SEED_PROFILES: dict[Channel, SeedProfile] = {
    Channel.BATTERY: SeedProfile(100.0, 0.3, 40.0, 100.0),
    Channel.TEMPERATURE: SeedProfile(22.0, 1.2, -40.0, 95.0),
    Channel.SIGNAL: SeedProfile(35.0, 1.5, 0.0, 60.0),
    Channel.VELOCITY: SeedProfile(1200.0, 20.0, 800.0, 2400.0),
}


class Simulator:
    """Advance a :class:`LiveState` by one tick of noise."""

    def __init__(self, rng: random.Random | None = None, *, noise_scale: float = 1.0) -> None:
        self._rng = rng or random.Random()
        self._scale = noise_scale

    def step(self, state: LiveState) -> LiveState:
        rng = self._rng

        battery = CHANNEL_BOUNDS[Channel.BATTERY].clamp(state.battery - rng.random() * BATTERY_DRAIN_MAX * self._scale)
        if battery < BATTERY_RECHARGE_BELOW and rng.random() < BATTERY_RECHARGE_CHANCE:
            battery = BATTERY_RECHARGE_LEVEL

        temperature = CHANNEL_BOUNDS[Channel.TEMPERATURE].clamp(
            state.temperature + rng.gauss(0.0, 1.0) * TEMPERATURE_SIGMA * self._scale
        )
        signal = CHANNEL_BOUNDS[Channel.SIGNAL].clamp(state.signal + rng.gauss(0.0, 1.0) * SIGNAL_SIGMA * self._scale)
        velocity = VELOCITY_WALK_BOUNDS.clamp(state.velocity + rng.gauss(0.0, 1.0) * VELOCITY_SIGMA * self._scale)

        return LiveState(battery=battery, temperature=temperature, signal=signal, velocity=velocity)
