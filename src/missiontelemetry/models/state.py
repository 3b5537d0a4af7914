"""Channels, bounds and the live scalar state."""

from __future__ import annotations

from enum import StrEnum
from typing import NamedTuple

from missiontelemetry.models._base import TelemetryBaseModel


class Channel(StrEnum):
    BATTERY = "battery"
    TEMPERATURE = "temperature"
    SIGNAL = "signal"
    VELOCITY = "velocity"


class ChannelBounds(NamedTuple):
    minimum: float
    maximum: float

    def clamp(self, value: float) -> float:
        return max(self.minimum, min(self.maximum, value))


CHANNEL_BOUNDS: dict[Channel, ChannelBounds] = {
    Channel.BATTERY: ChannelBounds(0.0, 100.0),
    Channel.TEMPERATURE: ChannelBounds(-40.0, 95.0),
    Channel.SIGNAL: ChannelBounds(0.0, 60.0),
    Channel.VELOCITY: ChannelBounds(0.0, 2400.0),
}

CHANNEL_UNITS: dict[Channel, str] = {
    Channel.BATTERY: "V",
    Channel.TEMPERATURE: "C",
    Channel.SIGNAL: "dB",
    Channel.VELOCITY: "m/s",
}


class LiveState(TelemetryBaseModel):
    """Current value of every channel.

    Construct through :meth:`clamped` to guarantee every value sits inside
    its channel bound; the tick driver replaces the whole state each tick.
    """

    battery: float = 100.0
    temperature: float = 22.0
    signal: float = 35.0
    velocity: float = 1200.0

    @classmethod
    def clamped(cls, **values: float) -> LiveState:
        """Build a state with each supplied value clamped to its bound."""
        return cls(**{name: CHANNEL_BOUNDS[Channel(name)].clamp(float(v)) for name, v in values.items()})

    def value(self, channel: Channel) -> float:
        return float(getattr(self, channel.value))
