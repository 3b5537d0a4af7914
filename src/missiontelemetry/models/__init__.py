"""Data models for telemetry state, snapshots and alerts."""

from missiontelemetry.models._base import TelemetryBaseModel
from missiontelemetry.models.alert import AlertCondition, AlertRecord, AlertSeverity, SystemStatus
from missiontelemetry.models.snapshot import Snapshot
from missiontelemetry.models.state import CHANNEL_BOUNDS, CHANNEL_UNITS, Channel, ChannelBounds, LiveState
from missiontelemetry.models.vehicle import (
    DataAvailability,
    DataMode,
    DataSource,
    VehicleOption,
    vehicles_for_source,
)

__all__ = [
    "AlertCondition",
    "AlertRecord",
    "AlertSeverity",
    "CHANNEL_BOUNDS",
    "CHANNEL_UNITS",
    "Channel",
    "ChannelBounds",
    "DataAvailability",
    "DataMode",
    "DataSource",
    "LiveState",
    "Snapshot",
    "SystemStatus",
    "TelemetryBaseModel",
    "VehicleOption",
    "vehicles_for_source",
]
