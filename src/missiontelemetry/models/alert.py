"""Alert records and overall status."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from missiontelemetry._constants import ALERT_TIME_FORMAT
from missiontelemetry.models._base import TelemetryBaseModel
from missiontelemetry.models.state import Channel


class AlertSeverity(StrEnum):
    CRITICAL = "critical"
    WARNING = "warning"


class AlertCondition(StrEnum):
    BATTERY_CRITICAL = "battery_critical"
    TEMPERATURE_HIGH = "temperature_high"
    SIGNAL_LOW = "signal_low"


class SystemStatus(StrEnum):
    NOMINAL = "nominal"
    ATTENTION_REQUIRED = "attention required"

    @property
    def label(self) -> str:
        return f"STATUS: {self.value.upper()}"


class AlertRecord(TelemetryBaseModel):
    """One edge-triggered alert."""

    timestamp: datetime
    """Local time the condition became true."""
    severity: AlertSeverity
    condition: AlertCondition
    channel: Channel
    value: float
    """Channel value that triggered the alert."""
    message: str

    def format_line(self) -> str:
        """Render as ``[HH:MM:SS] message`` for the alert panel."""
        return f"[{self.timestamp.strftime(ALERT_TIME_FORMAT)}] {self.message}"
