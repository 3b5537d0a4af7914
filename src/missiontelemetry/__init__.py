"""missiontelemetry - Async core for a vehicle telemetry dashboard."""

from missiontelemetry._constants import __version__
from missiontelemetry.client import TelemetryDashboard
from missiontelemetry.config import TelemetryConfig
from missiontelemetry.exceptions import (
    TelemetryConfigError,
    TelemetryError,
    TelemetryExportError,
    TelemetryParseError,
    TelemetryTransportError,
)
from missiontelemetry.export import ExportResult, ExportStatus
from missiontelemetry.models import (
    AlertCondition,
    AlertRecord,
    AlertSeverity,
    Channel,
    DataAvailability,
    DataMode,
    DataSource,
    LiveState,
    Snapshot,
    SystemStatus,
    VehicleOption,
)

__all__ = [
    "__version__",
    "AlertCondition",
    "AlertRecord",
    "AlertSeverity",
    "Channel",
    "DataAvailability",
    "DataMode",
    "DataSource",
    "ExportResult",
    "ExportStatus",
    "LiveState",
    "Snapshot",
    "SystemStatus",
    "TelemetryConfig",
    "TelemetryConfigError",
    "TelemetryDashboard",
    "TelemetryError",
    "TelemetryExportError",
    "TelemetryParseError",
    "TelemetryTransportError",
    "VehicleOption",
]
