"""Partial telemetry reading produced by a source adapter."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field, field_validator

from missiontelemetry.ingestion.normalize import safe_float
from missiontelemetry.models._base import TelemetryBaseModel
from missiontelemetry.models.vehicle import DataSource


class Snapshot(TelemetryBaseModel):
    """One adapter's normalized reading.

    Any of the three canonical fields may be ``None`` when the provider
    cannot supply it; fusion then leaves the live value untouched.

    Parameters
    ----------
    source : DataSource
        Provider that produced the reading.
    velocity : float or None
        Speed in m/s.
    temperature : float or None
        Temperature in degrees Celsius.
    signal : float or None
        Signal strength in dB.
    fetched_at : datetime
        UTC time the reading was normalized.
    """

    source: DataSource
    velocity: float | None = None
    temperature: float | None = None
    signal: float | None = None
    fetched_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("velocity", "temperature", "signal", mode="before")
    @classmethod
    def _coerce_floats(cls, value: object) -> float | None:
        return safe_float(value)

    def present_fields(self) -> dict[str, float]:
        """Return the fields this snapshot actually carries."""
        return self.model_dump(include={"velocity", "temperature", "signal"}, exclude_none=True)

    @property
    def is_empty(self) -> bool:
        return not self.present_fields()
