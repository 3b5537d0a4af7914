"""Vehicle catalog and operating modes."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from missiontelemetry.models._base import TelemetryBaseModel


class DataSource(StrEnum):
    """External provider bound to the poll driver."""

    SIMULATED = "simulated"
    ISS_TLE = "iss_tle"
    OPENSKY = "opensky"
    AISHUB = "aishub"

    @property
    def label(self) -> str:
        return _SOURCE_LABELS[self]


_SOURCE_LABELS: dict[DataSource, str] = {
    DataSource.SIMULATED: "Simulated",
    DataSource.ISS_TLE: "ISS TLE (CelesTrak)",
    DataSource.OPENSKY: "OpenSky ADS-B",
    DataSource.AISHUB: "AISHub Vessels",
}


class DataMode(StrEnum):
    REALTIME = "realtime"
    HISTORICAL = "historical"

    @property
    def label(self) -> str:
        return "Real-Time Data" if self is DataMode.REALTIME else "Historical Data"


class DataAvailability(StrEnum):
    """Which operating modes a vehicle offers."""

    REALTIME_ONLY = "realtime_only"
    HISTORICAL_ONLY = "historical_only"
    BOTH = "both"

    @property
    def supports_realtime(self) -> bool:
        return self in (DataAvailability.REALTIME_ONLY, DataAvailability.BOTH)

    @property
    def supports_historical(self) -> bool:
        return self in (DataAvailability.HISTORICAL_ONLY, DataAvailability.BOTH)

    @property
    def default_mode(self) -> DataMode:
        return DataMode.REALTIME if self.supports_realtime else DataMode.HISTORICAL

    def supports(self, mode: DataMode) -> bool:
        if mode is DataMode.REALTIME:
            return self.supports_realtime
        return self.supports_historical

    @property
    def message(self) -> str:
        if self is DataAvailability.BOTH:
            return "This vehicle supports Real-Time and Historical data."
        if self is DataAvailability.REALTIME_ONLY:
            return "This vehicle supports Real-Time data only."
        return "This vehicle supports Historical data only."


class VehicleOption(TelemetryBaseModel):
    """A selectable vehicle in the catalog."""

    id: str = Field(..., min_length=1)
    """Stable identifier used by :meth:`TelemetryDashboard.select_vehicle`."""
    name: str
    """Display name (e.g. ``"ISS (International Space Station)"``)."""
    category: str
    """Vehicle category (e.g. ``"Satellite"``)."""
    availability: DataAvailability = DataAvailability.BOTH

    def __str__(self) -> str:
        return f"{self.name} - {self.category}"


ISS = VehicleOption(
    id="iss",
    name="ISS (International Space Station)",
    category="Satellite",
    availability=DataAvailability.BOTH,
)
AIRCRAFT = VehicleOption(
    id="adsb-aircraft",
    name="Commercial Aircraft (ADS-B)",
    category="Aircraft",
    availability=DataAvailability.BOTH,
)
VESSEL = VehicleOption(
    id="ais-vessel",
    name="Cargo Vessel (AIS)",
    category="Ship",
    availability=DataAvailability.BOTH,
)
MARS_LANDER = VehicleOption(
    id="mars-insight",
    name="Mars InSight Lander",
    category="Planetary Lander",
    availability=DataAvailability.HISTORICAL_ONLY,
)
DEEP_SPACE_PROBE = VehicleOption(
    id="deep-space-probe",
    name="Deep-Space Probe (Public Archive)",
    category="Spacecraft",
    availability=DataAvailability.HISTORICAL_ONLY,
)

_CATALOG: dict[DataSource, tuple[VehicleOption, ...]] = {
    DataSource.ISS_TLE: (ISS,),
    DataSource.OPENSKY: (AIRCRAFT,),
    DataSource.AISHUB: (VESSEL,),
    DataSource.SIMULATED: (ISS, AIRCRAFT, VESSEL, MARS_LANDER, DEEP_SPACE_PROBE),
}


def vehicles_for_source(source: DataSource) -> list[VehicleOption]:
    """Return the vehicles offered while *source* is active."""
    return list(_CATALOG[source])
