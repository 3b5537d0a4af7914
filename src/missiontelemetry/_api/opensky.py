"""OpenSky Network ADS-B state vectors.

Endpoint:
  - /api/states/all

Only the first state vector of the ``states`` array is used. State vector
indices follow the OpenSky REST documentation: 7 is barometric altitude in
metres, 9 is ground velocity in m/s.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from missiontelemetry._constants import OPENSKY_STATES_URL
from missiontelemetry._transport import Transport
from missiontelemetry.exceptions import TelemetryParseError
from missiontelemetry.ingestion.normalize import clamp, safe_float
from missiontelemetry.models._base import TelemetryBaseModel
from missiontelemetry.models.snapshot import Snapshot
from missiontelemetry.models.vehicle import DataSource

_logger = logging.getLogger(__name__)

_BARO_ALTITUDE_INDEX = 7
_VELOCITY_INDEX = 9
_MIN_STATE_LENGTH = 14


class OpenSkyStates(TelemetryBaseModel):
    """Top-level ``/states/all`` response."""

    time: int | None = None
    states: list[list[Any]] | None = None


def first_state_vector(text: str) -> list[Any]:
    """Return the first element of the ``states`` array."""
    try:
        response = OpenSkyStates.model_validate_json(text)
    except ValidationError as exc:
        raise TelemetryParseError(f"Invalid OpenSky payload: {exc.error_count()} errors", source=DataSource.OPENSKY) from exc
    if not response.states:
        raise TelemetryParseError("OpenSky payload has no state vectors", source=DataSource.OPENSKY)
    return response.states[0]


def parse_states(text: str) -> Snapshot:
    """Parse an OpenSky ``/states/all`` payload into a snapshot.

    Temperature and signal are estimated from barometric altitude using the
    standard lapse rate; both are left absent when altitude is unknown.
    """
    state = first_state_vector(text)
    if len(state) < _MIN_STATE_LENGTH:
        raise TelemetryParseError(
            f"OpenSky state vector has {len(state)} entries, expected {_MIN_STATE_LENGTH}",
            source=DataSource.OPENSKY,
        )
    velocity = safe_float(state[_VELOCITY_INDEX])
    if velocity is None:
        raise TelemetryParseError("OpenSky state vector has no velocity", source=DataSource.OPENSKY)

    altitude = safe_float(state[_BARO_ALTITUDE_INDEX])
    temperature: float | None = None
    signal: float | None = None
    if altitude is not None:
        temperature = clamp(15.0 - (altitude / 1000.0) * 6.5, -60.0, 40.0)
        signal = clamp(60.0 - altitude / 1000.0, 5.0, 60.0)

    return Snapshot(
        source=DataSource.OPENSKY,
        velocity=velocity,
        temperature=temperature,
        signal=signal,
    )


async def fetch_states(transport: Transport) -> Snapshot:
    """Fetch all state vectors and normalize the first one."""
    text = await transport.get_text(OPENSKY_STATES_URL)
    snapshot = parse_states(text)
    _logger.debug("OpenSky snapshot %s", snapshot.present_fields())
    return snapshot
