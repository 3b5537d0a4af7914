"""CelesTrak two-line element set for the ISS.

Endpoint:
  - /NORAD/elements/gp.php?NAME=ISS%20(ZARYA)&FORMAT=TLE

The response is a three-line record (name, TLE line 1, TLE line 2). Only
the mean motion on TLE line 2 is used; orbital speed is derived from it
assuming a circular orbit at a fixed altitude.
"""

from __future__ import annotations

import logging
import math

from missiontelemetry._constants import (
    CELESTRAK_ISS_TLE_URL,
    EARTH_RADIUS_KM,
    ISS_ASSUMED_ALTITUDE_KM,
    ISS_CABIN_TEMPERATURE_C,
    SECONDS_PER_DAY,
)
from missiontelemetry._transport import Transport
from missiontelemetry.exceptions import TelemetryParseError
from missiontelemetry.ingestion.normalize import clamp
from missiontelemetry.models.snapshot import Snapshot
from missiontelemetry.models.vehicle import DataSource

_logger = logging.getLogger(__name__)

# Columns 53-63 (1-based) of TLE line 2.
_MEAN_MOTION_SLICE = slice(52, 63)
_MIN_LINE_LENGTH = 63


def orbital_speed_ms(mean_motion: float, altitude_km: float = ISS_ASSUMED_ALTITUDE_KM) -> float:
    """Circular orbital speed in m/s for *mean_motion* revolutions per day."""
    period_seconds = SECONDS_PER_DAY / mean_motion
    radius_km = EARTH_RADIUS_KM + altitude_km
    return (2.0 * math.pi * radius_km * 1000.0) / period_seconds


def parse_tle(text: str) -> Snapshot:
    """Parse a CelesTrak TLE record into a snapshot."""
    lines = text.splitlines()
    if len(lines) < 3:
        raise TelemetryParseError(f"TLE record has {len(lines)} lines, expected 3", source=DataSource.ISS_TLE)
    line2 = lines[2].strip()
    if len(line2) < _MIN_LINE_LENGTH:
        raise TelemetryParseError(f"TLE line 2 too short ({len(line2)} chars)", source=DataSource.ISS_TLE)
    try:
        mean_motion = float(line2[_MEAN_MOTION_SLICE].strip())
    except ValueError as exc:
        raise TelemetryParseError(f"Invalid mean motion in TLE: {exc}", source=DataSource.ISS_TLE) from exc
    if not math.isfinite(mean_motion) or mean_motion <= 0:
        raise TelemetryParseError(f"Mean motion must be positive, got {mean_motion}", source=DataSource.ISS_TLE)

    return Snapshot(
        source=DataSource.ISS_TLE,
        velocity=orbital_speed_ms(mean_motion),
        temperature=ISS_CABIN_TEMPERATURE_C,
        signal=clamp(60.0 - ISS_ASSUMED_ALTITUDE_KM * 0.08, 5.0, 60.0),
    )


async def fetch_iss_tle(transport: Transport) -> Snapshot:
    """Fetch and parse the current ISS TLE."""
    text = await transport.get_text(CELESTRAK_ISS_TLE_URL)
    snapshot = parse_tle(text)
    _logger.debug("ISS TLE velocity=%.2f m/s", snapshot.velocity)
    return snapshot
