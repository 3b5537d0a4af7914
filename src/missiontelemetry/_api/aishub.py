"""AISHub vessel positions.

Endpoint:
  - /ws.php?username=<user>&format=1&output=json

Requires a registered AISHub username. Only the first ``SPEED`` field
(knots) in the payload is used.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import urlencode

from missiontelemetry._constants import AISHUB_URL, KNOTS_TO_MS
from missiontelemetry._transport import Transport
from missiontelemetry.exceptions import TelemetryConfigError, TelemetryParseError
from missiontelemetry.models.snapshot import Snapshot
from missiontelemetry.models.vehicle import DataSource

_logger = logging.getLogger(__name__)

_SPEED_PATTERN = re.compile(r'"SPEED"\s*:\s*([0-9.]+)')


def build_url(username: str) -> str:
    query = urlencode({"username": username, "format": "1", "output": "json"})
    return f"{AISHUB_URL}?{query}"


def parse_vessels(text: str) -> Snapshot:
    """Extract the first vessel speed and convert it to m/s."""
    match = _SPEED_PATTERN.search(text)
    if match is None:
        raise TelemetryParseError("AISHub payload has no SPEED field", source=DataSource.AISHUB)
    try:
        knots = float(match.group(1))
    except ValueError as exc:
        raise TelemetryParseError(f"Invalid AISHub speed: {match.group(1)!r}", source=DataSource.AISHUB) from exc
    return Snapshot(source=DataSource.AISHUB, velocity=knots * KNOTS_TO_MS)


async def fetch_vessels(transport: Transport, username: str) -> Snapshot:
    """Fetch vessel data for *username* and normalize the first speed."""
    if not username or not username.strip():
        raise TelemetryConfigError("AISHub username is required")
    text = await transport.get_text(build_url(username.strip()))
    snapshot = parse_vessels(text)
    _logger.debug("AISHub velocity=%.2f m/s", snapshot.velocity)
    return snapshot
