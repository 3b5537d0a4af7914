"""Source adapters.

One adapter per :class:`DataSource`. Dispatch is by tag over a closed set of
provider fetchers; the simulated source has no fetcher and always yields
``None``.

Every failure mode is absorbed here: transport errors, timeouts, non-2xx
responses and malformed payloads return ``None`` so the poll driver simply
keeps the previous snapshot until the next cycle. A missing credential
short-circuits before any request is made.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from missiontelemetry._api import aishub, celestrak, opensky
from missiontelemetry._transport import Transport
from missiontelemetry.config import TelemetryConfig
from missiontelemetry.exceptions import TelemetryParseError, TelemetryTransportError
from missiontelemetry.models.snapshot import Snapshot
from missiontelemetry.models.vehicle import DataSource

_logger = logging.getLogger(__name__)

_Fetcher = Callable[[Transport, TelemetryConfig], Awaitable[Snapshot]]


async def _fetch_iss(transport: Transport, _config: TelemetryConfig) -> Snapshot:
    return await celestrak.fetch_iss_tle(transport)


async def _fetch_opensky(transport: Transport, _config: TelemetryConfig) -> Snapshot:
    return await opensky.fetch_states(transport)


async def _fetch_aishub(transport: Transport, config: TelemetryConfig) -> Snapshot:
    return await aishub.fetch_vessels(transport, config.ais_username)


_FETCHERS: dict[DataSource, _Fetcher] = {
    DataSource.ISS_TLE: _fetch_iss,
    DataSource.OPENSKY: _fetch_opensky,
    DataSource.AISHUB: _fetch_aishub,
}


def _has_credentials(source: DataSource, config: TelemetryConfig) -> bool:
    if source is DataSource.AISHUB:
        return config.has_ais_credentials
    return True


class SourceAdapter:
    """Fetch a normalized snapshot from one provider."""

    def __init__(self, source: DataSource, config: TelemetryConfig, transport: Transport | None) -> None:
        self.source = source
        self._config = config
        self._transport = transport

    @property
    def is_remote(self) -> bool:
        return self.source in _FETCHERS

    async def fetch_snapshot(self) -> Snapshot | None:
        """Return the provider's latest reading, or ``None`` if none is available."""
        fetcher = _FETCHERS.get(self.source)
        if fetcher is None:
            return None
        if not _has_credentials(self.source, self._config):
            _logger.debug("Skipping %s poll: no credentials configured", self.source)
            return None
        if self._transport is None:
            _logger.debug("Skipping %s poll: no transport available", self.source)
            return None

        try:
            snapshot = await fetcher(self._transport, self._config)
        except TelemetryTransportError as exc:
            _logger.debug("%s fetch failed: %s", self.source, exc)
            return None
        except TelemetryParseError as exc:
            _logger.debug("%s payload rejected: %s", self.source, exc)
            return None

        return snapshot


def adapter_for(source: DataSource, config: TelemetryConfig, transport: Transport | None) -> SourceAdapter:
    """Build the adapter bound to *source*."""
    return SourceAdapter(DataSource(source), config, transport)
