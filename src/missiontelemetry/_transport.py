"""HTTP transport for provider fetches."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

import aiohttp

from missiontelemetry._redact import redact_for_log, redact_url
from missiontelemetry.config import TelemetryConfig
from missiontelemetry.exceptions import TelemetryTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by provider modules.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpTransport`) concrete.
    """

    async def get_text(self, url: str) -> str:
        ...


class HttpTransport:
    """Plain GET transport with per-request connect/read timeouts."""

    def __init__(
        self,
        config: TelemetryConfig,
        http_session: aiohttp.ClientSession,
    ) -> None:
        self._config = config
        self._http = http_session
        # connect covers DNS, pool wait and the socket handshake.
        self._timeout = aiohttp.ClientTimeout(
            total=None,
            connect=config.connect_timeout,
            sock_read=config.read_timeout,
        )

    async def get_text(self, url: str) -> str:
        """GET *url* and return the body as text.

        Raises :class:`TelemetryTransportError` on any transport failure,
        timeout, or non-2xx status.
        """
        safe_url = redact_url(url)
        headers = {
            "accept": "*/*",
            "user-agent": self._config.user_agent,
        }

        _logger.debug("GET %s", safe_url)

        try:
            async with self._http.get(url, headers=headers, timeout=self._timeout) as resp:
                text = await resp.text()
                if not 200 <= resp.status < 300:
                    raise TelemetryTransportError(
                        f"HTTP {resp.status} for {safe_url}: {redact_for_log(text, max_string=200)}",
                        status_code=resp.status,
                        url=safe_url,
                    )
        except TelemetryTransportError:
            raise
        except asyncio.TimeoutError as exc:
            raise TelemetryTransportError(f"Request to {safe_url} timed out", url=safe_url) from exc
        except aiohttp.ClientError as exc:
            raise TelemetryTransportError(f"Request to {safe_url} failed: {exc}", url=safe_url) from exc
        except UnicodeDecodeError as exc:
            raise TelemetryTransportError(f"Undecodable body from {safe_url}", url=safe_url) from exc

        return text
