from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from missiontelemetry.exceptions import TelemetryTransportError

ISS_TLE = (
    "ISS (ZARYA)\n"
    "1 25544U 98067A   24001.50000000  .00016717  00000-0  10270-3 0  9005\n"
    "2 25544  51.6416 247.4627 0006703 130.5360 325.0288 15.72125391563537\n"
)

OPENSKY_STATES = (
    '{"time":1700000000,"states":[["4b1815","SWR123  ","Switzerland",1700000000,1700000000,'
    '8.55,47.45,10000.0,false,230.5,90.0,0.0,null,10200.0,"1000",false,0],'
    '["3c6444","DLH9U   ","Germany",1700000000,1700000000,9.1,48.2,3000.0,false,150.0,10.0,0.0,null,3100.0,null,false,0]]}'
)

AISHUB_VESSELS = '[{"ERROR":false,"USERNAME":"captain","FORMAT":"HUMAN"},[{"MMSI":244660000,"SPEED":12.5,"COG":90.0}]]'


@dataclass
class FakeTransport:
    """In-memory stand-in for :class:`HttpTransport`.

    ``responses`` maps a URL prefix to a body or to an exception to raise.
    """

    responses: dict[str, str | Exception] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)

    async def get_text(self, url: str) -> str:
        self.calls.append(url)
        for prefix, response in self.responses.items():
            if url.startswith(prefix):
                if isinstance(response, Exception):
                    raise response
                return response
        raise TelemetryTransportError(f"HTTP 404 for {url}", status_code=404, url=url)


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport(
        responses={
            "https://celestrak.org/": ISS_TLE,
            "https://opensky-network.org/": OPENSKY_STATES,
            "https://data.aishub.net/": AISHUB_VESSELS,
        }
    )
