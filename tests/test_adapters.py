from __future__ import annotations

import math

import pytest
from conftest import AISHUB_VESSELS, ISS_TLE, OPENSKY_STATES, FakeTransport

from missiontelemetry._api import aishub, celestrak, opensky
from missiontelemetry.config import TelemetryConfig
from missiontelemetry.exceptions import TelemetryParseError, TelemetryTransportError
from missiontelemetry.ingestion.adapters import adapter_for
from missiontelemetry.models.vehicle import DataSource

# ------------------------------------------------------------------
# CelesTrak
# ------------------------------------------------------------------


class TestCelestrak:
    def test_velocity_derived_from_mean_motion(self) -> None:
        snapshot = celestrak.parse_tle(ISS_TLE)

        period = 86400.0 / 15.72125391
        expected = 2.0 * math.pi * (6371.0 + 420.0) * 1000.0 / period
        assert snapshot.source == DataSource.ISS_TLE
        assert snapshot.velocity == pytest.approx(expected)
        assert snapshot.velocity == pytest.approx(7764, rel=1e-3)
        assert snapshot.temperature == -10.0
        assert snapshot.signal == pytest.approx(26.4)

    def test_short_record_rejected(self) -> None:
        with pytest.raises(TelemetryParseError):
            celestrak.parse_tle("ISS (ZARYA)\n1 25544U\n")

    def test_short_line_rejected(self) -> None:
        with pytest.raises(TelemetryParseError):
            celestrak.parse_tle("ISS (ZARYA)\n1 25544U\n2 25544  51.6416\n")

    def test_garbage_mean_motion_rejected(self) -> None:
        line2 = "2 25544  51.6416 247.4627 0006703 130.5360 325.0288 ABCDEFGHIJK563537"
        with pytest.raises(TelemetryParseError):
            celestrak.parse_tle(f"ISS\nline1\n{line2}\n")


# ------------------------------------------------------------------
# OpenSky
# ------------------------------------------------------------------


class TestOpenSky:
    def test_first_state_vector_is_used(self) -> None:
        snapshot = opensky.parse_states(OPENSKY_STATES)

        assert snapshot.velocity == 230.5
        assert snapshot.temperature == pytest.approx(-50.0)
        assert snapshot.signal == pytest.approx(50.0)

    def test_missing_altitude_leaves_temperature_and_signal_absent(self) -> None:
        payload = (
            '{"time":1,"states":[["abc","X","Y",1,1,0.0,0.0,null,false,99.0,0.0,0.0,null,null,null,false,0]]}'
        )
        snapshot = opensky.parse_states(payload)

        assert snapshot.velocity == 99.0
        assert snapshot.present_fields() == {"velocity": 99.0}

    def test_high_altitude_clamps_derived_values(self) -> None:
        payload = (
            '{"time":1,"states":[["abc","X","Y",1,1,0.0,0.0,60000.0,false,99.0,0.0,0.0,null,null,null,false,0]]}'
        )
        snapshot = opensky.parse_states(payload)

        assert snapshot.temperature == -60.0
        assert snapshot.signal == 5.0

    @pytest.mark.parametrize(
        "payload",
        [
            '{"time":1,"states":null}',
            '{"time":1,"states":[]}',
            '{"time":1,"states":[["abc",1,2]]}',
            '{"time":1,"states":[["abc","X","Y",1,1,0.0,0.0,100.0,false,null,0.0,0.0,null,null]]}',
            "<html>rate limited</html>",
        ],
    )
    def test_unusable_payloads_rejected(self, payload: str) -> None:
        with pytest.raises(TelemetryParseError):
            opensky.parse_states(payload)


# ------------------------------------------------------------------
# AISHub
# ------------------------------------------------------------------


class TestAisHub:
    def test_speed_converted_from_knots(self) -> None:
        snapshot = aishub.parse_vessels(AISHUB_VESSELS)

        assert snapshot.velocity == pytest.approx(12.5 * 0.514444)
        assert snapshot.temperature is None
        assert snapshot.signal is None

    def test_payload_without_speed_rejected(self) -> None:
        with pytest.raises(TelemetryParseError):
            aishub.parse_vessels('[{"ERROR":true,"ERROR_MESSAGE":"Too frequent requests!"}]')

    def test_url_carries_username(self) -> None:
        url = aishub.build_url("captain")

        assert url.startswith("https://data.aishub.net/ws.php?")
        assert "username=captain" in url
        assert "format=1" in url
        assert "output=json" in url


# ------------------------------------------------------------------
# SourceAdapter
# ------------------------------------------------------------------


@pytest.mark.asyncio
async def test_simulated_source_never_fetches(fake_transport: FakeTransport) -> None:
    adapter = adapter_for(DataSource.SIMULATED, TelemetryConfig(), fake_transport)

    assert await adapter.fetch_snapshot() is None
    assert fake_transport.calls == []
    assert adapter.is_remote is False


@pytest.mark.asyncio
async def test_aishub_without_username_short_circuits(fake_transport: FakeTransport) -> None:
    adapter = adapter_for(DataSource.AISHUB, TelemetryConfig(ais_username="   "), fake_transport)

    assert await adapter.fetch_snapshot() is None
    assert fake_transport.calls == []


@pytest.mark.asyncio
async def test_aishub_with_username_fetches(fake_transport: FakeTransport) -> None:
    adapter = adapter_for(DataSource.AISHUB, TelemetryConfig(ais_username="captain"), fake_transport)

    snapshot = await adapter.fetch_snapshot()

    assert snapshot is not None
    assert snapshot.source == DataSource.AISHUB
    assert len(fake_transport.calls) == 1


@pytest.mark.asyncio
async def test_transport_failure_returns_none() -> None:
    transport = FakeTransport(
        responses={"https://opensky-network.org/": TelemetryTransportError("HTTP 503", status_code=503)}
    )
    adapter = adapter_for(DataSource.OPENSKY, TelemetryConfig(), transport)

    assert await adapter.fetch_snapshot() is None
    assert len(transport.calls) == 1


@pytest.mark.asyncio
async def test_malformed_payload_returns_none() -> None:
    transport = FakeTransport(responses={"https://celestrak.org/": "No GP data found"})
    adapter = adapter_for(DataSource.ISS_TLE, TelemetryConfig(), transport)

    assert await adapter.fetch_snapshot() is None


@pytest.mark.asyncio
async def test_missing_transport_returns_none() -> None:
    adapter = adapter_for(DataSource.ISS_TLE, TelemetryConfig(), None)

    assert await adapter.fetch_snapshot() is None
