from __future__ import annotations

import pytest

from missiontelemetry.config import TelemetryConfig
from missiontelemetry.exceptions import TelemetryConfigError
from missiontelemetry.models.vehicle import DataSource


def test_defaults_match_reference_behaviour() -> None:
    config = TelemetryConfig()

    assert config.connect_timeout == 8.0
    assert config.read_timeout == 8.0
    assert config.tick_interval == 1.0
    assert config.poll_interval == 15.0
    assert config.history_max_points == 720
    assert config.history_step_ms == 3_600_000
    assert config.initial_source == DataSource.SIMULATED
    assert config.has_ais_credentials is False


def test_from_env_reads_mission_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MISSION_AIS_USERNAME", "captain")
    monkeypatch.setenv("MISSION_SOURCE", "AISHUB")
    monkeypatch.setenv("MISSION_POLL_INTERVAL", "30")
    monkeypatch.setenv("MISSION_HISTORY_MAX_POINTS", "48")
    monkeypatch.setenv("MISSION_SEED_HISTORY", "off")

    config = TelemetryConfig.from_env()

    assert config.ais_username == "captain"
    assert config.has_ais_credentials is True
    assert config.initial_source == DataSource.AISHUB
    assert config.poll_interval == 30.0
    assert config.history_max_points == 48
    assert config.seed_history is False


def test_explicit_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MISSION_TICK_INTERVAL", "5")

    config = TelemetryConfig.from_env(tick_interval=0.5)

    assert config.tick_interval == 0.5


def test_invalid_numeric_env_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MISSION_READ_TIMEOUT", "soon")

    with pytest.raises(TelemetryConfigError):
        TelemetryConfig.from_env()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"connect_timeout": 0},
        {"poll_interval": -1.0},
        {"history_max_points": 0},
        {"initial_source": "voyager"},
    ],
)
def test_invalid_values_rejected(kwargs: dict[str, object]) -> None:
    with pytest.raises(TelemetryConfigError):
        TelemetryConfig(**kwargs)  # type: ignore[arg-type]
