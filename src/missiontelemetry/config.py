"""Dashboard configuration for missiontelemetry."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from missiontelemetry._constants import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_TICK_INTERVAL,
    HISTORY_MAX_POINTS,
    HISTORY_STEP_MS,
    USER_AGENT,
)
from missiontelemetry.exceptions import TelemetryConfigError
from missiontelemetry.models.vehicle import DataSource


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class TelemetryConfig:
    """Dashboard configuration.

    Parameters
    ----------
    ais_username : str
        AISHub account name sent as the ``username`` query parameter.
        Leave blank to disable vessel polling.
    connect_timeout : float
        Seconds allowed to establish a provider connection.
    read_timeout : float
        Seconds allowed between reads of a provider response.
    tick_interval : float
        Period of the fast tick driver in seconds.
    poll_interval : float
        Period of the slow provider poll in seconds.
    history_max_points : int
        Capacity of each channel's rolling series.
    history_step_ms : int
        Bucket width of each rolling series in milliseconds.
    seed_history : bool
        Backfill every series with synthetic samples on startup.
    initial_source : DataSource
        Source selected when the dashboard starts.
    user_agent : str
        ``User-Agent`` header sent with provider requests.
    """

    ais_username: str = ""
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT
    tick_interval: float = DEFAULT_TICK_INTERVAL
    poll_interval: float = DEFAULT_POLL_INTERVAL
    history_max_points: int = HISTORY_MAX_POINTS
    history_step_ms: int = HISTORY_STEP_MS
    seed_history: bool = True
    initial_source: DataSource = DataSource.SIMULATED
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        for name in ("connect_timeout", "read_timeout", "tick_interval", "poll_interval"):
            if getattr(self, name) <= 0:
                raise TelemetryConfigError(f"{name} must be positive, got {getattr(self, name)}")
        if self.history_max_points < 1:
            raise TelemetryConfigError(f"history_max_points must be at least 1, got {self.history_max_points}")
        if self.history_step_ms < 1:
            raise TelemetryConfigError(f"history_step_ms must be at least 1, got {self.history_step_ms}")
        if not isinstance(self.initial_source, DataSource):
            try:
                object.__setattr__(self, "initial_source", DataSource(self.initial_source))
            except ValueError as exc:
                raise TelemetryConfigError(f"Unknown data source: {self.initial_source!r}") from exc

    @property
    def has_ais_credentials(self) -> bool:
        """Whether an AISHub username is configured."""
        return bool(self.ais_username and self.ais_username.strip())

    @classmethod
    def from_env(cls, **overrides: Any) -> TelemetryConfig:
        """Create configuration from environment variables.

        Reads optional ``MISSION_*`` variables. Explicit keyword arguments
        override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        TelemetryConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        username = env.get("MISSION_AIS_USERNAME")
        if username is not None:
            config_kwargs["ais_username"] = username

        source = env.get("MISSION_SOURCE")
        if source is not None:
            config_kwargs["initial_source"] = source.strip().lower()

        _ENV_FLOAT_MAP = {
            "MISSION_CONNECT_TIMEOUT": "connect_timeout",
            "MISSION_READ_TIMEOUT": "read_timeout",
            "MISSION_TICK_INTERVAL": "tick_interval",
            "MISSION_POLL_INTERVAL": "poll_interval",
        }
        _ENV_INT_MAP = {
            "MISSION_HISTORY_MAX_POINTS": "history_max_points",
            "MISSION_HISTORY_STEP_MS": "history_step_ms",
        }
        try:
            for env_key, field_name in _ENV_FLOAT_MAP.items():
                val = env.get(env_key)
                if val is not None and field_name not in overrides:
                    config_kwargs[field_name] = float(val)
            for env_key, field_name in _ENV_INT_MAP.items():
                val = env.get(env_key)
                if val is not None and field_name not in overrides:
                    config_kwargs[field_name] = int(val)
        except ValueError as exc:
            raise TelemetryConfigError(f"Invalid numeric environment value: {exc}") from exc

        if "seed_history" not in overrides:
            config_kwargs["seed_history"] = _env_bool(env.get("MISSION_SEED_HISTORY"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
