"""Telemetry dashboard core.

:class:`TelemetryDashboard` owns the live state, the per-channel histories,
the alert monitor and the two periodic drivers. A display shell calls the
operations below and reads the accessors; it never touches the state layer
directly.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import random
import time
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

import aiohttp

from missiontelemetry._transport import HttpTransport, Transport
from missiontelemetry.config import TelemetryConfig
from missiontelemetry.exceptions import TelemetryConfigError, TelemetryExportError
from missiontelemetry.export import ExportResult, ExportStatus, write_csv
from missiontelemetry.ingestion.adapters import adapter_for
from missiontelemetry.models.alert import AlertRecord, SystemStatus
from missiontelemetry.models.snapshot import Snapshot
from missiontelemetry.models.state import Channel, LiveState
from missiontelemetry.models.vehicle import DataMode, DataSource, VehicleOption, vehicles_for_source
from missiontelemetry.simulator import Simulator
from missiontelemetry.state.alerts import AlertMonitor
from missiontelemetry.state.fusion import overlay_snapshot
from missiontelemetry.state.mailbox import SnapshotMailbox
from missiontelemetry.state.series import RollingSeries
from missiontelemetry.state.store import HistoryStore

_logger = logging.getLogger(__name__)


class TelemetryDashboard:
    """Core of the mission telemetry dashboard.

    Usage::

        async with TelemetryDashboard(TelemetryConfig.from_env()) as dashboard:
            dashboard.select_source("iss_tle")
            await dashboard.run_forever()

    ``tick()`` and ``poll()`` may also be driven manually, which is how the
    tests exercise the state machine.
    """

    def __init__(
        self,
        config: TelemetryConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.time,
        catalog: Callable[[DataSource], list[VehicleOption]] = vehicles_for_source,
        on_tick: Callable[[LiveState], None] | None = None,
        on_alert: Callable[[AlertRecord], None] | None = None,
    ) -> None:
        self._config = config or TelemetryConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport = transport
        self._clock = clock
        self._catalog = catalog
        self._on_tick = on_tick
        self._on_alert = on_alert

        rng = rng or random.Random()
        self._simulator = Simulator(rng)
        self._history = HistoryStore(self._config.history_max_points, self._config.history_step_ms, rng=rng)
        self._alerts = AlertMonitor()
        self._mailbox = SnapshotMailbox()
        self._state = LiveState()

        self._source = self._config.initial_source
        self._vehicles = self._catalog(self._source)
        if not self._vehicles:
            raise TelemetryConfigError(f"No vehicles available for source {self._source}")
        self._vehicle = self._vehicles[0]
        self._mode = self._vehicle.availability.default_mode

        self._tasks: list[asyncio.Task[None]] = []

        if self._config.seed_history:
            self._history.seed(self._now_ms())

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> TelemetryDashboard:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.stop()
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
            self._transport = None

    # ------------------------------------------------------------------
    # Periodic drivers
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Schedule the tick and poll drivers on the running loop."""
        if self.is_running:
            return
        self._tasks = [
            asyncio.create_task(self._tick_loop(), name="missiontelemetry-tick"),
            asyncio.create_task(self._poll_loop(), name="missiontelemetry-poll"),
        ]

    async def stop(self) -> None:
        """Cancel both drivers and wait for them to finish."""
        tasks, self._tasks = self._tasks, []
        for task in tasks:
            task.cancel()
        for task in tasks:
            with contextlib.suppress(asyncio.CancelledError):
                await task

    async def run_forever(self) -> None:
        """Start the drivers and block until they are cancelled."""
        self.start()
        await asyncio.gather(*self._tasks)

    @property
    def is_running(self) -> bool:
        return any(not task.done() for task in self._tasks)

    async def _tick_loop(self) -> None:
        while True:
            try:
                self.tick()
            except Exception:
                _logger.exception("Telemetry tick failed")
            await asyncio.sleep(self._config.tick_interval)

    async def _poll_loop(self) -> None:
        # Each poll completes (or times out) before the next sleep starts.
        while True:
            try:
                await self.poll()
            except Exception:
                _logger.exception("Telemetry poll failed")
            await asyncio.sleep(self._config.poll_interval)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def tick(self) -> LiveState:
        """Advance the live state by one tick.

        Simulator noise first, then (in real-time mode) the latest snapshot
        overlay, then history and alerts.
        """
        now = self._clock()
        state = self._simulator.step(self._state)
        if self._mode is DataMode.REALTIME:
            state = overlay_snapshot(state, self._mailbox.peek())
        self._state = state

        self._history.record(state, int(now * 1000))
        raised = self._alerts.evaluate(state, datetime.fromtimestamp(now))

        if self._on_tick is not None:
            self._on_tick(state)
        if self._on_alert is not None:
            for record in raised:
                self._on_alert(record)
        return state

    async def poll(self) -> Snapshot | None:
        """Fetch from the selected source and publish the result.

        A ``None`` result leaves the previous snapshot in place.
        """
        source = self._source
        snapshot = await adapter_for(source, self._config, self._transport).fetch_snapshot()
        if snapshot is None:
            return None
        if self._mailbox.publish(snapshot, expected_source=self._source):
            _logger.debug("Published %s snapshot %s", snapshot.source, snapshot.present_fields())
        return snapshot

    def select_source(self, source: DataSource | str) -> None:
        """Bind the poll driver to *source*.

        The pending snapshot is discarded so the previous source's values
        are never shown under the new source.
        """
        try:
            resolved = DataSource(source)
        except ValueError as exc:
            raise TelemetryConfigError(f"Unknown data source: {source!r}") from exc
        self._source = resolved
        self._mailbox.clear()
        _logger.info("Data source set to %s", resolved.label)
        self.refresh_vehicles()

    def refresh_vehicles(self) -> list[VehicleOption]:
        """Reload the catalog for the active source.

        The selected vehicle is kept when still listed; otherwise the first
        entry is selected.
        """
        self._vehicles = self._catalog(self._source)
        if not self._vehicles:
            raise TelemetryConfigError(f"No vehicles available for source {self._source}")
        current = next((v for v in self._vehicles if v.id == self._vehicle.id), None)
        if current is None:
            self._apply_vehicle(self._vehicles[0])
        else:
            self._vehicle = current
            if not current.availability.supports(self._mode):
                self._mode = current.availability.default_mode
        return list(self._vehicles)

    def select_vehicle(self, vehicle_id: str) -> VehicleOption:
        """Select a vehicle from the active catalog and switch to its default mode."""
        vehicle = next((v for v in self._vehicles if v.id == vehicle_id), None)
        if vehicle is None:
            raise TelemetryConfigError(f"Vehicle {vehicle_id!r} is not available for source {self._source}")
        self._apply_vehicle(vehicle)
        return vehicle

    def _apply_vehicle(self, vehicle: VehicleOption) -> None:
        self._vehicle = vehicle
        self._mode = vehicle.availability.default_mode
        _logger.info("Vehicle set to %s (%s)", vehicle, vehicle.availability.message)

    def set_mode(self, mode: DataMode | str) -> bool:
        """Switch between real-time and historical mode.

        Returns ``False`` and leaves the mode unchanged when the selected
        vehicle does not offer *mode*.
        """
        try:
            resolved = DataMode(mode)
        except ValueError as exc:
            raise TelemetryConfigError(f"Unknown data mode: {mode!r}") from exc
        if not self._vehicle.availability.supports(resolved):
            _logger.warning("%s does not support %s", self._vehicle.name, resolved.label)
            return False
        self._mode = resolved
        _logger.info("Mode set to %s", resolved.label)
        return True

    def export_csv(self, path: str | Path) -> ExportResult:
        """Write the aligned histories to *path*.

        Disabled when the selected vehicle has no historical data. Write
        failures are reported in the result rather than raised.
        """
        if not self.export_enabled:
            _logger.info("Export skipped: %s has no historical data", self._vehicle.name)
            return ExportResult(status=ExportStatus.DISABLED, path=str(path))
        try:
            rows = write_csv(path, self._history.as_mapping())
        except TelemetryExportError as exc:
            _logger.warning("%s", exc)
            return ExportResult(status=ExportStatus.IO_ERROR, path=exc.path, message=str(exc))
        return ExportResult(status=ExportStatus.OK, path=str(path), rows=rows)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def config(self) -> TelemetryConfig:
        return self._config

    @property
    def live_state(self) -> LiveState:
        return self._state

    def series(self, channel: Channel | str) -> RollingSeries:
        return self._history.series(Channel(channel))

    @property
    def alerts(self) -> list[AlertRecord]:
        """Alert log, newest first."""
        return self._alerts.log

    def alert_lines(self) -> list[str]:
        return [record.format_line() for record in self._alerts.log]

    @property
    def status(self) -> SystemStatus:
        return self._alerts.status

    @property
    def vehicles(self) -> list[VehicleOption]:
        return list(self._vehicles)

    @property
    def selected_vehicle(self) -> VehicleOption:
        return self._vehicle

    @property
    def mode(self) -> DataMode:
        return self._mode

    @property
    def source(self) -> DataSource:
        return self._source

    @property
    def latest_snapshot(self) -> Snapshot | None:
        return self._mailbox.peek()

    @property
    def export_enabled(self) -> bool:
        return self._vehicle.availability.supports_historical

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)
