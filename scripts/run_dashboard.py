#!/usr/bin/env python3
"""Run the telemetry dashboard headless in a terminal.

Prints one status line per tick and every alert as it is raised. On exit
(Ctrl-C or ``--duration`` elapsed) the history is optionally exported.

Usage
-----
::

    python scripts/run_dashboard.py --source iss_tle --export history.csv

Environment variables (``MISSION_*``) are read first; command-line options
override them.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from missiontelemetry import (  # noqa: E402
    AlertRecord,
    DataMode,
    DataSource,
    LiveState,
    TelemetryConfig,
    TelemetryDashboard,
    TelemetryError,
)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the mission telemetry dashboard without a UI")
    parser.add_argument("--source", choices=[s.value for s in DataSource], help="Data source to poll")
    parser.add_argument("--vehicle", help="Vehicle id from the source's catalog")
    parser.add_argument("--mode", choices=[m.value for m in DataMode], help="Operating mode")
    parser.add_argument("--duration", type=float, default=None, help="Stop after this many seconds")
    parser.add_argument("--export", metavar="FILE", help="Write the history to FILE on exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args()


def _print_state(dashboard: TelemetryDashboard, state: LiveState) -> None:
    print(
        f"{dashboard.status.label:<28} "
        f"bat {state.battery:6.2f} V  "
        f"temp {state.temperature:6.2f} C  "
        f"sig {state.signal:5.2f} dB  "
        f"vel {state.velocity:7.2f} m/s"
    )


def _print_alert(record: AlertRecord) -> None:
    print(record.format_line())


async def _run(args: argparse.Namespace) -> int:
    config = TelemetryConfig.from_env()
    dashboard: TelemetryDashboard | None = None

    def on_tick(state: LiveState) -> None:
        if dashboard is not None:
            _print_state(dashboard, state)

    async with TelemetryDashboard(config, on_tick=on_tick, on_alert=_print_alert) as dashboard:
        try:
            if args.source:
                dashboard.select_source(args.source)
            if args.vehicle:
                dashboard.select_vehicle(args.vehicle)
            if args.mode and not dashboard.set_mode(args.mode):
                print(dashboard.selected_vehicle.availability.message, file=sys.stderr)
        except TelemetryError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2

        print(f"{dashboard.source.label}: {dashboard.selected_vehicle} ({dashboard.mode.label})")
        try:
            await asyncio.wait_for(dashboard.run_forever(), timeout=args.duration)
        except TimeoutError:
            pass
        finally:
            await dashboard.stop()
            if args.export:
                result = dashboard.export_csv(args.export)
                if result.ok:
                    print(f"Exported {result.rows} rows to {result.path}")
                else:
                    print(f"Export {result.status}: {result.message or ''}", file=sys.stderr)
    return 0


def main() -> int:
    args = _parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)
    try:
        return asyncio.run(_run(args))
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
