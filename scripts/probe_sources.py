#!/usr/bin/env python3
"""Fetch one snapshot from every live telemetry source.

Each remote source is polled once through the same adapter the dashboard
uses, printing the normalized snapshot (or ``None`` when the provider was
unreachable, rejected the request, or returned an unusable payload).

Usage
-----
::

    export MISSION_AIS_USERNAME="your-aishub-user"   # optional
    python scripts/probe_sources.py

Options::

    --source NAME       Only probe this source (iss_tle, opensky, aishub)
    --json              Output as machine-readable JSON
    --verbose, -v       Enable debug logging (request URLs are redacted)
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

import aiohttp  # noqa: E402

from missiontelemetry import DataSource, TelemetryConfig  # noqa: E402
from missiontelemetry._transport import HttpTransport  # noqa: E402
from missiontelemetry.ingestion.adapters import adapter_for  # noqa: E402
from missiontelemetry.models.vehicle import vehicles_for_source  # noqa: E402


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


async def _probe(source: DataSource, config: TelemetryConfig, transport: HttpTransport) -> dict[str, Any]:
    adapter = adapter_for(source, config, transport)
    snapshot = await adapter.fetch_snapshot()
    return {
        "source": source.value,
        "label": source.label,
        "vehicles": [str(v) for v in vehicles_for_source(source)],
        "snapshot": snapshot.present_fields() if snapshot is not None else None,
    }


async def main() -> None:
    parser = argparse.ArgumentParser(
        description="Poll each telemetry source once and print the normalized snapshot.",
    )
    parser.add_argument(
        "--source",
        choices=[s.value for s in DataSource if s is not DataSource.SIMULATED],
        help="Only probe this source (default: all remote sources)",
    )
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    config = TelemetryConfig.from_env()
    sources = (
        [DataSource(args.source)]
        if args.source
        else [s for s in DataSource if adapter_for(s, config, None).is_remote]
    )

    result: dict[str, Any] = {
        "timestamp": datetime.now(UTC).isoformat(),
        "ais_credentials": config.has_ais_credentials,
        "sources": [],
    }

    async with aiohttp.ClientSession() as session:
        transport = HttpTransport(config, session)
        for source in sources:
            result["sources"].append(await _probe(source, config, transport))

    if args.json_mode:
        print(json.dumps(result, indent=2, default=str, ensure_ascii=False))
        return

    out = [_section("missiontelemetry probe_sources")]
    out.append(f"  time      : {result['timestamp']}")
    out.append(f"  ais creds : {'yes' if config.has_ais_credentials else 'no'}")
    for entry in result["sources"]:
        out.append(_section(entry["label"]))
        for vehicle in entry["vehicles"]:
            out.append(f"  vehicle   : {vehicle}")
        if entry["snapshot"] is None:
            out.append("  snapshot  : None")
        else:
            for key, value in entry["snapshot"].items():
                out.append(f"  {key:<10}: {value:.2f}")
    print("\n".join(out))


if __name__ == "__main__":
    asyncio.run(main())
