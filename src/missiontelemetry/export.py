"""CSV export of the aligned channel histories."""

from __future__ import annotations

import csv
import io
import logging
from collections.abc import Mapping
from datetime import datetime, tzinfo
from enum import StrEnum
from pathlib import Path

from missiontelemetry._constants import CSV_HEADER, CSV_TIME_FORMAT, VALUE_FORMAT
from missiontelemetry.exceptions import TelemetryExportError
from missiontelemetry.models._base import TelemetryBaseModel
from missiontelemetry.models.state import Channel
from missiontelemetry.state.series import RollingSeries

_logger = logging.getLogger(__name__)

_COLUMN_ORDER: tuple[Channel, ...] = (
    Channel.BATTERY,
    Channel.TEMPERATURE,
    Channel.SIGNAL,
    Channel.VELOCITY,
)


class ExportStatus(StrEnum):
    OK = "ok"
    DISABLED = "disabled"
    IO_ERROR = "io_error"


class ExportResult(TelemetryBaseModel):
    """Outcome of :meth:`TelemetryDashboard.export_csv`."""

    status: ExportStatus
    path: str = ""
    rows: int = 0
    message: str | None = None
    """Human-readable error for display when ``status`` is ``IO_ERROR``."""

    @property
    def ok(self) -> bool:
        return self.status is ExportStatus.OK


def format_timestamp(timestamp_ms: int, tz: tzinfo | None = None) -> str:
    """Format epoch milliseconds as ``yyyy-MM-dd HH:mm`` (local time by default)."""
    moment = datetime.fromtimestamp(timestamp_ms / 1000.0, tz=tz)
    return moment.strftime(CSV_TIME_FORMAT)


def render_csv(series: Mapping[Channel, RollingSeries], *, tz: tzinfo | None = None) -> str:
    """Render the four series as CSV text.

    Timestamps are taken from the battery series; all series must have the
    same length.
    """
    columns = [series[channel] for channel in _COLUMN_ORDER]
    size = columns[0].size()
    if any(column.size() != size for column in columns):
        sizes = {channel.value: series[channel].size() for channel in _COLUMN_ORDER}
        raise ValueError(f"Series are not aligned: {sizes}")

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for i in range(size):
        writer.writerow(
            [format_timestamp(columns[0].get_timestamp(i), tz)]
            + [VALUE_FORMAT.format(column.get_value(i)) for column in columns]
        )
    return buffer.getvalue()


def write_csv(path: str | Path, series: Mapping[Channel, RollingSeries], *, tz: tzinfo | None = None) -> int:
    """Write the CSV export to *path* and return the number of data rows."""
    text = render_csv(series, tz=tz)
    target = Path(path)
    try:
        target.write_text(text, encoding="utf-8", newline="")
    except OSError as exc:
        raise TelemetryExportError(f"Failed to export CSV: {exc}", path=str(target)) from exc
    rows = series[Channel.BATTERY].size()
    _logger.info("Exported %d rows to %s", rows, target)
    return rows
