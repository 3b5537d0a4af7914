"""Custom exception hierarchy for missiontelemetry."""

from __future__ import annotations


class TelemetryError(Exception):
    """Base exception for all missiontelemetry errors."""


class TelemetryConfigError(TelemetryError):
    """Invalid or missing configuration."""


class TelemetryTransportError(TelemetryError):
    """HTTP-level failure (network, timeout, non-2xx)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class TelemetryParseError(TelemetryError):
    """Provider payload was malformed or too short to normalize."""

    def __init__(self, message: str, *, source: str = "") -> None:
        self.source = source
        super().__init__(message)


class TelemetryExportError(TelemetryError):
    """Writing the CSV export failed.

    Wraps the underlying :class:`OSError`; the dashboard turns it into an
    :class:`~missiontelemetry.export.ExportResult` for display instead of
    propagating it.
    """

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(message)
