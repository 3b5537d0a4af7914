"""Base model for telemetry records.

Every record the library hands to the display shell inherits from
:class:`TelemetryBaseModel`: frozen so a reader always sees a consistent
whole, and tolerant of extra keys so provider payloads can be validated
directly.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TelemetryBaseModel(BaseModel):
    """Base for immutable telemetry records."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )
