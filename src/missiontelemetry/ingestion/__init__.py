"""Ingestion layer.

This package contains the adapters that fetch data from external providers
and emit normalized :class:`~missiontelemetry.models.snapshot.Snapshot`
objects.
"""

__all__: list[str] = []
