"""Provider endpoint modules.

Each module fetches one provider's payload through a
:class:`~missiontelemetry._transport.Transport` and parses it into a
:class:`~missiontelemetry.models.snapshot.Snapshot`.
"""
