"""Edge-triggered threshold alerts.

Each condition alerts once when it becomes true and stays quiet while it
holds. The overall status is recomputed from the current flags on every
evaluation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from missiontelemetry._constants import VALUE_FORMAT
from missiontelemetry.models.alert import AlertCondition, AlertRecord, AlertSeverity, SystemStatus
from missiontelemetry.models.state import CHANNEL_UNITS, Channel, LiveState

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AlertRule:
    condition: AlertCondition
    channel: Channel
    severity: AlertSeverity
    predicate: Callable[[float], bool]
    template: str

    def message(self, value: float) -> str:
        return self.template.format(value=VALUE_FORMAT.format(value), unit=CHANNEL_UNITS[self.channel])


DEFAULT_RULES: tuple[AlertRule, ...] = (
    AlertRule(
        condition=AlertCondition.BATTERY_CRITICAL,
        channel=Channel.BATTERY,
        severity=AlertSeverity.CRITICAL,
        predicate=lambda value: value < 25,
        template="CRITICAL: Battery voltage low ({value} {unit})",
    ),
    AlertRule(
        condition=AlertCondition.TEMPERATURE_HIGH,
        channel=Channel.TEMPERATURE,
        severity=AlertSeverity.WARNING,
        predicate=lambda value: value > 70,
        template="WARN: Thermal spike detected ({value} {unit})",
    ),
    AlertRule(
        condition=AlertCondition.SIGNAL_LOW,
        channel=Channel.SIGNAL,
        severity=AlertSeverity.WARNING,
        predicate=lambda value: value < 10,
        template="WARN: Signal strength low ({value} {unit})",
    ),
)


class AlertMonitor:
    """Tracks condition flags and the alert log (newest first, unbounded)."""

    def __init__(self, rules: tuple[AlertRule, ...] = DEFAULT_RULES) -> None:
        self._rules = rules
        self._active: dict[AlertCondition, bool] = {rule.condition: False for rule in rules}
        self._log: list[AlertRecord] = []
        self._status = SystemStatus.NOMINAL

    def evaluate(self, state: LiveState, now: datetime | None = None) -> list[AlertRecord]:
        """Update flags from *state* and return alerts raised by this call."""
        timestamp = now or datetime.now()
        raised: list[AlertRecord] = []
        for rule in self._rules:
            value = state.value(rule.channel)
            active = rule.predicate(value)
            if active and not self._active[rule.condition]:
                record = AlertRecord(
                    timestamp=timestamp,
                    severity=rule.severity,
                    condition=rule.condition,
                    channel=rule.channel,
                    value=value,
                    message=rule.message(value),
                )
                self._log.insert(0, record)
                raised.append(record)
                _logger.warning("%s", record.message)
            self._active[rule.condition] = active

        self._status = SystemStatus.ATTENTION_REQUIRED if any(self._active.values()) else SystemStatus.NOMINAL
        return raised

    @property
    def status(self) -> SystemStatus:
        return self._status

    @property
    def log(self) -> list[AlertRecord]:
        return list(self._log)

    def is_active(self, condition: AlertCondition) -> bool:
        return self._active.get(condition, False)
