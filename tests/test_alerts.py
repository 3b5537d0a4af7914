from __future__ import annotations

from datetime import datetime

from missiontelemetry.models.alert import AlertCondition, AlertSeverity, SystemStatus
from missiontelemetry.models.state import LiveState
from missiontelemetry.state.alerts import AlertMonitor

_NOW = datetime(2026, 1, 1, 12, 30, 45)


def test_battery_alert_fires_once_per_contiguous_interval() -> None:
    monitor = AlertMonitor()
    for battery in (30.0, 20.0, 20.0, 30.0, 20.0):
        monitor.evaluate(LiveState(battery=battery), _NOW)

    battery_alerts = [a for a in monitor.log if a.condition == AlertCondition.BATTERY_CRITICAL]
    assert len(battery_alerts) == 2
    assert all(a.severity == AlertSeverity.CRITICAL for a in battery_alerts)


def test_alert_messages_include_triggering_value() -> None:
    monitor = AlertMonitor()
    raised = monitor.evaluate(LiveState(battery=12.346, temperature=71.5, signal=9.0), _NOW)

    messages = {a.condition: a.message for a in raised}
    assert messages[AlertCondition.BATTERY_CRITICAL] == "CRITICAL: Battery voltage low (12.35 V)"
    assert messages[AlertCondition.TEMPERATURE_HIGH] == "WARN: Thermal spike detected (71.50 C)"
    assert messages[AlertCondition.SIGNAL_LOW] == "WARN: Signal strength low (9.00 dB)"
    assert all(a.severity == AlertSeverity.WARNING for a in raised if a.condition != AlertCondition.BATTERY_CRITICAL)


def test_log_is_newest_first() -> None:
    monitor = AlertMonitor()
    monitor.evaluate(LiveState(battery=20.0), datetime(2026, 1, 1, 0, 0, 0))
    monitor.evaluate(LiveState(battery=20.0, signal=5.0), datetime(2026, 1, 1, 0, 0, 1))

    log = monitor.log
    assert [a.condition for a in log] == [AlertCondition.SIGNAL_LOW, AlertCondition.BATTERY_CRITICAL]
    assert log[0].format_line() == "[00:00:01] WARN: Signal strength low (5.00 dB)"


def test_status_is_level_not_edge() -> None:
    monitor = AlertMonitor()
    assert monitor.status == SystemStatus.NOMINAL

    monitor.evaluate(LiveState(temperature=80.0), _NOW)
    monitor.evaluate(LiveState(temperature=80.0), _NOW)
    assert monitor.status == SystemStatus.ATTENTION_REQUIRED
    assert monitor.is_active(AlertCondition.TEMPERATURE_HIGH)
    assert not monitor.is_active(AlertCondition.BATTERY_CRITICAL)
    assert len(monitor.log) == 1

    monitor.evaluate(LiveState(temperature=20.0), _NOW)
    assert not monitor.is_active(AlertCondition.TEMPERATURE_HIGH)
    assert monitor.status == SystemStatus.NOMINAL
    assert monitor.status.label == "STATUS: NOMINAL"


def test_thresholds_are_strict() -> None:
    monitor = AlertMonitor()
    monitor.evaluate(LiveState(battery=25.0, temperature=70.0, signal=10.0), _NOW)

    assert monitor.log == []
    assert monitor.status == SystemStatus.NOMINAL
