from __future__ import annotations

import random

import pytest

from missiontelemetry.state.series import RollingSeries

STEP = 3_600_000


def test_first_add_inserts_single_entry() -> None:
    series = RollingSeries(max_points=10, step_ms=STEP)
    series.add_or_update(5.0, 1_000)

    assert series.size() == 1
    assert series.get_value(0) == 5.0
    assert series.get_timestamp(0) == 1_000


def test_update_within_step_overwrites_last_entry() -> None:
    series = RollingSeries(max_points=10, step_ms=STEP)
    series.add_or_update(1.0, 0)
    series.add_or_update(2.0, STEP - 1)

    assert series.size() == 1
    assert series.get_value(0) == 2.0
    assert series.get_timestamp(0) == STEP - 1


def test_earlier_timestamp_updates_value_but_keeps_order() -> None:
    series = RollingSeries(max_points=10, step_ms=STEP)
    series.add_or_update(1.0, 0)
    series.add_or_update(2.0, STEP)
    series.add_or_update(3.0, -10)

    assert series.timestamps() == [0, STEP]
    assert series.values() == [1.0, 3.0]

    series.add_or_update(4.0, 2 * STEP)
    assert series.timestamps() == [0, STEP, 2 * STEP]
    assert all(a < b for a, b in zip(series.timestamps(), series.timestamps()[1:]))


def test_gap_of_three_steps_flat_fills_three_entries() -> None:
    series = RollingSeries(max_points=10, step_ms=STEP)
    series.add_or_update(1.0, 0)
    series.add_or_update(7.5, 3 * STEP)

    assert series.timestamps() == [0, STEP, 2 * STEP, 3 * STEP]
    assert series.values() == [1.0, 7.5, 7.5, 7.5]


def test_gap_not_multiple_of_step_stops_before_timestamp() -> None:
    series = RollingSeries(max_points=10, step_ms=STEP)
    series.add_or_update(1.0, 0)
    series.add_or_update(2.0, 2 * STEP + STEP // 2)

    assert series.timestamps() == [0, STEP, 2 * STEP]


def test_trim_evicts_oldest_first() -> None:
    series = RollingSeries(max_points=3, step_ms=STEP)
    for i in range(5):
        series.add_or_update(float(i), i * STEP)

    assert series.size() == 3
    assert series.values() == [2.0, 3.0, 4.0]
    assert series.get_timestamp(0) == 2 * STEP


def test_random_increasing_updates_respect_capacity_and_order() -> None:
    rng = random.Random(1234)
    series = RollingSeries(max_points=720, step_ms=STEP)
    timestamp = 0
    for _ in range(3000):
        timestamp += rng.randint(1, 5 * STEP)
        series.add_or_update(rng.uniform(0, 100), timestamp)
        assert series.size() <= 720

    stamps = series.timestamps()
    assert all(a < b for a, b in zip(stamps, stamps[1:]))


def test_seed_fills_capacity_ending_on_step_boundary() -> None:
    series = RollingSeries(max_points=720, step_ms=STEP, rng=random.Random(3))
    anchor = 1_700_000_123_456
    series.seed(100.0, 0.3, 40.0, 100.0, anchor)

    last = anchor - anchor % STEP
    assert series.size() == 720
    assert series.get_timestamp(719) == last
    assert series.get_timestamp(0) == last - 719 * STEP
    stamps = series.timestamps()
    assert all(b - a == STEP for a, b in zip(stamps, stamps[1:]))
    assert all(40.0 <= v <= 100.0 for v in series.values())


def test_seed_replaces_previous_contents() -> None:
    series = RollingSeries(max_points=4, step_ms=STEP, rng=random.Random(3))
    series.add_or_update(1.0, 0)
    series.seed(22.0, 1.2, -40.0, 95.0, 10 * STEP)

    assert series.size() == 4
    assert series.get_timestamp(0) == 7 * STEP


def test_latest_on_empty_series() -> None:
    assert RollingSeries(max_points=2, step_ms=STEP).latest() is None


@pytest.mark.parametrize(("max_points", "step_ms"), [(0, STEP), (10, 0)])
def test_invalid_dimensions_rejected(max_points: int, step_ms: int) -> None:
    with pytest.raises(ValueError):
        RollingSeries(max_points=max_points, step_ms=step_ms)
