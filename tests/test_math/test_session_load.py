"""Tests for single-session load calculation."""

from __future__ import annotations

import math

import pytest

from fatigue_engine.math.session_load import session_load


class TestResistanceLoad:
    def test_volume_load_normalized_by_body_weight(self, record) -> None:
        # 100kg x 25 reps / 70kg / 100 ≈ 0.357
        load = session_load(record(total_weight=100.0, total_reps=25))
        assert load == pytest.approx(100.0 * 25 / 70.0 / 100.0)
        assert 0.3 < load < 0.4

    def test_heavier_athlete_lower_load(self, record) -> None:
        snap = record(total_weight=100.0, total_reps=25)
        assert session_load(snap, body_weight_kg=90.0) < session_load(snap, body_weight_kg=60.0)

    def test_invalid_body_weight_uses_default(self, record) -> None:
        snap = record(total_weight=100.0, total_reps=25)
        assert session_load(snap, body_weight_kg=0.0) == session_load(snap)
        assert session_load(snap, body_weight_kg=math.nan) == session_load(snap)


class TestCardioLoad:
    def test_distance_times_sqrt_duration(self, record) -> None:
        # 5km in 30min: 5 * sqrt(0.5) / 10 ≈ 0.354
        load = session_load(record(distance_km=5.0, duration_minutes=30.0))
        assert load == pytest.approx(5.0 * math.sqrt(0.5) / 10.0)

    def test_long_distance_much_higher(self, record) -> None:
        short = session_load(record(distance_km=3.0, duration_minutes=20.0))
        long = session_load(record(distance_km=20.0, duration_minutes=120.0))
        assert long > short * 3

    def test_duration_only(self, record) -> None:
        assert session_load(record(duration_minutes=60.0)) == 1.0


class TestFallbackLoad:
    def test_set_count(self, record) -> None:
        assert session_load(record(sets=10)) == pytest.approx(1.0)

    def test_zero_sets_is_zero(self, record) -> None:
        assert session_load(record(sets=0)) == 0.0

    def test_negative_sets_is_zero(self, record) -> None:
        assert session_load(record(sets=-4)) == 0.0

    def test_zero_weight_falls_through(self, record) -> None:
        assert session_load(record(sets=5, total_weight=0.0, total_reps=20)) == pytest.approx(0.5)

    def test_reps_without_weight_falls_through(self, record) -> None:
        assert session_load(record(sets=5, total_reps=20)) == pytest.approx(0.5)

    def test_distance_without_duration_falls_through(self, record) -> None:
        assert session_load(record(sets=2, distance_km=5.0)) == pytest.approx(0.2)

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, -10.0])
    def test_malformed_numbers_never_negative_or_nan(self, record, bad: float) -> None:
        load = session_load(
            record(sets=3, total_weight=bad, total_reps=10, duration_minutes=bad, distance_km=bad)
        )
        assert math.isfinite(load)
        assert load >= 0.0
        assert load == pytest.approx(0.3)
