"""Tests for the exponential decay fatigue aggregator."""

from __future__ import annotations

import math
from datetime import timedelta

import pytest

from fatigue_engine.exceptions import UnknownMuscleGroupError
from fatigue_engine.math.decay import (
    compute_muscle_fatigue,
    effective_tau,
    hours_between,
)
from fatigue_engine.models.enums import FatigueLevel, MuscleGroup

CHEST = MuscleGroup.CHEST


class TestEffectiveTau:
    def test_neutral_modifiers_use_recovery_hours(self) -> None:
        assert effective_tau(MuscleGroup.BICEPS, 1.0, 1.0) == 36.0
        assert effective_tau(CHEST, 1.0, 1.0) == 48.0
        assert effective_tau(MuscleGroup.QUADRICEPS, 1.0, 1.0) == 72.0

    def test_good_recovery_shrinks_tau(self) -> None:
        assert effective_tau(CHEST, 1.25, 1.2) == pytest.approx(32.0)

    def test_combined_modifier_floor(self) -> None:
        assert effective_tau(CHEST, 0.01, 0.01) == pytest.approx(480.0)

    def test_tau_floor(self) -> None:
        assert effective_tau(CHEST, 100.0, 100.0) == 1.0


class TestHoursBetween:
    def test_exact_hours(self, reference_time) -> None:
        earlier = reference_time - timedelta(hours=40, minutes=30)
        assert hours_between(earlier, reference_time) == pytest.approx(40.5)


class TestComputeMuscleFatigue:
    def _score(self, records, reference_time, muscle=CHEST, sleep=1.0, readiness=1.0):
        return compute_muscle_fatigue([muscle], records, sleep, readiness, reference_time)[0]

    def test_empty_history(self, reference_time) -> None:
        scores = compute_muscle_fatigue(list(MuscleGroup), [], 1.0, 1.0, reference_time)
        assert len(scores) == len(MuscleGroup)
        for score in scores:
            assert score.raw_score == 0.0
            assert score.normalized_score == 0.0
            assert score.level == FatigueLevel.NO_DATA
            assert score.breakdown.contributions == ()

    def test_preserves_requested_order(self, reference_time) -> None:
        requested = [MuscleGroup.CORE, "chest", MuscleGroup.BACK]
        scores = compute_muscle_fatigue(requested, [], 1.0, 1.0, reference_time)
        assert [s.muscle for s in scores] == [MuscleGroup.CORE, CHEST, MuscleGroup.BACK]

    def test_unknown_muscle_raises(self, reference_time) -> None:
        with pytest.raises(UnknownMuscleGroupError):
            compute_muscle_fatigue(["elbows"], [], 1.0, 1.0, reference_time)

    def test_fresh_session_undecayed(self, record, reference_time) -> None:
        score = self._score([record(0, [CHEST], sets=10)], reference_time)
        assert score.raw_score == pytest.approx(1.0)
        assert score.normalized_score == pytest.approx(1.0 / 12.0)
        assert score.level == FatigueLevel.WELL_RESTED

    def test_decays_by_one_tau(self, record, reference_time) -> None:
        score = self._score([record(48, [CHEST], sets=10)], reference_time)
        assert score.raw_score == pytest.approx(math.exp(-1.0))

    def test_recency_older_session_contributes_less(self, record, reference_time) -> None:
        recent = self._score([record(1, [CHEST], sets=10)], reference_time)
        older = self._score([record(72, [CHEST], sets=10)], reference_time)
        assert recent.raw_score > older.raw_score

    def test_cumulative(self, record, reference_time) -> None:
        single = self._score([record(6, [CHEST], sets=10)], reference_time)
        three = self._score(
            [record(h, [CHEST], sets=10) for h in (6, 30, 54)], reference_time
        )
        assert three.raw_score > single.raw_score
        assert len(three.breakdown.contributions) == 3

    def test_secondary_engagement_halves_load(self, record, reference_time) -> None:
        primary = self._score([record(5, [CHEST], sets=10)], reference_time)
        secondary = self._score([record(5, [], [CHEST], sets=10)], reference_time)
        assert secondary.raw_score == pytest.approx(primary.raw_score * 0.5)

    def test_excludes_sessions_older_than_lookback(self, record, reference_time) -> None:
        score = self._score([record(15 * 24, [CHEST], sets=10)], reference_time)
        assert score.raw_score == 0.0
        assert score.level == FatigueLevel.NO_DATA

    def test_includes_session_at_lookback_edge(self, record, reference_time) -> None:
        score = self._score([record(14 * 24, [CHEST], sets=10)], reference_time)
        assert score.breakdown.contributions

    def test_ignores_future_sessions(self, record, reference_time) -> None:
        score = self._score([record(-5, [CHEST], sets=10)], reference_time)
        assert score.level == FatigueLevel.NO_DATA

    def test_unrelated_muscle_untouched(self, record, reference_time) -> None:
        score = self._score([record(1, [MuscleGroup.BACK], sets=10)], reference_time)
        assert score.level == FatigueLevel.NO_DATA

    def test_zero_load_session_is_not_a_contribution(self, record, reference_time) -> None:
        score = self._score([record(1, [CHEST], sets=0)], reference_time)
        assert score.level == FatigueLevel.NO_DATA

    def test_saturates_at_one(self, record, reference_time) -> None:
        records = [
            record(h, [CHEST], total_weight=2000.0, total_reps=100) for h in (1, 2, 3)
        ]
        score = self._score(records, reference_time)
        assert score.normalized_score == 1.0
        assert score.level == FatigueLevel.OVERTRAINED

    def test_poor_recovery_keeps_fatigue_higher(self, record, reference_time) -> None:
        records = [record(30, [CHEST], sets=10)]
        neutral = self._score(records, reference_time)
        poor = self._score(records, reference_time, sleep=0.5, readiness=0.6)
        good = self._score(records, reference_time, sleep=1.25, readiness=1.2)
        assert poor.raw_score > neutral.raw_score > good.raw_score

    def test_out_of_range_modifiers_clamped(self, record, reference_time) -> None:
        records = [record(30, [CHEST], sets=10)]
        extreme = self._score(records, reference_time, sleep=9.0, readiness=9.0)
        bounded = self._score(records, reference_time, sleep=1.25, readiness=1.2)
        assert extreme.raw_score == pytest.approx(bounded.raw_score)
        assert extreme.breakdown.sleep_modifier == 1.25
        assert extreme.breakdown.readiness_modifier == 1.2

    def test_breakdown_newest_first(self, record, reference_time) -> None:
        records = [
            record(40, [CHEST], sets=4, exercise_name="Old"),
            record(3, [CHEST], sets=4, exercise_name="New"),
            record(20, [CHEST], sets=4, exercise_name="Mid"),
        ]
        score = self._score(records, reference_time)
        names = [c.exercise_name for c in score.breakdown.contributions]
        assert names == ["New", "Mid", "Old"]
        assert score.breakdown.effective_tau == 48.0
        assert score.breakdown.base_fatigue == pytest.approx(score.raw_score)
        assert sum(c.decayed_load for c in score.breakdown.contributions) == pytest.approx(
            score.raw_score
        )

    def test_scores_stay_finite(self, record, reference_time) -> None:
        records = [
            record(1, [CHEST], sets=3, total_weight=math.inf, total_reps=10),
            record(2, [CHEST], sets=3, distance_km=math.nan, duration_minutes=30.0),
        ]
        score = self._score(records, reference_time)
        assert math.isfinite(score.raw_score)
        assert 0.0 <= score.normalized_score <= 1.0
