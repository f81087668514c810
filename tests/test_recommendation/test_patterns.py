"""Tests for weekday habit detection and exercise staleness."""

from __future__ import annotations

import math

from fatigue_engine.models.enums import MuscleGroup
from fatigue_engine.models.exercise import ExerciseDefinition
from fatigue_engine.recommendation.patterns import (
    compute_exercise_staleness,
    compute_weekday_patterns,
    staleness_of,
)

WEEK_HOURS = 7 * 24


class TestWeekdayPatterns:
    def _mondays(self, record, weeks, primary=(MuscleGroup.QUADRICEPS,), secondary=()):
        return [record(WEEK_HOURS * k, primary, secondary) for k in weeks]

    def test_four_weeks_is_a_habit(self, record, reference_time) -> None:
        records = self._mondays(record, range(1, 5))
        assert compute_weekday_patterns(records, reference_time) == {MuscleGroup.QUADRICEPS}

    def test_three_weeks_is_not(self, record, reference_time) -> None:
        records = self._mondays(record, range(1, 4))
        assert compute_weekday_patterns(records, reference_time) == frozenset()

    def test_same_day_sessions_count_once(self, record, reference_time) -> None:
        records = self._mondays(record, range(1, 4)) + [
            record(WEEK_HOURS + 2, [MuscleGroup.QUADRICEPS])
        ]
        assert compute_weekday_patterns(records, reference_time) == frozenset()

    def test_reference_day_not_counted(self, record, reference_time) -> None:
        records = self._mondays(record, range(1, 4)) + [record(2, [MuscleGroup.QUADRICEPS])]
        assert compute_weekday_patterns(records, reference_time) == frozenset()

    def test_beyond_lookback_ignored(self, record, reference_time) -> None:
        records = self._mondays(record, [1, 2, 3, 9])
        assert compute_weekday_patterns(records, reference_time) == frozenset()

    def test_other_weekdays_ignored(self, record, reference_time) -> None:
        # Sundays
        records = [record(WEEK_HOURS * k + 24, [MuscleGroup.QUADRICEPS]) for k in range(1, 6)]
        assert compute_weekday_patterns(records, reference_time) == frozenset()

    def test_secondary_muscles_not_habits(self, record, reference_time) -> None:
        records = self._mondays(
            record, range(1, 5), primary=(MuscleGroup.CHEST,), secondary=(MuscleGroup.TRICEPS,)
        )
        assert compute_weekday_patterns(records, reference_time) == {MuscleGroup.CHEST}

    def test_empty_history(self, reference_time) -> None:
        assert compute_weekday_patterns([], reference_time) == frozenset()

    def test_custom_threshold(self, record, reference_time) -> None:
        records = self._mondays(record, range(1, 3))
        assert compute_weekday_patterns(records, reference_time, min_weeks=2) == {
            MuscleGroup.QUADRICEPS
        }


class TestExerciseStaleness:
    def test_hours_since_last_performed(self, record, reference_time) -> None:
        records = [
            record(100, [MuscleGroup.CHEST], exercise_id="bench"),
            record(30, [MuscleGroup.CHEST], exercise_id="bench"),
            record(50, [MuscleGroup.BACK], exercise_name="Barbell Row"),
        ]
        staleness = compute_exercise_staleness(records, reference_time)
        assert staleness["bench"] == 30.0
        assert staleness["Barbell Row"] == 50.0

    def test_records_without_identity_skipped(self, record, reference_time) -> None:
        assert compute_exercise_staleness([record(5, [MuscleGroup.CHEST])], reference_time) == {}

    def test_future_records_skipped(self, record, reference_time) -> None:
        records = [record(-10, [MuscleGroup.CHEST], exercise_id="bench")]
        assert compute_exercise_staleness(records, reference_time) == {}

    def test_staleness_of_matches_id_or_name(self) -> None:
        bench = ExerciseDefinition(id="bench", name="Bench Press")
        assert staleness_of(bench, {"bench": 12.0}) == 12.0
        assert staleness_of(bench, {"Bench Press": 40.0}) == 40.0
        assert staleness_of(bench, {"bench": 12.0, "Bench Press": 40.0}) == 12.0

    def test_never_performed_is_infinitely_stale(self) -> None:
        assert math.isinf(staleness_of(ExerciseDefinition(id="new", name="New"), {}))
