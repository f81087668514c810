"""FatigueEngine — the main orchestrator for fatigue scoring and recommendations."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

from fatigue_engine import config
from fatigue_engine.catalog.providers import (
    BiometricProvider,
    ExerciseCatalog,
    HistoryProvider,
)
from fatigue_engine.math.decay import compute_muscle_fatigue
from fatigue_engine.math.muscle_state import compute_muscle_states
from fatigue_engine.math.recovery_modifiers import modifiers_from_signals
from fatigue_engine.models.enums import (
    HISTORY_FETCH_DAYS,
    MAX_FOCUS_MUSCLES,
    NEUTRAL_MODIFIER,
    RECENT_EXERCISE_HOURS,
    MuscleGroup,
)
from fatigue_engine.models.fatigue import MuscleFatigueScore, MuscleFatigueState
from fatigue_engine.models.snapshot import ExerciseRecordSnapshot
from fatigue_engine.models.suggestion import (
    ACTIVE_RECOVERY_DEFAULTS,
    NextReadyMuscle,
    WorkoutSuggestion,
)
from fatigue_engine.recommendation.candidates import rank_candidates
from fatigue_engine.recommendation.exercise_picker import pick_exercises
from fatigue_engine.recommendation.patterns import (
    compute_exercise_staleness,
    compute_weekday_patterns,
    staleness_of,
)
from fatigue_engine.recommendation.reasoning import (
    build_no_exercise_reasoning,
    build_rest_reasoning,
    build_training_reasoning,
)

logger = logging.getLogger(__name__)


def resolve_reference_time(
    reference_time: datetime | None, records: Sequence[ExerciseRecordSnapshot]
) -> datetime:
    """Use *reference_time* if given, else "now" matching the records' tz style."""
    if reference_time is not None:
        return reference_time
    if records and records[0].date.tzinfo is None:
        return datetime.now()
    return datetime.now(timezone.utc)


class FatigueEngine:
    """Computes muscle fatigue and recommends the next workout.

    Every call is a pure function of its arguments; the engine only keeps
    immutable configuration, so one instance can serve concurrent callers.

    Usage:
        engine = FatigueEngine()
        states = engine.compute_states(records)
        suggestion = engine.recommend(records, ExerciseLibrary.default())
    """

    def __init__(self, body_weight_kg: float | None = None) -> None:
        self.body_weight_kg = body_weight_kg if body_weight_kg is not None else config.BODY_WEIGHT_KG

    def compute_fatigue(
        self,
        muscles: Sequence[MuscleGroup | str],
        records: Sequence[ExerciseRecordSnapshot],
        sleep_modifier: float = NEUTRAL_MODIFIER,
        readiness_modifier: float = NEUTRAL_MODIFIER,
        reference_time: datetime | None = None,
    ) -> list[MuscleFatigueScore]:
        """Compound fatigue scores for the requested muscles."""
        return compute_muscle_fatigue(
            muscles,
            records,
            sleep_modifier,
            readiness_modifier,
            resolve_reference_time(reference_time, records),
            self.body_weight_kg,
        )

    def compute_states(
        self,
        records: Sequence[ExerciseRecordSnapshot],
        sleep_modifier: float = NEUTRAL_MODIFIER,
        readiness_modifier: float = NEUTRAL_MODIFIER,
        reference_time: datetime | None = None,
    ) -> list[MuscleFatigueState]:
        """Recovery states for every muscle group."""
        return compute_muscle_states(
            records,
            sleep_modifier,
            readiness_modifier,
            resolve_reference_time(reference_time, records),
            self.body_weight_kg,
        )

    def compute_weekday_patterns(
        self,
        records: Sequence[ExerciseRecordSnapshot],
        reference_time: datetime | None = None,
    ) -> frozenset[MuscleGroup]:
        """Muscles habitually trained on the reference weekday."""
        return compute_weekday_patterns(records, resolve_reference_time(reference_time, records))

    def compute_exercise_staleness(
        self,
        records: Sequence[ExerciseRecordSnapshot],
        reference_time: datetime | None = None,
    ) -> dict[str, float]:
        """Hours since each exercise was last performed."""
        return compute_exercise_staleness(records, resolve_reference_time(reference_time, records))

    def recommend(
        self,
        records: Sequence[ExerciseRecordSnapshot],
        catalog: ExerciseCatalog,
        sleep_modifier: float = NEUTRAL_MODIFIER,
        readiness_modifier: float = NEUTRAL_MODIFIER,
        reference_time: datetime | None = None,
    ) -> WorkoutSuggestion | None:
        """Recommend today's workout, or a rest day.

        Args:
            records: Session history (ideally the last 8 weeks).
            catalog: Exercise catalog to pick exercises from.
            sleep_modifier: Sleep recovery modifier.
            readiness_modifier: HRV/RHR readiness modifier.
            reference_time: "Now"; defaults to the current time.

        Returns:
            A WorkoutSuggestion, or None when the catalog has no exercises.
        """
        if not catalog.all_exercises():
            logger.debug("Exercise catalog is empty, no suggestion possible")
            return None

        now = resolve_reference_time(reference_time, records)
        states = self.compute_states(records, sleep_modifier, readiness_modifier, now)
        patterns = compute_weekday_patterns(records, now)
        staleness = compute_exercise_staleness(records, now)
        diversity = {
            state.muscle: max(
                (staleness_of(e, staleness) for e in catalog.lookup_exercises(state.muscle, frozenset())),
                default=0.0,
            )
            for state in states
        }

        ranked = rank_candidates(states, patterns, diversity)
        logger.debug(
            "%d candidate muscles, weekday pattern: %s",
            len(ranked),
            sorted(m.value for m in patterns),
        )

        if not ranked:
            return self._rest_day(states)

        focus = ranked[:MAX_FOCUS_MUSCLES]
        recent_cutoff = now - timedelta(hours=RECENT_EXERCISE_HOURS)
        recent_keys = frozenset(
            r.exercise_key for r in records
            if r.exercise_key and recent_cutoff <= r.date <= now
        )
        exercises = pick_exercises(
            focus,
            catalog,
            staleness,
            recent_keys,
            trainable_muscles=[r.muscle for r in ranked],
        )

        if not exercises:
            logger.debug("No catalog exercises for focus muscles, falling back to rest day")
            return self._rest_day(states, reasoning=build_no_exercise_reasoning(focus))

        return WorkoutSuggestion(
            exercises=tuple(exercises),
            focus_muscles=tuple(r.muscle for r in focus),
            reasoning=build_training_reasoning(focus, now),
        )

    def recommend_from_providers(
        self,
        history_provider: HistoryProvider,
        biometric_provider: BiometricProvider,
        catalog: ExerciseCatalog,
        reference_time: datetime | None = None,
    ) -> WorkoutSuggestion | None:
        """Fetch history and recovery signals, then recommend."""
        records = list(history_provider.fetch_history(HISTORY_FETCH_DAYS))
        signals = biometric_provider.fetch_recovery_signals()
        sleep, readiness = modifiers_from_signals(signals)
        logger.info(
            "Fetched %d records; sleep modifier %.2f, readiness modifier %.2f",
            len(records),
            sleep,
            readiness,
        )
        return self.recommend(records, catalog, sleep, readiness, reference_time)

    def _rest_day(
        self, states: Sequence[MuscleFatigueState], reasoning: str | None = None
    ) -> WorkoutSuggestion:
        next_ready = soonest_ready_muscle(states)
        logger.debug("Rest day; next ready muscle: %s", next_ready)
        return WorkoutSuggestion(
            exercises=(),
            focus_muscles=(),
            reasoning=reasoning or build_rest_reasoning(next_ready),
            is_rest_day=True,
            active_recovery_suggestions=ACTIVE_RECOVERY_DEFAULTS,
            next_ready_muscle=next_ready,
        )


def soonest_ready_muscle(states: Sequence[MuscleFatigueState]) -> NextReadyMuscle | None:
    """The recovering muscle with the earliest ready date.

    Ties go to the muscle with the shortest recovery window.
    """
    pending = [s for s in states if s.next_ready_date is not None]
    if not pending:
        return None
    best = min(pending, key=lambda s: (s.next_ready_date, s.muscle.recovery_hours))
    return NextReadyMuscle(muscle=best.muscle, ready_date=best.next_ready_date)  # type: ignore[arg-type]
