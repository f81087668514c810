"""Workout suggestion: the final output of the recommendation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from fatigue_engine.models.enums import MuscleGroup
from fatigue_engine.models.exercise import ExerciseDefinition


@dataclass(frozen=True)
class SuggestedExercise:
    """One exercise pick with its set prescription and short rationale."""

    definition: ExerciseDefinition
    suggested_sets: int
    reason: str = ""
    alternatives: tuple[ExerciseDefinition, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ActiveRecoverySuggestion:
    """Light activity offered on rest days."""

    id: str
    title: str
    duration: str


ACTIVE_RECOVERY_DEFAULTS: tuple[ActiveRecoverySuggestion, ...] = (
    ActiveRecoverySuggestion(id="walking", title="Light Walking", duration="20-30 min"),
    ActiveRecoverySuggestion(id="stretching", title="Stretching", duration="10 min"),
    ActiveRecoverySuggestion(id="yoga", title="Yoga Flow", duration="15 min"),
)


@dataclass(frozen=True)
class NextReadyMuscle:
    """The muscle expected to recover soonest, and when."""

    muscle: MuscleGroup
    ready_date: datetime


@dataclass(frozen=True)
class WorkoutSuggestion:
    """Suggested workout, or a rest day with active recovery options.

    This is the return value of FatigueEngine.recommend().
    """

    exercises: tuple[SuggestedExercise, ...]
    focus_muscles: tuple[MuscleGroup, ...]
    reasoning: str
    is_rest_day: bool = False
    active_recovery_suggestions: tuple[ActiveRecoverySuggestion, ...] = field(
        default_factory=tuple
    )
    next_ready_muscle: NextReadyMuscle | None = None
