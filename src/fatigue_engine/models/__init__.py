"""Data models for the fatigue engine."""

from fatigue_engine.models.enums import (
    ExerciseCategory,
    FatigueLevel,
    MuscleGroup,
    SizeClass,
)
from fatigue_engine.models.exercise import ExerciseDefinition
from fatigue_engine.models.fatigue import (
    FatigueBreakdown,
    MuscleFatigueScore,
    MuscleFatigueState,
    WorkoutContribution,
)
from fatigue_engine.models.snapshot import ExerciseRecordSnapshot, RecoverySignals
from fatigue_engine.models.suggestion import (
    ACTIVE_RECOVERY_DEFAULTS,
    ActiveRecoverySuggestion,
    NextReadyMuscle,
    SuggestedExercise,
    WorkoutSuggestion,
)

__all__ = [
    "ACTIVE_RECOVERY_DEFAULTS",
    "ActiveRecoverySuggestion",
    "ExerciseCategory",
    "ExerciseDefinition",
    "ExerciseRecordSnapshot",
    "FatigueBreakdown",
    "FatigueLevel",
    "MuscleFatigueScore",
    "MuscleFatigueState",
    "MuscleGroup",
    "NextReadyMuscle",
    "RecoverySignals",
    "SizeClass",
    "SuggestedExercise",
    "WorkoutContribution",
    "WorkoutSuggestion",
]
