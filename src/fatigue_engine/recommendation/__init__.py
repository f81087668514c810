"""Recommendation building blocks: habit patterns, candidate ranking and exercise picks."""

from fatigue_engine.recommendation.candidates import RankedMuscle, is_candidate, rank_candidates
from fatigue_engine.recommendation.exercise_picker import pick_exercises, suggested_set_count
from fatigue_engine.recommendation.patterns import (
    compute_exercise_staleness,
    compute_weekday_patterns,
)

__all__ = [
    "RankedMuscle",
    "compute_exercise_staleness",
    "compute_weekday_patterns",
    "is_candidate",
    "pick_exercises",
    "rank_candidates",
    "suggested_set_count",
]
