"""Candidate muscle selection and ranking."""

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence
from dataclasses import dataclass

from fatigue_engine.models.enums import (
    WEEKDAY_PATTERN_BOOST,
    FatigueLevel,
    MuscleGroup,
)
from fatigue_engine.models.fatigue import MuscleFatigueState

_MUSCLE_ORDER = {muscle: index for index, muscle in enumerate(MuscleGroup)}


@dataclass(frozen=True)
class RankedMuscle:
    """A trainable muscle with the signals that ordered it."""

    state: MuscleFatigueState
    priority: float
    diversity: float  # hours since the muscle's freshest exercise was done
    matches_weekday_pattern: bool = False

    @property
    def muscle(self) -> MuscleGroup:
        return self.state.muscle


def is_candidate(state: MuscleFatigueState) -> bool:
    """Recovered by time or by fatigue level, and below MODERATE_FATIGUE."""
    return (
        state.is_recovered or state.level.is_training_recommended
    ) and state.level < FatigueLevel.MODERATE_FATIGUE


def rank_candidates(
    states: Sequence[MuscleFatigueState],
    weekday_patterns: Collection[MuscleGroup],
    diversity: Mapping[MuscleGroup, float],
) -> list[RankedMuscle]:
    """Filter trainable muscles and order them best-first.

    Overworked muscles (weekly set cap reached) go last. Within each group:
    recovery percent plus the weekday-pattern boost (descending), then
    exercise diversity (descending), then weekly volume (ascending).
    """
    ranked = [
        RankedMuscle(
            state=state,
            priority=state.recovery_percent
            + (WEEKDAY_PATTERN_BOOST if state.muscle in weekday_patterns else 0.0),
            diversity=diversity.get(state.muscle, 0.0),
            matches_weekday_pattern=state.muscle in weekday_patterns,
        )
        for state in states
        if is_candidate(state)
    ]
    return sorted(
        ranked,
        key=lambda r: (
            r.state.is_overworked,
            -r.priority,
            -r.diversity,
            r.state.weekly_volume,
            _MUSCLE_ORDER[r.muscle],
        ),
    )
