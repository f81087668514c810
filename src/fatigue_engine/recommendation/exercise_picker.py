"""Exercise picker — turns ranked focus muscles into concrete exercises.

Picks round-robin across focus muscles (one per muscle per round) so a
single muscle cannot absorb the whole budget, preferring the exercises
performed least recently. Leftover budget goes to compound movements that
only load recovered muscles.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence

from fatigue_engine.catalog.providers import ExerciseCatalog
from fatigue_engine.models.enums import (
    COMPOUND_DEFAULT_SETS,
    MAX_ALTERNATIVES,
    MAX_SUGGESTED_EXERCISES,
    MAX_SUGGESTED_SETS,
    MIN_SUGGESTED_SETS,
    OVERWORKED_WEEKLY_SETS,
    ExerciseCategory,
    MuscleGroup,
)
from fatigue_engine.models.exercise import ExerciseDefinition
from fatigue_engine.models.fatigue import MuscleFatigueState
from fatigue_engine.models.suggestion import SuggestedExercise
from fatigue_engine.recommendation.candidates import RankedMuscle
from fatigue_engine.recommendation.patterns import staleness_of
from fatigue_engine.recommendation.reasoning import exercise_reason

_TRAINABLE_CATEGORIES = frozenset({ExerciseCategory.STRENGTH, ExerciseCategory.BODYWEIGHT})


def suggested_set_count(state: MuscleFatigueState | None) -> int:
    """Half the remaining weekly set budget, kept within [2, 5]."""
    if state is None:
        return COMPOUND_DEFAULT_SETS
    remaining = max(OVERWORKED_WEEKLY_SETS - state.weekly_volume, 0)
    return min(max(remaining // 2, MIN_SUGGESTED_SETS), MAX_SUGGESTED_SETS)


def _order_by_staleness(
    exercises: Sequence[ExerciseDefinition], staleness: Mapping[str, float]
) -> list[ExerciseDefinition]:
    return sorted(exercises, key=lambda e: (-staleness_of(e, staleness), e.name))


def exercise_options(
    muscle: MuscleGroup,
    catalog: ExerciseCatalog,
    staleness: Mapping[str, float],
    recent_keys: Collection[str],
) -> list[ExerciseDefinition]:
    """Trainable catalog exercises for *muscle*, least recently used first.

    Exercises with *muscle* as a primary mover come before secondary-only
    matches. Recently performed exercises are excluded unless that leaves
    nothing.
    """
    options = [
        e for e in catalog.lookup_exercises(muscle, frozenset(recent_keys))
        if e.category in _TRAINABLE_CATEGORIES
    ]
    if not options and recent_keys:
        options = [
            e for e in catalog.lookup_exercises(muscle, frozenset())
            if e.category in _TRAINABLE_CATEGORIES
        ]
    return sorted(
        options,
        key=lambda e: (muscle not in e.primary_muscles, -staleness_of(e, staleness), e.name),
    )


def pick_exercises(
    focus: Sequence[RankedMuscle],
    catalog: ExerciseCatalog,
    staleness: Mapping[str, float],
    recent_keys: Collection[str],
    trainable_muscles: Collection[MuscleGroup],
    budget: int = MAX_SUGGESTED_EXERCISES,
) -> list[SuggestedExercise]:
    """Select up to *budget* exercises for the focus muscles.

    Args:
        focus: Ranked focus muscles, best first.
        catalog: Exercise catalog to draw from.
        staleness: Hours since each exercise key was last performed.
        recent_keys: Exercise keys performed too recently to repeat.
        trainable_muscles: All candidate muscles; compound fill-ins must
            only target these as primary muscles.
        budget: Global cap on the number of picks.

    Returns:
        The picked exercises in selection order.
    """
    options = {
        ranked.muscle: exercise_options(ranked.muscle, catalog, staleness, recent_keys)
        for ranked in focus
    }
    picked: list[SuggestedExercise] = []
    used_ids: set[str] = set()

    progress = True
    while len(picked) < budget and progress:
        progress = False
        for ranked in focus:
            if len(picked) >= budget:
                break
            available = [e for e in options[ranked.muscle] if e.id not in used_ids]
            if not available:
                continue
            choice, alternatives = available[0], available[1 : 1 + MAX_ALTERNATIVES]
            used_ids.add(choice.id)
            picked.append(
                SuggestedExercise(
                    definition=choice,
                    suggested_sets=suggested_set_count(ranked.state),
                    reason=exercise_reason(ranked.state),
                    alternatives=tuple(alternatives),
                )
            )
            progress = True

    if len(picked) < budget:
        picked.extend(
            _compound_fill(catalog, staleness, trainable_muscles, used_ids, budget - len(picked))
        )
    return picked


def _compound_fill(
    catalog: ExerciseCatalog,
    staleness: Mapping[str, float],
    trainable_muscles: Collection[MuscleGroup],
    used_ids: set[str],
    count: int,
) -> list[SuggestedExercise]:
    allowed = set(trainable_muscles)
    compounds = [
        e for e in catalog.all_exercises()
        if e.category == ExerciseCategory.STRENGTH
        and e.is_compound
        and e.primary_muscles
        and set(e.primary_muscles) <= allowed
        and e.id not in used_ids
    ]
    fill: list[SuggestedExercise] = []
    for exercise in _order_by_staleness(compounds, staleness)[:count]:
        used_ids.add(exercise.id)
        fill.append(
            SuggestedExercise(
                definition=exercise,
                suggested_sets=suggested_set_count(None),
                reason="Compound movement for overall development",
            )
        )
    return fill
