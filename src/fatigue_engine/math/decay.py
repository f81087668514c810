"""Compound muscle fatigue via exponentially decayed session loads.

Each session inside the lookback window contributes

    load x engagement x e^(-age_hours / tau_eff)

to every muscle it engages, where tau_eff is the muscle's recovery time
constant divided by the combined sleep and readiness modifiers. The sum is
normalized by a size-class saturation threshold.

Reference:
    Banister et al. (1975): impulse-response fitness-fatigue model with
    exponentially decaying fatigue.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta

from fatigue_engine.math.recovery_modifiers import sanitize_modifier
from fatigue_engine.math.session_load import session_load
from fatigue_engine.models.enums import (
    DEFAULT_BODY_WEIGHT_KG,
    LOOKBACK_DAYS,
    MIN_COMBINED_MODIFIER,
    MIN_EFFECTIVE_TAU_HOURS,
    READINESS_MODIFIER_RANGE,
    SLEEP_MODIFIER_RANGE,
    FatigueLevel,
    MuscleGroup,
)
from fatigue_engine.models.fatigue import (
    FatigueBreakdown,
    MuscleFatigueScore,
    WorkoutContribution,
)
from fatigue_engine.models.snapshot import ExerciseRecordSnapshot

# exp() of anything below this underflows to zero anyway
_MIN_EXPONENT = -500.0


def hours_between(earlier: datetime, later: datetime) -> float:
    """Exact elapsed hours from *earlier* to *later* (negative if reversed)."""
    return (later - earlier).total_seconds() / 3600.0


def effective_tau(
    muscle: MuscleGroup, sleep_modifier: float, readiness_modifier: float
) -> float:
    """Decay time constant in hours after recovery modifiers.

    Better recovery (modifiers > 1) shrinks tau so fatigue clears sooner.
    """
    combined = max(sleep_modifier * readiness_modifier, MIN_COMBINED_MODIFIER)
    return max(muscle.recovery_hours / combined, MIN_EFFECTIVE_TAU_HOURS)


def records_in_window(
    records: Iterable[ExerciseRecordSnapshot],
    reference_time: datetime,
    days: int,
) -> list[ExerciseRecordSnapshot]:
    """Records dated within [reference_time - days, reference_time]."""
    cutoff = reference_time - timedelta(days=days)
    return [r for r in records if cutoff <= r.date <= reference_time]


def compute_muscle_fatigue(
    muscles: Sequence[MuscleGroup | str],
    records: Sequence[ExerciseRecordSnapshot],
    sleep_modifier: float,
    readiness_modifier: float,
    reference_time: datetime,
    body_weight_kg: float = DEFAULT_BODY_WEIGHT_KG,
) -> list[MuscleFatigueScore]:
    """Compute a compound fatigue score for each requested muscle.

    Args:
        muscles: Muscle groups to score, returned in the same order.
        records: Session history (any order; out-of-window rows are ignored).
        sleep_modifier: Sleep recovery modifier, clamped to [0.50, 1.25].
        readiness_modifier: HRV/RHR modifier, clamped to [0.60, 1.20].
        reference_time: The "now" the scores are computed for.
        body_weight_kg: Body weight used for resistance volume load.

    Returns:
        One MuscleFatigueScore per requested muscle.

    Raises:
        UnknownMuscleGroupError: if a requested muscle is not a MuscleGroup.
    """
    resolved = [MuscleGroup.parse(m) for m in muscles]
    relevant = records_in_window(records, reference_time, LOOKBACK_DAYS)
    sleep = sanitize_modifier(sleep_modifier, SLEEP_MODIFIER_RANGE)
    readiness = sanitize_modifier(readiness_modifier, READINESS_MODIFIER_RANGE)

    # Load is muscle-independent, so compute it once per record
    loads = [(record, session_load(record, body_weight_kg)) for record in relevant]

    return [
        _score_muscle(muscle, loads, sleep, readiness, reference_time)
        for muscle in resolved
    ]


def _score_muscle(
    muscle: MuscleGroup,
    loads: list[tuple[ExerciseRecordSnapshot, float]],
    sleep_modifier: float,
    readiness_modifier: float,
    reference_time: datetime,
) -> MuscleFatigueScore:
    tau = effective_tau(muscle, sleep_modifier, readiness_modifier)
    contributions: list[WorkoutContribution] = []
    total = 0.0

    for record, load in loads:
        engagement = record.engagement(muscle)
        if engagement <= 0.0:
            continue
        raw_load = load * engagement
        if raw_load <= 0.0 or not math.isfinite(raw_load):
            continue

        age_hours = max(0.0, hours_between(record.date, reference_time))
        exponent = -age_hours / tau
        decay = math.exp(exponent) if exponent > _MIN_EXPONENT else 0.0
        decayed = raw_load * decay
        if not math.isfinite(decayed):
            continue

        total += decayed
        contributions.append(
            WorkoutContribution(
                date=record.date,
                exercise_name=record.exercise_name,
                raw_load=raw_load,
                decayed_load=decayed,
            )
        )

    threshold = muscle.saturation_threshold
    if total > 0.0 and threshold > 0.0:
        normalized = min(total / threshold, 1.0)
    else:
        normalized = 0.0

    level = FatigueLevel.from_score(normalized) if contributions else FatigueLevel.NO_DATA

    return MuscleFatigueScore(
        muscle=muscle,
        raw_score=total,
        normalized_score=normalized,
        level=level,
        breakdown=FatigueBreakdown(
            contributions=tuple(sorted(contributions, key=lambda c: c.date, reverse=True)),
            base_fatigue=total,
            sleep_modifier=sleep_modifier,
            readiness_modifier=readiness_modifier,
            effective_tau=tau,
        ),
    )
