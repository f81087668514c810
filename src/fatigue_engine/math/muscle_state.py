"""Per-muscle recovery state: time since training, weekly volume, fatigue.

Recovery percent is the share of the muscle's recovery window that has
elapsed, measured in exact hours.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from fatigue_engine.math.decay import (
    compute_muscle_fatigue,
    hours_between,
    records_in_window,
)
from fatigue_engine.models.enums import (
    DEFAULT_BODY_WEIGHT_KG,
    WEEKLY_VOLUME_DAYS,
    FatigueLevel,
    MuscleGroup,
)
from fatigue_engine.models.fatigue import MuscleFatigueState
from fatigue_engine.models.snapshot import ExerciseRecordSnapshot


def recovery_percent(muscle: MuscleGroup, hours_since: float | None) -> float:
    """Elapsed share of the recovery window, clamped to [0, 1].

    A muscle that was never trained is fully recovered.
    """
    if hours_since is None:
        return 1.0
    return max(0.0, min(hours_since / muscle.recovery_hours, 1.0))


def weekly_volume(
    records: Sequence[ExerciseRecordSnapshot],
    reference_time: datetime,
    days: int = WEEKLY_VOLUME_DAYS,
) -> dict[MuscleGroup, int]:
    """Weighted set count per muscle over the trailing window.

    Primary muscles get every completed set; secondary-only muscles get half
    (minimum one set per session).
    """
    volume: dict[MuscleGroup, int] = {}
    for record in records_in_window(records, reference_time, days):
        sets = max(record.completed_set_count, 0)
        if sets == 0:
            continue
        for muscle in record.primary_muscles:
            volume[muscle] = volume.get(muscle, 0) + sets
        for muscle in record.secondary_muscles - record.primary_muscles:
            volume[muscle] = volume.get(muscle, 0) + max(sets // 2, 1)
    return volume


def compute_muscle_states(
    records: Sequence[ExerciseRecordSnapshot],
    sleep_modifier: float,
    readiness_modifier: float,
    reference_time: datetime,
    body_weight_kg: float = DEFAULT_BODY_WEIGHT_KG,
) -> list[MuscleFatigueState]:
    """Compute a MuscleFatigueState for every MuscleGroup, in enum order.

    Args:
        records: Session history.
        sleep_modifier: Sleep recovery modifier for the decay model.
        readiness_modifier: HRV/RHR modifier for the decay model.
        reference_time: The "now" the states are computed for.
        body_weight_kg: Body weight used for resistance volume load.

    Returns:
        One state per muscle group.
    """
    muscles = list(MuscleGroup)
    past = [r for r in records if r.date <= reference_time]
    scores = compute_muscle_fatigue(
        muscles, past, sleep_modifier, readiness_modifier, reference_time, body_weight_kg
    )
    volumes = weekly_volume(past, reference_time)

    states: list[MuscleFatigueState] = []
    for muscle, score in zip(muscles, scores):
        last_trained = max(
            (r.date for r in past if r.engages(muscle)),
            default=None,
        )
        hours_since = (
            max(0.0, hours_between(last_trained, reference_time))
            if last_trained is not None
            else None
        )
        states.append(
            MuscleFatigueState(
                muscle=muscle,
                last_trained_date=last_trained,
                hours_since_last_trained=hours_since,
                weekly_volume=volumes.get(muscle, 0),
                recovery_percent=recovery_percent(muscle, hours_since),
                compound_score=score if score.level != FatigueLevel.NO_DATA else None,
            )
        )
    return states
