"""Habit and diversity signals mined from session history.

Weekday patterns capture "I always train legs on Monday"; exercise
staleness captures how long ago each exercise was last performed so the
recommender can rotate through the library.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime

import pandas as pd

from fatigue_engine.math.decay import hours_between
from fatigue_engine.models.enums import (
    WEEKDAY_PATTERN_LOOKBACK_WEEKS,
    WEEKDAY_PATTERN_MIN_WEEKS,
    MuscleGroup,
)
from fatigue_engine.models.exercise import ExerciseDefinition
from fatigue_engine.models.snapshot import ExerciseRecordSnapshot


def compute_weekday_patterns(
    records: Sequence[ExerciseRecordSnapshot],
    reference_time: datetime,
    min_weeks: int = WEEKDAY_PATTERN_MIN_WEEKS,
    lookback_weeks: int = WEEKDAY_PATTERN_LOOKBACK_WEEKS,
) -> frozenset[MuscleGroup]:
    """Muscles habitually trained on the reference date's weekday.

    A muscle qualifies when it was trained as a primary muscle on that
    weekday in at least *min_weeks* distinct prior weeks within the last
    *lookback_weeks*. The reference day itself is not counted.

    Args:
        records: Session history.
        reference_time: Date whose weekday is matched.
        min_weeks: Distinct weeks required to call it a habit.
        lookback_weeks: How far back to look.

    Returns:
        The matching muscles; empty when history is insufficient.
    """
    ref_day = reference_time.date()
    weekday = ref_day.weekday()

    rows: list[tuple[str, object]] = []
    for record in records:
        day = record.date.date()
        days_ago = (ref_day - day).days
        if day.weekday() != weekday or days_ago <= 0 or days_ago > lookback_weeks * 7:
            continue
        rows.extend((muscle.value, day) for muscle in record.primary_muscles)

    if not rows:
        return frozenset()

    frame = pd.DataFrame(rows, columns=["muscle", "day"])
    # Same weekday, so each distinct day is a distinct week
    weeks_per_muscle = frame.groupby("muscle")["day"].nunique()
    return frozenset(
        MuscleGroup(muscle)
        for muscle, weeks in weeks_per_muscle.items()
        if weeks >= min_weeks
    )


def compute_exercise_staleness(
    records: Sequence[ExerciseRecordSnapshot],
    reference_time: datetime,
) -> dict[str, float]:
    """Hours since each exercise (by id, else name) was last performed."""
    rows = [
        (record.exercise_key, record.date)
        for record in records
        if record.exercise_key and record.date <= reference_time
    ]
    if not rows:
        return {}

    frame = pd.DataFrame(rows, columns=["exercise", "date"])
    last_performed = frame.groupby("exercise")["date"].max()
    return {
        str(key): max(0.0, hours_between(pd.Timestamp(ts).to_pydatetime(), reference_time))
        for key, ts in last_performed.items()
    }


def staleness_of(definition: ExerciseDefinition, staleness: Mapping[str, float]) -> float:
    """Hours since *definition* was last performed; inf if never."""
    seen = [staleness[key] for key in (definition.id, definition.name) if key in staleness]
    return min(seen) if seen else float("inf")
