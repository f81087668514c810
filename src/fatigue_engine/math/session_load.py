"""Session load: one completed exercise record → a scalar training load.

Resistance work uses volume load relative to body weight; distance cardio
weights distance by the square root of duration so long slow sessions do
not dominate; duration-only and set-count fallbacks cover the rest.

References:
    - Haff (2010): volume load (sets x reps x load) as a resistance
      training load metric
    - Foster (1998): session duration as a cardio load proxy
"""

from __future__ import annotations

import math

from fatigue_engine.models.enums import (
    CARDIO_LOAD_SCALE,
    DEFAULT_BODY_WEIGHT_KG,
    SET_COUNT_LOAD,
    VOLUME_LOAD_SCALE,
)
from fatigue_engine.models.snapshot import ExerciseRecordSnapshot


def _positive(value: float | None) -> float | None:
    """Return *value* as a float if present, finite and > 0, else None."""
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


def session_load(
    record: ExerciseRecordSnapshot,
    body_weight_kg: float = DEFAULT_BODY_WEIGHT_KG,
) -> float:
    """Calculate the raw load of one session, before engagement and decay.

    Rules are tried in order; a rule applies only when all of its inputs are
    present and positive:
        1. weight x reps / body weight / 100
        2. distance x sqrt(duration_h) / 10
        3. duration_h
        4. completed sets x 0.1

    Args:
        record: A completed exercise session.
        body_weight_kg: Athlete body weight; invalid values use the default.

    Returns:
        Non-negative, finite load units (a 100kg 5x5 squat ≈ 0.36).
    """
    weight_kg = _positive(body_weight_kg) or DEFAULT_BODY_WEIGHT_KG

    weight = _positive(record.total_weight)
    reps = _positive(record.total_reps)
    if weight is not None and reps is not None:
        load = weight * reps / weight_kg / VOLUME_LOAD_SCALE
        return load if math.isfinite(load) else set_count_load(record)

    distance = _positive(record.distance_km)
    duration = _positive(record.duration_minutes)
    if distance is not None and duration is not None:
        load = distance * math.sqrt(duration / 60.0) / CARDIO_LOAD_SCALE
        return load if math.isfinite(load) else set_count_load(record)

    if duration is not None:
        return duration / 60.0

    return set_count_load(record)


def set_count_load(record: ExerciseRecordSnapshot) -> float:
    """Fallback load from the completed set count."""
    sets = _positive(record.completed_set_count)
    if sets is None:
        return 0.0
    load = sets * SET_COUNT_LOAD
    return load if math.isfinite(load) else 0.0
