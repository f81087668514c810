"""Frozen inputs: completed exercise sessions and recovery signals."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from fatigue_engine.models.enums import (
    PRIMARY_ENGAGEMENT,
    SECONDARY_ENGAGEMENT,
    MuscleGroup,
)


def _muscle_set(field_name: str, value: Iterable[MuscleGroup | str]) -> frozenset[MuscleGroup]:
    if isinstance(value, str):
        raise TypeError(
            f"{field_name} must be a collection of muscle groups, not the string {value!r}"
        )
    return frozenset(MuscleGroup.parse(m) for m in value)


@dataclass(frozen=True)
class ExerciseRecordSnapshot:
    """Immutable summary of one completed exercise session.

    Produced by the workout history provider; the engine only reads it.
    Muscle collections are coerced to frozensets of MuscleGroup so the
    snapshot stays hashable, and unknown muscle names fail fast.
    """

    date: datetime
    primary_muscles: frozenset[MuscleGroup] = field(default_factory=frozenset)
    secondary_muscles: frozenset[MuscleGroup] = field(default_factory=frozenset)
    completed_set_count: int = 0
    exercise_id: str | None = None
    exercise_name: str | None = None

    # Resistance work
    total_weight: float | None = None  # kg
    total_reps: int | None = None

    # Cardio
    duration_minutes: float | None = None
    distance_km: float | None = None

    def __post_init__(self) -> None:
        for name in ("primary_muscles", "secondary_muscles"):
            object.__setattr__(self, name, _muscle_set(name, getattr(self, name)))

    @property
    def exercise_key(self) -> str | None:
        """Identity used for exercise diversity: the id, else the name."""
        return self.exercise_id or self.exercise_name

    def engagement(self, muscle: MuscleGroup) -> float:
        """Load share for *muscle*: full if primary, half if secondary-only."""
        if muscle in self.primary_muscles:
            return PRIMARY_ENGAGEMENT
        if muscle in self.secondary_muscles:
            return SECONDARY_ENGAGEMENT
        return 0.0

    def engages(self, muscle: MuscleGroup) -> bool:
        return muscle in self.primary_muscles or muscle in self.secondary_muscles


@dataclass(frozen=True)
class RecoverySignals:
    """Last night's sleep and morning readiness inputs. Any field may be absent."""

    total_sleep_minutes: float | None = None
    deep_sleep_ratio: float | None = None  # 0.0-1.0 share of total sleep
    rem_sleep_ratio: float | None = None  # 0.0-1.0 share of total sleep
    hrv_z_score: float | None = None  # HRV vs personal baseline, in SDs
    rhr_delta: float | None = None  # resting HR minus baseline, bpm
