"""Per-muscle fatigue outputs: compound scores and recovery states."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from fatigue_engine.models.enums import (
    OVERWORKED_WEEKLY_SETS,
    RECOVERED_THRESHOLD,
    FatigueLevel,
    MuscleGroup,
)


@dataclass(frozen=True)
class WorkoutContribution:
    """A single session's contribution to one muscle's fatigue."""

    date: datetime
    exercise_name: str | None
    raw_load: float  # session load x engagement, before decay
    decayed_load: float  # remaining load after exponential decay


@dataclass(frozen=True)
class FatigueBreakdown:
    """How a compound fatigue score was built, kept for explainability."""

    contributions: tuple[WorkoutContribution, ...] = field(default_factory=tuple)
    base_fatigue: float = 0.0
    sleep_modifier: float = 1.0
    readiness_modifier: float = 1.0
    effective_tau: float = 0.0  # hours


@dataclass(frozen=True)
class MuscleFatigueScore:
    """Compound fatigue for one muscle: decayed load, sleep and readiness."""

    muscle: MuscleGroup
    raw_score: float
    normalized_score: float  # 0.0 (fresh) to 1.0 (saturated)
    level: FatigueLevel
    breakdown: FatigueBreakdown


@dataclass(frozen=True)
class MuscleFatigueState:
    """Recovery state of one muscle group at a reference time."""

    muscle: MuscleGroup
    last_trained_date: datetime | None = None
    hours_since_last_trained: float | None = None
    weekly_volume: int = 0  # sets, secondary engagement at half weight
    recovery_percent: float = 1.0
    compound_score: MuscleFatigueScore | None = None

    @property
    def is_recovered(self) -> bool:
        return self.recovery_percent >= RECOVERED_THRESHOLD

    @property
    def is_overworked(self) -> bool:
        return self.weekly_volume >= OVERWORKED_WEEKLY_SETS

    @property
    def level(self) -> FatigueLevel:
        if self.compound_score is None:
            return FatigueLevel.NO_DATA
        return self.compound_score.level

    @property
    def next_ready_date(self) -> datetime | None:
        """When the muscle's full recovery window closes; None once recovered."""
        if self.last_trained_date is None or self.is_recovered:
            return None
        return self.last_trained_date + timedelta(hours=self.muscle.recovery_hours)
