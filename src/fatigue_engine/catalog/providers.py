"""Boundary protocols for the engine's external collaborators.

The engine never performs I/O itself; callers hand in objects satisfying
these protocols (HealthKit/Garmin adapters, a database, or test fakes).
"""

from __future__ import annotations

from collections.abc import Collection, Sequence
from typing import Protocol, runtime_checkable

from fatigue_engine.models.enums import MuscleGroup
from fatigue_engine.models.exercise import ExerciseDefinition
from fatigue_engine.models.snapshot import ExerciseRecordSnapshot, RecoverySignals


@runtime_checkable
class HistoryProvider(Protocol):
    """Supplies completed-session summaries."""

    def fetch_history(self, window_days: int) -> Sequence[ExerciseRecordSnapshot]:
        ...


@runtime_checkable
class BiometricProvider(Protocol):
    """Supplies last night's sleep and this morning's readiness signals."""

    def fetch_recovery_signals(self) -> RecoverySignals:
        ...


@runtime_checkable
class ExerciseCatalog(Protocol):
    """Supplies exercise metadata for suggestions."""

    def lookup_exercises(
        self, muscle: MuscleGroup, exclude_recent: Collection[str] = ...
    ) -> list[ExerciseDefinition]:
        ...

    def all_exercises(self) -> list[ExerciseDefinition]:
        ...
