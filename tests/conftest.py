"""Shared test fixtures: reference time, record factories, catalogs, providers."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from datetime import datetime, timedelta
from typing import Callable

import pytest

from fatigue_engine.catalog.library import ExerciseLibrary
from fatigue_engine.models.enums import ExerciseCategory, MuscleGroup
from fatigue_engine.models.exercise import ExerciseDefinition
from fatigue_engine.models.snapshot import ExerciseRecordSnapshot, RecoverySignals

# Monday evening
REFERENCE_TIME = datetime(2026, 3, 16, 18, 0)

RecordFactory = Callable[..., ExerciseRecordSnapshot]


def make_record(
    hours_ago: float = 0.0,
    primary: Iterable[MuscleGroup] = (),
    secondary: Iterable[MuscleGroup] = (),
    sets: int = 3,
    reference: datetime = REFERENCE_TIME,
    **overrides,
) -> ExerciseRecordSnapshot:
    """Build a snapshot dated *hours_ago* before the reference time."""
    return ExerciseRecordSnapshot(
        date=reference - timedelta(hours=hours_ago),
        primary_muscles=frozenset(primary),
        secondary_muscles=frozenset(secondary),
        completed_set_count=sets,
        **overrides,
    )


class FakeHistoryProvider:
    def __init__(self, records: list[ExerciseRecordSnapshot]) -> None:
        self.records = records
        self.requested_windows: list[int] = []

    def fetch_history(self, window_days: int) -> list[ExerciseRecordSnapshot]:
        self.requested_windows.append(window_days)
        return list(self.records)


class FakeBiometricProvider:
    def __init__(self, signals: RecoverySignals) -> None:
        self.signals = signals

    def fetch_recovery_signals(self) -> RecoverySignals:
        return self.signals


class EmptyCatalog:
    def lookup_exercises(
        self, muscle: MuscleGroup, exclude_recent: Collection[str] = frozenset()
    ) -> list[ExerciseDefinition]:
        return []

    def all_exercises(self) -> list[ExerciseDefinition]:
        return []


@pytest.fixture
def reference_time() -> datetime:
    return REFERENCE_TIME


@pytest.fixture
def record() -> RecordFactory:
    """Factory fixture: record(hours_ago, primary, secondary, sets, **fields)."""
    return make_record


@pytest.fixture
def library() -> ExerciseLibrary:
    """The bundled exercise library."""
    return ExerciseLibrary.default()


@pytest.fixture
def small_library() -> ExerciseLibrary:
    """Two exercises per upper-body muscle plus one compound lift."""
    return ExerciseLibrary(
        [
            ExerciseDefinition(
                id="bench", name="Bench Press",
                primary_muscles=(MuscleGroup.CHEST,),
                secondary_muscles=(MuscleGroup.TRICEPS,),
            ),
            ExerciseDefinition(id="fly", name="Cable Fly", primary_muscles=(MuscleGroup.CHEST,)),
            ExerciseDefinition(id="row", name="Barbell Row", primary_muscles=(MuscleGroup.BACK,)),
            ExerciseDefinition(
                id="pullover", name="Pullover", primary_muscles=(MuscleGroup.BACK,),
            ),
            ExerciseDefinition(id="curl", name="Curl", primary_muscles=(MuscleGroup.BICEPS,)),
            ExerciseDefinition(
                id="run", name="Running", category=ExerciseCategory.CARDIO,
                primary_muscles=(MuscleGroup.QUADRICEPS,),
            ),
        ]
    )


@pytest.fixture
def empty_catalog() -> EmptyCatalog:
    return EmptyCatalog()


@pytest.fixture
def all_muscles_trained_heavily_today() -> list[ExerciseRecordSnapshot]:
    """Every muscle group hammered one hour ago."""
    return [
        make_record(
            hours_ago=1,
            primary=[muscle],
            sets=20,
            total_weight=1000.0,
            total_reps=100,
            exercise_id=f"heavy-{muscle.value}",
        )
        for muscle in MuscleGroup
    ]


@pytest.fixture
def history_provider() -> type[FakeHistoryProvider]:
    """FakeHistoryProvider class; call it with a record list."""
    return FakeHistoryProvider


@pytest.fixture
def biometric_provider() -> type[FakeBiometricProvider]:
    """FakeBiometricProvider class; call it with RecoverySignals."""
    return FakeBiometricProvider
