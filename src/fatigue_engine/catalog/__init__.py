"""Exercise catalog and collaborator protocols."""

from fatigue_engine.catalog.library import BUNDLED_CATALOG_PATH, ExerciseLibrary
from fatigue_engine.catalog.providers import (
    BiometricProvider,
    ExerciseCatalog,
    HistoryProvider,
)

__all__ = [
    "BUNDLED_CATALOG_PATH",
    "BiometricProvider",
    "ExerciseCatalog",
    "ExerciseLibrary",
    "HistoryProvider",
]
