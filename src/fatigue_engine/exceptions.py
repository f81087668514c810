"""Custom exception hierarchy for the fatigue engine.

Statistical inputs never raise (they degrade to neutral values). These
exceptions cover programming errors at the call boundary and catalog I/O.
"""

from __future__ import annotations

from pathlib import Path


class FatigueEngineError(Exception):
    """Base exception for all fatigue_engine errors."""


class UnknownMuscleGroupError(FatigueEngineError, ValueError):
    """A muscle group name or value is not part of MuscleGroup."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown muscle group: {value!r}")
        self.value = value


class CatalogLoadError(FatigueEngineError):
    """The exercise catalog file is missing or malformed."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = path
