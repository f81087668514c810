"""In-memory exercise library loaded from JSON.

The bundled library ships with the package; a different file can be
selected with the FATIGUE_CATALOG_PATH environment variable.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Collection, Iterable
from pathlib import Path
from typing import Any

from fatigue_engine import config
from fatigue_engine.exceptions import CatalogLoadError
from fatigue_engine.models.enums import ExerciseCategory, MuscleGroup
from fatigue_engine.models.exercise import ExerciseDefinition

logger = logging.getLogger(__name__)

BUNDLED_CATALOG_PATH = Path(__file__).parent / "data" / "exercises.json"


class ExerciseLibrary:
    """Queryable exercise catalog.

    Usage:
        library = ExerciseLibrary.default()
        chest = library.lookup_exercises(MuscleGroup.CHEST)
    """

    def __init__(self, exercises: Iterable[ExerciseDefinition] = ()) -> None:
        self._exercises: list[ExerciseDefinition] = []
        self._by_id: dict[str, ExerciseDefinition] = {}
        for exercise in exercises:
            if exercise.id in self._by_id:
                logger.warning("Duplicate exercise id %s, keeping first", exercise.id)
                continue
            self._exercises.append(exercise)
            self._by_id[exercise.id] = exercise

    @classmethod
    def default(cls) -> ExerciseLibrary:
        """Load the configured catalog file, or the bundled one."""
        return cls.from_json_file(config.CATALOG_PATH or BUNDLED_CATALOG_PATH)

    @classmethod
    def from_json_file(cls, path: Path | str) -> ExerciseLibrary:
        """Load a library from a JSON array of exercise objects.

        Rows with missing fields or unknown muscles are skipped with a warning.

        Raises:
            CatalogLoadError: if the file cannot be read or is not a JSON array.
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError as exc:
            raise CatalogLoadError(f"Exercise catalog not found: {path}", path) from exc
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogLoadError(f"Could not read exercise catalog {path}: {exc}", path) from exc

        if not isinstance(raw, list):
            raise CatalogLoadError(f"Exercise catalog {path} must be a JSON array", path)

        exercises = [e for e in (_parse_row(row) for row in raw) if e is not None]
        logger.info("Loaded %d exercises from %s", len(exercises), path)
        return cls(exercises)

    def __len__(self) -> int:
        return len(self._exercises)

    def all_exercises(self) -> list[ExerciseDefinition]:
        return list(self._exercises)

    def exercise_by_id(self, exercise_id: str) -> ExerciseDefinition | None:
        return self._by_id.get(exercise_id)

    def search(self, query: str) -> list[ExerciseDefinition]:
        """Case-insensitive substring match on the exercise name."""
        needle = query.strip().lower()
        if not needle:
            return self.all_exercises()
        return [e for e in self._exercises if needle in e.name.lower()]

    def exercises_for_muscle(self, muscle: MuscleGroup | str) -> list[ExerciseDefinition]:
        target = MuscleGroup.parse(muscle)
        return [e for e in self._exercises if e.targets(target)]

    def exercises_for_category(self, category: ExerciseCategory) -> list[ExerciseDefinition]:
        return [e for e in self._exercises if e.category == category]

    def lookup_exercises(
        self, muscle: MuscleGroup | str, exclude_recent: Collection[str] = frozenset()
    ) -> list[ExerciseDefinition]:
        """Exercises targeting *muscle*, minus recently performed ones.

        Primary-muscle matches come before secondary-only matches.
        """
        target = MuscleGroup.parse(muscle)
        excluded = set(exclude_recent)
        matches = [
            e for e in self.exercises_for_muscle(target)
            if e.id not in excluded and e.name not in excluded
        ]
        return sorted(matches, key=lambda e: target not in e.primary_muscles)


def _parse_row(row: Any) -> ExerciseDefinition | None:
    """Build an ExerciseDefinition from one JSON object, or None if malformed."""
    if not isinstance(row, dict):
        logger.warning("Skipping non-object catalog row: %r", row)
        return None
    try:
        return ExerciseDefinition(
            id=str(row["id"]),
            name=str(row["name"]),
            category=ExerciseCategory(row.get("category", "strength")),
            primary_muscles=tuple(MuscleGroup.parse(m) for m in row.get("primary_muscles", [])),
            secondary_muscles=tuple(
                MuscleGroup.parse(m) for m in row.get("secondary_muscles", [])
            ),
            equipment=str(row.get("equipment", "bodyweight")),
            met_value=float(row.get("met_value", 3.5)),
        )
    except (KeyError, TypeError, ValueError) as exc:
        logger.warning("Skipping malformed catalog row %r: %s", row.get("id"), exc)
        return None
