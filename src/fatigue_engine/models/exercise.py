"""Exercise definitions supplied by the exercise catalog."""

from __future__ import annotations

from dataclasses import dataclass, field

from fatigue_engine.models.enums import ExerciseCategory, MuscleGroup


@dataclass(frozen=True)
class ExerciseDefinition:
    """Name and metadata of one library exercise."""

    id: str
    name: str
    category: ExerciseCategory = ExerciseCategory.STRENGTH
    primary_muscles: tuple[MuscleGroup, ...] = field(default_factory=tuple)
    secondary_muscles: tuple[MuscleGroup, ...] = field(default_factory=tuple)
    equipment: str = "bodyweight"
    met_value: float = 3.5

    @property
    def is_compound(self) -> bool:
        return len(self.primary_muscles) >= 2 or len(self.secondary_muscles) > 0

    def targets(self, muscle: MuscleGroup) -> bool:
        return muscle in self.primary_muscles or muscle in self.secondary_muscles
