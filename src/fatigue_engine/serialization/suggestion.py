"""JSON serialization for WorkoutSuggestion objects.

Converts a WorkoutSuggestion into a plain dict (camelCase keys, ISO-8601
dates) for the view layer. All functions are pure.
"""

from __future__ import annotations

import json

from fatigue_engine.models.exercise import ExerciseDefinition
from fatigue_engine.models.suggestion import SuggestedExercise, WorkoutSuggestion

_REASON_MAX = 200


def to_suggestion_dict(suggestion: WorkoutSuggestion) -> dict:
    """Convert a WorkoutSuggestion to a JSON-compatible dict."""
    next_ready = None
    if suggestion.next_ready_muscle is not None:
        next_ready = {
            "muscle": suggestion.next_ready_muscle.muscle.value,
            "readyDate": suggestion.next_ready_muscle.ready_date.isoformat(),
        }

    return {
        "isRestDay": suggestion.is_rest_day,
        "reasoning": suggestion.reasoning,
        "focusMuscles": [m.value for m in suggestion.focus_muscles],
        "exercises": [_convert_exercise(e) for e in suggestion.exercises],
        "activeRecoverySuggestions": [
            {"id": a.id, "title": a.title, "duration": a.duration}
            for a in suggestion.active_recovery_suggestions
        ],
        "nextReadyMuscle": next_ready,
    }


def to_suggestion_json_string(suggestion: WorkoutSuggestion, indent: int = 2) -> str:
    """Convert a WorkoutSuggestion to a JSON string."""
    return json.dumps(to_suggestion_dict(suggestion), indent=indent)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _convert_exercise(exercise: SuggestedExercise) -> dict:
    result = _convert_definition(exercise.definition)
    result["suggestedSets"] = exercise.suggested_sets
    if exercise.reason:
        result["reason"] = exercise.reason[:_REASON_MAX]
    result["alternatives"] = [_convert_definition(a) for a in exercise.alternatives]
    return result


def _convert_definition(definition: ExerciseDefinition) -> dict:
    return {
        "id": definition.id,
        "name": definition.name,
        "category": definition.category.value,
        "primaryMuscles": [m.value for m in definition.primary_muscles],
        "secondaryMuscles": [m.value for m in definition.secondary_muscles],
        "equipment": definition.equipment,
    }
