"""Serialization module: export suggestions and states for the view layer."""

from fatigue_engine.serialization.frames import states_to_frame
from fatigue_engine.serialization.suggestion import (
    to_suggestion_dict,
    to_suggestion_json_string,
)

__all__ = ["states_to_frame", "to_suggestion_dict", "to_suggestion_json_string"]
