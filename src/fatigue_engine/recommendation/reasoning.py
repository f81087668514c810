"""Human-readable reasoning text for suggestions and exercise picks."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from fatigue_engine.models.enums import OVERWORKED_WEEKLY_SETS, FatigueLevel, MuscleGroup
from fatigue_engine.models.fatigue import MuscleFatigueState
from fatigue_engine.models.suggestion import NextReadyMuscle
from fatigue_engine.recommendation.candidates import RankedMuscle


def _join_muscles(muscles: Sequence[MuscleGroup]) -> str:
    return ", ".join(m.value for m in muscles)


def build_training_reasoning(
    focus: Sequence[RankedMuscle], reference_time: datetime
) -> str:
    """Explain why the focus muscles were chosen."""
    muscles = [r.muscle for r in focus]
    capped = [r.muscle for r in focus if r.state.is_overworked]
    if capped and len(capped) == len(muscles):
        lines = [
            f"Focus on {_join_muscles(muscles)}. These muscles are recovered but "
            f"already reached {OVERWORKED_WEEKLY_SETS} sets this week, so keep the volume light."
        ]
    else:
        lines = [
            f"Focus on {_join_muscles(muscles)}. These muscles are well-recovered "
            f"and could use more volume this week."
        ]
        if capped:
            lines.append(f"Keep {_join_muscles(capped)} light, the weekly set cap is reached.")
    habitual = [r.muscle for r in focus if r.matches_weekday_pattern]
    if habitual:
        weekday = reference_time.strftime("%A")
        lines.append(f"You usually train {_join_muscles(habitual)} on {weekday}s.")
    return " ".join(lines)


def build_rest_reasoning(next_ready: NextReadyMuscle | None) -> str:
    """Explain a rest day and when training can resume."""
    text = (
        "All muscle groups are still recovering. "
        "Consider a rest day with light active recovery."
    )
    if next_ready is not None:
        ready = next_ready.ready_date.strftime("%a %H:%M")
        text += f" {next_ready.muscle.display_name} should be ready by {ready}."
    return text


def build_no_exercise_reasoning(focus: Sequence[RankedMuscle]) -> str:
    """Explain a rest day caused by a catalog with no matching exercises."""
    return (
        f"{_join_muscles([r.muscle for r in focus])} are recovered, but the exercise "
        f"library has no matching strength exercises. Take a recovery day instead."
    )


def exercise_reason(state: MuscleFatigueState) -> str:
    """Short per-exercise rationale for a focus muscle."""
    if state.level == FatigueLevel.NO_DATA and state.last_trained_date is None:
        return f"No recent data for {state.muscle.value}"
    if state.is_overworked:
        return f"Weekly set cap reached ({state.weekly_volume} sets), keep it light"
    hours = state.hours_since_last_trained
    if hours is not None and hours >= 72:
        days = int(hours // 24)
        return f"{days} days since last trained, {state.weekly_volume} sets this week"
    if state.weekly_volume < 10:
        return f"Low weekly volume ({state.weekly_volume} sets), room for more"
    return "Recovered and ready for training"
