"""Tabular export of muscle states for charting and analysis."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from fatigue_engine.models.fatigue import MuscleFatigueState

STATE_COLUMNS = [
    "muscle",
    "size_class",
    "level",
    "level_rank",
    "normalized_score",
    "raw_score",
    "recovery_percent",
    "is_recovered",
    "weekly_volume",
    "hours_since_last_trained",
    "last_trained_date",
    "next_ready_date",
]


def states_to_frame(states: Sequence[MuscleFatigueState]) -> pd.DataFrame:
    """One row per muscle state, in input order.

    Muscles without fatigue history have a score of 0.0 and missing dates.
    """
    rows = []
    for state in states:
        score = state.compound_score
        rows.append(
            {
                "muscle": state.muscle.value,
                "size_class": state.muscle.size_class.name.lower(),
                "level": state.level.label,
                "level_rank": int(state.level),
                "normalized_score": score.normalized_score if score else 0.0,
                "raw_score": score.raw_score if score else 0.0,
                "recovery_percent": state.recovery_percent,
                "is_recovered": state.is_recovered,
                "weekly_volume": state.weekly_volume,
                "hours_since_last_trained": state.hours_since_last_trained,
                "last_trained_date": state.last_trained_date,
                "next_ready_date": state.next_ready_date,
            }
        )
    return pd.DataFrame(rows, columns=STATE_COLUMNS)
