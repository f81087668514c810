"""Enumerations and physiological constants for the fatigue engine.

Recovery-time constants follow the usual 48-72h guidance for resistance
training, scaled by muscle size.

References:
    - Schoenfeld (2016): 48-72h between sessions for the same muscle group
    - McLester et al. (2003): small muscle groups recover faster than large
"""

from __future__ import annotations

import math
from enum import Enum, IntEnum, auto

from fatigue_engine.exceptions import UnknownMuscleGroupError


class SizeClass(IntEnum):
    """Muscle size classes. They drive recovery time and saturation threshold."""

    SMALL = auto()
    MEDIUM = auto()
    LARGE = auto()


class MuscleGroup(str, Enum):
    """Anatomical muscle groups tracked by the engine."""

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    QUADRICEPS = "quadriceps"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CALVES = "calves"
    CORE = "core"
    FOREARMS = "forearms"
    TRAPS = "traps"
    LATS = "lats"

    @classmethod
    def parse(cls, value: MuscleGroup | str) -> MuscleGroup:
        """Convert a raw value to a MuscleGroup.

        Raises:
            UnknownMuscleGroupError: if the value names no known group.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise UnknownMuscleGroupError(value) from exc

    @property
    def size_class(self) -> SizeClass:
        return MUSCLE_SIZE_CLASS[self]

    @property
    def recovery_hours(self) -> float:
        return RECOVERY_HOURS[self.size_class]

    @property
    def saturation_threshold(self) -> float:
        return SATURATION_THRESHOLD[self.size_class]

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class FatigueLevel(IntEnum):
    """10-level muscle fatigue scale plus a no-data rank.

    Level 0 = no data, 1 = fully recovered, 10 = overtrained.
    """

    NO_DATA = 0
    FULLY_RECOVERED = 1
    WELL_RESTED = 2
    LIGHT_FATIGUE = 3
    MILD_FATIGUE = 4
    MODERATE_FATIGUE = 5
    NOTABLE_FATIGUE = 6
    HIGH_FATIGUE = 7
    VERY_HIGH_FATIGUE = 8
    EXTREME_FATIGUE = 9
    OVERTRAINED = 10

    @classmethod
    def from_score(cls, normalized_score: float) -> FatigueLevel:
        """Map a normalized fatigue score (0.0-1.0) to a level.

        Non-finite input maps to FULLY_RECOVERED. NO_DATA is never returned;
        it is reserved for muscles without contributing history.
        """
        if normalized_score is None or not math.isfinite(normalized_score):
            return cls.FULLY_RECOVERED
        clamped = max(0.0, min(1.0, normalized_score))
        for upper, level in FATIGUE_LEVEL_BANDS:
            if clamped < upper:
                return level
        return cls.OVERTRAINED

    @property
    def is_training_recommended(self) -> bool:
        return self <= FatigueLevel.MILD_FATIGUE

    @property
    def is_rest_advised(self) -> bool:
        return self >= FatigueLevel.VERY_HIGH_FATIGUE

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


class ExerciseCategory(str, Enum):
    """Exercise library categories."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    HIIT = "hiit"
    FLEXIBILITY = "flexibility"
    BODYWEIGHT = "bodyweight"


# ---------------------------------------------------------------------------
# Muscle size classification
# ---------------------------------------------------------------------------
# Static table so coverage can be audited against the exercise library.
MUSCLE_SIZE_CLASS: dict[MuscleGroup, SizeClass] = {
    MuscleGroup.BICEPS: SizeClass.SMALL,
    MuscleGroup.TRICEPS: SizeClass.SMALL,
    MuscleGroup.FOREARMS: SizeClass.SMALL,
    MuscleGroup.CORE: SizeClass.SMALL,
    MuscleGroup.CALVES: SizeClass.SMALL,
    MuscleGroup.CHEST: SizeClass.MEDIUM,
    MuscleGroup.SHOULDERS: SizeClass.MEDIUM,
    MuscleGroup.TRAPS: SizeClass.MEDIUM,
    MuscleGroup.QUADRICEPS: SizeClass.LARGE,
    MuscleGroup.HAMSTRINGS: SizeClass.LARGE,
    MuscleGroup.GLUTES: SizeClass.LARGE,
    MuscleGroup.BACK: SizeClass.LARGE,
    MuscleGroup.LATS: SizeClass.LARGE,
}

# Baseline recovery time constant (hours) (Schoenfeld, 2016)
RECOVERY_HOURS: dict[SizeClass, float] = {
    SizeClass.SMALL: 36.0,
    SizeClass.MEDIUM: 48.0,
    SizeClass.LARGE: 72.0,
}

# Cumulative decayed load at which normalized fatigue reaches 1.0
SATURATION_THRESHOLD: dict[SizeClass, float] = {
    SizeClass.SMALL: 10.0,
    SizeClass.MEDIUM: 12.0,
    SizeClass.LARGE: 15.0,
}

# Upper (exclusive) bound of each fatigue band; the last band closes at 1.0
FATIGUE_LEVEL_BANDS: tuple[tuple[float, FatigueLevel], ...] = (
    (0.05, FatigueLevel.FULLY_RECOVERED),
    (0.15, FatigueLevel.WELL_RESTED),
    (0.25, FatigueLevel.LIGHT_FATIGUE),
    (0.35, FatigueLevel.MILD_FATIGUE),
    (0.50, FatigueLevel.MODERATE_FATIGUE),
    (0.65, FatigueLevel.NOTABLE_FATIGUE),
    (0.75, FatigueLevel.HIGH_FATIGUE),
    (0.85, FatigueLevel.VERY_HIGH_FATIGUE),
    (0.95, FatigueLevel.EXTREME_FATIGUE),
)

# ---------------------------------------------------------------------------
# Session load
# ---------------------------------------------------------------------------
DEFAULT_BODY_WEIGHT_KG = 70.0
VOLUME_LOAD_SCALE = 100.0  # 100kg x 25 reps / 70kg -> ~0.36 load units
CARDIO_LOAD_SCALE = 10.0  # 5km in 30min -> ~0.35 load units
SET_COUNT_LOAD = 0.1  # per completed set when nothing else is recorded

# ---------------------------------------------------------------------------
# Decay aggregation
# ---------------------------------------------------------------------------
LOOKBACK_DAYS = 14
PRIMARY_ENGAGEMENT = 1.0
SECONDARY_ENGAGEMENT = 0.5
MIN_COMBINED_MODIFIER = 0.1
MIN_EFFECTIVE_TAU_HOURS = 1.0

# ---------------------------------------------------------------------------
# Recovery modifiers (Fullagar et al. 2015, Plews et al. 2013)
# ---------------------------------------------------------------------------
SLEEP_MODIFIER_RANGE = (0.50, 1.25)
READINESS_MODIFIER_RANGE = (0.60, 1.20)
NEUTRAL_MODIFIER = 1.0

# (total sleep minutes, modifier), flat outside the first/last anchor
SLEEP_DURATION_ANCHORS: tuple[tuple[float, float], ...] = (
    (180.0, 0.55),
    (300.0, 0.70),
    (360.0, 0.85),
    (420.0, 1.00),
    (480.0, 1.15),
)
MAX_SLEEP_MINUTES = 1440.0
SLEEP_STAGE_HIGH_RATIO = 0.20
SLEEP_STAGE_LOW_RATIO = 0.05
SLEEP_STAGE_ADJUSTMENT = 0.05

# (HRV z-score, modifier)
HRV_Z_ANCHORS: tuple[tuple[float, float], ...] = (
    (-1.5, 0.70),
    (0.0, 1.00),
    (1.5, 1.15),
)

# (resting HR delta vs baseline in bpm, modifier)
RHR_DELTA_ANCHORS: tuple[tuple[float, float], ...] = (
    (-3.0, 1.05),
    (0.0, 1.00),
    (8.0, 0.85),
)

# ---------------------------------------------------------------------------
# Muscle state
# ---------------------------------------------------------------------------
WEEKLY_VOLUME_DAYS = 7
RECOVERED_THRESHOLD = 0.8
OVERWORKED_WEEKLY_SETS = 20  # ~10-20 weekly sets per muscle, Schoenfeld (2017)

# ---------------------------------------------------------------------------
# Recommendation
# ---------------------------------------------------------------------------
MAX_SUGGESTED_EXERCISES = 4
MAX_FOCUS_MUSCLES = 3
MAX_ALTERNATIVES = 2
MIN_SUGGESTED_SETS = 2
MAX_SUGGESTED_SETS = 5
COMPOUND_DEFAULT_SETS = 3
WEEKDAY_PATTERN_MIN_WEEKS = 4
WEEKDAY_PATTERN_LOOKBACK_WEEKS = 8
WEEKDAY_PATTERN_BOOST = 0.1
RECENT_EXERCISE_HOURS = 48.0
HISTORY_FETCH_DAYS = WEEKDAY_PATTERN_LOOKBACK_WEEKS * 7
