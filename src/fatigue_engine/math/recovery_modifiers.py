"""Recovery modifiers from sleep and HRV/RHR readiness.

Both modifiers scale the fatigue decay time constant: values above 1.0 mean
faster recovery (shorter tau), values below 1.0 mean fatigue lingers.
Between the anchor points the modifiers are piecewise linear, so they are
continuous and monotonic in each input.

References:
    - Fullagar et al. (2015). Sleep and Athletic Performance. Sports Med
      45(Suppl 1):S161-S186.
    - Plews et al. (2013). Training Adaptation and Heart Rate Variability
      in Elite Endurance Athletes. Int J Sports Physiol Perform 8(6):688-694.
    - Buchheit (2014). Monitoring training status with HR measures. Int J
      Sports Physiol Perform 9(5):883-893.
"""

from __future__ import annotations

import math

import numpy as np

from fatigue_engine.models.enums import (
    HRV_Z_ANCHORS,
    MAX_SLEEP_MINUTES,
    NEUTRAL_MODIFIER,
    READINESS_MODIFIER_RANGE,
    RHR_DELTA_ANCHORS,
    SLEEP_DURATION_ANCHORS,
    SLEEP_MODIFIER_RANGE,
    SLEEP_STAGE_ADJUSTMENT,
    SLEEP_STAGE_HIGH_RATIO,
    SLEEP_STAGE_LOW_RATIO,
)
from fatigue_engine.models.snapshot import RecoverySignals

_SLEEP_X = np.array([x for x, _ in SLEEP_DURATION_ANCHORS], dtype=np.float64)
_SLEEP_Y = np.array([y for _, y in SLEEP_DURATION_ANCHORS], dtype=np.float64)
_HRV_X = np.array([x for x, _ in HRV_Z_ANCHORS], dtype=np.float64)
_HRV_Y = np.array([y for _, y in HRV_Z_ANCHORS], dtype=np.float64)
_RHR_X = np.array([x for x, _ in RHR_DELTA_ANCHORS], dtype=np.float64)
_RHR_Y = np.array([y for _, y in RHR_DELTA_ANCHORS], dtype=np.float64)


def _finite(value: float | None) -> float | None:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _clamp(value: float, bounds: tuple[float, float]) -> float:
    low, high = bounds
    return max(low, min(value, high))


def _stage_adjustment(ratio: float | None) -> float:
    """Bonus / penalty for one sleep stage's share of total sleep."""
    ratio = _finite(ratio)
    if ratio is None or ratio < 0.0 or ratio > 1.0:
        return 0.0
    if ratio >= SLEEP_STAGE_HIGH_RATIO:
        return SLEEP_STAGE_ADJUSTMENT
    if ratio <= SLEEP_STAGE_LOW_RATIO:
        return -SLEEP_STAGE_ADJUSTMENT
    return 0.0


def calculate_sleep_modifier(
    total_sleep_minutes: float | None,
    deep_sleep_ratio: float | None = None,
    rem_sleep_ratio: float | None = None,
) -> float:
    """Sleep-based recovery modifier in [0.50, 1.25].

    Anchors: 8h → 1.15, 7h → 1.00, 6h → 0.85, 5h → 0.70, ≤3h → 0.55.
    Deep and REM ratios each add +0.05 when ≥ 0.20 and −0.05 when ≤ 0.05.

    Args:
        total_sleep_minutes: Last night's total sleep.
        deep_sleep_ratio: Deep sleep as a share of total sleep (0-1).
        rem_sleep_ratio: REM sleep as a share of total sleep (0-1).

    Returns:
        The modifier; 1.0 when sleep duration is unavailable or implausible.
    """
    minutes = _finite(total_sleep_minutes)
    if minutes is None or minutes < 0.0 or minutes > MAX_SLEEP_MINUTES:
        return NEUTRAL_MODIFIER

    base = float(np.interp(minutes, _SLEEP_X, _SLEEP_Y))
    quality = _stage_adjustment(deep_sleep_ratio) + _stage_adjustment(rem_sleep_ratio)
    return _clamp(base + quality, SLEEP_MODIFIER_RANGE)


def calculate_readiness_modifier(
    hrv_z_score: float | None,
    rhr_delta: float | None = None,
) -> float:
    """HRV/RHR readiness modifier in [0.60, 1.20].

    HRV anchors: z=+1.5 → 1.15, z=0 → 1.00, z=−1.5 → 0.70.
    RHR anchors: −3 bpm → 1.05, 0 → 1.00, +8 bpm → 0.85.

    With both signals, an elevated resting HR caps the result at the
    RHR-implied value regardless of HRV; a lowered resting HR adds its
    bonus on top of the HRV component.

    Args:
        hrv_z_score: Today's HRV relative to baseline, in standard deviations.
        rhr_delta: Today's resting HR minus baseline, in bpm.

    Returns:
        The modifier; 1.0 when neither signal is available.
    """
    z = _finite(hrv_z_score)
    delta = _finite(rhr_delta)

    hrv_component = float(np.interp(z, _HRV_X, _HRV_Y)) if z is not None else None
    rhr_component = float(np.interp(delta, _RHR_X, _RHR_Y)) if delta is not None else None

    if hrv_component is None and rhr_component is None:
        return NEUTRAL_MODIFIER
    if hrv_component is None:
        modifier = rhr_component
    elif rhr_component is None:
        modifier = hrv_component
    elif rhr_component < NEUTRAL_MODIFIER:
        modifier = min(hrv_component, rhr_component)
    else:
        modifier = hrv_component + (rhr_component - NEUTRAL_MODIFIER)

    return _clamp(modifier, READINESS_MODIFIER_RANGE)  # type: ignore[arg-type]


def modifiers_from_signals(signals: RecoverySignals | None) -> tuple[float, float]:
    """Derive (sleep_modifier, readiness_modifier) from raw recovery signals."""
    if signals is None:
        return NEUTRAL_MODIFIER, NEUTRAL_MODIFIER
    sleep = calculate_sleep_modifier(
        signals.total_sleep_minutes,
        signals.deep_sleep_ratio,
        signals.rem_sleep_ratio,
    )
    readiness = calculate_readiness_modifier(signals.hrv_z_score, signals.rhr_delta)
    return sleep, readiness


def sanitize_modifier(value: float | None, bounds: tuple[float, float]) -> float:
    """Clamp a caller-supplied modifier; non-finite values become neutral."""
    number = _finite(value)
    if number is None:
        return NEUTRAL_MODIFIER
    return _clamp(number, bounds)
