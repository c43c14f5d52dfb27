"""
Race-time estimator for the 100 m, 200 m and 400 m.

Model
-----
1. **Peak velocity** is the primary predictor.  A runner averages a
   distance-specific *sustain fraction* of it over the race:

       100 m  0.91      200 m  0.88      400 m  0.78

2. **Training profile** (when intervals are available) personalises the
   fractions: the speed endurance index nudges the 200/400 fractions
   around a 0.85 reference, and quick acceleration reps lift the 100 m
   fraction.  A known flying velocity is blended into the peak
   (60 % flying / 40 % raw, capped at 1.02 × raw) to denoise one-sample
   spikes.

3. **Age** costs 0.7 % of average speed per year past 35, floored at a
   35 % total loss.

4. **Readiness** shifts the estimate by at most −5 % / +3 % from the
   fatigue index and training stress balance.

5. A fixed 0.15 s reaction time is added to every prediction.

All caps and clamps are part of the model; they keep extreme inputs
from producing physiologically absurd times.
"""

from __future__ import annotations

import math
from typing import Optional

from sprintlab.engine.profile import build_training_profile
from sprintlab.engine.readiness import NEUTRAL_FATIGUE_INDEX
from sprintlab.engine.utils import clamp
from sprintlab.schemas.profile import TrainingProfile
from sprintlab.schemas.race import (
    RACE_DISTANCES,
    RaceDistance,
    RaceEstimatorInput,
    RacePhaseBreakdown,
    RacePrediction,
)
from sprintlab.schemas.readiness import StatusBand

# ======================================================================
# Configuration
# ======================================================================

# ~0.7 % per year past 35 (WMA masters age-grading).
AGE_DEGRADATION_PER_YEAR = 0.007
AGE_DEGRADATION_ONSET = 35
AGE_PENALTY_FLOOR = 0.65

REACTION_TIME = 0.15

BASE_SUSTAIN_FRACTIONS: dict[int, float] = {
    100: 0.91,
    200: 0.88,
    400: 0.78,
}

# Speed endurance index of a typical trained sprinter.
_SE_REFERENCE = 0.85
_SE_SCALE = {200: 0.5, 400: 0.7}
_SE_BOUNDS = {200: (0.82, 0.93), 400: (0.70, 0.85)}

# Typical 30 m acceleration takes 4–5 s; under 4.5 s earns a 100 m bonus.
_ACCEL_REFERENCE_S = 4.5
_ACCEL_BONUS_PER_S = 0.01
_SUSTAIN_100_CAP = 0.95

_FLYING_WEIGHT = 0.6
_EFFECTIVE_VMAX_CAP = 1.02

_READINESS_BOUNDS = (0.95, 1.03)

# Distance run while accelerating, and max-velocity window after it.
_ACCEL_DISTANCE = {100: 30, 200: 40, 400: 50}
_MAX_VELOCITY_WINDOW = {100: None, 200: 60, 400: 50}
_ACCEL_SPEED_FRACTION = 0.55
_TRAINING_ACCEL_DISTANCE = 30

_NO_DATA_DISPLAY = "--"


def age_penalty(age: int) -> float:
    """Multiplier on average speed for masters athletes."""
    if age <= AGE_DEGRADATION_ONSET:
        return 1.0
    return max(1 - (age - AGE_DEGRADATION_ONSET) * AGE_DEGRADATION_PER_YEAR, AGE_PENALTY_FLOOR)


def format_time(seconds: float) -> str:
    """Format seconds as ``"11.23"`` or ``"1:02.45"``; ``"--"`` when ≤ 0."""
    if seconds <= 0:
        return _NO_DATA_DISPLAY
    if seconds < 60:
        return f"{seconds:.2f}"
    minutes = math.floor(seconds / 60)
    secs = seconds - minutes * 60
    return f"{minutes}:{'0' if secs < 10 else ''}{secs:.2f}"


# ======================================================================
# Model components
# ======================================================================


def sustain_fractions(profile: Optional[TrainingProfile]) -> dict[int, float]:
    """Sustain fraction per distance, personalised by the profile."""
    fractions = dict(BASE_SUSTAIN_FRACTIONS)
    if profile is None:
        return fractions

    if profile.endurance_interval_count >= 2 and profile.speed_endurance_index > 0:
        deviation = profile.speed_endurance_index - _SE_REFERENCE
        for distance in (200, 400):
            low, high = _SE_BOUNDS[distance]
            fractions[distance] = clamp(
                fractions[distance] + deviation * _SE_SCALE[distance], low, high,
            )

    accel_time = profile.avg_acceleration_time_s
    if profile.acceleration_interval_count >= 3 and 0 < accel_time < _ACCEL_REFERENCE_S:
        bonus = (_ACCEL_REFERENCE_S - accel_time) * _ACCEL_BONUS_PER_S
        fractions[100] = min(_SUSTAIN_100_CAP, fractions[100] + bonus)

    return fractions


def effective_velocity(peak: float, profile: Optional[TrainingProfile]) -> float:
    """Peak velocity blended with the best flying velocity, capped at 1.02 × peak."""
    if profile is None or profile.best_flying_velocity <= 0:
        return peak
    blended = profile.best_flying_velocity * _FLYING_WEIGHT + peak * (1 - _FLYING_WEIGHT)
    return min(blended, peak * _EFFECTIVE_VMAX_CAP)


def readiness_modifier(fatigue_idx: float, tsb: float) -> float:
    """Current-form multiplier on average speed, clamped to [0.95, 1.03]."""
    mod = 1.0 + (fatigue_idx - NEUTRAL_FATIGUE_INDEX) * 0.33

    if tsb > 5:
        mod += min(tsb * 0.001, 0.01)
    elif tsb < -10:
        mod += max(tsb * 0.0005, -0.015)

    return clamp(mod, *_READINESS_BOUNDS)


def phase_breakdown(
    distance: int,
    effective_vmax: float,
    avg_speed: float,
    profile: Optional[TrainingProfile],
) -> RacePhaseBreakdown:
    """Split the running time into acceleration, top speed and deceleration."""
    run_time = distance / avg_speed
    accel_distance = _ACCEL_DISTANCE[distance]

    if profile is not None and profile.acceleration_interval_count >= 2 and profile.avg_acceleration_time_s > 0:
        accel_time = profile.avg_acceleration_time_s * (accel_distance / _TRAINING_ACCEL_DISTANCE)
    else:
        accel_time = accel_distance / (effective_vmax * _ACCEL_SPEED_FRACTION)

    max_vel_distance = distance - accel_distance
    window = _MAX_VELOCITY_WINDOW[distance]
    if window is not None:
        max_vel_distance = min(window, max_vel_distance)
    max_vel_time = max_vel_distance / effective_vmax

    decel_time = max(0.0, run_time - accel_time - max_vel_time)

    return RacePhaseBreakdown(
        reaction=round(REACTION_TIME, 2),
        acceleration=round(accel_time, 2),
        max_velocity=round(max_vel_time, 2),
        deceleration=round(decel_time, 2),
    )


def _confidence(data: RaceEstimatorInput) -> str:
    if data.activity_count >= 10 and data.best_vmax_60d > 0:
        return "high"
    if data.activity_count >= 3:
        return "moderate"
    return "low"


def _note(
    distance: int,
    data: RaceEstimatorInput,
    modifier: float,
    profile: Optional[TrainingProfile],
) -> str:
    parts: list[str] = []

    if profile is not None and profile.endurance_interval_count >= 2:
        parts.append(f"SE index {profile.speed_endurance_index * 100:.0f}%")
    if profile is not None and profile.best_flying_velocity > 0:
        parts.append(f"Flying {profile.best_flying_velocity:.1f} m/s")
    if data.age >= 40:
        parts.append(f"Age-adjusted ({data.age}y)")

    if modifier < 0.99:
        parts.append("Fatigue penalty applied")
    elif modifier > 1.01:
        parts.append("Peak form bonus")

    if distance == 400 and data.status_band == StatusBand.RED:
        parts.append("Speed endurance likely compromised")
    if data.activity_count < 5:
        parts.append("Limited training data")
    if profile is None and data.activity_count >= 5:
        parts.append("No interval history — using Vmax model only")

    return " · ".join(parts) if parts else "Based on recent training Vmax"


def _no_data(distance: RaceDistance) -> RacePrediction:
    return RacePrediction(
        distance=distance,
        predicted_seconds=0.0,
        display=_NO_DATA_DISPLAY,
        confidence="low",
        note="Insufficient velocity data",
        phases=RacePhaseBreakdown(),
    )


# ======================================================================
# Main entry points
# ======================================================================


def estimate_distance(
    distance: RaceDistance,
    data: RaceEstimatorInput,
    profile: Optional[TrainingProfile] = None,
) -> RacePrediction:
    """Predict the finish time for one distance.

    Args:
        distance: 100, 200 or 400.
        data: Estimator inputs.
        profile: Pre-built training profile.  Built from
            ``data.training_intervals`` when omitted.
    """
    peak = max(data.best_vmax_60d, data.avg_vmax)
    if peak <= 0:
        return _no_data(distance)

    if profile is None and data.training_intervals:
        profile = build_training_profile(data.training_intervals, peak)

    effective = effective_velocity(peak, profile)
    avg_speed = effective * sustain_fractions(profile)[distance]
    avg_speed *= age_penalty(data.age)

    modifier = readiness_modifier(data.fatigue_index, data.tsb)
    avg_speed *= modifier

    predicted = round(distance / avg_speed + REACTION_TIME, 2)

    return RacePrediction(
        distance=distance,
        predicted_seconds=predicted,
        display=format_time(predicted),
        confidence=_confidence(data),
        note=_note(distance, data, modifier, profile),
        phases=phase_breakdown(distance, effective, avg_speed, profile),
    )


def estimate(data: RaceEstimatorInput) -> list[RacePrediction]:
    """Predict 100 m, 200 m and 400 m times, in that order."""
    peak = max(data.best_vmax_60d, data.avg_vmax)
    profile = None
    if peak > 0 and data.training_intervals:
        profile = build_training_profile(data.training_intervals, peak)
    return [estimate_distance(d, data, profile) for d in RACE_DISTANCES]


def estimate_recovered(data: RaceEstimatorInput) -> list[RacePrediction]:
    """Predictions as if the athlete were fully recovered (green, TSB +5)."""
    recovered = data.model_copy(update={
        "fatigue_index": NEUTRAL_FATIGUE_INDEX,
        "status_band": StatusBand.GREEN,
        "tsb": 5.0,
    })
    return estimate(recovered)
