"""
Readiness scoring — fatigue index, recovery score and recovery window.

Model
-----
**Fatigue index (NFI)** compares today's peak sprint velocity against a
rolling baseline:

    NFI = current_peak / baseline_peak        (1.0 without a baseline)

and is banded into a traffic light:

    green   NFI > 0.97
    amber   0.94 ≤ NFI ≤ 0.97
    red     NFI < 0.94

**Recovery score (SRS)** is a 0–100 composite of three clamped sub-scores:

    hrv_score     = clamp((HRV / HRV_7d − 0.75) / 0.30 × 100)     weight 0.45
    tsb_score     = clamp((TSB + 20) / 40 × 100)                  weight 0.30
    fatigue_score = clamp((NFI − 0.90) / 0.10 × 100)              weight 0.25

**Recovery window** grows with age past 40 and with a low score:

    hours = 48 + max(0, (age − 40) × 6) + round((1 − SRS / 100) × 48)

Stale signal
------------
A depressed NFI with a non-negative TSB means the athlete is objectively
fresh but has not sprinted recently: the low peak is detraining, not CNS
fatigue.  The freshness-adjusted score replaces NFI with a neutral 1.0 in
that case so a rested athlete is not told to rest even longer.
"""

from __future__ import annotations

from sprintlab.engine.utils import clamp, round_half_up
from sprintlab.schemas.readiness import (
    HRVSignal,
    ReadinessState,
    SmartRecoveryWindow,
    StatusBand,
)

# ======================================================================
# Configuration
# ======================================================================

GREEN_THRESHOLD = 0.97
AMBER_THRESHOLD = 0.94

# Sub-score weights (sum to 1.0).
_HRV_WEIGHT = 0.45
_TSB_WEIGHT = 0.30
_FATIGUE_WEIGHT = 0.25

# Recovery window (hours).
RECOVERY_BASE_HOURS = 48
RECOVERY_AGE_HOURS_PER_YEAR = 6
RECOVERY_AGE_ONSET = 40
RECOVERY_SCORE_MAX_PENALTY_HOURS = 48

NEUTRAL_FATIGUE_INDEX = 1.0


# ======================================================================
# Fatigue index
# ======================================================================


def fatigue_index(current_peak: float, baseline_peak: float) -> float:
    """Today's peak velocity relative to the baseline, to 3 decimals."""
    if baseline_peak <= 0:
        return NEUTRAL_FATIGUE_INDEX
    return round(current_peak / baseline_peak, 3)


def status_band(value: float) -> StatusBand:
    """Traffic-light band for a fatigue index.  Both boundaries are amber."""
    if value > GREEN_THRESHOLD:
        return StatusBand.GREEN
    if value >= AMBER_THRESHOLD:
        return StatusBand.AMBER
    return StatusBand.RED


# ======================================================================
# Recovery score
# ======================================================================


def _hrv_score(hrv: HRVSignal) -> float:
    ratio = hrv.current_hrv / hrv.avg_hrv_7d if hrv.avg_hrv_7d > 0 else 1.0
    return clamp((ratio - 0.75) / 0.30 * 100, 0.0, 100.0)


def _tsb_score(tsb: float) -> float:
    return clamp((tsb + 20) / 40 * 100, 0.0, 100.0)


def _fatigue_score(value: float) -> float:
    return clamp((value - 0.90) / 0.10 * 100, 0.0, 100.0)


def recovery_score(hrv: HRVSignal, tsb: float, fatigue_idx: float) -> int:
    """Composite 0–100 recovery score.

    Args:
        hrv: Today's HRV against its 7-day average.
        tsb: Training stress balance (fitness − fatigue).
        fatigue_idx: Current fatigue index.

    Returns:
        Weighted sum of the clamped sub-scores, rounded half-up.
    """
    composite = (
        _hrv_score(hrv) * _HRV_WEIGHT
        + _tsb_score(tsb) * _TSB_WEIGHT
        + _fatigue_score(fatigue_idx) * _FATIGUE_WEIGHT
    )
    return round_half_up(composite)


def recovery_window_hours(age: int, score: int) -> int:
    """Hours of recovery before the next maximal session.

    Example ranges (age 45): score 100 → 78 h, 50 → 102 h, 0 → 126 h.
    """
    age_base = RECOVERY_BASE_HOURS + max(0, (age - RECOVERY_AGE_ONSET) * RECOVERY_AGE_HOURS_PER_YEAR)
    return age_base + round_half_up((1 - score / 100) * RECOVERY_SCORE_MAX_PENALTY_HOURS)


# ======================================================================
# Stale signal
# ======================================================================


def is_stale_signal(band: StatusBand, tsb: float) -> bool:
    """True when a depressed fatigue index coincides with a fresh TSB."""
    return band in (StatusBand.AMBER, StatusBand.RED) and tsb >= 0


def freshness_adjusted_recovery_score(hrv: HRVSignal, tsb: float, fatigue_idx: float) -> int:
    """Recovery score with the fatigue-index penalty removed on a stale signal."""
    if is_stale_signal(status_band(fatigue_idx), tsb):
        fatigue_idx = NEUTRAL_FATIGUE_INDEX
    return recovery_score(hrv, tsb, fatigue_idx)


def smart_recovery_window(
    age: int,
    hrv: HRVSignal,
    tsb: float,
    fatigue_idx: float,
) -> SmartRecoveryWindow:
    """Freshness-adjusted recovery window.

    Example (age 49, HRV at baseline, TSB +2, NFI 0.92):
        plain score 59 → 122 h; adjusted score 79 → 112 h.
    """
    stale = is_stale_signal(status_band(fatigue_idx), tsb)
    score = freshness_adjusted_recovery_score(hrv, tsb, fatigue_idx)
    return SmartRecoveryWindow(
        hours=recovery_window_hours(age, score),
        recovery_score=score,
        is_stale_signal=stale,
    )


# ======================================================================
# Main entry point
# ======================================================================


def assess_readiness(
    current_peak: float,
    baseline_peak: float,
    hrv: HRVSignal,
    tsb: float,
    age: int,
) -> ReadinessState:
    """Compute the full readiness snapshot from raw inputs."""
    fi = fatigue_index(current_peak, baseline_peak)
    window = smart_recovery_window(age, hrv, tsb, fi)
    return ReadinessState(
        fatigue_index=fi,
        status_band=status_band(fi),
        recovery_score=window.recovery_score,
        raw_recovery_score=recovery_score(hrv, tsb, fi),
        recovery_window_hours=window.hours,
        is_stale_signal=window.is_stale_signal,
    )
