"""
Readiness schemas.

The readiness state of a sprinter is summarised by:

    fatigue index (NFI)  today's peak velocity / rolling baseline (1.0 = baseline)
    status band          green > 0.97 ≥ amber ≥ 0.94 > red
    recovery score       0–100 composite of HRV ratio, TSB and fatigue index
    recovery window      hours until the next maximal session, never below 48
    stale signal         low NFI with positive TSB — detraining, not fatigue
"""

from enum import Enum

from pydantic import BaseModel, Field


class StatusBand(str, Enum):
    """Traffic-light band derived from the fatigue index."""
    GREEN = "green"
    AMBER = "amber"
    RED = "red"


class HRVSignal(BaseModel):
    """HRV reading against its 7-day rolling average."""

    current_hrv: float = Field(..., ge=0.0, description="Today's HRV (ms)")
    avg_hrv_7d: float = Field(..., ge=0.0, description="7-day rolling average HRV (ms)")


class SmartRecoveryWindow(BaseModel):
    """Freshness-adjusted recovery window."""

    hours: int = Field(..., ge=48)
    recovery_score: int = Field(..., ge=0, le=100)
    is_stale_signal: bool


class ReadinessState(BaseModel):
    """Readiness snapshot, computed fresh from current inputs."""

    fatigue_index: float = Field(..., ge=0.0, description="1.0 = baseline output")
    status_band: StatusBand
    recovery_score: int = Field(
        ..., ge=0, le=100,
        description="Freshness-adjusted composite recovery score",
    )
    raw_recovery_score: int = Field(
        ..., ge=0, le=100,
        description="Recovery score without the stale-signal adjustment",
    )
    recovery_window_hours: int = Field(..., ge=48)
    is_stale_signal: bool


class RecoveryWindowRequest(BaseModel):
    """Inputs for a one-off recovery window computation."""

    age: int = Field(..., ge=0, le=120)
    hrv: HRVSignal
    tsb: float = Field(..., description="Training stress balance (fitness − fatigue)")
    fatigue_index: float = Field(1.0, ge=0.0)
