"""
Race prediction schemas.

Predictions are produced for the three outdoor sprint distances.  Each
prediction carries a phase breakdown so the athlete can see where time
is gained or lost (start, drive, top speed, speed endurance).
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from sprintlab.schemas.interval import TrackInterval
from sprintlab.schemas.readiness import StatusBand

RaceDistance = Literal[100, 200, 400]
RACE_DISTANCES: tuple[RaceDistance, ...] = (100, 200, 400)


class RacePhaseBreakdown(BaseModel):
    """Split of a predicted time into race phases (seconds)."""

    reaction: float = Field(0.0, ge=0.0, description="Reaction + block clearance")
    acceleration: float = Field(0.0, ge=0.0)
    max_velocity: float = Field(0.0, ge=0.0)
    deceleration: float = Field(
        0.0, ge=0.0,
        description="Speed endurance / deceleration remainder",
    )


class RacePrediction(BaseModel):
    """Predicted finish time for one distance."""

    distance: RaceDistance
    predicted_seconds: float = Field(..., ge=0.0)
    display: str = Field(..., description="'11.23', '1:02.45' or '--' when no data")
    confidence: Literal["high", "moderate", "low"]
    note: str
    phases: RacePhaseBreakdown


class RaceEstimatorInput(BaseModel):
    """Everything the race-time estimator needs."""

    best_vmax_60d: float = Field(..., ge=0.0, description="Best peak velocity in the last 60 days (m/s)")
    avg_vmax: float = Field(..., ge=0.0, description="Rolling baseline peak velocity (m/s)")
    fatigue_index: float = Field(1.0, ge=0.0)
    status_band: StatusBand = StatusBand.GREEN
    tsb: float = 0.0
    age: int = Field(0, ge=0)
    activity_count: int = Field(0, ge=0)
    training_intervals: Optional[list[TrackInterval]] = None
