"""
Athlete state schemas.

The athlete state is the full analysis snapshot for one day: readiness,
capability profile, race predictions, prescriptions and a daily series
for charting.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from sprintlab.schemas.interval import TrackInterval
from sprintlab.schemas.prescription import StrengthPrescription, SprintWorkout
from sprintlab.schemas.profile import TrainingProfile
from sprintlab.schemas.race import RacePrediction
from sprintlab.schemas.race_plan import RacePlan
from sprintlab.schemas.readiness import HRVSignal, ReadinessState


class DailyDataPoint(BaseModel):
    """One day of the chart series."""

    date: datetime.date
    day_label: str = Field(..., description="e.g. '5 Mar'")
    fatigue_index: Optional[float] = Field(None, description="None on days without an activity")
    tsb: Optional[float] = Field(None, description="Carried forward from the last activity")
    recovery_hours: int


class AthleteStateResponse(BaseModel):
    """Complete analysis snapshot for an athlete."""

    athlete_id: int
    as_of: datetime.date
    age: int
    body_weight_kg: Optional[float]
    activity_count: int

    # Velocity
    today_vmax: float
    baseline_vmax: float
    best_vmax_60d: float

    # Load and wellness
    tsb: float
    hrv: HRVSignal

    readiness: ReadinessState
    latest_intervals: list[TrackInterval]
    profile: TrainingProfile

    race_predictions: list[RacePrediction]
    recovered_race_predictions: list[RacePrediction] = Field(
        default_factory=list,
        description="Predictions as if fully recovered; only when the band is not green",
    )

    strength: StrengthPrescription
    sprint_workout: SprintWorkout
    race_plans: list[RacePlan]

    daily_series: list[DailyDataPoint]


class RaceEstimatesResponse(BaseModel):
    """Current and fully-recovered race predictions."""

    race_predictions: list[RacePrediction]
    recovered_race_predictions: list[RacePrediction]
