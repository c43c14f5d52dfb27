"""
Stateless tool endpoints.

Run a single engine computation on the request input without touching
stored data.
"""

from fastapi import APIRouter, Query

from sprintlab.engine.checkin import assess_check_in
from sprintlab.engine.intervals import parse_track_session
from sprintlab.engine.neural_budget import summarize_budget
from sprintlab.engine.oscillatory import assess_oi_feedback, oi_protocol
from sprintlab.engine.periodization import day_plan, generate_weekly_plan
from sprintlab.engine.race_estimator import estimate
from sprintlab.engine.readiness import smart_recovery_window
from sprintlab.schemas.interval import TrackInterval, VelocityStream
from sprintlab.schemas.periodization import (
    AthleteType,
    DayOfWeek,
    FasciaDayPlan,
    OIFeedbackRequest,
    OIFeedbackResult,
    OIProtocol,
)
from sprintlab.schemas.race import RaceEstimatorInput, RacePrediction
from sprintlab.schemas.readiness import RecoveryWindowRequest, SmartRecoveryWindow
from sprintlab.schemas.recovery import (
    CheckInResult,
    DailyBudgetSummary,
    MorningCheckIn,
    NeuralBudgetRequest,
)

router = APIRouter()


@router.post("/parse-intervals", summary="Parse a velocity stream into intervals.", response_model=list[TrackInterval])
def parse_intervals(data: VelocityStream):
    return parse_track_session(data.velocity)


@router.post("/recovery-window", summary="Freshness-adjusted recovery window.", response_model=SmartRecoveryWindow)
def recovery_window(data: RecoveryWindowRequest):
    return smart_recovery_window(data.age, data.hrv, data.tsb, data.fatigue_index)


@router.post("/race-estimate", summary="Predict race times from explicit inputs.", response_model=list[RacePrediction])
def race_estimate(data: RaceEstimatorInput):
    return estimate(data)


@router.post("/neural-budget", summary="Daily neural budget.", response_model=DailyBudgetSummary)
def neural_budget(data: NeuralBudgetRequest):
    return summarize_budget(data.entries, data.previous_budget)


@router.post("/check-in", summary="Score a morning check-in.", response_model=CheckInResult)
def check_in(data: MorningCheckIn):
    return assess_check_in(data)


@router.get("/oi-protocol", summary="Oscillatory-isometric phase and exercises for a week.", response_model=OIProtocol)
def get_oi_protocol(week: int = Query(..., ge=1, description="Training week, 1-based")):
    return oi_protocol(week)


@router.post("/oi-feedback", summary="Interpret post-set OI feedback.", response_model=OIFeedbackResult)
def oi_feedback(data: OIFeedbackRequest):
    return assess_oi_feedback(data.relaxation_score, data.pulses_per_second)


@router.get("/fascia-plan", summary="Five-day plan for one week of the fascia block.", response_model=list[FasciaDayPlan])
def fascia_week_plan(
    week: int = Query(..., ge=1, le=4),
    athlete_type: AthleteType = Query("fascia"),
):
    return generate_weekly_plan(week, athlete_type)


@router.get("/fascia-plan/{day}", summary="One day of the fascia block.", response_model=FasciaDayPlan)
def fascia_day_plan(
    day: DayOfWeek,
    week: int = Query(..., ge=1, le=4),
    athlete_type: AthleteType = Query("fascia"),
):
    return day_plan(week, day, athlete_type)
