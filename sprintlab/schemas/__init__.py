"""Pydantic schemas for request/response validation."""

from sprintlab.schemas.athlete import AthleteCreate, AthleteResponse, AthleteUpdate
from sprintlab.schemas.activity import ActivityCreate, ActivityResponse
from sprintlab.schemas.wellness import WellnessEntryCreate, WellnessEntryResponse
from sprintlab.schemas.race_event import RaceEventCreate, RaceEventResponse
from sprintlab.schemas.interval import IntervalClass, TrackInterval, VelocityStream
from sprintlab.schemas.profile import TrainingProfile
from sprintlab.schemas.readiness import (
    HRVSignal,
    ReadinessState,
    RecoveryWindowRequest,
    SmartRecoveryWindow,
    StatusBand,
)
from sprintlab.schemas.race import RaceEstimatorInput, RacePhaseBreakdown, RacePrediction
from sprintlab.schemas.prescription import (
    Exercise,
    SprintBlock,
    SprintContext,
    SprintWorkout,
    StrengthPrescription,
)
from sprintlab.schemas.race_plan import PriorRaceContext, RaceEvent, RacePlan, RacePlanPhase
from sprintlab.schemas.periodization import (
    FasciaDayPlan,
    OIExercise,
    OIFeedbackResult,
    OIProtocol,
    PrimaryMovement,
    RelaxationAssessment,
)
from sprintlab.schemas.recovery import (
    CheckInResult,
    DailyBudgetSummary,
    MorningCheckIn,
    NeuralBudgetEntry,
    NeuralBudgetRequest,
)
from sprintlab.schemas.stream import CustomStream
from sprintlab.schemas.state import AthleteStateResponse, DailyDataPoint, RaceEstimatesResponse

__all__ = [
    "AthleteCreate",
    "AthleteResponse",
    "AthleteUpdate",
    "ActivityCreate",
    "ActivityResponse",
    "WellnessEntryCreate",
    "WellnessEntryResponse",
    "RaceEventCreate",
    "RaceEventResponse",
    "IntervalClass",
    "TrackInterval",
    "VelocityStream",
    "TrainingProfile",
    "HRVSignal",
    "ReadinessState",
    "RecoveryWindowRequest",
    "SmartRecoveryWindow",
    "StatusBand",
    "RaceEstimatorInput",
    "RacePhaseBreakdown",
    "RacePrediction",
    "Exercise",
    "SprintBlock",
    "SprintContext",
    "SprintWorkout",
    "StrengthPrescription",
    "PriorRaceContext",
    "RaceEvent",
    "RacePlan",
    "RacePlanPhase",
    "FasciaDayPlan",
    "OIExercise",
    "OIFeedbackResult",
    "OIProtocol",
    "PrimaryMovement",
    "RelaxationAssessment",
    "CheckInResult",
    "DailyBudgetSummary",
    "MorningCheckIn",
    "NeuralBudgetEntry",
    "NeuralBudgetRequest",
    "CustomStream",
    "AthleteStateResponse",
    "DailyDataPoint",
    "RaceEstimatesResponse",
]
