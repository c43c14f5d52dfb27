"""
Periodization schemas — oscillatory-isometric (OI) progression and the
four-week fascia block.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

OIPhaseName = Literal["catch-and-hold", "rapid-pulses", "reactive-switch"]
OIPhaseNumber = Literal[1, 2, 3]
RelaxationLabel = Literal["Poor", "Low", "Borderline", "Adequate", "Good", "Excellent"]

BlockWeek = Literal[1, 2, 3, 4]
DayOfWeek = Literal["Mon", "Tue", "Wed", "Thu", "Fri"]
AthleteType = Literal["fascia", "muscle"]
CNSDemand = Literal["high", "low", "rest"]
MacroPhase = Literal["Accumulation", "Intensification", "Deload"]


# ======================================================================
# Oscillatory isometrics
# ======================================================================


class OIExercise(BaseModel):
    """One exercise of an OI progression phase."""

    model_config = ConfigDict(frozen=True)

    name: str
    benefit: str
    focus_area: str
    sets: int = Field(..., ge=1)
    duration: str
    cue: str
    phase: OIPhaseNumber


class OIProtocol(BaseModel):
    """The OI phase and exercises for a training week."""

    week: int = Field(..., ge=1)
    phase: OIPhaseName
    phase_number: OIPhaseNumber
    exercises: list[OIExercise]


class RelaxationAssessment(BaseModel):
    """Interpretation of a 1–10 self-reported pulse fluidity score."""

    score: int = Field(..., ge=1, le=10)
    label: RelaxationLabel
    assessment: str
    is_adequate: bool


class OIFeedbackRequest(BaseModel):
    relaxation_score: float = Field(
        ...,
        description="How fluid (10) versus heavy (1) the pulses felt; rounded and clamped to 1–10",
    )
    pulses_per_second: Optional[float] = Field(
        None, ge=0.0, description="Measured oscillation rate of the last set (Hz)",
    )


class OIFeedbackResult(BaseModel):
    relaxation: RelaxationAssessment
    velocity_loss_fatigue: Optional[bool] = Field(
        None,
        description="True when the pulse rate fell below 3 Hz; None when no rate was given",
    )


# ======================================================================
# Fascia block
# ======================================================================


class PrimaryMovement(BaseModel):
    """A main movement of a block day."""

    model_config = ConfigDict(frozen=True)

    name: str
    sets: int = Field(..., ge=1)
    reps_or_duration: str
    notes: Optional[str] = None


class FasciaDayPlan(BaseModel):
    """One training day of the four-week fascia block."""

    week: BlockWeek
    day: DayOfWeek
    phase_name: MacroPhase
    cns_demand: CNSDemand
    primary_movements: list[PrimaryMovement]
    exercises: list[str]
    oi_phase: OIPhaseNumber
    volume_modifier: float = Field(..., description="1.0 = full volume, 0.55 = deload")
