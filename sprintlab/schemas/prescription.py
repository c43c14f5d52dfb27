"""
Prescription schemas — strength sessions and sprint workouts.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from sprintlab.schemas.readiness import StatusBand

StrengthZoneName = Literal["fresh", "tired", "fatigued"]
StrengthIntensity = Literal["high", "moderate", "none"]


class Exercise(BaseModel):
    """A gym exercise within a strength prescription."""

    name: str
    type: Literal["strength", "plyometric", "mobility", "rest"]
    sets: int = Field(..., ge=1)
    reps: int | str
    intensity: str
    weight_guidance: Optional[str] = Field(None, description="e.g. '~1.7× BW (85% est. 1RM)'")
    bw_multiplier: Optional[float] = Field(
        None, gt=0.0,
        description="Body-weight multiplier for load estimation; None for bodyweight work",
    )
    estimated_load_kg: Optional[int] = Field(
        None,
        description="round(body weight × multiplier) when a body weight is known",
    )


class StrengthZone(BaseModel):
    """Zone selected from the training stress balance."""

    zone: StrengthZoneName
    intensity: StrengthIntensity
    focus: str


class StrengthPrescription(StrengthZone):
    """Zone plus the fixed exercise list for that zone."""

    exercises: list[Exercise]


class SprintBlock(BaseModel):
    """One main-set block of a sprint session."""

    name: str
    reps: int = Field(..., ge=1)
    distance: str
    rest: str
    intensity: str
    cue: str


class SprintContext(BaseModel):
    """Optional context for smarter workout selection."""

    tsb: float = Field(..., description="Training stress balance — positive = fresh")


class SprintWorkout(BaseModel):
    """A complete track session."""

    name: str
    status: StatusBand
    rationale: str
    warmup: list[str]
    main_set: list[SprintBlock]
    cooldown: list[str]
    total_sprint_volume: str
    description: str = Field(..., description="Plain-text rendering of the whole session")
