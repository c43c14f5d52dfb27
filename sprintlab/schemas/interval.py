"""
Track interval schemas.

A :class:`TrackInterval` is one contiguous effort burst extracted from a
1 Hz velocity stream.  It is classified by covered distance:

    Acceleration       ≤ 40 m
    MaxVelocity       41–80 m
    SpeedEndurance   81–150 m
    SpecialEndurance  > 150 m
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat


class IntervalClass(str, Enum):
    """Distance band of a parsed effort."""
    ACCELERATION = "Acceleration"
    MAX_VELOCITY = "MaxVelocity"
    SPEED_ENDURANCE = "SpeedEndurance"
    SPECIAL_ENDURANCE = "SpecialEndurance"


ENDURANCE_CLASSES = frozenset({IntervalClass.SPEED_ENDURANCE, IntervalClass.SPECIAL_ENDURANCE})


class TrackInterval(BaseModel):
    """A single classified effort burst."""

    model_config = ConfigDict(frozen=True)

    classification: IntervalClass
    distance_m: int = Field(
        ..., ge=10,
        description="Integer-rounded sum of the burst's samples (1 sample = 1 s)",
    )
    peak_velocity: float = Field(
        ..., ge=0.0,
        description="Highest single sample in the burst (m/s)",
    )
    duration_s: int = Field(..., ge=1, description="Number of samples in the burst")
    flying_velocity: float = Field(
        ..., ge=0.0,
        description="Best sliding-window average speed, up to 3 s (m/s)",
    )


class VelocityStream(BaseModel):
    """Request body carrying a raw 1 Hz velocity stream."""

    velocity: list[NonNegativeFloat] | None = Field(
        default=None,
        description="Per-second velocity samples (m/s); may be empty or missing",
    )
