"""
Activity API schemas.

Activities arrive from the data-acquisition side already decoded: a 1 Hz
velocity stream plus the platform's training-load figures.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, field_validator


class ActivityCreate(BaseModel):
    """Schema for recording an activity."""

    external_id: Optional[str] = Field(
        None, max_length=100,
        description="Identifier on the source platform; unique per athlete",
    )
    start_time: datetime.datetime = Field(
        ..., description="Start of the activity; naive values are taken as UTC",
    )
    type: str = Field("Run", max_length=50)
    name: Optional[str] = Field(None, max_length=200)
    velocity: Optional[list[NonNegativeFloat]] = Field(
        None, description="Per-second velocity samples (m/s)",
    )
    max_speed: Optional[float] = Field(
        None, ge=0.0,
        description="Peak velocity (m/s); derived from the stream when omitted",
    )
    training_load: Optional[float] = Field(None, ge=0.0)
    atl: float = Field(0.0, description="Acute training load (fatigue)")
    ctl: float = Field(0.0, description="Chronic training load (fitness)")

    @field_validator("start_time")
    @classmethod
    def start_time_utc(cls, value: datetime.datetime) -> datetime.datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=datetime.timezone.utc)
        return value.astimezone(datetime.timezone.utc)


class ActivityResponse(BaseModel):
    """Schema for activity in API responses (stream omitted)."""

    id: int
    athlete_id: int
    external_id: Optional[str]
    start_time: datetime.datetime
    type: str
    name: Optional[str]
    sample_count: int
    max_speed: float
    training_load: Optional[float]
    atl: float
    ctl: float
    tsb: float
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)
