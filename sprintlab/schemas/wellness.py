"""
Wellness API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class WellnessEntryCreate(BaseModel):
    """Schema for creating or merging a daily wellness entry."""

    hrv: Optional[float] = Field(None, ge=0.0, description="HRV (ms)")
    resting_hr: Optional[int] = Field(None, ge=20, le=200, description="Resting heart rate (bpm)")
    readiness: Optional[float] = Field(None, ge=0.0, le=100.0)
    weight_kg: Optional[float] = Field(None, gt=0.0, le=300.0)


class WellnessEntryResponse(BaseModel):
    """Schema for wellness entry in API responses."""

    id: int
    athlete_id: int
    date: datetime.date
    hrv: Optional[float]
    resting_hr: Optional[int]
    readiness: Optional[float]
    weight_kg: Optional[float]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)
