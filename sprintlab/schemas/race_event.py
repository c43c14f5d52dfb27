"""
Race event API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RaceEventCreate(BaseModel):
    """Schema for scheduling a race."""

    name: str = Field(..., min_length=1, max_length=200)
    date: datetime.date
    type: str = Field("Run", max_length=50)
    distance_m: Optional[int] = Field(None, gt=0)
    category: Optional[str] = Field(None, max_length=20, description="e.g. RACE_A, RACE_B, RACE_C")


class RaceEventResponse(BaseModel):
    """Schema for race event in API responses."""

    id: int
    athlete_id: int
    name: str
    date: datetime.date
    type: str
    distance_m: Optional[int]
    category: Optional[str]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)
