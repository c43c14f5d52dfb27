"""
Athlete API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AthleteCreate(BaseModel):
    """Schema for creating an athlete."""

    name: str = Field(..., min_length=1, max_length=200)
    date_of_birth: Optional[datetime.date] = Field(None, description="Used to derive age")
    weight_kg: Optional[float] = Field(None, gt=0.0, le=300.0)


class AthleteUpdate(BaseModel):
    """Schema for updating an athlete."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    date_of_birth: Optional[datetime.date] = None
    weight_kg: Optional[float] = Field(None, gt=0.0, le=300.0)


class AthleteResponse(BaseModel):
    """Schema for athlete in API responses."""

    id: int
    name: str
    date_of_birth: Optional[datetime.date]
    weight_kg: Optional[float]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)
