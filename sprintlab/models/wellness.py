"""
Wellness database model.

Defines the wellness_entries table for daily HRV / resting HR tracking.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from sprintlab.core.timeutils import utc_now


class WellnessEntry(SQLModel, table=True):
    """
    Daily wellness entry.

    One entry per athlete per day (enforced by unique constraint).
    """
    __tablename__ = "wellness_entries"
    __table_args__ = (
        UniqueConstraint("athlete_id", "date", name="uq_wellness_athlete_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: int = Field(foreign_key="athletes.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    hrv: Optional[float] = Field(default=None)
    resting_hr: Optional[int] = Field(default=None)
    readiness: Optional[float] = Field(default=None)
    weight_kg: Optional[float] = Field(default=None)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now)
    updated_at: datetime.datetime = Field(default_factory=utc_now)
