"""
Race event database model.

Calendar entries for upcoming competitions.  Only running events under
the sprint distance limit are planned for.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from sprintlab.core.timeutils import utc_now


class RaceEventRecord(SQLModel, table=True):
    """A scheduled race."""
    __tablename__ = "race_events"

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: int = Field(foreign_key="athletes.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=200)
    date: datetime.date = Field(nullable=False, index=True)
    type: str = Field(default="Run", nullable=False, max_length=50)
    distance_m: Optional[int] = Field(default=None)
    category: Optional[str] = Field(default=None, max_length=20)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now)
    updated_at: datetime.datetime = Field(default_factory=utc_now)
