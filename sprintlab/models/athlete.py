"""
Athlete database model.

Defines the athletes table.  Age and body weight feed the race estimator,
the recovery window and strength load estimates.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from sprintlab.core.timeutils import utc_now


class Athlete(SQLModel, table=True):
    """A sprint athlete."""
    __tablename__ = "athletes"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=200)
    date_of_birth: Optional[datetime.date] = Field(default=None)
    weight_kg: Optional[float] = Field(default=None)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now)
    updated_at: datetime.datetime = Field(default_factory=utc_now)
