"""
Activity database model.

Stores one recorded training activity with its 1 Hz velocity stream as
JSON and the training-load figures supplied by the activity platform.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, UniqueConstraint
from sqlmodel import Field, SQLModel

from sprintlab.core.timeutils import utc_now


class Activity(SQLModel, table=True):
    """A recorded activity.

    ``atl`` and ``ctl`` are the acute and chronic training loads after the
    activity; their difference is the training stress balance.
    """

    __tablename__ = "activities"
    __table_args__ = (
        UniqueConstraint("athlete_id", "external_id", name="uq_activity_athlete_external"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: int = Field(foreign_key="athletes.id", nullable=False, index=True)
    external_id: Optional[str] = Field(default=None, max_length=100)
    start_time: datetime.datetime = Field(nullable=False, index=True)
    type: str = Field(default="Run", nullable=False, max_length=50)
    name: Optional[str] = Field(default=None, max_length=200)

    # Per-second velocity samples (m/s)
    velocity: Optional[list[float]] = Field(default=None, sa_column=Column(JSON, nullable=True))
    max_speed: float = Field(default=0.0, nullable=False)

    # Training load
    training_load: Optional[float] = Field(default=None)
    atl: float = Field(default=0.0, nullable=False)
    ctl: float = Field(default=0.0, nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now)
    updated_at: datetime.datetime = Field(default_factory=utc_now)
