"""
Race planning schemas.

The nearest event drives the master plan.  Later events carry a
:class:`PriorRaceContext` explaining how their preparation is shaped
around the priority race.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class RaceEvent(BaseModel):
    """An upcoming sprint race."""

    id: str
    name: str
    date: datetime.date
    distance_m: int = Field(..., gt=0)
    days_until: int = Field(..., ge=0)


class RacePlanPhase(BaseModel):
    """Training phase content."""

    label: str
    timeframe: str
    focus: str
    sessions: list[str]
    strength_note: str


class PriorRaceContext(BaseModel):
    """How a nearer race constrains preparation for a later one."""

    priority_race_name: str
    priority_race_date: datetime.date
    priority_race_days_until: int
    priority_phase_label: str
    recovery_days_after: int = Field(..., description="Recovery days after the priority race")
    effective_training_days: int = Field(
        ..., ge=0,
        description="days_until(this) − days_until(priority) − recovery days, floored at 0",
    )
    post_recovery_phase: RacePlanPhase
    is_constrained: bool = Field(
        ...,
        description="True when the priority race is ≤14 days away (taper conflict)",
    )


class RacePlan(BaseModel):
    """Plan for one event."""

    race: RaceEvent
    goal_time: str
    current_phase: RacePlanPhase
    prior_race_context: Optional[PriorRaceContext] = None
