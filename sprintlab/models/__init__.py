"""SQLModel database models."""

from sprintlab.models.athlete import Athlete
from sprintlab.models.activity import Activity
from sprintlab.models.wellness import WellnessEntry
from sprintlab.models.race_event import RaceEventRecord

__all__ = [
    "Athlete",
    "Activity",
    "WellnessEntry",
    "RaceEventRecord",
]
