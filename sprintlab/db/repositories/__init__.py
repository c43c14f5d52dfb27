"""Database repositories."""

from sprintlab.db.repositories.athlete import AthleteRepository
from sprintlab.db.repositories.activity import ActivityRepository
from sprintlab.db.repositories.wellness import WellnessRepository
from sprintlab.db.repositories.race_event import RaceEventRepository

__all__ = [
    "AthleteRepository",
    "ActivityRepository",
    "WellnessRepository",
    "RaceEventRepository",
]
