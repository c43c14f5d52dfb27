"""Business logic services."""

from sprintlab.services.athlete_service import AthleteService
from sprintlab.services.activity_service import ActivityService
from sprintlab.services.wellness_service import WellnessService
from sprintlab.services.race_event_service import RaceEventService

__all__ = [
    "AthleteService",
    "ActivityService",
    "WellnessService",
    "RaceEventService",
]
