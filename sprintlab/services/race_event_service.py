"""
Race event service.

Business logic for the athlete's race calendar.
"""

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from sprintlab.db.repositories.race_event import RaceEventRepository
from sprintlab.models.race_event import RaceEventRecord
from sprintlab.schemas.race_event import RaceEventCreate


class RaceEventService:
    """Service for race event business logic."""

    def __init__(self, session: Session):
        self.repository = RaceEventRepository(session)

    def create(self, athlete_id: int, data: RaceEventCreate) -> RaceEventRecord:
        entry = self.repository.create(RaceEventRecord(athlete_id=athlete_id, **data.model_dump()))
        logger.info(f"[athlete:{athlete_id}] Scheduled race '{entry.name}' on {entry.date}")
        return entry

    def get_all(self, athlete_id: int) -> list[RaceEventRecord]:
        return self.repository.get_all_by_athlete(athlete_id)

    def delete(self, athlete_id: int, event_id: int) -> None:
        entry = self.repository.get_by_id(event_id)
        if not entry or entry.athlete_id != athlete_id:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Race event not found",
            )
        self.repository.delete(event_id)
