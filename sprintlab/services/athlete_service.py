"""
Athlete service.

Business logic for athlete management.
"""

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from sprintlab.core.timeutils import utc_now
from sprintlab.db.repositories.athlete import AthleteRepository
from sprintlab.models.athlete import Athlete
from sprintlab.schemas.athlete import AthleteCreate, AthleteUpdate


class AthleteService:
    """Service for athlete-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.repository = AthleteRepository(session)

    def create(self, data: AthleteCreate) -> Athlete:
        athlete = self.repository.create(Athlete(**data.model_dump()))
        logger.info(f"[athlete:{athlete.id}] Created athlete '{athlete.name}'")
        return athlete

    def get(self, athlete_id: int) -> Athlete:
        """
        Get athlete by id.

        Raises:
            HTTPException: 404 if the athlete does not exist
        """
        athlete = self.repository.get_by_id(athlete_id)
        if not athlete:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Athlete not found")
        return athlete

    def get_all(self, skip: int = 0, limit: int = 100) -> list[Athlete]:
        return self.repository.get_all(skip, limit)

    def update(self, athlete_id: int, data: AthleteUpdate) -> Athlete:
        athlete = self.get(athlete_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(athlete, key, value)
        athlete.updated_at = utc_now()
        return self.repository.update(athlete)
