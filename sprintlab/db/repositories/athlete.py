"""
Athlete repository.

Handles database operations for Athlete model.
"""

from typing import Optional

from sqlmodel import Session, select

from sprintlab.models.athlete import Athlete


class AthleteRepository:
    """Repository for Athlete database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def create(self, athlete: Athlete) -> Athlete:
        self.session.add(athlete)
        self.session.commit()
        self.session.refresh(athlete)
        return athlete

    def get_by_id(self, athlete_id: int) -> Optional[Athlete]:
        return self.session.get(Athlete, athlete_id)

    def get_all(self, skip: int = 0, limit: int = 100) -> list[Athlete]:
        """
        Get all athletes with pagination.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            List of athletes
        """
        statement = select(Athlete).order_by(Athlete.id).offset(skip).limit(limit)
        return list(self.session.exec(statement).all())

    def update(self, athlete: Athlete) -> Athlete:
        self.session.add(athlete)
        self.session.commit()
        self.session.refresh(athlete)
        return athlete

    def delete(self, athlete_id: int) -> bool:
        athlete = self.get_by_id(athlete_id)
        if athlete:
            self.session.delete(athlete)
            self.session.commit()
            return True
        return False
