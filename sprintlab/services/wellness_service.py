"""
Wellness service.

Business logic for daily wellness entries with date-based upsert.
"""

import datetime

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from sprintlab.core.timeutils import utc_now
from sprintlab.db.repositories.wellness import WellnessRepository
from sprintlab.models.wellness import WellnessEntry
from sprintlab.schemas.wellness import WellnessEntryCreate


class WellnessService:
    """Service for wellness data business logic."""

    def __init__(self, session: Session):
        self.repository = WellnessRepository(session)

    def upsert(
        self, athlete_id: int, date: datetime.date, data: WellnessEntryCreate,
    ) -> tuple[WellnessEntry, bool]:
        """Create or merge the wellness entry for the given date.

        Returns:
            Tuple of (entry, created) where created is True if new entry.
        """
        existing = self.repository.get_by_athlete_and_date(athlete_id, date)

        if existing:
            for key, value in data.model_dump(exclude_none=True).items():
                setattr(existing, key, value)
            existing.updated_at = utc_now()
            return self.repository.update(existing), False

        entry = self.repository.create(
            WellnessEntry(athlete_id=athlete_id, date=date, **data.model_dump())
        )
        logger.debug(f"[athlete:{athlete_id}] Wellness entry created for {date}")
        return entry, True

    def get_by_date(self, athlete_id: int, date: datetime.date) -> WellnessEntry:
        entry = self.repository.get_by_athlete_and_date(athlete_id, date)
        if not entry:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No wellness entry for {date}",
            )
        return entry

    def get_range(
        self, athlete_id: int, start: datetime.date, end: datetime.date,
    ) -> list[WellnessEntry]:
        return self.repository.get_window(athlete_id, start, end)

    def get_all(self, athlete_id: int, skip: int = 0, limit: int = 100) -> list[WellnessEntry]:
        return self.repository.get_all_by_athlete(athlete_id, skip, limit)

    def delete_by_date(self, athlete_id: int, date: datetime.date) -> None:
        entry = self.get_by_date(athlete_id, date)
        self.repository.delete(entry.id)
