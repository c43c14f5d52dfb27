"""
Wellness repository.

Handles database operations for WellnessEntry model.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from sprintlab.models.wellness import WellnessEntry


class WellnessRepository:
    """Repository for WellnessEntry database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: WellnessEntry) -> WellnessEntry:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[WellnessEntry]:
        return self.session.get(WellnessEntry, entry_id)

    def get_by_athlete_and_date(
        self, athlete_id: int, date: datetime.date,
    ) -> Optional[WellnessEntry]:
        """Get a single entry for an athlete on a specific date."""
        statement = select(WellnessEntry).where(
            WellnessEntry.athlete_id == athlete_id,
            WellnessEntry.date == date,
        )
        return self.session.exec(statement).first()

    def get_window(
        self, athlete_id: int, start: datetime.date, end: datetime.date,
    ) -> list[WellnessEntry]:
        """Entries in ``[start, end]``, newest first."""
        statement = (
            select(WellnessEntry)
            .where(
                WellnessEntry.athlete_id == athlete_id,
                WellnessEntry.date >= start,
                WellnessEntry.date <= end,
            )
            .order_by(WellnessEntry.date.desc())
        )
        return list(self.session.exec(statement).all())

    def get_all_by_athlete(
        self, athlete_id: int, skip: int = 0, limit: int = 100,
    ) -> list[WellnessEntry]:
        """Get all entries for an athlete with pagination."""
        statement = (
            select(WellnessEntry)
            .where(WellnessEntry.athlete_id == athlete_id)
            .order_by(WellnessEntry.date.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(self.session.exec(statement).all())

    def update(self, entry: WellnessEntry) -> WellnessEntry:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False
