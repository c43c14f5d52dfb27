"""
Race event repository.

Handles database operations for RaceEventRecord model.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from sprintlab.models.race_event import RaceEventRecord


class RaceEventRepository:
    """Repository for RaceEventRecord database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: RaceEventRecord) -> RaceEventRecord:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[RaceEventRecord]:
        return self.session.get(RaceEventRecord, entry_id)

    def get_upcoming(
        self, athlete_id: int, start: datetime.date, end: datetime.date,
    ) -> list[RaceEventRecord]:
        """Events in ``[start, end]``, soonest first."""
        statement = (
            select(RaceEventRecord)
            .where(
                RaceEventRecord.athlete_id == athlete_id,
                RaceEventRecord.date >= start,
                RaceEventRecord.date <= end,
            )
            .order_by(RaceEventRecord.date, RaceEventRecord.id)
        )
        return list(self.session.exec(statement).all())

    def get_all_by_athlete(self, athlete_id: int) -> list[RaceEventRecord]:
        statement = (
            select(RaceEventRecord)
            .where(RaceEventRecord.athlete_id == athlete_id)
            .order_by(RaceEventRecord.date, RaceEventRecord.id)
        )
        return list(self.session.exec(statement).all())

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False
