"""
Activity repository.

Handles database operations for :class:`Activity`, including the
newest-first window queries used by the athlete state.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from sprintlab.models.activity import Activity


class ActivityRepository:
    """Repository for Activity database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: Activity) -> Activity:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[Activity]:
        return self.session.get(Activity, entry_id)

    def get_by_external_id(self, athlete_id: int, external_id: str) -> Optional[Activity]:
        statement = select(Activity).where(
            Activity.athlete_id == athlete_id,
            Activity.external_id == external_id,
        )
        return self.session.exec(statement).first()

    def get_window(
        self, athlete_id: int, start: datetime.datetime, end: datetime.datetime,
    ) -> list[Activity]:
        """Activities in ``[start, end]``, newest first."""
        statement = (
            select(Activity)
            .where(
                Activity.athlete_id == athlete_id,
                Activity.start_time >= start,
                Activity.start_time <= end,
            )
            .order_by(Activity.start_time.desc(), Activity.id.desc())
        )
        return list(self.session.exec(statement).all())

    def get_all_by_athlete(
        self, athlete_id: int, skip: int = 0, limit: int = 100,
    ) -> list[Activity]:
        """Get all activities for an athlete with pagination, newest first."""
        statement = (
            select(Activity)
            .where(Activity.athlete_id == athlete_id)
            .order_by(Activity.start_time.desc(), Activity.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(self.session.exec(statement).all())

    def count_by_athlete(self, athlete_id: int) -> int:
        statement = select(func.count()).select_from(Activity).where(Activity.athlete_id == athlete_id)
        return self.session.exec(statement).first() or 0

    def update(self, entry: Activity) -> Activity:
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
