"""
Wellness endpoints.

Daily wellness entry CRUD with date-based upsert.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from sprintlab.api.dependencies import get_athlete_or_404
from sprintlab.db.session import get_db
from sprintlab.models.athlete import Athlete
from sprintlab.schemas.wellness import WellnessEntryCreate, WellnessEntryResponse
from sprintlab.services.wellness_service import WellnessService

router = APIRouter()


@router.put("/{date}", summary="Create or update wellness entry for a date.", response_model=WellnessEntryResponse)
def upsert_wellness(
    date: datetime.date,
    data: WellnessEntryCreate,
    response: Response,
    db: Session = Depends(get_db),
    athlete: Athlete = Depends(get_athlete_or_404),
):
    """Upsert: creates the entry if it doesn't exist, merges data if it does."""
    entry, created = WellnessService(db).upsert(athlete.id, date, data)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return entry


@router.get("", summary="List wellness entries.", response_model=list[WellnessEntryResponse])
def list_wellness(
    start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
    end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
    skip: int = Query(0, ge=0, description="Records to skip"),
    limit: int = Query(100, ge=1, le=500, description="Max records to return"),
    db: Session = Depends(get_db),
    athlete: Athlete = Depends(get_athlete_or_404),
):
    """
    Query wellness entries, most recent first.
    - start + end: returns entries in range
    - no filters: returns paginated list
    """
    service = WellnessService(db)
    if start and end:
        return service.get_range(athlete.id, start, end)
    return service.get_all(athlete.id, skip, limit)


@router.get("/{date}", summary="Get wellness entry for a specific date.", response_model=WellnessEntryResponse)
def get_wellness(
    date: datetime.date,
    db: Session = Depends(get_db),
    athlete: Athlete = Depends(get_athlete_or_404),
):
    return WellnessService(db).get_by_date(athlete.id, date)


@router.delete("/{date}", summary="Delete wellness entry for a specific date.", status_code=status.HTTP_204_NO_CONTENT)
def delete_wellness(
    date: datetime.date,
    db: Session = Depends(get_db),
    athlete: Athlete = Depends(get_athlete_or_404),
):
    WellnessService(db).delete_by_date(athlete.id, date)
