"""
Race event endpoints.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from sprintlab.api.dependencies import get_athlete_or_404
from sprintlab.db.session import get_db
from sprintlab.models.athlete import Athlete
from sprintlab.schemas.race_event import RaceEventCreate, RaceEventResponse
from sprintlab.services.race_event_service import RaceEventService

router = APIRouter()


@router.post(
    "",
    summary="Schedule a race.",
    response_model=RaceEventResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_event(
    data: RaceEventCreate,
    db: Session = Depends(get_db),
    athlete: Athlete = Depends(get_athlete_or_404),
):
    return RaceEventService(db).create(athlete.id, data)


@router.get("", summary="List scheduled races by date.", response_model=list[RaceEventResponse])
def list_events(
    db: Session = Depends(get_db),
    athlete: Athlete = Depends(get_athlete_or_404),
):
    return RaceEventService(db).get_all(athlete.id)


@router.delete("/{event_id}", summary="Delete a scheduled race.", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(
    event_id: int,
    db: Session = Depends(get_db),
    athlete: Athlete = Depends(get_athlete_or_404),
):
    RaceEventService(db).delete(athlete.id, event_id)
