"""
Activity endpoints.

Recorded activities with their velocity streams, per-activity interval
parsing and the fatigue-index stream payload.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from sprintlab.api.dependencies import get_athlete_or_404
from sprintlab.db.session import get_db
from sprintlab.models.athlete import Athlete
from sprintlab.schemas.activity import ActivityCreate, ActivityResponse
from sprintlab.schemas.interval import TrackInterval
from sprintlab.schemas.stream import CustomStream
from sprintlab.services.activity_service import ActivityService

router = APIRouter()


@router.post(
    "",
    summary="Record an activity.",
    response_model=ActivityResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_activity(
    data: ActivityCreate,
    db: Session = Depends(get_db),
    athlete: Athlete = Depends(get_athlete_or_404),
):
    return ActivityService(db).create(athlete.id, data)


@router.get("", summary="List activities, newest first.", response_model=list[ActivityResponse])
def list_activities(
    skip: int = Query(0, ge=0, description="Records to skip"),
    limit: int = Query(100, ge=1, le=500, description="Max records to return"),
    db: Session = Depends(get_db),
    athlete: Athlete = Depends(get_athlete_or_404),
):
    return ActivityService(db).get_all(athlete.id, skip, limit)


@router.get("/{activity_id}", summary="Get an activity.", response_model=ActivityResponse)
def get_activity(
    activity_id: int,
    db: Session = Depends(get_db),
    athlete: Athlete = Depends(get_athlete_or_404),
):
    return ActivityService(db).get_by_id(athlete.id, activity_id)


@router.delete(
    "/{activity_id}",
    summary="Delete an activity.",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_activity(
    activity_id: int,
    db: Session = Depends(get_db),
    athlete: Athlete = Depends(get_athlete_or_404),
):
    ActivityService(db).delete(athlete.id, activity_id)


@router.get(
    "/{activity_id}/intervals",
    summary="Classified effort intervals of an activity.",
    response_model=list[TrackInterval],
)
def get_activity_intervals(
    activity_id: int,
    db: Session = Depends(get_db),
    athlete: Athlete = Depends(get_athlete_or_404),
):
    return ActivityService(db).intervals(athlete.id, activity_id)


@router.get(
    "/{activity_id}/fatigue-stream",
    summary="Fatigue-index custom stream payload for an activity.",
    response_model=CustomStream,
)
def get_fatigue_stream(
    activity_id: int,
    db: Session = Depends(get_db),
    athlete: Athlete = Depends(get_athlete_or_404),
):
    return ActivityService(db).fatigue_stream(athlete.id, activity_id)
