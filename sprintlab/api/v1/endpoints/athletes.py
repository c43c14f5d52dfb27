"""
Athlete endpoints.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from sprintlab.db.session import get_db
from sprintlab.schemas.athlete import AthleteCreate, AthleteResponse, AthleteUpdate
from sprintlab.services.athlete_service import AthleteService

router = APIRouter()


@router.post(
    "",
    summary="Create an athlete.",
    response_model=AthleteResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_athlete(data: AthleteCreate, db: Session = Depends(get_db)):
    return AthleteService(db).create(data)


@router.get("", summary="List athletes.", response_model=list[AthleteResponse])
def list_athletes(
    skip: int = Query(0, ge=0, description="Records to skip"),
    limit: int = Query(100, ge=1, le=500, description="Max records to return"),
    db: Session = Depends(get_db),
):
    return AthleteService(db).get_all(skip, limit)


@router.get("/{athlete_id}", summary="Get an athlete.", response_model=AthleteResponse)
def get_athlete(athlete_id: int, db: Session = Depends(get_db)):
    return AthleteService(db).get(athlete_id)


@router.patch("/{athlete_id}", summary="Update an athlete.", response_model=AthleteResponse)
def update_athlete(athlete_id: int, data: AthleteUpdate, db: Session = Depends(get_db)):
    return AthleteService(db).update(athlete_id, data)
