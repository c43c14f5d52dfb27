"""
Prescription endpoints — strength session, sprint workout and race plans.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from sprintlab.api.dependencies import get_athlete_or_404
from sprintlab.db.session import get_db
from sprintlab.engine.state import compute_athlete_state
from sprintlab.models.athlete import Athlete
from sprintlab.schemas.prescription import SprintWorkout, StrengthPrescription
from sprintlab.schemas.race_plan import RacePlan

router = APIRouter()

_AS_OF = Query(None, description="Reference date (defaults to today)")


@router.get("/strength", summary="Get today's strength prescription.", response_model=StrengthPrescription)
def get_strength(
    as_of: Optional[datetime.date] = _AS_OF,
    db: Session = Depends(get_db),
    athlete: Athlete = Depends(get_athlete_or_404),
):
    return compute_athlete_state(db, athlete.id, as_of).strength


@router.get("/sprint-workout", summary="Get today's track session.", response_model=SprintWorkout)
def get_sprint_workout(
    as_of: Optional[datetime.date] = _AS_OF,
    db: Session = Depends(get_db),
    athlete: Athlete = Depends(get_athlete_or_404),
):
    return compute_athlete_state(db, athlete.id, as_of).sprint_workout


@router.get("/race-plans", summary="Get plans for upcoming sprint races.", response_model=list[RacePlan])
def get_race_plans(
    as_of: Optional[datetime.date] = _AS_OF,
    db: Session = Depends(get_db),
    athlete: Athlete = Depends(get_athlete_or_404),
):
    return compute_athlete_state(db, athlete.id, as_of).race_plans
