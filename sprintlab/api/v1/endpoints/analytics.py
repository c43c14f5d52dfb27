"""
Analytics endpoints — athlete state, readiness, race estimates and profile.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from sprintlab.api.dependencies import get_athlete_or_404
from sprintlab.db.session import get_db
from sprintlab.engine.state import compute_athlete_state
from sprintlab.models.athlete import Athlete
from sprintlab.schemas.profile import TrainingProfile
from sprintlab.schemas.readiness import ReadinessState
from sprintlab.schemas.state import AthleteStateResponse, RaceEstimatesResponse

router = APIRouter()

_AS_OF = Query(None, description="Reference date (defaults to today)")


@router.get(
    "/state",
    summary="Get the full analysis snapshot.",
    response_model=AthleteStateResponse,
)
def get_state(
    as_of: Optional[datetime.date] = _AS_OF,
    db: Session = Depends(get_db),
    athlete: Athlete = Depends(get_athlete_or_404),
):
    return compute_athlete_state(db, athlete.id, as_of)


@router.get(
    "/readiness",
    summary="Get fatigue index, recovery score and recovery window.",
    response_model=ReadinessState,
)
def get_readiness(
    as_of: Optional[datetime.date] = _AS_OF,
    db: Session = Depends(get_db),
    athlete: Athlete = Depends(get_athlete_or_404),
):
    return compute_athlete_state(db, athlete.id, as_of).readiness


@router.get(
    "/race-estimates",
    summary="Get predicted 100/200/400 m times.",
    response_model=RaceEstimatesResponse,
)
def get_race_estimates(
    as_of: Optional[datetime.date] = _AS_OF,
    db: Session = Depends(get_db),
    athlete: Athlete = Depends(get_athlete_or_404),
):
    state = compute_athlete_state(db, athlete.id, as_of)
    return RaceEstimatesResponse(
        race_predictions=state.race_predictions,
        recovered_race_predictions=state.recovered_race_predictions,
    )


@router.get(
    "/profile",
    summary="Get the training profile built from parsed intervals.",
    response_model=TrainingProfile,
)
def get_profile(
    as_of: Optional[datetime.date] = _AS_OF,
    db: Session = Depends(get_db),
    athlete: Athlete = Depends(get_athlete_or_404),
):
    return compute_athlete_state(db, athlete.id, as_of).profile
